#!/usr/bin/env python3
"""
Example 01: Frame Conversion

Demonstrates fundamental navframe usage:
- Converting a NED velocity into the body frame and back
- Heading error with angle_difference
- Bounding and normalizing a command

Run with DEBUG logging to see diagnostic records (the inverted range
below triggers one):
    python examples/01_frame_conversion.py
"""

import logging

import numpy as np

import navframe as nf


def velocity_example():
    """Velocity seen from a vehicle flying east, nose up, slightly banked."""
    print("=" * 60)
    print("NED <-> Body Velocity")
    print("=" * 60)

    attitude = nf.EulerAngles.from_degrees(roll=5.0, pitch=10.0, yaw=90.0)
    ned = nf.VelocityNED(north_m_s=1.0, east_m_s=12.0, down_m_s=-0.5)

    body = nf.body_from_ned(ned, attitude)
    print(f"Attitude [rad]: {attitude}")
    print(f"NED velocity:   {ned}")
    print(f"Body velocity:  {body}")

    back = nf.ned_from_body(body, attitude)
    err = np.linalg.norm(back.as_array() - ned.as_array())
    print(f"Round-trip error: {err:.2e} m/s")


def heading_example():
    """Heading error across the ±180° seam."""
    print("=" * 60)
    print("Heading Error")
    print("=" * 60)

    current = np.deg2rad(170.0)
    target = np.deg2rad(-170.0)
    error = nf.angle_difference(target, current)
    print(f"Target -170°, current 170° -> error {np.rad2deg(error):+.1f}°")

    command = nf.clamp_to_range(error, -0.2, 0.2)
    print(f"Yaw-rate command (clamped): {command:+.3f} rad/s")
    print(f"Normalized command:         {nf.normalize(command, -0.2, 0.2):+.3f}")

    # Swapped bounds: no exception, the upper bound wins and a DEBUG record is logged
    print(f"Swapped bounds clamp:       {nf.clamp_to_range(error, 0.2, -0.2):+.3f}")


def main():
    nf.setup_logging(level=logging.DEBUG)
    velocity_example()
    heading_example()


if __name__ == "__main__":
    main()
