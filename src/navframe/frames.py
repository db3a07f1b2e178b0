"""
NED <-> body frame conversions.

Frames
------
- NED: North-East-Down navigation frame, fixed to the local tangent plane.
- Body: forward-right-down frame fixed to the vehicle.

The attitude (roll, pitch, yaw) gives C = Rz(yaw) @ Ry(pitch) @ Rx(roll),
which takes body components to NED components:

    v_ned  = C   @ v_body
    v_body = C.T @ v_ned

Both directions go through :func:`navframe.utils.rotations.rotate`; the
body-from-NED direction asks it for the inverse rotation.

Sign convention check: with yaw = +90° the vehicle points east, so a pure
northward velocity (1, 0, 0) shows up in the body frame as (0, -1, 0),
i.e. moving to the vehicle's left.
"""

import numpy as np

from navframe.types import VelocityBody, VelocityNED
from navframe.utils.rotations import rotate


def body_from_ned(ned_velocity, attitude) -> VelocityBody:
    """
    Express a NED velocity in the body frame.

    Parameters
    ----------
    ned_velocity : VelocityNED or array_like, shape (3,)
        Velocity as (north, east, down) in m/s.
    attitude : EulerAngles or array_like, shape (3,)
        Vehicle attitude (roll, pitch, yaw) in radians.

    Returns
    -------
    VelocityBody
        The same velocity as (forward, right, down) in m/s.
    """
    forward, right, down = rotate(ned_velocity, attitude, inverse=True)
    return VelocityBody(float(forward), float(right), float(down))


def ned_from_body(body_velocity, attitude) -> VelocityNED:
    """
    Express a body-frame velocity in the NED frame.

    Parameters
    ----------
    body_velocity : VelocityBody or array_like, shape (3,)
        Velocity as (forward, right, down) in m/s.
    attitude : EulerAngles or array_like, shape (3,)
        Vehicle attitude (roll, pitch, yaw) in radians.

    Returns
    -------
    VelocityNED
        The same velocity as (north, east, down) in m/s.
    """
    north, east, down = rotate(body_velocity, attitude)
    return VelocityNED(float(north), float(east), float(down))


def offsets_to_frame(offsets, angles) -> np.ndarray:
    """
    Convert offsets measured in a rotated frame into your own frame.

    Parameters
    ----------
    offsets : array_like, shape (3,)
        x, y, z offsets as seen from a frame rotated by ``angles``.
    angles : array_like, shape (3,)
        Roll, pitch, yaw of that frame relative to yours, in radians.

    Returns
    -------
    np.ndarray, shape (3,)
        x, y, z offsets in your frame.
    """
    return rotate(offsets, angles)


def offsets_from_frame(offsets, angles) -> np.ndarray:
    """Inverse of :func:`offsets_to_frame`."""
    return rotate(offsets, angles, inverse=True)
