"""
Value types exchanged with the estimation/control loop.

All types are small frozen dataclasses: they are copied by value, never
mutated after construction, and carry no frame tag. Keeping track of which
frame a plain ``Vector3`` is expressed in is the caller's job; the
velocity types name their components so that the converters in
``navframe.frames`` can do that bookkeeping for them.

Units
-----
- Angles in radians
- Velocities in m/s
- Offsets in meters
"""

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

import numpy as np

from navframe.constants import DEG_TO_RAD, RAD_TO_DEG


def as_vec3(values, name: str = "vector") -> np.ndarray:
    """
    Coerce a 3-sequence (list, tuple, array or one of the types below)
    into a fresh float64 array of shape (3,).
    """
    if hasattr(values, "as_array"):
        values = values.as_array()
    arr = np.array(values, dtype=np.float64).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(f"{name} must have exactly 3 components, got {arr.size}")
    return arr


@dataclass(frozen=True)
class Vector3:
    """
    An ordered triple of real numbers (offset or velocity).

    Attributes
    ----------
    x : float
        First component.
    y : float
        Second component.
    z : float
        Third component.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def as_array(self) -> np.ndarray:
        """Return the components as a new array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Vector3":
        """Build a Vector3 from any 3-element sequence."""
        x, y, z = as_vec3(values, "Vector3")
        return cls(float(x), float(y), float(z))


@dataclass(frozen=True)
class EulerAngles:
    """
    Orientation of the body frame relative to the navigation frame.

    The combined rotation is C = Rz(yaw) @ Ry(pitch) @ Rx(roll), i.e. the
    intrinsic yaw-pitch-roll (3-2-1) sequence.

    Attributes
    ----------
    roll : float
        Rotation about the x-axis in radians.
    pitch : float
        Rotation about the y-axis in radians.
    yaw : float
        Rotation about the z-axis in radians.
    """

    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.roll, self.pitch, self.yaw))

    def negated(self) -> "EulerAngles":
        """Component-wise negation (-roll, -pitch, -yaw)."""
        return EulerAngles(-self.roll, -self.pitch, -self.yaw)

    def as_array(self) -> np.ndarray:
        """Return [roll, pitch, yaw] as a new array."""
        return np.array([self.roll, self.pitch, self.yaw], dtype=np.float64)

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "EulerAngles":
        """Build EulerAngles from a [roll, pitch, yaw] sequence."""
        roll, pitch, yaw = as_vec3(values, "EulerAngles")
        return cls(float(roll), float(pitch), float(yaw))

    @classmethod
    def from_degrees(cls, roll: float = 0.0, pitch: float = 0.0, yaw: float = 0.0) -> "EulerAngles":
        """Build EulerAngles from angles given in degrees."""
        return cls(roll * DEG_TO_RAD, pitch * DEG_TO_RAD, yaw * DEG_TO_RAD)

    def to_degrees(self) -> Tuple[float, float, float]:
        """Return (roll, pitch, yaw) in degrees."""
        return self.roll * RAD_TO_DEG, self.pitch * RAD_TO_DEG, self.yaw * RAD_TO_DEG


# The vehicle's attitude estimate is just a set of Euler angles.
VehicleAttitude = EulerAngles


@dataclass(frozen=True)
class VelocityNED:
    """Vehicle velocity in the North-East-Down frame (m/s)."""

    north_m_s: float = 0.0
    east_m_s: float = 0.0
    down_m_s: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.north_m_s, self.east_m_s, self.down_m_s))

    def as_array(self) -> np.ndarray:
        return np.array([self.north_m_s, self.east_m_s, self.down_m_s], dtype=np.float64)

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "VelocityNED":
        north, east, down = as_vec3(values, "VelocityNED")
        return cls(float(north), float(east), float(down))


@dataclass(frozen=True)
class VelocityBody:
    """Vehicle velocity in the body frame: forward, right, down (m/s)."""

    forward_m_s: float = 0.0
    right_m_s: float = 0.0
    down_m_s: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.forward_m_s, self.right_m_s, self.down_m_s))

    def as_array(self) -> np.ndarray:
        return np.array([self.forward_m_s, self.right_m_s, self.down_m_s], dtype=np.float64)

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "VelocityBody":
        forward, right, down = as_vec3(values, "VelocityBody")
        return cls(float(forward), float(right), float(down))
