"""
navframe - NED/body frame conversions for vehicle state estimation.

Converts velocities and offsets between the North-East-Down navigation
frame and the vehicle body frame given the current attitude, plus the
angle and scalar helpers an estimation/control loop needs alongside:

    from navframe import EulerAngles, VelocityNED, body_from_ned
    v_body = body_from_ned(VelocityNED(1.0, 0.0, 0.0), EulerAngles(yaw=np.pi / 2))

All functions are pure and safe to call from any thread.
"""

__version__ = "0.1.0"

from navframe.frames import (
    body_from_ned,
    ned_from_body,
    offsets_from_frame,
    offsets_to_frame,
)
from navframe.logging_config import setup_logging
from navframe.types import (
    EulerAngles,
    Vector3,
    VehicleAttitude,
    VelocityBody,
    VelocityNED,
)
from navframe.utils import (
    # Angle utilities
    angle_difference,
    # Value utilities
    clamp_to_range,
    # Rotation utilities
    dcm_is_valid,
    euler_to_dcm,
    normalize,
    offset_to_center,
    rotate,
    rotx,
    roty,
    rotz,
    wrap_angle,
)

__all__ = [
    # Types
    "EulerAngles",
    "Vector3",
    "VehicleAttitude",
    "VelocityBody",
    "VelocityNED",
    "__version__",
    "angle_difference",
    # Frame conversions
    "body_from_ned",
    "clamp_to_range",
    "dcm_is_valid",
    "euler_to_dcm",
    "ned_from_body",
    "normalize",
    "offset_to_center",
    "offsets_from_frame",
    "offsets_to_frame",
    "rotate",
    "rotx",
    "roty",
    "rotz",
    # Logging
    "setup_logging",
    "wrap_angle",
]
