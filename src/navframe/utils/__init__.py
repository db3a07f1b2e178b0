"""
Numeric primitives for navframe.

Modules
-------
rotations : Euler angles to DCM and vector rotation
angles : Angle wrapping and shortest angular difference
values : Scalar clamping and normalization
"""

from navframe.utils.angles import (
    angle_difference,
    wrap_angle,
)
from navframe.utils.rotations import (
    dcm_is_valid,
    euler_to_dcm,
    rotate,
    rotx,
    roty,
    rotz,
)
from navframe.utils.values import (
    clamp_to_range,
    normalize,
    offset_to_center,
)

__all__ = [
    # Angles
    'angle_difference',
    # Values
    'clamp_to_range',
    # Rotations
    'dcm_is_valid',
    'euler_to_dcm',
    'normalize',
    'offset_to_center',
    'rotate',
    'rotx',
    'roty',
    'rotz',
    'wrap_angle',
]
