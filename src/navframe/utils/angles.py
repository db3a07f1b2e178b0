"""
Angle wrapping utilities.

All angles are in radians. Scalars return a Python float, numpy arrays are
processed element-wise.
"""

import numpy as np

from navframe.constants import PI, TWO_PI


def _to_output(result):
    if np.ndim(result) == 0:
        return float(result)
    return result


def wrap_angle(angle):
    """
    Wrap angle to [-π, π).

    Parameters
    ----------
    angle : float or np.ndarray
        Angle(s) in radians.

    Returns
    -------
    float or np.ndarray
        Wrapped angle(s) in [-π, π).
    """
    wrapped = (np.asarray(angle, dtype=np.float64) + PI) % TWO_PI - PI
    # Inputs just below -π round up to +π
    wrapped = np.where(wrapped >= PI, -PI, wrapped)
    return _to_output(wrapped)


def angle_difference(a1, a2):
    """
    Compute the shortest signed difference between two angles.

    Parameters
    ----------
    a1 : float or np.ndarray
        First angle(s) in radians.
    a2 : float or np.ndarray
        Second angle(s) in radians. Broadcast against ``a1``.

    Returns
    -------
    float or np.ndarray
        Signed difference (a1 - a2) along the shortest arc, in (-π, π].

    Examples
    --------
    >>> angle_difference(np.pi / 2, 0)
    1.5707963267948966
    >>> angle_difference(-3 * np.pi / 4, 3 * np.pi / 4)  # across ±π
    1.5707...

    Notes
    -----
    When the raw difference is longer than half a turn, a full turn is
    added to the smaller of the two angles and the difference recomputed.
    If a1 < a2 it is always a1 that is advanced, never a2, so a gap of
    exactly half a turn comes out as +π.

    Angles outside [-π, π] are first reduced by whole turns. Inputs inside
    that range are used as given, so e.g. angle_difference(π/2, 0) is
    exactly π/2. NaN propagates.
    """
    a1 = np.asarray(a1, dtype=np.float64)
    a2 = np.asarray(a2, dtype=np.float64)
    a1 = np.where((a1 >= -PI) & (a1 <= PI), a1, wrap_angle(a1))
    a2 = np.where((a2 >= -PI) & (a2 <= PI), a2, wrap_angle(a2))

    diff = a1 - a2
    wraps = (np.abs(diff) > PI) | (diff == -PI)
    advance_a1 = a1 < a2
    shifted = np.where(advance_a1, a1 + TWO_PI, a1) - np.where(advance_a1, a2, a2 + TWO_PI)
    # Rounding in the shifted operand must not leave (-π, π]
    shifted = np.clip(shifted, np.nextafter(-PI, 0.0), PI)

    return _to_output(np.where(wraps, shifted, diff))
