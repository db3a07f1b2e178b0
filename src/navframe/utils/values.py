"""
Scalar bounding and normalization.

Every function here takes ``min_value <= max_value`` as a precondition.
It is not enforced: callers in a tight estimation loop get a number back,
never an exception. A violation is reported at DEBUG level on the
``navframe`` logger. Scalars return a Python float, numpy arrays are
processed element-wise.
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)


def _to_output(result):
    if np.ndim(result) == 0:
        return float(result)
    return result


def clamp_to_range(value, min_value: float, max_value: float):
    """
    Clamp a value into [min_value, max_value].

    Parameters
    ----------
    value : float or np.ndarray
        Value(s) to clamp.
    min_value : float
        Lower bound.
    max_value : float
        Upper bound. Must not be below ``min_value``.

    Returns
    -------
    float or np.ndarray
        Clamped value(s).

    Examples
    --------
    >>> clamp_to_range(20, 0, 10)
    10.0

    Notes
    -----
    The lower bound is applied before the upper bound, so with
    min_value > max_value every input ends up at max_value. NaN is
    returned unchanged.
    """
    if np.any(np.greater(min_value, max_value)):
        logger.debug("clamp_to_range called with min_value=%r > max_value=%r", min_value, max_value)

    value = np.asarray(value, dtype=np.float64)
    result = np.where(value < min_value, min_value, value)
    result = np.where(result > max_value, max_value, result)
    return _to_output(result)


def normalize(value, min_value: float, max_value: float):
    """
    Map a value in [min_value, max_value] linearly onto [-1, 1].

    The value is clamped first, so the output never leaves [-1, 1]:
    min_value maps to -1, the midpoint to 0 and max_value to 1.

    Parameters
    ----------
    value : float or np.ndarray
        Value(s) to normalize.
    min_value : float
        Value mapped to -1.
    max_value : float
        Value mapped to +1.

    Returns
    -------
    float or np.ndarray
        Normalized value(s) in [-1, 1]. A zero-width range gives 0, NaN
        stays NaN.
    """
    clamped = np.asarray(clamp_to_range(value, min_value, max_value), dtype=np.float64)
    width = max_value - min_value

    if width == 0:
        return _to_output(np.where(np.isnan(clamped), np.nan, 0.0))
    # Bounds are clamped to exactly ±1; the division alone can round past them
    return _to_output(np.clip(2.0 * (clamped - min_value) / width - 1.0, -1.0, 1.0))


def offset_to_center(value, min_value: float, max_value: float):
    """
    Clamp a value into range, then add the range midpoint.

    This is the arithmetic the legacy ``normalize`` routine actually
    performed (it never divided by the half-range). Kept under an accurate
    name for callers that were tuned against it; new code wants
    :func:`normalize`.

    Parameters
    ----------
    value : float or np.ndarray
        Value(s) to process.
    min_value : float
        Lower bound.
    max_value : float
        Upper bound.

    Returns
    -------
    float or np.ndarray
        clamp(value) + (max_value + min_value) / 2.
    """
    clamped = np.asarray(clamp_to_range(value, min_value, max_value), dtype=np.float64)
    return _to_output(clamped + (max_value + min_value) / 2.0)
