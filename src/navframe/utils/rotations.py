"""
Rotation utilities for attitude representation.

This module holds the single rotation primitive used by the frame
converters: build a direction cosine matrix (DCM) from Euler angles and
apply it to a 3-vector.

Conventions
-----------
- Euler angles are (roll, pitch, yaw) in radians, no range restriction
- Sequence is 'ZYX' (yaw-pitch-roll, aerospace convention):
  C = Rz(yaw) @ Ry(pitch) @ Rx(roll)
- DCM transforms vectors from body frame to navigation frame: v_N = C @ v_B
- Right-hand rotation convention

References
----------
- Diebel (2006) - Representing Attitude: Euler Angles, Unit Quaternions, and Rotation Vectors
- Stevens & Lewis - Aircraft Control and Simulation
"""

import numpy as np

from navframe.constants import DCM_VALID_TOL
from navframe.types import as_vec3

# =============================================================================
# Basic Rotation Matrices
# =============================================================================


def rotx(angle: float) -> np.ndarray:
    """
    Elementary rotation matrix about the x-axis.

    Parameters
    ----------
    angle : float
        Rotation angle in radians.

    Returns
    -------
    np.ndarray, shape (3, 3)
        Rotation matrix.

    Examples
    --------
    >>> R = rotx(np.pi / 2)  # 90 degrees about x
    >>> v = np.array([0, 1, 0])
    >>> R @ v  # Should give [0, 0, 1]
    """
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def roty(angle: float) -> np.ndarray:
    """
    Elementary rotation matrix about the y-axis.

    Parameters
    ----------
    angle : float
        Rotation angle in radians.

    Returns
    -------
    np.ndarray, shape (3, 3)
        Rotation matrix.
    """
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])


def rotz(angle: float) -> np.ndarray:
    """
    Elementary rotation matrix about the z-axis.

    Parameters
    ----------
    angle : float
        Rotation angle in radians.

    Returns
    -------
    np.ndarray, shape (3, 3)
        Rotation matrix.
    """
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


# =============================================================================
# Euler Angles to DCM
# =============================================================================


def euler_to_dcm(roll: float, pitch: float, yaw: float) -> np.ndarray:
    """
    Convert Euler angles to Direction Cosine Matrix.

    Parameters
    ----------
    roll : float
        Roll angle in radians (rotation about x-axis).
    pitch : float
        Pitch angle in radians (rotation about y-axis).
    yaw : float
        Yaw angle in radians (rotation about z-axis).

    Returns
    -------
    np.ndarray, shape (3, 3)
        Rotation matrix (DCM), body to navigation frame.

    Examples
    --------
    >>> # 90° yaw (about z)
    >>> C = euler_to_dcm(0, 0, np.pi/2)

    Notes
    -----
    Closed form of C = Rz(yaw) @ Ry(pitch) @ Rx(roll):

        [ cθcψ   sφsθcψ - cφsψ   cφsθcψ + sφsψ ]
        [ cθsψ   sφsθsψ + cφcψ   cφsθsψ - sφcψ ]
        [ -sθ    sφcθ            cφcθ          ]

    with φ = roll, θ = pitch, ψ = yaw.
    """
    sphi, cphi = np.sin(roll), np.cos(roll)
    sthe, cthe = np.sin(pitch), np.cos(pitch)
    spsi, cpsi = np.sin(yaw), np.cos(yaw)

    return np.array(
        [
            [cthe * cpsi, sphi * sthe * cpsi - cphi * spsi, cphi * sthe * cpsi + sphi * spsi],
            [cthe * spsi, sphi * sthe * spsi + cphi * cpsi, cphi * sthe * spsi - sphi * cpsi],
            [-sthe, sphi * cthe, cphi * cthe],
        ],
        dtype=np.float64,
    )


def rotate(vector, angles, inverse: bool = False) -> np.ndarray:
    """
    Rotate a 3-vector by the DCM built from Euler angles.

    Parameters
    ----------
    vector : array_like, shape (3,)
        Input vector. Any 3-sequence or navframe value type.
    angles : array_like, shape (3,)
        (roll, pitch, yaw) in radians, or an EulerAngles.
    inverse : bool, optional
        If True, apply the transpose C.T instead of C. Default False.

    Returns
    -------
    np.ndarray, shape (3,)
        Rotated vector. Always a new array; the inputs are not modified.

    Notes
    -----
    ``rotate(v, a)`` takes body-frame components to the navigation frame and
    ``rotate(v, a, inverse=True)`` goes back. The inverse is the same
    elementary rotations with negated angles applied in reverse order,
    Rx(-roll) @ Ry(-pitch) @ Rz(-yaw), which equals C.T.

    NaN and inf inputs propagate through the arithmetic; nothing is raised.
    """
    v = as_vec3(vector, "vector")
    roll, pitch, yaw = as_vec3(angles, "angles")

    C = euler_to_dcm(roll, pitch, yaw)
    if inverse:
        return C.T @ v
    return C @ v


# =============================================================================
# DCM Utilities
# =============================================================================


def dcm_is_valid(C: np.ndarray, tol: float = DCM_VALID_TOL) -> bool:
    """
    Check if a matrix is a valid rotation matrix.

    A valid rotation matrix satisfies:
    - C @ C.T = I (orthogonal)
    - det(C) = +1 (proper rotation, not reflection)

    Parameters
    ----------
    C : np.ndarray, shape (3, 3)
        Matrix to check.
    tol : float, optional
        Tolerance for numerical checks.

    Returns
    -------
    bool
        True if C is a valid rotation matrix.
    """
    C = np.asarray(C, dtype=np.float64)

    if C.shape != (3, 3):
        return False

    # Check orthogonality
    should_be_identity = C @ C.T
    if not np.allclose(should_be_identity, np.eye(3), atol=tol):
        return False

    # Check determinant
    det = np.linalg.det(C)
    return bool(np.isclose(det, 1.0, atol=tol))
