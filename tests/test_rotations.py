"""
Tests for rotation utilities (DCM, Euler angles, vector rotation).

These tests verify:
1. Elementary rotations
2. Closed-form Euler DCM matches the chained elementary product
3. DCM validity (orthogonality, determinant)
4. Vector rotation and its inverse
5. Edge cases (non-finite input, bad shapes)
"""

import numpy as np
import pytest

from navframe.types import EulerAngles, Vector3
from navframe.utils.rotations import (
    dcm_is_valid,
    euler_to_dcm,
    rotate,
    rotx,
    roty,
    rotz,
)

# =============================================================================
# Test: Elementary Rotations
# =============================================================================


class TestElementaryRotations:
    """Tests for rotx, roty, rotz."""

    def test_zero_angle_is_identity(self):
        """Zero angle gives identity for every axis."""
        for R in (rotx(0.0), roty(0.0), rotz(0.0)):
            np.testing.assert_array_equal(R, np.eye(3))

    def test_rotx_90(self):
        """90° about x takes y to z."""
        v = rotx(np.pi / 2) @ np.array([0.0, 1.0, 0.0])
        np.testing.assert_array_almost_equal(v, [0.0, 0.0, 1.0])

    def test_roty_90(self):
        """90° about y takes z to x."""
        v = roty(np.pi / 2) @ np.array([0.0, 0.0, 1.0])
        np.testing.assert_array_almost_equal(v, [1.0, 0.0, 0.0])

    def test_rotz_90(self):
        """90° about z takes x to y."""
        v = rotz(np.pi / 2) @ np.array([1.0, 0.0, 0.0])
        np.testing.assert_array_almost_equal(v, [0.0, 1.0, 0.0])

    def test_elementary_are_valid(self, assert_rotation):
        """Elementary rotations are proper rotations."""
        for angle in (0.3, -1.2, 2.9):
            assert_rotation(rotx(angle))
            assert_rotation(roty(angle))
            assert_rotation(rotz(angle))


# =============================================================================
# Test: Euler Angles to DCM
# =============================================================================


class TestEulerToDCM:
    """Tests for euler_to_dcm."""

    def test_identity(self):
        """Zero angles give identity."""
        np.testing.assert_array_equal(euler_to_dcm(0.0, 0.0, 0.0), np.eye(3))

    def test_pure_yaw(self):
        """Yaw-only attitude equals rotz."""
        np.testing.assert_array_almost_equal(euler_to_dcm(0, 0, 0.7), rotz(0.7))

    def test_pure_pitch(self):
        """Pitch-only attitude equals roty."""
        np.testing.assert_array_almost_equal(euler_to_dcm(0, 0.4, 0), roty(0.4))

    def test_pure_roll(self):
        """Roll-only attitude equals rotx."""
        np.testing.assert_array_almost_equal(euler_to_dcm(-0.9, 0, 0), rotx(-0.9))

    def test_matches_chained_product(self, random_attitudes):
        """Closed form equals Rz(yaw) @ Ry(pitch) @ Rx(roll)."""
        for roll, pitch, yaw in random_attitudes(50):
            expected = rotz(yaw) @ roty(pitch) @ rotx(roll)
            np.testing.assert_allclose(euler_to_dcm(roll, pitch, yaw), expected, atol=1e-12)

    def test_composition_order_matters(self):
        """ZYX is not the same as XYZ for a general attitude."""
        roll, pitch, yaw = 0.3, 0.5, 0.7
        C = euler_to_dcm(roll, pitch, yaw)
        assert not np.allclose(C, rotx(roll) @ roty(pitch) @ rotz(yaw))

    def test_orthogonal_random(self, random_attitudes, assert_rotation):
        """DCM is orthogonal with det = +1 for random attitudes."""
        for roll, pitch, yaw in random_attitudes(100):
            assert_rotation(euler_to_dcm(roll, pitch, yaw))

    def test_unnormalized_angles(self):
        """Angles differing by full turns give the same DCM."""
        C1 = euler_to_dcm(0.2, 0.3, 0.4)
        C2 = euler_to_dcm(0.2 + 2 * np.pi, 0.3 - 4 * np.pi, 0.4 + 6 * np.pi)
        np.testing.assert_allclose(C1, C2, atol=1e-12)


# =============================================================================
# Test: DCM Validity
# =============================================================================


class TestDCMIsValid:
    """Tests for dcm_is_valid."""

    def test_identity_valid(self):
        assert dcm_is_valid(np.eye(3))

    def test_euler_dcm_valid(self):
        assert dcm_is_valid(euler_to_dcm(0.1, -0.2, 2.5))

    def test_not_orthogonal(self):
        """Non-orthogonal matrix should be invalid."""
        C = np.array([[1, 0.1, 0], [0, 1, 0], [0, 0, 1]])
        assert not dcm_is_valid(C)

    def test_reflection(self):
        """Reflection (det=-1) should be invalid."""
        assert not dcm_is_valid(np.diag([1, 1, -1]))

    def test_wrong_shape(self):
        assert not dcm_is_valid(np.eye(4))


# =============================================================================
# Test: Vector Rotation
# =============================================================================


class TestRotate:
    """Tests for rotate."""

    def test_identity_attitude(self, random_vectors):
        """Zero attitude leaves vectors unchanged in both directions."""
        for v in random_vectors(20):
            np.testing.assert_allclose(rotate(v, (0, 0, 0)), v)
            np.testing.assert_allclose(rotate(v, (0, 0, 0), inverse=True), v)

    def test_matches_dcm_product(self, random_attitudes, random_vectors):
        """rotate(v, a) equals euler_to_dcm(*a) @ v."""
        for angles, v in zip(random_attitudes(20), random_vectors(20)):
            np.testing.assert_allclose(rotate(v, angles), euler_to_dcm(*angles) @ v, atol=1e-12)

    def test_inverse_roundtrip(self, random_attitudes, random_vectors):
        """Forward then inverse rotation returns the input."""
        for angles, v in zip(random_attitudes(100), random_vectors(100)):
            back = rotate(rotate(v, angles), angles, inverse=True)
            np.testing.assert_allclose(back, v, rtol=1e-9, atol=1e-9)

    def test_inverse_is_reversed_negated_sequence(self, random_attitudes, random_vectors):
        """Inverse equals Rx(-roll) @ Ry(-pitch) @ Rz(-yaw)."""
        for (roll, pitch, yaw), v in zip(random_attitudes(20), random_vectors(20)):
            expected = rotx(-roll) @ roty(-pitch) @ rotz(-yaw) @ v
            np.testing.assert_allclose(rotate(v, (roll, pitch, yaw), inverse=True), expected, atol=1e-12)

    def test_single_axis_negation_is_inverse(self):
        """For a single-axis attitude, negating the angle inverts the rotation."""
        v = np.array([1.0, 2.0, 3.0])
        np.testing.assert_allclose(rotate(v, (0, 0, -0.8)), rotate(v, (0, 0, 0.8), inverse=True), atol=1e-12)

    def test_preserves_norm(self, random_attitudes, random_vectors):
        """Rotation preserves vector length."""
        for angles, v in zip(random_attitudes(20), random_vectors(20)):
            np.testing.assert_allclose(np.linalg.norm(rotate(v, angles)), np.linalg.norm(v))

    def test_accepts_value_types(self):
        """Vector3 and EulerAngles are accepted as inputs."""
        out = rotate(Vector3(1.0, 0.0, 0.0), EulerAngles(yaw=np.pi / 2))
        np.testing.assert_array_almost_equal(out, [0.0, 1.0, 0.0])

    def test_input_not_modified(self):
        """Input array is not aliased or mutated."""
        v = np.array([1.0, 2.0, 3.0])
        out = rotate(v, (0.1, 0.2, 0.3))

        np.testing.assert_array_equal(v, [1.0, 2.0, 3.0])
        assert out is not v
        assert not np.shares_memory(out, v)

    def test_nan_propagates(self):
        """NaN input produces NaN output without raising."""
        out = rotate([np.nan, 0.0, 0.0], (0.1, 0.2, 0.3))
        assert np.isnan(out).any()

    def test_nan_angle_propagates(self):
        out = rotate([1.0, 0.0, 0.0], (0.0, 0.0, np.nan))
        assert np.isnan(out).any()

    def test_wrong_length_raises(self):
        """Vectors must have exactly three components."""
        with pytest.raises(ValueError):
            rotate([1.0, 2.0], (0, 0, 0))
        with pytest.raises(ValueError):
            rotate([1.0, 2.0, 3.0], (0, 0, 0, 0))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
