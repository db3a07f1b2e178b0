"""
Pytest configuration and shared fixtures for navframe tests.
"""

import numpy as np
import pytest

# =============================================================================
# Random Seed Fixture
# =============================================================================


@pytest.fixture
def rng():
    """Provide a seeded random number generator for reproducibility."""
    return np.random.default_rng(42)


@pytest.fixture
def random_attitudes(rng):
    """Generate random (roll, pitch, yaw) triples spanning a full turn."""

    def _random_attitudes(n):
        return rng.uniform(-np.pi, np.pi, size=(n, 3))

    return _random_attitudes


@pytest.fixture
def random_vectors(rng):
    """Generate random 3-vectors (velocities in m/s)."""

    def _random_vectors(n, scale=10.0):
        return scale * rng.standard_normal((n, 3))

    return _random_vectors


# =============================================================================
# Tolerance Fixtures
# =============================================================================


@pytest.fixture
def atol():
    """Absolute tolerance for floating point comparisons."""
    return 1e-10


@pytest.fixture
def rtol():
    """Relative tolerance for floating point comparisons."""
    return 1e-6


# =============================================================================
# Common Test Utilities
# =============================================================================


def assert_valid_rotation_matrix(C, tol=1e-10):
    """Assert that C is a valid rotation matrix."""
    assert C.shape == (3, 3), f"Expected shape (3,3), got {C.shape}"

    # Check orthogonality: C @ C.T = I
    identity_check = C @ C.T
    np.testing.assert_allclose(identity_check, np.eye(3), atol=tol, err_msg="Matrix is not orthogonal")

    # Check determinant = +1
    det = np.linalg.det(C)
    np.testing.assert_allclose(det, 1.0, atol=tol, err_msg=f"Determinant is {det}, expected 1.0")


@pytest.fixture
def assert_rotation():
    """Fixture providing rotation matrix assertion."""
    return assert_valid_rotation_matrix


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
