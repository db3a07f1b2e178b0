"""
Numeric constants and default tolerances for navframe.
"""

import numpy as np

# Angles
PI = np.pi
TWO_PI = 2.0 * np.pi

# Conversion factors
DEG_TO_RAD = np.pi / 180.0
RAD_TO_DEG = 180.0 / np.pi

# Default tolerance for rotation matrix validity checks
DCM_VALID_TOL = 1e-6
