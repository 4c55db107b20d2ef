"""
Numerical constants for Plücker geometry.

Tolerances are absolute thresholds used by the predicates in ``query`` and
the degeneracy guards in ``find``.
"""

import numpy as np

# Default tolerance for single-precision arrays
FLOAT32_TOLERANCE = 1e-4

# Default tolerance for double-precision arrays
FLOAT64_TOLERANCE = 1e-8

DEFAULT_DTYPE = np.float64
DEFAULT_TOLERANCE = FLOAT64_TOLERANCE

SUPPORTED_DTYPES = (np.float32, np.float64)


def default_tolerance(dtype=DEFAULT_DTYPE) -> float:
    """Return the default absolute tolerance for a floating-point dtype.

    Args:
        dtype: numpy floating-point dtype (float32 or float64)

    Returns:
        Tolerance suited to the precision of ``dtype``
    """
    if np.dtype(dtype) == np.float32:
        return FLOAT32_TOLERANCE
    return FLOAT64_TOLERANCE
