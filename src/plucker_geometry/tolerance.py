"""
Approximate comparisons for scalars and vectors.

Array arguments are compared element-wise; the result is True only when every
element satisfies the comparison.
"""

import numpy as np


def almost_equal(
    lhs: float | np.ndarray,
    rhs: float | np.ndarray,
    tolerance: float,
    abs_tolerance: float | None = None
) -> bool:
    """Test whether two values are equal within tolerance.

    With a single tolerance the bound is ``tolerance * max(1, |lhs|, |rhs|)``,
    which behaves as an absolute tolerance below unit scale and as a relative
    one above it. When ``abs_tolerance`` is given, ``tolerance`` is treated as
    a relative tolerance and the bound becomes
    ``max(abs_tolerance, tolerance * max(|lhs|, |rhs|))``.

    Args:
        lhs: Scalar or array
        rhs: Scalar or array of the same shape
        tolerance: Mixed tolerance, or relative tolerance if ``abs_tolerance`` is set
        abs_tolerance: Absolute tolerance

    Returns:
        True if all elements are within the bound
    """
    lhs = np.asarray(lhs)
    rhs = np.asarray(rhs)
    diff = np.abs(lhs - rhs)
    scale = np.maximum(np.abs(lhs), np.abs(rhs))

    if abs_tolerance is None:
        bound = tolerance * np.maximum(1.0, scale)
    else:
        bound = np.maximum(abs_tolerance, tolerance * scale)

    return bool(np.all(diff <= bound))


def almost_zero(x: float | np.ndarray, tolerance: float) -> bool:
    """Test whether a value is zero within an absolute tolerance.

    Args:
        x: Scalar or array
        tolerance: Absolute tolerance

    Returns:
        True if every element satisfies ``|x| <= tolerance``
    """
    return bool(np.all(np.abs(np.asarray(x)) <= tolerance))
