"""
Vector helpers shared by the Plücker types and functions.

numpy supplies dot and cross products and norms; this module adds dtype
handling and the homogeneous-coordinate conversions.
"""

import numpy as np

from .constants import DEFAULT_DTYPE, SUPPORTED_DTYPES


def resolve_dtype(dtype=None, *arrays) -> np.dtype:
    """Pick the scalar type for a new value.

    An explicit ``dtype`` wins. Otherwise float32 is kept only when every
    array argument is already float32; anything else becomes float64.

    Raises:
        ValueError: If ``dtype`` is not float32 or float64
    """
    if dtype is not None:
        dtype = np.dtype(dtype)
        if dtype not in [np.dtype(t) for t in SUPPORTED_DTYPES]:
            raise ValueError(f"Unsupported dtype: {dtype}. Use float32 or float64")
        return dtype

    dtypes = [np.asarray(a).dtype for a in arrays]
    if dtypes and all(d == np.float32 for d in dtypes):
        return np.dtype(np.float32)
    return np.dtype(DEFAULT_DTYPE)


def as_vector(values, size: int, dtype=None) -> np.ndarray:
    """Convert array-like input to a flat vector of a given length.

    Args:
        values: Array-like with ``size`` elements
        size: Expected number of components
        dtype: Target dtype (inferred if None)

    Returns:
        New 1-D numpy array

    Raises:
        ValueError: If the input does not have ``size`` components
    """
    arr = np.array(values, dtype=resolve_dtype(dtype, values)).reshape(-1)
    if arr.shape != (size,):
        raise ValueError(
            f"Expected a vector with {size} components, got shape {np.shape(values)}"
        )
    return arr


def homogeneous(point) -> np.ndarray:
    """Append w = 1 to a Euclidean 3-vector."""
    p = as_vector(point, 3)
    return np.append(p, p.dtype.type(1))


def hnormalized(point) -> np.ndarray:
    """Divide a homogeneous 4-vector by its w component.

    Points at infinity (w = 0) give non-finite coordinates.
    """
    p = as_vector(point, 4)
    with np.errstate(divide='ignore', invalid='ignore'):
        return p[:3] / p[3]
