"""
Rigid motions of points, Plücker lines and planes.

A motion maps a Euclidean point x to ``R @ x + t``. Rotations may be given as
a :class:`scipy.spatial.transform.Rotation` or as a 3x3 matrix.
"""

import numpy as np
from scipy.spatial.transform import Rotation

from .models import Plane, Plucker
from .vectors import as_vector


def _rotation_matrix(rotation) -> np.ndarray:
    if isinstance(rotation, Rotation):
        return rotation.as_matrix()

    matrix = np.asarray(rotation, dtype=float)
    if matrix.shape != (3, 3):
        raise ValueError(f"Rotation matrix must be of shape (3, 3), got {matrix.shape}")
    return matrix


def _translation(translation) -> np.ndarray:
    if translation is None:
        return np.zeros(3)
    return as_vector(translation, 3, np.float64)


def transform_point(point, rotation, translation=None) -> np.ndarray:
    """Apply a rigid motion to a Euclidean 3-vector or homogeneous 4-vector.

    Homogeneous points keep their w; points at infinity are only rotated.
    """
    R = _rotation_matrix(rotation)
    t = _translation(translation)

    p = np.asarray(point)
    if p.size == 4:
        p = as_vector(p, 4)
        return np.append(R @ p[:3] + p[3] * t, p[3]).astype(p.dtype)

    p = as_vector(p, 3)
    return (R @ p + t).astype(p.dtype)


def transform_line(line: Plucker, rotation, translation=None) -> Plucker:
    """Apply a rigid motion to a line.

    The direction rotates with R; the moment picks up ``t x l'`` from the
    translation.

    Args:
        line: Plucker line
        rotation: scipy Rotation or 3x3 rotation matrix
        translation: Translation 3-vector (zero if None)

    Returns:
        Transformed line with the dtype of ``line``
    """
    R = _rotation_matrix(rotation)
    t = _translation(translation)

    l = R @ line.l
    m = R @ line.m + np.cross(t, l)
    return Plucker(l, m, dtype=line.dtype)


def transform_plane(plane: Plane, rotation, translation=None) -> Plane:
    """Apply a rigid motion to a plane.

    Args:
        plane: Plane (a, b, c, d)
        rotation: scipy Rotation or 3x3 rotation matrix
        translation: Translation 3-vector (zero if None)

    Returns:
        Plane with normal ``R n`` and offset ``d - (R n) . t``
    """
    R = _rotation_matrix(rotation)
    t = _translation(translation)

    n = R @ plane.normal
    return Plane.from_normal(n, plane.d - np.dot(n, t), dtype=plane.dtype)
