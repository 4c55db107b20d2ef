"""
Moments and points of Plücker lines.
"""

import numpy as np

from .models import Plucker
from .vectors import as_vector


def moment(line: Plucker, other) -> float | np.ndarray:
    """Moment of a line about another line or about a point.

    About a line this is the reciprocal product. About a Euclidean point it
    is ``m - point x l``, which vanishes for points on the line. Both
    readings assume normalized lines.

    Args:
        line: Normalized line
        other: Normalized line, or 3-vector point

    Returns:
        Scalar moment about a line, 3-vector moment about a point
    """
    if isinstance(other, Plucker):
        return line * other
    point = as_vector(other, 3, line.dtype)
    return line.m - np.cross(point, line.l)


def closest_point(line: Plucker, point=None) -> np.ndarray:
    """Closest point on a line.

    Without ``point``, returns the homogeneous point ``(l x m, |l|^2)`` closest
    to the origin; this works for any scaling of the line. With a Euclidean
    ``point``, returns the Euclidean point on a normalized line nearest to it.
    """
    if point is None:
        return np.append(np.cross(line.l, line.m), np.dot(line.l, line.l))

    point = as_vector(point, 3, line.dtype)
    return point + np.cross(line.l, moment(line, point))


def point_on_line(line: Plucker, t: float) -> np.ndarray:
    """Homogeneous point ``(l x m + t * l, |l|^2)`` on a line.

    ``t = 0`` gives the point closest to the origin.
    """
    return np.append(
        np.cross(line.l, line.m) + t * line.l,
        np.dot(line.l, line.l)
    ).astype(line.dtype)
