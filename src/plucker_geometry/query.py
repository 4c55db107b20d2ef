"""
Predicates over Plücker lines, planes and points.

Every predicate takes an absolute ``tolerance`` used for the zero tests.
"""

import numpy as np

from .constants import DEFAULT_TOLERANCE
from .models import Plane, Plucker
from .tolerance import almost_equal, almost_zero
from .vectors import as_vector


def are_perpendicular_vectors(v1, v2, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Test whether two 3-vectors are perpendicular (v1 . v2 ~ 0)."""
    return almost_zero(np.dot(v1, v2), tolerance)


def are_parallel_vectors(v1, v2, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Test whether two 3-vectors are parallel (|v1 x v2| ~ 0).

    Zero vectors are parallel to everything.
    """
    return almost_zero(np.linalg.norm(np.cross(v1, v2)), tolerance)


def _direction(x) -> np.ndarray:
    if isinstance(x, Plucker):
        return x.l
    return as_vector(x, 3)


def is_at_infinity(line: Plucker, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Test whether a line lies at infinity (its direction vanishes)."""
    return almost_zero(line.l, tolerance)


def passes_through_origin(line: Plucker, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Test whether a line passes through the origin (its moment vanishes)."""
    return almost_zero(line.m, tolerance)


def are_same(p1: Plucker, p2: Plucker, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Test whether two Plücker coordinates describe the same line.

    (l, m) and (k*l, k*m) are the same line for any k != 0, so both halves
    must be parallel, scaled by the same factor and flipped together.

    Args:
        p1: First line
        p2: Second line
        tolerance: Absolute tolerance

    Returns:
        True if ``p2`` is a nonzero multiple of ``p1``
    """
    if not are_parallel_vectors(p1.l, p2.l, tolerance):
        return False

    norm_l1, norm_m1 = np.linalg.norm(p1.l), np.linalg.norm(p1.m)
    norm_l2, norm_m2 = np.linalg.norm(p2.l), np.linalg.norm(p2.m)

    # |m| / |l| is the distance from the origin and does not change with k.
    through_origin1 = norm_m1 <= tolerance * norm_l1
    through_origin2 = norm_m2 <= tolerance * norm_l2
    if through_origin1 or through_origin2:
        # The moment ratio is 0/0 here; any common factor fits.
        return bool(through_origin1 and through_origin2)

    if not are_parallel_vectors(p1.m, p2.m, tolerance):
        return False

    if np.signbit(np.dot(p1.l, p2.l)) != np.signbit(np.dot(p1.m, p2.m)):
        return False

    return almost_equal(norm_l2 / norm_l1, norm_m2 / norm_m1, tolerance)


def are_perpendicular(p1, p2, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Test whether two lines (or directions) are perpendicular."""
    return are_perpendicular_vectors(_direction(p1), _direction(p2), tolerance)


def are_parallel(p1, p2, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Test whether two lines (or directions) are parallel."""
    return are_parallel_vectors(_direction(p1), _direction(p2), tolerance)


def are_coplanar(p1: Plucker, p2: Plucker, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Test whether two lines lie in a common plane (reciprocal product ~ 0)."""
    return almost_zero(p1 * p2, tolerance)


def are_skew(p1: Plucker, p2: Plucker, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Test whether two lines are skew (neither parallel nor intersecting)."""
    return not are_coplanar(p1, p2, tolerance)


def has_intersection(p1: Plucker, p2: Plucker, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Test whether two lines meet in exactly one point.

    Parallel and coincident lines are coplanar but have no single
    intersection point, so they are excluded.
    """
    return are_coplanar(p1, p2, tolerance) and not are_parallel(p1, p2, tolerance)


def line_contains_point(line: Plucker, point, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Test whether a homogeneous point (x, y, z, w) lies on a line.

    The point is on the line iff ``xyz x l == w * m``.
    """
    p = as_vector(point, 4)
    return almost_equal(np.cross(p[:3], line.l), p[3] * line.m, tolerance)


def plane_contains_point(plane: Plane, point, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Test whether a homogeneous point satisfies the plane equation."""
    return almost_zero(np.dot(plane.coord, as_vector(point, 4)), tolerance)


def plane_contains_line(plane: Plane, line: Plucker, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Test whether a line lies in a plane.

    The direction must be perpendicular to the normal, and the point of the
    line closest to the origin must be on the plane.
    """
    if not are_perpendicular_vectors(plane.normal, line.l, tolerance):
        return False

    point = np.append(np.cross(line.l, line.m), np.dot(line.l, line.l))
    return plane_contains_point(plane, point, tolerance)


def contains(container, item, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Test incidence of a point or line in a line or plane.

    Supported combinations are line/point, plane/point and plane/line, where
    points are homogeneous 4-vectors.

    Raises:
        TypeError: If the combination is not supported
    """
    if isinstance(container, Plucker):
        if isinstance(item, (Plucker, Plane)):
            raise TypeError(f"A line cannot contain a {type(item).__name__}")
        return line_contains_point(container, item, tolerance)
    elif isinstance(container, Plane):
        if isinstance(item, Plucker):
            return plane_contains_line(container, item, tolerance)
        if isinstance(item, Plane):
            raise TypeError("A plane cannot contain a Plane")
        return plane_contains_point(container, item, tolerance)
    else:
        raise TypeError(f"Unsupported container type: {type(container).__name__}")
