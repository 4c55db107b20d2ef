"""
Intersections and common planes of lines, planes and points.

Every function returns a tuple whose first element tells whether the
configuration had a unique answer. When it is False the remaining elements
are zero-valued placeholders and must not be used.
"""

import logging

import numpy as np

from .constants import DEFAULT_TOLERANCE
from .models import Plane, Plucker
from .query import (
    are_coplanar,
    are_parallel,
    are_parallel_vectors,
    are_perpendicular_vectors,
    line_contains_point,
    passes_through_origin,
)
from .vectors import as_vector

logger = logging.getLogger(__name__)


def _no_point(dtype) -> np.ndarray:
    return np.zeros(4, dtype=dtype)


def _intersect_lines(
    p1: Plucker,
    p2: Plucker,
    tolerance: float
) -> tuple[bool, np.ndarray]:
    if not are_coplanar(p1, p2, tolerance) or are_parallel(p1, p2, tolerance):
        logger.debug("Lines %r and %r have no single intersection", p1, p2)
        return False, _no_point(p1.dtype)

    n = np.cross(p1.l, p2.l)
    point = np.append(
        -np.cross(p1.m, np.cross(p2.l, n)) + np.dot(p2.m, n) * p1.l,
        np.dot(n, n)
    )
    return True, point


def _intersect_line_plane(
    line: Plucker,
    plane: Plane,
    tolerance: float
) -> tuple[bool, np.ndarray]:
    n = plane.normal
    if are_perpendicular_vectors(line.l, n, tolerance):
        logger.debug("Line %r is parallel to plane %r", line, plane)
        return False, _no_point(line.dtype)

    point = np.append(np.cross(n, line.m) - plane.d * line.l, np.dot(line.l, n))
    return True, point


def _intersect_planes(
    plane1: Plane,
    plane2: Plane,
    tolerance: float
) -> tuple[bool, Plucker]:
    n1 = plane1.normal
    n2 = plane2.normal
    if are_parallel_vectors(n1, n2, tolerance):
        logger.debug("Planes %r and %r are parallel", plane1, plane2)
        return False, Plucker(dtype=plane1.dtype)

    # m = p x l for any p on both planes
    return True, Plucker(np.cross(n1, n2), plane1.d * n2 - plane2.d * n1, dtype=plane1.dtype)


def find_intersection(first, second, tolerance: float = DEFAULT_TOLERANCE) -> tuple:
    """Find the intersection of two lines, a line and a plane, or two planes.

    Args:
        first: Plucker line or Plane
        second: Plucker line or Plane
        tolerance: Absolute tolerance for the degeneracy tests

    Returns:
        ``(found, point)`` with a homogeneous 4-vector point for line/line and
        line/plane; ``(found, line)`` with a Plucker line for plane/plane.
        Lines that are skew or parallel, a line parallel to the plane, and
        parallel planes give ``found == False``.

    Raises:
        TypeError: If an argument is neither a Plucker line nor a Plane
    """
    if isinstance(first, Plucker) and isinstance(second, Plucker):
        return _intersect_lines(first, second, tolerance)
    elif isinstance(first, Plucker) and isinstance(second, Plane):
        return _intersect_line_plane(first, second, tolerance)
    elif isinstance(first, Plane) and isinstance(second, Plucker):
        return _intersect_line_plane(second, first, tolerance)
    elif isinstance(first, Plane) and isinstance(second, Plane):
        return _intersect_planes(first, second, tolerance)
    else:
        raise TypeError(
            f"Unsupported types for intersection: "
            f"{type(first).__name__} and {type(second).__name__}"
        )


def find_closest_points(
    p1: Plucker,
    p2: Plucker,
    tolerance: float = DEFAULT_TOLERANCE
) -> tuple[bool, np.ndarray, np.ndarray]:
    """Find the points on two lines that are closest to one another.

    For intersecting lines both points are the intersection.

    Returns:
        ``(found, point1, point2)`` with homogeneous points on ``p1`` and
        ``p2``; ``found`` is False for parallel lines
    """
    if are_parallel(p1, p2, tolerance):
        logger.debug("Lines %r and %r are parallel", p1, p2)
        return False, _no_point(p1.dtype), _no_point(p1.dtype)

    n = np.cross(p1.l, p2.l)
    w = np.dot(n, n)

    point1 = np.append(-np.cross(p1.m, np.cross(p2.l, n)) + np.dot(p2.m, n) * p1.l, w)
    point2 = np.append(np.cross(p2.m, np.cross(p1.l, n)) - np.dot(p1.m, n) * p2.l, w)

    return True, point1, point2


def find_origin_plane_through_line(
    line: Plucker,
    tolerance: float = DEFAULT_TOLERANCE
) -> tuple[bool, Plane]:
    """Find the plane through a line and the origin, ``(m, 0)``.

    Fails for lines through the origin, where the moment vanishes.
    """
    if passes_through_origin(line, tolerance):
        logger.debug("Line %r passes through the origin", line)
        return False, Plane(dtype=line.dtype)

    return True, Plane.from_normal(line.m, 0, dtype=line.dtype)


def find_plane_through_line(
    line: Plucker,
    tolerance: float = DEFAULT_TOLERANCE
) -> tuple[bool, Plane]:
    """Find the plane through a line perpendicular to the origin plane.

    The plane is ``(m x l, |m|^2)``; its normal points from the origin
    towards the line. Fails for lines through the origin.
    """
    if passes_through_origin(line, tolerance):
        logger.debug("Line %r passes through the origin", line)
        return False, Plane(dtype=line.dtype)

    return True, Plane.from_normal(np.cross(line.m, line.l), np.dot(line.m, line.m), dtype=line.dtype)


def find_common_plane(
    line: Plucker,
    other,
    tolerance: float = DEFAULT_TOLERANCE
) -> tuple[bool, Plane]:
    """Find the plane containing a line and a point, or a line and a direction.

    A homogeneous point (x, y, z, w) gives ``(l x p + w * m, -m . p)`` and
    fails when the point is on the line. A direction vector v gives
    ``(l x v, -m . v)`` and fails when v is parallel to the line.

    Args:
        line: Plucker line
        other: Homogeneous 4-vector point or 3-vector direction
        tolerance: Absolute tolerance for the degeneracy tests

    Returns:
        ``(found, plane)``

    Raises:
        ValueError: If ``other`` is neither a 3- nor a 4-vector
    """
    size = np.size(other)
    if size == 4:
        point = as_vector(other, 4, line.dtype)
        if line_contains_point(line, point, tolerance):
            logger.debug("Point %s lies on line %r", point, line)
            return False, Plane(dtype=line.dtype)

        p, w = point[:3], point[3]
        return True, Plane.from_normal(
            np.cross(line.l, p) + w * line.m,
            -np.dot(line.m, p),
            dtype=line.dtype
        )

    if size == 3:
        vector = as_vector(other, 3, line.dtype)
        if are_parallel_vectors(line.l, vector, tolerance):
            logger.debug("Direction %s is parallel to line %r", vector, line)
            return False, Plane(dtype=line.dtype)

        return True, Plane.from_normal(
            np.cross(line.l, vector),
            -np.dot(line.m, vector),
            dtype=line.dtype
        )

    raise ValueError(f"Expected a 3-vector direction or 4-vector point, got shape {np.shape(other)}")
