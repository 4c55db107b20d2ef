"""
Normalization and distance formulas for Plücker lines.

Functions documented as needing a normalized line expect ``|l| == 1``;
use :func:`normalize` first.
"""

import logging

import numpy as np

from .common import closest_point
from .constants import DEFAULT_TOLERANCE
from .find import find_common_plane
from .models import Plucker
from .query import are_parallel
from .vectors import as_vector

logger = logging.getLogger(__name__)


def normalize(line: Plucker) -> Plucker:
    """Rescale a line so that its direction has unit length.

    A line at infinity has no direction to rescale; the result then has
    non-finite components and no error is raised.
    """
    norm = np.linalg.norm(line.l)
    if norm == 0:
        logger.debug("Normalizing a line at infinity: %r", line)
    with np.errstate(divide='ignore', invalid='ignore'):
        return Plucker.from_coord(line.coord / norm, dtype=line.dtype)


def squared_distance(line: Plucker) -> float:
    """Squared distance from the origin to a line, |m|^2 / |l|^2."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.dot(line.m, line.m) / np.dot(line.l, line.l)


def distance_of_between_skew_lines(p1: Plucker, p2: Plucker) -> float:
    """Distance between two non-parallel lines.

    Computed as ``|p1 * p2| / |l1 x l2|``; the denominator vanishes for
    parallel lines, so check :func:`are_parallel` first.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.abs(p1 * p2) / np.linalg.norm(np.cross(p1.l, p2.l))


def distance_of_between_two_parallel_lines(p1: Plucker, p2: Plucker) -> float:
    """Distance between two parallel lines.

    ``p2`` is first brought to the scale and orientation of ``p1``; the
    distance is then ``|l1 x (m1 - m2')| / |l1|^2``.

    Args:
        p1: First line
        p2: Line parallel to ``p1``

    Returns:
        Distance between the lines
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        s = np.linalg.norm(p2.l) / np.linalg.norm(p1.l)
        if np.dot(p1.l, p2.l) < 0:
            s = -s
        return np.linalg.norm(np.cross(p1.l, p1.m - p2.m / s)) / np.dot(p1.l, p1.l)


def _distance_to_homogeneous_point(line: Plucker, point: np.ndarray, tolerance: float) -> float:
    found, common = find_common_plane(line, point, tolerance)
    if not found:
        # The point is on the line.
        return line.dtype.type(0)

    # Plane through the line, perpendicular to the common plane
    n1 = common.normal
    n2 = np.cross(line.l, n1)
    d2 = -np.dot(line.m, n1)

    p, w = point[:3], point[3]
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.abs(np.dot(n2, p) + d2 * w) / (np.abs(w) * np.linalg.norm(n2))


def _distance_to_euclidean_point(line: Plucker, point: np.ndarray) -> float:
    return np.linalg.norm(closest_point(line, point) - point)


def distance(line: Plucker, other=None, tolerance: float = DEFAULT_TOLERANCE) -> float:
    """Shortest distance from a line to the origin, a line or a point.

    The meaning depends on ``other``:

    - None: distance from the origin, ``sqrt(|m|^2 / |l|^2)``
    - Plucker: distance between the lines, using the parallel-line formula
      when the directions are parallel within ``tolerance``
    - 4-vector: distance to a homogeneous point; zero if the line contains it
    - 3-vector: distance to a Euclidean point; needs a normalized line

    Raises:
        ValueError: If ``other`` is a vector of any other length
    """
    if other is None:
        return np.sqrt(squared_distance(line))

    if isinstance(other, Plucker):
        if are_parallel(line, other, tolerance):
            return distance_of_between_two_parallel_lines(line, other)
        return distance_of_between_skew_lines(line, other)

    size = np.size(other)
    if size == 4:
        return _distance_to_homogeneous_point(line, as_vector(other, 4, line.dtype), tolerance)
    if size == 3:
        return _distance_to_euclidean_point(line, as_vector(other, 3, line.dtype))

    raise ValueError(f"Expected a 3- or 4-vector point, got shape {np.shape(other)}")
