"""
Plücker Geometry - 3D lines and planes in homogeneous coordinates.

Represents lines by Plücker coordinates (direction l, moment m) and planes by
homogeneous coefficients (a, b, c, d), with predicates, distances and
intersections between them.

Example:
    >>> from plucker_geometry import Plucker, find_intersection, hnormalized
    >>>
    >>> line1 = Plucker.from_points([0, 2, 6, 1], [0, 2, 4, 1])
    >>> line2 = Plucker.from_points([0, 2, 0, 1], [2, 2, 0, 1])
    >>> found, point = find_intersection(line1, line2)
    >>> found
    True
    >>> hnormalized(point).tolist()
    [0.0, 2.0, 0.0]
"""

import logging

__version__ = "1.0.0"
__author__ = "Plücker Geometry contributors"

# Value types
from .models import Plane, Plucker

# Tolerances
from .constants import (
    DEFAULT_TOLERANCE,
    FLOAT32_TOLERANCE,
    FLOAT64_TOLERANCE,
    default_tolerance,
)
from .tolerance import almost_equal, almost_zero

# Vector helpers
from .vectors import hnormalized, homogeneous

# Predicates
from .query import (
    are_coplanar,
    are_parallel,
    are_parallel_vectors,
    are_perpendicular,
    are_perpendicular_vectors,
    are_same,
    are_skew,
    contains,
    has_intersection,
    is_at_infinity,
    line_contains_point,
    passes_through_origin,
    plane_contains_line,
    plane_contains_point,
)

# Moments and points
from .common import closest_point, moment, point_on_line

# Distances
from .geometric import (
    distance,
    distance_of_between_skew_lines,
    distance_of_between_two_parallel_lines,
    normalize,
    squared_distance,
)

# Intersections
from .find import (
    find_closest_points,
    find_common_plane,
    find_intersection,
    find_origin_plane_through_line,
    find_plane_through_line,
)

# Rigid motions
from .transform import transform_line, transform_plane, transform_point

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Value types
    "Plane",
    "Plucker",
    # Tolerances
    "DEFAULT_TOLERANCE",
    "FLOAT32_TOLERANCE",
    "FLOAT64_TOLERANCE",
    "default_tolerance",
    "almost_equal",
    "almost_zero",
    # Vector helpers
    "homogeneous",
    "hnormalized",
    # Predicates
    "are_coplanar",
    "are_parallel",
    "are_parallel_vectors",
    "are_perpendicular",
    "are_perpendicular_vectors",
    "are_same",
    "are_skew",
    "contains",
    "has_intersection",
    "is_at_infinity",
    "line_contains_point",
    "passes_through_origin",
    "plane_contains_line",
    "plane_contains_point",
    # Moments and points
    "closest_point",
    "moment",
    "point_on_line",
    # Distances
    "distance",
    "distance_of_between_skew_lines",
    "distance_of_between_two_parallel_lines",
    "normalize",
    "squared_distance",
    # Intersections
    "find_closest_points",
    "find_common_plane",
    "find_intersection",
    "find_origin_plane_through_line",
    "find_plane_through_line",
    # Rigid motions
    "transform_line",
    "transform_plane",
    "transform_point",
]
