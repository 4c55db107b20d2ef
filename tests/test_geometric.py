"""
Tests for normalization and distances.
"""

import numpy as np
import pytest

from plucker_geometry import (
    Plucker,
    distance,
    distance_of_between_skew_lines,
    distance_of_between_two_parallel_lines,
    normalize,
    squared_distance,
)


# =============================================================================
# Normalization
# =============================================================================

class TestNormalize:
    """Test line normalization."""

    def test_unit_direction(self, line_through, atol):
        line = line_through([0, 2, 6], [0, 2, 4])
        res = normalize(line)

        assert np.linalg.norm(res.l) == pytest.approx(1.0, abs=atol)
        assert np.linalg.norm(res.m) == pytest.approx(
            np.linalg.norm(line.m) / np.linalg.norm(line.l), abs=atol
        )
        assert res.dtype == line.dtype

    @pytest.mark.parametrize("to_point", [[1, 5, -3], [7, 0, 0], [0, -1, 2]])
    def test_any_line(self, line_through, atol, to_point):
        line = line_through([0.5, 2, 6], to_point)
        res = normalize(line)
        assert np.linalg.norm(res.l) == pytest.approx(1.0, abs=atol)
        assert np.linalg.norm(res.m) == pytest.approx(
            np.linalg.norm(line.m) / np.linalg.norm(line.l), rel=1e-4
        )

    def test_line_at_infinity(self, line_through):
        """Zero direction gives non-finite coordinates without raising."""
        res = normalize(line_through([0, 2, 6], [0, 2, 6]))
        assert not np.all(np.isfinite(res.coord))


# =============================================================================
# Distance From Origin
# =============================================================================

class TestDistanceFromOrigin:
    """Test distance from the origin to a line."""

    def test_squared_distance(self, line_through, atol):
        line = line_through([0, 2, 6], [0, 2, 4])
        assert squared_distance(line) == pytest.approx(4.0, abs=atol)

    def test_distance(self, line_through, atol):
        line = line_through([0, 2, 6], [0, 2, 4])
        assert distance(line) == pytest.approx(2.0, abs=atol)

    def test_scale_invariant(self, line_through, atol):
        """Distance does not depend on the scale of the coordinates."""
        line = line_through([0, 2, 6], [0, 2, 4])
        assert distance(line * 5) == pytest.approx(2.0, abs=atol)
        assert distance(-line) == pytest.approx(2.0, abs=atol)


# =============================================================================
# Distance Between Lines
# =============================================================================

class TestDistanceBetweenLines:
    """Test distances between two lines."""

    def test_skew_lines(self, line_through, atol):
        line1 = line_through([0, 2, 6], [0, 2, 4])
        line2 = line_through([0, 0, 0], [2, 0, 0])
        assert distance_of_between_skew_lines(line1, line2) == pytest.approx(2.0, abs=atol)

    def test_intersecting_lines(self, line_through, atol):
        line1 = line_through([0, 2, 6], [0, 2, 4])
        line2 = line_through([0, 2, 0], [2, 2, 0])
        assert distance_of_between_skew_lines(line1, line2) == pytest.approx(0.0, abs=atol)

    def test_parallel_lines(self, line_through, atol):
        line1 = line_through([0, 2, 6], [0, 2, 4])
        line2 = line_through([2, 2, 6], [2, 2, 4])
        assert distance_of_between_two_parallel_lines(line1, line2) == pytest.approx(2.0, abs=atol)

    def test_parallel_lines_opposite_and_scaled(self, line_through, atol):
        """Orientation and scale of the second line do not matter."""
        line1 = line_through([0, 2, 6], [0, 2, 4])
        line2 = line_through([2, 2, 4], [2, 2, 6]) * 3
        assert distance_of_between_two_parallel_lines(line1, line2) == pytest.approx(2.0, abs=atol)

    def test_coincident_lines(self, line_through, atol):
        line1 = line_through([0, 2, 6], [0, 2, 4])
        line2 = line_through([0, 2, 6], [0, 2, 4])
        assert distance_of_between_two_parallel_lines(line1, line2) == pytest.approx(0.0, abs=atol)

    @pytest.mark.filterwarnings("error")
    def test_parallel_to_line_at_infinity(self, line_through):
        """Zero direction gives a non-finite distance without warning."""
        line1 = line_through([0, 2, 6], [0, 2, 6])
        line2 = line_through([0, 2, 6], [0, 2, 4])
        assert not np.isfinite(distance_of_between_two_parallel_lines(line1, line2))

    @pytest.mark.parametrize("from2, to2, expected", [
        ([0, 0, 0], [2, 0, 0], 2.0),   # skew
        ([0, 2, 0], [2, 2, 0], 0.0),   # intersecting
        ([2, 2, 6], [2, 2, 4], 2.0),   # parallel
        ([0, 2, 6], [0, 2, 4], 0.0),   # coincident
    ])
    def test_distance_dispatch(self, line_through, atol, from2, to2, expected):
        line1 = line_through([0, 2, 6], [0, 2, 4])
        line2 = line_through(from2, to2)
        assert distance(line1, line2, atol) == pytest.approx(expected, abs=atol)


# =============================================================================
# Distance Between Line and Point
# =============================================================================

class TestDistanceToPoint:
    """Test distances from lines to points."""

    def test_homogeneous_point(self, line_through, dtype, atol):
        line = line_through([0, 2, 6], [0, 2, 4])
        off_line = np.array([0, 0, 0, 1], dtype=dtype)
        on_line = np.array([0, 2, 0, 1], dtype=dtype)

        assert distance(line, off_line, atol) == pytest.approx(2.0, abs=atol)
        assert distance(line, on_line, atol) == pytest.approx(0.0, abs=atol)

    def test_homogeneous_point_line_through_origin(self, line_through, dtype, atol):
        line = line_through([0, 0, 6], [0, 0, 4])
        off_line = np.array([0, 2, 0, 1], dtype=dtype)
        on_line = np.array([0, 0, 0, 1], dtype=dtype)

        assert distance(line, off_line, atol) == pytest.approx(2.0, abs=atol)
        assert distance(line, on_line, atol) == pytest.approx(0.0, abs=atol)

    def test_weighted_homogeneous_point(self, line_through, atol):
        """The weight of a homogeneous point does not change its distance."""
        line = line_through([0, 2, 6], [0, 2, 4])
        assert distance(line, [3, 0, 0, 1], atol) == pytest.approx(np.sqrt(13), abs=atol)
        assert distance(line, [6, 0, 0, 2], atol) == pytest.approx(np.sqrt(13), abs=atol)

    def test_euclidean_point(self, line_through, dtype, atol):
        line = normalize(line_through([0, 2, 6], [0, 2, 4]))
        assert distance(line, np.array([0, 0, 0], dtype=dtype)) == pytest.approx(2.0, abs=atol)
        assert distance(line, np.array([0, 2, 0], dtype=dtype)) == pytest.approx(0.0, abs=atol)

    def test_euclidean_point_line_through_origin(self, line_through, dtype, atol):
        line = normalize(line_through([0, 0, 6], [0, 0, 4]))
        assert distance(line, np.array([0, 2, 0], dtype=dtype)) == pytest.approx(2.0, abs=atol)
        assert distance(line, np.array([0, 0, 0], dtype=dtype)) == pytest.approx(0.0, abs=atol)

    @pytest.mark.filterwarnings("error")
    def test_point_at_infinity(self, dtype, atol):
        """A point at infinity is infinitely far from a line that misses it."""
        line = Plucker([0, 0, -2], [-4, 0, 0], dtype=dtype)
        assert distance(line, np.array([1, 0, 0, 0], dtype=dtype), atol) == np.inf

    def test_invalid_point(self):
        line = Plucker([0, 0, 1], [0, 0, 0])
        with pytest.raises(ValueError):
            distance(line, [1, 2])
