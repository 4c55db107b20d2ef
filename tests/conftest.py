"""Shared fixtures for plucker-geometry tests."""

import numpy as np
import pytest

from plucker_geometry import FLOAT32_TOLERANCE, FLOAT64_TOLERANCE, Plucker


@pytest.fixture(
    params=[(np.float32, FLOAT32_TOLERANCE), (np.float64, FLOAT64_TOLERANCE)],
    ids=["float32", "float64"],
)
def precision(request):
    """Scalar type and matching absolute tolerance."""
    return request.param


@pytest.fixture
def dtype(precision):
    return precision[0]


@pytest.fixture
def atol(precision):
    return precision[1]


@pytest.fixture
def line_through(dtype):
    """Factory for the line directed between two Euclidean points."""
    def make(from_point, to_point):
        return Plucker.from_points(
            np.append(np.asarray(from_point, dtype=dtype), 1),
            np.append(np.asarray(to_point, dtype=dtype), 1),
            dtype=dtype,
        )
    return make
