"""
Value types for homogeneous planes and Plücker lines.

Both types keep their coefficients packed in a single numpy vector. Component
accessors return views into that vector, so in-place edits of ``plane.normal``
or ``line.l`` change the value they came from.
"""

from numbers import Real

import numpy as np

from .vectors import as_vector, resolve_dtype


class Plane:
    """Plane a*x + b*y + c*z + d = 0 in homogeneous coordinates (a, b, c, d).

    The normal (a, b, c) is not required to be unit length. A zero normal
    describes a degenerate plane and is accepted as is.
    """

    __hash__ = None

    def __init__(
        self,
        a: float = 0.0,
        b: float = 0.0,
        c: float = 0.0,
        d: float = 0.0,
        dtype=None
    ):
        self._coord = as_vector([a, b, c, d], 4, dtype)

    @classmethod
    def from_coord(cls, coord, dtype=None) -> "Plane":
        """Create a plane from a homogeneous 4-vector (a, b, c, d)."""
        plane = cls.__new__(cls)
        plane._coord = as_vector(coord, 4, dtype)
        return plane

    @classmethod
    def from_normal(cls, normal, d: float, dtype=None) -> "Plane":
        """Create a plane from its normal vector and offset."""
        n = as_vector(normal, 3, dtype)
        return cls.from_coord(np.append(n, d), dtype=n.dtype)

    @property
    def dtype(self) -> np.dtype:
        return self._coord.dtype

    @property
    def coord(self) -> np.ndarray:
        return self._coord

    @coord.setter
    def coord(self, value):
        self._coord[:] = as_vector(value, 4, self.dtype)

    @property
    def normal(self) -> np.ndarray:
        return self._coord[:3]

    @normal.setter
    def normal(self, value):
        self._coord[:3] = as_vector(value, 3, self.dtype)

    @property
    def a(self) -> float:
        return self._coord[0]

    @a.setter
    def a(self, value: float):
        self._coord[0] = value

    @property
    def b(self) -> float:
        return self._coord[1]

    @b.setter
    def b(self, value: float):
        self._coord[1] = value

    @property
    def c(self) -> float:
        return self._coord[2]

    @c.setter
    def c(self, value: float):
        self._coord[2] = value

    @property
    def d(self) -> float:
        return self._coord[3]

    @d.setter
    def d(self, value: float):
        self._coord[3] = value

    def copy(self) -> "Plane":
        return Plane.from_coord(self._coord.copy())

    def scale(self, factor: float) -> "Plane":
        """Return the plane with every coefficient multiplied by ``factor``."""
        return Plane.from_coord(self._coord * factor, dtype=self.dtype)

    def negate(self) -> "Plane":
        """Return the plane with every coefficient negated (flipped normal)."""
        return Plane.from_coord(-self._coord)

    def to_dict(self) -> dict:
        return {
            'normal': self.normal.tolist(),
            'd': float(self.d),
        }

    def __mul__(self, other):
        if isinstance(other, Real):
            return self.scale(other)
        return NotImplemented

    __rmul__ = __mul__

    def __imul__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        self._coord *= self.dtype.type(other)
        return self

    def __neg__(self) -> "Plane":
        return self.negate()

    def __pos__(self) -> "Plane":
        return self.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Plane):
            return NotImplemented
        return bool(np.array_equal(self._coord, other._coord))

    def __repr__(self) -> str:
        a, b, c, d = self._coord.tolist()
        return f"Plane(a={a!r}, b={b!r}, c={c!r}, d={d!r})"


class Plucker:
    """Plücker coordinates (l, m) of a line in 3D space.

    ``l`` is the direction of the line and ``m`` its moment about the origin,
    ``m = p x l`` for any point p on the line. Both halves are defined up to
    a common nonzero factor, and ``l . m == 0`` for every valid line.

    Example:
        >>> line = Plucker.from_points([0, 2, 6, 1], [0, 2, 4, 1])
        >>> line.l
        array([ 0.,  0., -2.])
    """

    __hash__ = None

    def __init__(self, l=None, m=None, dtype=None):
        dtype = resolve_dtype(dtype, *[v for v in (l, m) if v is not None])
        l = np.zeros(3, dtype=dtype) if l is None else l
        m = np.zeros(3, dtype=dtype) if m is None else m
        self._coord = np.concatenate([as_vector(l, 3, dtype), as_vector(m, 3, dtype)])

    @classmethod
    def from_coord(cls, coord, dtype=None) -> "Plucker":
        """Create a line from a packed 6-vector (l, m)."""
        line = cls.__new__(cls)
        line._coord = as_vector(coord, 6, dtype)
        return line

    @classmethod
    def from_points(cls, from_point, to_point, dtype=None) -> "Plucker":
        """Create the line directed from one homogeneous point to another.

        Swapping the points negates both halves, which reverses the direction
        but describes the same line.

        Args:
            from_point: Homogeneous point (x, y, z, w)
            to_point: Distinct homogeneous point (x, y, z, w)
            dtype: Scalar type (inferred from the points if None)

        Returns:
            Plucker line with ``l = from.w * to.xyz - to.w * from.xyz`` and
            ``m = from.xyz x to.xyz``
        """
        dtype = resolve_dtype(dtype, from_point, to_point)
        p = as_vector(from_point, 4, dtype)
        q = as_vector(to_point, 4, dtype)
        return cls(p[3] * q[:3] - q[3] * p[:3], np.cross(p[:3], q[:3]), dtype=dtype)

    @classmethod
    def from_point_direction(cls, point, direction, dtype=None) -> "Plucker":
        """Create the line through a Euclidean point along a direction."""
        dtype = resolve_dtype(dtype, point, direction)
        p = as_vector(point, 3, dtype)
        l = as_vector(direction, 3, dtype)
        return cls(l, np.cross(p, l), dtype=dtype)

    @property
    def dtype(self) -> np.dtype:
        return self._coord.dtype

    @property
    def coord(self) -> np.ndarray:
        return self._coord

    @coord.setter
    def coord(self, value):
        self._coord[:] = as_vector(value, 6, self.dtype)

    @property
    def l(self) -> np.ndarray:
        return self._coord[:3]

    @l.setter
    def l(self, value):
        self._coord[:3] = as_vector(value, 3, self.dtype)

    @property
    def m(self) -> np.ndarray:
        return self._coord[3:]

    @m.setter
    def m(self, value):
        self._coord[3:] = as_vector(value, 3, self.dtype)

    def copy(self) -> "Plucker":
        return Plucker.from_coord(self._coord.copy())

    def scale(self, factor: float) -> "Plucker":
        """Return the line with both halves multiplied by ``factor``."""
        return Plucker.from_coord(self._coord * factor, dtype=self.dtype)

    def negate(self) -> "Plucker":
        """Return the line with reversed orientation."""
        return Plucker.from_coord(-self._coord)

    def reciprocal_product(self, other: "Plucker") -> float:
        """Reciprocal product l1 . m2 + l2 . m1, zero iff the lines are coplanar."""
        return np.dot(self.l, other.m) + np.dot(other.l, self.m)

    def to_dict(self) -> dict:
        return {
            'l': self.l.tolist(),
            'm': self.m.tolist(),
        }

    def __mul__(self, other):
        if isinstance(other, Plucker):
            return self.reciprocal_product(other)
        if isinstance(other, Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self.scale(other)
        return NotImplemented

    def __imul__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        self._coord *= self.dtype.type(other)
        return self

    def __neg__(self) -> "Plucker":
        return self.negate()

    def __pos__(self) -> "Plucker":
        return self.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Plucker):
            return NotImplemented
        return bool(np.array_equal(self._coord, other._coord))

    def __repr__(self) -> str:
        return f"Plucker(l={self.l.tolist()!r}, m={self.m.tolist()!r})"
