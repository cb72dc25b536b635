"""Homogeneous coordinates, 4x4 matrices and affine transforms."""

from __future__ import annotations

import math
from itertools import product
from typing import Iterable, Iterator, Optional

_FIELDS = ("x", "y", "z", "w")
TOLERANCE = 1e-5


def near(x: float, y: float) -> bool:
    """Return True when two numbers differ by less than the tolerance."""
    return abs(x - y) < TOLERANCE


class Hcoords:
    """A four-component homogeneous coordinate."""

    __slots__ = _FIELDS

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    def __iter__(self) -> Iterator[float]:
        yield from (self.x, self.y, self.z, self.w)

    def __getitem__(self, index: int) -> float:
        return getattr(self, _FIELDS[index])

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, _FIELDS[index], float(value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hcoords):
            return NotImplemented
        return tuple(self) == tuple(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x!r}, {self.y!r}, {self.z!r}, w={self.w!r})"

    def __add__(self, other: "Hcoords") -> "Hcoords":
        if not isinstance(other, Hcoords):
            return NotImplemented
        return Hcoords(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: "Hcoords") -> "Hcoords":
        if not isinstance(other, Hcoords):
            return NotImplemented
        return Hcoords(*(a - b for a, b in zip(self, other)))

    def __neg__(self) -> "Hcoords":
        return Hcoords(*(-a for a in self))

    def __rmul__(self, scalar: float) -> "Hcoords":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Hcoords(*(scalar * a for a in self))


class Point(Hcoords):
    """A position: homogeneous coordinate with w = 1."""

    __slots__ = ()

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        super().__init__(x, y, z, 1.0)


class Vector(Hcoords):
    """A direction: homogeneous coordinate with w = 0."""

    __slots__ = ()

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        super().__init__(x, y, z, 0.0)

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        if self.x == 0 and self.y == 0 and self.z == 0:
            raise ValueError("cannot normalize a zero vector")
        length = norm(self)
        self.x /= length
        self.y /= length
        self.z /= length


def as_point(coords: Hcoords) -> Point:
    """View homogeneous coordinates as a point; w must be 1."""
    if not near(coords.w, 1.0):
        raise ValueError(f"w must be 1 for a point, got {coords.w}")
    result = Point(coords.x, coords.y, coords.z)
    result.w = coords.w
    return result


def as_vector(coords: Hcoords) -> Vector:
    """View homogeneous coordinates as a vector; w must be 0."""
    if not near(coords.w, 0.0):
        raise ValueError(f"w must be 0 for a vector, got {coords.w}")
    result = Vector(coords.x, coords.y, coords.z)
    result.w = coords.w
    return result


class Matrix:
    """A 4x4 matrix stored as four rows of homogeneous coordinates."""

    __slots__ = ("rows",)

    def __init__(self, rows: Optional[Iterable[Iterable[float]]] = None):
        if rows is None:
            self.rows = tuple(Hcoords() for _ in range(4))
            return
        built = tuple(Hcoords(*row) for row in rows)
        if len(built) != 4:
            raise ValueError("a matrix needs exactly four rows")
        self.rows = built

    def __getitem__(self, index: int) -> Hcoords:
        return self.rows[index]

    def __iter__(self) -> Iterator[Hcoords]:
        return iter(self.rows)

    def tolist(self) -> list:
        """Return the entries as a list of four lists."""
        return [list(row) for row in self.rows]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.tolist() == other.tolist()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tolist()!r})"

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            columns = list(zip(*other.rows))
            return Matrix(
                [sum(a * b for a, b in zip(row, column)) for column in columns]
                for row in self.rows
            )
        if isinstance(other, Hcoords):
            return Hcoords(*(sum(a * b for a, b in zip(row, other)) for row in self.rows))
        return NotImplemented

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        rows = [list(a + b) for a, b in zip(self.rows[:3], other.rows[:3])]
        return Matrix(rows + [[0.0, 0.0, 0.0, 1.0]])

    def __rmul__(self, scalar: float) -> "Matrix":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        rows = [list(scalar * row) for row in self.rows[:3]]
        return Matrix(rows + [[0.0, 0.0, 0.0, 0.0]])


class Affine(Matrix):
    """A 4x4 matrix whose last row is (0, 0, 0, 1); starts as the identity."""

    __slots__ = ()

    def __init__(self):
        super().__init__([[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)])

    @classmethod
    def from_columns(cls, lx: Vector, ly: Vector, lz: Vector, d: Point) -> "Affine":
        """Build the transform whose columns are three axes and an origin."""
        result = cls()
        result.rows = tuple(Hcoords(*row) for row in zip(lx, ly, lz, d))
        return result

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> "Affine":
        """Copy a matrix, checking that its last row is (0, 0, 0, 1)."""
        last = matrix[3]
        if not (near(last[0], 0) and near(last[1], 0) and near(last[2], 0) and near(last[3], 1)):
            raise ValueError(f"not an affine matrix: last row is {list(last)}")
        result = cls()
        result.rows = tuple(Hcoords(*row) for row in matrix)
        return result


def dot(u: Hcoords, v: Hcoords) -> float:
    """Dot product over all four components."""
    return sum(a * b for a, b in zip(u, v))


def norm(v: Hcoords) -> float:
    """Euclidean length of the x, y, z part."""
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def cross(u: Hcoords, v: Hcoords) -> Vector:
    """Cross product of the x, y, z parts."""
    return Vector(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def scale(rx: float, ry: Optional[float] = None, rz: Optional[float] = None) -> Affine:
    """Scaling transform; a single factor scales uniformly."""
    if ry is None and rz is None:
        ry = rz = rx
    elif ry is None or rz is None:
        raise TypeError("scale takes one factor or three")
    result = Affine()
    for i, factor in enumerate((rx, ry, rz)):
        result[i][i] = factor
    return result


def trans(v: Hcoords) -> Affine:
    """Translation by the x, y, z part of v."""
    result = Affine()
    for i, offset in enumerate((v.x, v.y, v.z)):
        result[i][3] = offset
    return result


def rot(t: float, v: Hcoords) -> Affine:
    """Rotation by angle t (radians) about the axis v."""
    length = norm(v)
    if length == 0:
        raise ValueError("rotation axis must not be zero")
    cos_t = math.cos(t)
    first = scale(cos_t) @ Affine()
    skew = Matrix(
        [
            [0.0, -v.z, v.y, 0.0],
            [v.z, 0.0, -v.x, 0.0],
            [-v.y, v.x, 0.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    second = scale(math.sin(t) / length) @ skew
    axis = (v.x, v.y, v.z)
    outer = Matrix([[a * b for b in axis] + [0.0] for a in axis] + [[0.0] * 4])
    third = scale((1 - cos_t) / (length * length)) @ outer
    return Affine.from_matrix(first + second + third)


def inverse(a: Matrix) -> Affine:
    """Inverse of an affine transform."""
    adjugate = Affine()
    for i, j in product(range(3), repeat=2):
        r1, r2 = sorted(((i + 1) % 3, (i + 2) % 3))
        c1, c2 = sorted(((j + 1) % 3, (j + 2) % 3))
        minor = a[r1][c1] * a[r2][c2] - a[r1][c2] * a[r2][c1]
        adjugate[j][i] = minor if (i + j) % 2 == 0 else -minor
    det = sum(a[0][j] * adjugate[j][0] for j in range(3))
    if det == 0:
        raise ValueError("matrix is singular")
    untranslate = trans(Vector(-a[0][3], -a[1][3], -a[2][3]))
    return Affine.from_matrix((scale(1 / det) @ adjugate) @ untranslate)