import math

import pytest

from planetsim.affine import (
    Affine,
    Hcoords,
    Matrix,
    Point,
    Vector,
    as_point,
    as_vector,
    cross,
    dot,
    inverse,
    near,
    norm,
    rot,
    scale,
    trans,
)


def flat(matrix):
    return [value for row in matrix for value in row]


def assert_close(actual, expected):
    assert list(actual) == pytest.approx(list(expected), abs=1e-9)


def assert_matrix_close(actual, expected):
    assert flat(actual) == pytest.approx(flat(expected), abs=1e-9)


def test_point_and_vector_defaults():
    assert tuple(Point()) == (0, 0, 0, 1)
    assert tuple(Vector(1, 2, 3)) == (1, 2, 3, 0)


def test_near_tolerance():
    assert near(1.0, 1.0 + 1e-6)
    assert not near(1.0, 1.0 + 1e-4)


def test_arithmetic_round_trips():
    p = Point(1, 2, 3)
    v = Vector(4, 5, 6)
    assert (p + v) - v == p
    assert -(-v) == v
    assert 2 * v == v + v


def test_item_access():
    v = Vector(1, 2, 3)
    v[1] = 7
    assert v.y == 7
    assert v[3] == 0
    with pytest.raises(IndexError):
        v[4]


def test_as_vector_and_as_point():
    p = Point(1, 2, 3)
    q = Point(4, 5, 6)
    diff = as_vector(p - q)
    assert isinstance(diff, Vector)
    assert as_point(q + diff) == p
    with pytest.raises(ValueError):
        as_vector(p)
    with pytest.raises(ValueError):
        as_point(p - q)


def test_normalize():
    v = Vector(3, 4, 12)
    v.normalize()
    assert norm(v) == pytest.approx(1.0)
    assert_close(cross(v, Vector(3, 4, 12)), Vector())
    with pytest.raises(ValueError):
        Vector().normalize()


def test_dot_and_norm_agree():
    v = Vector(2, -3, 7)
    assert dot(v, v) == pytest.approx(norm(v) ** 2)


def test_cross_of_axes():
    assert_close(cross(Vector(1, 0, 0), Vector(0, 1, 0)), (0, 0, 1, 0))


def test_cross_invariants():
    u = Vector(1, -2, 0.5)
    v = Vector(3, 4, -1)
    c = cross(u, v)
    assert dot(c, u) == pytest.approx(0.0, abs=1e-12)
    assert dot(c, v) == pytest.approx(0.0, abs=1e-12)
    assert_close(c, -cross(v, u))


def test_trans_moves_points_not_vectors():
    v = Vector(1, 2, 3)
    p = Point(-4, 0.5, 2)
    assert_close(trans(v) @ p, p + v)
    w = Vector(7, 8, 9)
    assert_close(trans(v) @ w, w)


def test_scale_forms():
    assert scale(2) == scale(2, 2, 2)
    assert_close(scale(2, 3, 4) @ Point(1, 1, 1), Point(2, 3, 4))
    with pytest.raises(TypeError):
        scale(1, 2)


def test_rot_properties():
    axis = Vector(1, 2, 3)
    v = Vector(-2, 0.5, 4)
    r = rot(0.7, axis)
    assert norm(r @ v) == pytest.approx(norm(v))
    assert_close(r @ axis, axis)
    assert_matrix_close(rot(-0.7, axis) @ r, Affine())


def test_rot_quarter_turn():
    assert_close(rot(math.pi / 2, Vector(0, 0, 1)) @ Vector(1, 0, 0), (0, 1, 0, 0))


def test_rot_zero_axis():
    with pytest.raises(ValueError):
        rot(1.0, Vector())


def test_inverse_round_trip():
    a = Affine.from_matrix(trans(Vector(1, -2, 5)) @ rot(0.3, Vector(1, 1, 0)) @ scale(2, 3, 0.5))
    inv = inverse(a)
    assert_matrix_close(inv @ a, Affine())
    assert_matrix_close(a @ inv, Affine())


def test_inverse_singular():
    with pytest.raises(ValueError):
        inverse(scale(0, 1, 1))


def test_from_matrix_checks_last_row():
    with pytest.raises(ValueError):
        Affine.from_matrix(Matrix())
    m = trans(Vector(1, 2, 3)) @ scale(2)
    assert Affine.from_matrix(m) == m


def test_matrix_add_forces_last_row():
    total = Matrix() + Matrix()
    assert total[3] == Hcoords(0, 0, 0, 1)


def test_scalar_times_matrix_clears_last_row():
    scaled = 2 * Affine()
    assert scaled[3] == Hcoords(0, 0, 0, 0)
    assert scaled[0] == 2 * Affine()[0]


def test_from_columns():
    lx, ly, lz = Vector(1, 2, 3), Vector(4, 5, 6), Vector(7, 8, 9)
    d = Point(-1, -2, -3)
    m = Affine.from_columns(lx, ly, lz, d)
    assert_close(m @ Vector(1, 0, 0), lx)
    assert_close(m @ Vector(0, 0, 1), lz)
    assert_close(m @ Point(), d)


def test_identity_product():
    m = rot(1.1, Vector(0, 1, 1)) @ trans(Vector(3, 2, 1))
    assert Affine() @ m == m