import pytest

from cglraster.color import Color
from cglraster.vector import Vector2D, Vector3D


def test_vector2d_defaults_to_origin():
    assert Vector2D() == Vector2D(0.0, 0.0)


def test_vector2d_add_sub_round_trip():
    a = Vector2D(1.5, -2.0)
    b = Vector2D(0.25, 7.0)
    assert (a + b) - b == a
    assert a + (-a) == Vector2D()


def test_vector2d_norm_of_3_4():
    assert Vector2D(3.0, 4.0).norm() == pytest.approx(5.0)


def test_vector2d_norm2_is_square_of_norm():
    v = Vector2D(1.3, -2.7)
    assert v.norm2() == pytest.approx(v.norm() ** 2)
    assert v.norm2() == pytest.approx(v.dot(v))


def test_vector2d_unit_has_length_one_and_same_direction():
    v = Vector2D(-6.0, 2.5)
    u = v.unit()
    assert u.norm() == pytest.approx(1.0)
    assert v.cross(u) == pytest.approx(0.0)
    assert v.dot(u) > 0


def test_vector2d_unit_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2D().unit()


def test_vector2d_cross_is_antisymmetric_and_dot_symmetric():
    a = Vector2D(2.0, 3.0)
    b = Vector2D(-1.0, 4.0)
    assert a.cross(b) == -b.cross(a)
    assert a.dot(b) == b.dot(a)


def test_vector2d_scalar_ops():
    v = Vector2D(4.0, -8.0)
    assert 2 * v == v * 2
    assert (v * 3) / 3 == v
    assert v[0] == v.x and v[1] == v.y
    with pytest.raises(IndexError):
        v[2]


def test_vector3d_add_sub_round_trip():
    a = Vector3D(1.0, 2.0, 3.0)
    b = Vector3D(-0.5, 4.0, 0.25)
    assert (a + b) - b == a


def test_vector3d_elementwise_ops_round_trip():
    a = Vector3D(1.0, 2.0, 4.0)
    b = Vector3D(2.0, 8.0, 0.5)
    assert (a * b) / b == a


def test_vector3d_rcp_times_self_is_ones():
    v = Vector3D(2.0, -4.0, 0.5)
    assert tuple(v * v.rcp()) == pytest.approx((1.0, 1.0, 1.0))
    assert 1.0 / v == v.rcp()


def test_vector3d_cross_is_orthogonal():
    a = Vector3D(1.0, 2.0, 3.0)
    b = Vector3D(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)
    assert a.cross(a) == Vector3D()


def test_vector3d_unit_length():
    v = Vector3D(3.0, -1.0, 7.0)
    assert v.unit().norm() == pytest.approx(1.0)
    assert v.norm2() == pytest.approx(v.norm() ** 2)


def test_vector3d_scalar_division_matches_reciprocal_multiply():
    v = Vector3D(9.0, -3.0, 6.0)
    assert tuple(v / 3) == pytest.approx(tuple(v * (1 / 3)))
    assert 2 * v == v * 2


def test_vector3d_color_aliases_and_round_trip():
    v = Vector3D(0.1, 0.2, 0.3)
    assert (v.r, v.g, v.b) == (v.x, v.y, v.z)
    assert Vector3D.from_color(v.to_color()) == v
    c = Color(0.4, 0.5, 0.6)
    assert Vector3D.from_color(c).to_color() == c


def test_illum_of_white_is_one_and_black_zero():
    assert Vector3D(1.0, 1.0, 1.0).illum() == pytest.approx(1.0)
    assert Vector3D().illum() == 0.0


def test_illum_weights_green_most():
    red = Vector3D(1.0, 0.0, 0.0).illum()
    green = Vector3D(0.0, 1.0, 0.0).illum()
    blue = Vector3D(0.0, 0.0, 1.0).illum()
    assert green > red > blue