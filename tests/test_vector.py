import pytest

from tilequake.vector import Vec3


def test_add_then_sub_round_trip():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(0.5, 4.0, -1.0)
    assert (a + b) - b == a


def test_mul_and_rmul_agree():
    a = Vec3(1.0, 2.0, 3.0)
    assert a * 2.0 == 2.0 * a
    assert (a * 2.0) / 2.0 == a


def test_div_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec3(1.0, 2.0, 3.0) / 0.0


def test_normalized_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vec3().normalized()


def test_normalized_has_unit_length():
    v = Vec3(3.0, -7.0, 2.0).normalized()
    assert v.size() == pytest.approx(1.0)


def test_size_of_pythagorean_triple():
    assert Vec3(3.0, 4.0, 0.0).size() == pytest.approx(5.0)
    assert Vec3(3.0, 4.0, 0.0).size_sqr() == pytest.approx(Vec3(3.0, 4.0, 0.0).size() ** 2)


def test_cross_is_orthogonal_to_inputs():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_cross_is_anticommutative():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-2.0, 0.5, 4.0)
    assert a.cross(b) == -b.cross(a)


def test_dot_is_symmetric():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(4.0, -5.0, 6.0)
    assert a.dot(b) == b.dot(a)


def test_clip_removes_component_along_unit_axis():
    v = Vec3(2.0, 3.0, -1.0)
    axis = Vec3(0.0, 1.0, 0.0)
    clipped = v.clip(axis)
    assert clipped.dot(axis) == pytest.approx(0.0)
    assert clipped.x == v.x
    assert clipped.z == v.z


def test_str_format():
    assert str(Vec3(1.0, -2.5, 0.0)) == "1.000000 -2.500000 0.000000"


def test_copy_is_independent():
    a = Vec3(1.0, 2.0, 3.0)
    b = a.copy()
    b.x = 9.0
    assert a.x == 1.0


def test_iteration_yields_components():
    assert tuple(Vec3(1.0, 2.0, 3.0)) == (1.0, 2.0, 3.0)