import math

import pytest

from tilequake.matrix import Mat4
from tilequake.vector import Vec3


def _sample():
    return Mat4(tuple(float(i) * 0.5 - 3.0 for i in range(16)))


def test_wrong_length_raises():
    with pytest.raises(ValueError):
        Mat4((1.0, 2.0, 3.0))


def test_zero_is_all_zeros():
    assert all(v == 0.0 for v in Mat4.zero())


def test_identity_is_neutral_for_matmul():
    m = _sample()
    assert Mat4.identity() @ m == m
    assert m @ Mat4.identity() == m


def test_add_sub_round_trip():
    a = _sample()
    b = Mat4.rotation_x(0.7)
    assert (a + b) - b == pytest.approx(a.values) or list((a + b) - b) == pytest.approx(list(a))
    assert list((a + b) - b) == pytest.approx(list(a))


def test_sub_self_is_zero():
    m = _sample()
    assert m - m == Mat4.zero()


def test_matmul_is_associative():
    a = Mat4.rotation_y(0.3)
    b = Mat4.translation(1.0, -2.0, 0.5)
    c = Mat4.scale(2.0, 3.0, 4.0)
    assert list((a @ b) @ c) == pytest.approx(list(a @ (b @ c)))


def test_translations_compose_by_adding():
    combined = Mat4.translation(1.0, 2.0, 3.0) @ Mat4.translation(-4.0, 0.5, 2.0)
    assert list(combined) == pytest.approx(list(Mat4.translation(-3.0, 2.5, 5.0)))


def test_translation_moves_point():
    p = Vec3(1.0, 2.0, 3.0)
    moved = Mat4.translation(0.5, -1.0, 2.0).transform_point(p)
    assert moved == p + Vec3(0.5, -1.0, 2.0)


def test_scale_multiplies_components():
    p = Vec3(1.0, 2.0, 3.0)
    scaled = Mat4.scale(2.0, 3.0, 4.0).transform_point(p)
    assert scaled == Vec3(2.0, 6.0, 12.0)


@pytest.mark.parametrize("factory", [Mat4.rotation_x, Mat4.rotation_y, Mat4.rotation_z])
def test_rotation_preserves_length(factory):
    p = Vec3(1.0, -2.0, 0.5)
    rotated = factory(1.1).transform_point(p)
    assert rotated.size() == pytest.approx(p.size())


@pytest.mark.parametrize("factory", [Mat4.rotation_x, Mat4.rotation_y, Mat4.rotation_z])
def test_rotation_inverse_is_negative_angle(factory):
    product = factory(0.9) @ factory(-0.9)
    assert list(product) == pytest.approx(list(Mat4.identity()), abs=1e-12)


def test_rotation_z_quarter_turn_keeps_z():
    p = Vec3(1.0, 0.0, 2.0)
    rotated = Mat4.rotation_z(math.pi / 2).transform_point(p)
    assert rotated.z == pytest.approx(p.z)
    assert rotated.x == pytest.approx(0.0, abs=1e-12)


def test_perspective_structure():
    m = Mat4.perspective(16.0 / 9.0, 3.14 / 4, 100.0, 0.2)
    assert m[14] == -1.0
    assert m[15] == 0.0
    assert m[0] == pytest.approx(m[5] / (16.0 / 9.0))


def test_perspective_maps_near_and_far_planes():
    near, far = 0.2, 100.0
    m = Mat4.perspective(1.0, 1.0, far, near)
    # clip z / w must be -1 at the near plane and +1 at the far plane
    for depth, expected in ((near, -1.0), (far, 1.0)):
        z_clip = m[10] * -depth + m[11]
        w_clip = m[14] * -depth
        assert z_clip / w_clip == pytest.approx(expected)