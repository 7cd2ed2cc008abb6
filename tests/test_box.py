import pytest

from tilequake.box import check_collision, check_collision_semi_space
from tilequake.vector import Vec3

UNIT = Vec3(1.0, 1.0, 1.0)


def test_overlapping_boxes_collide():
    assert check_collision(Vec3(0.0, 0.0, 0.0), UNIT, Vec3(0.5, 0.5, 0.5), UNIT)


def test_touching_boxes_collide():
    assert check_collision(Vec3(0.0, 0.0, 0.0), UNIT, Vec3(1.0, 0.0, 0.0), UNIT)


@pytest.mark.parametrize(
    "offset",
    [Vec3(1.5, 0.0, 0.0), Vec3(0.0, 1.5, 0.0), Vec3(0.0, 0.0, 1.5), Vec3(-1.5, 0.0, 0.0)],
)
def test_separated_boxes_do_not_collide(offset):
    assert not check_collision(Vec3(0.0, 0.0, 0.0), UNIT, offset, UNIT)


def test_collision_is_symmetric():
    cases = [
        (Vec3(0.0, 0.0, 0.0), UNIT, Vec3(0.9, 0.2, -0.3), Vec3(0.5, 0.5, 0.5)),
        (Vec3(2.0, 0.0, 0.0), UNIT, Vec3(0.0, 0.0, 0.0), Vec3(0.5, 3.0, 0.5)),
    ]
    for a_pos, a_size, b_pos, b_size in cases:
        assert check_collision(a_pos, a_size, b_pos, b_size) == check_collision(b_pos, b_size, a_pos, a_size)


def test_box_contained_in_other_collides():
    assert check_collision(Vec3(0.4, 0.4, 0.4), Vec3(0.1, 0.1, 0.1), Vec3(0.0, 0.0, 0.0), UNIT)


def test_semi_space_box_in_front_does_not_collide():
    assert not check_collision_semi_space(
        Vec3(1.0, 0.0, 0.0), UNIT, Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0)
    )


def test_semi_space_box_behind_collides():
    assert check_collision_semi_space(
        Vec3(-2.0, 0.0, 0.0), UNIT, Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0)
    )


def test_semi_space_straddling_box_collides():
    assert check_collision_semi_space(
        Vec3(-0.5, 0.0, 0.0), UNIT, Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0)
    )


def test_semi_space_only_far_corner_behind():
    # Only the corner with the full size added on x lies behind the plane.
    assert check_collision_semi_space(
        Vec3(0.0, 0.0, 0.0), UNIT, Vec3(0.5, 0.0, 0.0), Vec3(-1.0, 0.0, 0.0)
    )