"""Axis-aligned box collision tests."""

from __future__ import annotations

from itertools import product

from tilequake.vector import Vec3


def check_collision(a_pos: Vec3, a_size: Vec3, b_pos: Vec3, b_size: Vec3) -> bool:
    """Return True if two axis-aligned boxes overlap or touch."""
    for a_start, a_len, b_start, b_len in (
        (a_pos.x, a_size.x, b_pos.x, b_size.x),
        (a_pos.y, a_size.y, b_pos.y, b_size.y),
        (a_pos.z, a_size.z, b_pos.z, b_size.z),
    ):
        if a_start + a_len < b_start or b_start + b_len < a_start:
            return False
    return True


def check_collision_semi_space(a_pos: Vec3, a_size: Vec3, plane_point: Vec3, normal: Vec3) -> bool:
    """Return True if any corner of the box lies behind the plane."""
    for dz, dy, dx in product((0.0, a_size.z), (0.0, a_size.y), (0.0, a_size.x)):
        corner = Vec3(a_pos.x + dx, a_pos.y + dy, a_pos.z + dz)
        if normal.dot(corner - plane_point) < 0.0:
            return True
    return False