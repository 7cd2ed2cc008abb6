"""The player-controlled entity."""

from __future__ import annotations

import math
from typing import Any

from tilequake.context import Input
from tilequake.entity import Entity
from tilequake.matrix import Mat4
from tilequake.vector import Vec3

TURNING_VELOCITY = 5.0
RUNNING_VELOCITY = 5.0
JUMP_VELOCITY = 5.0
GRAVITY = 10.0
EYE_HEIGHT = 0.5


def create_player(entity: Entity) -> None:
    """Turn a fresh entity into the player."""
    entity.on_update = update_player
    entity.position = Vec3(3.0, 0.1, 3.0)
    entity.size = Vec3(0.8, 0.8, 0.8)
    entity.collision_mask = 1


def update_player(entity: Entity, game: Any, dt: float) -> None:
    """Apply input to the player and point the game camera from its eyes."""
    context = game.context
    speed = 0.0

    if context.get_key(Input.LEFT):
        entity.angle.y -= TURNING_VELOCITY * dt
    if context.get_key(Input.RIGHT):
        entity.angle.y += TURNING_VELOCITY * dt
    if context.get_key(Input.UP):
        speed = RUNNING_VELOCITY
    if context.get_key(Input.DOWN):
        speed = -RUNNING_VELOCITY
    if context.get_key(Input.JUMP) and entity.on_floor:
        entity.velocity.y = JUMP_VELOCITY

    entity.direction = Vec3(math.sin(entity.angle.y), 0.0, -math.cos(entity.angle.y))

    fall = entity.velocity.y
    entity.velocity = entity.direction * speed
    entity.velocity.y = fall - GRAVITY * dt

    rotation = Mat4.rotation_y(entity.angle.y)
    camera = Mat4.translation(
        -entity.position.x - entity.size.x / 2,
        -entity.position.y - EYE_HEIGHT,
        -entity.position.z - entity.size.z / 2,
    )
    game.view = rotation @ camera