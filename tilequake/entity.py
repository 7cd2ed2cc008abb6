"""Game entities and their movement through the tile world."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from tilequake.vector import Vec3
from tilequake.world import World

FLOOR_TOLERANCE = 3.0 / 16.0
_FLOOR_LIFT = 0.01
_LOWEST_FLOOR = -999.0

UpdateCallback = Callable[["Entity", Any, float], None]
ThinkCallback = Callable[["Entity", Any], None]


@dataclass
class Entity:
    """A moving box in the world with optional per-frame behaviour."""

    position: Vec3 = field(default_factory=Vec3)
    velocity: Vec3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=Vec3)
    size: Vec3 = field(default_factory=Vec3)
    angle: Vec3 = field(default_factory=Vec3)
    health: int = 100
    target: Optional[Entity] = None
    child: Optional[Entity] = None
    texture: Any = None
    next_think: int = 0
    collision_layer: int = 0
    collision_mask: int = 0
    unused: bool = True
    on_floor: bool = False
    on_update: Optional[UpdateCallback] = None
    on_think: Optional[ThinkCallback] = None

    def reset(self) -> None:
        """Put the entity back into its free, unplaced state."""
        self.position = Vec3()
        self.velocity = Vec3()
        self.size = Vec3()
        self.unused = True
        self.health = 100
        self.texture = None
        self.collision_layer = 0
        self.collision_mask = 0

    def update(self, game: Any, dt: float) -> None:
        """Run the entity's behaviour, then move it with collision handling."""
        if self.on_update is not None:
            self.on_update(self, game, dt)

        if game.context.tick > self.next_think and self.on_think is not None:
            self.on_think(self, game)

        if self.health < 0:
            self.unused = True

        self._move(game.world, dt)

    def _collides_with_world(self, world: World) -> bool:
        if not self.collision_mask & world.collision_layer:
            return False
        return world.check_collision_box(self.position, self.size)

    def _apply_floor_tolerance(self, world: World) -> None:
        """Step up onto a slightly higher floor instead of being blocked by it."""
        if not self.collision_mask & world.collision_layer:
            return

        min_x = math.floor(self.position.x)
        min_z = math.floor(self.position.z)
        max_x = min_x + math.ceil(self.size.x) + 1
        max_z = min_z + math.ceil(self.size.z) + 1

        heights = (
            tile.bot_height
            for i in range(min_x, max_x)
            for j in range(min_z, max_z)
            if (tile := world.get_tile(i, j)) is not None
        )
        max_floor = max(heights, default=_LOWEST_FLOOR)
        max_floor = max(max_floor, _LOWEST_FLOOR)

        if (
            abs(self.position.y - max_floor) < FLOOR_TOLERANCE
            and max_floor > self.position.y
            and self.velocity.y <= 0.0
        ):
            self.position.y = max_floor + _FLOOR_LIFT

    def _move(self, world: World, dt: float) -> None:
        self.on_floor = False
        original = self.position.copy()

        self.position.x += self.velocity.x * dt
        self._apply_floor_tolerance(world)
        if self._collides_with_world(world):
            self.position.x = original.x

        self.position.y += self.velocity.y * dt
        if self._collides_with_world(world):
            self.position.y = original.y
            if self.velocity.y < 0.0:
                self.on_floor = True
            self.velocity.y = 0.0

        self.position.z += self.velocity.z * dt
        self._apply_floor_tolerance(world)
        if self._collides_with_world(world):
            self.position.z = original.z