"""Tile world storage, collision queries and rendering."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from tilequake.box import check_collision, check_collision_semi_space
from tilequake.matrix import Mat4
from tilequake.vector import Vec3

WORLD_SIZE = 256
CHUNK_SIZE = 64
NUM_CHUNKS = WORLD_SIZE // CHUNK_SIZE

MIN_HEIGHT = -999.0
MAX_HEIGHT = 999.0


class WallType(IntEnum):
    NONE = 0
    BLOCK = 1
    HALFBLOCK_LEFT = 2
    HALFBLOCK_RIGHT = 3
    HALFBLOCK_UP = 4
    HALFBLOCK_DOWN = 5
    HALFBLOCK_MIDDLE = 6
    DIAGONAL_DOWNLEFT = 7
    DIAGONAL_DOWNRIGHT = 8
    DIAGONAL_UPLEFT = 9
    DIAGONAL_UPRIGHT = 10


@dataclass(frozen=True)
class Tile:
    """One floor/ceiling cell of the world, optionally with a wall."""

    bot_height: float = 0.0
    bot_window_texture: int = 0
    bot_texture: int = 0
    top_height: float = 0.0
    top_window_texture: int = 0
    top_texture: int = 0
    wall_texture: int = 0
    wall_type: WallType = WallType.NONE


_EMPTY_TILE = Tile()


@dataclass
class Chunk:
    """A square block of tiles sharing one mesh."""

    tiles: list[Tile] = field(default_factory=lambda: [_EMPTY_TILE] * (CHUNK_SIZE * CHUNK_SIZE))
    mesh: Any = None
    dirty: bool = False


# (offset_x, offset_z, size_x, size_z) of the solid part of block walls.
_BLOCK_SHAPES: dict[WallType, tuple[float, float, float, float]] = {
    WallType.BLOCK: (0.0, 0.0, 1.0, 1.0),
    WallType.HALFBLOCK_DOWN: (0.0, 0.0, 1.0, 0.5),
    WallType.HALFBLOCK_UP: (0.0, 0.5, 1.0, 0.5),
    WallType.HALFBLOCK_LEFT: (0.0, 0.0, 0.5, 1.0),
    WallType.HALFBLOCK_RIGHT: (0.5, 0.0, 0.5, 1.0),
    WallType.HALFBLOCK_MIDDLE: (0.25, 0.25, 0.5, 0.5),
}

# (plane offset on x, normal) of diagonal walls.
_DIAGONAL_PLANES: dict[WallType, tuple[float, tuple[float, float, float]]] = {
    WallType.DIAGONAL_DOWNLEFT: (1.0, (1.0, 0.0, 1.0)),
    WallType.DIAGONAL_DOWNRIGHT: (0.0, (-1.0, 0.0, 1.0)),
    WallType.DIAGONAL_UPLEFT: (0.0, (1.0, 0.0, -1.0)),
    WallType.DIAGONAL_UPRIGHT: (1.0, (-1.0, 0.0, -1.0)),
}


def _in_bounds(i: int, j: int) -> bool:
    return 0 <= i < WORLD_SIZE and 0 <= j < WORLD_SIZE


def _chunk_index(i: int, j: int) -> int:
    return i // CHUNK_SIZE + (j // CHUNK_SIZE) * NUM_CHUNKS


def _tile_index(i: int, j: int) -> int:
    return i % CHUNK_SIZE + (j % CHUNK_SIZE) * CHUNK_SIZE


@dataclass
class World:
    """A square grid of tiles split into chunks."""

    chunks: list[Chunk] = field(default_factory=lambda: [Chunk() for _ in range(NUM_CHUNKS * NUM_CHUNKS)])
    collision_layer: int = 0
    shader: Any = None
    tile_textures: Any = None

    def get_tile(self, i: int, j: int) -> Tile | None:
        """Return the tile at (i, j), or None outside the world."""
        if not _in_bounds(i, j):
            return None
        return self.chunks[_chunk_index(i, j)].tiles[_tile_index(i, j)]

    def edit_tile(self, i: int, j: int, tile: Tile) -> bool:
        """Store ``tile`` at (i, j); return False outside the world."""
        if not _in_bounds(i, j):
            return False
        self.chunks[_chunk_index(i, j)].tiles[_tile_index(i, j)] = tile
        return True

    def render(self, view: Mat4, projection: Mat4) -> None:
        """Draw every chunk mesh with the world shader and tile textures."""
        if self.shader is None or self.tile_textures is None:
            raise RuntimeError("world has no shader or tile textures to render with")
        shader = self.shader
        shader.set_uniform_mat4("model", Mat4.identity())
        shader.set_uniform_mat4("view", view)
        shader.set_uniform_mat4("projection", projection)
        self.tile_textures.use(0)
        shader.set_uniform_1i("tex_array", 0)
        for chunk in self.chunks:
            if chunk.mesh is not None:
                chunk.mesh.render(shader)

    def check_collision_box(self, position: Vec3, size: Vec3) -> bool:
        """Return True if the box touches any floor, ceiling, wall or the world's edge."""
        min_x = math.floor(position.x)
        min_z = math.floor(position.z)
        max_x = min_x + math.ceil(size.x)
        max_z = min_z + math.ceil(size.z)

        for i in range(min_x, max_x + 1):
            for j in range(min_z, max_z + 1):
                tile = self.get_tile(i, j)
                if tile is None:
                    return True
                if (
                    self._hits_floor(tile, i, j, position, size)
                    or self._hits_ceiling(tile, i, j, position, size)
                    or self._hits_wall(tile, i, j, position, size)
                ):
                    return True
        return False

    @staticmethod
    def _hits_floor(tile: Tile, i: int, j: int, position: Vec3, size: Vec3) -> bool:
        tile_position = Vec3(i, MIN_HEIGHT, j)
        tile_size = Vec3(1.0, tile.bot_height - MIN_HEIGHT, 1.0)
        return check_collision(position, size, tile_position, tile_size)

    @staticmethod
    def _hits_ceiling(tile: Tile, i: int, j: int, position: Vec3, size: Vec3) -> bool:
        tile_position = Vec3(i, tile.top_height, j)
        tile_size = Vec3(1.0, MAX_HEIGHT - tile.top_height, 1.0)
        return check_collision(position, size, tile_position, tile_size)

    @staticmethod
    def _hits_wall(tile: Tile, i: int, j: int, position: Vec3, size: Vec3) -> bool:
        wall_type = tile.wall_type
        if wall_type == WallType.NONE:
            return False

        height = tile.top_height - tile.bot_height

        if wall_type in _BLOCK_SHAPES:
            off_x, off_z, size_x, size_z = _BLOCK_SHAPES[wall_type]
            tile_position = Vec3(i + off_x, tile.bot_height, j + off_z)
            tile_size = Vec3(size_x, height, size_z)
            return check_collision(position, size, tile_position, tile_size)

        if wall_type in _DIAGONAL_PLANES:
            off_x, normal = _DIAGONAL_PLANES[wall_type]
            plane_point = Vec3(i + off_x, tile.bot_height, j)
            return check_collision_semi_space(position, size, plane_point, Vec3(*normal))

        return True