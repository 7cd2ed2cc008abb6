"""Turns the tile world into chunk meshes of textured quads."""

from __future__ import annotations

from dataclasses import dataclass

from tilequake.geometry import MeshData, Vertex
from tilequake.vector import Vec3
from tilequake.world import CHUNK_SIZE, NUM_CHUNKS, Tile, WallType, World

_VERTEX_BYTES = 48
_SCRATCH_BYTES = 8 * 1024 * 1024 // 4

DEFAULT_MAX_VERTICES = _SCRATCH_BYTES // _VERTEX_BYTES
DEFAULT_MAX_INDICES = _SCRATCH_BYTES // 4


class BuilderError(RuntimeError):
    """Raised when a chunk needs more vertices or indices than allowed."""


@dataclass(frozen=True)
class _BlockRule:
    offset_x: float
    offset_z: float
    size_x: float
    size_z: float


@dataclass(frozen=True)
class _DiagonalRule:
    flag: int
    down_to_top: bool


_WALL_RULES: dict[WallType, _BlockRule | _DiagonalRule] = {
    WallType.BLOCK: _BlockRule(0.0, 0.0, 1.0, 1.0),
    WallType.HALFBLOCK_DOWN: _BlockRule(0.0, 0.0, 1.0, 0.5),
    WallType.HALFBLOCK_UP: _BlockRule(0.0, 0.5, 1.0, 0.5),
    WallType.HALFBLOCK_LEFT: _BlockRule(0.0, 0.0, 0.5, 1.0),
    WallType.HALFBLOCK_RIGHT: _BlockRule(0.5, 0.0, 0.5, 1.0),
    WallType.HALFBLOCK_MIDDLE: _BlockRule(0.25, 0.25, 0.5, 0.5),
    WallType.DIAGONAL_DOWNLEFT: _DiagonalRule(0, True),
    WallType.DIAGONAL_DOWNRIGHT: _DiagonalRule(1, False),
    WallType.DIAGONAL_UPLEFT: _DiagonalRule(2, False),
    WallType.DIAGONAL_UPRIGHT: _DiagonalRule(3, True),
}


class ChunkBuilder:
    """Accumulates the quads of tiles, bounded by vertex and index limits."""

    def __init__(self, max_vertices: int = DEFAULT_MAX_VERTICES, max_indices: int = DEFAULT_MAX_INDICES) -> None:
        if max_vertices < 0 or max_indices < 0:
            raise ValueError("vertex and index limits must not be negative")
        self.max_vertices = max_vertices
        self.max_indices = max_indices
        self.vertices: list[Vertex] = []
        self.indices: list[int] = []

    def build(self, world: World, x: int, y: int) -> MeshData:
        """Build the mesh of chunk (x, y) from scratch."""
        self.vertices = []
        self.indices = []
        for i in range(CHUNK_SIZE):
            for j in range(CHUNK_SIZE):
                self.build_tile(world, x * CHUNK_SIZE + i, y * CHUNK_SIZE + j)
        return MeshData(self.vertices, self.indices)

    def build_tile(self, world: World, i: int, j: int) -> None:
        """Append the side windows, floor, ceiling and wall of tile (i, j)."""
        tile = world.get_tile(i, j)
        if tile is None:
            raise IndexError(f"tile ({i}, {j}) lies outside the world")
        self._build_sides(world, tile, i, j, along_x=True)
        self._build_floor_ceiling(tile, i, j)
        self._build_sides(world, tile, i, j, along_x=False)
        self._build_wall(tile, i, j)

    def _build_sides(self, world: World, tile: Tile, i: int, j: int, along_x: bool) -> None:
        if along_x:
            sides = ((world.get_tile(i - 1, j), i, j), (world.get_tile(i + 1, j), i + 1, j))
            plane = self._plane_x
        else:
            sides = ((world.get_tile(i, j - 1), i, j), (world.get_tile(i, j + 1), i, j + 1))
            plane = self._plane_z

        # A missing neighbour keeps the differences of the previous side.
        bot_diff = top_diff = 0.0
        for neighbour, px, pz in sides:
            if neighbour is not None:
                bot_diff = neighbour.bot_height - tile.bot_height
                top_diff = neighbour.top_height - tile.top_height
            if bot_diff < 0.0:
                plane(Vec3(px, tile.bot_height, pz), bot_diff, tile.bot_window_texture)
            if top_diff > 0.0:
                plane(Vec3(px, tile.top_height, pz), top_diff, tile.top_window_texture)

    def _build_floor_ceiling(self, tile: Tile, i: int, j: int) -> None:
        if tile.bot_height == tile.top_height:
            return
        self._plane_y(Vec3(i, tile.bot_height, j), tile.bot_texture)
        self._plane_y(Vec3(i, tile.top_height, j), tile.top_texture)

    def _build_wall(self, tile: Tile, i: int, j: int) -> None:
        if tile.wall_type == WallType.NONE:
            return
        rule = _WALL_RULES.get(tile.wall_type)
        if isinstance(rule, _BlockRule):
            self._build_block_wall(tile, i, j, rule)
        elif isinstance(rule, _DiagonalRule):
            self._build_diagonal_wall(tile, i, j, rule)
        else:
            raise ValueError(f"unknown wall type {tile.wall_type!r}")

    def _build_block_wall(self, tile: Tile, i: int, j: int, rule: _BlockRule) -> None:
        start_x = i + rule.offset_x
        start_z = j + rule.offset_z
        height = tile.top_height - tile.bot_height
        texture = tile.wall_texture
        bot = tile.bot_height

        self._plane(Vec3(start_x, bot, start_z), Vec3(0.0, height, rule.size_z), texture)
        self._plane(Vec3(start_x, bot, start_z), Vec3(rule.size_x, height, 0.0), texture)
        self._plane(Vec3(start_x + rule.size_x, bot, start_z), Vec3(0.0, height, rule.size_z), texture)
        self._plane(Vec3(start_x, bot, start_z + rule.size_z), Vec3(rule.size_x, height, 0.0), texture)

    def _build_diagonal_wall(self, tile: Tile, i: int, j: int, rule: _DiagonalRule) -> None:
        add_x = 1.0 if rule.flag & 1 else 0.0
        add_z = 1.0 if rule.flag & 2 else 0.0
        height = tile.top_height - tile.bot_height
        texture = tile.wall_texture
        bot = tile.bot_height

        self._plane_x(Vec3(i + add_x, bot, j), height, texture)
        self._plane_z(Vec3(i, bot, j + add_z), height, texture)

        if rule.down_to_top:
            self._plane_diagonal(Vec3(i + 1.0, bot, j), Vec3(-1.0, height, 1.0), texture)
        else:
            self._plane_diagonal(Vec3(i, bot, j), Vec3(1.0, height, 1.0), texture)

    def _plane_x(self, position: Vec3, height: float, texture: float) -> None:
        self._plane(position, Vec3(0.0, height, 1.0), texture)

    def _plane_y(self, position: Vec3, texture: float) -> None:
        self._plane(position, Vec3(1.0, 0.0, 1.0), texture)

    def _plane_z(self, position: Vec3, height: float, texture: float) -> None:
        self._plane(position, Vec3(1.0, height, 0.0), texture)

    def _plane(self, position: Vec3, add: Vec3, texture: float) -> None:
        corners = []
        for corner in range(4):
            first = bool(corner & 1)
            second = bool(corner & 2)
            if add.x == 0.0:
                dx, dy, dz = 0.0, add.y if first else 0.0, add.z if second else 0.0
                u, v = dz + position.z, dy + position.y
            elif add.y == 0.0:
                dx, dy, dz = add.x if first else 0.0, 0.0, add.z if second else 0.0
                u, v = dx + position.x, dz + position.z
            else:
                dx, dy, dz = add.x if first else 0.0, add.y if second else 0.0, 0.0
                u, v = dx + position.x, dy + position.y
            corners.append(Vertex.simple(position.x + dx, position.y + dy, position.z + dz, u, v))
        self._emit_quad(corners, texture)

    def _plane_diagonal(self, position: Vec3, add: Vec3, texture: float) -> None:
        corners = []
        for corner in range(4):
            first = bool(corner & 1)
            second = bool(corner & 2)
            corners.append(
                Vertex.simple(
                    position.x + (add.x if first else 0.0),
                    position.y + (add.y if second else 0.0),
                    position.z + (add.z if first else 0.0),
                    1.0 if first else 0.0,
                    add.y if second else 0.0,
                )
            )
        self._emit_quad(corners, texture)

    def _emit_quad(self, corners: list[Vertex], texture: float) -> None:
        if len(self.vertices) + 4 > self.max_vertices:
            raise BuilderError("not enough room for vertex data")
        if len(self.indices) + 6 > self.max_indices:
            raise BuilderError("not enough room for index data")

        base = len(self.vertices)
        for vertex in reversed(corners):
            vertex.layer_index = float(texture)
            self.vertices.append(vertex)
        self.indices.extend((base + 1, base + 2, base, base + 1, base + 2, base + 3))


def build_chunk(
    world: World,
    x: int,
    y: int,
    max_vertices: int = DEFAULT_MAX_VERTICES,
    max_indices: int = DEFAULT_MAX_INDICES,
) -> MeshData:
    """Build the mesh data of chunk (x, y)."""
    return ChunkBuilder(max_vertices, max_indices).build(world, x, y)


def build_world_meshes(
    world: World,
    max_vertices: int = DEFAULT_MAX_VERTICES,
    max_indices: int = DEFAULT_MAX_INDICES,
) -> list[MeshData]:
    """Build mesh data for every chunk, indexed like ``world.chunks``."""
    builder = ChunkBuilder(max_vertices, max_indices)
    meshes: list[MeshData] = [MeshData() for _ in range(NUM_CHUNKS * NUM_CHUNKS)]
    for x in range(NUM_CHUNKS):
        for y in range(NUM_CHUNKS):
            meshes[x + y * NUM_CHUNKS] = builder.build(world, x, y)
    return meshes