"""Game state, the main loop and the program entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Sequence

from tilequake.builder import build_world_meshes
from tilequake.entity import Entity
from tilequake.matrix import Mat4
from tilequake.player import create_player
from tilequake.render import clear, present
from tilequake.world import CHUNK_SIZE, Tile, WallType, World

MAX_TAGS = 64
MAX_ENTITIES = 256
TARGET_FPS = 165

VERTEX_SHADER_PATH = Path("res/shaders/octree.vs")
FRAGMENT_SHADER_PATH = Path("res/shaders/octree.fs")
TILE_TEXTURE_FILES = ("floor.png", "wall.png")
TILE_TEXTURE_SIZE = 64


def create_default_world() -> World:
    """Return the starting level: an open room with a small staircase."""
    world = World()
    ground = Tile(
        bot_height=0.0,
        top_height=4.0,
        bot_texture=0,
        top_texture=0,
        wall_texture=1,
        bot_window_texture=1,
        top_window_texture=1,
        wall_type=WallType.NONE,
    )
    for chunk in world.chunks:
        chunk.tiles = [ground] * (CHUNK_SIZE * CHUNK_SIZE)

    for step in range(1, 5):
        world.edit_tile(
            5 + step,
            5,
            Tile(
                bot_height=step / 8.0,
                top_height=2.0,
                bot_texture=0,
                top_texture=0,
                wall_texture=1,
                bot_window_texture=1,
                top_window_texture=1,
                wall_type=WallType.NONE,
            ),
        )

    world.collision_layer = 1
    return world


class Game:
    """The world, its entities and the camera driven by a context."""

    def __init__(self, context: Any, world: Optional[World] = None) -> None:
        self.context = context
        self.world = world if world is not None else create_default_world()
        self.entities = [Entity() for _ in range(MAX_ENTITIES)]
        self.tags = [False] * MAX_TAGS

        context.set_fps(TARGET_FPS)
        self.view = Mat4.translation(-4.0, -0.5, -4.0)
        self.projection = Mat4.perspective(16.0 / 9.0, 3.14 / 4, 100.0, 0.2)

    def _load_resources(self) -> None:
        """Upload chunk meshes, the world shader and tile textures to the GPU."""
        from tilequake.mesh import Mesh
        from tilequake.shader import Shader
        from tilequake.texture import TextureArray

        for chunk, data in zip(self.world.chunks, build_world_meshes(self.world)):
            chunk.mesh = Mesh(data)

        self.world.shader = Shader(
            VERTEX_SHADER_PATH.read_text(),
            FRAGMENT_SHADER_PATH.read_text(),
        )
        textures = TextureArray(TILE_TEXTURE_SIZE, TILE_TEXTURE_SIZE)
        for filename in TILE_TEXTURE_FILES:
            textures.load(filename)
        self.world.tile_textures = textures

    def add_entity(self) -> Entity:
        """Claim a free entity slot; raises RuntimeError when all are taken."""
        for entity in self.entities:
            if entity.unused:
                entity.reset()
                entity.unused = False
                return entity
        raise RuntimeError("no free entity slot")

    def update(self) -> None:
        """Advance every active entity by the context's frame time."""
        dt = self.context.dt
        for entity in self.entities:
            if not entity.unused:
                entity.update(self, dt)

    def render(self) -> None:
        clear(0x00, 0x00, 0x00, 0xFF)
        self.world.render(self.view, self.projection)
        present(self.context)

    def run(self) -> None:
        """Loop until the context asks to quit."""
        while not self.context.quit:
            self.context.poll_events()
            self.update()
            self.render()
            self.context.delay_fps()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window, place the player and run the game."""
    from tilequake.context import Context

    with Context("oi", 1280, 720) as context:
        game = Game(context)
        game._load_resources()
        create_player(game.add_entity())
        game.run()
    return 0