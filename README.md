# tilequake

A small first person engine built around a tile grid. The world is a
256 × 256 grid of tiles split into 4 × 4 chunks of 64 × 64 tiles. Each tile
has a floor height, a ceiling height, textures and an optional wall shape:
a full block, a half block or a diagonal. Chunk meshes of textured quads are
built from the tiles. Entities move through the world axis by axis with box
collision against floors, ceilings, walls and the world's edge; small steps
up are climbed through a floor tolerance.

## Installing

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Running

```
tilequake
```

This opens a 1280 × 720 OpenGL 3.3 window titled "oi", builds the default
world (an open room with a four-step staircase), uploads the chunk meshes,
adds a player and runs the loop at up to 165 frames per second until the
window is closed.

Controls:

| Key   | Action                    |
|-------|---------------------------|
| W / S | move forward / back       |
| A / D | turn left / right         |
| Space | jump (when on the floor)  |

The world shader is read from `res/shaders/octree.vs` and
`res/shaders/octree.fs`, and the tile textures from `floor.png` and
`wall.png` (64 × 64 pixels each). All of these paths are relative to the
working directory.

## Using the pieces

The maths, collision, world and mesh-building code needs no window:

```python
from tilequake.vector import Vec3
from tilequake.world import Tile, WallType
from tilequake.game import create_default_world
from tilequake.builder import build_chunk

world = create_default_world()
world.edit_tile(10, 10, Tile(bot_height=0.0, top_height=4.0, wall_type=WallType.BLOCK))

blocked = world.check_collision_box(Vec3(9.8, 0.5, 9.8), Vec3(0.5, 0.5, 0.5))

mesh_data = build_chunk(world, 0, 0)
print(mesh_data.num_vertices, mesh_data.num_indices)
```

- `tilequake.vector.Vec3`: a mutable 3D vector with `+`, `-`, `*`, `/`,
  `dot`, `cross`, `size`, `normalized` and `clip`.
- `tilequake.matrix.Mat4`: an immutable row-major 4x4 matrix with
  `identity`, `translation`, `scale`, `rotation_x/y/z` and `perspective`
  constructors, composed with `@` (for example `rotation @ camera`) and
  applied to points with `transform_point`.
- `tilequake.box`: `check_collision` for two axis-aligned boxes and
  `check_collision_semi_space` for a box against a half-space.
- `tilequake.world`: `World`, `Chunk`, `Tile` and `WallType`;
  `World.get_tile` returns `None` outside the grid and `World.edit_tile`
  returns `False` there.
- `tilequake.builder`: `ChunkBuilder`, `build_chunk` and
  `build_world_meshes` produce `MeshData`; a chunk that needs more vertices
  or indices than the limits allow raises `BuilderError`.
- `tilequake.geometry`: `Vertex`, `MeshData` and `unit_tetrahedron`.
- `tilequake.entity.Entity` and `tilequake.player`: entity movement and the
  player's input handling and camera.
- `tilequake.mesh`, `tilequake.shader`, `tilequake.texture`,
  `tilequake.render` and `tilequake.context`: the OpenGL side, through
  pyglet. These need a window and a GL context.

## What it does not do

- No shaders or textures are shipped; the `tilequake` command fails unless
  the files listed above are present in the working directory.
- There is no level format: the only world is the one `create_default_world`
  builds, and others must be assembled in code with `World.edit_tile`.
- Only the movement keys and jump do anything. The crawl and fire inputs
  have key bindings but no effect, mouse motion is recorded on the context
  but not used, and controller buttons have no default mapping.
- `Texture.render` accepts a `flip` argument that has no effect.
- There is no sound, enemies, weapons or other game logic beyond moving the
  player through the world.