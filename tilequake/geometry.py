"""CPU-side vertex and mesh data."""

from __future__ import annotations

from dataclasses import dataclass, field

from tilequake.vector import Vec3


@dataclass
class Vertex:
    """A single vertex with position, texture coordinates, normal, colour and texture layer."""

    position: Vec3 = field(default_factory=Vec3)
    uv: tuple[float, float] = (0.0, 0.0)
    normal: Vec3 = field(default_factory=Vec3)
    color: Vec3 = field(default_factory=Vec3)
    layer_index: float = 0.0

    @classmethod
    def simple(cls, x: float, y: float, z: float, u: float, v: float) -> Vertex:
        """Build a vertex with only a position and texture coordinates set."""
        return cls(position=Vec3(x, y, z), uv=(u, v))


@dataclass
class MeshData:
    """Vertices and triangle indices ready to be uploaded to the GPU."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    @property
    def num_indices(self) -> int:
        return len(self.indices)


def unit_tetrahedron() -> MeshData:
    """Return a small coloured tetrahedron centred on the origin."""
    vertices = [
        Vertex.simple(+0.5, +0.0, -0.35, 0.0, 0.0),
        Vertex.simple(-0.5, +0.0, -0.35, 0.0, 1.0),
        Vertex.simple(+0.0, +0.5, +0.35, 1.0, 0.0),
        Vertex.simple(+0.0, -0.5, +0.35, 1.0, 1.0),
    ]
    colors = [
        Vec3(1.0, 0.0, 0.0),
        Vec3(0.0, 1.0, 0.0),
        Vec3(0.0, 0.0, 1.0),
        Vec3(1.0, 1.0, 1.0),
    ]
    for vertex, color in zip(vertices, colors):
        vertex.color = color

    indices = [
        0, 1, 2,
        0, 1, 3,
        1, 2, 3,
        2, 0, 3,
    ]
    return MeshData(vertices, indices)