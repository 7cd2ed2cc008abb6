"""GPU meshes built from vertex data."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from tilequake.geometry import MeshData, Vertex
from tilequake.shader import Shader

FLOATS_PER_VERTEX = 12
VERTEX_STRIDE = FLOATS_PER_VERTEX * 4

# (location, components, float offset) of each vertex attribute.
_ATTRIBUTES = ((0, 3, 0), (1, 2, 3), (2, 3, 5), (3, 3, 8), (4, 1, 11))


def _gl():
    from pyglet import gl

    return gl


def _generate(gen) -> int:
    gl = _gl()
    ids = (gl.GLuint * 1)()
    gen(1, ids)
    return ids[0]


def _delete(delete, name: int) -> None:
    gl = _gl()
    delete(1, (gl.GLuint * 1)(name))


def pack_vertices(vertices: Iterable[Vertex]) -> np.ndarray:
    """Pack vertices into an (n, 12) float32 array in the GPU attribute layout."""
    rows = [
        (*v.position, *v.uv, *v.normal, *v.color, v.layer_index)
        for v in vertices
    ]
    return np.array(rows, dtype=np.float32).reshape(-1, FLOATS_PER_VERTEX)


class Mesh:
    """Vertex array, vertex buffer and element buffer on the GPU."""

    def __init__(self, data: MeshData) -> None:
        gl = _gl()
        self.num_indices = data.num_indices
        vertices = np.ascontiguousarray(pack_vertices(data.vertices))
        indices = np.ascontiguousarray(np.array(data.indices, dtype=np.uint32))

        self.vao = _generate(gl.glGenVertexArrays)
        self.vbo = _generate(gl.glGenBuffers)
        self.ebo = _generate(gl.glGenBuffers)

        gl.glBindVertexArray(self.vao)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self.vbo)
        gl.glBufferData(gl.GL_ARRAY_BUFFER, vertices.nbytes, vertices.tobytes(), gl.GL_STATIC_DRAW)
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, self.ebo)
        gl.glBufferData(gl.GL_ELEMENT_ARRAY_BUFFER, indices.nbytes, indices.tobytes(), gl.GL_STATIC_DRAW)

        for location, count, offset in _ATTRIBUTES:
            gl.glVertexAttribPointer(location, count, gl.GL_FLOAT, gl.GL_FALSE, VERTEX_STRIDE, offset * 4)
            gl.glEnableVertexAttribArray(location)

        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)
        gl.glBindVertexArray(0)

    def render(self, shader: Shader) -> None:
        gl = _gl()
        shader.use()
        gl.glBindVertexArray(self.vao)
        gl.glDrawElements(gl.GL_TRIANGLES, self.num_indices, gl.GL_UNSIGNED_INT, 0)
        gl.glBindVertexArray(0)

    def destroy(self) -> None:
        gl = _gl()
        _delete(gl.glDeleteBuffers, self.vbo)
        _delete(gl.glDeleteBuffers, self.ebo)
        _delete(gl.glDeleteVertexArrays, self.vao)