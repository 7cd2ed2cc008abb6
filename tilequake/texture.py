"""Textures and texture arrays."""

from __future__ import annotations

from tilequake.geometry import MeshData, Vertex
from tilequake.matrix import Mat4

ARRAY_LAYERS = 64

_VERTEX_SRC = """#version 330 core
layout (location = 0) in vec3 in_pos;
layout (location = 1) in vec2 in_tex_coords;
uniform vec4 offset_tex_coords;
uniform mat4 model;
out vec2 out_tex_coords;
void main() {
gl_Position = model * vec4(in_pos, 1.0f);
gl_Position.y *= -1.0f;
gl_Position.z = 0.0f;
out_tex_coords = vec2(
in_tex_coords.x * offset_tex_coords.z + offset_tex_coords.x,
in_tex_coords.y * offset_tex_coords.w + offset_tex_coords.y
);
}
"""

_FRAGMENT_SRC = """#version 330 core
out vec4 FragColor;
in vec2 out_tex_coords;
uniform sampler2D frag_texture;
void main() {
FragColor = texture(frag_texture, out_tex_coords);
}
"""

_defaults = {}


def _gl():
    from pyglet import gl

    return gl


def _new_texture() -> int:
    gl = _gl()
    ids = (gl.GLuint * 1)()
    gl.glGenTextures(1, ids)
    return ids[0]


def _quad() -> MeshData:
    vertices = [
        Vertex.simple(0.0, 0.0, 0.0, 0.0, 0.0),
        Vertex.simple(1.0, 0.0, 0.0, 1.0, 0.0),
        Vertex.simple(0.0, 1.0, 0.0, 0.0, 1.0),
        Vertex.simple(1.0, 1.0, 0.0, 1.0, 1.0),
    ]
    return MeshData(vertices, [0, 1, 3, 0, 2, 3])


def _load_defaults():
    if not _defaults:
        from tilequake.mesh import Mesh
        from tilequake.shader import Shader

        _defaults["shader"] = Shader(_VERTEX_SRC, _FRAGMENT_SRC)
        _defaults["mesh"] = Mesh(_quad())
    return _defaults["shader"], _defaults["mesh"]


def _read_rgba(filename: str) -> tuple[int, int, bytes]:
    """Decode an image file into top-down RGBA rows."""
    import pyglet

    try:
        image = pyglet.image.load(filename)
    except Exception as exc:
        raise OSError(f"Failed to load texture: {filename}") from exc
    data = image.get_image_data()
    return data.width, data.height, data.get_data("RGBA", -data.width * 4)


def cell_offsets(
    cell_id: int, cell_w: int, cell_h: int, num_cells_x: int, width: int, height: int
) -> tuple[float, float, float, float]:
    """Return (u, v, du, dv) of a sprite-sheet cell in texture coordinates."""
    return (
        (cell_id % num_cells_x) * cell_w / width,
        (cell_id // num_cells_x) * cell_h / height,
        cell_w / width,
        cell_h / height,
    )


class TextureArray:
    """A 2D texture array whose layers are filled one image at a time."""

    def __init__(self, w: int, h: int) -> None:
        gl = _gl()
        self.w = w
        self.h = h
        self.size = 0
        self.texture_id = _new_texture()
        gl.glBindTexture(gl.GL_TEXTURE_2D_ARRAY, self.texture_id)
        gl.glTexImage3D(gl.GL_TEXTURE_2D_ARRAY, 0, gl.GL_RGBA8, w, h, ARRAY_LAYERS, 0,
                        gl.GL_RGBA, gl.GL_UNSIGNED_BYTE, None)
        for param, value in (
            (gl.GL_TEXTURE_MIN_FILTER, gl.GL_NEAREST),
            (gl.GL_TEXTURE_MAG_FILTER, gl.GL_NEAREST),
            (gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT),
            (gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT),
        ):
            gl.glTexParameteri(gl.GL_TEXTURE_2D_ARRAY, param, value)
        gl.glBindTexture(gl.GL_TEXTURE_2D_ARRAY, 0)

    def load(self, filename: str) -> None:
        """Upload an image into the next free layer; raises OSError if unreadable."""
        gl = _gl()
        gl.glBindTexture(gl.GL_TEXTURE_2D_ARRAY, self.texture_id)
        _, _, pixels = _read_rgba(filename)
        gl.glTexSubImage3D(gl.GL_TEXTURE_2D_ARRAY, 0, 0, 0, self.size, self.w, self.h, 1,
                           gl.GL_RGBA, gl.GL_UNSIGNED_BYTE, pixels)
        self.size += 1

    def use(self, unit: int) -> None:
        gl = _gl()
        gl.glActiveTexture(gl.GL_TEXTURE0 + unit)
        gl.glBindTexture(gl.GL_TEXTURE_2D_ARRAY, self.texture_id)


class Texture:
    """A sprite sheet divided into equal cells."""

    def __init__(self, filename: str, cell_w: int, cell_h: int) -> None:
        _load_defaults()
        gl = _gl()
        width, height, pixels = _read_rgba(filename)

        self.texture_id = _new_texture()
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.texture_id)
        for param, value in (
            (gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT),
            (gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT),
            (gl.GL_TEXTURE_MIN_FILTER, gl.GL_NEAREST),
            (gl.GL_TEXTURE_MAG_FILTER, gl.GL_NEAREST),
        ):
            gl.glTexParameteri(gl.GL_TEXTURE_2D, param, value)
        gl.glTexImage2D(gl.GL_TEXTURE_2D, 0, gl.GL_RGBA, width, height, 0,
                        gl.GL_RGBA, gl.GL_UNSIGNED_BYTE, pixels)
        gl.glGenerateMipmap(gl.GL_TEXTURE_2D)
        gl.glBindTexture(gl.GL_TEXTURE_2D, 0)

        self.cell_w = cell_w
        self.cell_h = cell_h
        self.num_cells_x = width // cell_w
        self.max_id = height // cell_h * self.num_cells_x
        self.w = width
        self.h = height

    def use(self, unit: int) -> None:
        gl = _gl()
        gl.glActiveTexture(gl.GL_TEXTURE0 + unit)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.texture_id)

    def model_matrix(self, x: float, y: float, screen_width: int, screen_height: int) -> Mat4:
        """Map the unit quad to a cell-sized rectangle at pixel (x, y) in clip space."""
        model = Mat4.identity()
        model = Mat4.scale(self.cell_w, self.cell_h, 1.0) @ model
        model = Mat4.translation(float(x), float(y), 0.0) @ model
        model = Mat4.scale(2.0 / screen_width, 2.0 / screen_height, 1.0) @ model
        return Mat4.translation(-1.0, -1.0, 0.0) @ model

    def render(self, x: int, y: int, cell_id: int, flip: int, screen_width: int, screen_height: int) -> None:
        """Draw one cell at pixel (x, y); ``flip`` is accepted but has no effect."""
        shader, mesh = _load_defaults()
        shader.set_uniform_mat4("model", self.model_matrix(x, y, screen_width, screen_height))
        shader.set_uniform_4f(
            "offset_tex_coords",
            *cell_offsets(cell_id, self.cell_w, self.cell_h, self.num_cells_x, self.w, self.h),
        )
        self.use(0)
        shader.set_uniform_1i("frag_texture", 0)
        mesh.render(shader)