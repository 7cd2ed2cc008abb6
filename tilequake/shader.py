"""GLSL shader programs."""

from __future__ import annotations

from tilequake.matrix import Mat4


class ShaderError(RuntimeError):
    """Raised when a shader fails to compile or link."""


def _column_major(mat: Mat4) -> tuple[float, ...]:
    """Return the row-major matrix values reordered column by column."""
    values = mat.values
    return tuple(values[row * 4 + col] for col in range(4) for row in range(4))


class Shader:
    """A linked vertex and fragment shader program."""

    def __init__(self, vertex_src: str, fragment_src: str) -> None:
        from pyglet.graphics import shader as glsl

        errors = []
        stages = []
        for label, kind, src in (
            ("vertex", "vertex", vertex_src),
            ("fragment", "fragment", fragment_src),
        ):
            try:
                stages.append(glsl.Shader(src, kind))
            except glsl.ShaderException as exc:
                errors.append(f"error loading {label} shader\n{exc}")

        if errors:
            for stage in stages:
                stage.delete()
            raise ShaderError("\n".join(errors))

        try:
            self._program = glsl.ShaderProgram(*stages)
        except glsl.ShaderException as exc:
            raise ShaderError(f"error linking shader program\n{exc}") from exc
        finally:
            for stage in stages:
                stage.delete()
        self.id = self._program.id

    def _has_uniform(self, name: str) -> bool:
        return self._program is not None and name in self._program.uniforms

    def _set(self, name: str, value) -> bool:
        if not self._has_uniform(name):
            return False
        self.use()
        self._program[name] = value
        return True

    def use(self) -> None:
        if self._program is not None:
            self._program.use()

    def set_uniform_1i(self, name: str, i: int) -> bool:
        return self._set(name, int(i))

    def set_uniform_3f(self, name: str, x: float, y: float, z: float) -> bool:
        return self._set(name, (float(x), float(y), float(z)))

    def set_uniform_4f(self, name: str, x: float, y: float, z: float, w: float) -> bool:
        return self._set(name, (float(x), float(y), float(z), float(w)))

    def set_uniform_mat4(self, name: str, mat: Mat4) -> bool:
        return self._set(name, _column_major(mat))

    def destroy(self) -> None:
        if self._program is not None:
            self._program.delete()
        self._program = None
        self.id = 0