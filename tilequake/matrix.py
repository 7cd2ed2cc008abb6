"""4x4 row-major float matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

from tilequake.vector import Vec3


@dataclass(frozen=True)
class Mat4:
    """An immutable 4x4 matrix stored row by row."""

    values: tuple[float, ...] = field(default=(0.0,) * 16)

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.values)
        if len(values) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(values)}")
        object.__setattr__(self, "values", values)

    def __getitem__(self, index: int) -> float:
        return self.values[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __add__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        return Mat4(tuple(a + b for a, b in zip(self.values, other.values)))

    def __sub__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        return Mat4(tuple(a - b for a, b in zip(self.values, other.values)))

    def __matmul__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        a, b = self.values, other.values
        return Mat4(
            tuple(
                sum(a[row * 4 + k] * b[k * 4 + col] for k in range(4))
                for row in range(4)
                for col in range(4)
            )
        )

    def transform_point(self, vec: Vec3) -> Vec3:
        """Apply the upper 3x4 part of the matrix to a point."""
        m = self.values
        return Vec3(
            m[0] * vec.x + m[1] * vec.y + m[2] * vec.z + m[3],
            m[4] * vec.x + m[5] * vec.y + m[6] * vec.z + m[7],
            m[8] * vec.x + m[9] * vec.y + m[10] * vec.z + m[11],
        )

    @classmethod
    def _with(cls, entries: dict[int, float]) -> Mat4:
        values = [0.0] * 16
        for index, value in entries.items():
            values[index] = value
        return cls(tuple(values))

    @classmethod
    def zero(cls) -> Mat4:
        return cls()

    @classmethod
    def identity(cls) -> Mat4:
        return cls._with({0: 1.0, 5: 1.0, 10: 1.0, 15: 1.0})

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> Mat4:
        return cls._with({0: 1.0, 5: 1.0, 10: 1.0, 15: 1.0, 3: x, 7: y, 11: z})

    @classmethod
    def scale(cls, x: float, y: float, z: float) -> Mat4:
        return cls._with({0: x, 5: y, 10: z, 15: 1.0})

    @classmethod
    def rotation_x(cls, angle: float) -> Mat4:
        c, s = math.cos(angle), math.sin(angle)
        return cls._with({0: 1.0, 15: 1.0, 5: c, 6: -s, 9: s, 10: c})

    @classmethod
    def rotation_y(cls, angle: float) -> Mat4:
        c, s = math.cos(angle), math.sin(angle)
        return cls._with({0: c, 2: s, 5: 1.0, 8: -s, 10: c, 15: 1.0})

    @classmethod
    def rotation_z(cls, angle: float) -> Mat4:
        c, s = math.cos(angle), math.sin(angle)
        return cls._with({0: c, 1: -s, 4: s, 5: c, 10: 1.0, 15: 1.0})

    @classmethod
    def perspective(cls, aspect_ratio: float, fov: float, far: float, near: float) -> Mat4:
        s = 1.0 / math.tan(0.5 * fov)
        a1 = -(far + near) / (far - near)
        a2 = -2.0 * far * near / (far - near)
        return cls._with({0: s / aspect_ratio, 5: s, 10: a1, 11: a2, 14: -1.0})