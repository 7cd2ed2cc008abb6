"""Three-component float vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass
class Vec3:
    """A mutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, m: float) -> Vec3:
        if not isinstance(m, Real):
            return NotImplemented
        return Vec3(self.x * m, self.y * m, self.z * m)

    __rmul__ = __mul__

    def __truediv__(self, m: float) -> Vec3:
        if not isinstance(m, Real):
            return NotImplemented
        if m == 0:
            raise ZeroDivisionError("cannot divide a vector by zero")
        return Vec3(self.x / m, self.y / m, self.z / m)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"{self.x:f} {self.y:f} {self.z:f}"

    def copy(self) -> Vec3:
        """Return an independent copy of this vector."""
        return Vec3(self.x, self.y, self.z)

    def normalized(self) -> Vec3:
        """Return the unit vector; raises ZeroDivisionError for a zero vector."""
        return self / self.size()

    def clip(self, clip: Vec3) -> Vec3:
        """Remove the component of this vector along ``clip``."""
        return self - clip * self.dot(clip)

    def size_sqr(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def size(self) -> float:
        return math.sqrt(self.size_sqr())

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )