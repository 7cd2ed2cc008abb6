"""Frame clearing and presentation."""

from __future__ import annotations

from typing import Any


def normalized_color(r: int, g: int, b: int, a: int) -> tuple[float, float, float, float]:
    """Convert 8-bit colour channels to floats in [0, 1]."""
    channels = (r, g, b, a)
    if any(not 0 <= c <= 255 for c in channels):
        raise ValueError("colour channels must be between 0 and 255")
    return tuple(c / 255.0 for c in channels)


def clear(r: int, g: int, b: int, a: int) -> None:
    """Clear colour and depth buffers to the given colour."""
    from pyglet import gl

    gl.glClearColor(*normalized_color(r, g, b, a))
    gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)


def present(context: Any) -> None:
    """Swap the context window's buffers."""
    context.window.flip()