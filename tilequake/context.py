"""Window, input and frame timing."""

from __future__ import annotations

import io
import time
from enum import IntEnum
from typing import BinaryIO


class Input(IntEnum):
    LEFT = 0
    DOWN = 1
    UP = 2
    RIGHT = 3
    JUMP = 4
    CRAWL = 5
    FIRE1 = 6
    FIRE2 = 7


def default_key_mapping() -> dict[Input, str]:
    """Return the default input-to-key-name mapping."""
    return {
        Input.LEFT: "A",
        Input.RIGHT: "D",
        Input.UP: "W",
        Input.DOWN: "S",
        Input.FIRE1: "J",
        Input.FIRE2: "K",
        Input.JUMP: "SPACE",
        Input.CRAWL: "LSHIFT",
    }


def _now_ms() -> int:
    return int(time.monotonic() * 1000)


def _frame_delay(delta_ms: int, min_frame_ms: int) -> int:
    """Milliseconds still to wait to keep a frame at least ``min_frame_ms`` long."""
    if min_frame_ms and delta_ms < min_frame_ms:
        return min_frame_ms - delta_ms
    return 0


def _fps_to_frame_ms(fps: int) -> int:
    if fps <= 0:
        raise ValueError("fps must be positive")
    return 1000 // fps


class Context:
    """An OpenGL 3.3 window with keyboard, mouse and controller input."""

    def __init__(self, title: str, width: int, height: int) -> None:
        import pyglet
        from pyglet import gl
        from pyglet.window import key

        config = gl.Config(major_version=3, minor_version=3, forward_compatible=True,
                           double_buffer=True, depth_size=24)
        self.window = pyglet.window.Window(width, height, caption=title, resizable=True, config=config)
        self.width = width
        self.height = height
        gl.glViewport(0, 0, width, height)

        self.tick = 0
        self.delta_tick = 0
        self.dt = 0.0
        self.min_time_frame = 0
        self.mouse_xrel = 0
        self.mouse_yrel = 0
        self.quit = False
        self.data: BinaryIO | None = None
        self.key_mapping = default_key_mapping()
        self.button_mapping: dict[Input, str] = {}
        self.controller = None

        self._keys = key.KeyStateHandler()
        self._key_module = key
        self.window.push_handlers(self._keys)
        self._motion = [0, 0]

        @self.window.event
        def on_close():
            self.quit = True
            return True

        @self.window.event
        def on_resize(w, h):
            gl.glViewport(0, 0, w, h)

        @self.window.event
        def on_mouse_motion(x, y, dx, dy):
            self._motion = [dx, dy]

        self.open_game_controller(0)

        gl.glEnable(gl.GL_BLEND)
        gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glDepthFunc(gl.GL_LESS)

    def get_key(self, key: Input) -> bool:
        name = self.key_mapping.get(Input(key))
        if name is not None and self._keys[getattr(self._key_module, name)]:
            return True
        button = self.button_mapping.get(Input(key))
        if self.controller is not None and button is not None:
            return bool(getattr(self.controller, button, False))
        return False

    def set_fps(self, fps: int) -> None:
        self.min_time_frame = _fps_to_frame_ms(fps)

    def open_game_controller(self, index: int) -> bool:
        import pyglet

        controllers = pyglet.input.get_controllers()
        if index >= len(controllers):
            self.controller = None
            return False
        self.controller = controllers[index]
        self.controller.open()
        return True

    def set_data_from_bytes(self, data: bytes) -> None:
        self.data = io.BytesIO(bytes(data))

    def set_data_from_file(self, filename: str) -> None:
        self.data = open(filename, "rb")

    def delay_fps(self) -> None:
        wait = _frame_delay(_now_ms() - self.tick, self.min_time_frame)
        if wait:
            time.sleep(wait / 1000)
        new_tick = _now_ms()
        self.delta_tick = new_tick - self.tick
        self.dt = 0.001 * self.delta_tick
        self.tick = new_tick

    def poll_events(self) -> None:
        self._motion = [0, 0]
        self.window.dispatch_events()
        self.mouse_xrel, self.mouse_yrel = self._motion

    def close(self) -> None:
        if self.data is not None:
            self.data.close()
            self.data = None
        if self.controller is not None:
            self.controller.close()
            self.controller = None
        self.window.close()

    def __enter__(self) -> Context:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()