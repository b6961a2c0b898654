"""Application window with keyboard state and a mouse-look cursor."""

from __future__ import annotations

import time

GL_VERSION = (3, 3)
CLEAR_COLOR = (0.25, 0.25, 0.25, 1.0)
MSAA_SAMPLES = 4


def _key_symbol(key: str) -> int:
    """Map a one-character key name to its keyboard symbol."""
    if len(key) != 1 or not key.isalnum() or not key.isascii():
        raise ValueError(f"unsupported key name {key!r}")
    return ord(key.lower())


class _KeyState:
    """Set of keys currently held down."""

    def __init__(self) -> None:
        self._down: set[int] = set()

    def press(self, symbol: int) -> None:
        self._down.add(symbol)

    def release(self, symbol: int) -> None:
        self._down.discard(symbol)

    def is_down(self, symbol: int) -> bool:
        return symbol in self._down


class _VirtualCursor:
    """Cursor position accumulated from relative motion, y growing downwards."""

    def __init__(self) -> None:
        self.x = 0.0
        self.y = 0.0

    def move(self, dx: float, dy: float) -> None:
        # Motion events report y growing upwards.
        self.x += dx
        self.y -= dy

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)


class Window:
    """A desktop window carrying an OpenGL 3.3 core context."""

    def __init__(self, width: int, height: int, title: str, resizable: bool) -> None:
        import pyglet

        self.width = width
        self.height = height
        self._keys = _KeyState()
        self._cursor = _VirtualCursor()
        self._closing = False
        self._start = time.perf_counter()

        major, minor = GL_VERSION
        base = dict(
            major_version=major,
            minor_version=minor,
            forward_compatible=True,
            double_buffer=True,
            depth_size=24,
        )
        try:
            config = pyglet.gl.Config(sample_buffers=1, samples=MSAA_SAMPLES, **base)
            self._win = pyglet.window.Window(
                width, height, title, resizable=resizable, config=config
            )
        except pyglet.window.NoSuchConfigException:
            self._win = pyglet.window.Window(
                width, height, title, resizable=resizable, config=pyglet.gl.Config(**base)
            )

        window = self

        @self._win.event
        def on_key_press(symbol, modifiers):
            window._keys.press(symbol)
            return pyglet.event.EVENT_HANDLED

        @self._win.event
        def on_key_release(symbol, modifiers):
            window._keys.release(symbol)

        @self._win.event
        def on_mouse_motion(x, y, dx, dy):
            window._cursor.move(dx, dy)

        @self._win.event
        def on_mouse_drag(x, y, dx, dy, buttons, modifiers):
            window._cursor.move(dx, dy)

        @self._win.event
        def on_close():
            window._closing = True
            return pyglet.event.EVENT_HANDLED

    def should_close(self) -> bool:
        """Whether the user asked to close the window."""
        return self._closing

    def poll_events(self) -> None:
        """Process pending window events."""
        self._win.dispatch_events()

    def handle_resize(self) -> None:
        """Track the framebuffer size and fit the viewport to it."""
        from pyglet import gl

        self.width, self.height = self._win.get_framebuffer_size()
        gl.glViewport(0, 0, self.width, self.height)

    def clear(self) -> None:
        """Clear colour and depth buffers."""
        from pyglet import gl

        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        gl.glClearColor(*CLEAR_COLOR)

    def swap_buffers(self) -> None:
        self._win.flip()

    def get_time(self) -> float:
        """Seconds since the window was created."""
        return time.perf_counter() - self._start

    def show_cursor(self, show: bool) -> None:
        """Show the cursor, or hide and capture it for mouse look."""
        self._win.set_exclusive_mouse(not show)

    def key_pressed(self, key: str) -> bool:
        return self._keys.is_down(_key_symbol(key))

    def cursor_pos(self) -> tuple[float, float]:
        return self._cursor.position

    def close(self) -> None:
        self._win.close()

    @property
    def native(self):
        """The underlying toolkit window."""
        return self._win