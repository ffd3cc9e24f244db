"""
Console facade and the process-wide default console.

A :class:`Console` wraps exactly one backend, chosen once from the host
platform unless one is passed in. The module-level functions forward to a
default console created on first use, so small programs can call
``goto(10, 5)`` or ``wait_key("Press a key")`` without building anything.
"""

import sys
from typing import Optional

from .backend import Position, Size, TerminalBackend
from .colors import NO_CHANGE


def default_backend(platform=None) -> TerminalBackend:
    """Create the backend for ``platform`` (defaults to ``sys.platform``)."""
    platform = sys.platform if platform is None else platform
    if platform.startswith("win"):
        from .native_backend import NativeBackend
        return NativeBackend()
    from .ansi_backend import AnsiBackend
    return AnsiBackend()


class Console:
    """Terminal control operations bound to one backend.

    Attributes:
        backend: The TerminalBackend every call is forwarded to
    """

    def __init__(self, backend: Optional[TerminalBackend] = None):
        if backend is None:
            backend = default_backend()
        elif not isinstance(backend, TerminalBackend):
            raise TypeError(
                f"{type(backend).__name__} does not implement TerminalBackend"
            )
        self.backend = backend

    def dimensions(self) -> Size:
        """Current (width, height) of the terminal, queried live."""
        return self.backend.dimensions()

    def width(self) -> int:
        return self.backend.dimensions().width

    def height(self) -> int:
        return self.backend.dimensions().height

    def clear(self):
        """Erase the screen and put the cursor at (0, 0)."""
        self.backend.clear()

    def goto(self, x: int, y: int):
        """Move the cursor to column ``x``, row ``y`` (no bounds checking)."""
        self.backend.goto(x, y)

    def where(self) -> Position:
        """Current cursor position; always (0, 0) on ANSI terminals."""
        return self.backend.where()

    def set_foreground(self, color: int):
        self.backend.set_foreground(color)

    def set_background(self, color: int):
        self.backend.set_background(color)

    def set_colors(self, fg: int, bg: int = NO_CHANGE):
        """Set the foreground, and the background too unless ``bg`` is NO_CHANGE."""
        self.backend.set_colors(fg, bg)

    def show_cursor(self, visible: bool = True):
        self.backend.show_cursor(visible)

    def wait_key(self, prompt: str = "") -> int:
        """Show ``prompt`` and block until one key is pressed.

        Returns:
            The key code, or the backend's sentinel if raw input is unavailable
        """
        return self.backend.wait_key(prompt)

    def pause(self, milliseconds: int):
        self.backend.pause(milliseconds)


_console: Optional[Console] = None


def get_console() -> Console:
    """Return the process-wide console, creating it on first use."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Optional[Console]):
    """Replace the process-wide console (None drops it so the next call recreates it)."""
    global _console
    _console = console


def dimensions() -> Size:
    return get_console().dimensions()


def width() -> int:
    return get_console().width()


def height() -> int:
    return get_console().height()


def clear():
    get_console().clear()


def goto(x: int, y: int):
    get_console().goto(x, y)


def where() -> Position:
    return get_console().where()


def set_foreground(color: int):
    get_console().set_foreground(color)


def set_background(color: int):
    get_console().set_background(color)


def set_colors(fg: int, bg: int = NO_CHANGE):
    get_console().set_colors(fg, bg)


def show_cursor(visible: bool = True):
    get_console().show_cursor(visible)


def wait_key(prompt: str = "") -> int:
    return get_console().wait_key(prompt)


def pause(milliseconds: int):
    get_console().pause(milliseconds)
