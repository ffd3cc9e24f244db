"""
The operation set every terminal backend implements.

A backend owns one handle to the process's terminal (an escape-sequence
stream or a console handle) and exposes the same ten operations on top of it.
Callers normally reach a backend through :class:`term_console.Console`.
"""

import logging
import time
from dataclasses import dataclass
from typing import Iterator, Protocol, runtime_checkable

from .colors import NO_CHANGE

logger = logging.getLogger("term_console")

#: Returned by ``wait_key`` on the ANSI backend when raw input is unavailable.
EOF = -1
#: Returned by ``wait_key`` on the native backend when raw input is unavailable.
NO_INPUT = 0


@dataclass(frozen=True)
class Size:
    """Terminal dimensions in character cells."""
    width: int
    height: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.width, self.height))


@dataclass(frozen=True)
class Position:
    """Zero-based cursor position (x is the column, y the row)."""
    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.x, self.y))


@runtime_checkable
class TerminalBackend(Protocol):
    """Capability interface shared by the ANSI and native backends."""

    def dimensions(self) -> Size: ...

    def clear(self) -> None: ...

    def goto(self, x: int, y: int) -> None: ...

    def where(self) -> Position: ...

    def set_foreground(self, color: int) -> None: ...

    def set_background(self, color: int) -> None: ...

    def set_colors(self, fg: int, bg: int = NO_CHANGE) -> None: ...

    def show_cursor(self, visible: bool = True) -> None: ...

    def wait_key(self, prompt: str = "") -> int: ...

    def pause(self, milliseconds: int) -> None: ...


def check_color(color):
    """Reject ``NO_CHANGE`` where a real color or ``RESET`` is required."""
    if color == NO_CHANGE:
        raise ValueError("NO_CHANGE is only valid as the background of set_colors()")


def sleep_ms(milliseconds):
    """Suspend the calling thread for ``milliseconds``, yielding the CPU."""
    if milliseconds > 0:
        time.sleep(milliseconds / 1000)
