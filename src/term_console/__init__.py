"""
Terminal Console Library

A minimal cross-platform terminal control layer: terminal size, cursor
movement and visibility, 16-color foreground/background, screen clearing,
single-keypress input and pauses. ANSI terminals are driven with escape
sequences through the Blessed library, the Windows console through its
native API.
"""

from . import colors
from .ansi_backend import AnsiBackend
from .backend import EOF, NO_INPUT, Position, Size, TerminalBackend
from .colors import BRIGHT, NO_CHANGE, RESET
from .native_backend import NativeBackend
from .term_console import (
    Console,
    default_backend,
    get_console,
    set_console,
    dimensions,
    width,
    height,
    clear,
    goto,
    where,
    set_foreground,
    set_background,
    set_colors,
    show_cursor,
    wait_key,
    pause,
)

__all__ = [
    'colors',
    'AnsiBackend',
    'NativeBackend',
    'TerminalBackend',
    'Console',
    'Size',
    'Position',
    'EOF',
    'NO_INPUT',
    'BRIGHT',
    'NO_CHANGE',
    'RESET',
    'default_backend',
    'get_console',
    'set_console',
    'dimensions',
    'width',
    'height',
    'clear',
    'goto',
    'where',
    'set_foreground',
    'set_background',
    'set_colors',
    'show_cursor',
    'wait_key',
    'pause',
]

__version__ = '0.1.0'
