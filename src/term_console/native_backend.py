"""
Windows console backend.

Dimensions, cursor position and colors come from the console screen-buffer
info; colors are written as a single attribute byte with the foreground in
the low nibble and the background in the high nibble.
"""

from .backend import NO_INPUT, Position, Size, check_color, logger, sleep_ms
from .colors import BRIGHT, NO_CHANGE, RESET, split_color
from .win32 import Win32Console

#: FOREGROUND_RED | FOREGROUND_GREEN | FOREGROUND_BLUE | FOREGROUND_INTENSITY
DEFAULT_ATTRIBUTE = 0x0F
FOREGROUND_MASK = 0x0F
BACKGROUND_MASK = 0xF0

CURSOR_SIZE = 100


def _nibble(color):
    hue, bright = split_color(color)
    return hue + BRIGHT if bright else hue


class NativeBackend:
    """Terminal backend on top of the Windows console API.

    Queries that fail keep returning the last value seen (zeros before the
    first success), so callers get stale data rather than an error.

    Attributes:
        console: Win32Console (or a stand-in with the same methods)
    """

    def __init__(self, *, console=None):
        self.console = console if console is not None else Win32Console()
        self._size = Size(0, 0)
        self._position = Position(0, 0)

    def _info(self):
        info = self.console.screen_buffer_info()
        if info is None:
            logger.debug("GetConsoleScreenBufferInfo failed")
        return info

    def dimensions(self):
        """Return the visible window size as ``right - left``, ``bottom - top``."""
        info = self._info()
        if info is not None:
            left, top, right, bottom = info.window
            self._size = Size(right - left, bottom - top)
        return self._size

    def clear(self):
        """Blank the whole screen buffer with the current attribute and home the cursor."""
        info = self._info()
        if info is not None:
            columns, rows = info.size
            cells = columns * rows
            self.console.fill_character(' ', cells, 0, 0)
            self.console.fill_attribute(info.attributes, cells, 0, 0)
        self.console.set_cursor_position(0, 0)

    def goto(self, x, y):
        self.console.set_cursor_position(x, y)

    def where(self):
        info = self._info()
        if info is not None:
            self._position = Position(*info.cursor)
        return self._position

    def _set_attribute(self, keep_mask, value):
        info = self._info()
        if info is None:
            return
        self.console.set_text_attribute(value | (info.attributes & keep_mask))

    def set_foreground(self, color):
        check_color(color)
        if color == RESET:
            value = DEFAULT_ATTRIBUTE & FOREGROUND_MASK
        else:
            value = _nibble(color)
        self._set_attribute(BACKGROUND_MASK, value)

    def set_background(self, color):
        check_color(color)
        if color == RESET:
            value = DEFAULT_ATTRIBUTE & BACKGROUND_MASK
        else:
            value = _nibble(color) << 4
        self._set_attribute(FOREGROUND_MASK, value)

    def set_colors(self, fg, bg=NO_CHANGE):
        self.set_foreground(fg)
        if bg != NO_CHANGE:
            self.set_background(bg)

    def show_cursor(self, visible=True):
        self.console.set_cursor_info(CURSOR_SIZE, visible)

    def wait_key(self, prompt=""):
        """Block until a key is released and return its virtual-key code.

        Args:
            prompt: Text written to the console once raw input is set up

        Returns:
            The virtual-key code, or ``NO_INPUT`` if the input handle is
            unusable or its mode cannot be changed
        """
        console = self.console
        if console.input_handle is None:
            logger.debug("console input handle is invalid")
            return NO_INPUT
        mode = console.get_input_mode()
        if mode is None:
            logger.debug("GetConsoleMode failed on the input handle")
            return NO_INPUT

        try:
            # No echo, no line input, no window or mouse events.
            if not console.set_input_mode(0):
                logger.debug("SetConsoleMode failed on the input handle")
                return NO_INPUT
            if prompt:
                console.write(prompt)
            console.flush_input()
            while True:
                event = console.read_input()
                if event is None:
                    logger.debug("ReadConsoleInput failed")
                    return NO_INPUT
                if event.is_key_release:
                    return event.virtual_key
        finally:
            console.set_input_mode(mode)

    def pause(self, milliseconds):
        sleep_ms(milliseconds)
