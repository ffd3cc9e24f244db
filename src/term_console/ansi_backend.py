"""
Escape-sequence backend for VT100/ANSI terminals.

Output goes to the stream of a blessed ``Terminal``, which also answers the
window-size query. Key input switches the input descriptor into
non-canonical, no-echo mode for exactly one byte and switches it back.
"""

import os
import sys

from blessed import Terminal

from .backend import EOF, Position, Size, check_color, logger, sleep_ms
from .colors import NO_CHANGE, RESET, split_color

if os.name != 'nt':
    import termios
    import tty
else:
    termios = None
    tty = None


CSI = '\x1b['

SHOW_CURSOR = CSI + '?25h'
HIDE_CURSOR = CSI + '?25l'
RESET_FOREGROUND = CSI + '39m'
RESET_BACKGROUND = CSI + '49m'

FOREGROUND_BASE = 30
BACKGROUND_BASE = 40


class AnsiBackend:
    """Terminal backend that speaks ANSI escape sequences.

    Cursor read-back is not supported: ``where()`` always reports (0, 0).

    Attributes:
        term: Blessed Terminal used for output and the window-size query
        stdin_fd: File descriptor read by ``wait_key`` (None when stdin has none)
    """

    # Style parameter emitted in front of the color code, keyed by the
    # bright flag.
    FOREGROUND_STYLE = {True: 0, False: 2}
    BACKGROUND_STYLE = {True: 0, False: 1}

    def __init__(self, *, term=None, stdin_fd=None):
        self.term = term if term is not None else Terminal()
        if stdin_fd is None:
            try:
                stdin_fd = sys.__stdin__.fileno()
            except (AttributeError, ValueError, OSError) as err:
                logger.debug(f"no usable stdin descriptor: {err}")
        self.stdin_fd = stdin_fd

    def _write(self, text):
        self.term.stream.write(text)

    def _flush(self):
        self.term.stream.flush()

    def _move(self, x, y):
        # Row comes first in the sequence, column second.
        self._write(f'{CSI}{y};{x}H')

    def dimensions(self):
        """Return the live window size reported by the terminal."""
        return Size(self.term.width, self.term.height)

    def clear(self):
        """Overwrite every cell of the viewport with a space and home the cursor."""
        width, height = self.dimensions()
        for x in range(width + 1):
            for y in range(height + 1):
                self._move(x, y)
                self._write(' ')
        self._move(0, 0)
        self._flush()

    def goto(self, x, y):
        self._move(x, y)
        self._flush()

    def where(self):
        return Position(0, 0)

    def set_foreground(self, color):
        """Set the text color, or restore the default one for ``RESET``."""
        check_color(color)
        if color == RESET:
            self._write(RESET_FOREGROUND)
        else:
            hue, bright = split_color(color)
            self._write(f'{CSI}{self.FOREGROUND_STYLE[bright]};{FOREGROUND_BASE + hue}m')
        self._flush()

    def set_background(self, color):
        """Set the highlight color, or restore the default one for ``RESET``."""
        check_color(color)
        if color == RESET:
            self._write(RESET_BACKGROUND)
        else:
            hue, bright = split_color(color)
            self._write(f'{CSI}{self.BACKGROUND_STYLE[bright]};{BACKGROUND_BASE + hue}m')
        self._flush()

    def set_colors(self, fg, bg=NO_CHANGE):
        self.set_foreground(fg)
        if bg != NO_CHANGE:
            self.set_background(bg)

    def show_cursor(self, visible=True):
        self._write(SHOW_CURSOR if visible else HIDE_CURSOR)
        self._flush()

    def wait_key(self, prompt=""):
        """Block until one byte arrives on the input descriptor.

        Args:
            prompt: Text written (and flushed) before waiting

        Returns:
            The byte value read, or ``EOF`` if raw input could not be set
            up, the read failed, or the saved mode could not be restored
        """
        if prompt:
            self._write(prompt)
            self._flush()

        fd = self.stdin_fd
        if fd is None:
            return EOF
        if termios is None:
            logger.debug("no termios on this platform")
            return EOF
        try:
            saved = termios.tcgetattr(fd)
        except termios.error as err:
            logger.debug(f"tcgetattr failed on fd {fd}: {err}")
            return EOF

        key = EOF
        try:
            newattr = list(saved)
            newattr[tty.CC] = list(saved[tty.CC])
            newattr[tty.LFLAG] &= ~(termios.ECHO | termios.ICANON)
            newattr[tty.CC][termios.VMIN] = 1
            termios.tcsetattr(fd, termios.TCSANOW, newattr)
            key = self._read_byte(fd)
        except termios.error as err:
            logger.debug(f"tcsetattr failed on fd {fd}: {err}")
        finally:
            try:
                termios.tcsetattr(fd, termios.TCSANOW, saved)
            except termios.error as err:
                logger.debug(f"restoring terminal mode failed on fd {fd}: {err}")
                key = EOF
        return key

    @staticmethod
    def _read_byte(fd):
        try:
            data = os.read(fd, 1)
        except OSError as err:
            logger.debug(f"read failed on fd {fd}: {err}")
            return EOF
        return data[0] if data else EOF

    def pause(self, milliseconds):
        sleep_ms(milliseconds)
