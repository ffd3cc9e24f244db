"""Shared fixtures: fake terminal handles for both backends."""

import io
import os
from unittest.mock import Mock

import pytest
from blessed import Terminal

from term_console import AnsiBackend, NativeBackend
from term_console.win32 import KEY_EVENT, InputEvent, ScreenBufferInfo


class FakeConsole:
    """In-memory stand-in for Win32Console.

    Keeps a screen buffer size, a visible window, a cursor and the current
    attribute, and records every mutating call in ``calls``.
    """

    def __init__(self, columns=80, rows=24, attributes=0x07):
        self.size = (columns, rows)
        self.window = (0, 0, columns, rows)
        self.cursor = (0, 0)
        self.attributes = attributes
        self.cursor_info = (25, True)
        self.input_handle = object()
        self.input_mode = 0x1F7
        self.events = []
        self.written = []
        self.calls = []
        self.fail_info = False
        self.fail_get_mode = False
        self.fail_set_mode = False

    def screen_buffer_info(self):
        if self.fail_info:
            return None
        return ScreenBufferInfo(
            size=self.size,
            cursor=self.cursor,
            attributes=self.attributes,
            window=self.window,
        )

    def fill_character(self, char, count, x=0, y=0):
        self.calls.append(('fill_character', char, count, x, y))
        return True

    def fill_attribute(self, attribute, count, x=0, y=0):
        self.calls.append(('fill_attribute', attribute, count, x, y))
        return True

    def set_cursor_position(self, x, y):
        self.calls.append(('set_cursor_position', x, y))
        self.cursor = (x, y)
        return True

    def set_text_attribute(self, attribute):
        self.calls.append(('set_text_attribute', attribute))
        self.attributes = attribute
        return True

    def set_cursor_info(self, size, visible):
        self.calls.append(('set_cursor_info', size, visible))
        self.cursor_info = (size, visible)
        return True

    def write(self, text):
        self.written.append(text)
        return True

    def get_input_mode(self):
        if self.fail_get_mode:
            return None
        return self.input_mode

    def set_input_mode(self, mode):
        self.calls.append(('set_input_mode', mode))
        if self.fail_set_mode:
            return False
        self.input_mode = mode
        return True

    def flush_input(self):
        self.calls.append(('flush_input',))
        return True

    def read_input(self):
        if not self.events:
            return None
        return self.events.pop(0)

    def queue_key(self, virtual_key):
        """Queue a key press followed by its release."""
        self.events.append(InputEvent(KEY_EVENT, key_down=True, virtual_key=virtual_key))
        self.events.append(InputEvent(KEY_EVENT, key_down=False, virtual_key=virtual_key))


@pytest.fixture
def term():
    """Mock blessed Terminal reporting an 80x24 window."""
    term = Mock(spec=Terminal)
    term.width = 80
    term.height = 24
    term.stream = io.StringIO()
    return term


@pytest.fixture
def keyboard():
    """Pipe standing in for stdin: yields (read_fd, write_fd)."""
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass


@pytest.fixture
def ansi(term, keyboard):
    return AnsiBackend(term=term, stdin_fd=keyboard[0])


@pytest.fixture
def console():
    return FakeConsole()


@pytest.fixture
def native(console):
    return NativeBackend(console=console)
