"""
Thin ctypes wrapper around the kernel32 console calls the native backend needs.

Every method mirrors one console API call and reports failure through its
return value (``None`` or ``False``) instead of raising, so the backend can
stay fail-soft. ctypes is only touched when a ``Win32Console`` is created,
which keeps this module importable on every platform.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

STD_INPUT_HANDLE = -10
STD_OUTPUT_HANDLE = -11
KEY_EVENT = 0x0001


@dataclass(frozen=True)
class ScreenBufferInfo:
    """Snapshot of ``CONSOLE_SCREEN_BUFFER_INFO``.

    Attributes:
        size: Buffer size as (columns, rows)
        cursor: Cursor position as (x, y)
        attributes: Current text attribute (foreground low nibble, background high nibble)
        window: Visible window as (left, top, right, bottom), inclusive
    """
    size: tuple
    cursor: tuple
    attributes: int
    window: tuple


@dataclass(frozen=True)
class InputEvent:
    """One console input record, reduced to what key waiting needs."""
    event_type: int
    key_down: bool = False
    virtual_key: int = 0

    @property
    def is_key_release(self):
        return self.event_type == KEY_EVENT and not self.key_down


@lru_cache(maxsize=None)
def _structures():
    import ctypes
    from ctypes import wintypes

    class CONSOLE_SCREEN_BUFFER_INFO(ctypes.Structure):
        _fields_ = [
            ("dwSize", wintypes._COORD),
            ("dwCursorPosition", wintypes._COORD),
            ("wAttributes", wintypes.WORD),
            ("srWindow", wintypes.SMALL_RECT),
            ("dwMaximumWindowSize", wintypes._COORD),
        ]

    class CONSOLE_CURSOR_INFO(ctypes.Structure):
        _fields_ = [
            ("dwSize", wintypes.DWORD),
            ("bVisible", wintypes.BOOL),
        ]

    class KEY_EVENT_RECORD(ctypes.Structure):
        _fields_ = [
            ("bKeyDown", wintypes.BOOL),
            ("wRepeatCount", wintypes.WORD),
            ("wVirtualKeyCode", wintypes.WORD),
            ("wVirtualScanCode", wintypes.WORD),
            ("uChar", wintypes.WCHAR),
            ("dwControlKeyState", wintypes.DWORD),
        ]

    class INPUT_RECORD(ctypes.Structure):
        class _Event(ctypes.Union):
            _fields_ = [("KeyEvent", KEY_EVENT_RECORD)]

        _fields_ = [
            ("EventType", wintypes.WORD),
            ("Event", _Event),
        ]

    return CONSOLE_SCREEN_BUFFER_INFO, CONSOLE_CURSOR_INFO, INPUT_RECORD


class Win32Console:
    """Handles to the process console plus the calls made on them.

    Attributes:
        output_handle: Console screen buffer handle (standard output)
        input_handle: Console input handle (standard input), or None if invalid
    """

    def __init__(self):
        import ctypes
        from ctypes import wintypes

        self._ctypes = ctypes
        self._wintypes = wintypes
        self._kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
        self._kernel32.GetStdHandle.restype = wintypes.HANDLE

        self.output_handle = self._kernel32.GetStdHandle(STD_OUTPUT_HANDLE)
        self.input_handle = self._kernel32.GetStdHandle(STD_INPUT_HANDLE)
        if self.input_handle in (None, ctypes.c_void_p(-1).value):
            self.input_handle = None

    def _coord(self, x, y):
        return self._wintypes._COORD(x, y)

    def screen_buffer_info(self) -> Optional[ScreenBufferInfo]:
        csbi_type = _structures()[0]
        csbi = csbi_type()
        if not self._kernel32.GetConsoleScreenBufferInfo(
            self.output_handle, self._ctypes.byref(csbi)
        ):
            return None
        window = csbi.srWindow
        return ScreenBufferInfo(
            size=(csbi.dwSize.X, csbi.dwSize.Y),
            cursor=(csbi.dwCursorPosition.X, csbi.dwCursorPosition.Y),
            attributes=csbi.wAttributes,
            window=(window.Left, window.Top, window.Right, window.Bottom),
        )

    def fill_character(self, char, count, x=0, y=0):
        written = self._wintypes.DWORD()
        return bool(self._kernel32.FillConsoleOutputCharacterW(
            self.output_handle, self._wintypes.WCHAR(char), count,
            self._coord(x, y), self._ctypes.byref(written)
        ))

    def fill_attribute(self, attribute, count, x=0, y=0):
        written = self._wintypes.DWORD()
        return bool(self._kernel32.FillConsoleOutputAttribute(
            self.output_handle, attribute, count,
            self._coord(x, y), self._ctypes.byref(written)
        ))

    def set_cursor_position(self, x, y):
        return bool(self._kernel32.SetConsoleCursorPosition(
            self.output_handle, self._coord(x, y)
        ))

    def set_text_attribute(self, attribute):
        return bool(self._kernel32.SetConsoleTextAttribute(self.output_handle, attribute))

    def set_cursor_info(self, size, visible):
        info = _structures()[1](size, bool(visible))
        return bool(self._kernel32.SetConsoleCursorInfo(
            self.output_handle, self._ctypes.byref(info)
        ))

    def write(self, text):
        written = self._wintypes.DWORD()
        return bool(self._kernel32.WriteConsoleW(
            self.output_handle, text, len(text), self._ctypes.byref(written), None
        ))

    def get_input_mode(self) -> Optional[int]:
        mode = self._wintypes.DWORD()
        if not self._kernel32.GetConsoleMode(self.input_handle, self._ctypes.byref(mode)):
            return None
        return mode.value

    def set_input_mode(self, mode):
        return bool(self._kernel32.SetConsoleMode(self.input_handle, mode))

    def flush_input(self):
        return bool(self._kernel32.FlushConsoleInputBuffer(self.input_handle))

    def read_input(self) -> Optional[InputEvent]:
        """Block until one input record is available and return it."""
        record = _structures()[2]()
        count = self._wintypes.DWORD()
        if not self._kernel32.ReadConsoleInputW(
            self.input_handle, self._ctypes.byref(record), 1, self._ctypes.byref(count)
        ):
            return None
        key = record.Event.KeyEvent
        return InputEvent(
            event_type=record.EventType,
            key_down=bool(key.bKeyDown),
            virtual_key=key.wVirtualKeyCode,
        )
