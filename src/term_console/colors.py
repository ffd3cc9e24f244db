"""
Color values shared by both backends.

A color is a small integer. The low three bits select one of eight hues and
bit 3 marks the bright variant. Two values are reserved: ``RESET`` restores
the terminal default for a channel and ``NO_CHANGE`` tells ``set_colors`` to
leave the background alone.

The hue numbering is not the same on both backends. ANSI terminals number
their colors red=1, yellow=3, blue=4, cyan=6, while the Windows console packs
its attribute bits as blue=1, cyan=3, red=4, yellow=6. Each backend gets a
palette that matches its own bit layout, and the module-level names are bound
to the palette of the host platform. Use the names, not the numbers.
"""

import sys
from types import MappingProxyType

RESET = -1
NO_CHANGE = -2

BRIGHT = 8
HUE_MASK = 7


def _build_palette(red, yellow, blue, cyan):
    """Build the full name -> color mapping from the four platform-specific hues."""
    base = {
        'BLACK': 0,
        'RED': red,
        'GREEN': 2,
        'YELLOW': yellow,
        'BLUE': blue,
        'MAGENTA': 5,
        'PURPLE': 5,
        'FUCHSIA': 5,
        'CYAN': cyan,
        'AQUA': cyan,
        'WHITE': 7,
    }
    palette = dict(base)
    for name, hue in base.items():
        palette['BRIGHT_' + name] = BRIGHT | hue
    palette['GRAY'] = BRIGHT | base['BLACK']
    palette['RESET'] = RESET
    return MappingProxyType(palette)


ANSI_PALETTE = _build_palette(red=1, yellow=3, blue=4, cyan=6)
NATIVE_PALETTE = _build_palette(red=4, yellow=6, blue=1, cyan=3)


def palette_for(platform=None):
    """Return the palette that matches ``platform`` (defaults to ``sys.platform``)."""
    platform = sys.platform if platform is None else platform
    return NATIVE_PALETTE if platform.startswith('win') else ANSI_PALETTE


def split_color(color):
    """Split a color value into its ``(hue, bright)`` parts.

    Args:
        color: A palette value (not ``RESET`` or ``NO_CHANGE``)

    Returns:
        Tuple of the hue index (0-7) and the bright flag
    """
    return color & HUE_MASK, (color & BRIGHT) == BRIGHT


_palette = palette_for()

BLACK = _palette['BLACK']
RED = _palette['RED']
GREEN = _palette['GREEN']
YELLOW = _palette['YELLOW']
BLUE = _palette['BLUE']
MAGENTA = _palette['MAGENTA']
PURPLE = _palette['PURPLE']
FUCHSIA = _palette['FUCHSIA']
CYAN = _palette['CYAN']
AQUA = _palette['AQUA']
WHITE = _palette['WHITE']

GRAY = _palette['GRAY']
BRIGHT_BLACK = _palette['BRIGHT_BLACK']
BRIGHT_RED = _palette['BRIGHT_RED']
BRIGHT_GREEN = _palette['BRIGHT_GREEN']
BRIGHT_YELLOW = _palette['BRIGHT_YELLOW']
BRIGHT_BLUE = _palette['BRIGHT_BLUE']
BRIGHT_MAGENTA = _palette['BRIGHT_MAGENTA']
BRIGHT_PURPLE = _palette['BRIGHT_PURPLE']
BRIGHT_FUCHSIA = _palette['BRIGHT_FUCHSIA']
BRIGHT_CYAN = _palette['BRIGHT_CYAN']
BRIGHT_AQUA = _palette['BRIGHT_AQUA']
BRIGHT_WHITE = _palette['BRIGHT_WHITE']

del _palette
