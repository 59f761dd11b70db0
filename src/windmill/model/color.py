"""
Fill Color
==========
A small, Qt-free RGBA value used for every shape of the windmill.

Accepted string formats:
    "#RRGGBB"    opaque color
    "#AARRGGBB"  alpha first, the layout used by styled color attributes
    "white", "black", ... a handful of named colors
"""
from __future__ import annotations

import re
from typing import NamedTuple


class ColorFormatError(ValueError):
    """Raised when a color string cannot be parsed."""


class Rgba(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255

    def to_hex(self) -> str:
        """Format as '#AARRGGBB'."""
        return f"#{self.a:02X}{self.r:02X}{self.g:02X}{self.b:02X}"


HEX_DIGITS = re.compile(r"[0-9a-f]{6}|[0-9a-f]{8}")

WHITE = Rgba(255, 255, 255)
BLACK = Rgba(0, 0, 0)

NAMED_COLORS: dict[str, Rgba] = {
    "white": WHITE,
    "black": BLACK,
    "red": Rgba(255, 0, 0),
    "green": Rgba(0, 255, 0),
    "blue": Rgba(0, 0, 255),
    "gray": Rgba(136, 136, 136),
    "transparent": Rgba(0, 0, 0, 0),
}


def parse_color(text: str) -> Rgba:
    """
    Parse a color string into an Rgba value.

    Args:
        text: '#RRGGBB', '#AARRGGBB' or one of NAMED_COLORS (case-insensitive).

    Returns:
        The parsed color.

    Raises:
        ColorFormatError: if the string is not a recognized color.
    """
    value = text.strip().lower()
    if value in NAMED_COLORS:
        return NAMED_COLORS[value]

    if not value.startswith("#"):
        raise ColorFormatError(f"Unknown color: {text!r}")

    digits = value[1:]
    if not HEX_DIGITS.fullmatch(digits):
        raise ColorFormatError(f"Color must be '#' and 6 or 8 hex digits: {text!r}")

    channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    if len(channels) == 3:
        r, g, b = channels
        return Rgba(r, g, b)
    a, r, g, b = channels
    return Rgba(r, g, b, a)
