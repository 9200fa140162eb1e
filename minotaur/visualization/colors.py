"""Hex color parsing for the image renderer and the command line."""

from __future__ import annotations

import string

from minotaur.exceptions import ColorParseError

RGB = tuple[int, int, int]

_HEX_DIGITS = frozenset(string.hexdigits)


def parse_hex_color(value: str) -> RGB:
    """
    Parse an ``RRGGBB`` hex color, with or without a leading ``#``.

    Args:
        value: Color string such as "#FF8800" or "ff8800"

    Returns:
        (red, green, blue) components in 0-255

    Raises:
        ColorParseError: If the value is not six hex digits
    """
    if not isinstance(value, str):
        raise ColorParseError(value, reason=f"expected a string, got {type(value).__name__}")

    digits = value[1:] if value.startswith("#") else value
    if len(digits) != 6:
        raise ColorParseError(digits)
    if not _HEX_DIGITS.issuperset(digits):
        raise ColorParseError(value, reason="contains characters that are not hex digits")

    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def format_hex_color(rgb: RGB) -> str:
    """Format an RGB triple as ``#RRGGBB``."""
    r, g, b = rgb
    return f"#{r:02X}{g:02X}{b:02X}"
