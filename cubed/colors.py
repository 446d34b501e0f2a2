"""Colour parsing helpers: RGB triples, hexadecimal values and shading."""

from __future__ import annotations

import itertools
import re
import string

_WHITESPACE = "\t\n\v\f\r "
_NUMBER = re.compile(r"([+-]?)([0-9]*)")
_HEX_DIGITS = {char: int(char, 16) for char in string.hexdigits}
_DECIMAL_DIGITS = frozenset("0123456789")


def atoi(text):
    """Read a leading, optionally signed decimal integer; 0 if there is none."""
    match = _NUMBER.match(text.lstrip(_WHITESPACE))
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def hex_digit(char):
    """Return the value of one hexadecimal digit, or None if it is not one."""
    return _HEX_DIGITS.get(char)


def parse_hex_color(text):
    """Read the hexadecimal number that follows the first '#' in ``text``.

    Reading stops at the first character that is not a hexadecimal digit.
    """
    _, sep, rest = text.partition("#")
    if not sep:
        raise ValueError(f"no '#' in colour value {text!r}")
    value = 0
    for char in rest:
        digit = hex_digit(char)
        if digit is None:
            break
        value = ((value << 4) | digit) & 0xFFFFFFFF
    return value


def _is_decimal(field: str) -> bool:
    return all(char in _DECIMAL_DIGITS for char in field)


def parse_rgb(text):
    """Parse ``"R,G,B"`` into a packed 0xRRGGBB integer.

    Raises ValueError when the text is not three decimal components
    in the range 0-255.
    """
    fields = [field.strip(_WHITESPACE) for field in text.split(",") if field]
    counted = list(itertools.takewhile(bool, fields))
    if not all(_is_decimal(field) for field in counted):
        raise ValueError(f"invalid colour {text!r}")
    if len(counted) != 3:
        raise ValueError(f"invalid colour {text!r}")
    red, green, blue = (atoi(field) for field in counted)
    if not all(0 <= channel <= 255 for channel in (red, green, blue)):
        raise ValueError(f"colour component out of range in {text!r}")
    return red << 16 | green << 8 | blue


def shade(color):
    """Halve each channel of a packed RGB colour."""
    return (color >> 1) & 0x7F7F7F