"""Reader for the XPM texture files used as wall textures."""

from __future__ import annotations

import errno

from .colors import atoi, parse_hex_color
from .errors import CubError
from .model import Texture

_INVALID = "Invalid texture file."
_MISSING_COLOR = 0xFFFFFFFF
_SKIPPED_LINES = 2


def _invalid() -> CubError:
    return CubError(_INVALID, errno.ENOEXEC)


def parse_header(line):
    """Return (width, height, colours, chars per pixel) from the XPM values line."""
    fields = [field for field in line[1:].split(" ") if field]
    if len(fields) < 4:
        raise _invalid()
    width, height, colors, char_per_pixel = (atoi(field) for field in fields[:4])
    return width, height, colors, char_per_pixel


def _color_row(line: str, width: int, cpp: int, table: dict[str, int]) -> list[int]:
    return [
        table.get(line[1 + column * cpp : 1 + (column + 1) * cpp], _MISSING_COLOR)
        for column in range(width)
    ]


def parse_xpm(lines, path):
    """Build a Texture from the lines of an XPM file."""
    stream = iter(lines)

    def next_line() -> str:
        line = next(stream, None)
        if line is None:
            raise _invalid()
        return line

    for _ in range(_SKIPPED_LINES):
        next_line()
    width, height, colors, cpp = parse_header(next_line())

    table: dict[str, int] = {}
    for _ in range(colors):
        body = next_line()[1:]
        try:
            color = parse_hex_color(body[cpp:])
        except ValueError as exc:
            raise _invalid() from exc
        table.setdefault(body[:cpp], color)

    pixels = [_color_row(next_line(), width, cpp, table) for _ in range(height)]
    return Texture(
        path=path,
        width=width,
        height=height,
        char_per_pixel=cpp,
        color_table=table,
        pixels=pixels,
    )


def load_xpm(path):
    """Read and decode the XPM file at ``path``."""
    try:
        with open(path, "rb") as handle:
            lines = [raw.decode("latin-1") for raw in handle]
    except OSError as exc:
        raise CubError("Failed to open texture file.", exc.errno or errno.EIO) from exc
    return parse_xpm(lines, str(path))