"""Reading and validating ``.cub`` scene descriptions."""

from __future__ import annotations

import errno
import itertools
import os
from collections.abc import Iterator
from dataclasses import dataclass, field

from .colors import parse_rgb
from .errors import CubError
from .grid import check_map_borders, check_map_characters, format_map
from .model import Player, Scene, Side
from .xpm import load_xpm

_TRIM = " \n\t\v\f\r"
_TEXTURE_KEYS = {"N": Side.NORTH, "S": Side.SOUTH, "W": Side.WEST, "E": Side.EAST}
_TEXTURE_ORDER = (Side.NORTH, Side.SOUTH, Side.WEST, Side.EAST)
_TEXTURE_PREFIXES = tuple(side.value for side in _TEXTURE_ORDER)
_PLAYER_MARKS = frozenset("NSWE")


def _invalid(message: str) -> CubError:
    return CubError(message, errno.ENOEXEC)


@dataclass
class SceneDescription:
    """What a ``.cub`` file declares, before any texture file is read."""

    texture_paths: dict[Side, str] = field(default_factory=dict)
    floor_color: int | None = None
    ceiling_color: int | None = None
    rows: list[str] = field(default_factory=list)
    pov: str | None = None
    player_x: float = 0.0
    player_y: float = 0.0


def row_length(line):
    """Length of a map line without its trailing spaces and newline.

    A line of at most one character counts as empty.
    """
    if len(line) <= 1:
        return 0
    return len(line.rstrip(" \n"))


def is_texture_line(line):
    """Return True when ``line`` starts with a texture identifier."""
    return line.startswith(_TEXTURE_PREFIXES)


def check_texture_format(path):
    """Return True when ``path`` names a supported (.xpm) texture."""
    return path.endswith(".xpm")


def _has_content(line: str) -> bool:
    start = line.lstrip(" ")
    return bool(start) and not start.startswith("\n")


def _save_texture_path(description: SceneDescription, line: str) -> None:
    side = _TEXTURE_KEYS[line[0]]
    if side in description.texture_paths:
        raise _invalid("Invalid texture.\tMultiple textures found.")
    description.texture_paths[side] = line[2:].strip(_TRIM)


def _parse_color(description: SceneDescription, line: str) -> None:
    key = line[0]
    if key == "F" and description.floor_color is not None:
        raise _invalid("Invalid color.\tMultiple floor colors found.")
    if key == "C" and description.ceiling_color is not None:
        raise _invalid("Invalid color.\tMultiple ceiling colors found.")
    try:
        color = parse_rgb(line[1:])
    except ValueError:
        raise _invalid("Invalid color.") from None
    if key == "F":
        description.floor_color = color
    else:
        description.ceiling_color = color


def _parse_elements(description: SceneDescription, stream: Iterator[str]) -> str | None:
    for line in stream:
        start = line.lstrip(" ")
        if start.startswith("1"):
            return line
        if is_texture_line(start):
            _save_texture_path(description, start)
        elif start.startswith(("F", "C")):
            _parse_color(description, start)
        elif _has_content(line):
            raise _invalid("Invalid map.")
    return None


def _take_player(description: SceneDescription) -> None:
    index = len(description.rows) - 1
    row = description.rows[index]
    for column, cell in enumerate(row):
        if cell not in _PLAYER_MARKS:
            continue
        if description.pov is not None:
            raise _invalid("Invalid map.\tMultiple player positions found.")
        description.player_x = column + 0.5
        description.player_y = index + 0.5
        description.pov = cell
    description.rows[index] = "".join(
        "0" if cell in _PLAYER_MARKS else cell for cell in row
    )


def _add_row(description: SceneDescription, line: str) -> bool:
    """Append one map line; return True when the line ends the map."""
    length = row_length(line)
    if length == 0:
        return True
    row = line[:length]
    if row[-1] == "0":
        raise _invalid("Invalid map.\tMap is not closed.")
    description.rows.append(row)
    _take_player(description)
    description.rows = format_map(description.rows)
    return False


def _parse_map(description: SceneDescription, first: str, stream: Iterator[str]) -> None:
    ended = False
    for line in itertools.chain([first], stream):
        if not ended:
            ended = _add_row(description, line)
        elif _has_content(line):
            raise _invalid("Invalid map.")


def _check_elements(description: SceneDescription) -> None:
    paths = description.texture_paths
    if any(side not in paths for side in _TEXTURE_ORDER):
        raise _invalid("Invalid map.\tMissing texture before map.")
    for side in _TEXTURE_ORDER:
        if not check_texture_format(paths[side]):
            raise _invalid("Invalid texture.\tTexture format not supported.")
    if description.floor_color is None or description.ceiling_color is None:
        raise _invalid("Invalid map.\tMissing color before map.")


def _check_map(description: SceneDescription) -> None:
    if not description.rows:
        raise _invalid("Invalid map.\tMap is missing.")
    if description.pov is None:
        raise _invalid("Invalid map.\tPlayer position is missing.")
    if not check_map_characters(description.rows):
        raise _invalid("Invalid map.\tInvalid character found.")
    if not check_map_borders(description.rows):
        raise _invalid("Invalid map.\tMap is not closed.")


def parse_cub_lines(lines):
    """Parse and validate the lines of a ``.cub`` file (newlines kept)."""
    description = SceneDescription()
    stream = iter(lines)
    first_row = _parse_elements(description, stream)
    _check_elements(description)
    if first_row is not None:
        _parse_map(description, first_row, stream)
    _check_map(description)
    return description


def _check_file(path: str) -> None:
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise CubError("Failed to open texture file.", exc.errno or errno.EIO) from exc


def load_scene(path):
    """Read a ``.cub`` file and its textures into a ready-to-render Scene."""
    name = os.fspath(path)
    dot = name.rfind(".")
    if dot < 0 or name[dot:] != ".cub":
        raise CubError(
            "Invalid file format. Only .cub files are accepted.", errno.EINVAL
        )
    try:
        with open(name, "rb") as handle:
            lines = [raw.decode("latin-1") for raw in handle]
    except OSError as exc:
        raise CubError("Failed to open file.", exc.errno or errno.EIO) from exc

    description = parse_cub_lines(lines)
    paths = description.texture_paths
    for side in _TEXTURE_ORDER:
        _check_file(paths[side])
    textures = {side: load_xpm(paths[side]) for side in _TEXTURE_ORDER}

    player = Player(x=description.player_x, y=description.player_y)
    player.face(description.pov)
    return Scene(
        rows=list(description.rows),
        player=player,
        pov=description.pov,
        textures=textures,
        floor_color=description.floor_color,
        ceiling_color=description.ceiling_color,
    )