"""Scene state: the player, wall textures, the map and window size."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

DEFAULT_WIDTH = 960
DEFAULT_HEIGHT = 720
PLANE_LENGTH = 0.66

_FACINGS = {
    "N": (0.0, -1.0, PLANE_LENGTH, 0.0),
    "S": (0.0, 1.0, -PLANE_LENGTH, 0.0),
    "W": (-1.0, 0.0, 0.0, -PLANE_LENGTH),
    "E": (1.0, 0.0, 0.0, PLANE_LENGTH),
}
_WALL = "1"


class Side(Enum):
    """The four wall faces, valued by their scene-file identifiers."""

    NORTH = "NO"
    SOUTH = "SO"
    WEST = "WE"
    EAST = "EA"


@dataclass
class Texture:
    """A decoded wall texture: its colour table and a grid of packed colours."""

    path: str
    width: int = 0
    height: int = 0
    char_per_pixel: int = 0
    color_table: dict[str, int] = field(default_factory=dict)
    pixels: list[list[int]] = field(default_factory=list)

    @property
    def colors_num(self) -> int:
        return len(self.color_table)

    def color_at(self, x, y):
        """Return the packed colour of the texel in column ``x``, row ``y``."""
        return self.pixels[y][x]


@dataclass
class Player:
    """Position, facing direction and camera plane of the viewer."""

    x: float = 0.0
    y: float = 0.0
    dir_x: float = 1.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = PLANE_LENGTH
    speed: float = 0.2
    rot_speed: float = 0.1

    def face(self, pov):
        """Point the player north, south, west or east ('N', 'S', 'W', 'E')."""
        try:
            self.dir_x, self.dir_y, self.plane_x, self.plane_y = _FACINGS[pov]
        except KeyError:
            raise ValueError(f"unknown point of view {pov!r}") from None

    def rotate(self, direction):
        """Turn by ``direction`` times the rotation speed (negative is left)."""
        angle = direction * self.rot_speed
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def next_position(self, direction):
        """Return the (x, y) one step away for the movement key 'W', 'A', 'S' or 'D'.

        Any other key leaves the position where it is.
        """
        step = -self.speed if direction in ("S", "D") else self.speed
        if direction in ("W", "S"):
            return self.x + self.dir_x * step, self.y + self.dir_y * step
        if direction in ("A", "D"):
            return self.x + self.dir_y * step, self.y - self.dir_x * step
        return self.x, self.y


@dataclass
class Scene:
    """Everything needed to render a frame and react to input."""

    rows: list[str] = field(default_factory=list)
    player: Player = field(default_factory=Player)
    pov: str | None = None
    textures: dict[Side, Texture] = field(default_factory=dict)
    floor_color: int | None = None
    ceiling_color: int | None = None
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    @property
    def map_width(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    @property
    def map_height(self) -> int:
        return len(self.rows)

    def _cell(self, column: int, row: int) -> str:
        if 0 <= row < len(self.rows) and 0 <= column < len(self.rows[row]):
            return self.rows[row][column]
        return _WALL

    def move_player(self, direction):
        """Step the player unless the destination is a wall; return whether it moved."""
        new_x, new_y = self.player.next_position(direction)
        if self._cell(int(new_x), int(new_y)) == _WALL:
            return False
        self.player.x, self.player.y = new_x, new_y
        return True

    def rotate_player(self, direction):
        """Turn the player left (-1) or right (1)."""
        self.player.rotate(direction)

    def resize(self, width, height):
        """Record a new window size for the frames that follow."""
        self.width = width
        self.height = height