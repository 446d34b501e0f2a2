"""Ray casting of textured walls, floor and ceiling into a frame."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .colors import shade
from .model import Side

_WALL = "1"
_MIN_DISTANCE = 1e-6


class Frame:
    """A width x height buffer of packed RGB pixels, stored row by row."""

    def __init__(self, width, height, fill=0):
        if width < 0 or height < 0:
            raise ValueError(f"invalid frame size {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = [fill] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.width + x

    def get(self, x, y):
        """Return the colour at column ``x``, row ``y``."""
        return self.pixels[self._index(x, y)]

    def put(self, x, y, color):
        """Set the colour at column ``x``, row ``y``."""
        self.pixels[self._index(x, y)] = color


@dataclass(frozen=True)
class RayHit:
    """Where one screen column's ray meets a wall and how to draw it.

    ``side`` is 0 when the ray crossed a vertical grid line last, 1 when
    it crossed a horizontal one.
    """

    ray_x: float
    ray_y: float
    map_x: int
    map_y: int
    side: int
    wall_dist: float
    line_height: int
    draw_start: int
    draw_end: int
    face: Side
    tex_x: int
    step: float
    tex_pos: float


def _is_wall(rows: list[str], column: int, row: int) -> bool:
    if 0 <= row < len(rows) and 0 <= column < len(rows[row]):
        return rows[row][column] == _WALL
    return True


def _delta(component: float) -> float:
    return math.inf if component == 0 else abs(1 / component)


def _start(position: float, cell: int, ray: float, delta: float) -> tuple[int, float]:
    if ray < 0:
        return -1, (position - cell) * delta
    return 1, (cell + 1.0 - position) * delta


def _face(side: int, ray_x: float, ray_y: float) -> Side:
    if side == 1 and ray_y < 0:
        return Side.NORTH
    if side == 1 and ray_y > 0:
        return Side.SOUTH
    if side == 0 and ray_x < 0:
        return Side.WEST
    return Side.EAST


def cast_ray(scene, column, width):
    """Cast the ray of screen ``column`` out of ``width`` and describe its hit."""
    player = scene.player
    height = scene.height
    camera_x = 2 * column / width - 1
    ray_x = player.dir_x + player.plane_x * camera_x
    ray_y = player.dir_y + player.plane_y * camera_x
    map_x, map_y = int(player.x), int(player.y)
    delta_x, delta_y = _delta(ray_x), _delta(ray_y)
    step_x, side_x = _start(player.x, map_x, ray_x, delta_x)
    step_y, side_y = _start(player.y, map_y, ray_y, delta_y)

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if _is_wall(scene.rows, map_x, map_y):
            break

    if side == 0:
        wall_dist = (map_x - player.x + (1 - step_x) // 2) / ray_x
        wall_x = player.y + wall_dist * ray_y
    else:
        wall_dist = (map_y - player.y + (1 - step_y) // 2) / ray_y
        wall_x = player.x + wall_dist * ray_x

    line_height = int(height / max(wall_dist, _MIN_DISTANCE))
    draw_start = max(-(line_height // 2) + height // 2, 0)
    draw_end = min(line_height // 2 + height // 2, height - 1)

    face = _face(side, ray_x, ray_y)
    texture = scene.textures[face]
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * texture.width)
    if (side == 0 and ray_x > 0) or (side == 1 and ray_y < 0):
        tex_x = texture.width - tex_x - 1
    step = texture.height / line_height if line_height else math.inf
    tex_pos = (draw_start - height // 2 + line_height // 2) * step

    return RayHit(
        ray_x=ray_x,
        ray_y=ray_y,
        map_x=map_x,
        map_y=map_y,
        side=side,
        wall_dist=wall_dist,
        line_height=line_height,
        draw_start=draw_start,
        draw_end=draw_end,
        face=face,
        tex_x=tex_x,
        step=step,
        tex_pos=tex_pos,
    )


def fill_ceiling_and_floor(scene, frame):
    """Paint the upper half of ``frame`` with the ceiling, the lower with the floor."""
    half = frame.height // 2
    frame.pixels[:] = [scene.ceiling_color] * (frame.width * half) + [
        scene.floor_color
    ] * (frame.width * (frame.height - half))


def _draw_column(scene, frame: Frame, hit: RayHit, column: int) -> None:
    texture = scene.textures[hit.face]
    mask = texture.height - 1
    tex_pos = hit.tex_pos
    for y in range(hit.draw_start, hit.draw_end):
        tex_y = int(tex_pos) & mask
        tex_pos += hit.step
        color = texture.color_at(hit.tex_x, tex_y)
        if hit.side == 1:
            color = shade(color)
        frame.put(column, y, color)


def render_scene(scene, frame):
    """Draw the whole view of ``scene`` into ``frame``."""
    if (frame.width, frame.height) != (scene.width, scene.height):
        raise ValueError(
            f"frame is {frame.width}x{frame.height}, scene is "
            f"{scene.width}x{scene.height}"
        )
    fill_ceiling_and_floor(scene, frame)
    for column in range(frame.width):
        _draw_column(scene, frame, cast_ray(scene, column, frame.width), column)