"""Top-down overview of the map drawn over the rendered view."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SIZE = 15
_WALL = "1"
_FLOOR = "0"


@dataclass
class Minimap:
    """Layout and colours of the overview: one square of ``size`` pixels per cell."""

    x_center: int = 0
    y_center: int = 0
    size: int = DEFAULT_SIZE
    wall_color: int = 0x000040
    background_color: int = 0xADD8E6
    player_color: int = 0xFF0000

    @property
    def radius(self) -> int:
        """Radius of the dot that marks the player."""
        return self.size // 4

    @classmethod
    def for_player(cls, player, size=DEFAULT_SIZE):
        """Build a minimap whose player dot sits at ``player``'s position."""
        return cls(
            x_center=int(player.x * size + size),
            y_center=int(player.y * size + size),
            size=size,
        )


def minimap_color(minimap, cell):
    """Colour of a map cell: walls and floor have their own, anything else is black."""
    if cell == _WALL:
        return minimap.wall_color
    if cell == _FLOOR:
        return minimap.background_color
    return 0


def draw_square(frame, minimap, column, row, cell):
    """Paint the square of the cell at ``column``, ``row``, clipped to the frame."""
    color = minimap_color(minimap, cell)
    left = column * minimap.size + minimap.size
    top = row * minimap.size + minimap.size
    if left < 0 or top < 0:
        return
    right = min(left + minimap.size, frame.width)
    bottom = min(top + minimap.size, frame.height)
    for y in range(top, bottom):
        for x in range(left, right):
            frame.put(x, y, color)


def draw_player(frame, minimap):
    """Paint a filled disc at the player's position, clipped to the frame."""
    radius = minimap.radius
    for dx in range(-radius, radius + 1):
        x = minimap.x_center + dx
        if not 0 <= x < frame.width:
            continue
        for dy in range(-radius, radius + 1):
            y = minimap.y_center + dy
            if 0 <= y < frame.height and dx * dx + dy * dy <= radius * radius:
                frame.put(x, y, minimap.player_color)


def draw_minimap(scene, frame):
    """Draw every wall and floor cell of ``scene`` and the player into ``frame``."""
    minimap = Minimap.for_player(scene.player)
    for row, cells in enumerate(scene.rows):
        for column, cell in enumerate(cells):
            if cell in (_WALL, _FLOOR):
                draw_square(frame, minimap, column, row, cell)
    draw_player(frame, minimap)
    return minimap