"""Normalisation and validation of the map grid.

Rows are plain strings of '1', '0' and ' ' characters; functions that
change a grid return a new list and leave their input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable

_ALLOWED = frozenset("10 ")


def fill_with_zeros(row):
    """Turn every space after the row's leading spaces into '0'."""
    body = row.lstrip(" ")
    indent = row[: len(row) - len(body)]
    return indent + body.replace(" ", "0")


def remove_extra_zeros(rows, column):
    """Blank out the '0' cells in ``column`` reachable from the top or bottom edge.

    Walking stops at the first cell in the column that is neither '0' nor
    ' '; rows too short to reach the column are passed over.
    """
    grid = [list(row) for row in rows]
    height = len(grid)

    def clear(order: Iterable[int]) -> int | None:
        for index in order:
            cells = grid[index]
            if column >= len(cells):
                continue
            if cells[column] == "0":
                cells[column] = " "
            elif cells[column] != " ":
                return index
        return None

    stopped = clear(range(height))
    if stopped is not None and stopped != height - 1:
        clear(reversed(range(height)))
    return ["".join(cells) for cells in grid]


def format_map(rows):
    """Fill inner gaps with floor and strip floor that lies outside the walls."""
    formatted = [fill_with_zeros(row) for row in rows]
    width = max((len(row) for row in formatted), default=0)
    for column in range(width):
        formatted = remove_extra_zeros(formatted, column)
    return formatted


def check_map_characters(rows):
    """Return True when every cell is '1', '0' or ' '."""
    return all(char in _ALLOWED for row in rows for char in row)


def _cell_is_open(row: str, column: int) -> bool:
    return column >= len(row) or row[column] == " "


def _row_is_closed(rows: list[str], index: int) -> bool:
    row = rows[index]
    last = len(rows) - 1
    for column, cell in enumerate(row):
        if cell != "0":
            continue
        if index > 0 and _cell_is_open(rows[index - 1], column):
            return False
        if index < last and _cell_is_open(rows[index + 1], column):
            return False
        if column > 0 and row[column - 1] == " ":
            return False
        if column < len(row) - 1 and row[column + 1] == " ":
            return False
    return True


def check_map_borders(rows):
    """Return True when no floor cell touches empty space."""
    rows = list(rows)
    return all(_row_is_closed(rows, index) for index in range(len(rows)))