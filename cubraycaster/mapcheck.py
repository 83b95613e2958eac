"""Locating, padding and validating the map section of a scene file."""

from __future__ import annotations

from typing import List, Sequence

from .errors import CubError
from .text import is_in_char_set

MAP_CHARS = " \t10NWES"
OUTSIDE = "-"
_CARDINALS = frozenset("NSEW")
_ATTRIBUTES = frozenset("01" + OUTSIDE) | _CARDINALS
_TEXTURE_KEYS = ("NO", "SO", "EA", "WE")
_MIN_MAP_START = 5


def is_cardinal_player(c: str) -> bool:
    """Return True when ``c`` marks the player's start and facing direction."""
    return c in _CARDINALS and len(c) == 1


def is_map_line(line: str) -> bool:
    """Return True when the line looks like the first line of a map."""
    if line.startswith(_TEXTURE_KEYS):
        return False
    return bool(line) and is_in_char_set(line[0], MAP_CHARS)


def find_map_start(lines: Sequence[str]) -> int:
    """Return the index of the first map line, or 0 when there is none."""
    return next(
        (index for index, line in enumerate(lines) if is_map_line(line)), 0
    )


def pad_map(rows: Sequence[str], fill: str = OUTSIDE) -> List[str]:
    """Replace spaces with ``fill`` and pad every row to the widest row."""
    width = max((len(row) for row in rows), default=0)
    return [row.replace(" ", fill).ljust(width, fill) for row in rows]


def has_one_player(grid: Sequence[str]) -> bool:
    """Return True when exactly one player marker lies past the first row and column."""
    count = sum(
        1 for row in grid[1:] for c in row[1:] if is_cardinal_player(c)
    )
    return count == 1


def has_valid_attributes(grid: Sequence[str]) -> bool:
    """Return True when every cell is a wall, floor, outside or player marker."""
    return all(c in _ATTRIBUTES for row in grid for c in row)


def _cell(grid: Sequence[str], i: int, j: int) -> str:
    if 0 <= i < len(grid) and 0 <= j < len(grid[i]):
        return grid[i][j]
    return OUTSIDE


def _is_surrounded(grid: Sequence[str], i: int, j: int) -> bool:
    last_column = len(grid[0]) - 1
    if i == 0 or i == len(grid) - 1 or j == 0 or j == last_column:
        return False
    neighbours = (
        _cell(grid, i - 1, j),
        _cell(grid, i + 1, j),
        _cell(grid, i, j - 1),
        _cell(grid, i, j + 1),
    )
    return OUTSIDE not in neighbours


def is_enclosed(grid: Sequence[str]) -> bool:
    """Return True when no floor or player cell touches the outside or an edge."""
    return all(
        _is_surrounded(grid, i, j)
        for i, row in enumerate(grid)
        for j, c in enumerate(row)
        if c == "0" or is_cardinal_player(c)
    )


def extract_map(lines: Sequence[str]) -> List[str]:
    """Return the padded, validated map grid found in the scene lines."""
    start = find_map_start(lines)
    if start < _MIN_MAP_START:
        raise CubError("HM : Error parsing")
    grid = pad_map(lines[start:])
    if not (
        has_one_player(grid)
        and has_valid_attributes(grid)
        and is_enclosed(grid)
    ):
        raise CubError("HM : Error parsing")
    return grid