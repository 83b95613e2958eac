"""Casting one ray per screen column through the map grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from .config import SCREEN_H, SCREEN_W, TEXTURE_W
from .errors import CubError
from .player import Player

_MAX_LINE_HEIGHT = 2**31 - 1


@dataclass(frozen=True)
class RayHit:
    """Where a column's ray struck a wall and how to texture it."""

    tile_x: int
    tile_y: int
    side: int
    step_x: int
    step_y: int
    ray_dir_x: float
    ray_dir_y: float
    wall_distance: float
    wall_x: float
    texture_id: int
    texture_x: int


def _delta(component: float) -> float:
    return math.inf if component == 0 else abs(1 / component)


def _first_side(ray: float, position: float, tile: int, delta: float) -> Tuple[int, float]:
    if ray < 0:
        return -1, (position - tile) * delta
    return 1, (tile + 1.0 - position) * delta


def cast_ray(player: Player, grid: Sequence[str], x: int, width: int = SCREEN_W) -> RayHit:
    """Trace the ray for screen column ``x`` until it hits a wall cell."""
    camera = 2 * x / width - 1
    ray_x = player.dir_x + player.plane_x * camera
    ray_y = player.dir_y + player.plane_y * camera
    tile_x = int(player.x)
    tile_y = int(player.y)
    delta_x = _delta(ray_x)
    delta_y = _delta(ray_y)
    step_x, side_x = _first_side(ray_x, player.x, tile_x, delta_x)
    step_y, side_y = _first_side(ray_y, player.y, tile_y, delta_y)

    side = 0
    while True:
        if side_x < side_y:
            side_x += delta_x
            tile_x += step_x
            side = 0
        else:
            side_y += delta_y
            tile_y += step_y
            side = 1
        if not (0 <= tile_y < len(grid) and 0 <= tile_x < len(grid[tile_y])):
            raise CubError("ray left the map")
        if grid[tile_y][tile_x] > "0":
            break

    if side == 0:
        distance = (tile_x - player.x + (1 - step_x) // 2) / ray_x
        wall_x = player.y + distance * ray_y
    else:
        distance = (tile_y - player.y + (1 - step_y) // 2) / ray_y
        wall_x = player.x + distance * ray_x
    wall_x -= math.floor(wall_x)

    texture_x = int(wall_x * TEXTURE_W)
    if side == 0 and ray_x > 0:
        texture_x = TEXTURE_W - texture_x - 1

    return RayHit(
        tile_x=tile_x,
        tile_y=tile_y,
        side=side,
        step_x=step_x,
        step_y=step_y,
        ray_dir_x=ray_x,
        ray_dir_y=ray_y,
        wall_distance=distance,
        wall_x=wall_x,
        texture_id=ord(grid[tile_y][tile_x]) - ord("0"),
        texture_x=texture_x,
    )


def column_span(hit: RayHit, height: int = SCREEN_H) -> Tuple[int, int, int]:
    """Return (line height, first row, last row) of the wall slice on screen."""
    if hit.wall_distance > 0:
        line_height = min(int(height / hit.wall_distance), _MAX_LINE_HEIGHT)
    else:
        line_height = _MAX_LINE_HEIGHT
    draw_start = max(-(line_height // 2) + height // 2, 0)
    draw_end = min(line_height // 2 + height // 2, height - 1)
    return line_height, draw_start, draw_end