"""Turning ray hits into a frame of packed 0xRRGGBB pixels."""

from __future__ import annotations

import math
from typing import List, Sequence

from .config import SCREEN_H, SCREEN_W, TEXTURE_H
from .errors import CubError
from .player import Player
from .raycast import RayHit, cast_ray, column_span
from .textures import Texture

_SHADE_MASK = 8355711
_TEXTURE_SLOTS = 4

Frame = List[List[int]]


def shade(color: int) -> int:
    """Halve every channel of a packed color."""
    return (color >> 1) & _SHADE_MASK


def wall_color(
    hit: RayHit, textures: Sequence[Texture], texture_y: int, player: Player
) -> int:
    """Return the wall pixel for row ``texture_y`` of the texture the hit selects.

    Slots are north, south, east, west. Hits on an x side are shaded.
    """
    index = TEXTURE_H * texture_y + hit.texture_x
    if hit.side == 1:
        facing = hit.tile_y + (1 - hit.step_y) // 2 > player.y
        return textures[0 if facing else 1].at(index)
    facing = hit.tile_x + (1 - hit.step_x) // 2 > player.x
    return shade(textures[3 if facing else 2].at(index))


class Renderer:
    """Draws the scene seen by a player into a persistent pixel buffer."""

    def __init__(
        self,
        textures: Sequence[Texture],
        floor: int,
        ceiling: int,
        width: int = SCREEN_W,
        height: int = SCREEN_H,
    ) -> None:
        if len(textures) != _TEXTURE_SLOTS:
            raise CubError("renderer needs exactly four textures")
        self.textures = list(textures)
        self.floor = floor
        self.ceiling = ceiling
        self.width = width
        self.height = height
        self.buffer: Frame = [[0] * width for _ in range(height)]

    def _draw_column(self, x: int, player: Player, grid: Sequence[str]) -> None:
        hit = cast_ray(player, grid, x, self.width)
        line_height, start, end = column_span(hit, self.height)
        buffer = self.buffer
        for y in range(start):
            buffer[y][x] = self.ceiling
        for y in range(end, self.height):
            buffer[y][x] = self.floor
        if start >= end:
            return
        step = TEXTURE_H / line_height if line_height else math.inf
        coord = (start - self.height // 2 + line_height // 2) * step
        for y in range(start, end):
            texture_y = int(coord) & (TEXTURE_H - 1)
            coord += step
            buffer[y][x] = wall_color(hit, self.textures, texture_y, player)

    def render(self, player: Player, grid: Sequence[str]) -> Frame:
        """Draw one frame for ``player`` in ``grid`` and return the buffer (rows of pixels)."""
        for x in range(self.width):
            self._draw_column(x, player, grid)
        return self.buffer