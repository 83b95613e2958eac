"""The player's position, view direction and camera plane, and its movement."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .config import PLAYER_MOVE_SPEED, PLAYER_ROT_SPEED
from .errors import CubError
from .mapcheck import is_cardinal_player

FLOOR = "0"
PLANE_SCALE = 0.66

_DIRECTIONS = {
    "W": (-1.0, 0.0),
    "E": (1.0, 0.0),
    "N": (0.0, -1.0),
    "S": (0.0, 1.0),
}


def _cell(grid: Sequence[str], row: int, column: int) -> str:
    if 0 <= row < len(grid) and 0 <= column < len(grid[row]):
        return grid[row][column]
    return ""


def _is_floor(grid: Sequence[str], x: float, y: float) -> bool:
    return _cell(grid, int(y), int(x)) == FLOOR


@dataclass
class Player:
    """Position, facing direction and camera plane of the viewer."""

    x: float
    y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float
    move_speed: float = PLAYER_MOVE_SPEED
    rot_speed: float = PLAYER_ROT_SPEED

    def _step(self, grid: Sequence[str], dx: float, dy: float) -> None:
        if _is_floor(grid, self.x + dx, self.y):
            self.x += dx
        if _is_floor(grid, self.x, self.y + dy):
            self.y += dy

    def move_forward(self, grid: Sequence[str]) -> None:
        """Step along the view direction; each axis moves only onto floor."""
        self._step(grid, self.dir_x * self.move_speed, self.dir_y * self.move_speed)

    def move_backward(self, grid: Sequence[str]) -> None:
        """Step against the view direction; each axis moves only onto floor."""
        self._step(grid, -self.dir_x * self.move_speed, -self.dir_y * self.move_speed)

    def strafe_left(self, grid: Sequence[str]) -> None:
        """Step sideways to the left of the view direction."""
        self._step(grid, self.dir_y * self.move_speed, -self.dir_x * self.move_speed)

    def strafe_right(self, grid: Sequence[str]) -> None:
        """Step sideways to the right of the view direction."""
        self._step(grid, -self.dir_y * self.move_speed, self.dir_x * self.move_speed)

    def _rotate(self, angle: float) -> None:
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def turn_left(self) -> None:
        """Rotate direction and camera plane by the rotation speed."""
        self._rotate(self.rot_speed)

    def turn_right(self) -> None:
        """Rotate direction and camera plane by minus the rotation speed."""
        self._rotate(-self.rot_speed)


def spawn_player(grid: Sequence[str]) -> Player:
    """Create the player at the centre of the map's start cell, facing its marker.

    When several markers exist the last one found wins; with none, CubError is raised.
    """
    spawn = None
    for i, row in enumerate(grid):
        for j, c in enumerate(row):
            if is_cardinal_player(c):
                spawn = (i, j, c)
    if spawn is None:
        raise CubError("no player start position in map")
    i, j, marker = spawn
    dir_x, dir_y = _DIRECTIONS[marker]
    return Player(
        x=j + 0.5,
        y=i + 0.5,
        dir_x=dir_x,
        dir_y=dir_y,
        plane_x=PLANE_SCALE * -dir_y,
        plane_y=PLANE_SCALE * dir_x,
    )