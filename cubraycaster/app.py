"""The game loop: input state, movement and the display window."""

from __future__ import annotations

import enum
import sys
from typing import List, Optional, Sequence, Set

from .config import SCREEN_H, SCREEN_W
from .errors import CubError, report_error
from .player import FLOOR, Player, spawn_player
from .renderer import Frame, Renderer
from .scene import Scene, check_arguments, parse_scene
from .textures import Texture, load_textures

WINDOW_TITLE = "cub3d"


class Key(enum.IntEnum):
    """Key codes understood by the game (X11 keysym values)."""

    A = 97
    D = 100
    S = 115
    W = 119
    ESCAPE = 65307
    LEFT = 65361
    RIGHT = 65363


_MOVEMENT_KEYS = frozenset(
    {Key.LEFT, Key.RIGHT, Key.W, Key.S, Key.D, Key.A}
)


class Game:
    """Player, map and renderer, driven by held keys."""

    def __init__(
        self,
        scene: Scene,
        textures: Optional[Sequence[Texture]] = None,
        width: int = SCREEN_W,
        height: int = SCREEN_H,
    ) -> None:
        self.scene = scene
        self.player: Player = spawn_player(scene.grid)
        row = int(self.player.y)
        column = int(self.player.x)
        self.grid: List[str] = list(scene.grid)
        line = self.grid[row]
        self.grid[row] = line[:column] + FLOOR + line[column + 1:]
        if textures is None:
            textures = load_textures(scene.texture_paths)
        self.renderer = Renderer(textures, scene.floor, scene.ceiling, width, height)
        self.held: Set[int] = set()
        self.running = True

    def key_press(self, key: int) -> None:
        """Mark a movement key as held; Escape stops the game."""
        if key == Key.ESCAPE:
            self.running = False
        elif key in _MOVEMENT_KEYS:
            self.held.add(key)

    def key_release(self, key: int) -> None:
        """Mark a movement key as no longer held."""
        self.held.discard(key)

    def update(self) -> Frame:
        """Apply every held key's movement, then render and return the frame."""
        player = self.player
        grid = self.grid
        if Key.LEFT in self.held:
            player.turn_right()
        if Key.RIGHT in self.held:
            player.turn_left()
        if Key.W in self.held:
            player.move_forward(grid)
        if Key.S in self.held:
            player.move_backward(grid)
        if Key.A in self.held:
            player.strafe_left(grid)
        if Key.D in self.held:
            player.strafe_right(grid)
        return self.renderer.render(player, grid)


def _frame_bytes(frame: Frame) -> bytes:
    return b"".join(pixel.to_bytes(3, "big") for row in frame for pixel in row)


def _run(game: Game) -> None:
    import pygame

    key_map = {
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_w: Key.W,
        pygame.K_s: Key.S,
        pygame.K_a: Key.A,
        pygame.K_d: Key.D,
        pygame.K_ESCAPE: Key.ESCAPE,
    }
    size = (game.renderer.width, game.renderer.height)
    pygame.init()
    try:
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(WINDOW_TITLE)
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN and event.key in key_map:
                    game.key_press(key_map[event.key])
                elif event.type == pygame.KEYUP and event.key in key_map:
                    game.key_release(key_map[event.key])
            if not game.running:
                break
            frame = game.update()
            surface = pygame.image.frombuffer(_frame_bytes(frame), size, "RGB")
            screen.blit(surface, (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the arguments, load the scene and run the game window."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = check_arguments(args)
        game = Game(parse_scene(path))
    except CubError as exc:
        report_error(exc.message)
        return 1
    _run(game)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())