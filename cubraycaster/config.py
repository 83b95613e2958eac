"""Fixed engine parameters: screen, texture and player settings."""

TEXTURE_W = 64
TEXTURE_H = 64

SCREEN_W = 720
SCREEN_H = 480

PLAYER_MOVE_SPEED = 0.071
PLAYER_ROT_SPEED = 0.0351

MIN_SCREEN_W = 72
MAX_SCREEN_W = 1080
MIN_SCREEN_H = 48
MAX_SCREEN_H = 1920


def are_win_params_correct(width: int = SCREEN_W, height: int = SCREEN_H) -> bool:
    """Return True when the window size lies within the accepted range."""
    return (
        MIN_SCREEN_W <= width <= MAX_SCREEN_W
        and MIN_SCREEN_H <= height <= MAX_SCREEN_H
    )