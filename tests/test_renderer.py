import pytest

from cubraycaster.config import TEXTURE_H, TEXTURE_W
from cubraycaster.errors import CubError
from cubraycaster.player import Player
from cubraycaster.raycast import cast_ray
from cubraycaster.renderer import Renderer, shade, wall_color
from cubraycaster.textures import Texture

GRID = [
    "11111",
    "10001",
    "10001",
    "10001",
    "11111",
]

NORTH, SOUTH, EAST, WEST = 0x112233, 0x445566, 0x778899, 0xAABBCC
FLOOR, CEILING = 0x102030, 0x405060
WIDTH, HEIGHT = 64, 48


def _solid(color):
    return Texture(TEXTURE_W, TEXTURE_H, tuple([color] * (TEXTURE_W * TEXTURE_H)))


def _textures():
    return [_solid(NORTH), _solid(SOUTH), _solid(EAST), _solid(WEST)]


def _renderer():
    return Renderer(_textures(), FLOOR, CEILING, WIDTH, HEIGHT)


def _facing_north():
    return Player(x=2.5, y=2.5, dir_x=0.0, dir_y=-1.0, plane_x=0.66, plane_y=0.0)


def _facing_east():
    return Player(x=2.5, y=2.5, dir_x=1.0, dir_y=0.0, plane_x=0.0, plane_y=0.66)


def test_shade_uses_source_mask():
    assert shade(0xFFFFFF) == 0x7F7F7F


def test_shade_halves_each_channel():
    assert shade(0x020406) == 0x010203


def test_shade_never_brightens():
    for color in (0, 0x123456, 0xFFFFFF, 0x808080):
        assert shade(color) <= color


def test_frame_dimensions():
    frame = _renderer().render(_facing_north(), GRID)
    assert len(frame) == HEIGHT
    assert all(len(row) == WIDTH for row in frame)


def test_top_is_ceiling_and_bottom_is_floor():
    frame = _renderer().render(_facing_north(), GRID)
    assert all(pixel == CEILING for pixel in frame[0])
    assert all(pixel == FLOOR for pixel in frame[-1])


def test_centre_of_y_side_hit_is_unshaded_texture():
    frame = _renderer().render(_facing_north(), GRID)
    assert frame[HEIGHT // 2][WIDTH // 2] == SOUTH


def test_centre_of_x_side_hit_is_shaded_texture():
    frame = _renderer().render(_facing_east(), GRID)
    assert frame[HEIGHT // 2][WIDTH // 2] == shade(WEST)


def test_every_pixel_is_a_known_color():
    allowed = {FLOOR, CEILING, NORTH, SOUTH}
    allowed |= {shade(EAST), shade(WEST)}
    for player in (_facing_north(), _facing_east()):
        frame = _renderer().render(player, GRID)
        assert {pixel for row in frame for pixel in row} <= allowed


def test_render_is_deterministic():
    renderer = _renderer()
    first = [row[:] for row in renderer.render(_facing_north(), GRID)]
    second = renderer.render(_facing_north(), GRID)
    assert first == second


def test_wall_column_is_symmetric_about_centre():
    frame = _renderer().render(_facing_north(), GRID)
    column = [row[WIDTH // 2] for row in frame]
    walls = [y for y, pixel in enumerate(column) if pixel not in (FLOOR, CEILING)]
    assert walls
    assert walls == list(range(walls[0], walls[-1] + 1))
    assert walls[0] - 0 == HEIGHT - 1 - walls[-1] - 1 or walls[0] == HEIGHT - walls[-1] - 1


def test_wall_color_reads_indexed_pixel():
    gradient = Texture(
        TEXTURE_W, TEXTURE_H, tuple(range(TEXTURE_W * TEXTURE_H))
    )
    textures = [gradient, gradient, gradient, gradient]
    player = _facing_north()
    hit = cast_ray(player, GRID, WIDTH // 2, WIDTH)
    assert hit.side == 1
    rows = [wall_color(hit, textures, ty, player) for ty in range(TEXTURE_H)]
    assert rows == sorted(rows)
    assert rows[1] - rows[0] == TEXTURE_H


def test_renderer_needs_four_textures():
    with pytest.raises(CubError):
        Renderer(_textures()[:3], FLOOR, CEILING, WIDTH, HEIGHT)