# cubraycaster

A small first-person raycasting engine. You describe a maze in a `.cub`
scene file. The maze is shown in a window with textured walls and plain
floor and ceiling colours, and you can walk around in it.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
cubraycaster path/to/scene.cub
```

The command takes exactly one argument. It must be an existing, readable
file whose name ends in `.cub`. Directories and symbolic links are refused.
If the arguments, the scene or a texture is not valid, the program writes
`Error` and a short reason on the next line to standard error, then exits
with status 1.

The window is 720×480 pixels and is titled `cub3d`.

### Controls

| Key | Action |
| --- | --- |
| `W` / `S` | move forward / backward |
| `A` / `D` | strafe left / right |
| Left / Right arrow | turn left / right |
| `Esc`, or closing the window | quit |

Movement keys act for as long as they are held. A step along each axis is
only taken when it lands on a floor cell.

## Scene files

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

        1111111111111
        1000000000001
111111111011000001111
100000000000000000001
1111111111110N0000001
           11111111111
```

- `NO`, `SO`, `WE` and `EA` name the wall textures. Each path must end in
  `.xpm` and have a file name before the extension. The file must be an XPM
  image of exactly 64×64 pixels. Each texture may be given only once.
- `F` and `C` set the floor and ceiling colours as `R,G,B`. There must be
  exactly three parts, each of one to three digits, each from 0 to 255.
  Each colour must be given exactly once.
- Whitespace before a texture or colour line, and between the identifier
  and its value, is allowed.
- The map is the last part of the file. It starts at the first line that
  begins with a space, a tab, `0`, `1`, `N`, `S`, `E` or `W` (and is not a
  texture line), and that line must come at index 5 or later. Everything
  from there to the end of the file is treated as map.
- In the map, `1` is a wall and `0` is floor. Exactly one `N`, `S`, `E` or
  `W` marks where the player starts and the way they face. Spaces are
  outside the map. Rows are padded to the width of the longest row. Every
  floor cell and the start cell must be closed in: none may lie on the
  map's edge or next to an outside cell. Any other character, tabs
  included, makes the map invalid.

## Using it as a library

The parts can be used on their own:

```python
from cubraycaster.scene import parse_scene
from cubraycaster.player import spawn_player
from cubraycaster.raycast import cast_ray, column_span

scene = parse_scene("maze.cub", check_textures=False)
player = spawn_player(scene.grid)
hit = cast_ray(player, scene.grid, 360, 720)
line_height, first_row, last_row = column_span(hit, 480)
print(hit.wall_distance, hit.texture_id, line_height, first_row, last_row)
```

- `cubraycaster.scene.parse_scene(path, check_textures=True)` returns a
  `Scene` with the four texture paths, the `floor` and `ceiling` colours as
  packed `0xRRGGBB` integers, and the padded map `grid`. With
  `check_textures=False` the texture files are not opened.
- `cubraycaster.player.Player` holds position, direction and camera plane,
  and has `move_forward`, `move_backward`, `strafe_left`, `strafe_right`,
  `turn_left` and `turn_right`.
- `cubraycaster.textures.load_texture` decodes an XPM file into a
  `Texture`; `load_textures` loads several at the engine's 64×64 size.
- `cubraycaster.renderer.Renderer(textures, floor, ceiling)` draws a frame
  with `render(player, grid)` and returns it as rows of packed pixels.
- `cubraycaster.app.Game` ties a scene, a player and a renderer together:
  `key_press`, `key_release` and `update` drive it without a window.
- `cubraycaster.colors.parse_color` and `cubraycaster.mapcheck.extract_map`
  handle single parts of a scene.

Problems are reported by raising `cubraycaster.errors.CubError`.