"""Reading and validating a ``.cub`` scene description."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .colors import parse_color
from .config import are_win_params_correct
from .errors import CubError
from .lines import read_lines
from .mapcheck import extract_map
from .preclean import pre_clean
from .textures import check_texture, is_texture_path_valid

PathLike = Union[str, "os.PathLike[str]"]

_SCENE_EXTENSION = ".cub"
_TEXTURE_KEYS = ("NO", "SO", "WE", "EA")
_TEXTURE_ERROR = "HPT : parser error"


@dataclass
class Scene:
    """Everything a scene file defines: textures, colors and the map."""

    north: str
    south: str
    west: str
    east: str
    floor: int
    ceiling: int
    grid: List[str] = field(default_factory=list)

    @property
    def texture_paths(self) -> Tuple[str, str, str, str]:
        """Texture paths in engine slot order: north, south, east, west."""
        return (self.north, self.south, self.east, self.west)


def check_input_path(path: Optional[PathLike]) -> bool:
    """Return True for a readable, regular, non-symlinked ``.cub`` file."""
    if path is None:
        return False
    name = os.fspath(path)
    if not name:
        return False
    if len(name) < len(_SCENE_EXTENSION) or not name.endswith(_SCENE_EXTENSION):
        return False
    try:
        with open(name, "rb"):
            pass
    except OSError:
        return False
    if len(name) > len(_SCENE_EXTENSION) and name[-len(_SCENE_EXTENSION) - 1] == "/":
        return False
    if os.path.isdir(name):
        return False
    return not os.path.islink(name)


def check_arguments(argv: Sequence[str]) -> str:
    """Validate the command-line arguments (program name excluded); return the scene path."""
    args = list(argv)
    if not are_win_params_correct():
        raise CubError("PPP: Wrong window parameters")
    if len(args) != 1:
        raise CubError("PPP: Wrong amount of arguments")
    if not check_input_path(args[0]):
        raise CubError("PPP: Err inputed file")
    return args[0]


def parse_texture_paths(lines: Sequence[str]) -> Dict[str, Optional[str]]:
    """Return the texture path for each of NO, SO, WE and EA (None when absent)."""
    paths: Dict[str, Optional[str]] = dict.fromkeys(_TEXTURE_KEYS)
    for line in lines:
        key = line[:2]
        if key in paths and line[2:3] == " ":
            if paths[key] is not None:
                raise CubError("HC&T: T. are duplicated")
            paths[key] = line[2:].strip(" \t")
    return paths


def _validate_texture_paths(
    paths: Dict[str, Optional[str]], open_files: bool
) -> Dict[str, str]:
    if not all(is_texture_path_valid(paths[key]) for key in _TEXTURE_KEYS):
        raise CubError(_TEXTURE_ERROR)
    valid = {key: str(paths[key]) for key in _TEXTURE_KEYS}
    if open_files and not all(
        check_texture(valid[key]) for key in ("NO", "SO", "EA", "WE")
    ):
        raise CubError(_TEXTURE_ERROR)
    return valid


def parse_colors(lines: Sequence[str]) -> Tuple[int, int]:
    """Return the (floor, ceiling) colors; each must appear exactly once."""
    floor: Optional[int] = None
    ceiling: Optional[int] = None
    for line in lines:
        if line.startswith("C "):
            if ceiling is not None:
                raise CubError("HIPC : parser error")
            ceiling = parse_color(line)
        elif line.startswith("F "):
            if floor is not None:
                raise CubError("HIPC : parser error")
            floor = parse_color(line)
    if floor is None or ceiling is None:
        raise CubError("HC&T : error parser")
    return floor, ceiling


def parse_scene(path: PathLike, check_textures: bool = True) -> Scene:
    """Read and validate the scene at ``path``.

    With ``check_textures`` each texture file is also opened and its size checked.
    """
    lines = pre_clean(read_lines(path))
    paths = _validate_texture_paths(parse_texture_paths(lines), check_textures)
    floor, ceiling = parse_colors(lines)
    grid = extract_map(lines)
    return Scene(
        north=paths["NO"],
        south=paths["SO"],
        west=paths["WE"],
        east=paths["EA"],
        floor=floor,
        ceiling=ceiling,
        grid=grid,
    )