"""Loading and validating XPM wall textures."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from PIL import ImageColor

from .config import TEXTURE_H, TEXTURE_W
from .errors import CubError

PathLike = Union[str, "os.PathLike[str]"]

_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_STRING = re.compile(r'"((?:[^"\\]|\\.)*)"')
_VISUAL_KEYS = frozenset({"c", "m", "s", "g", "g4"})
_EXTENSION = ".xpm"


@dataclass(frozen=True)
class Texture:
    """A decoded image: packed 0xRRGGBB pixels stored row by row."""

    width: int
    height: int
    pixels: Tuple[int, ...]

    def at(self, index: int) -> int:
        """Return the pixel at the flat ``index`` (row * width + column)."""
        return self.pixels[index]


def is_texture_path_valid(path: Optional[str]) -> bool:
    """Return True when ``path`` names an ``.xpm`` file with a non-empty name."""
    if not path:
        return False
    if len(path) < len(_EXTENSION) + 1:
        return False
    if not path.endswith(_EXTENSION):
        return False
    return path[-len(_EXTENSION) - 1] != "/"


def _load_error(path: PathLike) -> CubError:
    return CubError(f"cannot load texture {os.fspath(path)}")


def _parse_color_value(value: str, path: PathLike) -> int:
    if value.lower() == "none":
        return 0
    if value.startswith("#") and len(value) == 13:
        digits = value[1:]
        try:
            red, green, blue = (int(digits[i:i + 4], 16) >> 8 for i in (0, 4, 8))
        except ValueError as exc:
            raise _load_error(path) from exc
        return (red << 16) | (green << 8) | blue
    try:
        rgb = ImageColor.getrgb(value)
    except ValueError as exc:
        raise _load_error(path) from exc
    red, green, blue = rgb[:3]
    return (red << 16) | (green << 8) | blue


def _color_entry(text: str, cpp: int, path: PathLike) -> Tuple[str, int]:
    key = text[:cpp]
    if len(key) != cpp:
        raise _load_error(path)
    visuals: Dict[str, List[str]] = {}
    current: Optional[str] = None
    for token in text[cpp:].split():
        if token in _VISUAL_KEYS and (current is None or visuals[current]):
            current = token
            visuals[current] = []
        elif current is not None:
            visuals[current].append(token)
        else:
            raise _load_error(path)
    words = visuals.get("c") or next((v for v in visuals.values() if v), None)
    if not words:
        raise _load_error(path)
    return key, _parse_color_value(" ".join(words), path)


def _header(strings: Sequence[str], path: PathLike) -> Tuple[int, int, int, int]:
    if not strings:
        raise _load_error(path)
    fields = strings[0].split()
    if len(fields) < 4:
        raise _load_error(path)
    try:
        width, height, ncolors, cpp = (int(field) for field in fields[:4])
    except ValueError as exc:
        raise _load_error(path) from exc
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise _load_error(path)
    return width, height, ncolors, cpp


def load_texture(path: PathLike) -> Texture:
    """Decode the XPM image at ``path``; raise CubError when it cannot be read."""
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        raise _load_error(path) from exc
    strings = _STRING.findall(_COMMENT.sub("", text))
    width, height, ncolors, cpp = _header(strings, path)
    if len(strings) < 1 + ncolors + height:
        raise _load_error(path)
    palette = dict(
        _color_entry(entry, cpp, path) for entry in strings[1:1 + ncolors]
    )
    rows = strings[1 + ncolors:1 + ncolors + height]
    pixels: List[int] = []
    for row in rows:
        if len(row) < width * cpp:
            raise _load_error(path)
        try:
            pixels.extend(
                palette[row[start:start + cpp]]
                for start in range(0, width * cpp, cpp)
            )
        except KeyError as exc:
            raise _load_error(path) from exc
    return Texture(width, height, tuple(pixels))


def check_texture(path: PathLike) -> bool:
    """Return True when the texture loads and has the expected size."""
    try:
        texture = load_texture(path)
    except CubError:
        return False
    return texture.width == TEXTURE_W and texture.height == TEXTURE_H


def load_textures(paths: Iterable[PathLike]) -> List[Texture]:
    """Load each texture into a zeroed buffer of the engine's texture size."""
    size = TEXTURE_W * TEXTURE_H
    textures = []
    for path in paths:
        decoded = load_texture(path)
        buffer = [0] * size
        copied = decoded.pixels[:size]
        buffer[:len(copied)] = copied
        textures.append(Texture(TEXTURE_W, TEXTURE_H, tuple(buffer)))
    return textures