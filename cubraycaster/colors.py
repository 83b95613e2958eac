"""Parsing floor and ceiling color lines."""

from __future__ import annotations

from typing import List, Sequence

from .errors import CubError

_DIGITS = frozenset("0123456789")
_PARSE_ERROR = "HIPC : parser error"


def split_components(text: str) -> List[str]:
    """Split on commas, drop empty pieces and trim spaces and tabs from each."""
    return [piece.strip(" \t") for piece in text.split(",") if piece]


def has_valid_rgb_data(components: Sequence[str]) -> bool:
    """Return True for exactly three non-empty groups of at most three digits."""
    if len(components) != 3:
        return False
    return all(
        0 < len(part) <= 3 and all(c in _DIGITS for c in part)
        for part in components
    )


def parse_color(line: str) -> int:
    """Return the packed 0xRRGGBB value of a line such as ``F 20,20,20``."""
    components = split_components(line[2:])
    if not has_valid_rgb_data(components):
        raise CubError(_PARSE_ERROR)
    red, green, blue = (int(part) for part in components)
    if not all(0 <= value <= 255 for value in (red, green, blue)):
        raise CubError(_PARSE_ERROR)
    return (red << 16) | (green << 8) | blue