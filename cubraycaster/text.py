"""Character and line classification helpers for scene parsing."""

from __future__ import annotations

_SPACES = frozenset("\t \v\f\r")
_TEXTURE_KEYS = ("NO", "SO", "WE", "EA")
_COLOR_KEYS = ("F", "C")


def is_space(c: str) -> bool:
    """Return True for tab, space, vertical tab, form feed or carriage return."""
    return c in _SPACES


def is_in_char_set(c: str, char_set: str) -> bool:
    """Return True when the single character ``c`` occurs in ``char_set``."""
    return len(c) == 1 and c in char_set


def _skip_spaces(line: str, start: int) -> int:
    end = start
    while end < len(line) and is_space(line[end]):
        end += 1
    return end


def needs_pre_trim(line: str) -> bool:
    """Return True when a texture or color line is preceded by whitespace."""
    start = _skip_spaces(line, 0)
    if start == 0:
        return False
    rest = line[start:]
    return rest.startswith(_COLOR_KEYS) or rest.startswith(_TEXTURE_KEYS)


def color_needs_after_trim(line: str) -> bool:
    """Return True when a color key is followed by whitespace and then data."""
    if not line.startswith(_COLOR_KEYS):
        return False
    end = _skip_spaces(line, 1)
    return end > 1 and end < len(line)


def texture_needs_after_trim(line: str) -> bool:
    """Return True when a texture key is followed by tabs or several spaces, then data."""
    if not line.startswith(_TEXTURE_KEYS):
        return False
    end = _skip_spaces(line, 2)
    gap = line[2:end]
    return ("\t" in gap or len(gap) > 1) and end < len(line)