"""Normalising whitespace in texture and color lines before parsing."""

from __future__ import annotations

from typing import List, Sequence

from .text import (
    color_needs_after_trim,
    is_space,
    needs_pre_trim,
    texture_needs_after_trim,
)


def _skip(line: str, start: int, spaces: bool) -> int:
    end = start
    while end < len(line) and is_space(line[end]) == spaces:
        end += 1
    return end


def clean_line(line: str) -> str:
    """Collapse the gap between the key and its data to a single space."""
    key_start = _skip(line, 0, True)
    key_end = _skip(line, key_start, False)
    data_start = _skip(line, key_end, True)
    return f"{line[key_start:key_end]} {line[data_start:]}"


def pre_clean(lines: Sequence[str]) -> List[str]:
    """Return the lines with texture and color entries trimmed and normalised."""
    trimmed = [
        line.strip(" \t") if needs_pre_trim(line) else line for line in lines
    ]
    return [
        clean_line(line)
        if color_needs_after_trim(line) or texture_needs_after_trim(line)
        else line
        for line in trimmed
    ]