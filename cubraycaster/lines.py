"""Reading a scene file as a list of lines."""

from __future__ import annotations

import os
from typing import List, Union

from .errors import CubError

PathLike = Union[str, "os.PathLike[str]"]


def split_lines(text: str) -> List[str]:
    """Split text on newlines; a trailing newline yields a final empty line."""
    return text.split("\n")


def _read_text(path: PathLike, error_message: str) -> str:
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise CubError(error_message) from exc
    return data.decode("utf-8", errors="surrogateescape")


def read_lines(path: PathLike) -> List[str]:
    """Return every line of the file at ``path``, newlines removed."""
    return split_lines(_read_text(path, "EFRD : err opening fd"))


def count_lines(path: PathLike) -> int:
    """Return how many lines ``read_lines`` yields for the file at ``path``."""
    return _read_text(path, "GFL : err opening fd").count("\n") + 1