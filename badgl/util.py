"""Path and file helpers."""

from __future__ import annotations

import os
from pathlib import Path


def str_find_last_of(text: str, c: str) -> int:
    """Index of the last occurrence of ``c`` in ``text``.

    When ``c`` does not occur the start of the text (index 0) is returned.
    """
    index = text.rfind(c)
    return index if index >= 0 else 0


def find_directory_from_path(path: str, windows: bool | None = None) -> str:
    """Directory part of ``path``, without the trailing separator.

    On Windows both ``/`` and ``\\`` count as separators. A path with no
    separator yields an empty string.
    """
    if windows is None:
        windows = os.name == "nt"
    last = str_find_last_of(path, "/")
    if windows:
        last = max(last, str_find_last_of(path, "\\"))
    return path[:last]


def read_file(path: str | os.PathLike) -> str:
    """Whole contents of a text file, line endings kept as they are on disk."""
    with open(Path(path), "r", encoding="utf-8", newline="") as handle:
        return handle.read()