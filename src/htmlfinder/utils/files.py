"""Utility helpers for discovering documents under the corpus root."""

from __future__ import annotations

import fnmatch
import os
from pathlib import Path
from typing import Iterator

from htmlfinder.errors import FileSystemError

HTML_PATTERN = "*.html"


def _raise_walk_error(exc: OSError) -> None:
    raise FileSystemError(f"Unable to list directory: {exc.strerror or exc}", Path(exc.filename or "")) from exc


def iter_html_paths(root: Path, pattern: str = HTML_PATTERN) -> Iterator[Path]:
    """Yield regular files below ``root`` whose name matches ``pattern``.

    Directories are visited in lexical order so results are deterministic.
    """
    root = Path(root)
    if not root.is_dir():
        raise FileSystemError("Corpus directory does not exist", root)

    for base, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(base) / name
            if fnmatch.fnmatchcase(name, pattern) and path.is_file():
                yield path


def to_match_path(path: Path, root: Path) -> str:
    """Return ``path`` relative to ``root`` with ``/`` separators."""
    relative = os.path.relpath(path, root)
    return relative.replace(os.sep, "/").replace("\\", "/")
