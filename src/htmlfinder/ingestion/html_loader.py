"""HTML text extraction.

Uses BeautifulSoup with the built-in ``html.parser`` backend, which accepts
unclosed tags and missing structure the way browsers do.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString

from htmlfinder.errors import FileSystemError, ParseError

LOGGER = logging.getLogger(__name__)


def iter_text_nodes(soup: BeautifulSoup) -> Iterator[str]:
    """Yield text nodes depth-first, in document order.

    Comments, doctypes, CDATA and processing instructions are skipped.
    """
    for node in soup.descendants:
        if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
            yield str(node)


def extract_text(content: bytes | str) -> str:
    """Return the concatenated text content of an HTML document."""
    try:
        soup = BeautifulSoup(content, "html.parser")
    except Exception as exc:
        raise ParseError(f"Unable to parse HTML: {exc}") from exc
    return "".join(iter_text_nodes(soup))


def read_document_text(path: Path) -> str:
    """Read an HTML file from disk and extract its text."""
    try:
        content = Path(path).read_bytes()
    except OSError as exc:
        raise FileSystemError(f"Unable to read file: {exc.strerror or exc}", path) from exc

    try:
        return extract_text(content)
    except ParseError as exc:
        raise ParseError("Unable to parse HTML", path) from exc
