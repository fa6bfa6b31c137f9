"""Substring search over the HTML corpus."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from htmlfinder.errors import ParseError
from htmlfinder.ingestion.html_loader import read_document_text
from htmlfinder.utils.files import HTML_PATTERN, iter_html_paths, to_match_path

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class SearchResult:
    query: str
    matches: List[str] = field(default_factory=list)
    scanned: int = 0
    skipped: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.matches)


class FileSearcher:
    """Re-scans the corpus on every query; nothing is cached between calls.

    Read and enumeration failures abort the search with ``FileSystemError``.
    Documents that fail to parse are logged and skipped unless
    ``skip_unparsable`` is False, in which case the ``ParseError`` propagates.
    """

    def __init__(
        self,
        root: Path,
        *,
        pattern: str = HTML_PATTERN,
        skip_unparsable: bool = True,
    ) -> None:
        self.root = Path(root)
        self.pattern = pattern
        self.skip_unparsable = skip_unparsable

    def search(self, query: str) -> SearchResult:
        if not query:
            raise ValueError("Empty query")

        needle = query.lower()
        result = SearchResult(query=query)
        for path in iter_html_paths(self.root, self.pattern):
            result.scanned += 1
            try:
                text = read_document_text(path)
            except ParseError as exc:
                if not self.skip_unparsable:
                    raise
                LOGGER.warning("Skipping unparsable document %s: %s", path, exc)
                result.skipped.append(to_match_path(path, self.root))
                continue
            if needle in text.lower():
                result.matches.append(to_match_path(path, self.root))

        LOGGER.debug(
            "Query %r matched %d of %d documents", query, len(result.matches), result.scanned
        )
        return result
