"""Shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def corpus(tmp_path: Path) -> Path:
    """Small corpus: docs/x.html, docs/sub/y.html and a non-HTML decoy."""
    root = tmp_path / "corpus"
    (root / "docs" / "sub").mkdir(parents=True)
    (root / "docs" / "x.html").write_text("<html><body><p>Alpha <b>Beta</b></p></body></html>")
    (root / "docs" / "sub" / "y.html").write_text("<p>beta gamma</p>")
    (root / "docs" / "notes.txt").write_text("beta in a text file")
    return root
