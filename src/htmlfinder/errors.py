"""Error kinds raised by the search pipeline."""

from __future__ import annotations

from pathlib import Path


class InvalidRangeConfig(ValueError):
    """A configured address range is not valid CIDR notation."""

    def __init__(self, value: str, reason: str = "") -> None:
        self.value = value
        message = f"Invalid address range {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ParseError(Exception):
    """An HTML document could not be parsed at all."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message if path is None else f"{path}: {message}")


class FileSystemError(Exception):
    """Enumerating or reading the corpus failed."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message if path is None else f"{path}: {message}")
