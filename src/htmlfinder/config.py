"""Application configuration loaded once at startup."""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Tuple

from htmlfinder.access import validate_ranges

DEFAULT_CONFIG_PATH = Path("config.json")
DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"

# Keys accepted for the allowlist, first match wins.
_RANGE_KEYS = ("IPRanges", "ip_ranges", "ipRanges", "allowed_ranges")


@dataclass(frozen=True, slots=True)
class AppConfig:
    directory: Path
    allowed_ranges: Tuple[str, ...] = ()
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST

    def with_overrides(self, **changes: Any) -> "AppConfig":
        """Return a copy with every non-None keyword applied."""
        changes = {key: value for key, value in changes.items() if value is not None}
        if "port" in changes:
            changes["port"] = _parse_port(changes["port"])
        config = replace(self, **changes)
        validate_ranges(config.allowed_ranges)
        return config


def _parse_port(value: Any) -> int:
    try:
        port = int(str(value).strip())
    except ValueError as exc:
        raise ValueError(f"Invalid port: {value!r}") from exc
    if not 0 < port < 65536:
        raise ValueError(f"Port out of range: {port}")
    return port


def config_from_mapping(data: Mapping[str, Any]) -> AppConfig:
    """Build a validated config from a decoded JSON object."""
    if not isinstance(data, Mapping):
        raise ValueError("Configuration must be a JSON object")

    directory = data.get("directory")
    if not directory or not isinstance(directory, str):
        raise ValueError("Configuration is missing 'directory'")

    ranges: Any = []
    for key in _RANGE_KEYS:
        if key in data:
            ranges = data[key]
            break
    if isinstance(ranges, str) or not isinstance(ranges, list):
        raise ValueError("'IPRanges' must be a list of CIDR strings")
    validate_ranges(ranges)

    return AppConfig(
        directory=Path(directory),
        allowed_ranges=tuple(ranges),
        port=_parse_port(data.get("port", DEFAULT_PORT)),
        host=str(data.get("host", DEFAULT_HOST)),
    )


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Read the JSON configuration file.

    Raises ``FileNotFoundError`` when the file is missing, ``ValueError`` for
    malformed content and ``InvalidRangeConfig`` for a bad address range.
    """
    with Path(path).open("r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    return config_from_mapping(data)
