"""Source-address filtering against configured CIDR ranges."""

from __future__ import annotations

import ipaddress
import logging
from typing import Iterable, List, Union

from htmlfinder.errors import InvalidRangeConfig

LOGGER = logging.getLogger(__name__)

Network = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]


def parse_range(value: str) -> Network:
    """Parse a CIDR range such as ``10.0.0.0/8``.

    Host bits are tolerated (``192.168.1.7/24`` is the ``192.168.1.0/24`` network).
    """
    try:
        return ipaddress.ip_network(value.strip(), strict=False)
    except (AttributeError, TypeError, ValueError) as exc:
        raise InvalidRangeConfig(str(value), str(exc)) from exc


def validate_ranges(ranges: Iterable[str]) -> List[Network]:
    """Parse every range, failing on the first invalid one."""
    return [parse_range(value) for value in ranges]


def _parse_address(address: str | None):
    if not address:
        return None
    try:
        return ipaddress.ip_address(address.strip())
    except ValueError:
        return None


def _in_network(ip, network: Network) -> bool:
    if ip.version == network.version and ip in network:
        return True
    # dual-stack listeners report IPv4 clients as ::ffff:a.b.c.d
    mapped = getattr(ip, "ipv4_mapped", None)
    return mapped is not None and network.version == 4 and mapped in network


def is_address_allowed(address: str | None, ranges: Iterable[str]) -> bool:
    """Return True when ``address`` lies in at least one of ``ranges``.

    Ranges that do not parse never match; neither does an invalid address.
    """
    ip = _parse_address(address)
    if ip is None:
        return False
    for value in ranges:
        try:
            network = parse_range(value)
        except InvalidRangeConfig:
            LOGGER.debug("Ignoring invalid address range %r", value)
            continue
        if _in_network(ip, network):
            return True
    return False


class AccessGuard:
    """Allowlist of networks parsed once and checked per request."""

    def __init__(self, ranges: Iterable[str]) -> None:
        self.networks: List[Network] = []
        for value in ranges:
            try:
                self.networks.append(parse_range(value))
            except InvalidRangeConfig as exc:
                LOGGER.warning("%s; range will never match", exc)

    def allows(self, address: str | None) -> bool:
        ip = _parse_address(address)
        if ip is None:
            return False
        return any(_in_network(ip, net) for net in self.networks)
