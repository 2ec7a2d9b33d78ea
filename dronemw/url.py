"""Parsing of transport URLs of the form ``scheme://host:port``."""

from __future__ import annotations

import re
from dataclasses import dataclass

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


@dataclass(frozen=True)
class Url:
    """Transport endpoint: scheme (e.g. "udp"), host and port."""

    scheme: str
    host: str
    port: int = 0


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid port: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"port out of range: {text!r}")
    return value


def parse(s: str) -> Url:
    """Parse ``scheme://host:port``; raise ValueError when it is malformed."""
    scheme, sep, host_port = s.partition("://")
    if not sep:
        raise ValueError("missing scheme")
    host, colon, port_text = host_port.rpartition(":")
    if not colon:
        raise ValueError("missing port")
    return Url(scheme, host, _leading_int(port_text) & 0xFFFF)