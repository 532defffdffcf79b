"""Shared request data types."""

from dataclasses import dataclass
from typing import Any

RawHeaders = list[tuple[str, str]]


@dataclass(frozen=True)
class InboundRequest:
    """Snapshot of an inbound request, read-only during validation."""

    method: str
    path: str
    query: str
    headers: RawHeaders
    body: bytes = b""


@dataclass(frozen=True)
class CheckedBody:
    """Accepted POST body."""

    raw: bytes
    data: dict[str, Any]
    long_url: str
