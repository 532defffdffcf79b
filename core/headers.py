"""Header mirroring between caller and upstream."""

import httpx

from core.request_types import RawHeaders

# Recomputed by the HTTP client for the outbound request
REQUEST_SKIP_HEADERS = frozenset({"host", "content-length"})
# Connection-level framing, owned by the server writing the response
RESPONSE_SKIP_HEADERS = frozenset({"connection", "keep-alive", "transfer-encoding"})


class HeaderBuilder:
    """Copy headers one line per value, preserving order and raw bytes."""

    def build_upstream_headers(self, headers: RawHeaders) -> list[tuple[bytes, bytes]]:
        """Mirror inbound headers onto the outbound request."""
        return [
            (key.encode("latin-1"), value.encode("latin-1"))
            for key, value in headers
            if key.lower() not in REQUEST_SKIP_HEADERS
        ]

    def build_client_headers(self, headers: httpx.Headers) -> list[tuple[bytes, bytes]]:
        """Mirror upstream response headers as raw ASGI header pairs."""
        return [
            (key.lower(), value)
            for key, value in headers.raw
            if key.lower().decode("latin-1") not in RESPONSE_SKIP_HEADERS
        ]
