"""Tests for header mirroring."""

import httpx

from core.headers import HeaderBuilder


def test_upstream_headers_keep_duplicates_and_order():
    headers = [
        ("host", "proxy.example"),
        ("x-foo", "1"),
        ("content-length", "12"),
        ("x-foo", "2"),
        ("content-type", "application/json"),
    ]

    built = HeaderBuilder().build_upstream_headers(headers)

    assert built == [(b"x-foo", b"1"), (b"x-foo", b"2"), (b"content-type", b"application/json")]


def test_upstream_headers_latin1_values():
    built = HeaderBuilder().build_upstream_headers([("x-name", "Müller")])

    assert built == [(b"x-name", "Müller".encode("latin-1"))]


def test_client_headers_drop_connection_framing():
    upstream = httpx.Headers(
        [
            ("Set-Cookie", "a=1"),
            ("Transfer-Encoding", "chunked"),
            ("Set-Cookie", "b=2"),
            ("Connection", "keep-alive"),
            ("Content-Length", "5"),
        ]
    )

    built = HeaderBuilder().build_client_headers(upstream)

    assert built == [(b"set-cookie", b"a=1"), (b"set-cookie", b"b=2"), (b"content-length", b"5")]
