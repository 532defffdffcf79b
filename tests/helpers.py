"""Shortcut payload builders shared by tests."""

import base64
import json
from typing import Any

import httpx

UPSTREAM = "http://upstream.test"
PREFIX = "/rest/v3/short-urls"


def location_shortcut() -> dict[str, Any]:
    return {
        "type": "ShortcutLocation",
        "id": "[#5e639]",
        "name": "",
        "waypoint": {
            "lat": 53.5415701077766,
            "lon": 9.984275605794686,
            "address": "Elbphilharmonie Hamburg, Platz der Deutschen Einheit, Hamburg",
        },
    }


def route_shortcut() -> dict[str, Any]:
    return {
        "type": "ShortcutRoute",
        "id": "[#dd9f9]",
        "name": "",
        "waypoints": [
            {
                "lat": 53.5522524,
                "lon": 9.9313068,
                "address": "Altona-Altstadt, 22767, Hamburg, Deutschland",
            },
            {
                "lat": 53.5536507,
                "lon": 9.9893664,
                "address": "Jungfernstieg, Altstadt, 20095, Hamburg, Deutschland",
            },
        ],
        "routeLengthText": "4.8 km",
        "routeTimeText": "17 Min.",
    }


def encode_long_url(shortcut: Any, base: str = "https://maps.example/") -> str:
    """Build a longUrl carrying a base64-encoded shortcut."""
    encoded = base64.b64encode(json.dumps(shortcut).encode()).decode()
    return f"{base}import/{encoded}"


def upstream_reply(
    status_code: int = 200,
    headers: list[tuple[str, str]] | dict[str, str] | None = None,
    body: bytes = b"",
) -> httpx.Response:
    """Build an unread, streamed upstream response."""
    return httpx.Response(status_code, headers=headers, stream=httpx.ByteStream(body))
