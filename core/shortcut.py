"""Decoding and schema checks for shortcuts embedded in a longUrl.

A shortcut is a location or route record, serialized as JSON, base64-encoded
and appended to the long URL after an ``import/`` marker:

    https://maps.example/import/eyJ0eXBlIjoiU2hvcnRjdXRMb2NhdGlvbiIs...
"""

import base64
import binascii
from dataclasses import dataclass
from typing import Any

from core.exceptions import InvalidShortcut
from core.validation import parse_json_object

IMPORT_MARKER = "import/"
LOCATION = "ShortcutLocation"
ROUTE = "ShortcutRoute"
SHORTCUT_TYPES = (LOCATION, ROUTE)

LOCATION_MAX_KEYS = 4
ROUTE_MAX_KEYS = 6
ROUTE_KEYS = ("waypoints", "routeTimeText", "routeLengthText")


@dataclass(frozen=True)
class ShortcutLocation:
    """A single named waypoint."""

    id: Any
    name: Any
    waypoint: Any
    type: str = LOCATION


@dataclass(frozen=True)
class ShortcutRoute:
    """A route through several waypoints."""

    id: Any
    name: Any
    waypoints: Any
    route_time_text: Any
    route_length_text: Any
    type: str = ROUTE


Shortcut = ShortcutLocation | ShortcutRoute


def decode_long_url(long_url: str) -> dict[str, Any]:
    """Decode the JSON object embedded after the last ``import/`` marker."""
    if IMPORT_MARKER not in long_url:
        raise InvalidShortcut("longUrl does not contain 'import/'")

    encoded = long_url.split(IMPORT_MARKER)[-1]
    try:
        decoded = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidShortcut(f"base64 decode failed: {e}") from e

    data = parse_json_object(decoded)
    if data is None:
        raise InvalidShortcut("base64 payload is not a JSON object")
    return data


def check_shortcut(data: dict[str, Any] | None) -> str:
    """Check the keys shared by every shortcut and return its type."""
    if data is None:
        raise InvalidShortcut("Shortcut is empty")

    shortcut_type = data.get("type")
    if shortcut_type is None:
        raise InvalidShortcut("Missing type key")
    if not isinstance(shortcut_type, str) or shortcut_type not in SHORTCUT_TYPES:
        raise InvalidShortcut(f"Invalid type {shortcut_type!r}")

    for key in ("id", "name"):
        if key not in data:
            raise InvalidShortcut(f"Missing {key} key")

    return shortcut_type


def check_location_shortcut(data: dict[str, Any]) -> None:
    if len(data) > LOCATION_MAX_KEYS:
        raise InvalidShortcut("Too many keys for ShortcutLocation")
    if "waypoint" not in data:
        raise InvalidShortcut("Missing waypoint key")


def check_route_shortcut(data: dict[str, Any]) -> None:
    if len(data) > ROUTE_MAX_KEYS:
        raise InvalidShortcut("Too many keys for ShortcutRoute")
    for key in ROUTE_KEYS:
        if key not in data:
            raise InvalidShortcut(f"Missing {key} key")


def parse_shortcut(data: dict[str, Any] | None) -> Shortcut:
    """Validate a decoded shortcut against its closed schema.

    Returns:
        ShortcutLocation or ShortcutRoute, selected by the ``type`` key.
    """
    shortcut_type = check_shortcut(data)

    if shortcut_type == LOCATION:
        check_location_shortcut(data)
        return ShortcutLocation(id=data["id"], name=data["name"], waypoint=data["waypoint"])

    check_route_shortcut(data)
    return ShortcutRoute(
        id=data["id"],
        name=data["name"],
        waypoints=data["waypoints"],
        route_time_text=data["routeTimeText"],
        route_length_text=data["routeLengthText"],
    )
