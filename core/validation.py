"""Request validation stages for the short-url resource family.

Each check is independent and raises a RequestRejected subclass on failure.
"""

import json
from typing import Any

from core.exceptions import InvalidBody, InvalidRequestPath, MethodNotAllowed
from core.request_types import CheckedBody, RawHeaders

SUPPORTED_METHODS = ("GET", "POST")
JSON_MEDIA_TYPE = "application/json"


def check_request_path(path: str, prefix: str) -> None:
    """Reject paths outside the resource family."""
    if path != prefix and not path.startswith(prefix + "/"):
        raise InvalidRequestPath(f"Invalid endpoint {path!r}")


def check_method(method: str) -> None:
    """Reject methods other than GET and POST."""
    if method not in SUPPORTED_METHODS:
        raise MethodNotAllowed(method, SUPPORTED_METHODS)


def check_get_request(path: str, prefix: str) -> str:
    """Require a non-empty short code after the prefix and return it."""
    check_request_path(path, prefix)
    remainder = path[len(prefix) + 1 :]
    short_code = remainder.split("/", 1)[0]
    if not short_code:
        raise InvalidRequestPath("Missing short code")
    return short_code


def check_post_request(path: str, prefix: str) -> None:
    """POST is only accepted on the collection itself."""
    check_request_path(path, prefix)
    if path.rstrip("/") != prefix:
        raise InvalidRequestPath(f"POST not accepted on {path!r}")


def check_content_type(headers: RawHeaders) -> None:
    """Require an application/json content type."""
    content_type = _first_header(headers, "content-type")
    if content_type is None:
        raise InvalidBody("Missing content type")
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type != JSON_MEDIA_TYPE:
        raise InvalidBody(f"Invalid content type {content_type!r}")


def check_body(headers: RawHeaders, body: bytes | None) -> CheckedBody:
    """Validate a POST body and extract its longUrl.

    Args:
        headers: Inbound request headers.
        body: Raw body bytes (not modified).

    Returns:
        CheckedBody with the raw bytes, parsed mapping and longUrl.
    """
    check_content_type(headers)

    if not body:
        raise InvalidBody("Empty body")

    data = parse_json_object(body)
    if data is None:
        raise InvalidBody("Invalid body, JSON could not be parsed")

    if "longUrl" not in data:
        raise InvalidBody("Invalid body, missing longUrl key")

    long_url = data["longUrl"]
    if long_url is None:
        raise InvalidBody("Invalid body, longUrl is null")
    if not isinstance(long_url, str):
        raise InvalidBody("Invalid body, longUrl is not a string")

    return CheckedBody(raw=body, data=data, long_url=long_url)


def parse_json_object(raw: bytes) -> dict[str, Any] | None:
    """Parse bytes as a JSON object, returning None for anything else.

    NaN and Infinity are not JSON and are rejected, as are documents nested
    past the recursion limit and integers past the int-to-str digit limit.
    """
    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None
    return data


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant {name}")


def _first_header(headers: RawHeaders, name: str) -> str | None:
    for key, value in headers:
        if key.lower() == name:
            return value
    return None
