"""Validation pipeline for inbound short-url requests."""

from collections.abc import Callable
from typing import TypeVar

from core.config import Config
from core.exceptions import RequestRejected
from core.protocols import RequestLogger
from core.request_types import CheckedBody, InboundRequest
from core.shortcut import Shortcut, decode_long_url, parse_shortcut
from core.validation import (
    check_body,
    check_content_type,
    check_get_request,
    check_method,
    check_post_request,
    check_request_path,
)

T = TypeVar("T")


class ValidationService:
    """Run the validation stages for a request in order.

    GET: path, method, short code.
    POST: path, method, collection path, content type, then body, longUrl
    and the embedded shortcut once the body has been read.
    """

    def __init__(self, config: Config, logger: RequestLogger) -> None:
        self._prefix = config.path_prefix
        self._logger = logger

    def validate_get(self, request: InboundRequest) -> str:
        """Validate a short-url lookup and return the short code."""
        return self._run(self._check_get, request)

    def validate_post_headers(self, request: InboundRequest) -> None:
        """Checks that can run before the body is read."""
        self._run(self._check_post_headers, request)

    def validate_post_body(self, request: InboundRequest) -> tuple[CheckedBody, Shortcut]:
        """Validate the body of a short-url creation."""
        return self._run(self._check_post_body, request)

    def _check_get(self, request: InboundRequest) -> str:
        check_request_path(request.path, self._prefix)
        check_method(request.method)
        return check_get_request(request.path, self._prefix)

    def _check_post_headers(self, request: InboundRequest) -> None:
        check_request_path(request.path, self._prefix)
        check_method(request.method)
        check_post_request(request.path, self._prefix)
        check_content_type(request.headers)

    def _check_post_body(self, request: InboundRequest) -> tuple[CheckedBody, Shortcut]:
        body = check_body(request.headers, request.body)
        shortcut = parse_shortcut(decode_long_url(body.long_url))
        return body, shortcut

    def _run(self, check: Callable[[InboundRequest], T], request: InboundRequest) -> T:
        try:
            return check(request)
        except RequestRejected as e:
            self._logger.log_rejected(e.stage, e.reason)
            raise
