"""Custom exception hierarchy for the shortcut proxy."""


class ProxyError(Exception):
    """Base exception for all proxy errors."""


class ConfigurationError(ProxyError):
    """Raised when configuration is missing or invalid."""


class RequestRejected(ProxyError):
    """Raised when an inbound request fails validation.

    The message is diagnostic only and never returned to the caller.

    Attributes:
        stage: Name of the validation stage that rejected the request
    """

    stage = "request"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class InvalidRequestPath(RequestRejected):
    """Path is outside the supported resource family or lacks an identifier."""

    stage = "path"


class InvalidBody(RequestRejected):
    """Content type, body bytes or JSON shape are not acceptable."""

    stage = "body"


class InvalidShortcut(RequestRejected):
    """The shortcut embedded in longUrl is malformed."""

    stage = "shortcut"


class MethodNotAllowed(ProxyError):
    """Method is not supported on the resource family."""

    def __init__(self, method: str, allowed: tuple[str, ...]) -> None:
        super().__init__(f"Method {method} not allowed")
        self.method = method
        self.allowed = allowed


class UpstreamError(ProxyError):
    """Raised when the upstream request cannot be performed.

    Attributes:
        message: Error message
        url: Target URL of the failed request (optional)
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class UpstreamTimeoutError(UpstreamError):
    """Raised when the upstream request times out."""


class UpstreamConnectionError(UpstreamError):
    """Raised when unable to connect to the upstream."""
