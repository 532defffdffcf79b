"""Shared protocol definitions."""

from typing import Protocol


class RequestLogger(Protocol):
    """Protocol for request logging (ConsoleLogger)."""

    def log_request(self, method: str, path: str) -> None: ...
    def log_rejected(self, stage: str, reason: str) -> None: ...
    def log_forwarded(self, method: str, url: str) -> None: ...
    def log_header(self, direction: str, name: str, value: str) -> None: ...
    def log_response(self, status: int) -> None: ...
    def log_error(self, status: int, message: str) -> None: ...
