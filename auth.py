"""Forward-auth credential check service.

A reverse proxy delegates authentication to this app with a subrequest
carrying ``{"username": ..., "password": ...}``. Credentials come from two
comma-separated environment lists paired by position.
"""

from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError, model_validator

from core.config import Config
from core.protocols import RequestLogger


class Credentials(BaseModel):
    username: str = ""
    password: str = ""

    @model_validator(mode="before")
    @classmethod
    def _null_as_empty(cls, data: Any) -> Any:
        """A null body or null field leaves the credential empty."""
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: "" if value is None else value for key, value in data.items()}
        return data


class CredentialStore:
    """Ordered (username, password) pairs, read-only after startup."""

    def __init__(self, pairs: list[tuple[str, str]]) -> None:
        self._pairs = tuple(pairs)

    @classmethod
    def from_config(cls, config: Config) -> "CredentialStore":
        return cls(config.credentials())

    def check(self, username: str, password: str) -> bool:
        """Return True if the pair matches a configured credential."""
        return any(username == u and password == p for u, p in self._pairs)


def auth_result(allowed: bool) -> JSONResponse:
    return JSONResponse(
        {"result": "allow" if allowed else "deny", "is_superuser": False},
        status_code=200 if allowed else 401,
    )


def create_auth_app(config: Config, logger: RequestLogger) -> FastAPI:
    """Create the forward-auth FastAPI application."""
    store = CredentialStore.from_config(config)

    app = FastAPI(
        title="Shortcut Proxy Auth",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.credential_store = store

    @app.get("/health")
    async def health():
        return Response(status_code=200)

    @app.post("/auth")
    async def authenticate(request: Request):
        raw_body = await request.body()
        try:
            credentials = Credentials.model_validate_json(raw_body)
        except ValidationError as e:
            logger.log_error(400, str(e))
            return Response(content=str(e), status_code=400, media_type="text/plain")

        allowed = store.check(credentials.username, credentials.password)
        if not allowed:
            logger.log_rejected("auth", f"Invalid credentials for {credentials.username!r}")
        return auth_result(allowed)

    return app
