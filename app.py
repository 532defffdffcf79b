"""FastAPI application factory for the validating proxy."""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request

from api.handlers import handle_health, handle_proxy
from core.config import Config
from core.headers import HeaderBuilder
from core.protocols import RequestLogger
from services.upstream import UpstreamClient
from services.validation_service import ValidationService

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def create_app(
    config: Config,
    logger: RequestLogger,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        limits = httpx.Limits(max_connections=100, max_keepalive_connections=20)
        client = httpx.AsyncClient(
            timeout=config.upstream_timeout,
            limits=limits,
            follow_redirects=False,
            transport=transport,
        )
        app.state.upstream_client = UpstreamClient(
            client,
            config.proxy_target,
            logger,
            HeaderBuilder(),
            preserve_query=config.preserve_query,
        )
        app.state.validation_service = ValidationService(config, logger)
        try:
            yield
        finally:
            await client.aclose()

    app = FastAPI(
        title="Shortcut Proxy",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.get("/health")
    async def health(request: Request):
        return await handle_health(request)

    @app.api_route("/{path:path}", methods=PROXY_METHODS)
    async def proxy(request: Request, path: str):
        return await handle_proxy(request, logger)

    return app
