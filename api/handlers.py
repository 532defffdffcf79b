"""FastAPI route handlers."""

from dataclasses import replace

from fastapi import Request, Response
from fastapi.responses import StreamingResponse

from core.exceptions import MethodNotAllowed, RequestRejected
from core.protocols import RequestLogger
from core.request_types import InboundRequest

INVALID_MESSAGE = "Invalid"


def _inbound_request(request: Request, body: bytes = b"") -> InboundRequest:
    """Snapshot the request line and headers in wire order."""
    return InboundRequest(
        method=request.method,
        path=request.url.path,
        query=request.url.query,
        headers=[(k.decode("latin-1"), v.decode("latin-1")) for k, v in request.headers.raw],
        body=body,
    )


def _rejected() -> Response:
    return Response(content=INVALID_MESSAGE, status_code=400, media_type="text/plain")


def _method_not_allowed(e: MethodNotAllowed) -> Response:
    return Response(
        content="Method Not Allowed",
        status_code=405,
        media_type="text/plain",
        headers={"Allow": ", ".join(e.allowed)},
    )


async def handle_health(_request: Request) -> Response:
    """Always healthy; checked before any validation."""
    return Response(status_code=200)


async def handle_proxy(request: Request, logger: RequestLogger) -> Response | StreamingResponse:
    """Validate a request to the short-url API and forward it if it passes."""
    logger.log_request(request.method, request.url.path)
    validation = request.app.state.validation_service
    upstream = request.app.state.upstream_client
    inbound = _inbound_request(request)

    try:
        if request.method != "POST":
            validation.validate_get(inbound)
            return await upstream.forward(inbound)

        validation.validate_post_headers(inbound)
        inbound = replace(inbound, body=await request.body())
        checked, _shortcut = validation.validate_post_body(inbound)
    except RequestRejected:
        return _rejected()
    except MethodNotAllowed as e:
        logger.log_rejected("method", str(e))
        return _method_not_allowed(e)

    return await upstream.forward(inbound, checked.raw)
