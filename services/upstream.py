"""HTTP proxying to the upstream URL shortener."""

import httpx
from fastapi import Response
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask

from core.exceptions import UpstreamConnectionError, UpstreamError, UpstreamTimeoutError
from core.headers import HeaderBuilder
from core.protocols import RequestLogger
from core.request_types import InboundRequest

ERROR_MESSAGE = "Error performing request"


class UpstreamClient:
    """Forward validated requests to a single upstream with streaming relay."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        target: str,
        logger: RequestLogger,
        header_builder: HeaderBuilder,
        *,
        preserve_query: bool = True,
    ) -> None:
        self._client = client
        self._target = target.rstrip("/")
        self._logger = logger
        self._headers = header_builder
        self._preserve_query = preserve_query

    def target_url(self, request: InboundRequest) -> str:
        """Build ``<upstream><path>[?query]`` for a request."""
        url = self._target + request.path
        if self._preserve_query and request.query:
            url += "?" + request.query
        return url

    async def forward(self, request: InboundRequest, body: bytes = b"") -> Response | StreamingResponse:
        """Proxy a request and relay status, headers and body unchanged."""
        target_url = self.target_url(request)
        try:
            response = await self._send(request, target_url, body)
        except UpstreamError as e:
            self._logger.log_error(500, f"{e} ({target_url})")
            return Response(content=ERROR_MESSAGE, status_code=500, media_type="text/plain")

        for key, value in response.headers.multi_items():
            self._logger.log_header("response", key, value)
        self._logger.log_response(response.status_code)

        relayed = StreamingResponse(
            response.aiter_raw(),
            status_code=response.status_code,
            background=BackgroundTask(self._cleanup_streaming, response),
        )
        relayed.raw_headers = self._headers.build_client_headers(response.headers)
        return relayed

    async def _send(self, request: InboundRequest, target_url: str, body: bytes) -> httpx.Response:
        """Issue the outbound request, mapping transport failures to UpstreamError."""
        headers = self._headers.build_upstream_headers(request.headers)
        self._logger.log_forwarded(request.method, target_url)
        for key, value in request.headers:
            self._logger.log_header("request", key, value)

        try:
            req = self._client.build_request(
                request.method,
                target_url,
                headers=headers,
                content=body or None,
            )
            return await self._client.send(req, stream=True, follow_redirects=False)
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError(f"Upstream timeout: {e}", url=target_url) from e
        except httpx.RequestError as e:
            raise UpstreamConnectionError(f"Upstream connection error: {e}", url=target_url) from e
        except httpx.InvalidURL as e:
            raise UpstreamError(f"Invalid upstream URL: {e}", url=target_url) from e

    async def _cleanup_streaming(self, response: httpx.Response) -> None:
        """Clean up streaming resources."""
        await response.aclose()
