"""HttpMCPClient — JSON-RPC over plain HTTP POSTs.

One request per call, no persistent session on the wire: every envelope is
posted to ``{base_url}/mcp/message`` and the JSON-RPC response is read from
the HTTP body.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from mcpbridge.protocols.errors import MCPTimeoutError, ProtocolError, RpcError, TransportError
from mcpbridge.protocols.mcp.models import JsonRpcRequest, JsonRpcResponse
from mcpbridge.protocols.mcp.session import MCPSession

logger = logging.getLogger(__name__)

MESSAGE_PATH = "/mcp/message"
HEALTH_PATH = "/mcp/health"


class HttpMCPClient(MCPSession):
    """MCP client for a server reachable over HTTP.

    Usage::

        async with HttpMCPClient("http://localhost:3003") as client:
            tools = await client.list_tools()
    """

    transport = "http"

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | None = 30.0,
        http_transport: httpx.AsyncBaseTransport | None = None,
        **session_kwargs: Any,
    ) -> None:
        super().__init__(**session_kwargs)
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout,
            transport=http_transport,
        )
        logger.info("MCP HTTP client configured for %s", self._base_url)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def call_method(self, method: str, params: Any = None) -> Any:
        request = JsonRpcRequest(id=self._allocate_id(), method=method, params=params)
        logger.debug("-> %s (id=%s)", method, request.id)

        response = await self._post(request)
        try:
            message = JsonRpcResponse.model_validate(response.json())
        except ValueError as exc:
            raise ProtocolError(f"Invalid JSON-RPC response to {method}: {exc}") from exc

        if message.error is not None:
            raise RpcError(message.error.message, code=message.error.code, data=message.error.data)
        return message.result

    async def notify(self, method: str, params: Any = None) -> None:
        await self._post(JsonRpcRequest(method=method, params=params))

    async def health_check(self) -> bool:
        try:
            response = await self._client.get(HEALTH_PATH)
        except Exception:
            logger.debug("MCP health probe to %s failed", self._base_url, exc_info=True)
            return False
        return response.is_success

    async def close(self) -> None:
        await self._client.aclose()
        await super().close()

    async def _post(self, request: JsonRpcRequest) -> httpx.Response:
        try:
            response = await self._client.post(MESSAGE_PATH, json=request.to_wire())
        except httpx.TimeoutException as exc:
            logger.error("Timeout calling %s after %ss", request.method, self._timeout)
            raise MCPTimeoutError(timeout=self._timeout) from exc
        except httpx.HTTPError as exc:
            logger.error("Error calling %s: %s", request.method, exc)
            raise TransportError(str(exc)) from exc

        if not response.is_success:
            msg = f"HTTP error: {response.status_code} {response.reason_phrase}"
            logger.error("Error calling %s: %s", request.method, msg)
            raise TransportError(msg)
        return response
