"""MCPRunner — the facade the HTTP routes and CLI talk to.

:func:`create_client` is the only place that chooses a transport; the
runner wraps the chosen client, adds tracing and keeps that choice for its
whole lifetime.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from mcpbridge.config import BridgeConfig, ConfigError
from mcpbridge.protocols.mcp.http import HttpMCPClient
from mcpbridge.protocols.mcp.stdio import StdioMCPClient
from mcpbridge.utils.telemetry import ATTR_TOOL_COUNT, ATTR_TOOL_NAME, ATTR_TRANSPORT, get_tracer

if TYPE_CHECKING:
    from mcpbridge.protocols.mcp.models import ToolCallResult, ToolList
    from mcpbridge.protocols.mcp.session import MCPSession

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


def create_client(config: BridgeConfig) -> MCPSession:
    """Build the MCP client selected by *config*.

    HTTP wins when ``transport`` is ``"http"`` or a server URL is set;
    otherwise the stdio client is used and ``server_path`` is required.
    """
    if config.use_http:
        return HttpMCPClient(config.resolved_server_url, timeout=config.http_timeout)
    if not config.server_path:
        msg = "stdio transport requires 'server_path' (MCP_SERVER_PATH)"
        raise ConfigError(msg)
    return StdioMCPClient(
        config.server_path,
        command=config.server_command,
        cwd=config.server_cwd,
        timeout=config.request_timeout,
    )


class MCPRunner:
    """Uniform ``list_tools`` / ``call_tool`` / ``health_check`` over one client.

    Satisfies the :class:`~mcpbridge.protocols.provider.ToolRunner` protocol.

    Usage::

        runner = MCPRunner.from_config(BridgeConfig.from_env())
        async with runner:
            tools = await runner.list_tools()
    """

    def __init__(self, client: MCPSession) -> None:
        self._client = client
        logger.info("MCP runner using %s transport", client.transport)

    @classmethod
    def from_config(cls, config: BridgeConfig) -> MCPRunner:
        return cls(create_client(config))

    async def __aenter__(self) -> MCPRunner:
        await self.start()
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.close()

    @property
    def client(self) -> MCPSession:
        return self._client

    @property
    def transport(self) -> str:
        return self._client.transport

    async def start(self) -> None:
        """Acquire transport resources up front (spawns the stdio server)."""
        await self._client.start()

    async def close(self) -> None:
        await self._client.close()

    async def list_tools(self) -> ToolList:
        with _tracer.start_as_current_span("mcp.list_tools") as span:
            span.set_attribute(ATTR_TRANSPORT, self.transport)
            tools = await self._client.list_tools()
            span.set_attribute(ATTR_TOOL_COUNT, len(tools.tools))
            return tools

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> ToolCallResult:
        with _tracer.start_as_current_span("mcp.call_tool") as span:
            span.set_attribute(ATTR_TRANSPORT, self.transport)
            span.set_attribute(ATTR_TOOL_NAME, name)
            return await self._client.call_tool(name, arguments)

    async def health_check(self) -> bool:
        with _tracer.start_as_current_span("mcp.health_check") as span:
            span.set_attribute(ATTR_TRANSPORT, self.transport)
            return await self._client.health_check()
