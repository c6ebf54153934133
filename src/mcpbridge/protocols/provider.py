"""ToolRunner protocol — the capability contract every MCP entry point satisfies.

Both concrete clients (HTTP and stdio) and the :class:`MCPRunner` facade
implement it, so the HTTP routes, the CLI and the confirmation executor can
be handed any of them, or a fake in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mcpbridge.protocols.mcp.models import ToolCallResult, ToolList


@runtime_checkable
class ToolRunner(Protocol):
    """Lists and executes tools exposed by an MCP server."""

    async def list_tools(self) -> ToolList:
        """Return the complete tool set advertised by the server."""
        ...

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> ToolCallResult:
        """Execute a tool by name and return its result."""
        ...

    async def health_check(self) -> bool:
        """Report liveness of the server; never raises."""
        ...

    async def start(self) -> None: ...
    async def close(self) -> None: ...
