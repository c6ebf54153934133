"""MCP models — JSON-RPC 2.0 messages and tool payloads.

Implements the message format used by the Model Context Protocol for
the ``initialize`` handshake, tool discovery (``tools/list``) and
execution (``tools/call``).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

PROTOCOL_VERSION = "2024-11-05"

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request; without an ``id`` it is a notification."""

    jsonrpc: str = "2.0"
    id: int | str | None = None
    method: str
    params: Any = None

    @property
    def is_notification(self) -> bool:
        return self.id is None

    def to_wire(self) -> dict[str, Any]:
        """Dump for the wire, leaving out absent ``id`` and ``params``."""
        return self.model_dump(exclude_none=True)


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int = 0
    message: str = ""
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message."""

    jsonrpc: str = "2.0"
    id: int | str | None = None
    result: Any = None
    error: JsonRpcError | None = None


def is_response(message: dict[str, Any]) -> bool:
    """True when *message* answers a request (has an ``id`` plus ``result`` or ``error``)."""
    request_id = message.get("id")
    if isinstance(request_id, bool) or not isinstance(request_id, int | str):
        return False
    return "result" in message or "error" in message


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class MCPToolDef(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")


class ToolList(BaseModel):
    """Result of ``tools/list``."""

    model_config = ConfigDict(extra="allow")

    tools: list[MCPToolDef] = Field(default_factory=list)


class ToolContent(BaseModel):
    """One content item of a tool result. Opaque: unknown fields pass through."""

    model_config = ConfigDict(extra="allow")

    type: str | None = None
    text: Any = None


class ToolCallResult(BaseModel):
    """Result of ``tools/call``."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    content: list[ToolContent] = Field(default_factory=list)
    is_error: bool | None = Field(default=None, alias="isError")

    def text(self) -> str:
        """Join the text items of ``content``."""
        texts = [item.text for item in self.content if item.type == "text"]
        return "\n".join(text for text in texts if isinstance(text, str) and text)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
