"""Shared error types for the protocol layer."""

from __future__ import annotations

from typing import Any


class ProtocolError(Exception):
    """Base error for all protocol-layer failures."""


class TransportError(ProtocolError):
    """The transport failed: HTTP status, network failure, spawn or broken pipe."""


class MCPTimeoutError(ProtocolError):
    """No response arrived before the request timeout."""

    def __init__(self, message: str = "Timeout waiting for MCP response", timeout: float | None = None) -> None:
        self.timeout = timeout
        super().__init__(message)


class RpcError(ProtocolError):
    """A JSON-RPC response carried an ``error`` member.

    The string form is the remote ``message``; ``code`` and ``data`` are kept
    for callers that need to tell error categories apart.
    """

    def __init__(self, message: str, code: int | None = None, data: Any = None) -> None:
        self.message = message
        self.code = code
        self.data = data
        super().__init__(message)


class ToolExecutionError(RpcError):
    """A ``tools/call`` invocation failed at the server side."""

    def __init__(
        self,
        name: str,
        detail: str = "",
        code: int | None = None,
        data: Any = None,
    ) -> None:
        self.name = name
        self.detail = detail
        super().__init__(detail or f"Tool execution failed: {name}", code=code, data=data)
