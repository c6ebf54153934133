"""Protocol layer — MCP JSON-RPC clients and their shared contract."""

from mcpbridge.protocols.errors import (
    MCPTimeoutError,
    ProtocolError,
    RpcError,
    ToolExecutionError,
    TransportError,
)
from mcpbridge.protocols.provider import ToolRunner

__all__ = [
    "MCPTimeoutError",
    "ProtocolError",
    "RpcError",
    "ToolExecutionError",
    "ToolRunner",
    "TransportError",
]
