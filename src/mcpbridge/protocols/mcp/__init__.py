"""MCP protocol — Model Context Protocol clients over HTTP and stdio."""

from mcpbridge.protocols.mcp.framing import LineFramer, MessageFramer
from mcpbridge.protocols.mcp.http import HttpMCPClient
from mcpbridge.protocols.mcp.models import (
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    MCPToolDef,
    ToolCallResult,
    ToolContent,
    ToolList,
)
from mcpbridge.protocols.mcp.runner import MCPRunner, create_client
from mcpbridge.protocols.mcp.session import MCPSession, SessionState
from mcpbridge.protocols.mcp.stdio import StdioMCPClient

__all__ = [
    "HttpMCPClient",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "LineFramer",
    "MCPRunner",
    "MCPSession",
    "MCPToolDef",
    "MessageFramer",
    "SessionState",
    "StdioMCPClient",
    "ToolCallResult",
    "ToolContent",
    "ToolList",
    "create_client",
]
