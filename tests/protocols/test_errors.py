"""Tests for the protocol error hierarchy."""

from __future__ import annotations

from mcpbridge.protocols.errors import (
    MCPTimeoutError,
    ProtocolError,
    RpcError,
    ToolExecutionError,
    TransportError,
)


class TestErrorHierarchy:
    def test_all_derive_from_protocol_error(self) -> None:
        for cls in (TransportError, MCPTimeoutError, RpcError, ToolExecutionError):
            assert issubclass(cls, ProtocolError)

    def test_rpc_error_keeps_code_and_data(self) -> None:
        error = RpcError("Invalid params", code=-32602, data={"field": "topic"})
        assert str(error) == "Invalid params"
        assert error.code == -32602
        assert error.data == {"field": "topic"}

    def test_tool_execution_error_uses_remote_message(self) -> None:
        error = ToolExecutionError("create_zoom_meeting", "boom", code=-1)
        assert str(error) == "boom"
        assert error.name == "create_zoom_meeting"
        assert isinstance(error, RpcError)

    def test_tool_execution_error_without_detail(self) -> None:
        error = ToolExecutionError("delete_file")
        assert str(error) == "Tool execution failed: delete_file"

    def test_timeout_default_message(self) -> None:
        error = MCPTimeoutError(timeout=30.0)
        assert str(error) == "Timeout waiting for MCP response"
        assert error.timeout == 30.0
