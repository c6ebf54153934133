"""Tests for MCP JSON-RPC and tool models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mcpbridge.protocols.mcp.models import (
    JsonRpcRequest,
    JsonRpcResponse,
    MCPToolDef,
    ToolCallResult,
    ToolList,
    is_response,
)


class TestJsonRpcRequest:
    def test_wire_form_omits_absent_params(self) -> None:
        request = JsonRpcRequest(id=0, method="tools/list")
        assert request.to_wire() == {"jsonrpc": "2.0", "id": 0, "method": "tools/list"}

    def test_notification_has_no_id(self) -> None:
        request = JsonRpcRequest(method="notifications/initialized")
        assert request.is_notification
        assert "id" not in request.to_wire()

    def test_string_ids_allowed(self) -> None:
        assert JsonRpcRequest(id="abc", method="x").to_wire()["id"] == "abc"


class TestJsonRpcResponse:
    def test_error_parsed(self) -> None:
        response = JsonRpcResponse.model_validate(
            {"jsonrpc": "2.0", "id": 3, "error": {"code": -1, "message": "boom"}}
        )
        assert response.error is not None
        assert response.error.message == "boom"
        assert response.result is None

    @pytest.mark.parametrize(
        ("message", "expected"),
        [
            ({"id": 1, "result": {}}, True),
            ({"id": 0, "result": None}, True),
            ({"id": "a", "error": {"message": "x"}}, True),
            ({"method": "notifications/progress"}, False),
            ({"id": 1, "method": "sampling/createMessage"}, False),
            ({"id": [1], "result": {}}, False),
            ({"id": True, "result": {}}, False),
        ],
    )
    def test_is_response(self, message: dict, expected: bool) -> None:
        assert is_response(message) is expected


class TestToolModels:
    def test_tool_def_reads_camel_case_schema(self) -> None:
        tool = MCPToolDef.model_validate(
            {"name": "foo", "description": "d", "inputSchema": {"type": "object"}}
        )
        assert tool.input_schema == {"type": "object"}
        assert tool.model_dump(by_alias=True) == {
            "name": "foo",
            "description": "d",
            "inputSchema": {"type": "object"},
        }

    def test_tool_def_is_immutable(self) -> None:
        tool = MCPToolDef(name="foo")
        with pytest.raises(ValidationError):
            tool.name = "bar"  # type: ignore[misc]

    def test_tool_list_defaults_empty(self) -> None:
        assert ToolList.model_validate({}).tools == []

    def test_tool_result_passes_content_through(self) -> None:
        raw = {
            "content": [
                {"type": "text", "text": "hello"},
                {"type": "image", "data": "aGk=", "mimeType": "image/png"},
            ],
            "isError": False,
        }
        result = ToolCallResult.model_validate(raw)

        assert result.text() == "hello"
        assert result.is_error is False
        assert result.to_wire() == raw

    def test_tool_result_accepts_nonconforming_content_items(self) -> None:
        raw = {"content": [{"text": "hi"}, {"type": "text", "text": {"rich": True}}]}
        result = ToolCallResult.model_validate(raw)

        assert result.text() == ""
        assert result.to_wire() == raw
