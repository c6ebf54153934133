"""Shared fixtures for CLI tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from mcpbridge.protocols.mcp.models import ToolCallResult, ToolList
from mcpbridge.protocols.mcp.runner import MCPRunner


@pytest.fixture
def mcp_client() -> MagicMock:
    """A mocked MCP session; wrap it in a real :class:`MCPRunner`."""
    client = MagicMock()
    client.transport = "http"
    client.start = AsyncMock()
    client.close = AsyncMock()
    client.list_tools = AsyncMock(
        return_value=ToolList.model_validate({
            "tools": [
                {"name": "list_zoom_meetings", "description": "List Zoom meetings"},
                {"name": "delete_file", "description": "Delete a Drive file"},
            ]
        })
    )
    client.call_tool = AsyncMock(
        return_value=ToolCallResult.model_validate({"content": [{"type": "text", "text": "done"}]})
    )
    client.health_check = AsyncMock(return_value=True)
    return client


@pytest.fixture
def mcp_runner(mcp_client: MagicMock) -> MCPRunner:
    return MCPRunner(mcp_client)
