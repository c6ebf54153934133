"""``/api/mcp`` routes.

This is the boundary where errors stop propagating: a
:class:`ProtocolError`, or anything unexpected from the runner, becomes a
500 response with an ``{"error": ...}`` body.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from mcpbridge.protocols.errors import ProtocolError
from mcpbridge.protocols.provider import ToolRunner

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/mcp", tags=["mcp"])


class ExecuteRequest(BaseModel):
    """Body of ``POST /api/mcp/execute``."""

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


def get_runner(request: Request) -> ToolRunner:
    return request.app.state.runner


RunnerDep = Annotated[ToolRunner, Depends(get_runner)]


def _error_response(exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": str(exc)})


@router.get("/tools")
async def list_tools(runner: RunnerDep) -> Any:
    try:
        tools = await runner.list_tools()
    except ProtocolError as exc:
        logger.error("MCP list tools error: %s", exc, exc_info=True)
        return _error_response(exc)
    except Exception as exc:
        logger.exception("Unexpected error listing MCP tools")
        return _error_response(exc)
    return {"result": tools.model_dump(by_alias=True)}


@router.post("/execute")
async def execute_tool(body: ExecuteRequest, runner: RunnerDep) -> Any:
    try:
        result = await runner.call_tool(body.name, body.arguments)
    except ProtocolError as exc:
        logger.error("MCP execute tool %s error: %s", body.name, exc, exc_info=True)
        return _error_response(exc)
    except Exception as exc:
        logger.exception("Unexpected error executing MCP tool %s", body.name)
        return _error_response(exc)
    return result.to_wire()


@router.get("/health")
async def health(runner: RunnerDep) -> dict[str, Any]:
    healthy = await runner.health_check()
    return {"healthy": healthy, "transport": getattr(runner, "transport", None)}
