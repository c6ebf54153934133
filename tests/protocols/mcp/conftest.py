"""In-memory stand-ins for an MCP server subprocess."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Callable
from typing import Any

import pytest

Responder = Callable[[dict[str, Any]], "dict[str, Any] | None"]

TOOLS = [
    {
        "name": "list_zoom_meetings",
        "description": "List upcoming Zoom meetings",
        "inputSchema": {"type": "object", "properties": {}},
    },
    {
        "name": "create_zoom_meeting",
        "description": "Create a new Zoom meeting",
        "inputSchema": {
            "type": "object",
            "properties": {"topic": {"type": "string"}},
            "required": ["topic"],
        },
    },
]


def default_responder(request: dict[str, Any]) -> dict[str, Any] | None:
    """Answer like a small MCP server; ``fail`` tools return a JSON-RPC error."""
    method = request["method"]
    if method == "initialize":
        return {
            "result": {
                "protocolVersion": "2024-11-05",
                "capabilities": {"tools": {}},
                "serverInfo": {"name": "fake-mcp", "version": "1.0"},
            }
        }
    if method == "tools/list":
        return {"result": {"tools": TOOLS}}
    if method == "tools/call":
        name = request["params"]["name"]
        if name == "fail":
            return {"error": {"code": -1, "message": "boom"}}
        return {"result": {"content": [{"type": "text", "text": f"called {name}"}]}}
    return None


class FakeStdin:
    """Captures JSON lines written by the client."""

    def __init__(self, on_message: Callable[[dict[str, Any]], None]) -> None:
        self.messages: list[dict[str, Any]] = []
        self.closed = False
        self._on_message = on_message

    def write(self, data: bytes) -> None:
        if self.closed:
            raise BrokenPipeError("stdin closed")
        for line in data.decode().splitlines():
            message = json.loads(line)
            self.messages.append(message)
            self._on_message(message)

    async def drain(self) -> None:
        return None

    def close(self) -> None:
        self.closed = True

    def methods(self) -> list[str]:
        return [m["method"] for m in self.messages]


class FakeProcess:
    """Quacks like ``asyncio.subprocess.Process`` with stream-backed pipes."""

    def __init__(self, responder: Responder | None) -> None:
        self.stdin = FakeStdin(self._on_message)
        self.stdout = asyncio.StreamReader()
        self.stderr = asyncio.StreamReader()
        self.returncode: int | None = None
        self.pid = 4242
        self._responder = responder
        self._exited = asyncio.Event()

    def _on_message(self, message: dict[str, Any]) -> None:
        if self._responder is None or "id" not in message:
            return
        reply = self._responder(message)
        if reply is not None:
            self.send({"jsonrpc": "2.0", "id": message["id"], **reply})

    def send(self, message: dict[str, Any]) -> None:
        self.stdout.feed_data((json.dumps(message) + "\n").encode())

    def exit(self, code: int = 0) -> None:
        if self.returncode is not None:
            return
        self.returncode = code
        self.stdout.feed_eof()
        self.stderr.feed_eof()
        self._exited.set()

    def terminate(self) -> None:
        self.exit(-15)

    def kill(self) -> None:
        self.exit(-9)

    async def wait(self) -> int:
        await self._exited.wait()
        assert self.returncode is not None
        return self.returncode


class FakeSpawner:
    """Replacement for ``asyncio.create_subprocess_exec``."""

    def __init__(self) -> None:
        self.responder: Responder | None = default_responder
        self.processes: list[FakeProcess] = []
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []

    async def __call__(self, *argv: Any, **kwargs: Any) -> FakeProcess:
        self.calls.append((argv, kwargs))
        process = FakeProcess(self.responder)
        self.processes.append(process)
        return process

    @property
    def process(self) -> FakeProcess:
        return self.processes[-1]


@pytest.fixture
def fake_spawn(monkeypatch: pytest.MonkeyPatch) -> FakeSpawner:
    spawner = FakeSpawner()
    monkeypatch.setattr(asyncio, "create_subprocess_exec", spawner)
    return spawner
