"""StdioMCPClient — JSON-RPC with a child process over stdin/stdout.

The MCP server runs as a subprocess.  Requests are written to its stdin as
newline-delimited JSON; a reader task frames its stdout with
:class:`~mcpbridge.protocols.mcp.framing.MessageFramer` and resolves the
pending request whose ``id`` matches each response, so any number of
requests may be in flight and answered in any order.
"""

from __future__ import annotations

import asyncio
import contextlib
import json
import logging
import os
from typing import Any

from mcpbridge.protocols.errors import MCPTimeoutError, RpcError, TransportError
from mcpbridge.protocols.mcp.framing import LineFramer, MessageFramer
from mcpbridge.protocols.mcp.models import JsonRpcRequest, is_response
from mcpbridge.protocols.mcp.session import MCPSession

logger = logging.getLogger(__name__)

_READ_SIZE = 64 * 1024


class StdioMCPClient(MCPSession):
    """MCP client for a server spawned as ``<command> <server_path>``.

    The process is spawned by :meth:`start` (or lazily by the first call).
    When it exits the session is reset; the next call spawns it again.
    """

    transport = "stdio"

    def __init__(
        self,
        server_path: str,
        *,
        command: str = "node",
        cwd: str | None = None,
        env: dict[str, str] | None = None,
        timeout: float = 30.0,
        **session_kwargs: Any,
    ) -> None:
        super().__init__(**session_kwargs)
        self._argv = [command, server_path]
        self._cwd = cwd
        self._env = env
        self._timeout = timeout
        self._process: asyncio.subprocess.Process | None = None
        self._pending: dict[int | str, asyncio.Future[Any]] = {}
        self._tasks: list[asyncio.Task[None]] = []
        self._spawn_lock = asyncio.Lock()

    @property
    def pending_count(self) -> int:
        """Number of requests still waiting for a response."""
        return len(self._pending)

    @property
    def running(self) -> bool:
        return self._process is not None and self._process.returncode is None

    async def start(self) -> None:
        """Spawn the server process unless one is already running."""
        async with self._spawn_lock:
            if self._process is not None:
                return
            logger.info("Spawning MCP server: %s (cwd=%s)", " ".join(self._argv), self._cwd)
            env = {**os.environ, **(self._env or {})}
            try:
                process = await asyncio.create_subprocess_exec(
                    *self._argv,
                    stdin=asyncio.subprocess.PIPE,
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                    cwd=self._cwd,
                    env=env,
                )
            except OSError as exc:
                raise TransportError(f"Failed to spawn MCP server: {exc}") from exc

            self._process = process
            self._tasks = [
                asyncio.create_task(self._read_stdout(process)),
                asyncio.create_task(self._read_stderr(process)),
            ]

    async def call_method(self, method: str, params: Any = None) -> Any:
        process = await self._ensure_process()
        request_id = self._allocate_id()
        request = JsonRpcRequest(id=request_id, method=method, params=params)
        logger.debug("-> %s (id=%s)", method, request_id)

        future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        self._pending[request_id] = future
        try:
            await self._write(process, request)
            return await asyncio.wait_for(future, self._timeout)
        except TimeoutError as exc:
            logger.error("Timeout waiting for %s (id=%s) after %ss", method, request_id, self._timeout)
            raise MCPTimeoutError(timeout=self._timeout) from exc
        finally:
            self._pending.pop(request_id, None)

    async def notify(self, method: str, params: Any = None) -> None:
        if self._process is None:
            logger.warning("Dropping notification %s: MCP server not running", method)
            return
        await self._write(self._process, JsonRpcRequest(method=method, params=params))

    async def health_check(self) -> bool:
        return self.running

    async def close(self) -> None:
        """Stop the reader tasks and terminate the server process."""
        process, self._process = self._process, None
        for task in self._tasks:
            task.cancel()
        await asyncio.gather(*self._tasks, return_exceptions=True)
        self._tasks = []

        if process is not None and process.returncode is None:
            if process.stdin is not None:
                process.stdin.close()
            with contextlib.suppress(ProcessLookupError):
                process.terminate()
            await process.wait()

        for future in self._pending.values():
            if not future.done():
                future.set_exception(TransportError("MCP client closed"))
        self._pending.clear()
        await super().close()

    async def _ensure_process(self) -> asyncio.subprocess.Process:
        if self._process is None:
            await self.start()
        if self._process is None:
            msg = "MCP server not running"
            raise TransportError(msg)
        return self._process

    @staticmethod
    async def _write(process: asyncio.subprocess.Process, request: JsonRpcRequest) -> None:
        if process.stdin is None:
            msg = "MCP server stdin is not available"
            raise TransportError(msg)
        line = json.dumps(request.to_wire()) + "\n"
        try:
            process.stdin.write(line.encode())
            await process.stdin.drain()
        except ConnectionError as exc:
            raise TransportError(f"MCP server pipe closed: {exc}") from exc

    async def _read_stdout(self, process: asyncio.subprocess.Process) -> None:
        assert process.stdout is not None
        framer = MessageFramer()
        while chunk := await process.stdout.read(_READ_SIZE):
            for message in framer.feed(chunk):
                self._dispatch(message)
        for message in framer.flush():
            self._dispatch(message)

        returncode = await process.wait()
        logger.info("MCP server exited with code %s", returncode)
        if self._process is process:
            self._process = None
            self._reset_session()

    @staticmethod
    async def _read_stderr(process: asyncio.subprocess.Process) -> None:
        assert process.stderr is not None
        framer = LineFramer()
        while chunk := await process.stderr.read(_READ_SIZE):
            for line in framer.feed(chunk):
                logger.warning("[MCP server stderr] %s", line)
        for line in framer.flush():
            logger.warning("[MCP server stderr] %s", line)

    def _dispatch(self, message: dict[str, Any]) -> None:
        """Resolve the pending request *message* answers, or log it."""
        if not is_response(message):
            logger.info("MCP notification: %s", message)
            return

        future = self._pending.pop(message["id"], None)
        if future is None:
            logger.warning("No pending request for response id %r", message["id"])
            return
        if future.done():
            return

        error = message.get("error")
        if error is not None:
            future.set_exception(_to_rpc_error(error))
        else:
            future.set_result(message.get("result"))


def _to_rpc_error(error: Any) -> RpcError:
    if not isinstance(error, dict):
        return RpcError(str(error))
    message = error.get("message")
    code = error.get("code")
    return RpcError(
        str(message) if message is not None else json.dumps(error),
        code=code if isinstance(code, int) else None,
        data=error.get("data"),
    )
