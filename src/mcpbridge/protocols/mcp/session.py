"""Transport-independent MCP session logic.

:class:`MCPSession` owns what both transports share: request-id
allocation, the one-shot ``initialize`` handshake and the typed
``tools/list`` / ``tools/call`` operations.  Concrete clients implement
:meth:`MCPSession.call_method` and :meth:`MCPSession.notify` for their wire.

Session state only moves forward
(``uninitialized -> initializing -> initialized``) except when a
handshake fails or the transport dies, which puts it back to
``uninitialized``.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar

from pydantic import ValidationError

from mcpbridge import __version__
from mcpbridge.protocols.errors import ProtocolError, RpcError, ToolExecutionError
from mcpbridge.protocols.mcp.models import PROTOCOL_VERSION, ToolCallResult, ToolList

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    """Lifecycle of the JSON-RPC session with the MCP server."""

    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    INITIALIZED = "initialized"


class MCPSession(ABC):
    """Base class for MCP clients.

    Satisfies the :class:`~mcpbridge.protocols.provider.ToolRunner` protocol.
    """

    transport: ClassVar[str]

    def __init__(self, *, client_name: str = "mcpbridge", client_version: str = __version__) -> None:
        self._client_info = {"name": client_name, "version": client_version}
        self._state = SessionState.UNINITIALIZED
        self._init_lock = asyncio.Lock()
        self._next_id = 0

    async def __aenter__(self) -> MCPSession:
        await self.start()
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.close()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def initialized(self) -> bool:
        return self._state is SessionState.INITIALIZED

    def _allocate_id(self) -> int:
        request_id = self._next_id
        self._next_id += 1
        return request_id

    def _reset_session(self) -> None:
        self._state = SessionState.UNINITIALIZED

    def handshake_params(self) -> dict[str, Any]:
        """Parameters of the ``initialize`` request."""
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {},
            "clientInfo": dict(self._client_info),
        }

    async def initialize(self) -> None:
        """Run the ``initialize`` handshake once per session.

        Concurrent callers wait for the same handshake.  A failed handshake
        leaves the session uninitialized so the next call retries it.
        """
        if self._state is SessionState.INITIALIZED:
            return
        async with self._init_lock:
            if self._state is SessionState.INITIALIZED:
                return
            self._state = SessionState.INITIALIZING
            try:
                result = await self.call_method("initialize", self.handshake_params())
                await self.notify("notifications/initialized")
                self._state = SessionState.INITIALIZED
            finally:
                if self._state is not SessionState.INITIALIZED:
                    self._state = SessionState.UNINITIALIZED
            logger.info("MCP %s session initialized: %s", self.transport, result)

    async def list_tools(self) -> ToolList:
        """Send ``tools/list`` and return the full tool set."""
        await self.initialize()
        result = await self.call_method("tools/list")
        try:
            return ToolList.model_validate(result or {})
        except ValidationError as exc:
            raise ProtocolError(f"Invalid tools/list result: {exc}") from exc

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> ToolCallResult:
        """Send ``tools/call`` for *name*.

        Raises:
            ToolExecutionError: The server answered with a JSON-RPC error.
            ProtocolError: The result is not a ``tools/call`` result object.
        """
        await self.initialize()
        try:
            result = await self.call_method("tools/call", {"name": name, "arguments": arguments})
        except RpcError as exc:
            raise ToolExecutionError(name, exc.message, code=exc.code, data=exc.data) from exc
        try:
            return ToolCallResult.model_validate(result or {})
        except ValidationError as exc:
            raise ProtocolError(f"Invalid tools/call result: {exc}") from exc

    @abstractmethod
    async def call_method(self, method: str, params: Any = None) -> Any:
        """Send a request and return its ``result``; raise :class:`RpcError` on ``error``."""

    @abstractmethod
    async def notify(self, method: str, params: Any = None) -> None:
        """Send a notification (no ``id``, no response expected)."""

    @abstractmethod
    async def health_check(self) -> bool:
        """Report whether the server is reachable.  Never raises."""

    async def start(self) -> None:
        """Acquire transport resources ahead of the first call."""

    async def close(self) -> None:
        """Release transport resources."""
        self._reset_session()
