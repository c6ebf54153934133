"""ConfirmingExecutor — runs tool calls through the confirmation gate.

Wraps a :class:`~mcpbridge.protocols.provider.ToolRunner` the way a
dispatcher wraps its providers: calls that need confirmation are gathered
into one :class:`ConfirmationRequest` per batch, then every call runs in
order.  Denied calls never reach the runner.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mcpbridge.protocols.errors import ProtocolError
from mcpbridge.runtime.gatekeeper.models import (
    ConfirmationRequest,
    GatekeeperConfig,
    PendingToolCall,
    ToolCall,
    ToolCallOutcome,
)
from mcpbridge.runtime.gatekeeper.policy import PolicyEngine

if TYPE_CHECKING:
    from mcpbridge.protocols.provider import ToolRunner
    from mcpbridge.runtime.gatekeeper.gatekeeper import Gatekeeper

logger = logging.getLogger(__name__)


class ConfirmingExecutor:
    """Gatekeeper-aware front for a :class:`ToolRunner`."""

    def __init__(
        self,
        runner: ToolRunner,
        *,
        gatekeeper: Gatekeeper | None = None,
        config: GatekeeperConfig | None = None,
    ) -> None:
        self._runner = runner
        self._gatekeeper = gatekeeper
        self._config = config or GatekeeperConfig()
        self._policy_engine = PolicyEngine(self._config)
        self._descriptions: dict[str, str] | None = None

    @property
    def config(self) -> GatekeeperConfig:
        return self._config

    async def execute(self, tool_call: ToolCall) -> ToolCallOutcome:
        """Execute a single call; shorthand for a batch of one."""
        [outcome] = await self.execute_all([tool_call])
        return outcome

    async def execute_all(self, tool_calls: list[ToolCall]) -> list[ToolCallOutcome]:
        """Confirm once for the batch, then run each call in order."""
        needs_confirmation = [
            tc for tc in tool_calls if self._policy_engine.requires_confirmation(tc.name)
        ]
        approved = True
        if needs_confirmation:
            approved = await self._confirm(needs_confirmation)

        outcomes: list[ToolCallOutcome] = []
        for tc in tool_calls:
            confirmable = tc in needs_confirmation
            if confirmable and not approved:
                logger.info("Tool call %s cancelled by user", tc.name)
                outcomes.append(ToolCallOutcome(tool_call_id=tc.id, name=tc.name, cancelled=True))
                continue

            arguments = dict(tc.arguments)
            if confirmable and self._config.inject_confirmed:
                arguments["confirmed"] = True
            outcomes.append(await self._run(tc, arguments))
        return outcomes

    async def _run(self, tool_call: ToolCall, arguments: dict[str, object]) -> ToolCallOutcome:
        try:
            result = await self._runner.call_tool(tool_call.name, arguments)
        except ProtocolError as exc:
            logger.warning("Tool call %s failed: %s", tool_call.name, exc)
            return ToolCallOutcome(tool_call_id=tool_call.id, name=tool_call.name, error=str(exc))
        return ToolCallOutcome(tool_call_id=tool_call.id, name=tool_call.name, result=result.to_wire())

    async def _confirm(self, tool_calls: list[ToolCall]) -> bool:
        if self._gatekeeper is None:
            logger.warning(
                "%d tool call(s) need confirmation but no gatekeeper is configured; cancelling.",
                len(tool_calls),
            )
            return False

        descriptions = await self._tool_descriptions()
        request = ConfirmationRequest.for_calls([
            PendingToolCall(
                id=tc.id,
                tool_name=tc.name,
                arguments=tc.arguments,
                description=descriptions.get(tc.name) or f"Execute {tc.name}",
            )
            for tc in tool_calls
        ])
        result = await self._gatekeeper.request_confirmation(request)
        return result.approved

    async def _tool_descriptions(self) -> dict[str, str]:
        """Descriptions from ``tools/list``, fetched once and cached."""
        if self._descriptions is None:
            try:
                tools = await self._runner.list_tools()
            except ProtocolError as exc:
                logger.warning("Could not fetch tool descriptions: %s", exc)
                return {}
            self._descriptions = {tool.name: tool.description for tool in tools.tools}
        return self._descriptions
