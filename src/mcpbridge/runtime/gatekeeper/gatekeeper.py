"""Gatekeeper protocol and implementations.

- ``Gatekeeper`` — runtime-checkable protocol for confirmation prompts.
- ``CLIGatekeeper`` — shows the batch at the terminal and reads y/N.
- ``AutoApproveGatekeeper`` / ``AutoDenyGatekeeper`` — fixed answers (tests, CI, ``--yes``).
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mcpbridge.runtime.errors import ApprovalTimeoutError
from mcpbridge.runtime.gatekeeper.models import ApprovalResult

if TYPE_CHECKING:
    from mcpbridge.runtime.gatekeeper.models import ConfirmationRequest

logger = logging.getLogger(__name__)


@runtime_checkable
class Gatekeeper(Protocol):
    """Decides whether a batch of tool calls may proceed."""

    async def request_confirmation(self, request: ConfirmationRequest) -> ApprovalResult:
        """Ask once for the whole batch and return the decision."""
        ...


class AutoApproveGatekeeper:
    """Always approves.

    Satisfies the :class:`Gatekeeper` protocol.
    """

    async def request_confirmation(self, request: ConfirmationRequest) -> ApprovalResult:
        logger.debug("AutoApproveGatekeeper: auto-approving %s", request.summary)
        return ApprovalResult(approved=True, reason="auto-approved")


class AutoDenyGatekeeper:
    """Always denies.

    Satisfies the :class:`Gatekeeper` protocol.
    """

    async def request_confirmation(self, request: ConfirmationRequest) -> ApprovalResult:
        logger.debug("AutoDenyGatekeeper: auto-denying %s", request.summary)
        return ApprovalResult(approved=False, reason="auto-denied")


class CLIGatekeeper:
    """Prompts the user at the terminal.

    Satisfies the :class:`Gatekeeper` protocol.

    Uses ``loop.run_in_executor(None, input)`` to read from stdin without
    blocking the event loop.  Raises :class:`ApprovalTimeoutError` if no
    answer arrives within *timeout*.
    """

    def __init__(self, *, timeout: float = 300.0, console: Console | None = None) -> None:
        self._timeout = timeout
        self._console = console or Console()

    async def request_confirmation(self, request: ConfirmationRequest) -> ApprovalResult:
        self._print_summary(request)

        loop = asyncio.get_running_loop()
        try:
            answer: str = await asyncio.wait_for(
                loop.run_in_executor(None, self._read_input),
                timeout=self._timeout,
            )
        except TimeoutError:
            raise ApprovalTimeoutError(request.summary, self._timeout)

        approved = answer.strip().lower() in ("y", "yes")
        reason = "" if approved else "denied by user"
        return ApprovalResult(approved=approved, reason=reason)

    def _print_summary(self, request: ConfirmationRequest) -> None:
        table = Table(title=request.summary)
        table.add_column("Tool", style="cyan")
        table.add_column("Arguments")
        table.add_column("Description")
        for call in request.tool_calls:
            table.add_row(
                call.tool_name,
                escape(json.dumps(call.arguments, default=str)),
                escape(call.description),
            )
        self._console.print(table)
        self._console.print("Approve? [y/N]: ", end="", markup=False)

    @staticmethod
    def _read_input() -> str:
        """Blocking read from stdin (run in executor)."""
        return input()
