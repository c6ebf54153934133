"""Tests for Gatekeeper protocol and implementations."""

from __future__ import annotations

import asyncio
from unittest.mock import patch

import pytest
from rich.console import Console

from mcpbridge.runtime.errors import ApprovalTimeoutError
from mcpbridge.runtime.gatekeeper.gatekeeper import (
    AutoApproveGatekeeper,
    AutoDenyGatekeeper,
    CLIGatekeeper,
    Gatekeeper,
)
from mcpbridge.runtime.gatekeeper.models import ConfirmationRequest, PendingToolCall


def _request(*names: str) -> ConfirmationRequest:
    return ConfirmationRequest.for_calls([
        PendingToolCall(id=f"call_{i}", tool_name=name, arguments={"n": i}, description="desc")
        for i, name in enumerate(names or ("send_email",))
    ])


class TestGatekeeperProtocol:
    def test_auto_approve_satisfies_protocol(self) -> None:
        assert isinstance(AutoApproveGatekeeper(), Gatekeeper)

    def test_auto_deny_satisfies_protocol(self) -> None:
        assert isinstance(AutoDenyGatekeeper(), Gatekeeper)

    def test_cli_gatekeeper_satisfies_protocol(self) -> None:
        assert isinstance(CLIGatekeeper(), Gatekeeper)


class TestFixedGatekeepers:
    async def test_auto_approve(self) -> None:
        result = await AutoApproveGatekeeper().request_confirmation(_request())
        assert result.approved is True
        assert result.reason == "auto-approved"

    async def test_auto_deny(self) -> None:
        result = await AutoDenyGatekeeper().request_confirmation(_request())
        assert result.approved is False


class TestCLIGatekeeper:
    @pytest.mark.parametrize("answer", ["y", "YES", " yes "])
    async def test_approve(self, answer: str) -> None:
        gk = CLIGatekeeper(console=Console(record=True))

        with patch.object(CLIGatekeeper, "_read_input", return_value=answer):
            result = await gk.request_confirmation(_request())

        assert result.approved is True

    @pytest.mark.parametrize("answer", ["n", "", "maybe"])
    async def test_deny(self, answer: str) -> None:
        gk = CLIGatekeeper(console=Console(record=True))

        with patch.object(CLIGatekeeper, "_read_input", return_value=answer):
            result = await gk.request_confirmation(_request())

        assert result.approved is False
        assert result.reason == "denied by user"

    async def test_summary_lists_every_call_once(self) -> None:
        console = Console(record=True, width=120)
        gk = CLIGatekeeper(console=console)

        with patch.object(CLIGatekeeper, "_read_input", return_value="y"):
            await gk.request_confirmation(_request("send_email", "delete_file"))

        text = console.export_text()
        assert "2 actions require confirmation" in text
        assert "send_email" in text
        assert "delete_file" in text
        assert text.count("Approve? [y/N]") == 1

    async def test_timeout_raises(self) -> None:
        gk = CLIGatekeeper(timeout=0.01, console=Console(record=True))

        def slow_input() -> str:
            import time

            time.sleep(0.2)
            return "y"

        with patch.object(CLIGatekeeper, "_read_input", side_effect=slow_input):
            with pytest.raises(ApprovalTimeoutError) as exc_info:
                await gk.request_confirmation(_request())

        assert exc_info.value.timeout == 0.01
        await asyncio.sleep(0.25)
