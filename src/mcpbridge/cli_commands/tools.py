"""``mcpbridge tools`` — list and call tools on the configured MCP server."""

from __future__ import annotations

import asyncio
import json
import sys
from typing import TYPE_CHECKING, Any

import click
from rich.markup import escape

from mcpbridge.cli_commands._config import build_runner, resolve_config
from mcpbridge.cli_commands._output import console, print_outcome, print_tools_table
from mcpbridge.protocols.errors import ProtocolError
from mcpbridge.runtime.errors import RuntimeSafetyError

if TYPE_CHECKING:
    from mcpbridge.protocols.mcp.models import ToolList
    from mcpbridge.runtime.gatekeeper.models import ToolCallOutcome


@click.group()
def tools() -> None:
    """List and call MCP tools."""


@tools.command("list")
@click.option("--json", "as_json", is_flag=True, help="Print the raw tools/list result.")
@click.pass_context
def list_tools(ctx: click.Context, as_json: bool) -> None:
    """List the tools advertised by the MCP server."""
    runner = build_runner(resolve_config(ctx))

    async def _list() -> ToolList:
        async with runner:
            return await runner.list_tools()

    try:
        tool_list = asyncio.run(_list())
    except ProtocolError as exc:
        console.print(f"[red]MCP error:[/red] {escape(str(exc))}")
        sys.exit(1)

    if as_json:
        console.print_json(tool_list.model_dump_json(by_alias=True))
        return

    if not tool_list.tools:
        console.print("[yellow]No tools available.[/yellow]")
        return

    print_tools_table(tool_list)


@tools.command("call")
@click.argument("name")
@click.option("--args", "args_json", default="{}", help="Tool arguments as a JSON object.")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt.")
@click.option("--json", "as_json", is_flag=True, help="Print the raw result.")
@click.pass_context
def call(ctx: click.Context, name: str, args_json: str, yes: bool, as_json: bool) -> None:
    """Call tool NAME, asking for confirmation if it is destructive."""
    from mcpbridge.runtime.executor import ConfirmingExecutor
    from mcpbridge.runtime.gatekeeper import AutoApproveGatekeeper, CLIGatekeeper, Gatekeeper
    from mcpbridge.runtime.gatekeeper.models import ToolCall

    try:
        arguments: Any = json.loads(args_json)
    except json.JSONDecodeError as exc:
        console.print(f"[red]Invalid --args JSON:[/red] {escape(str(exc))}")
        sys.exit(1)
    if not isinstance(arguments, dict):
        console.print("[red]--args must be a JSON object.[/red]")
        sys.exit(1)

    config = resolve_config(ctx)
    runner = build_runner(config)
    gatekeeper: Gatekeeper = (
        AutoApproveGatekeeper()
        if yes
        else CLIGatekeeper(timeout=config.gatekeeper.approval_timeout, console=console)
    )

    async def _call() -> ToolCallOutcome:
        async with runner:
            executor = ConfirmingExecutor(runner, gatekeeper=gatekeeper, config=config.gatekeeper)
            return await executor.execute(ToolCall(id="cli", name=name, arguments=arguments))

    try:
        outcome = asyncio.run(_call())
    except (ProtocolError, RuntimeSafetyError) as exc:
        console.print(f"[red]MCP error:[/red] {escape(str(exc))}")
        sys.exit(1)

    print_outcome(outcome, as_json=as_json)
    if outcome.error is not None:
        sys.exit(1)
