"""``mcpbridge health`` — probe the configured MCP server."""

from __future__ import annotations

import asyncio
import sys

import click
from rich.markup import escape

from mcpbridge.cli_commands._config import build_runner, resolve_config
from mcpbridge.cli_commands._output import console
from mcpbridge.protocols.errors import ProtocolError


@click.command()
@click.pass_context
def health(ctx: click.Context) -> None:
    """Exit 0 when the MCP server is healthy, 1 otherwise."""
    runner = build_runner(resolve_config(ctx))

    async def _probe() -> bool:
        async with runner:
            return await runner.health_check()

    try:
        healthy = asyncio.run(_probe())
    except ProtocolError as exc:
        console.print(f"[red]MCP error:[/red] {escape(str(exc))}")
        healthy = False

    if healthy:
        console.print(f"[green]MCP server healthy[/green] ({runner.transport})")
        return
    console.print(f"[red]MCP server unhealthy[/red] ({runner.transport})")
    sys.exit(1)
