"""Config resolution shared by the subcommands."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click
from rich.markup import escape

from mcpbridge.cli_commands._output import console
from mcpbridge.config import BridgeConfig, ConfigError, load_config

if TYPE_CHECKING:
    from pathlib import Path

    from mcpbridge.protocols.mcp.runner import MCPRunner


def resolve_config(ctx: click.Context) -> BridgeConfig:
    """Load ``--config`` if given, else the ``MCP_*`` environment. Exits on error."""
    config_path: Path | None = (ctx.obj or {}).get("config_path")
    try:
        if config_path is not None:
            return load_config(config_path)
        return BridgeConfig.from_env()
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        sys.exit(1)


def build_runner(config: BridgeConfig) -> MCPRunner:
    """Create the runner for *config*. Exits on configuration errors."""
    from mcpbridge.protocols.mcp.runner import MCPRunner

    try:
        return MCPRunner.from_config(config)
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        sys.exit(1)
