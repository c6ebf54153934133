"""mcpbridge CLI entrypoint."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.logging import RichHandler

from mcpbridge import __version__


@click.group()
@click.version_option(version=__version__, prog_name="mcpbridge")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Root logger level.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML config file (defaults to MCP_* environment variables).",
)
@click.pass_context
def main(ctx: click.Context, log_level: str, config_path: Path | None) -> None:
    """mcpbridge — MCP tool-execution bridge."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(name)s: %(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


# Register subcommands
from mcpbridge.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
