"""``mcpbridge serve`` — run the HTTP API."""

from __future__ import annotations

import click

from mcpbridge.cli_commands._config import build_runner, resolve_config
from mcpbridge.cli_commands._output import console


@click.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Bind address.")
@click.option("--port", default=5000, show_default=True, type=int, help="Bind port.")
@click.option("--telemetry", is_flag=True, help="Export traces to the console.")
@click.option("--otlp-endpoint", default=None, help="Export traces via OTLP/gRPC to this endpoint.")
@click.pass_context
def serve(
    ctx: click.Context,
    host: str,
    port: int,
    telemetry: bool,
    otlp_endpoint: str | None,
) -> None:
    """Serve /api/mcp/tools, /api/mcp/execute and /api/mcp/health."""
    import uvicorn

    from mcpbridge.server.app import create_app

    if telemetry or otlp_endpoint:
        from mcpbridge.utils.telemetry import configure_telemetry

        configure_telemetry(export_to_console=telemetry, otlp_endpoint=otlp_endpoint)

    runner = build_runner(resolve_config(ctx))
    console.print(f"Serving MCP bridge ({runner.transport}) on http://{host}:{port}")
    uvicorn.run(create_app(runner), host=host, port=port, log_config=None)
