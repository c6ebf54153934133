"""Shared CLI output formatters."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from mcpbridge.protocols.mcp.models import ToolList
    from mcpbridge.runtime.gatekeeper.models import ToolCallOutcome

console = Console()


def print_tools_table(tools: ToolList) -> None:
    """Pretty-print the tools advertised by the server."""
    table = Table(title="MCP Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")

    for tool in tools.tools:
        table.add_row(tool.name, escape(_truncate(tool.description)))

    console.print(table)


def print_outcome(outcome: ToolCallOutcome, *, as_json: bool = False) -> None:
    """Print the result of one tool call."""
    payload: dict[str, Any] = outcome.payload()
    if as_json:
        console.print_json(json.dumps(payload, default=str))
        return

    if outcome.cancelled:
        console.print(f"[yellow]{outcome.name}: cancelled.[/yellow]")
    elif outcome.error is not None:
        console.print(f"[red]{outcome.name} failed:[/red] {escape(outcome.error)}")
    else:
        texts = [
            str(item.get("text", ""))
            for item in payload.get("content", [])
            if item.get("type") == "text"
        ]
        console.print("\n".join(texts) if texts else payload, markup=False)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
