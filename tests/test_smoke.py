"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import mcpbridge

    assert mcpbridge.__version__ == "0.1.0"


def test_cli_entrypoint() -> None:
    from mcpbridge.cli import main

    assert callable(main)


def test_lazy_import_from_mcpbridge() -> None:
    import mcpbridge
    from mcpbridge.config import BridgeConfig
    from mcpbridge.protocols.mcp.runner import MCPRunner

    assert mcpbridge.BridgeConfig is BridgeConfig
    assert mcpbridge.MCPRunner is MCPRunner
