"""mcpbridge — MCP tool-execution bridge over HTTP or stdio."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from mcpbridge.config import BridgeConfig as BridgeConfig
    from mcpbridge.protocols.mcp.runner import MCPRunner as MCPRunner

_LAZY_EXPORTS = {
    "BridgeConfig": "mcpbridge.config",
    "MCPRunner": "mcpbridge.protocols.mcp.runner",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'mcpbridge' has no attribute {name!r}")
