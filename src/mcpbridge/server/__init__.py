"""HTTP API in front of the MCP runner."""

from mcpbridge.server.app import create_app

__all__ = ["create_app"]
