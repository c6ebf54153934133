"""Bridge configuration — transport selection and timeouts.

Configuration comes from the environment (:meth:`BridgeConfig.from_env`)
or from a YAML file (:func:`load_config`) whose ``${VAR}`` references are
expanded before parsing.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from mcpbridge.runtime.gatekeeper.models import GatekeeperConfig

DEFAULT_SERVER_URL = "http://localhost:3003"

_ENV_FIELDS = {
    "MCP_SERVER_URL": "server_url",
    "MCP_TRANSPORT": "transport",
    "MCP_SERVER_COMMAND": "server_command",
    "MCP_SERVER_PATH": "server_path",
    "MCP_SERVER_CWD": "server_cwd",
    "MCP_REQUEST_TIMEOUT": "request_timeout",
    "MCP_HTTP_TIMEOUT": "http_timeout",
}


class ConfigError(Exception):
    """Raised when configuration cannot be read or fails validation."""


class BridgeConfig(BaseModel):
    """Settings for the MCP runner."""

    server_url: str | None = Field(default=None, description="Selects the HTTP transport when set.")
    transport: Literal["http", "stdio"] | None = Field(
        default=None,
        description="Explicit transport; 'http' forces HTTP even without a URL.",
    )
    server_command: str = Field(default="node", description="Executable for the stdio server.")
    server_path: str | None = Field(default=None, description="Script passed to server_command.")
    server_cwd: str | None = Field(default=None, description="Working directory of the stdio server.")
    request_timeout: float = Field(default=30.0, gt=0, description="Seconds to wait for a stdio response.")
    http_timeout: float | None = Field(default=30.0, description="Seconds per HTTP request; None disables.")
    gatekeeper: GatekeeperConfig = Field(default_factory=GatekeeperConfig)

    @property
    def use_http(self) -> bool:
        """True when the HTTP transport should be used."""
        return self.transport == "http" or bool(self.server_url)

    @property
    def resolved_server_url(self) -> str:
        return self.server_url or DEFAULT_SERVER_URL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BridgeConfig:
        """Build a config from ``MCP_*`` environment variables.

        Empty values are treated as unset.
        """
        source = os.environ if environ is None else environ
        data: dict[str, Any] = {}
        for var, field in _ENV_FIELDS.items():
            value = source.get(var, "").strip()
            if value:
                data[field] = value.lower() if field == "transport" else value
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid MCP environment configuration: {exc}") from exc


def load_config(path: Path) -> BridgeConfig:
    """Read a YAML config file, interpolate env vars, and validate.

    Raises:
        ConfigError: On read errors, YAML parse errors or validation failures.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc

    expanded = os.path.expandvars(raw)

    try:
        data: Any = yaml.safe_load(expanded)
    except yaml.YAMLError as exc:
        raise ConfigError(f"YAML parse error: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f"Config root must be a mapping, got {type(data).__name__}"
        raise ConfigError(msg)

    try:
        return BridgeConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
