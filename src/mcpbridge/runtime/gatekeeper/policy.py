"""PolicyEngine — decides which tool calls need user confirmation.

Pure logic, no I/O.  A tool needs confirmation when the gate is enabled and
its name matches one of ``confirm_tools`` (exact or Unix-style glob).
"""

from __future__ import annotations

import fnmatch

from mcpbridge.runtime.gatekeeper.models import GatekeeperConfig


class PolicyEngine:
    """Evaluate tool names against a :class:`GatekeeperConfig`."""

    def __init__(self, config: GatekeeperConfig) -> None:
        self._config = config

    @property
    def config(self) -> GatekeeperConfig:
        return self._config

    def requires_confirmation(self, tool_name: str) -> bool:
        if not self._config.enabled:
            return False
        return any(fnmatch.fnmatchcase(tool_name, pattern) for pattern in self._config.confirm_tools)
