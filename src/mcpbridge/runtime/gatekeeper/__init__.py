"""Gatekeeper subsystem — user confirmation for destructive tool calls."""

from mcpbridge.runtime.gatekeeper.gatekeeper import (
    AutoApproveGatekeeper,
    AutoDenyGatekeeper,
    CLIGatekeeper,
    Gatekeeper,
)
from mcpbridge.runtime.gatekeeper.models import (
    DEFAULT_CONFIRM_TOOLS,
    ApprovalResult,
    ConfirmationRequest,
    GatekeeperConfig,
    PendingToolCall,
    ToolCall,
    ToolCallOutcome,
)
from mcpbridge.runtime.gatekeeper.policy import PolicyEngine

__all__ = [
    "DEFAULT_CONFIRM_TOOLS",
    "ApprovalResult",
    "AutoApproveGatekeeper",
    "AutoDenyGatekeeper",
    "CLIGatekeeper",
    "ConfirmationRequest",
    "Gatekeeper",
    "GatekeeperConfig",
    "PendingToolCall",
    "PolicyEngine",
    "ToolCall",
    "ToolCallOutcome",
]
