"""Runtime safety layer — confirmation gate in front of tool execution."""

from mcpbridge.runtime.errors import ApprovalTimeoutError, RuntimeSafetyError
from mcpbridge.runtime.executor import ConfirmingExecutor

__all__ = [
    "ApprovalTimeoutError",
    "ConfirmingExecutor",
    "RuntimeSafetyError",
]
