"""Shared error types for the runtime safety layer."""


class RuntimeSafetyError(Exception):
    """Base error for all runtime safety failures."""


class ApprovalTimeoutError(RuntimeSafetyError):
    """The gatekeeper timed out waiting for user input."""

    def __init__(self, summary: str, timeout: float) -> None:
        self.summary = summary
        self.timeout = timeout
        super().__init__(f"Confirmation timed out after {timeout}s: {summary}")
