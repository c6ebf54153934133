"""Data models for the gatekeeper subsystem."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Destructive or write operations that need explicit user confirmation.
DEFAULT_CONFIRM_TOOLS: tuple[str, ...] = (
    # Gmail
    "send_email",
    "create_email_draft",
    "trash_email",
    "delete_email",
    "add_label_to_email",
    "remove_label_from_email",
    # Drive
    "create_folder",
    "move_file",
    "rename_file",
    "copy_file",
    "share_file",
    "delete_file",
    # Calendar
    "create_calendar_event",
    "update_calendar_event",
    "delete_calendar_event",
    # Zoom
    "create_zoom_meeting",
    "update_zoom_meeting",
    "delete_zoom_meeting",
)

CANCELLED_MESSAGE = "Action was cancelled by user"


class GatekeeperConfig(BaseModel):
    """Configuration for the confirmation gate."""

    enabled: bool = Field(default=True, description="Master switch for confirmation checks.")
    confirm_tools: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CONFIRM_TOOLS),
        description="Tool names or glob patterns (e.g. 'delete_*') that need confirmation.",
    )
    inject_confirmed: bool = Field(
        default=True,
        description="Add 'confirmed: true' to the arguments of approved calls.",
    )
    approval_timeout: float = Field(
        default=300.0,
        description="Seconds to wait for the user before giving up.",
    )


class ToolCall(BaseModel):
    """A tool invocation requested by the assistant."""

    id: str = ""
    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


class PendingToolCall(BaseModel):
    """A tool call awaiting confirmation, with the tool's description."""

    id: str
    tool_name: str
    arguments: dict[str, Any] = Field(default_factory=dict)
    description: str = ""


class ConfirmationRequest(BaseModel):
    """One prompt covering every call in a batch that needs confirmation."""

    tool_calls: list[PendingToolCall]
    summary: str

    @classmethod
    def for_calls(cls, tool_calls: list[PendingToolCall]) -> ConfirmationRequest:
        count = len(tool_calls)
        noun = "action requires" if count == 1 else "actions require"
        return cls(tool_calls=tool_calls, summary=f"{count} {noun} confirmation")


class ApprovalResult(BaseModel):
    """The gatekeeper's decision on a confirmation request."""

    approved: bool
    reason: str = Field(default="")


class ToolCallOutcome(BaseModel):
    """What happened to one tool call of a batch.

    Exactly one of ``result`` / ``error`` is set, unless ``cancelled``.
    """

    tool_call_id: str
    name: str
    result: dict[str, Any] | None = None
    error: str | None = None
    cancelled: bool = False

    def payload(self) -> dict[str, Any]:
        """The JSON fed back to the assistant as the tool message."""
        if self.cancelled:
            return {"cancelled": True, "message": CANCELLED_MESSAGE}
        if self.error is not None:
            return {"error": self.error}
        return self.result or {}
