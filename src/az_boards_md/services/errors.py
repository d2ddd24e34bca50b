"""Error types raised by az-boards-md services.

Helpers raise these instead of terminating the process. The command layer
reports them through a single handler (see ``utils.command_decorators``).
"""

from __future__ import annotations

from az_boards_md.config.messages import DETAILS_LINE, ERROR_MESSAGES, STATUS_LINE


class AzBoardsError(Exception):
    """Base error for all az-boards-md failures."""

    exit_code = 1

    def __init__(self, message: str, details: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or []


class UsageError(AzBoardsError):
    """Raised when required input is missing or invalid."""

    def __init__(self, message: str, details: list[str] | None = None, show_help: bool = False):
        super().__init__(message, details)
        self.show_help = show_help


class OrganizationRequiredError(UsageError):
    """Raised when no organization URL could be resolved."""

    def __init__(self) -> None:
        super().__init__(
            ERROR_MESSAGES["organization_required"],
            details=[ERROR_MESSAGES["organization_example"]],
        )


class AzCliError(AzBoardsError):
    """Raised when an Azure CLI invocation fails."""

    def __init__(self, message: str, stderr: str | None = None):
        details = [line for line in (stderr or "").strip().splitlines() if line.strip()]
        super().__init__(message, details)
        self.stderr = stderr


class WorkItemUpdateError(AzBoardsError):
    """Raised when the work item PATCH request fails."""

    def __init__(
        self,
        work_item_id: str,
        status_code: int | None = None,
        reason: str | None = None,
        body: str | None = None,
        message: str | None = None,
    ):
        details: list[str] = []
        if status_code is not None:
            details.append(STATUS_LINE.format(status_code=status_code, reason=reason or "").rstrip())
        if body is not None:
            details.append(DETAILS_LINE.format(details=body))
        super().__init__(
            message
            or ERROR_MESSAGES["work_item_update_failed"].format(work_item_id=work_item_id),
            details,
        )
        self.work_item_id = work_item_id
        self.status_code = status_code
        self.reason = reason
        self.body = body
