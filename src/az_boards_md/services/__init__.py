"""Service layer for az-boards-md."""

from az_boards_md.services.az_cli import AzureCli
from az_boards_md.services.content_resolver import resolve_content
from az_boards_md.services.errors import (
    AzBoardsError,
    AzCliError,
    OrganizationRequiredError,
    UsageError,
    WorkItemUpdateError,
)
from az_boards_md.services.organization import resolve_organization_url
from az_boards_md.services.work_item_service import WorkItemService

__all__ = [
    "AzBoardsError",
    "AzCliError",
    "AzureCli",
    "OrganizationRequiredError",
    "UsageError",
    "WorkItemService",
    "WorkItemUpdateError",
    "resolve_content",
    "resolve_organization_url",
]
