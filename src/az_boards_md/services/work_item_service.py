"""Service layer for work item commands.

This module provides the orchestration behind the ``create`` and ``update``
commands: building JSON Patch bodies for Markdown fields, sending them to the
Azure DevOps REST API and creating work items through the Azure CLI.

Key Classes:
    WorkItemService: Creates work items and writes Markdown fields

Dependencies:
    - AzureCli: Work item creation and access tokens
    - httpx: The PATCH request against the work items endpoint

Architecture:
    CLI Commands → WorkItemService → AzureCli → az boards / az account
                                   → httpx    → PATCH _apis/wit/workitems/{id}

Example:
    >>> service = WorkItemService()
    >>> result = service.update_markdown_fields(
    ...     "42", "https://dev.azure.com/acme", description="./desc.md"
    ... )
    >>> result.field_labels
    ['Description']
"""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote

import httpx

from az_boards_md.config.messages import ERROR_MESSAGES
from az_boards_md.constants import (
    API_PATH_MARKER,
    AZURE_DEVOPS_RESOURCE_ID,
    DEFAULT_API_VERSION,
    JSON_PATCH_CONTENT_TYPE,
    WORK_ITEM_API_PATH,
    WORK_ITEM_EDIT_PATH,
)
from az_boards_md.models.enums import MarkdownField
from az_boards_md.models.work_item import MarkdownUpdateResult, PatchOperation
from az_boards_md.services.az_cli import AzureCli
from az_boards_md.services.content_resolver import resolve_content
from az_boards_md.services.errors import WorkItemUpdateError

logger = logging.getLogger(__name__)


def build_patch_operations(
    description: str | None = None,
    acceptance_criteria: str | None = None,
) -> tuple[list[PatchOperation], list[MarkdownField]]:
    """Build the JSON Patch operations for the given Markdown inputs.

    Each non-empty input contributes two operations: the field content and
    its Markdown format flag.

    Args:
        description: File path or inline Markdown for the description
        acceptance_criteria: File path or inline Markdown for acceptance criteria

    Returns:
        Tuple of (operations, fields included)
    """
    operations: list[PatchOperation] = []
    fields: list[MarkdownField] = []

    for field, value in (
        (MarkdownField.DESCRIPTION, description),
        (MarkdownField.ACCEPTANCE_CRITERIA, acceptance_criteria),
    ):
        if not value:
            continue
        content = resolve_content(value)
        if content.from_file:
            logger.debug(f"{field.label} read from file {value}")
        elif content.error:
            logger.debug(f"{field.label} used as inline text after: {content.error}")
        operations.append(PatchOperation.field_value(field, content.text))
        operations.append(PatchOperation.markdown_format(field))
        fields.append(field)

    return operations, fields


def build_work_item_url(
    org_url: str, work_item_id: str, api_version: str = DEFAULT_API_VERSION
) -> str:
    """Build the REST URL of a work item.

    Organization URLs that already point at the API (contain ``/_apis/``) are
    used as the base directly; bare organization roots get ``/_apis`` added.

    Examples:
        >>> build_work_item_url("https://dev.azure.com/acme", "123")
        'https://dev.azure.com/acme/_apis/wit/workitems/123?api-version=7.1'
        >>> build_work_item_url("https://dev.azure.com/acme/_apis/", "123")
        'https://dev.azure.com/acme/_apis/wit/workitems/123?api-version=7.1'
    """
    base = org_url.rstrip("/")
    if API_PATH_MARKER not in f"{base}/":
        base = f"{base}{API_PATH_MARKER.rstrip('/')}"
    path = WORK_ITEM_API_PATH.format(work_item_id=work_item_id, api_version=api_version)
    return f"{base}/{path}"


def build_work_item_web_url(org_url: str, project: str, work_item_id: str) -> str:
    """Build the browser URL of a work item from its organization and project."""
    path = WORK_ITEM_EDIT_PATH.format(project=quote(project), work_item_id=work_item_id)
    return f"{org_url.rstrip('/')}/{path}"


def work_item_web_url(work_item: dict[str, Any], org_url: str, project: str) -> str:
    """Return the HTML link of a created work item, synthesizing one if absent."""
    href = ((work_item.get("_links") or {}).get("html") or {}).get("href")
    if href:
        return str(href)
    return build_work_item_web_url(org_url, project, str(work_item["id"]))


class WorkItemService:
    """Create work items and write Markdown fields."""

    def __init__(self, az_cli: AzureCli | None = None):
        self.az_cli = az_cli or AzureCli()

    def create_work_item(
        self,
        title: str,
        work_item_type: str,
        organization: str,
        project: str,
        assigned_to: str | None = None,
        area: str | None = None,
        iteration: str | None = None,
    ) -> dict[str, Any]:
        """Create a work item without Markdown fields.

        Returns:
            Created work item JSON as returned by the Azure CLI
        """
        return self.az_cli.create_work_item(
            title=title,
            work_item_type=work_item_type,
            organization=organization,
            project=project,
            assigned_to=assigned_to,
            area=area,
            iteration=iteration,
        )

    def update_markdown_fields(
        self,
        work_item_id: str,
        org_url: str,
        description: str | None = None,
        acceptance_criteria: str | None = None,
        api_version: str = DEFAULT_API_VERSION,
    ) -> MarkdownUpdateResult | None:
        """Write Markdown description and/or acceptance criteria to a work item.

        Args:
            work_item_id: Work item identifier
            org_url: Resolved organization URL
            description: File path or inline Markdown for the description
            acceptance_criteria: File path or inline Markdown for acceptance criteria
            api_version: REST api-version query value

        Returns:
            Update result, or None when there was nothing to update

        Raises:
            AzCliError: If the access token cannot be obtained
            WorkItemUpdateError: If the request fails or returns a non-2xx status
        """
        operations, fields = build_patch_operations(description, acceptance_criteria)
        if not operations:
            return None

        logger.debug(f"Patching {[op.path for op in operations]} on work item {work_item_id}")
        token = self.az_cli.get_access_token(AZURE_DEVOPS_RESOURCE_ID)
        url = build_work_item_url(org_url, work_item_id, api_version)
        body = json.dumps([op.model_dump() for op in operations])

        logger.debug(f"PATCH {url}")
        try:
            response = httpx.patch(
                url,
                headers={
                    "Content-Type": JSON_PATCH_CONTENT_TYPE,
                    "Authorization": f"Bearer {token}",
                },
                content=body,
            )
        except httpx.HTTPError as exc:
            raise WorkItemUpdateError(
                work_item_id,
                body=ERROR_MESSAGES["work_item_request_failed"].format(url=url, details=exc),
            ) from exc

        if not response.is_success:
            raise WorkItemUpdateError(
                work_item_id,
                status_code=response.status_code,
                reason=response.reason_phrase,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise WorkItemUpdateError(
                work_item_id,
                message=ERROR_MESSAGES["work_item_invalid_response"].format(
                    work_item_id=work_item_id
                ),
            ) from exc

        return MarkdownUpdateResult(work_item_id=work_item_id, fields=fields, response=data)
