"""Create a work item and set its Markdown fields."""

from __future__ import annotations

from az_boards_md.config.messages import (
    ERROR_MESSAGES,
    INFO_MESSAGES,
    SUCCESS_MESSAGES,
    WARNING_MESSAGES,
)
from az_boards_md.constants import DEFAULT_API_VERSION, DETECT_ENABLED_VALUE
from az_boards_md.services.az_cli import AzureCli
from az_boards_md.services.errors import AzBoardsError, UsageError
from az_boards_md.services.organization import resolve_organization_url
from az_boards_md.services.work_item_service import WorkItemService, work_item_web_url
from az_boards_md.utils import StepTracker, print_info, print_json, print_warning


def _require(value: str | None, option: str) -> str:
    if not value:
        raise UsageError(ERROR_MESSAGES["option_required"].format(option=option))
    return value


def create_command(
    title: str | None,
    work_item_type: str | None,
    project: str | None,
    organization: str | None = None,
    description: str | None = None,
    acceptance_criteria: str | None = None,
    assigned_to: str | None = None,
    area: str | None = None,
    iteration: str | None = None,
    detect: str | None = DETECT_ENABLED_VALUE,
    api_version: str = DEFAULT_API_VERSION,
    quiet: bool = False,
    az_cli: AzureCli | None = None,
) -> None:
    """Create a work item, then write Markdown description/acceptance criteria.

    The work item is created with ``az boards work-item create`` without a
    description. Markdown fields are written afterwards through the REST API.
    If that second step fails the work item still exists; the failure is
    reported with its ID and URL and re-raised.

    Raises:
        UsageError: If title, type or project is missing
        OrganizationRequiredError: If no organization URL can be resolved
        AzCliError: If work item creation or token retrieval fails
        WorkItemUpdateError: If the Markdown PATCH fails
    """
    title = _require(title, "--title")
    work_item_type = _require(work_item_type, "--type")
    project = _require(project, "--project")

    az_cli = az_cli or AzureCli()
    org_url = resolve_organization_url(organization, detect, az_cli)
    service = WorkItemService(az_cli)

    has_markdown = bool(description or acceptance_criteria)
    tracker = StepTracker(2 if has_markdown else 1)

    tracker.start_step(INFO_MESSAGES["creating_work_item"].format(title=title))
    try:
        work_item = service.create_work_item(
            title=title,
            work_item_type=work_item_type,
            organization=org_url,
            project=project,
            assigned_to=assigned_to,
            area=area,
            iteration=iteration,
        )
    except AzBoardsError as exc:
        tracker.fail_step("Failed to create work item", exc.message)
        raise
    work_item_id = str(work_item["id"])
    url = work_item_web_url(work_item, org_url, project)
    tracker.complete_step(SUCCESS_MESSAGES["work_item_created"].format(work_item_id=work_item_id))

    if has_markdown:
        tracker.start_step(INFO_MESSAGES["updating_markdown"].format(work_item_id=work_item_id))
        try:
            result = service.update_markdown_fields(
                work_item_id,
                org_url,
                description=description,
                acceptance_criteria=acceptance_criteria,
                api_version=api_version,
            )
        except AzBoardsError as exc:
            tracker.fail_step("Failed to update markdown fields", exc.message)
            print_warning(
                WARNING_MESSAGES["created_without_markdown"].format(
                    work_item_id=work_item_id, url=url
                )
            )
            raise
        if result is not None:
            tracker.complete_step(
                SUCCESS_MESSAGES["markdown_fields_updated"].format(
                    fields=", ".join(result.field_labels)
                )
            )

    if not quiet:
        print_info("\n" + INFO_MESSAGES["work_item_details"])
        print_json(work_item)

    print_info("\n" + INFO_MESSAGES["work_item_url"].format(url=url))
    print_info(INFO_MESSAGES["work_item_id"].format(work_item_id=work_item_id))
