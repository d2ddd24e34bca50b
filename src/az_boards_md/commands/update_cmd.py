"""Update Markdown fields of an existing work item."""

from __future__ import annotations

from az_boards_md.config.messages import ERROR_MESSAGES, INFO_MESSAGES, SUCCESS_MESSAGES
from az_boards_md.constants import DEFAULT_API_VERSION, DETECT_ENABLED_VALUE
from az_boards_md.services.az_cli import AzureCli
from az_boards_md.services.errors import UsageError
from az_boards_md.services.organization import resolve_organization_url
from az_boards_md.services.work_item_service import WorkItemService
from az_boards_md.utils import print_info, print_json, print_success


def resolve_work_item_id(positional: str | None, option: str | None) -> str:
    """Pick the work item ID from the positional argument or ``--id``.

    The positional argument wins when both are given.

    Raises:
        UsageError: If neither is given (asks for command help)
    """
    work_item_id = positional or option
    if not work_item_id:
        raise UsageError(ERROR_MESSAGES["work_item_id_required"], show_help=True)
    return work_item_id


def update_command(
    work_item_id: str | None,
    id_option: str | None = None,
    description: str | None = None,
    acceptance_criteria: str | None = None,
    organization: str | None = None,
    detect: str | None = DETECT_ENABLED_VALUE,
    api_version: str = DEFAULT_API_VERSION,
    az_cli: AzureCli | None = None,
) -> None:
    """Write Markdown description and/or acceptance criteria to a work item.

    Raises:
        UsageError: If the ID or both Markdown fields are missing
        OrganizationRequiredError: If no organization URL can be resolved
        AzCliError: If token retrieval fails
        WorkItemUpdateError: If the PATCH fails
    """
    resolved_id = resolve_work_item_id(work_item_id, id_option)
    if not description and not acceptance_criteria:
        raise UsageError(ERROR_MESSAGES["markdown_field_required"])

    az_cli = az_cli or AzureCli()
    org_url = resolve_organization_url(organization, detect, az_cli)

    result = WorkItemService(az_cli).update_markdown_fields(
        resolved_id,
        org_url,
        description=description,
        acceptance_criteria=acceptance_criteria,
        api_version=api_version,
    )
    if result is None:
        raise UsageError(ERROR_MESSAGES["no_markdown_fields"])

    print_json(result.response)
    print_info("")
    print_success(SUCCESS_MESSAGES["work_item_updated"].format(work_item_id=resolved_id))
    print_info(INFO_MESSAGES["updated_fields"].format(fields=", ".join(result.field_labels)))
