"""UI messages and strings for az-boards-md.

This module consolidates all user-facing messages including:
- Success/error/info/warning messages
- Help text
"""

# =============================================================================
# Project Metadata
# =============================================================================

PROJECT_TAGLINE = "Create and update Azure Boards work items with Markdown fields"
PROJECT_URL = "https://learn.microsoft.com/azure/devops/boards/work-items/"

# =============================================================================
# Help
# =============================================================================

HELP_TEXT = f"""
[bold cyan]az-boards-md[/bold cyan] - {PROJECT_TAGLINE}

[bold]Commands:[/bold]
  [cyan]create[/cyan]      Create a work item, then set Markdown fields
  [cyan]update[/cyan]      Set Markdown fields on an existing work item
  [cyan]version[/cyan]     Show version information

[bold]Examples:[/bold]
  [dim]# Create a user story with a Markdown description from a file[/dim]
  [dim]$ az-boards-md create --title "Login page" --type "User Story" --project Web -d ./story.md[/dim]

  [dim]# Update acceptance criteria inline[/dim]
  [dim]$ az-boards-md update 42 --acceptance-criteria "- [ ] Works offline"[/dim]

[bold]Requirements:[/bold]
  The Azure CLI must be installed and logged in ([cyan]az login[/cyan]).
  The organization is read from [cyan]az devops configure[/cyan] unless
  [cyan]--organization[/cyan] is given.

For more information, visit: {PROJECT_URL}
"""

# =============================================================================
# Success Messages
# =============================================================================

SUCCESS_MESSAGES = {
    "work_item_created": "Created work item {work_item_id}",
    "markdown_fields_updated": "Updated markdown fields: {fields}",
    "work_item_updated": "Successfully updated work item {work_item_id} with markdown formatting",
}

# =============================================================================
# Error Messages
# =============================================================================

ERROR_MESSAGES = {
    "generic_error": "An error occurred: {error}",
    "option_required": "{option} is required",
    "work_item_id_required": "Work item ID is required",
    "markdown_field_required": (
        "At least one field (--description or --acceptance-criteria) must be provided"
    ),
    "no_markdown_fields": "No markdown fields to update",
    "organization_required": (
        "Organization URL is required. Set with --organization parameter."
    ),
    "organization_example": "Example: --organization https://dev.azure.com/myorg",
    "az_not_found": "Azure CLI executable not found: {executable}. Install it from https://aka.ms/azcli",
    "az_command_failed": "Azure CLI command failed (exit code {code}): {command}",
    "az_command_timeout": "Azure CLI command timed out after {timeout}s: {command}",
    "az_invalid_json": "Azure CLI returned invalid JSON for: {command}",
    "az_empty_token": "Azure CLI returned an empty access token. Run 'az login' first.",
    "work_item_update_failed": "Failed to update work item {work_item_id} with markdown fields",
    "work_item_request_failed": "Request to {url} failed: {details}",
    "work_item_invalid_response": "Work item {work_item_id} update returned a non-JSON response",
    "create_missing_id": "Work item creation output did not include an id",
}

# =============================================================================
# Info Messages
# =============================================================================

INFO_MESSAGES = {
    "creating_work_item": "Creating work item: {title}",
    "updating_markdown": "Updating work item {work_item_id} with markdown fields",
    "updated_fields": "Updated fields: {fields}",
    "work_item_details": "Work Item Details:",
    "work_item_url": "🔗 Work Item URL: {url}",
    "work_item_id": "📋 Work Item ID: {work_item_id}",
}

# =============================================================================
# Warning Messages
# =============================================================================

WARNING_MESSAGES = {
    "created_without_markdown": (
        "Work item {work_item_id} was created but its markdown fields were not set: {url}"
    ),
}

# =============================================================================
# Status Lines
# =============================================================================

STATUS_LINE = "Status: {status_code} {reason}"
DETAILS_LINE = "Details: {details}"
