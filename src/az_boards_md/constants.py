"""Constants for az-boards-md.

This module contains:
- VERSION: Package version
- Azure DevOps REST API values (resource ID, URL marker, content types)
- Work item field reference names used for Markdown updates
- Output formatting defaults

For messages and runtime settings, import from:
- az_boards_md.config.messages
- az_boards_md.config.settings
"""

from az_boards_md import __version__

# =============================================================================
# Version
# =============================================================================

VERSION = __version__

# =============================================================================
# Azure DevOps REST API
# =============================================================================

# Well-known application ID of Azure DevOps, used as the token audience
AZURE_DEVOPS_RESOURCE_ID = "499b84ac-1321-427f-aa17-267ca6975798"

DEFAULT_API_VERSION = "7.1"

# Path segment that marks an organization URL as an API base
API_PATH_MARKER = "/_apis/"

WORK_ITEM_API_PATH = "wit/workitems/{work_item_id}?api-version={api_version}"
WORK_ITEM_EDIT_PATH = "{project}/_workitems/edit/{work_item_id}"

JSON_PATCH_CONTENT_TYPE = "application/json-patch+json"

# =============================================================================
# Work Item Fields
# =============================================================================

DESCRIPTION_FIELD = "System.Description"
ACCEPTANCE_CRITERIA_FIELD = "Microsoft.VSTS.Common.AcceptanceCriteria"

FIELD_VALUE_PATH = "/fields/{field}"
FIELD_FORMAT_PATH = "/multilineFieldsFormat/{field}"
MARKDOWN_FORMAT = "Markdown"

PATCH_OP_ADD = "add"

# =============================================================================
# Azure CLI
# =============================================================================

AZ_DEFAULT_EXECUTABLE = "az"

# Matches `organization = https://dev.azure.com/acme` in `az devops configure --list`
AZ_CONFIG_ORGANIZATION_PATTERN = r"organization\s*=\s*(\S+)"

DETECT_ENABLED_VALUE = "true"

# =============================================================================
# Output
# =============================================================================

JSON_INDENT = 2
