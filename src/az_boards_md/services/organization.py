"""Organization URL resolution."""

from __future__ import annotations

import logging

from az_boards_md.constants import DETECT_ENABLED_VALUE
from az_boards_md.services.az_cli import AzureCli
from az_boards_md.services.errors import OrganizationRequiredError

logger = logging.getLogger(__name__)


def detection_enabled(detect: str | None) -> bool:
    """Whether the ``--detect`` value asks for organization auto-detection."""
    return (detect or "").strip().lower() == DETECT_ENABLED_VALUE


def resolve_organization_url(
    organization: str | None,
    detect: str | None,
    az_cli: AzureCli | None = None,
) -> str:
    """Resolve the organization URL for a command.

    Args:
        organization: Value of --organization/--org, if given
        detect: Value of --detect ("true" enables az configuration lookup)
        az_cli: Azure CLI wrapper used for detection

    Returns:
        Non-empty organization URL

    Raises:
        OrganizationRequiredError: If no explicit value was given and detection
            is disabled or found nothing
    """
    if organization:
        return organization

    if detection_enabled(detect):
        detected = (az_cli or AzureCli()).configured_organization()
        if detected:
            return detected
    else:
        logger.debug("Organization detection disabled")

    raise OrganizationRequiredError()
