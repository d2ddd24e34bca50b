"""Thin wrapper around the Azure CLI (``az``).

The wrapper covers the three things this tool needs from ``az``:
reading the configured default organization, creating a work item and
minting an Azure DevOps access token. Every call is a blocking
``subprocess.run`` with captured text output.
"""

from __future__ import annotations

import json
import logging
import re
import subprocess
from typing import Any

from az_boards_md.config.messages import ERROR_MESSAGES
from az_boards_md.config.settings import az_cli_settings
from az_boards_md.constants import AZ_CONFIG_ORGANIZATION_PATTERN, AZURE_DEVOPS_RESOURCE_ID
from az_boards_md.services.errors import AzCliError

logger = logging.getLogger(__name__)


class AzureCli:
    """Run Azure CLI commands and interpret their output."""

    def __init__(self, executable: str | None = None, timeout: float | None = None):
        self.executable = executable or az_cli_settings.executable
        self.timeout = timeout if timeout is not None else az_cli_settings.command_timeout_seconds

    def run(self, args: list[str]) -> str:
        """Run ``az`` with the given arguments and return stdout.

        Args:
            args: Arguments after the executable name

        Returns:
            Captured standard output

        Raises:
            AzCliError: If az is missing, exits non-zero or times out
        """
        command = [self.executable, *args]
        display = " ".join(command)
        logger.debug(f"Running: {display}")
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise AzCliError(
                ERROR_MESSAGES["az_not_found"].format(executable=self.executable)
            ) from exc
        except subprocess.CalledProcessError as exc:
            raise AzCliError(
                ERROR_MESSAGES["az_command_failed"].format(code=exc.returncode, command=display),
                stderr=exc.stderr,
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise AzCliError(
                ERROR_MESSAGES["az_command_timeout"].format(timeout=self.timeout, command=display)
            ) from exc
        return result.stdout

    def configured_organization(self) -> str | None:
        """Read the default organization from ``az devops configure --list``.

        Returns:
            Organization URL, or None if az is unavailable, fails or has no default
        """
        try:
            output = self.run(["devops", "configure", "--list"])
        except AzCliError as exc:
            logger.debug(f"Organization detection failed: {exc}")
            return None

        match = re.search(AZ_CONFIG_ORGANIZATION_PATTERN, output)
        if not match:
            logger.debug("No organization default in az devops configuration")
            return None
        logger.debug(f"Detected organization: {match.group(1)}")
        return match.group(1)

    def get_access_token(self, resource: str = AZURE_DEVOPS_RESOURCE_ID) -> str:
        """Mint a bearer token for the given resource.

        Raises:
            AzCliError: If the command fails or prints no token
        """
        output = self.run(
            [
                "account",
                "get-access-token",
                "--resource",
                resource,
                "--query",
                "accessToken",
                "-o",
                "tsv",
            ]
        )
        token = output.strip()
        if not token:
            raise AzCliError(ERROR_MESSAGES["az_empty_token"])
        return token

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
        """Create a work item with ``az boards work-item create``.

        Description is never passed here: the native command cannot mark it
        as Markdown, so it is written afterwards through the REST API.

        Returns:
            Parsed JSON of the created work item
        """
        args = [
            "boards",
            "work-item",
            "create",
            "--title",
            title,
            "--type",
            work_item_type,
            "--organization",
            organization,
            "--project",
            project,
            "--output",
            "json",
        ]
        if assigned_to:
            args.extend(["--assigned-to", assigned_to])
        if area:
            args.extend(["--area", area])
        if iteration:
            args.extend(["--iteration", iteration])

        output = self.run(args)
        try:
            data = json.loads(output)
        except json.JSONDecodeError as exc:
            raise AzCliError(
                ERROR_MESSAGES["az_invalid_json"].format(command="az boards work-item create")
            ) from exc
        if not isinstance(data, dict) or data.get("id") is None:
            raise AzCliError(ERROR_MESSAGES["create_missing_id"])
        return data
