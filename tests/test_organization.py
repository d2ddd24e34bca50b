"""Tests for organization URL resolution."""

from __future__ import annotations

import subprocess

import pytest
from conftest import ORG_URL, FakeAz

from az_boards_md.services.az_cli import AzureCli
from az_boards_md.services.errors import OrganizationRequiredError
from az_boards_md.services.organization import detection_enabled, resolve_organization_url

CONFIGURE_OUTPUT = """
[defaults]
organization = https://dev.azure.com/detected
project = Web
"""


def test_explicit_organization_wins(fake_az: FakeAz) -> None:
    """An explicit URL is used without consulting az."""
    fake_az.on("devops", "configure", stdout=CONFIGURE_OUTPUT)

    assert resolve_organization_url(ORG_URL, "true", AzureCli()) == ORG_URL
    assert fake_az.commands("devops") == []


def test_detects_organization_from_az_configuration(fake_az: FakeAz) -> None:
    """With detection on, the configured default organization is used."""
    fake_az.on("devops", "configure", "--list", stdout=CONFIGURE_OUTPUT)

    assert resolve_organization_url(None, "true", AzureCli()) == "https://dev.azure.com/detected"
    assert fake_az.commands("devops", "configure", "--list")


def test_detection_disabled_raises(fake_az: FakeAz) -> None:
    """Without an explicit URL and with detection off, resolution fails."""
    with pytest.raises(OrganizationRequiredError) as exc_info:
        resolve_organization_url(None, "false", AzureCli())

    assert "Organization URL is required" in exc_info.value.message
    assert exc_info.value.details == ["Example: --organization https://dev.azure.com/myorg"]
    assert fake_az.calls == []


def test_detection_without_configured_default_raises(fake_az: FakeAz) -> None:
    """Output without an organization line is treated as no match."""
    fake_az.on("devops", "configure", stdout="[defaults]\nproject = Web\n")

    with pytest.raises(OrganizationRequiredError):
        resolve_organization_url(None, "true", AzureCli())


def test_detection_command_failure_is_ignored(fake_az: FakeAz) -> None:
    """A failing az command falls through to the missing-organization error."""
    fake_az.on("devops", "configure", returncode=2, stderr="extension not installed")

    with pytest.raises(OrganizationRequiredError):
        resolve_organization_url(None, "true", AzureCli())


def test_missing_az_binary_is_ignored(fake_az: FakeAz) -> None:
    """A missing az executable during detection is not a crash."""
    fake_az.raise_on("devops", exc=FileNotFoundError("az"))

    assert AzureCli().configured_organization() is None


def test_detection_timeout_is_ignored(fake_az: FakeAz) -> None:
    """A hung az command during detection is not a crash."""
    fake_az.raise_on("devops", exc=subprocess.TimeoutExpired(["az"], 1))

    assert AzureCli(timeout=1).configured_organization() is None


@pytest.mark.parametrize(
    "value,expected",
    [("true", True), ("TRUE", True), (" true ", True), ("false", False), ("", False), (None, False)],
)
def test_detection_enabled(value: str | None, expected: bool) -> None:
    """Only the value "true" enables detection."""
    assert detection_enabled(value) is expected
