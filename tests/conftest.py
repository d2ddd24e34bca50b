"""Pytest configuration and fixtures for az-boards-md tests."""

from __future__ import annotations

import subprocess
from collections.abc import Iterator
from typing import Any

import httpx
import pytest
from typer.testing import CliRunner

ORG_URL = "https://dev.azure.com/acme"
TOKEN = "test-token"


class DummyResponse:
    """Mock httpx response for testing."""

    def __init__(
        self,
        data: Any = None,
        status_code: int = 200,
        text: str | None = None,
        reason_phrase: str = "OK",
    ):
        self.data = data
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.text = text if text is not None else ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        if self.data is None:
            raise ValueError("No JSON body")
        return self.data


class FakeAz:
    """Stand-in for ``subprocess.run`` that answers az commands by prefix."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.kwargs: list[dict[str, Any]] = []
        self._outcomes: list[tuple[tuple[str, ...], Any]] = []

    def on(self, *prefix: str, stdout: str = "", returncode: int = 0, stderr: str = "") -> None:
        """Answer commands starting with ``prefix`` (after ``az``)."""
        self._outcomes.append((prefix, (stdout, returncode, stderr)))

    def raise_on(self, *prefix: str, exc: BaseException) -> None:
        """Raise ``exc`` for commands starting with ``prefix``."""
        self._outcomes.append((prefix, exc))

    def commands(self, *prefix: str) -> list[list[str]]:
        """Recorded commands starting with ``prefix``."""
        return [call for call in self.calls if tuple(call[1 : len(prefix) + 1]) == prefix]

    def __call__(self, command: list[str], **kwargs: Any) -> subprocess.CompletedProcess:
        self.calls.append(list(command))
        self.kwargs.append(kwargs)
        args = tuple(command[1:])
        # Later registrations override earlier ones
        for prefix, outcome in reversed(self._outcomes):
            if args[: len(prefix)] != prefix:
                continue
            if isinstance(outcome, BaseException):
                raise outcome
            stdout, returncode, stderr = outcome
            if returncode != 0 and kwargs.get("check"):
                raise subprocess.CalledProcessError(
                    returncode, command, output=stdout, stderr=stderr
                )
            return subprocess.CompletedProcess(command, returncode, stdout, stderr)
        raise AssertionError(f"Unexpected az command: {command}")


class FakePatch:
    """Stand-in for ``httpx.patch`` that records requests."""

    def __init__(self, response: DummyResponse | None = None) -> None:
        self.response = response or DummyResponse({"id": 42, "rev": 2})
        self.error: httpx.HTTPError | None = None
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def __call__(self, url: str, **kwargs: Any) -> DummyResponse:
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_az(monkeypatch: pytest.MonkeyPatch) -> FakeAz:
    """Patch subprocess.run used by the Azure CLI wrapper.

    The token command is answered by default; tests add other commands.
    """
    fake = FakeAz()
    fake.on("account", "get-access-token", stdout=f"{TOKEN}\n")
    monkeypatch.setattr("az_boards_md.services.az_cli.subprocess.run", fake)
    return fake


@pytest.fixture
def fake_patch(monkeypatch: pytest.MonkeyPatch) -> FakePatch:
    """Patch httpx.patch used by the work item service."""
    fake = FakePatch()
    monkeypatch.setattr("az_boards_md.services.work_item_service.httpx.patch", fake)
    return fake


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI runner."""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path: Any, monkeypatch: pytest.MonkeyPatch) -> Iterator[Any]:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    yield tmp_path
