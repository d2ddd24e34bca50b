"""Tests for the top-level CLI surface."""

import pytest
from typer.testing import CliRunner

from az_boards_md import __version__
from az_boards_md.cli import app, cli_main
from az_boards_md.constants import VERSION


def test_version_command(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert VERSION in result.output
    assert VERSION == __version__


def test_version_flag(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "az-boards-md" in result.output


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help_lists_commands(cli_runner: CliRunner, flag: str):
    result = cli_runner.invoke(app, [flag])

    assert result.exit_code == 0
    assert "create" in result.output
    assert "update" in result.output


@pytest.mark.parametrize("command", ["create", "update"])
def test_subcommand_help(cli_runner: CliRunner, command: str):
    """Subcommands accept -h as well as --help."""
    result = cli_runner.invoke(app, [command, "-h"])

    assert result.exit_code == 0
    assert "--acceptance-criteria" in result.output


def test_cli_main_exit_code_on_keyboard_interrupt(monkeypatch: pytest.MonkeyPatch):
    def interrupt():
        raise KeyboardInterrupt

    monkeypatch.setattr("az_boards_md.cli.app", interrupt)

    with pytest.raises(SystemExit) as exc_info:
        cli_main()
    assert exc_info.value.code == 130


def test_cli_main_reports_unexpected_errors(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
):
    def boom():
        raise RuntimeError("kaboom")

    monkeypatch.setattr("az_boards_md.cli.app", boom)
    monkeypatch.setattr("sys.argv", ["az-boards-md"])

    with pytest.raises(SystemExit) as exc_info:
        cli_main()
    assert exc_info.value.code == 1
    assert "An error occurred: kaboom" in capsys.readouterr().err


def test_cli_main_shows_traceback_with_verbose(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
):
    def boom():
        raise RuntimeError("kaboom")

    monkeypatch.setattr("az_boards_md.cli.app", boom)
    monkeypatch.setattr("sys.argv", ["az-boards-md", "--verbose", "update", "1"])

    with pytest.raises(SystemExit):
        cli_main()
    err = capsys.readouterr().err
    assert "Traceback" in err
    assert "RuntimeError: kaboom" in err
