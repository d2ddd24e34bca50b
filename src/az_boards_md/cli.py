"""Main CLI entry point for az-boards-md."""

import sys
from pathlib import Path

import typer
from dotenv import load_dotenv

from az_boards_md.commands.create_cmd import create_command
from az_boards_md.commands.update_cmd import update_command
from az_boards_md.config.messages import ERROR_MESSAGES, HELP_TEXT, PROJECT_TAGLINE, PROJECT_URL
from az_boards_md.config.settings import api_settings
from az_boards_md.constants import DETECT_ENABLED_VALUE, VERSION
from az_boards_md.utils import (
    configure_logging,
    get_console,
    get_error_console,
    handle_errors,
    print_error,
    print_panel,
)

# Load .env from the current directory so az subprocesses see it too
load_dotenv(Path.cwd() / ".env", verbose=False)

app = typer.Typer(
    name="az-boards-md",
    help=PROJECT_TAGLINE,
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = get_console()

ORGANIZATION_HELP = "Azure DevOps organization URL, e.g. https://dev.azure.com/myorg"
DESCRIPTION_HELP = "Path to markdown file for description or markdown string"
ACCEPTANCE_CRITERIA_HELP = "Path to markdown file for acceptance criteria or markdown string"
DETECT_HELP = "Automatically detect organization from az devops configuration"
API_VERSION_HELP = "Azure DevOps REST API version"


@app.command("create")
@handle_errors
def create(
    title: str | None = typer.Option(None, "--title", help="Work item title (required)"),
    work_item_type: str | None = typer.Option(
        None,
        "--type",
        help='Work item type (required, e.g. "User Story", "Task", "Bug")',
    ),
    organization: str | None = typer.Option(
        None, "--organization", "--org", help=ORGANIZATION_HELP
    ),
    project: str | None = typer.Option(
        None, "--project", help="Azure DevOps project name (required)"
    ),
    description: str | None = typer.Option(None, "--description", "-d", help=DESCRIPTION_HELP),
    acceptance_criteria: str | None = typer.Option(
        None, "--acceptance-criteria", help=ACCEPTANCE_CRITERIA_HELP
    ),
    assigned_to: str | None = typer.Option(
        None, "--assigned-to", help="Email of the person to assign the work item to"
    ),
    area: str | None = typer.Option(None, "--area", help="Area path"),
    iteration: str | None = typer.Option(None, "--iteration", help="Iteration path"),
    detect: str = typer.Option(DETECT_ENABLED_VALUE, "--detect", help=DETECT_HELP),
    api_version: str = typer.Option(api_settings.version, "--api-version", help=API_VERSION_HELP),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress detailed JSON output, only show ID and URL",
    ),
) -> None:
    """Create a work item with markdown-formatted fields.

    The work item is created with `az boards work-item create`, then its
    description and acceptance criteria are written as Markdown through the
    Azure DevOps REST API.
    """
    create_command(
        title=title,
        work_item_type=work_item_type,
        project=project,
        organization=organization,
        description=description,
        acceptance_criteria=acceptance_criteria,
        assigned_to=assigned_to,
        area=area,
        iteration=iteration,
        detect=detect,
        api_version=api_version,
        quiet=quiet,
    )


@app.command("update")
@handle_errors
def update(
    ctx: typer.Context,
    work_item_id: str | None = typer.Argument(None, help="The ID of the work item to update"),
    id_option: str | None = typer.Option(
        None, "--id", help="The ID of the work item to update"
    ),
    description: str | None = typer.Option(None, "--description", "-d", help=DESCRIPTION_HELP),
    acceptance_criteria: str | None = typer.Option(
        None, "--acceptance-criteria", help=ACCEPTANCE_CRITERIA_HELP
    ),
    organization: str | None = typer.Option(
        None, "--organization", "--org", help=ORGANIZATION_HELP
    ),
    detect: str = typer.Option(DETECT_ENABLED_VALUE, "--detect", help=DETECT_HELP),
    api_version: str = typer.Option(api_settings.version, "--api-version", help=API_VERSION_HELP),
) -> None:
    """Update a work item with markdown-formatted fields.

    Examples:
        az-boards-md update 42 --description ./desc.md
        az-boards-md update --id 42 --acceptance-criteria "- [ ] Works offline"
    """
    update_command(
        work_item_id=work_item_id,
        id_option=id_option,
        description=description,
        acceptance_criteria=acceptance_criteria,
        organization=organization,
        detect=detect,
        api_version=api_version,
    )


@app.command("version")
def version() -> None:
    """Show version information."""
    print_panel(
        f"[bold cyan]az-boards-md[/bold cyan] version [green]{VERSION}[/green]\n\n"
        f"{PROJECT_TAGLINE}\n\n"
        f"[dim]{PROJECT_URL}[/dim]",
        title="Version",
        style="cyan",
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version information",
        is_eager=True,
    ),
    help_flag: bool | None = typer.Option(
        None,
        "--help",
        "-h",
        help="Show this help message",
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log az invocations and API requests to stderr",
    ),
) -> None:
    """az-boards-md - Markdown fields for Azure Boards work items.

    Get started:
        az-boards-md create --title "..." --type Task --project Web -d ./desc.md
        az-boards-md update 42 --acceptance-criteria ./criteria.md
    """
    if verbose:
        configure_logging(verbose=True)

    if version_flag:
        version()
        raise typer.Exit()

    if help_flag or ctx.invoked_subcommand is None:
        console.print(HELP_TEXT)
        raise typer.Exit()


def cli_main() -> None:
    """Main entry point for the CLI.

    This is the function that gets called when running 'az-boards-md'.
    It handles exceptions and provides user-friendly error messages.
    """
    try:
        app()
    except KeyboardInterrupt:
        get_error_console().print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        if isinstance(e, typer.Exit):
            sys.exit(e.exit_code)

        print_error(ERROR_MESSAGES["generic_error"].format(error=str(e)))

        # Show traceback in verbose mode
        if "--verbose" in sys.argv:
            import traceback

            get_error_console().print("\n[dim]Traceback:[/dim]")
            traceback.print_exc()

        sys.exit(1)


if __name__ == "__main__":
    cli_main()
