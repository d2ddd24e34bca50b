"""Console output helpers built on rich.

Regular output goes to stdout, errors and warnings to stderr. Both consoles
use soft wrapping so long values (URLs, JSON, file paths) are never broken
across lines. Dynamic text is escaped so square brackets in user content are
not read as rich markup.
"""

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from az_boards_md.constants import JSON_INDENT

_console = Console(soft_wrap=True, highlight=False, emoji=False)
_error_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


def get_console() -> Console:
    """Return the shared stdout console."""
    return _console


def get_error_console() -> Console:
    """Return the shared stderr console."""
    return _error_console


def print_error(message: str) -> None:
    """Print an error line to stderr, prefixed with ``Error:``."""
    _error_console.print(f"Error: {escape(message)}", style="red")


def print_hint(message: str) -> None:
    """Print a follow-up line for an error to stderr."""
    _error_console.print(escape(message), style="dim")


def print_warning(message: str) -> None:
    """Print a warning line to stderr."""
    _error_console.print(f"⚠ {escape(message)}", style="yellow")


def print_info(message: str) -> None:
    """Print an informational line."""
    _console.print(escape(message))


def print_success(message: str) -> None:
    """Print a success line."""
    _console.print(f"✅ {escape(message)}", style="green")


def print_json(data: Any) -> None:
    """Print data as indented JSON."""
    _console.print_json(data=data, indent=JSON_INDENT, highlight=False)


def print_panel(content: str, title: str | None = None, style: str = "cyan") -> None:
    """Print content inside a bordered panel.

    Args:
        content: Panel body (rich markup allowed)
        title: Optional panel title
        style: Border style
    """
    _console.print(Panel(content, title=title, border_style=style, expand=False))
