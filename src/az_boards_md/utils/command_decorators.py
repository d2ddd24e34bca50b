"""Command decorators for DRY pattern enforcement.

Commands and services raise typed errors instead of exiting. The decorator
here is the one place that turns those errors into console output and an
exit code, so every command reports failures the same way.
"""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

import typer

from az_boards_md.services.errors import AzBoardsError, UsageError
from az_boards_md.utils.console import get_error_console, print_error, print_hint

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(func: F) -> F:
    """Decorator that reports az-boards-md errors and exits with their code.

    The error message is printed with an ``Error:`` prefix, followed by any
    detail lines. Usage errors that ask for help print the command help when
    the command receives a ``ctx: typer.Context`` argument.

    Raises:
        typer.Exit: With the error's exit code (1) on any AzBoardsError

    Example:
        @app.command("update")
        @handle_errors
        def update(ctx: typer.Context, ...) -> None:
            ...
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except AzBoardsError as exc:
            logger.debug(f"{type(exc).__name__}: {exc.message}")
            print_error(exc.message)
            for line in exc.details:
                print_hint(line)
            ctx = kwargs.get("ctx")
            if isinstance(exc, UsageError) and exc.show_help and isinstance(ctx, typer.Context):
                # Rich-formatted help is printed by typer itself and returns empty text
                help_text = ctx.get_help()
                if help_text:
                    get_error_console().print(help_text, markup=False, highlight=False)
            raise typer.Exit(code=exc.exit_code) from exc

    return wrapper  # type: ignore[return-value]
