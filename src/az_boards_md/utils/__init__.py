"""Utility functions for az-boards-md."""

from az_boards_md.utils.command_decorators import handle_errors
from az_boards_md.utils.console import (
    get_console,
    get_error_console,
    print_error,
    print_hint,
    print_info,
    print_json,
    print_panel,
    print_success,
    print_warning,
)
from az_boards_md.utils.logging_utils import configure_logging
from az_boards_md.utils.step_tracker import StepTracker

__all__ = [
    "StepTracker",
    "configure_logging",
    "get_console",
    "get_error_console",
    "handle_errors",
    "print_error",
    "print_hint",
    "print_info",
    "print_json",
    "print_panel",
    "print_success",
    "print_warning",
]
