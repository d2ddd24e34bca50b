"""CLI commands for az-boards-md."""

from az_boards_md.commands.create_cmd import create_command
from az_boards_md.commands.update_cmd import resolve_work_item_id, update_command

__all__ = [
    "create_command",
    "resolve_work_item_id",
    "update_command",
]
