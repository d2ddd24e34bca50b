"""Enum types for az-boards-md.

This module provides type-safe enumerations for the Markdown-capable work
item fields and for the outcome of resolving content arguments.
"""

from enum import Enum

from az_boards_md.constants import (
    ACCEPTANCE_CRITERIA_FIELD,
    DESCRIPTION_FIELD,
    FIELD_FORMAT_PATH,
    FIELD_VALUE_PATH,
)


class MarkdownField(str, Enum):
    """Work item fields whose rendering format can be set to Markdown."""

    DESCRIPTION = DESCRIPTION_FIELD
    ACCEPTANCE_CRITERIA = ACCEPTANCE_CRITERIA_FIELD

    @property
    def label(self) -> str:
        """Human readable field name."""
        labels = {
            DESCRIPTION_FIELD: "Description",
            ACCEPTANCE_CRITERIA_FIELD: "Acceptance Criteria",
        }
        return labels[self.value]

    @property
    def value_path(self) -> str:
        """JSON Patch path of the field content."""
        return FIELD_VALUE_PATH.format(field=self.value)

    @property
    def format_path(self) -> str:
        """JSON Patch path of the field's format metadata."""
        return FIELD_FORMAT_PATH.format(field=self.value)


class ContentSource(str, Enum):
    """Where resolved Markdown content came from."""

    FILE = "file"  # Path existed and was read
    INLINE = "inline"  # Not a file, used verbatim
    UNREADABLE = "unreadable"  # Filesystem error, used verbatim
