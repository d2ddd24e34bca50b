"""Work item models for Markdown field updates."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from az_boards_md.constants import MARKDOWN_FORMAT, PATCH_OP_ADD
from az_boards_md.models.enums import ContentSource, MarkdownField


class PatchOperation(BaseModel):
    """A single JSON Patch directive in a work item PATCH body."""

    op: Literal["add"] = Field(default=PATCH_OP_ADD, description="Patch operation")
    path: str = Field(..., description="Field path the operation targets")
    value: str = Field(..., description="Value written to the path")

    @classmethod
    def field_value(cls, field: MarkdownField, content: str) -> "PatchOperation":
        """Operation setting a field's content."""
        return cls(path=field.value_path, value=content)

    @classmethod
    def markdown_format(cls, field: MarkdownField) -> "PatchOperation":
        """Operation switching a field's format to Markdown."""
        return cls(path=field.format_path, value=MARKDOWN_FORMAT)


class ResolvedContent(BaseModel):
    """Result of turning a content argument into Markdown text.

    The source records which branch produced the text so callers and tests
    can tell a file read apart from an inline string or an ignored error.
    """

    text: str
    source: ContentSource
    error: str | None = Field(
        default=None, description="Filesystem error that was treated as 'not a file'"
    )

    @property
    def from_file(self) -> bool:
        """Whether the text was read from a file."""
        return self.source == ContentSource.FILE


class MarkdownUpdateResult(BaseModel):
    """Outcome of a successful Markdown field PATCH."""

    work_item_id: str
    fields: list[MarkdownField] = Field(default_factory=list)
    response: Any = Field(default=None, description="Parsed JSON response body")

    @property
    def field_labels(self) -> list[str]:
        """Labels of the updated fields, in patch order."""
        return [field.label for field in self.fields]
