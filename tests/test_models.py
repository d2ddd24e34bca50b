"""Tests for az-boards-md models and enums."""

import pytest
from pydantic import ValidationError

from az_boards_md.models import (
    ContentSource,
    MarkdownField,
    MarkdownUpdateResult,
    PatchOperation,
    ResolvedContent,
)


class TestMarkdownField:
    """Tests for MarkdownField."""

    def test_field_reference_names(self):
        assert [field.value for field in MarkdownField] == [
            "System.Description",
            "Microsoft.VSTS.Common.AcceptanceCriteria",
        ]

    def test_paths(self):
        field = MarkdownField.ACCEPTANCE_CRITERIA
        assert field.value_path == "/fields/Microsoft.VSTS.Common.AcceptanceCriteria"
        assert field.format_path == "/multilineFieldsFormat/Microsoft.VSTS.Common.AcceptanceCriteria"

    def test_labels(self):
        assert MarkdownField.DESCRIPTION.label == "Description"
        assert MarkdownField.ACCEPTANCE_CRITERIA.label == "Acceptance Criteria"


class TestPatchOperation:
    """Tests for PatchOperation."""

    def test_defaults_to_add(self):
        op = PatchOperation(path="/fields/System.Title", value="x")
        assert op.model_dump() == {"op": "add", "path": "/fields/System.Title", "value": "x"}

    def test_markdown_format(self):
        op = PatchOperation.markdown_format(MarkdownField.DESCRIPTION)
        assert op.path == "/multilineFieldsFormat/System.Description"
        assert op.value == "Markdown"

    def test_rejects_other_operations(self):
        with pytest.raises(ValidationError):
            PatchOperation(op="remove", path="/fields/System.Title", value="x")


def test_resolved_content_from_file():
    assert ResolvedContent(text="a", source=ContentSource.FILE).from_file
    assert not ResolvedContent(text="a", source=ContentSource.UNREADABLE, error="denied").from_file


def test_update_result_labels_follow_field_order():
    result = MarkdownUpdateResult(
        work_item_id="1",
        fields=[MarkdownField.ACCEPTANCE_CRITERIA, MarkdownField.DESCRIPTION],
    )
    assert result.field_labels == ["Acceptance Criteria", "Description"]
