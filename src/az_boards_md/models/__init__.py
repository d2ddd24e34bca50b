"""Data models for az-boards-md"""

from .enums import ContentSource, MarkdownField
from .work_item import MarkdownUpdateResult, PatchOperation, ResolvedContent

__all__ = [
    "ContentSource",
    "MarkdownField",
    "MarkdownUpdateResult",
    "PatchOperation",
    "ResolvedContent",
]
