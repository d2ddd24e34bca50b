"""Resolve content arguments to Markdown text.

A content argument is either a path to a Markdown file or the Markdown
itself. Arguments such as ``"# Title"`` or very long inline text can make
filesystem checks raise; those errors mean "not a file" and never fail the
command.
"""

from __future__ import annotations

import logging
from pathlib import Path

from az_boards_md.models.enums import ContentSource
from az_boards_md.models.work_item import ResolvedContent

logger = logging.getLogger(__name__)


def read_markdown_file(value: str) -> ResolvedContent | None:
    """Try to read ``value`` as a path to a text file.

    Args:
        value: Candidate file path

    Returns:
        FILE result if the file was read, UNREADABLE result if a filesystem
        error occurred, or None if no such file exists
    """
    path = Path(value)
    try:
        if not path.is_file():
            return None
        data = path.read_bytes()
    except (OSError, ValueError) as exc:
        # ValueError covers embedded NUL bytes
        logger.debug(f"Treating content argument as inline text: {exc}")
        return ResolvedContent(text=value, source=ContentSource.UNREADABLE, error=str(exc))

    # Bytes are decoded as-is: line endings are kept and invalid UTF-8 is replaced
    text = data.decode("utf-8", errors="replace")
    logger.debug(f"Read markdown content from {path}")
    return ResolvedContent(text=text, source=ContentSource.FILE)


def resolve_content(value: str) -> ResolvedContent:
    """Return the Markdown for a content argument.

    Args:
        value: File path or inline Markdown

    Returns:
        File contents when ``value`` names an existing file, else ``value`` itself
    """
    if not value:
        return ResolvedContent(text="", source=ContentSource.INLINE)

    from_file = read_markdown_file(value)
    if from_file is not None:
        return from_file
    return ResolvedContent(text=value, source=ContentSource.INLINE)
