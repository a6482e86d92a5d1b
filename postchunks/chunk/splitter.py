"""
Separator-based splitting of document content into chunks.

Content is split on every literal occurrence of the separator. Closing tags
that directly follow a separator are first moved in front of it, so a marker
placed just before ``</p>`` splits after the paragraph closes instead of
leaving it open in the earlier chunk.
"""

import re

from ..exceptions import InvalidArgumentError
from ..logging_config import get_logger


logger = get_logger(__name__)

# One or more closing tags, each optionally surrounded by whitespace.
# ASCII-only \s and \w: non-breaking spaces and non-ASCII tag names stay put.
_CLOSING_TAGS = r"((?:\s*</\w+>\s*)+)"


def _check_arguments(content: str, separator: str) -> None:
    if not isinstance(content, str):
        raise InvalidArgumentError(f"content must be a string, got {type(content).__name__}")

    if not isinstance(separator, str):
        raise InvalidArgumentError(
            f"separator must be a string, got {type(separator).__name__}"
        )

    if len(separator) == 0:
        raise InvalidArgumentError("separator cannot be empty")


def repair_closing_tags(content: str, separator: str) -> str:
    """
    Move runs of closing tags that follow a separator to just before it.

    Only ASCII whitespace and closing tags with ASCII names immediately after
    the separator are relocated; nested or malformed markup is left as-is.

    Args:
        content: Raw document content
        separator: Literal separator string

    Returns:
        Content with every ``<sep></tag>`` run rewritten as ``</tag><sep>``

    Raises:
        InvalidArgumentError: If either argument is not a string or the
            separator is empty
    """
    _check_arguments(content, separator)

    pattern = "(" + re.escape(separator) + ")" + _CLOSING_TAGS
    return re.sub(pattern, r"\2\1", content, flags=re.ASCII)


def split_content(content: str, separator: str) -> list[str]:
    """
    Split content into chunks at every occurrence of the separator.

    Args:
        content: Raw document content (may be empty)
        separator: Literal separator string, treated as text, not a pattern

    Returns:
        Ordered list of chunks, never empty. Content without the separator
        comes back as a single chunk; a separator at either edge yields an
        empty leading or trailing chunk.

    Raises:
        InvalidArgumentError: If the separator is empty or an argument is not
            a string
    """
    repaired = repair_closing_tags(content, separator)
    chunks = repaired.split(separator)

    logger.debug(f"Split {len(content)} chars into {len(chunks)} chunks on {separator!r}")
    return chunks
