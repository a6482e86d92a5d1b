"""
Chunking module for splitting content at separator markers.

Splitting is literal and lossless: joining the chunks with the separator
rebuilds the (tag-repaired) content.
"""

from .splitter import repair_closing_tags, split_content
from .utils import analyze_chunks, preview_chunks, validate_chunks


__all__ = [
    # Core splitting functions
    "split_content",
    "repair_closing_tags",
    # Utility functions
    "validate_chunks",
    "analyze_chunks",
    "preview_chunks",
]
