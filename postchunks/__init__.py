"""
postchunks: split content at separator markers and read the chunks back in
template order.
"""

from .chunk import split_content
from .document import (
    ChunkState,
    Document,
    attach_chunks,
    get_chunk,
    have_chunks,
    render_chunks,
    the_chunk,
)
from .exceptions import (
    ChunkingError,
    InvalidArgumentError,
    OutOfRangeError,
    PostChunksError,
)
from .hooks import FilterRegistry, TransformPipeline


__all__ = [
    "split_content",
    "Document",
    "ChunkState",
    "attach_chunks",
    "get_chunk",
    "the_chunk",
    "have_chunks",
    "render_chunks",
    "FilterRegistry",
    "TransformPipeline",
    "PostChunksError",
    "ChunkingError",
    "InvalidArgumentError",
    "OutOfRangeError",
]
