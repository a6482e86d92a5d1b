"""
Per-document chunk state and the accessors templates read chunks through.

A document is split once, when it is prepared for rendering, and then read
either by explicit 1-based index or sequentially through a cursor:

    attach_chunks(document)
    while have_chunks(document):
        the_chunk(document)

All state lives on the ``Document`` instance; concurrent renders of different
documents never share a cursor.
"""

import sys
from dataclasses import dataclass, field
from typing import Any, TextIO

from .chunk import split_content
from .exceptions import ChunkingError, InvalidArgumentError, OutOfRangeError
from .hooks import SeparatorResolver, TransformPipeline, resolve_separator, resolve_transform
from .logging_config import get_logger


logger = get_logger(__name__)


@dataclass
class ChunkState:
    """Chunks of one document and the cursor of the next chunk to read."""

    chunks: tuple[str, ...]
    separator: str
    cursor: int = 1

    def __post_init__(self):
        self.chunks = tuple(self.chunks)
        if not self.chunks:
            raise ChunkingError("chunk state requires at least one chunk")

    def __len__(self) -> int:
        return len(self.chunks)

    @property
    def remaining(self) -> int:
        return len(self.chunks) - self.cursor + 1

    def has_more(self) -> bool:
        return self.cursor <= len(self.chunks)

    def get(self, index: int | None = None) -> str:
        """
        Return the raw chunk at a 1-based index.

        Without an index the chunk under the cursor is returned and the cursor
        moves forward by one. A failed read leaves the cursor where it was.

        Raises:
            InvalidArgumentError: If the index is not an integer
            OutOfRangeError: If the index is outside [1, number of chunks]
        """
        advance = index is None
        if advance:
            index = self.cursor

        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidArgumentError(f"chunk index must be an integer, got {type(index).__name__}")

        if not 1 <= index <= len(self.chunks):
            raise OutOfRangeError(
                f"chunk {index} out of range; document has {len(self.chunks)} chunk(s)"
            )

        if advance:
            self.cursor += 1
        return self.chunks[index - 1]


@dataclass
class Document:
    """A content item prepared for one render pass."""

    content: str
    doc_id: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    chunk_state: ChunkState | None = None


def attach_chunks(
    document: Any,
    separator: str | None = None,
    resolver: SeparatorResolver | None = None,
) -> ChunkState | None:
    """
    Split a document and store its chunks, once.

    Calling this again on a document that already has chunks changes nothing,
    so a render pipeline can invoke it as often as it likes.

    Args:
        document: Document to prepare; any other value is ignored
        separator: Base separator, defaults to the configured one
        resolver: Optional per-document separator override

    Returns:
        The document's chunk state, or None if ``document`` is not a Document

    Raises:
        InvalidArgumentError: If the resolved separator is empty
    """
    if not isinstance(document, Document):
        logger.debug(f"Skipping chunk attach for non-document {type(document).__name__}")
        return None

    if document.chunk_state is not None:
        return document.chunk_state

    sep = resolve_separator(document, separator, resolver)
    chunks = split_content(document.content, sep)

    document.chunk_state = ChunkState(chunks=tuple(chunks), separator=sep)
    logger.debug(f"Attached {len(chunks)} chunks to document {document.doc_id!r}")
    return document.chunk_state


def _state(document: Document) -> ChunkState:
    state = getattr(document, "chunk_state", None)
    if state is None:
        raise ChunkingError(
            f"Document {getattr(document, 'doc_id', None)!r} has no chunks; call attach_chunks first"
        )
    return state


def get_chunk(
    document: Document,
    index: int | None = None,
    transform: str | None = None,
    pipeline: TransformPipeline | None = None,
) -> str:
    """
    Return a chunk of the document, optionally transformed.

    Args:
        document: Document with attached chunks
        index: 1-based chunk number; omit to read the chunk under the cursor
            and advance it
        transform: Name of the transform to run the chunk through; None uses
            the configured transform, an empty string returns the raw chunk
        pipeline: Transform pipeline to use; defaults to an empty (identity)
            pipeline

    Returns:
        The chunk text

    Raises:
        ChunkingError: If no chunks were attached to the document
        OutOfRangeError: If the index is outside [1, number of chunks]
    """
    chunk = _state(document).get(index)
    transform = resolve_transform(transform)

    if transform:
        if pipeline is None:
            pipeline = TransformPipeline()
        chunk = pipeline(transform, chunk)

    return chunk


def the_chunk(
    document: Document,
    index: int | None = None,
    pipeline: TransformPipeline | None = None,
    out: TextIO | None = None,
    transform: str | None = None,
) -> None:
    """Write a chunk, run through the configured transform, to ``out`` (stdout)."""
    out = out if out is not None else sys.stdout
    out.write(get_chunk(document, index, transform, pipeline))


def have_chunks(document: Document) -> bool:
    """Whether the cursor still points at a chunk."""
    return _state(document).has_more()


def render_chunks(
    document: Document,
    pipeline: TransformPipeline | None = None,
    out: TextIO | None = None,
    end: str = "",
    transform: str | None = None,
) -> int:
    """
    Emit every chunk left under the cursor, in order, each followed by ``end``.

    Returns:
        Number of chunks written
    """
    out = out if out is not None else sys.stdout
    count = 0
    while have_chunks(document):
        the_chunk(document, pipeline=pipeline, out=out, transform=transform)
        if end:
            out.write(end)
        count += 1
    return count
