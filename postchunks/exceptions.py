"""
Custom exceptions for the postchunks package.

These exceptions provide more specific error handling and better debugging
information than generic Python exceptions.
"""


class PostChunksError(Exception):
    """Base exception for all postchunks package errors."""
    pass


class ChunkingError(PostChunksError):
    """Chunking-related errors (splitting failures, reading unattached documents)."""
    pass


class InvalidArgumentError(ChunkingError, ValueError):
    """Invalid argument passed to a chunking operation (e.g. empty separator)."""
    pass


class OutOfRangeError(PostChunksError, IndexError):
    """Chunk index outside the 1-indexed range of a document's chunks."""
    pass


class ConfigurationError(PostChunksError):
    """Configuration-related errors (invalid settings, missing required config)."""
    pass
