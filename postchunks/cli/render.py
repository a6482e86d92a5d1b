"""
Command-line interface for printing the chunks of a single document.

Usage:
    python -m postchunks render post.html
    python -m postchunks render post.html --chunk 2
    python -m postchunks render post.html --separator "<!--nextpage-->" --strip
"""

import argparse
import sys
from pathlib import Path

from postchunks.config import get_config
from postchunks.document import attach_chunks, get_chunk, render_chunks
from postchunks.exceptions import ChunkingError, OutOfRangeError
from postchunks.hooks import TransformPipeline
from postchunks.logging_config import get_logger

from .common import configure_cli, load_document


logger = get_logger(__name__)


def build_pipeline(strip: bool = False) -> TransformPipeline:
    """Transform pipeline used by the render command."""
    pipeline = TransformPipeline()
    if strip:
        pipeline.register(get_config().transform, str.strip)
    return pipeline


def render_file(
    path: str,
    index: int | None = None,
    separator: str | None = None,
    strip: bool = False,
    out=None,
) -> int:
    """
    Print one chunk, or every chunk in order, of the document at ``path``.

    Returns:
        Number of chunks printed

    Raises:
        OutOfRangeError: If ``index`` is outside the document's chunks
    """
    out = out if out is not None else sys.stdout
    document = load_document(Path(path))
    state = attach_chunks(document, separator)
    logger.debug(f"{path}: {len(state)} chunks")

    pipeline = build_pipeline(strip)

    if index is not None:
        out.write(get_chunk(document, index, pipeline=pipeline))
        out.write("\n")
        return 1

    return render_chunks(document, pipeline, out, end="\n")


def main() -> None:
    """Main entry point for render CLI."""
    parser = argparse.ArgumentParser(
        description="Print the chunks of a document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print every chunk, one after another
  python -m postchunks render post.html

  # Print only the second chunk
  python -m postchunks render post.html --chunk 2
        """,
    )

    parser.add_argument("path", help="Document file to render")

    parser.add_argument(
        "--chunk",
        type=int,
        help="1-based number of the chunk to print (default: all, in order)",
    )

    parser.add_argument(
        "--separator",
        help="Separator marker (default: configured separator, <!--more-->)",
    )

    parser.add_argument(
        "--strip",
        action="store_true",
        help="Strip surrounding whitespace from each chunk",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging with timestamps and module names",
    )

    parser.add_argument(
        "--log-file",
        help="Also write log records to this file (default: POSTCHUNKS_LOG_FILE)",
    )

    args = parser.parse_args()
    # stdout carries the chunks, so log records go to stderr
    configure_cli(verbose=args.verbose, log_file=args.log_file, stream=sys.stderr)

    if args.separator == "":
        parser.error("--separator cannot be empty")

    try:
        render_file(args.path, args.chunk, args.separator, args.strip)
    except OutOfRangeError as e:
        logger.error(f"Chunk error: {e}")
        sys.exit(1)
    except ChunkingError as e:
        logger.error(f"Chunking error: {e}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Could not read {args.path}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
