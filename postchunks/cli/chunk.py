"""
Command-line interface for splitting documents into chunks.

Usage:
    python -m postchunks chunk posts/
    python -m postchunks chunk post.html --separator "<!--nextpage-->"
    python -m postchunks chunk posts/ --output outputs/chunks/posts.json --preview
"""

import argparse
import sys
import time
from typing import Any

from tqdm import tqdm

from postchunks.chunk import analyze_chunks, preview_chunks
from postchunks.config import get_config
from postchunks.document import Document, attach_chunks
from postchunks.exceptions import ChunkingError
from postchunks.logging_config import get_logger

from .common import (
    collect_input_files,
    configure_cli,
    load_document,
    print_summary_stats,
    save_json_output,
)


logger = get_logger(__name__)


def chunk_documents(
    documents: list[Document], separator: str | None = None, preview: bool = False
) -> dict[str, Any]:
    """
    Attach chunks to every document and collect per-document statistics.

    Failures are recorded per document and do not stop the batch.

    Args:
        documents: Documents to split
        separator: Separator to split on (configured default if None)
        preview: Whether to log chunk previews

    Returns:
        Dictionary with "results" (doc_id -> chunks and stats) and
        "errors" (doc_id -> message)
    """
    results = {}
    errors = {}

    docs_progress = tqdm(
        documents,
        desc="Chunking documents",
        unit="doc",
        disable=len(documents) < 10,
        leave=False,
    )

    for document in docs_progress:
        try:
            state = attach_chunks(document, separator)
            chunks = list(state.chunks)
            results[document.doc_id] = {
                "chunks": chunks,
                "stats": analyze_chunks(chunks, state.separator),
            }

            if preview:
                for prev in preview_chunks(chunks[:3]):
                    logger.info(f"Preview: {prev}")
                if len(chunks) > 3:
                    logger.info(f"... and {len(chunks) - 3} more chunks")

        except ChunkingError as e:
            error_msg = f"Chunking error: {e}"
            logger.warning(f"Processing document '{document.doc_id}' failed: {error_msg}")
            errors[document.doc_id] = error_msg

    return {"results": results, "errors": errors}


def _calculate_overall_statistics(results: dict, errors: dict) -> dict[str, Any]:
    total_chunks = sum(r["stats"]["num_chunks"] for r in results.values())
    total_chars = sum(r["stats"]["total_chars"] for r in results.values())

    return {
        "total_documents": len(results),
        "total_chunks": total_chunks,
        "total_characters": total_chars,
        "avg_chunks_per_document": round(total_chunks / len(results), 1) if results else 0,
        "error_count": len(errors),
    }


def chunk_files(
    paths: list[str],
    separator: str | None = None,
    output_path: str | None = None,
    preview: bool = False,
) -> dict[str, Any]:
    """
    CLI wrapper: read files, split them, print statistics and save a report.

    Args:
        paths: Files or directories to read
        separator: Separator to split on (configured default if None)
        output_path: Where to write the JSON report (skipped if None)
        preview: Whether to log chunk previews

    Returns:
        The report written to ``output_path``
    """
    separator = separator if separator is not None else get_config().separator

    files = collect_input_files(paths)
    logger.info(f"Found {len(files)} document(s)")
    logger.info(f"Separator: {separator!r}")

    documents = []
    errors = {}
    for path in files:
        try:
            documents.append(load_document(path))
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read {path}: {e}")
            errors[str(path)] = f"Read error: {e}"

    processed = chunk_documents(documents, separator, preview)
    results = processed["results"]
    errors.update(processed["errors"])

    for doc_id, result in results.items():
        logger.info(f"{doc_id}: {result['stats']['num_chunks']} chunks")

    print_summary_stats(_calculate_overall_statistics(results, errors))

    report = {
        "separator": separator,
        "documents": results,
        "errors": errors,
        "timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
    }

    if output_path:
        save_json_output(report, output_path)

    return report


def main() -> None:
    """Main entry point for chunking CLI."""
    parser = argparse.ArgumentParser(
        description="Split documents into chunks at separator markers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Split every document under a directory on <!--more-->
  python -m postchunks chunk posts/

  # Custom separator, with previews
  python -m postchunks chunk post.html --separator "<!--nextpage-->" --preview
        """,
    )

    parser.add_argument(
        "paths",
        nargs="+",
        help="Files or directories (.html, .htm, .md, .txt) to split",
    )

    parser.add_argument(
        "--separator",
        help="Separator marker (default: configured separator, <!--more-->)",
    )

    parser.add_argument(
        "--output",
        help="Output file path (JSON format)",
    )

    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show chunk previews during processing",
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
    config = configure_cli(verbose=args.verbose, log_file=args.log_file)

    if args.separator == "":
        parser.error("--separator cannot be empty")

    if not args.output:
        args.output = str(config.chunks_output_path())

    try:
        report = chunk_files(
            paths=args.paths,
            separator=args.separator,
            output_path=args.output,
            preview=args.preview,
        )
    except FileNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Chunking interrupted by user")
        sys.exit(1)

    if report["errors"]:
        for doc_id, error in report["errors"].items():
            logger.error(f"Error processing {doc_id}: {error}")
        sys.exit(1)

    logger.info("Chunking completed successfully!")


if __name__ == "__main__":
    main()
