"""
Common utilities for CLI modules.
"""

import json
import sys
from pathlib import Path
from typing import Any, TextIO

from postchunks.config import Config, get_config
from postchunks.document import Document
from postchunks.exceptions import ConfigurationError
from postchunks.logging_config import get_logger, setup_logging


logger = get_logger(__name__)

DOCUMENT_SUFFIXES = (".html", ".htm", ".md", ".txt")


def configure_cli(
    verbose: bool = False, log_file: str | None = None, stream: TextIO | None = None
) -> Config:
    """
    Load configuration and install logging for a CLI command.

    Exits with status 1 if the environment holds an invalid configuration.

    Args:
        verbose: Log at DEBUG with timestamps and module names
        log_file: Log file from the command line; overrides POSTCHUNKS_LOG_FILE
        stream: Console stream for log records (stdout if None)
    """
    # Console logging first, so a configuration error can be reported
    setup_logging(log_level="DEBUG" if verbose else "INFO", verbose=verbose, stream=stream)

    try:
        config = get_config()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    setup_logging(
        log_level="DEBUG" if verbose else config.log_level,
        log_file=Path(log_file) if log_file else config.log_file,
        verbose=verbose,
        stream=stream,
    )
    return config


def collect_input_files(paths: list[str]) -> list[Path]:
    """
    Expand CLI paths into the list of document files to process.

    Files are taken as given; directories contribute every file with a
    document suffix beneath them, in sorted order.

    Raises:
        FileNotFoundError: If a path does not exist
    """
    files = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files.extend(
                sorted(p for p in path.rglob("*") if p.is_file() and p.suffix.lower() in DOCUMENT_SUFFIXES)
            )
        elif path.is_file():
            files.append(path)
        else:
            raise FileNotFoundError(f"No such file or directory: {raw}")
    return files


def load_document(path: Path) -> Document:
    """Read a file into a Document keyed by its path."""
    with open(path, encoding="utf-8") as f:
        content = f.read()
    return Document(content=content, doc_id=str(path), metadata={"source": str(path)})


def save_json_output(
    data: dict[str, Any], output_path: str, pretty: bool = True
) -> None:
    """
    Save data to JSON file with error handling.

    Args:
        data: Data to save
        output_path: Path to save the JSON file
        pretty: Whether to pretty-print the JSON
    """
    try:
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)

        with open(output_file, "w", encoding="utf-8") as f:
            if pretty:
                json.dump(data, f, indent=2, ensure_ascii=False)
            else:
                json.dump(data, f, ensure_ascii=False)

        logger.info(f"Output saved to: {output_file}")

    except OSError as e:
        logger.error(f"Error saving output to {output_path}: {e}")
        sys.exit(1)


def print_summary_stats(stats: dict[str, Any]) -> None:
    """
    Print formatted summary statistics.

    Args:
        stats: Statistics dictionary to display
    """
    print("\nSummary Statistics:")
    for key, value in stats.items():
        if isinstance(value, float):
            print(f"  {key}: {value:.1f}")
        else:
            print(f"  {key}: {value}")
