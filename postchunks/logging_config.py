"""
Logging setup for the postchunks command-line front end.

Library modules only create loggers with ``get_logger(__name__)``; handlers are
installed here, once per command. Handlers added by an embedding application
are left alone.
"""

import logging
import sys
from pathlib import Path
from typing import TextIO


SIMPLE_FORMAT = "%(levelname)s: %(message)s"
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Marks handlers owned by setup_logging so a second call replaces only those
_OWNED = "_postchunks_handler"


def _own(handler: logging.Handler, fmt: str, datefmt: str) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
    setattr(handler, _OWNED, True)
    return handler


def setup_logging(
    log_level: str = "INFO",
    log_file: Path | None = None,
    verbose: bool = False,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Install console (and optionally file) handlers on the root logger.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        log_file: File that additionally receives every record with timestamps
        verbose: Use the detailed format on the console as well
        stream: Console stream; defaults to stdout. The render command passes
            stderr so stdout carries only chunk text.

    Returns:
        The root logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    for handler in [h for h in root_logger.handlers if getattr(h, _OWNED, False)]:
        root_logger.removeHandler(handler)
        handler.close()

    console_fmt = DETAILED_FORMAT if verbose else SIMPLE_FORMAT
    console = logging.StreamHandler(stream if stream is not None else sys.stdout)
    root_logger.addHandler(_own(console, console_fmt, "%H:%M:%S"))

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        root_logger.addHandler(_own(file_handler, DETAILED_FORMAT, "%Y-%m-%d %H:%M:%S"))

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(name)
