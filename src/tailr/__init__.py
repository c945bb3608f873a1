"""tailr - display the tail of one or more files."""

import logging
import sys

from .core import (
    DEFAULT_LINES,
    PLUS_ZERO,
    PlusZero,
    TakeNum,
    TakeValue,
    parse_bytes,
    parse_lines,
    parse_take_value,
    resolve_offset,
)
from .errors import FileReadError, IllegalCountError, TailError
from .file import FileTotals, Tail, emit_bytes, emit_lines, run, scan_totals

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_LINES",
    "PLUS_ZERO",
    "FileReadError",
    "FileTotals",
    "IllegalCountError",
    "PlusZero",
    "Tail",
    "TailError",
    "TakeNum",
    "TakeValue",
    "configure_logging",
    "emit_bytes",
    "emit_lines",
    "parse_bytes",
    "parse_lines",
    "parse_take_value",
    "resolve_offset",
    "run",
    "scan_totals",
]


def configure_logging(level=logging.WARNING):
    """Configure logging for tailr."""
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger("tailr")
    logger.setLevel(level)
    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()
    logger.addHandler(handler)
