"""Single-pass line and byte counting."""

import logging
import time
from dataclasses import dataclass
from typing import BinaryIO

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileTotals:
    """Line and byte totals for one file."""

    lines: int
    bytes: int


def scan_totals(fh: BinaryIO) -> FileTotals:
    """
    Count the lines and bytes in a file with one sequential read.

    A trailing fragment with no newline still counts as a line. Only the
    current line is held in memory.

    Args:
        fh: Binary file handle positioned at the start of the file

    Returns:
        FileTotals for the file

    Raises:
        OSError: If reading fails
    """
    start_time = time.time()
    lines = 0
    total_bytes = 0

    while True:
        line = fh.readline()
        if not line:
            break  # EOF
        lines += 1
        total_bytes += len(line)

    logger.debug(f"Scanned {lines:,} lines, {total_bytes:,} bytes in {time.time() - start_time:.3f}s")
    return FileTotals(lines=lines, bytes=total_bytes)
