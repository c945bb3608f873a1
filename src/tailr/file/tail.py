"""Tail functionality for displaying the end of one or more files."""

import logging
import sys
from typing import BinaryIO, Iterable, Optional, TextIO

from ..core.count import DEFAULT_LINES, TakeValue
from ..errors import FileReadError
from .emitter import Opener, emit_bytes, emit_lines, open_binary
from .metrics import FileTotals, scan_totals

logger = logging.getLogger(__name__)


def format_header(filename: str, first: bool) -> bytes:
    """Build the ``==> name <==`` banner shown above each file."""
    prefix = "" if first else "\n"
    return f"{prefix}==> {filename} <==\n".encode("utf-8", errors="surrogateescape")


class Tail:
    """
    Displays the tail of each named file in turn.

    A byte count, when given, wins over the line count for every file.
    Files that can't be opened are reported on ``err`` and skipped; a read
    failure on a file that did open aborts the run with FileReadError.
    """

    def __init__(
        self,
        line_spec: TakeValue = DEFAULT_LINES,
        byte_spec: Optional[TakeValue] = None,
        quiet: bool = False,
        out: Optional[BinaryIO] = None,
        err: Optional[TextIO] = None,
        opener: Opener = open_binary,
    ):
        """
        Initialize a Tail.

        Args:
            line_spec: Parsed line count (defaults to the last 10 lines)
            byte_spec: Parsed byte count, or None to work in lines
            quiet: Never print per-file headers
            out: Binary stream for file content (defaults to stdout)
            err: Text stream for per-file diagnostics (defaults to stderr)
            opener: Callable returning a binary handle for a filename
        """
        self.line_spec = line_spec
        self.byte_spec = byte_spec
        self.quiet = quiet
        self.out = out if out is not None else sys.stdout.buffer
        self.err = err if err is not None else sys.stderr
        self.opener = opener

    def run(self, filenames: Iterable[str]) -> None:
        """
        Emit the tail of every file, in order.

        Args:
            filenames: Files to read

        Raises:
            FileReadError: If an opened file can't be read
        """
        filenames = list(filenames)
        show_headers = len(filenames) > 1 and not self.quiet

        for file_num, filename in enumerate(filenames):
            try:
                fh = self.opener(filename)
            except OSError as e:
                logger.info(f"Skipping {filename}: {e}")
                self.err.write(f"{filename}: {e.strerror or e}\n")
                self.err.flush()
                continue

            with fh:
                if show_headers:
                    self.out.write(format_header(filename, first=file_num == 0))
                totals = self._scan(filename, fh)

            self._emit(filename, totals)
            self.out.flush()

    def _scan(self, filename: str, fh: BinaryIO) -> FileTotals:
        try:
            return scan_totals(fh)
        except OSError as e:
            raise FileReadError(filename, e) from e

    def _emit(self, filename: str, totals: FileTotals) -> None:
        """Stream the tail through a fresh handle; output errors propagate as-is."""
        if self.byte_spec is not None:
            logger.debug(f"{filename}: byte mode, {self.byte_spec}")
            emit_bytes(filename, self.byte_spec, totals.bytes, self.out, self.opener)
        else:
            logger.debug(f"{filename}: line mode, {self.line_spec}")
            emit_lines(filename, self.line_spec, totals.lines, self.out, self.opener)


def run(
    filenames: Iterable[str],
    byte_spec: Optional[TakeValue] = None,
    line_spec: TakeValue = DEFAULT_LINES,
    quiet: bool = False,
    out: Optional[BinaryIO] = None,
    err: Optional[TextIO] = None,
) -> None:
    """Emit the tail of each file; see Tail for the details."""
    Tail(line_spec=line_spec, byte_spec=byte_spec, quiet=quiet, out=out, err=err).run(filenames)
