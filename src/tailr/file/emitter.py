"""Writing the selected tail of a file to an output stream."""

import logging
from contextlib import closing
from typing import BinaryIO, Callable, Iterator

from ..core.count import TakeValue
from ..core.offset import resolve_offset
from ..errors import FileReadError

logger = logging.getLogger(__name__)

Opener = Callable[[str], BinaryIO]


def open_binary(path: str) -> BinaryIO:
    """Open a file for buffered binary reading."""
    return open(path, "rb")


def read_lines(path: str, opener: Opener = open_binary) -> Iterator[bytes]:
    """
    Yield the raw lines of a file from the top.

    Failures opening or reading the file raise FileReadError. Errors in
    the caller's loop body are not raised inside the generator, so they
    are left alone.
    """
    try:
        fh = opener(path)
    except OSError as e:
        raise FileReadError(path, e) from e

    with fh:
        while True:
            try:
                line = fh.readline()
            except OSError as e:
                raise FileReadError(path, e) from e
            if not line:
                break  # EOF
            yield line


def emit_lines(
    path: str,
    line_spec: TakeValue,
    total_lines: int,
    out: BinaryIO,
    opener: Opener = open_binary,
) -> None:
    """
    Write the selected lines of a file to ``out``.

    Line starts aren't addressable by byte offset, so the file is read
    again from the top and lines before the start offset are skipped.

    Args:
        path: File to read
        line_spec: Parsed line count
        total_lines: Line count from the metrics scan
        out: Binary output stream
        opener: Callable returning a fresh binary handle for ``path``

    Raises:
        FileReadError: If the file can't be re-opened or read
    """
    offset = resolve_offset(line_spec, total_lines)
    logger.debug(f"{path}: line offset {offset} of {total_lines:,}")
    if offset is None:
        return

    with closing(read_lines(path, opener)) as lines:
        for line_no, line in enumerate(lines):
            if line_no >= offset:
                out.write(line)


def emit_bytes(
    path: str,
    byte_spec: TakeValue,
    total_bytes: int,
    out: BinaryIO,
    opener: Opener = open_binary,
) -> None:
    """
    Write the selected bytes of a file to ``out``.

    Seeks straight to the start offset and reads to EOF. Invalid UTF-8 is
    replaced with U+FFFD rather than failing.

    Args:
        path: File to read
        byte_spec: Parsed byte count
        total_bytes: Byte count from the metrics scan
        out: Binary output stream
        opener: Callable returning a fresh binary handle for ``path``

    Raises:
        FileReadError: If the file can't be re-opened, seeked or read
    """
    offset = resolve_offset(byte_spec, total_bytes)
    logger.debug(f"{path}: byte offset {offset} of {total_bytes:,}")
    if offset is None:
        return

    try:
        with opener(path) as fh:
            fh.seek(offset)
            data = fh.read()
    except OSError as e:
        raise FileReadError(path, e) from e

    out.write(data.decode("utf-8", errors="replace").encode("utf-8"))
