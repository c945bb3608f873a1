"""File scanning, tail emission and the multi-file driver."""

from .emitter import emit_bytes, emit_lines, open_binary
from .metrics import FileTotals, scan_totals
from .tail import Tail, format_header, run

__all__ = [
    "FileTotals",
    "Tail",
    "emit_bytes",
    "emit_lines",
    "format_header",
    "open_binary",
    "run",
    "scan_totals",
]
