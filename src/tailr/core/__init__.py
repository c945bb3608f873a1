"""Count specifications and offset resolution."""

from .count import (
    DEFAULT_LINES,
    PLUS_ZERO,
    PlusZero,
    Sign,
    TakeNum,
    TakeValue,
    parse_bytes,
    parse_lines,
    parse_take_value,
)
from .offset import resolve_offset

__all__ = [
    "DEFAULT_LINES",
    "PLUS_ZERO",
    "PlusZero",
    "Sign",
    "TakeNum",
    "TakeValue",
    "parse_bytes",
    "parse_lines",
    "parse_take_value",
    "resolve_offset",
]
