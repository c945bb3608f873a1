"""Parsing of ``-n``/``-c`` count arguments into take specifications."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from ..errors import IllegalCountError

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class Sign(Enum):
    """How a count argument was written."""

    UNSIGNED = ""
    PLUS = "+"
    MINUS = "-"


@dataclass(frozen=True)
class PlusZero:
    """
    The literal ``+0``.

    Means "from the first item" and is deliberately distinct from
    ``TakeNum(0)``, which means "nothing".
    """

    def __repr__(self) -> str:
        return "PlusZero"


@dataclass(frozen=True)
class TakeNum:
    """
    A signed start position.

    ``n > 0`` starts at the n-th item (1-based) from the start, ``n < 0``
    starts ``-n`` items before the end and ``n == 0`` selects nothing.
    """

    n: int


TakeValue = Union[PlusZero, TakeNum]

PLUS_ZERO = PlusZero()
DEFAULT_LINES = TakeNum(-10)


def split_sign(text: str) -> Tuple[Sign, str]:
    """Split off an optional leading ``+`` or ``-``."""
    if text[:1] == "+":
        return Sign.PLUS, text[1:]
    if text[:1] == "-":
        return Sign.MINUS, text[1:]
    return Sign.UNSIGNED, text


def parse_take_value(text: str, field_name: str) -> TakeValue:
    """
    Parse a count argument.

    Unsigned and ``-`` counts both mean "the last N items", ``+N`` means
    "starting at item N" and ``+0`` means "everything".

    Args:
        text: Raw argument text, e.g. ``"10"``, ``"+3"`` or ``"-5"``
        field_name: ``"line"`` or ``"byte"``, used in the error message

    Returns:
        ``PLUS_ZERO`` or a ``TakeNum``

    Raises:
        IllegalCountError: If the text is not an optionally signed integer
            within the signed 64-bit range
    """
    sign, digits = split_sign(text)

    # int() also takes whitespace, underscores and non-ASCII digits
    if not (digits.isascii() and digits.isdigit()):
        raise IllegalCountError(field_name, text)

    magnitude = int(digits)
    limit = -INT64_MIN if sign is Sign.MINUS else INT64_MAX
    if magnitude > limit:
        raise IllegalCountError(field_name, text)

    if sign is Sign.PLUS:
        return PLUS_ZERO if magnitude == 0 else TakeNum(magnitude)

    return TakeNum(-magnitude)


def parse_lines(text: str) -> TakeValue:
    """Parse a ``--lines`` argument."""
    return parse_take_value(text, "line")


def parse_bytes(text: str) -> TakeValue:
    """Parse a ``--bytes`` argument."""
    return parse_take_value(text, "byte")
