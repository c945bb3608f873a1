"""Mapping a take specification onto a concrete start offset."""

from typing import Optional

from .count import PlusZero, TakeNum, TakeValue


def resolve_offset(take: TakeValue, total: int) -> Optional[int]:
    """
    Work out where the tail starts.

    Args:
        take: Parsed count specification
        total: Number of lines or bytes in the file

    Returns:
        Zero-based index of the first item to emit, or None if nothing
        should be emitted
    """
    if isinstance(take, PlusZero):
        return None if total == 0 else 0

    if not isinstance(take, TakeNum):
        raise TypeError(f"Expected PlusZero or TakeNum, got {type(take).__name__}")

    n = take.n
    if n == 0:
        return None

    if n > 0:
        # No such start item
        if total < n:
            return None
        return n - 1

    # Asking for more than exists clamps to the whole file
    wanted = -n
    if total < wanted:
        return 0
    return total - wanted
