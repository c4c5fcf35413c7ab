"""Rounding helpers."""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded away from zero.

    The builtin ``round`` rounds halves to even, so 2.5 would become 2.
    """
    return int(Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
