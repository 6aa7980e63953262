"""Rounding and number formatting helpers."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return math.floor(value + 0.5)


def round_to_half(value: float) -> float:
    """Round to the nearest 0.5 (2.25 -> 2.5, 2.2 -> 2.0)."""
    return math.floor(value * 2 + 0.5) / 2


def format_number(value: float) -> str:
    """Format a number without a trailing ``.0`` (2.0 -> "2", 1.5 -> "1.5")."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
