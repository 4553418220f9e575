"""Rounding helpers pinned to half-away-from-zero"""

from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")


def round_currency(value: float) -> float:
    """Round an amount to 2 decimal places, halves away from zero"""
    return float(Decimal(repr(value)).quantize(CENT, rounding=ROUND_HALF_UP))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero"""
    return int(Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_ratio(value: float) -> str:
    """One-decimal display string, halves away from zero (0.25 -> "0.3")"""
    return str(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    """Shortest round-trip text for a number, without a trailing ".0" on whole values"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)
