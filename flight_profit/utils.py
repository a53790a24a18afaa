"""Utility functions for numeric parsing and rounding."""

import math
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any, Iterable, Optional, Union


TWO_PLACES = Decimal("0.01")

_NON_NUMERIC = re.compile(r"[^0-9.]")


def parse_number(value: Any, strip_symbols: bool = False) -> Optional[float]:
    """
    Parse a raw reference value into a float.

    Args:
        value: Raw value (number, string, or None/NaN for a missing cell)
        strip_symbols: Drop every character other than digits and '.'
            first, so "£5.00" parses as 5.0

    Returns:
        Parsed float, or None when the value is not numeric

    Examples:
        >>> parse_number("£5.00", strip_symbols=True)
        5.0
        >>> parse_number("n/a") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            return None
        return float(value)

    text = str(value).strip()
    if strip_symbols:
        text = _NON_NUMERIC.sub("", text)

    try:
        number = float(text)
    except ValueError:
        return None

    return None if math.isnan(number) else number


def parse_count(value: Any) -> Optional[int]:
    """Parse a raw seat count; fractional parts are truncated."""
    number = parse_number(value)
    if number is None or not math.isfinite(number):
        return None
    return int(number)


def is_numeric(value: Any) -> bool:
    """Check that a value is a finite number."""
    if value is None or isinstance(value, bool):
        return False
    return isinstance(value, (int, float)) and math.isfinite(value)


def _places_needed(value: Decimal) -> int:
    """Significant digits needed to hold ``value`` with two fractional places."""
    return max(value.adjusted(), 0) + 3


def round_money(value: Union[float, Decimal]) -> Decimal:
    """
    Fix a computed value to exactly 2 decimal places.

    Rounds half-up on the exact binary value of the float, so 1.005
    (stored as 1.00499...) becomes 1.00. Precision widens with the
    magnitude, so large finite values keep their two places.

    Args:
        value: Finite float or Decimal to round

    Returns:
        Decimal with exactly two fractional digits

    Examples:
        >>> round_money(37500)
        Decimal('37500.00')
        >>> round_money(2.675)
        Decimal('2.67')
    """
    exact = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _places_needed(exact))
        return exact.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def sum_money(values: Iterable[Decimal]) -> Decimal:
    """Exact sum of 2-place amounts, whatever their magnitude."""
    amounts = list(values)
    with localcontext() as ctx:
        ctx.prec = max([ctx.prec] + [_places_needed(amount) + 1 for amount in amounts]) + len(amounts)
        total = sum(amounts, Decimal("0.00"))
        return total.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
