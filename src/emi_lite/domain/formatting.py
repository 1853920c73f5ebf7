"""Display formatting for EMI figures.

Fixed en-IN conventions: the last three integer digits form one group and the
rest are grouped in pairs (10,00,000). Rounding is half-up on the exact value
of the float, so 7.25 -> "7.3" while 1.005 (stored as 1.00499...) -> "1.00".
A negative value keeps its sign even when it rounds to zero (-0.04 -> "-0").
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

CURRENCY_SYMBOL = "₹"
CURRENCY_FRACTION_DIGITS = 2
NUMBER_MAX_FRACTION_DIGITS = 1


def format_currency(value: float) -> str:
    """Render value as rupees with exactly two fraction digits, e.g. ₹5,00,000.00."""
    if not math.isfinite(value):
        return _non_finite(value, symbol=CURRENCY_SYMBOL)

    negative, integer, fraction = _split(value, CURRENCY_FRACTION_DIGITS)
    sign = "-" if negative else ""
    return f"{sign}{CURRENCY_SYMBOL}{_group(integer)}.{fraction}"


def format_number(value: float) -> str:
    """Render value with en-IN grouping and at most one fraction digit."""
    if not math.isfinite(value):
        return _non_finite(value)

    negative, integer, fraction = _split(value, NUMBER_MAX_FRACTION_DIGITS)
    fraction = fraction.rstrip("0")
    sign = "-" if negative else ""
    if fraction:
        return f"{sign}{_group(integer)}.{fraction}"
    return f"{sign}{_group(integer)}"


def _split(value: float, places: int) -> tuple[bool, str, str]:
    """Round to `places` and return (negative, integer digits, fraction digits)."""
    negative = math.copysign(1.0, value) < 0
    exact = Decimal(value)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the fraction
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        rounded = exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)

    # copy_abs ignores the context precision
    text = format(rounded.copy_abs(), "f")
    integer, _, fraction = text.partition(".")
    return negative, integer, fraction


def _group(digits: str) -> str:
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)

    return ",".join([*groups, tail])


def _non_finite(value: float, symbol: str = "") -> str:
    if math.isnan(value):
        return "NaN"
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}∞"
