from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal

# Longest leading decimal literal, the way a browser's parseFloat reads a field.
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")
_NON_DIGITS = re.compile(r"[^0-9]")

# Wide enough for any finite float at any display precision we use.
_WIDE = Context(prec=400)


def parse_number(raw: str) -> float:
    """
    Parse the leading number of a form value; NaN when there is none.
    Overflow gives +/-inf, as "1e999" does in the browser.
    """
    match = _LEADING_NUMBER.match(raw or "")
    if match is None:
        return math.nan
    return float(match.group(1))


def is_number(value: float) -> bool:
    return not math.isnan(value)


def digits_only(raw: str) -> str:
    return _NON_DIGITS.sub("", raw or "")


def round_half_up(x: float, decimals: int = 2) -> Decimal:
    """Round the exact binary value of x half away from zero."""
    quantum = Decimal(1).scaleb(-decimals)
    return Decimal(x).quantize(quantum, rounding=ROUND_HALF_UP, context=_WIDE)


def format_fixed(x: float, decimals: int) -> str:
    """Fixed-point string with exactly `decimals` digits after the point."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    return f"{round_half_up(x, decimals):.{decimals}f}"


def format_currency(value, *, symbol: str = "$", decimals: int = 2) -> str:
    """Format a number (or numeric string) as currency, e.g. 1234.5 -> $1,234.50."""
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return f"{symbol}Infinity" if number > 0 else f"-{symbol}Infinity"
    amount = round_half_up(number, decimals)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.{decimals}f}"
