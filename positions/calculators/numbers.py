"""Number parsing and rounding helpers shared by the calculators."""

from __future__ import annotations
import math
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any, Optional


# Leading decimal literal, same grammar a browser's parseFloat() accepts
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a user-entered value into a float.

    Mirrors parseFloat(): leading whitespace is skipped and the longest
    numeric prefix is used, so '12.5' -> 12.5, ' 3 ' -> 3.0, '12abc' -> 12.0.
    Blank or non-numeric input returns None.

    Examples:
        parse_number('')     -> None
        parse_number('abc')  -> None
        parse_number('1e3')  -> 1000.0
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else None

    match = _NUMBER_PREFIX.match(str(value).lstrip())
    if not match:
        return None

    try:
        number = float(match.group(0))
    except ValueError:
        return None

    return number if math.isfinite(number) else None


def to_fixed(value: float, digits: int = 4) -> float:
    """
    Round like Number.toFixed() and return a float.

    The exact binary value is rounded; exact ties go away from zero.
    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value

    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        ctx.prec = max(28, exact.adjusted() + digits + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def format_fixed(value: Optional[float], digits: int = 4, placeholder: str = "-") -> str:
    """Format a number with a fixed number of decimals, or the placeholder."""
    if value is None or not math.isfinite(value):
        return placeholder
    return f"{to_fixed(value, digits):.{digits}f}"
