"""Buy/sell fee configuration."""

from __future__ import annotations
from typing import Any, Optional, TypedDict

from .numbers import parse_number


DEFAULT_FEE_PERCENT = 0.02


class FeeConfig(TypedDict):
    buy_fee_enabled: bool
    buy_fee_percent: float
    sell_fee_enabled: bool
    sell_fee_percent: float


def make_fee_config(
    buy_fee_enabled: bool = True,
    buy_fee_percent: Any = DEFAULT_FEE_PERCENT,
    sell_fee_enabled: bool = True,
    sell_fee_percent: Any = DEFAULT_FEE_PERCENT,
) -> FeeConfig:
    """
    Build a FeeConfig from raw inputs.

    Percentages are in percentage units (0.02 means 0.02%). A percentage
    that cannot be parsed counts as 0.
    """
    return {
        "buy_fee_enabled": bool(buy_fee_enabled),
        "buy_fee_percent": _percent(buy_fee_percent),
        "sell_fee_enabled": bool(sell_fee_enabled),
        "sell_fee_percent": _percent(sell_fee_percent),
    }


def no_fees() -> FeeConfig:
    """FeeConfig with both fees switched off."""
    return make_fee_config(False, 0.0, False, 0.0)


def held_quantity(quantity: float, fees: Optional[FeeConfig]) -> float:
    """Quantity left after the buy fee is taken out of it."""
    if fees and fees.get("buy_fee_enabled"):
        return quantity * (1 - fees.get("buy_fee_percent", 0.0) / 100)
    return quantity


def after_sell_fee(price: float, fees: Optional[FeeConfig]) -> float:
    """Price left after the sell fee is charged on it once."""
    if fees and fees.get("sell_fee_enabled"):
        return price - price * (fees.get("sell_fee_percent", 0.0) / 100)
    return price


def fee_title(fees: FeeConfig) -> str:
    """
    Short '<buy> / <sell>' label for the fee header.

    Disabled fees show as '-', e.g. '0.02 / -'.
    """
    buy = _format_percent(fees["buy_fee_percent"]) if fees["buy_fee_enabled"] else "-"
    sell = _format_percent(fees["sell_fee_percent"]) if fees["sell_fee_enabled"] else "-"
    return f"{buy} / {sell}"


def _percent(value: Any) -> float:
    number = parse_number(value)
    return number if number is not None else 0.0


def _format_percent(value: float) -> str:
    # 0.02 -> '0.02', 1.0 -> '1'
    return f"{value:g}" if abs(value) < 1e6 else f"{value:.2f}"
