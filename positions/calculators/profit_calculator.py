"""Profit target calculator - Pure calculation logic."""

from __future__ import annotations
import math
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .fees import FeeConfig, after_sell_fee
from .numbers import parse_number, to_fixed


DEFAULT_PROFIT_PERCENTAGES = (1, 2, 3, 4, 5)


class ProfitCalculator:
    """Handles profit projections and target price back-solving."""

    @staticmethod
    def at_percentage(
        average_price: Optional[float],
        percentage: Any,
        total_held_quantity: float,
        fees: Optional[FeeConfig] = None,
    ) -> Optional[Dict[str, float]]:
        """
        Project selling price and profit for a markup percentage.

        The sell fee is charged once on the marked-up price. Each stage is
        rounded to 4 decimals before the next one uses it.

        Returns:
            Dict with 'percentage', 'selling_price', 'gross', 'net', or None
            when there is no average price, the percentage is not numeric
            or the result overflows
        """
        pct = parse_number(percentage)
        if average_price is None or pct is None:
            return None

        held = float(total_held_quantity or 0.0)
        selling_price = to_fixed(after_sell_fee(average_price * (1 + pct / 100), fees))
        gross = to_fixed(selling_price * held)
        net = to_fixed(gross - average_price * held)
        if not all(math.isfinite(v) for v in (selling_price, gross, net)):
            return None

        return {
            "percentage": pct,
            "selling_price": selling_price,
            "gross": gross,
            "net": net,
        }

    @staticmethod
    def percentage_from_target(
        average_price: Optional[float],
        target_price: Any,
        fees: Optional[FeeConfig] = None,
    ) -> Optional[float]:
        """
        Back-solve the profit percentage implied by a target selling price.

        With the sell fee enabled the target is reduced by the fee first.

        Returns:
            Percentage rounded to 4 decimals, or None if the average price is
            missing, the target is blank/non-numeric or the result overflows
        """
        target = parse_number(target_price)
        if not average_price or target is None:
            return None

        effective = after_sell_fee(target, fees)
        pct = (effective - average_price) / average_price * 100
        return to_fixed(pct) if math.isfinite(pct) else None

    @staticmethod
    def targets(
        aggregate: Mapping[str, Optional[float]],
        fees: Optional[FeeConfig] = None,
        percentages: Sequence[float] = DEFAULT_PROFIT_PERCENTAGES,
        custom: Any = None,
    ) -> List[Dict[str, Any]]:
        """
        Build the profit target table.

        One row per fixed percentage, plus a 'custom' row when the custom
        input is not blank. Rows without data carry None values.
        """
        average_price = aggregate.get("average_price")
        held = aggregate.get("total_held_quantity") or 0.0

        rows: List[Dict[str, Any]] = []
        for pct in percentages:
            rows.append(ProfitCalculator._row(average_price, pct, held, fees, custom=False))

        if custom is not None and str(custom).strip() != "":
            rows.append(ProfitCalculator._row(average_price, custom, held, fees, custom=True))

        return rows

    @staticmethod
    def target_summary(
        aggregate: Mapping[str, Optional[float]],
        target_price: Any,
        fees: Optional[FeeConfig] = None,
    ) -> Optional[Dict[str, float]]:
        """
        Solved percentage plus gross/net profit at that percentage.

        Returns:
            Dict with 'percentage', 'gross', 'net', or None without data
        """
        average_price = aggregate.get("average_price")
        pct = ProfitCalculator.percentage_from_target(average_price, target_price, fees)
        if pct is None:
            return None

        held = aggregate.get("total_held_quantity") or 0.0
        projection = ProfitCalculator.at_percentage(average_price, pct, held, fees)
        if projection is None:
            return None
        return {
            "percentage": pct,
            "gross": projection["gross"],
            "net": projection["net"],
        }

    @staticmethod
    def _row(
        average_price: Optional[float],
        percentage: Any,
        held: float,
        fees: Optional[FeeConfig],
        custom: bool,
    ) -> Dict[str, Any]:
        projection = ProfitCalculator.at_percentage(average_price, percentage, held, fees)
        return {
            "percentage": parse_number(percentage),
            "custom": custom,
            "selling_price": projection["selling_price"] if projection else None,
            "gross": projection["gross"] if projection else None,
            "net": projection["net"] if projection else None,
        }
