"""Average cost calculator - Pure calculation logic."""

from __future__ import annotations
import math
from typing import Any, Dict, Iterable, Mapping, Optional

from .fees import FeeConfig, held_quantity
from .numbers import parse_number, to_fixed, format_fixed


class AverageCostCalculator:
    """Handles average buy price and per-lot spend calculations."""

    @staticmethod
    def parse_lot(lot: Mapping[str, Any]) -> Optional[Dict[str, float]]:
        """
        Parse a lot's price and quantity.

        Returns:
            {'price', 'quantity'} as floats, or None if either is not numeric
        """
        price = parse_number(lot.get("price"))
        quantity = parse_number(lot.get("quantity"))
        if price is None or quantity is None:
            return None
        return {"price": price, "quantity": quantity}

    @staticmethod
    def calculate(
        lots: Iterable[Mapping[str, Any]],
        fees: Optional[FeeConfig] = None,
    ) -> Dict[str, Optional[float]]:
        """
        Calculate the volume-weighted average buy price.

        Incomplete lots (blank or non-numeric price/quantity) are skipped.
        The average divides total cost by the fee-adjusted held quantity.
        Totals too large to represent also count as no data.

        Returns:
            Dict with 'average_price' (None when there is no data),
            'total_held_quantity' and 'total_spent', rounded to 4 decimals
        """
        total_cost = 0.0
        total_held = 0.0

        for lot in lots or []:
            parsed = AverageCostCalculator.parse_lot(lot)
            if parsed is None:
                continue
            total_cost += parsed["price"] * parsed["quantity"]
            total_held += held_quantity(parsed["quantity"], fees)

        average = total_cost / total_held if total_held else 0.0
        if total_held == 0 or not all(math.isfinite(v) for v in (total_cost, total_held, average)):
            return {
                "average_price": None,
                "total_held_quantity": 0.0,
                "total_spent": 0.0,
            }

        return {
            "average_price": to_fixed(average),
            "total_held_quantity": to_fixed(total_held),
            "total_spent": to_fixed(total_cost),
        }

    @staticmethod
    def spend_row(
        lot: Mapping[str, Any],
        fees: Optional[FeeConfig] = None,
    ) -> Dict[str, Optional[str]]:
        """
        Per-lot display values.

        Returns:
            {'spend', 'held_quantity'} as 4-decimal strings, None for
            incomplete lots or values too large to represent
        """
        parsed = AverageCostCalculator.parse_lot(lot)
        if parsed is None:
            return {"spend": None, "held_quantity": None}

        spend = parsed["price"] * parsed["quantity"]
        held = held_quantity(parsed["quantity"], fees)
        return {
            "spend": format_fixed(spend) if math.isfinite(spend) else None,
            "held_quantity": format_fixed(held) if math.isfinite(held) else None,
        }
