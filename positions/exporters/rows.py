"""Flatten a calculation into (item, value) rows for export."""

from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from positions.calculators import AverageCostCalculator, FeeConfig, fee_title, format_fixed


def build_export_rows(
    lots: Sequence[Mapping[str, Any]],
    aggregate: Mapping[str, Optional[float]],
    fees: FeeConfig,
    targets: Sequence[Dict[str, Any]],
    target_summary: Optional[Dict[str, float]] = None,
    desired_price: str = "",
) -> List[Tuple[str, Any]]:
    """
    Build export rows for the Excel and print exporters.

    Incomplete lots are listed with '-' values.
    """
    rows: List[Tuple[str, Any]] = [("Fees (buy / sell %)", fee_title(fees))]

    for i, lot in enumerate(lots, start=1):
        spend = AverageCostCalculator.spend_row(lot, fees)
        rows.append((f"Position {i} price", lot.get("price") or "-"))
        rows.append((f"Position {i} quantity", lot.get("quantity") or "-"))
        rows.append((f"Position {i} spending", spend["spend"] or "-"))
        if fees["buy_fee_enabled"]:
            rows.append((f"Position {i} held quantity", spend["held_quantity"] or "-"))

    rows.append(("Average buy price", format_fixed(aggregate.get("average_price"))))
    rows.append(("Total held quantity", format_fixed(aggregate.get("total_held_quantity"))))
    rows.append(("Total spent", format_fixed(aggregate.get("total_spent"))))

    for row in targets:
        label = "Custom" if row.get("custom") else "Target"
        pct = row.get("percentage")
        pct_text = f"{pct:g}%" if pct is not None else "-"
        rows.append((f"{label} {pct_text} selling price", format_fixed(row.get("selling_price"))))
        rows.append((f"{label} {pct_text} gross", format_fixed(row.get("gross"))))
        rows.append((f"{label} {pct_text} net", format_fixed(row.get("net"))))

    if desired_price:
        rows.append(("Desired selling price", desired_price))
    if target_summary:
        rows.append(("Profit percentage at desired price", format_fixed(target_summary["percentage"])))
        rows.append(("Profit gross at desired price", format_fixed(target_summary["gross"])))
        rows.append(("Profit net at desired price", format_fixed(target_summary["net"])))

    return rows
