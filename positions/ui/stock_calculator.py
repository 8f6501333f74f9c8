"""
Stock Calculator UI
===================

Main orchestration module for the average price and profit workflow.

Workflow:
1. Fee configuration → FeeConfig
2. Lots table → current lots (persisted)
3. Average cost aggregate, recomputed from scratch
4. Summary
5. Profit targets (fixed + custom %)
6. Desired price → solved profit %
7. Export options

Related Files:
- positions/calculators/: AverageCostCalculator, ProfitCalculator
- positions/lots.py: lot list operations
- services/state_store.py: persisted lots and text inputs
- positions/exporters/: Excel and print exporters
"""

from __future__ import annotations
from typing import Sequence
import streamlit as st

from positions.calculators import AverageCostCalculator
from positions.exporters import build_export_rows, export_to_excel, export_to_print
from services.state_store import StateStore
from .fee_config import render_fee_config
from .lots_table import render_lots_table
from .profit_targets import render_profit_targets, render_desired_price
from .summary import render_summary


def compute_positions(
    *,
    store: StateStore,
    default_buy_fee: float,
    default_sell_fee: float,
    profit_steps: Sequence[float],
) -> None:
    """
    Render the calculator and recompute every derived value.

    Args:
        store: State store for lots, custom profit and desired price
        default_buy_fee: Initial buy fee %
        default_sell_fee: Initial sell fee %
        profit_steps: Fixed profit percentages for the targets table
    """
    left, right = st.columns(2, gap="large")

    with left:
        fees = render_fee_config(default_buy_fee, default_sell_fee)
        lots = render_lots_table(store, fees)
        aggregate = AverageCostCalculator.calculate(lots, fees)
        render_summary(aggregate)

    with right:
        targets = render_profit_targets(store, aggregate, fees, profit_steps)
        desired, target_summary = render_desired_price(store, aggregate, fees)

    _render_storage_messages(store)

    if aggregate["average_price"] is not None:
        _render_export_section(
            build_export_rows(lots, aggregate, fees, targets, target_summary, desired)
        )


def _render_storage_messages(store: StateStore) -> None:
    """Show storage read warnings and write errors."""
    warning = store.get_last_warning()
    if warning:
        st.warning(warning)

    error = st.session_state.pop("storage_error", None)
    if error:
        st.error(error)


def _render_export_section(export_rows) -> None:
    """Render Excel and print export buttons."""
    st.markdown("---")
    e1, e2 = st.columns(2)
    with e1:
        export_to_excel(export_rows)
    with e2:
        export_to_print(export_rows)
