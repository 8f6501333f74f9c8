"""
Profit Targets UI Component
===========================

Profit projections at fixed and custom markup percentages, and the
profit percentage implied by a desired selling price.

The custom percentage and desired price inputs are persisted through the
state store; the projections themselves are recomputed on every run.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

import pandas as pd
import streamlit as st

from positions.calculators import ProfitCalculator, FeeConfig, format_fixed
from services.state_store import StateStore


NO_DATA_HINT = "Enter purchase details to see profit calculations."


# ============================================================================
# PROFIT TARGETS TABLE
# ============================================================================

def render_profit_targets(
    store: StateStore,
    aggregate: Mapping[str, Optional[float]],
    fees: FeeConfig,
    percentages: Sequence[float],
) -> List[Dict[str, Any]]:
    """
    Render the profit targets table with a custom percentage row.

    Returns:
        Target rows as computed by ProfitCalculator.targets
    """
    st.subheader("Profit Targets")

    custom = _render_persisted_input(
        "Custom profit %",
        state_key="custom_profit",
        loader=store.load_custom_profit,
        saver=store.save_custom_profit,
        placeholder="Custom %",
    )

    rows = ProfitCalculator.targets(aggregate, fees, percentages=percentages, custom=custom)
    st.dataframe(targets_frame(rows), hide_index=True, use_container_width=True)

    if aggregate.get("average_price") is None:
        st.caption(NO_DATA_HINT)

    return rows


def targets_frame(rows: Sequence[Mapping[str, Any]]) -> pd.DataFrame:
    """Display table for target rows; missing values show as '-'."""
    records = []
    for row in rows:
        pct = row.get("percentage")
        pct_text = f"{pct:g}%" if pct is not None else "-"
        selling = row.get("selling_price")
        records.append({
            "Profit %": f"{pct_text} (custom)" if row.get("custom") else pct_text,
            "Gross $": format_fixed(row.get("gross")),
            "Net $": format_fixed(row.get("net")),
            "Selling Price": f"${format_fixed(selling)}" if selling is not None else "-",
        })
    return pd.DataFrame(records, columns=["Profit %", "Gross $", "Net $", "Selling Price"])


# ============================================================================
# DESIRED PRICE
# ============================================================================

def render_desired_price(
    store: StateStore,
    aggregate: Mapping[str, Optional[float]],
    fees: FeeConfig,
) -> Tuple[str, Optional[Dict[str, float]]]:
    """
    Render the desired selling price input and the solved profit.

    Returns:
        (desired_price_text, summary or None)
    """
    st.subheader("Calculate Profit")

    desired = _render_persisted_input(
        "Desired Selling Price",
        state_key="desired_price",
        loader=store.load_desired_price,
        saver=store.save_desired_price,
        placeholder="Enter desired price",
    )

    summary = ProfitCalculator.target_summary(aggregate, desired, fees)

    if summary is not None:
        c1, c2, c3 = st.columns(3)
        with c1:
            st.metric("Profit Percentage", f"{summary['percentage']}%")
        with c2:
            st.metric("Profit Gross ($)", format_fixed(summary["gross"]))
        with c3:
            st.metric("Profit Net ($)", format_fixed(summary["net"]))
    elif aggregate.get("average_price") is None:
        st.caption("Enter purchase details to calculate profit.")

    return desired, summary


def _render_persisted_input(
    label: str,
    state_key: str,
    loader: Callable[[], str],
    saver: Callable[[str], None],
    placeholder: str,
) -> str:
    """Text input whose value is loaded once and saved on every change."""
    if state_key not in st.session_state:
        st.session_state[state_key] = loader()

    def _on_change() -> None:
        value = st.session_state[f"{state_key}_input"]
        st.session_state[state_key] = value
        try:
            saver(value)
        except OSError as e:
            st.session_state.storage_error = f"Could not save {label.lower()}: {e}"

    st.text_input(
        label,
        value=st.session_state[state_key],
        placeholder=placeholder,
        key=f"{state_key}_input",
        on_change=_on_change,
    )
    return st.session_state[state_key]
