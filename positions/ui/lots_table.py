"""
Lots Table UI Component
=======================

Purchase lot entry: one row per lot with price and quantity inputs,
spending and held quantity, and a remove button.

Every change is written back to the state store right away, so the
lots survive a page reload.
"""

from __future__ import annotations
from typing import List
import streamlit as st

from positions.calculators import AverageCostCalculator, FeeConfig
from positions.lots import Lot, update_lot, add_lot, remove_lot, clear_lots
from services.state_store import StateStore


def render_lots_table(store: StateStore, fees: FeeConfig) -> List[Lot]:
    """
    Render the lots table with Add/Clear buttons.

    Args:
        store: State store the lots are saved to
        fees: Current fee configuration

    Returns:
        Current lot list
    """
    if "lots" not in st.session_state:
        st.session_state.lots = store.load_purchases()
    st.session_state.setdefault("lots_version", 0)

    show_held = fees["buy_fee_enabled"]
    widths = [3, 3, 3, 3, 1] if show_held else [3, 3, 3, 1]

    header = st.columns(widths)
    labels = ["Price", "Quantity", "Spending"] + (["Held Quantity"] if show_held else []) + [""]
    for col, label in zip(header, labels):
        col.markdown(f"**{label}**")

    for index, lot in enumerate(st.session_state.lots):
        _render_lot_row(store, fees, index, lot, widths, show_held)

    b1, b2, _ = st.columns([2, 2, 6])
    with b1:
        st.button("➕ Add Position", on_click=_on_add, args=(store,), use_container_width=True)
    with b2:
        st.button("🗑️ Clear Positions", on_click=_on_clear, args=(store,), use_container_width=True)

    return st.session_state.lots


def _render_lot_row(
    store: StateStore,
    fees: FeeConfig,
    index: int,
    lot: Lot,
    widths: List[int],
    show_held: bool,
) -> None:
    """Render one lot row."""
    version = st.session_state.lots_version
    cols = st.columns(widths)

    with cols[0]:
        price = st.text_input(
            f"Price for purchase {index + 1}",
            value=lot["price"],
            placeholder="Enter price",
            key=f"lot_price_{version}_{index}",
            label_visibility="collapsed",
        )
    with cols[1]:
        quantity = st.text_input(
            f"Quantity for purchase {index + 1}",
            value=lot["quantity"],
            placeholder="Enter quantity",
            key=f"lot_quantity_{version}_{index}",
            label_visibility="collapsed",
        )

    if price != lot["price"] or quantity != lot["quantity"]:
        lots = update_lot(st.session_state.lots, index, "price", price)
        lots = update_lot(lots, index, "quantity", quantity)
        _store_lots(store, lots)

    spend = AverageCostCalculator.spend_row(st.session_state.lots[index], fees)
    cols[2].write(f"${spend['spend']}" if spend["spend"] else "-")
    if show_held:
        cols[3].write(spend["held_quantity"] or "-")

    with cols[-1]:
        st.button(
            "🗑️",
            key=f"lot_remove_{version}_{index}",
            help=f"Remove purchase {index + 1}",
            on_click=_on_remove,
            args=(store, index),
        )


# ============================================================================
# CALLBACKS
# ============================================================================

def _on_add(store: StateStore) -> None:
    _store_lots(store, add_lot(st.session_state.lots), rebuild=True)


def _on_clear(store: StateStore) -> None:
    _store_lots(store, clear_lots(), rebuild=True)


def _on_remove(store: StateStore, index: int) -> None:
    _store_lots(store, remove_lot(st.session_state.lots, index), rebuild=True)


def _store_lots(store: StateStore, lots: List[Lot], rebuild: bool = False) -> None:
    """Update session lots and persist them."""
    st.session_state.lots = lots
    if rebuild:
        # New widget keys so inputs pick up the shifted rows
        st.session_state.lots_version = st.session_state.get("lots_version", 0) + 1
    try:
        store.save_purchases(lots)
    except OSError as e:
        st.session_state.storage_error = f"Could not save positions: {e}"
