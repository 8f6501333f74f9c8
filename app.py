"""
Streamlit entrypoint for the Stock Calculator.
- Average buy price over purchase lots, with optional buy/sell fees
- Profit targets and the profit % implied by a desired selling price
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root to Python path FIRST
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import streamlit as st

from services import config
from services.state_store import open_state_store
from positions.ui import compute_positions

# -----------------------------------------------------------------------------
# Page setup
# -----------------------------------------------------------------------------
st.set_page_config(page_title="Stock Calculator", page_icon="📈", layout="wide")

# -----------------------------------------------------------------------------
# State store (one per browser session)
# -----------------------------------------------------------------------------
if "state_store" not in st.session_state:
    st.session_state.state_store = open_state_store()

store = st.session_state.state_store

# -----------------------------------------------------------------------------
# Sidebar
# -----------------------------------------------------------------------------
with st.sidebar:
    st.markdown("### Storage")
    st.caption(f"Last saved: {store.storage.backend.get_mtime()}")
    if st.button("Reset saved values", use_container_width=True):
        store.reset()
        for key in ("lots", "custom_profit", "desired_price",
                    "custom_profit_input", "desired_price_input"):
            st.session_state.pop(key, None)
        st.session_state.lots_version = st.session_state.get("lots_version", 0) + 1
        st.rerun()

# -----------------------------------------------------------------------------
# Calculator UI
# -----------------------------------------------------------------------------
st.title("📈 Stock Calculator")
st.caption("Calculate average buy price and profit targets")
st.markdown("---")

compute_positions(
    store=store,
    default_buy_fee=config.default_buy_fee(),
    default_sell_fee=config.default_sell_fee(),
    profit_steps=config.profit_steps(),
)
