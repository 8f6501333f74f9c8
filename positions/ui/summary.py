"""UI component for the average price summary."""

from __future__ import annotations
from typing import Mapping, Optional
import streamlit as st


def render_summary(aggregate: Mapping[str, Optional[float]]) -> None:
    """
    Render average buy price, total held quantity and total spent.

    Nothing is shown until at least one lot is complete.
    """
    if aggregate.get("average_price") is None:
        return

    c1, c2, c3 = st.columns(3)

    with c1:
        st.metric("Average Buy Price ($)", f"{aggregate['average_price']}")

    with c2:
        st.metric("Total Held Quantity", f"{aggregate['total_held_quantity']}")

    with c3:
        st.metric("Total Spent ($)", f"{aggregate['total_spent']}")
