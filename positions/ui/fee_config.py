"""UI component for buy/sell fee configuration."""

from __future__ import annotations
import streamlit as st

from positions.calculators import FeeConfig, make_fee_config, fee_title


def render_fee_config(default_buy_fee: float, default_sell_fee: float) -> FeeConfig:
    """
    Render fee toggles and percentage inputs.

    Fee settings live in session state only, they are not persisted.
    Percentages are kept outside the widget keys so a hidden input keeps
    its value while its fee is switched off.

    Returns:
        FeeConfig built from the current inputs
    """
    st.session_state.setdefault("buy_fee_enabled", True)
    st.session_state.setdefault("sell_fee_enabled", True)
    st.session_state.setdefault("buy_fee_percent", float(default_buy_fee))
    st.session_state.setdefault("sell_fee_percent", float(default_sell_fee))

    title = fee_title(current_fees())

    with st.expander(f"⚙️ Fee Configuration  ·  {title}"):
        st.checkbox("Enable Buy Fee", key="buy_fee_enabled")
        if st.session_state.buy_fee_enabled:
            _render_percent_input("Buy Fee %", "buy_fee_percent")

        st.checkbox("Enable Sell Fee", key="sell_fee_enabled")
        if st.session_state.sell_fee_enabled:
            _render_percent_input("Sell Fee %", "sell_fee_percent")

    return current_fees()


def current_fees() -> FeeConfig:
    """FeeConfig from session state."""
    return make_fee_config(
        buy_fee_enabled=st.session_state.get("buy_fee_enabled", True),
        buy_fee_percent=st.session_state.get("buy_fee_percent"),
        sell_fee_enabled=st.session_state.get("sell_fee_enabled", True),
        sell_fee_percent=st.session_state.get("sell_fee_percent"),
    )


def _render_percent_input(label: str, state_key: str) -> None:
    widget_key = f"{state_key}_input"

    def _sync() -> None:
        st.session_state[state_key] = st.session_state[widget_key]

    st.number_input(
        label,
        min_value=0.0,
        max_value=100.0,
        value=float(st.session_state[state_key]),
        step=0.01,
        format="%.4f",
        key=widget_key,
        on_change=_sync,
    )
