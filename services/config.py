"""
App settings.
Each setting is read from the environment first, then Streamlit secrets,
then falls back to its default.
"""

from __future__ import annotations
import math
import os
from pathlib import Path
from typing import Optional, Tuple

from .utils import get_data_dir


DEFAULT_STORAGE_FILENAME = "storage.json"
DEFAULT_FEE_PERCENT = 0.02
DEFAULT_PROFIT_STEPS: Tuple[float, ...] = (1, 2, 3, 4, 5)


def get_secret(name: str) -> Optional[str]:
    """Get setting from environment or Streamlit secrets."""
    value = os.environ.get(name)
    if value:
        return value
    try:
        import streamlit as st
        value = st.secrets.get(name)
    except Exception:
        return None
    return str(value) if value not in (None, "") else None


def storage_path() -> Path:
    """Path of the local storage file."""
    env_path = get_secret("STOCK_CALC_STORAGE_PATH")
    if env_path:
        return Path(env_path).expanduser().resolve()
    return (get_data_dir() / DEFAULT_STORAGE_FILENAME).resolve()


def storage_disabled() -> bool:
    """True when persistence is switched off (state kept in memory only)."""
    flag = get_secret("STOCK_CALC_DISABLE_STORAGE") or ""
    return flag.strip() in ("1", "true", "True")


def default_buy_fee() -> float:
    return _float_setting("STOCK_CALC_BUY_FEE", DEFAULT_FEE_PERCENT)


def default_sell_fee() -> float:
    return _float_setting("STOCK_CALC_SELL_FEE", DEFAULT_FEE_PERCENT)


def profit_steps() -> Tuple[float, ...]:
    """
    Fixed profit percentages shown in the targets table.

    Read from a comma list like '1,2,3,4,5'; malformed lists use the default.
    """
    raw = get_secret("STOCK_CALC_PROFIT_STEPS")
    if not raw:
        return DEFAULT_PROFIT_STEPS

    steps = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            step = float(part)
        except ValueError:
            return DEFAULT_PROFIT_STEPS
        if not math.isfinite(step):
            return DEFAULT_PROFIT_STEPS
        steps.append(step)

    return tuple(steps) or DEFAULT_PROFIT_STEPS


def _float_setting(name: str, default: float, low: float = 0.0, high: float = 100.0) -> float:
    """Float setting within [low, high]; anything else uses the default."""
    raw = get_secret(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if not math.isfinite(value) or not low <= value <= high:
        return default
    return value
