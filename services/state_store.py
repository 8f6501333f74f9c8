"""
State store - the calculator values that survive a page reload.
Wraps a StorageService; only the raw lots and the two text inputs are kept.
"""

from __future__ import annotations
from typing import Any, List, Optional

from positions.lots import Lot, default_lots, normalize_lots

from . import config
from .storage import LocalStorage, MemoryStorage, StorageService


STORAGE_KEYS = {
    "PURCHASES": "purchases",
    "CUSTOM_PROFIT": "customProfit",
    "DESIRED_PRICE": "desiredPrice",
}


class StateStore:
    """Typed access to the persisted calculator keys."""

    def __init__(self, storage: StorageService):
        self.storage = storage

    # ------------------------------------------------------------------
    # Lots
    # ------------------------------------------------------------------

    def load_purchases(self) -> List[Lot]:
        """Stored lot list, or three blank lots."""
        raw = self.storage.get(STORAGE_KEYS["PURCHASES"], None)
        if raw is None:
            return default_lots()
        return normalize_lots(raw)

    def save_purchases(self, lots: List[Lot]) -> None:
        self.storage.set(STORAGE_KEYS["PURCHASES"], [dict(lot) for lot in lots])

    # ------------------------------------------------------------------
    # Text inputs
    # ------------------------------------------------------------------

    def load_custom_profit(self) -> str:
        return _as_text(self.storage.get(STORAGE_KEYS["CUSTOM_PROFIT"], ""))

    def save_custom_profit(self, value: str) -> None:
        self.storage.set(STORAGE_KEYS["CUSTOM_PROFIT"], value or "")

    def load_desired_price(self) -> str:
        return _as_text(self.storage.get(STORAGE_KEYS["DESIRED_PRICE"], ""))

    def save_desired_price(self, value: str) -> None:
        self.storage.set(STORAGE_KEYS["DESIRED_PRICE"], value or "")

    def reset(self) -> None:
        """Forget every stored value."""
        for key in STORAGE_KEYS.values():
            self.storage.remove(key)

    def get_last_warning(self) -> Optional[str]:
        return self.storage.get_last_warning()


def open_state_store() -> StateStore:
    """
    Build the state store from settings.

    Uses the local JSON file unless persistence is disabled, in which
    case state lives in memory for this process only.
    """
    if config.storage_disabled():
        backend = MemoryStorage()
    else:
        backend = LocalStorage(config.storage_path())
    return StateStore(StorageService(backend))


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
