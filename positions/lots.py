"""Purchase lot list management."""

from __future__ import annotations
from typing import Any, List, TypedDict


LOT_FIELDS = ("price", "quantity")
DEFAULT_LOT_COUNT = 3


class Lot(TypedDict):
    price: str
    quantity: str


def blank_lot() -> Lot:
    """Return an empty lot."""
    return {"price": "", "quantity": ""}


def default_lots() -> List[Lot]:
    """Return the starting list of three blank lots."""
    return [blank_lot() for _ in range(DEFAULT_LOT_COUNT)]


def update_lot(lots: List[Lot], index: int, field: str, value: str) -> List[Lot]:
    """
    Set one field of the lot at index.

    Returns:
        New list with a copy of the edited lot

    Raises:
        ValueError: If field is not 'price' or 'quantity'
        IndexError: If index is out of range
    """
    if field not in LOT_FIELDS:
        raise ValueError(f"Unknown lot field: {field!r}")
    if not 0 <= index < len(lots):
        raise IndexError(f"Lot index {index} out of range")

    new_lots = list(lots)
    edited = dict(new_lots[index])
    edited[field] = "" if value is None else str(value)
    new_lots[index] = edited
    return new_lots


def add_lot(lots: List[Lot]) -> List[Lot]:
    """Append a blank lot."""
    return list(lots) + [blank_lot()]


def remove_lot(lots: List[Lot], index: int) -> List[Lot]:
    """
    Remove the lot at index.

    The list never drops below one lot: removing the only lot is a no-op.
    """
    if len(lots) <= 1:
        return list(lots)
    return [lot for i, lot in enumerate(lots) if i != index]


def clear_lots() -> List[Lot]:
    """Reset to the three blank lots."""
    return default_lots()


def normalize_lots(raw: Any) -> List[Lot]:
    """
    Coerce a stored value into a valid, non-empty lot list.

    Missing or malformed input gives the default lots. Field values are
    kept as strings exactly as stored; None becomes ''.
    """
    if not isinstance(raw, list):
        return default_lots()

    lots: List[Lot] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        lots.append({
            "price": _as_text(item.get("price")),
            "quantity": _as_text(item.get("quantity")),
        })

    return lots or default_lots()


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
