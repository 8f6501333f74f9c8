"""In-memory storage, used when persistence is disabled and in tests."""

from __future__ import annotations
from typing import Dict, Optional


class MemoryStorage:
    """Dict-backed storage with the same interface as LocalStorage."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get_raw(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_raw(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def get_mtime(self) -> str:
        return "(in memory)"
