"""
Storage Service - key/value facade over a storage backend.
Values are stored JSON-encoded; unreadable entries fall back to defaults.
"""

from __future__ import annotations
import json
from typing import Any, Optional, Protocol


class StorageBackend(Protocol):
    def get_raw(self, key: str) -> Optional[str]: ...

    def set_raw(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...

    def clear(self) -> None: ...


class StorageService:
    """Synchronous get/set/remove/clear over string keys."""

    def __init__(self, backend: StorageBackend):
        """
        Initialize storage service.

        Args:
            backend: LocalStorage, MemoryStorage or anything with the same methods
        """
        self.backend = backend
        self._last_warning: Optional[str] = None

    def get_last_warning(self) -> Optional[str]:
        """Get last warning message (for UI display)."""
        return self._last_warning

    def _set_warning(self, message: str) -> None:
        self._last_warning = message
        print(f"[storage_service] {message}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Read and decode the value stored under key.

        Returns:
            Decoded value, or default if the key is missing, empty or corrupt
        """
        raw = self.backend.get_raw(key)
        if not raw:
            return default

        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            self._set_warning(f"Stored value for '{key}' is unreadable ({e}). Using default.")
            return default

    def set(self, key: str, value: Any) -> None:
        """
        Encode and store value under key (last write wins).

        Raises:
            IOError: If the backend fails to write
        """
        self.backend.set_raw(key, json.dumps(value, ensure_ascii=False))

    def remove(self, key: str) -> None:
        """Remove key from storage."""
        self.backend.remove(key)

    def clear(self) -> None:
        """Remove every key from storage."""
        self.backend.clear()
        self._last_warning = None
