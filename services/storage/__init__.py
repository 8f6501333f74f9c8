"""Storage layer for calculator state persistence."""

from .local_storage import LocalStorage
from .memory_storage import MemoryStorage
from .storage_service import StorageService

__all__ = ["LocalStorage", "MemoryStorage", "StorageService"]
