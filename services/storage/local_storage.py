"""
Local file storage implementation.
Keeps every key of the calculator state in one local JSON file.
"""

from __future__ import annotations
import json
import os
from pathlib import Path
from typing import Dict, Optional


class LocalStorage:
    """Handles local file operations for stored keys."""

    def __init__(self, file_path: Path):
        """
        Initialize local storage.

        Args:
            file_path: Path to the storage JSON file
        """
        self.file_path = Path(file_path)

    def exists(self) -> bool:
        """Check if storage file exists."""
        return self.file_path.exists()

    def load(self) -> Dict[str, str]:
        """
        Load all stored entries from the local file.

        Returns:
            Dict of key -> raw stored text ({} if missing or unreadable)
        """
        if not self.file_path.exists():
            return {}

        try:
            with self.file_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            print(f"[local_storage.load] Could not read {self.file_path}: {e}")
            return {}

        if not isinstance(data, dict):
            return {}

        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def save(self, data: Dict[str, str]) -> Path:
        """
        Save all entries to the local file with atomic write.

        Args:
            data: Dict of key -> raw stored text

        Returns:
            Path to saved file

        Raises:
            IOError: If write fails
        """
        self.file_path.parent.mkdir(parents=True, exist_ok=True)

        # Atomic write: write to temp file first
        tmp_path = self.file_path.with_suffix(".json.tmp")

        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())

        os.replace(tmp_path, self.file_path)

        if not self.file_path.exists():
            raise IOError(f"Failed to write storage to {self.file_path}")

        return self.file_path

    def get_raw(self, key: str) -> Optional[str]:
        """Get raw stored text for key, or None."""
        return self.load().get(key)

    def set_raw(self, key: str, value: str) -> None:
        """Store raw text under key."""
        data = self.load()
        data[key] = value
        self.save(data)

    def remove(self, key: str) -> None:
        """Remove key if present."""
        data = self.load()
        if key in data:
            del data[key]
            self.save(data)

    def clear(self) -> None:
        """Remove every stored key."""
        self.save({})

    def get_mtime(self) -> str:
        """
        Get last modification time as formatted string.

        Returns:
            Formatted timestamp or '(not created yet)'
        """
        if not self.file_path.exists():
            return "(not created yet)"

        from datetime import datetime
        timestamp = datetime.fromtimestamp(self.file_path.stat().st_mtime)
        return timestamp.strftime("%Y-%m-%d %H:%M:%S")
