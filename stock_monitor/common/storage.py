"""Local JSON key-value store.

Every read falls back to a default when the file is missing or unreadable,
and every write serializes the whole mapping back to disk.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class KeyValueStore:
    """JSON-file backed key-value store.

    Usage:
        store = KeyValueStore(Path("data/dashboard_store.json"))
        ids = store.get("favoriteSkus", [])
        store.set("favoriteSkus", ids + ["TS-BL-01"])
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        data = self._read()
        if key not in data:
            return default
        return data[key]

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key`` and persist the file."""
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> bool:
        """Remove ``key``. Returns True if it was present."""
        data = self._read()
        if key not in data:
            return False
        del data[key]
        self._write(data)
        return True

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read store %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring non-object store content in %s", self.path)
            return {}
        return data

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
