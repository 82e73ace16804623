"""Favorite SKU ids persisted in the local key-value store."""

from __future__ import annotations

import logging
from pathlib import Path

from stock_monitor.common.config import Settings, settings as default_settings
from stock_monitor.common.storage import KeyValueStore

logger = logging.getLogger(__name__)


class FavoritesStore:
    """Ordered set of favorite SKU ids stored as a JSON array.

    The list is read once at construction and written back on every toggle.
    """

    def __init__(
        self,
        store: KeyValueStore | None = None,
        key: str | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or default_settings
        self.store = store or KeyValueStore(Path(settings.dashboard.store_path))
        self.key = key or settings.dashboard.favorites_key
        self._ids: list[str] = self._load()

    @property
    def ids(self) -> list[str]:
        """Favorite ids in the order they were added."""
        return list(self._ids)

    def __contains__(self, sku_id: object) -> bool:
        return sku_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def toggle(self, sku_id: str) -> bool:
        """Add or remove ``sku_id``. Returns True if it is now a favorite."""
        if sku_id in self._ids:
            self._ids = [i for i in self._ids if i != sku_id]
            added = False
        else:
            self._ids = self._ids + [sku_id]
            added = True
        try:
            self.store.set(self.key, self._ids)
        except OSError as e:
            logger.error("Could not persist favorites to %s: %s", self.store.path, e)
        return added

    def _load(self) -> list[str]:
        value = self.store.get(self.key, [])
        if not isinstance(value, list) or not all(isinstance(i, str) for i in value):
            logger.warning("Ignoring malformed '%s' entry in %s", self.key, self.store.path)
            return []
        return list(value)
