"""
Per-user browse position in the catalog.
"""

from typing import Optional

from storefront.core.catalog import Catalog
from storefront.core.session.store import MemorySessionStore, SessionStore


class BrowseCursor:
    """Index into catalog.ids_in_order(), clamped to [0, count - 1]."""

    def __init__(self, catalog: Catalog, store: Optional[SessionStore[int, int]] = None):
        self.catalog = catalog
        self._store = store if store is not None else MemorySessionStore()

    def _last_index(self) -> int:
        return max(self.catalog.count() - 1, 0)

    def current(self, user_id: int) -> int:
        index = self._store.get(user_id) or 0
        return min(max(index, 0), self._last_index())

    def start(self, user_id: int) -> int:
        self._store.set(user_id, 0)
        return 0

    def next(self, user_id: int) -> int:
        index = min(self.current(user_id) + 1, self._last_index())
        self._store.set(user_id, index)
        return index

    def prev(self, user_id: int) -> int:
        index = max(self.current(user_id) - 1, 0)
        self._store.set(user_id, index)
        return index
