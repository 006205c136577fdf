"""
Keyed session storage.

Carts and browse cursors are keyed by user id, checkout dialogs by chat id.
Each concern gets its own store instance so the key spaces never mix.
Allows swapping the in-memory backend for a persistent one.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class SessionStore(ABC, Generic[K, V]):
    """Abstract keyed store with get-or-create semantics."""

    @abstractmethod
    def get(self, key: K) -> Optional[V]:
        """Return stored value or None."""
        pass

    @abstractmethod
    def set(self, key: K, value: V) -> None:
        """Store value under key."""
        pass

    @abstractmethod
    def delete(self, key: K) -> None:
        """Remove key; missing keys are ignored."""
        pass

    def get_or_create(self, key: K, factory: Callable[[], V]) -> V:
        value = self.get(key)
        if value is None:
            value = factory()
            self.set(key, value)
        return value

    def __contains__(self, key: K) -> bool:
        return self.get(key) is not None


class MemorySessionStore(SessionStore[K, V]):
    """Process-local dict backend. State is lost on restart."""

    def __init__(self):
        self._data: dict[K, V] = {}

    def get(self, key: K) -> Optional[V]:
        return self._data.get(key)

    def set(self, key: K, value: V) -> None:
        self._data[key] = value

    def delete(self, key: K) -> None:
        self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)
