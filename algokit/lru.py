"""A fixed-capacity least-recently-used cache."""

from collections import OrderedDict
from typing import Hashable


class LRUCache:
    """Map keys to values, evicting the least recently used entry when full."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: "OrderedDict[Hashable, int]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def get(self, key: Hashable) -> int:
        """Return the value for ``key`` and mark it most recent; -1 if absent."""
        if key not in self._entries:
            return -1
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: Hashable, value: int) -> None:
        """Store ``value`` under ``key`` as the most recent entry, evicting if full."""
        self._entries.pop(key, None)
        if len(self._entries) == self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value