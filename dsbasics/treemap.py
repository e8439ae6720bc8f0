"""An ordered map kept in a red-black tree."""

from dataclasses import dataclass
from typing import Any

from dsbasics.rbtree import RedBlackTree


@dataclass(eq=False)
class KeyValue:
    """A key with its value; ordered and compared by key alone."""

    key: Any = None
    value: Any = None

    def __lt__(self, other):
        if not isinstance(other, KeyValue):
            return NotImplemented
        return self.key < other.key

    def __eq__(self, other):
        if not isinstance(other, KeyValue):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __str__(self):
        return f"<{self.key}, {self.value}>"


class TreeMap:
    """Map from ordered keys to values, backed by a red-black tree."""

    def __init__(self):
        self._tree = RedBlackTree()

    def is_empty(self):
        """True when the map holds no entries."""
        return self._tree.is_empty()

    def __getitem__(self, key):
        """Value stored for ``key``, or None when the key is absent."""
        entry = self._tree.search(KeyValue(key))
        return None if entry is None else entry.value

    def add(self, key, value):
        """Store ``value`` under ``key``, replacing any earlier value."""
        entry = self._tree.search(KeyValue(key))
        if entry is None:
            self._tree.insert(KeyValue(key, value))
        else:
            entry.value = value

    def copy(self):
        """Return an independent map with the same entries and shape."""
        duplicate = type(self)()
        duplicate._tree = self._tree.copy()
        return duplicate

    def __str__(self):
        return str(self._tree)