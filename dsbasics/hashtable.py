"""A string dictionary stored in an open-addressing hash table with quadratic probing."""

from enum import Enum

DEFAULT_DESCRIPTION = "Definicio no existent"


class HashTableFullError(RuntimeError):
    """Raised when quadratic probing finds no slot for a new key."""


class _State(Enum):
    FREE = 0
    OCCUPIED = 1
    DELETED = 2


class HashTable:
    """Maps keys to descriptions. The table doubles once the load factor is reached."""

    def __init__(self, capacity=10, load_factor=0.5, default_description=DEFAULT_DESCRIPTION):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._load_factor = load_factor
        self._default_description = default_description
        self._entries = [("", "")] * capacity
        self._states = [_State.FREE] * capacity
        self._count = 0

    @property
    def capacity(self):
        """Number of slots in the table."""
        return self._capacity

    def __len__(self):
        return self._count

    def _hash(self, key):
        value = 0
        for position, char in enumerate(key):
            value = (value + ord(char) * 2**position) % self._capacity
        return value

    def _matches(self, index, key):
        return self._states[index] is _State.OCCUPIED and self._entries[index][0] == key

    def _locate(self, key):
        """Index of the slot holding ``key``, or None when it is not stored."""
        start = self._hash(key)
        for step in range(self._capacity + 1):
            index = (start + step * step) % self._capacity
            if self._states[index] is _State.FREE:
                return None
            if self._matches(index, key):
                return index
        return None

    def _place(self, key, description):
        start = self._hash(key)
        for step in range(self._capacity - 1):
            index = (start + step * step) % self._capacity
            if self._states[index] is not _State.OCCUPIED:
                break
        else:
            raise HashTableFullError(f"no free slot found for key {key!r}")
        self._entries[index] = (key, description)
        self._states[index] = _State.OCCUPIED
        self._count += 1
        if self._count / self._capacity >= self._load_factor:
            self._grow()

    def _grow(self):
        old = [
            entry
            for entry, state in zip(self._entries, self._states)
            if state is _State.OCCUPIED
        ]
        self._capacity *= 2
        self._entries = [("", "")] * self._capacity
        self._states = [_State.FREE] * self._capacity
        self._count = 0
        for key, description in old:
            self._place(key, description)

    def insert(self, key, description):
        """Add ``key`` with ``description``; a key already stored is left unchanged."""
        if self._locate(key) is None:
            self._place(key, description)

    def find(self, key):
        """Return the description stored for ``key``, or None when it is absent."""
        index = self._locate(key)
        return None if index is None else self._entries[index][1]

    def remove(self, key):
        """Delete ``key``; return True when it was stored."""
        index = self._hash(key)
        step = 0
        while (
            self._states[index] is not _State.FREE
            and not self._matches(index, key)
            and step < self._capacity
        ):
            index = (index + step * step) % self._capacity
            step += 1
        if not self._matches(index, key):
            return False
        self._entries[index] = ("", "")
        self._states[index] = _State.DELETED
        self._count -= 1
        return True

    def lookup(self, key):
        """Return the key itself when stored, otherwise the default description."""
        index = self._locate(key)
        return self._default_description if index is None else self._entries[index][0]

    def slot(self, index):
        """The (key, description) pair held at slot ``index``."""
        if not 0 <= index < self._capacity:
            raise IndexError(f"slot {index} out of range")
        return self._entries[index]

    def __getitem__(self, key):
        if isinstance(key, int):
            return self.slot(key)
        return self.lookup(key)

    def __str__(self):
        return "".join(
            f"POS: {index}  CLAU: {key}  VALOR: {description}\n"
            for index, ((key, description), state) in enumerate(zip(self._entries, self._states))
            if state is _State.OCCUPIED
        )