"""Fixed-capacity hash table with four slot placement strategies."""
from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional, Union

from dsviz.logging_config import get_logger

logger = get_logger("HashTable")

KNUTH_MULTIPLIER = 2654435761
UNIVERSAL_PRIME = 101
TABLE_FULL = -1


class HashStrategy(str, Enum):
    KNUTH = "knuth"
    UNIVERSAL = "universal"
    LINEAR = "linear"
    DOUBLE = "double"


class HashTable:
    """
    A slot array of ``table_size`` integers (None = empty).

    ``knuth`` and ``universal`` place a key at its hash index and overwrite
    whatever is there. ``linear`` and ``double`` probe for an open slot and
    report a full table with ``TABLE_FULL`` (-1).
    """
    __slots__ = ("_table_size", "_slots", "_strategy")

    def __init__(
        self,
        table_size: int = 10,
        strategy: Union[str, HashStrategy] = HashStrategy.KNUTH,
    ):
        self._slots: List[Optional[int]] = []
        self.table_size = table_size
        self.strategy = strategy

    @property
    def table_size(self) -> int:
        return self._table_size

    @table_size.setter
    def table_size(self, size: int) -> None:
        """Changing the size discards every stored key."""
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValueError(f"table_size must be a positive integer, got {size!r}")
        self._table_size = size
        self._slots = [None] * size

    @property
    def strategy(self) -> HashStrategy:
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: Union[str, HashStrategy]) -> None:
        try:
            self._strategy = HashStrategy(strategy)
        except ValueError:
            raise ValueError(f"Unknown hash strategy: {strategy!r}") from None

    @property
    def slots(self) -> List[Optional[int]]:
        return list(self._slots)

    def __len__(self) -> int:
        return sum(1 for s in self._slots if s is not None)

    def __contains__(self, key: int) -> bool:
        return key in self._slots

    @property
    def load_factor(self) -> float:
        return len(self) / self._table_size

    def is_full(self) -> bool:
        return all(s is not None for s in self._slots)

    # Hash functions

    def knuth_hash(self, key: int) -> int:
        return (key * KNUTH_MULTIPLIER % 2 ** 32) % self._table_size

    def universal_hash(self, key: int, a: int = 31, b: int = 17) -> int:
        return ((a * key + b) % UNIVERSAL_PRIME) % self._table_size

    def linear_probing(self, key: int) -> int:
        """First open slot at or after ``knuth_hash(key)``, wrapping; -1 if full."""
        index = self.knuth_hash(key)
        for _ in range(self._table_size):
            if self._slots[index] is None:
                return index
            index = (index + 1) % self._table_size
        return TABLE_FULL

    def double_hashing(self, key: int) -> int:
        """Probe ``h1 + i * h2`` for i in [0, table_size); -1 if no open slot."""
        h1 = self.knuth_hash(key)
        h2 = 1 + key % (self._table_size - 1) if self._table_size > 1 else 1
        for i in range(self._table_size):
            index = (h1 + i * h2) % self._table_size
            if self._slots[index] is None:
                return index
        return TABLE_FULL

    def index_for(self, key: int) -> int:
        """Slot the current strategy would place ``key`` in (no write)."""
        strategy = self._strategy
        if strategy is HashStrategy.KNUTH:
            return self.knuth_hash(key)
        if strategy is HashStrategy.UNIVERSAL:
            return self.universal_hash(key)
        if strategy is HashStrategy.LINEAR:
            return self.linear_probing(key)
        return self.double_hashing(key)

    # Mutation

    def insert(self, key: int) -> int:
        """
        Place ``key`` using the current strategy.

        Returns:
            int: The slot written, the existing slot if ``key`` is already
            stored (no write), or TABLE_FULL when no slot is available.
        """
        existing = self.index_of(key)
        if existing != -1:
            return existing
        index = self.index_for(key)
        if index == TABLE_FULL:
            logger.warning("Table full: could not place %s (%s)", key, self._strategy.value)
            return TABLE_FULL
        self._slots[index] = key
        return index

    def insert_many(self, keys: Iterable[int]) -> List[int]:
        """Insert each key in turn; a full table for one key does not stop the rest."""
        return [self.insert(k) for k in keys]

    def index_of(self, key: int) -> int:
        try:
            return self._slots.index(key)
        except ValueError:
            return -1

    def remove(self, key: int) -> bool:
        """Empty the first slot holding ``key``. No tombstone is left behind."""
        index = self.index_of(key)
        if index == -1:
            return False
        self._slots[index] = None
        return True

    def clear(self) -> None:
        self._slots = [None] * self._table_size

    def __repr__(self) -> str:
        return f"HashTable(table_size={self._table_size}, strategy={self._strategy.value!r})"
