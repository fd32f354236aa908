"""Probabilistic skip list over integers."""
from __future__ import annotations

import random
from typing import Iterator, List, NamedTuple, Optional

from dsviz.logging_config import get_logger

logger = get_logger("SkipList")

DEFAULT_MAX_LEVEL = 4
DEFAULT_PROMOTION_PROBABILITY = 0.33


class SkipListNode:
    """
    A skip list node. ``forward[i]`` is the next node on level ``i``; the
    node takes part in exactly ``len(forward)`` levels.
    """
    __slots__ = ("value", "forward")

    def __init__(self, value: Optional[int], level: int):
        self.value = value
        self.forward: List[Optional[SkipListNode]] = [None] * level

    @property
    def level(self) -> int:
        return len(self.forward)

    def __repr__(self) -> str:
        return f"SkipListNode(value={self.value!r}, level={self.level})"


class LevelEntry(NamedTuple):
    value: int
    level: int


class SkipList:
    """
    Skip list with at most ``max_level`` levels.

    The head is a sentinel (value None) spanning all ``max_level`` levels;
    ``level`` is the number of levels currently in use.
    """
    __slots__ = ("max_level", "p", "head", "level", "_size", "_rng")

    def __init__(
        self,
        max_level: int = DEFAULT_MAX_LEVEL,
        p: float = DEFAULT_PROMOTION_PROBABILITY,
        rng: Optional[random.Random] = None,
    ):
        if max_level < 1:
            raise ValueError(f"max_level must be >= 1, got {max_level}")
        if not 0.0 <= p < 1.0:
            raise ValueError(f"p must be in [0, 1), got {p}")
        self.max_level = max_level
        self.p = p
        self._rng = rng or random.Random()
        self.head = SkipListNode(None, max_level)
        self.level = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self.head.forward[0]
        while node is not None:
            yield node.value
            node = node.forward[0]

    def __contains__(self, value: int) -> bool:
        return self.search(value)

    def random_level(self) -> int:
        """Geometric level in [1, max_level] with promotion probability ``p``."""
        lvl = 1
        while self._rng.random() < self.p and lvl < self.max_level:
            lvl += 1
        return lvl

    def _find_update(self, value: int) -> List[SkipListNode]:
        """
        Descend from the top used level, recording per level the rightmost
        node whose value is smaller than ``value``.
        """
        update = [self.head] * self.max_level
        node = self.head
        for i in range(self.level - 1, -1, -1):
            while node.forward[i] is not None and node.forward[i].value < value:
                node = node.forward[i]
            update[i] = node
        return update

    def insert(self, value: int) -> None:
        update = self._find_update(value)

        new_level = self.random_level()
        if new_level > self.level:
            for i in range(self.level, new_level):
                update[i] = self.head
            self.level = new_level

        new_node = SkipListNode(value, new_level)
        for i in range(new_level):
            new_node.forward[i] = update[i].forward[i]
            update[i].forward[i] = new_node
        self._size += 1
        logger.debug("Inserted %s at level %d", value, new_level)

    def remove(self, value: int) -> bool:
        """
        Unlink the first node holding ``value``.

        Returns:
            bool: False if the value is not present.
        """
        update = self._find_update(value)
        target = update[0].forward[0]
        if target is None or target.value != value:
            return False

        for i in range(self.level):
            if update[i].forward[i] is not target:
                break
            update[i].forward[i] = target.forward[i]

        while self.level > 0 and self.head.forward[self.level - 1] is None:
            self.level -= 1
        self._size -= 1
        return True

    def search(self, value: int) -> bool:
        node = self.head
        for i in range(self.level - 1, -1, -1):
            while node.forward[i] is not None and node.forward[i].value < value:
                node = node.forward[i]
        nxt = node.forward[0]
        return nxt is not None and nxt.value == value

    def to_list(self) -> List[LevelEntry]:
        """Walk level 0 reporting each value with the number of levels it spans."""
        out = []
        node = self.head.forward[0]
        while node is not None:
            out.append(LevelEntry(node.value, node.level))
            node = node.forward[0]
        return out

    def level_values(self, level: int) -> List[int]:
        """Values linked on a single level, in order."""
        out = []
        node = self.head.forward[level]
        while node is not None:
            out.append(node.value)
            node = node.forward[level]
        return out

    def clear(self) -> None:
        self.head = SkipListNode(None, self.max_level)
        self.level = 0
        self._size = 0
