"""Self-organizing singly linked list with KMP pattern search."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from dsviz.logging_config import get_logger

logger = get_logger("LinkedList")


class ListNode:
    """A node in the linked list. Owned by its predecessor (or the list head)."""
    __slots__ = ("value", "next")

    def __init__(self, value: int):
        self.value = value
        self.next: Optional[ListNode] = None

    def __repr__(self) -> str:
        return f"ListNode(value={self.value!r})"


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of :meth:`LinkedList.search`.

    Attributes:
        index: Position of the hit before any reorganisation, or -1.
        prev: Value of the predecessor slot after reorganising.
        current: Value of the hit slot after reorganising; differs from the
            searched value only after a transpose.
        next: Value of the successor at the time of the hit.
    """
    index: int
    prev: Optional[int]
    current: Optional[int]
    next: Optional[int]

    @property
    def found(self) -> bool:
        return self.index >= 0


MISS = SearchResult(index=-1, prev=None, current=None, next=None)


def compute_prefix_table(pattern: List) -> List[int]:
    """
    KMP failure table: ``table[i]`` is the length of the longest proper prefix
    of ``pattern[:i + 1]`` that is also a suffix of it.
    """
    table = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            table[i] = length
            i += 1
        elif length != 0:
            length = table[length - 1]
        else:
            table[i] = 0
            i += 1
    return table


def pattern_digits(pattern: str) -> List[Optional[int]]:
    """
    Convert each character of ``pattern`` to an int digit.

    Characters that are not decimal digits become None, which never equals a
    list value, so a pattern containing them cannot match.
    """
    return [int(ch) if ch.isdecimal() else None for ch in pattern]


class LinkedList:
    """
    Singly linked list of unique integers.

    Supports the move-to-front and transpose self-organizing heuristics on
    search, and Knuth-Morris-Pratt search for a run of digits.
    """
    __slots__ = ("head", "size")

    def __init__(self):
        self.head: Optional[ListNode] = None
        self.size = 0

    def __len__(self) -> int:
        return self.size

    def __bool__(self) -> bool:
        return self.head is not None

    def __iter__(self) -> Iterator[int]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({self.to_list()!r})"

    def contains(self, value: int) -> bool:
        node = self.head
        while node is not None:
            if node.value == value:
                return True
            node = node.next
        return False

    __contains__ = contains

    def insert(self, value: int) -> bool:
        """
        Append ``value`` at the tail.

        Returns:
            bool: False (and no change) if the value is already present.
        """
        if self.contains(value):
            return False

        new_node = ListNode(value)
        if self.head is None:
            self.head = new_node
        else:
            node = self.head
            while node.next is not None:
                node = node.next
            node.next = new_node
        self.size += 1
        return True

    def remove(self, value: int) -> bool:
        """Unlink the first node holding ``value``. Returns False if absent."""
        if self.head is None:
            return False
        if self.head.value == value:
            self.head = self.head.next
            self.size -= 1
            return True

        node = self.head
        while node.next is not None and node.next.value != value:
            node = node.next
        if node.next is None:
            return False
        node.next = node.next.next
        self.size -= 1
        return True

    def search(
        self,
        value: int,
        move_to_front: bool = False,
        transpose: bool = False,
    ) -> SearchResult:
        """
        Linear search from the head, optionally reorganising the list on a hit.

        ``move_to_front`` relinks the hit node as the new head. Otherwise
        ``transpose`` swaps the hit's value with its predecessor's value; the
        nodes themselves stay in place. If both flags are set only
        move-to-front applies. Nothing changes when the hit is already the head.

        ``index`` and ``next`` describe the list before reorganising; ``prev``
        and ``current`` are read afterwards, so after a transpose ``prev``
        holds the searched value and ``current`` the value it swapped with.
        """
        prev = None
        node = self.head
        index = 0
        while node is not None:
            if node.value == value:
                next_value = node.next.value if node.next is not None else None
                if prev is not None:
                    if move_to_front:
                        prev.next = node.next
                        node.next = self.head
                        self.head = node
                    elif transpose:
                        prev.value, node.value = node.value, prev.value
                result = SearchResult(
                    index=index,
                    prev=prev.value if prev is not None else None,
                    current=node.value,
                    next=next_value,
                )
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("Hit %s at index %d", value, index)
                return result
            prev = node
            node = node.next
            index += 1
        return MISS

    def kmp_search(self, pattern: str) -> int:
        """
        Find the first contiguous run of list values equal to the digits of
        ``pattern`` (e.g. "41" matches the values 4, 1).

        Returns:
            int: Index of the first value of the match, or -1.
        """
        if self.head is None or not pattern:
            return -1

        digits = pattern_digits(pattern)
        table = compute_prefix_table(digits)
        m = len(digits)
        j = 0
        i = 0
        node = self.head
        while node is not None:
            while j > 0 and node.value != digits[j]:
                j = table[j - 1]
            if node.value == digits[j]:
                j += 1
                if j == m:
                    return i - m + 1
            node = node.next
            i += 1
        return -1

    def to_list(self) -> List[int]:
        return list(self)

    def clear(self) -> None:
        self.head = None
        self.size = 0
