"""Shared invariant-checking utilities.

Used by the test suite, the statistics script and the benchmark runner to
validate structures outside of any timed region.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from dsviz.logging_config import get_logger
from dsviz.trees.base import AVLNode, BinaryNode, BTreeNode, iter_children
from dsviz.trees.btree import MAX_VALUES

logger = get_logger(__name__)

if TYPE_CHECKING:
    from dsviz.hash_table import HashTable
    from dsviz.linked_list import LinkedList
    from dsviz.skip_list import SkipList


class InvariantError(Exception):
    """Raised when a structure invariant is violated."""


def check_bst(root: Optional[BinaryNode]) -> None:
    """Strict ordering: left subtree < node < right subtree, everywhere."""

    stack = [(root, None, None)]
    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        v = node.value
        if (low is not None and v <= low) or (high is not None and v >= high):
            raise InvariantError(
                f"Invariant failed: {v} outside ({low}, {high})"
            )
        stack.append((node.left, low, v))
        stack.append((node.right, v, high))


def check_avl(root: Optional[AVLNode]) -> None:
    """BST ordering, correct stored heights and balance within 1 at every node."""
    check_bst(root)

    def walk(node) -> int:
        if node is None:
            return 0
        hl = walk(node.left)
        hr = walk(node.right)
        if node.height != 1 + max(hl, hr):
            raise InvariantError(
                f"Invariant failed: stored height {node.height} at {node.value} "
                f"!= computed {1 + max(hl, hr)}"
            )
        if abs(hl - hr) > 1:
            raise InvariantError(
                f"Invariant failed: balance {hl - hr} at {node.value}"
            )
        return node.height

    walk(root)


def check_btree(root: Optional[BTreeNode]) -> None:
    """Every node sorted; leaves hold at most MAX_VALUES values."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.values != sorted(node.values):
            raise InvariantError(f"Invariant failed: unsorted node {node.values}")
        if node.is_leaf() and len(node.values) > MAX_VALUES:
            raise InvariantError(
                f"Invariant failed: leaf {node.values} holds more than {MAX_VALUES} values"
            )
        stack.extend(iter_children(node))


def check_linked_list(lst: LinkedList) -> None:
    seen = set()
    count = 0
    node = lst.head
    while node is not None:
        if node.value in seen:
            raise InvariantError(f"Invariant failed: duplicate value {node.value}")
        seen.add(node.value)
        count += 1
        node = node.next
    if count != lst.size:
        raise InvariantError(
            f"Invariant failed: size={lst.size} but {count} nodes are reachable"
        )


def check_skip_list(sl: SkipList) -> None:
    base = sl.level_values(0)
    if len(base) != len(sl):
        raise InvariantError(
            f"Invariant failed: len={len(sl)} but level 0 holds {len(base)} values"
        )
    if sl.level > sl.max_level:
        raise InvariantError(f"Invariant failed: level {sl.level} > max_level {sl.max_level}")
    lower = None
    for i in range(sl.max_level):
        values = sl.level_values(i)
        if values != sorted(values):
            raise InvariantError(f"Invariant failed: level {i} unsorted: {values}")
        if i >= sl.level and values:
            raise InvariantError(f"Invariant failed: unused level {i} is not empty")
        if lower is not None and not _is_subsequence(values, lower):
            raise InvariantError(f"Invariant failed: level {i} is not a subset of level {i - 1}")
        lower = values


def check_hash_table(table: HashTable) -> None:
    if table.table_size <= 0:
        raise InvariantError(f"Invariant failed: table_size={table.table_size}")
    slots = table.slots
    if len(slots) != table.table_size:
        raise InvariantError(
            f"Invariant failed: {len(slots)} slots for table_size={table.table_size}"
        )
    occupied = [s for s in slots if s is not None]
    if len(occupied) != len(set(occupied)):
        raise InvariantError(f"Invariant failed: duplicate keys in {slots}")


def _is_subsequence(sub: Iterable[int], seq: Iterable[int]) -> bool:
    it = iter(seq)
    return all(any(x == y for y in it) for x in sub)
