"""
Simplified B-Tree.

Leaves hold at most three sorted values. When a node reaches four values it
is split around the value at index 1, and the resulting two-child node is
handed back to the caller, which stores it in place of the old child. The
split is not merged into the parent, so splits never cascade past one level.
"""

from __future__ import annotations

import bisect
import logging
from typing import Iterable, Optional

from dsviz.logging_config import get_logger
from dsviz.trees.base import BTreeNode, _get_child, _set_child

logger = get_logger("BTree")

MAX_VALUES = 3
PROMOTE_INDEX = 1


def insert_btree(node: Optional[BTreeNode], value: int) -> BTreeNode:
    """Insert ``value`` under ``node`` and return the node that replaces it."""
    if node is None:
        return BTreeNode([value])

    if node.is_leaf():
        if value not in node.values:
            bisect.insort(node.values, value)
    else:
        i = 0
        while i < len(node.values) and value > node.values[i]:
            i += 1
        _set_child(node.children, i, insert_btree(_get_child(node.children, i), value))

    if len(node.values) > MAX_VALUES:
        return split(node)
    return node


def split(node: BTreeNode) -> BTreeNode:
    """Split an overfull node around ``values[PROMOTE_INDEX]``."""
    mid = PROMOTE_INDEX
    promoted = node.values[mid]
    left = BTreeNode(node.values[:mid], node.children[:mid + 1])
    right = BTreeNode(node.values[mid + 1:], node.children[mid + 1:])
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Split %s promoting %s", node.values, promoted)
    return BTreeNode([promoted], [left, right])


def build_btree(values: Iterable[int]) -> Optional[BTreeNode]:
    root = None
    for v in values:
        root = insert_btree(root, v)
    return root
