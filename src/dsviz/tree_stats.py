"""Statistics and invariant flags for built trees."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Optional

from dsviz.logging_config import get_logger
from dsviz.trees.base import AVLNode, BTreeNode, TreeNode

logger = get_logger(__name__)


@dataclass
class Stats:
    """Aggregated statistics for a tree."""

    height: int
    node_count: int
    value_count: int
    leaf_count: int
    least_value: Any | None
    greatest_value: Any | None
    is_search_tree: bool
    is_balanced: bool
    max_children: int

    @property
    def perfect_height(self) -> int:
        """Height of a perfectly balanced binary tree holding ``node_count`` nodes."""
        return math.ceil(math.log2(self.node_count + 1)) if self.node_count else 0


EMPTY_STATS = Stats(
    height=0,
    node_count=0,
    value_count=0,
    leaf_count=0,
    least_value=None,
    greatest_value=None,
    is_search_tree=True,
    is_balanced=True,
    max_children=0,
)


def tree_stats(root: Optional[TreeNode]) -> Stats:
    """
    Returns aggregated statistics for a tree in **O(n)** time.

    ``is_search_tree`` holds for BST/AVL shapes and for the B-Tree (where a
    value equal to a separator may sit in the left child). The Fibonacci tree
    is expected to fail it. ``is_balanced`` means the heights of the children
    of every node differ by at most one, an absent binary child counting as 0.
    """
    # ---------- empty tree return ---------------------------------
    if root is None:
        return replace(EMPTY_STATS)

    # ---------- recurse on every child slot -----------------------
    slot_stats = [tree_stats(c) if c is not None else None for c in root.children]
    child_stats = [s for s in slot_stats if s is not None]
    is_btree = isinstance(root, BTreeNode)
    values = list(root.values) if is_btree else [root.value]

    # ---------- aggregate ----------------------------------
    stats = Stats(
        height=1 + max((s.height for s in child_stats), default=0),
        node_count=1 + sum(s.node_count for s in child_stats),
        value_count=len(values) + sum(s.value_count for s in child_stats),
        leaf_count=sum(s.leaf_count for s in child_stats) if child_stats else 1,
        least_value=min(values + [s.least_value for s in child_stats]),
        greatest_value=max(values + [s.greatest_value for s in child_stats]),
        is_search_tree=all(s.is_search_tree for s in child_stats),
        is_balanced=all(s.is_balanced for s in child_stats),
        max_children=max([len(child_stats)] + [s.max_children for s in child_stats]),
    )

    # ---------- ordering ----------------------------------
    if is_btree:
        if values != sorted(values):
            stats.is_search_tree = False
        for i, s in enumerate(slot_stats):
            if s is None:
                continue
            if 0 < i <= len(values) and s.least_value <= values[i - 1]:
                stats.is_search_tree = False
            if i < len(values) and s.greatest_value > values[i]:
                stats.is_search_tree = False
        heights = [s.height for s in child_stats]
    else:
        left = slot_stats[0] if len(slot_stats) > 0 and slot_stats[0] else EMPTY_STATS
        right = slot_stats[1] if len(slot_stats) > 1 and slot_stats[1] else EMPTY_STATS
        if left.greatest_value is not None and left.greatest_value >= root.value:
            stats.is_search_tree = False
        if right.least_value is not None and right.least_value <= root.value:
            stats.is_search_tree = False
        heights = [left.height, right.height]

    if heights and max(heights) - min(heights) > 1:
        stats.is_balanced = False
    if isinstance(root, AVLNode) and root.height != stats.height:
        logger.warning("Stored AVL height %d differs from computed %d at %s",
                       root.height, stats.height, root.value)
    return stats
