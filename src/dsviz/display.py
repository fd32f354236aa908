"""Pretty-printing and display utilities for trees, lists and skip lists."""

from __future__ import annotations

import collections
from typing import Optional, Union

from dsviz.hash_table import HashTable
from dsviz.linked_list import LinkedList
from dsviz.skip_list import SkipList
from dsviz.trees.base import AVLNode, BTreeNode, TreeNode, iter_children

# ANSI colour codes
PRIMARY = '\033[32m'    # green
SECONDARY = '\033[33m'  # yellow
RESET = '\033[0m'

Displayable = Union[TreeNode, LinkedList, SkipList, HashTable, None]


def print_pretty(obj: Displayable, color: bool = False) -> str:
    """
    Render a structure as text.

      • Trees: one line per depth, root first, nodes left→right, all columns
        the same width so siblings line up.
      • Linked lists: ``head -> ... -> None``.
      • Skip lists: one line per level, highest level first.
      • Hash tables: one ``index: key`` line per slot.
    """
    if obj is None:
        return "None"
    if isinstance(obj, LinkedList):
        return _pretty_linked_list(obj)
    if isinstance(obj, SkipList):
        return _pretty_skip_list(obj, color)
    if isinstance(obj, HashTable):
        return _pretty_hash_table(obj)
    if hasattr(obj, "children"):
        return _pretty_tree(obj, color)
    raise TypeError(f"print_pretty() cannot display {type(obj).__name__}")


def _pretty_linked_list(lst: LinkedList) -> str:
    if not lst:
        return "(LinkedList): Empty"
    return "(LinkedList): " + " -> ".join(str(v) for v in lst) + " -> None"


def _pretty_skip_list(sl: SkipList, color: bool) -> str:
    if len(sl) == 0:
        return "(SkipList): Empty"
    lines = []
    base = sl.level_values(0)
    width = max(len(str(v)) for v in base)
    for level in range(sl.level - 1, -1, -1):
        present = set(sl.level_values(level))
        cells = [str(v).rjust(width) if v in present else "-" * width for v in base]
        label = f"L{level}"
        if color:
            label = f"{PRIMARY}{label}{RESET}"
        lines.append(f"{label}: H " + " ".join(cells))
    return "(SkipList)\n" + "\n".join(lines)


def _pretty_hash_table(table: HashTable) -> str:
    width = len(str(table.table_size - 1))
    lines = [
        f"{str(i).rjust(width)}: {'' if key is None else key}"
        for i, key in enumerate(table.slots)
    ]
    return f"(HashTable {table.strategy.value})\n" + "\n".join(lines)


def _node_text(node: TreeNode, color: bool) -> str:
    if isinstance(node, BTreeNode):
        return "[" + " | ".join(str(v) for v in node.values) + "]"
    text = str(node.value)
    if isinstance(node, AVLNode) and color:
        text += f"{SECONDARY}h{node.height}{RESET}"
    return text


def _pretty_tree(root: TreeNode, color: bool) -> str:
    # 1) First pass: collect each node's text per depth and track max length
    layers = collections.defaultdict(list)
    max_len = 0

    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        text = _node_text(node, color)
        layers[depth].append(text)
        max_len = max(max_len, len(text))
        stack.extend((child, depth + 1) for child in reversed(list(iter_children(node))))

    # 2) Fixed column width: widest text + padding
    column_width = max_len + 2

    out_lines = []
    for depth in sorted(layers):
        line = "".join(t.center(column_width) for t in layers[depth])
        label = f"Depth {depth}"
        if color:
            label = f"{PRIMARY}{label}{RESET}"
        out_lines.append(f"{label}: {line.rstrip()}")

    return f"({type(root).__name__})\n" + "\n".join(out_lines)


def print_structure(root: Optional[TreeNode], indent: int = 0) -> str:
    """Return a debugging-oriented indented dump of a tree."""
    prefix = ' ' * indent
    if root is None:
        return f"{prefix}Empty"
    result = [f"{prefix}{root!r}"]
    for i, child in enumerate(root.children):
        if child is None:
            result.append(f"{prefix}    [{i}] Empty")
        else:
            result.append(print_structure(child, indent + 4))
    return "\n".join(result)
