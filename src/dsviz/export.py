"""Tabular export of built trees."""

from __future__ import annotations

import csv
from typing import IO, Dict, Iterable, List, Optional

from dsviz.trees.base import TreeNode, iter_children

FIELDNAMES = ["type", "values", "value", "parent", "children"]


def node_value(node: TreeNode):
    """Display value of a node; B-Tree nodes join their values with ", "."""
    if hasattr(node, "values"):
        return node.label()
    return node.value


def tree_to_table_data(
    root: Optional[TreeNode],
    algorithm_type: str,
    values: Iterable[int],
) -> List[Dict]:
    """
    Flatten a tree into rows.

    The first row is ``{"type", "values"}`` describing the run; it is followed
    by one ``{"value", "parent", "children"}`` row per node in pre-order, where
    ``parent`` is the value of the node that led to it (None for the root) and
    ``children`` joins the immediate child values with ", ".
    """
    rows: List[Dict] = [{"type": algorithm_type, "values": ", ".join(str(v) for v in values)}]

    stack = [(root, None)] if root is not None else []
    while stack:
        node, parent_value = stack.pop()
        value = node_value(node)
        children = list(iter_children(node))
        rows.append({
            "value": value,
            "parent": parent_value,
            "children": ", ".join(str(node_value(c)) for c in children),
        })
        stack.extend((child, value) for child in reversed(children))
    return rows


def write_table_csv(rows: Iterable[Dict], fp: IO[str]) -> None:
    """Write rows from :func:`tree_to_table_data` as CSV with a fixed header."""
    writer = csv.DictWriter(fp, fieldnames=FIELDNAMES, lineterminator="\n")
    writer.writeheader()
    for row in rows:
        writer.writerow({k: ("" if v is None else v) for k, v in row.items()})


def export_filename(algorithm: str) -> str:
    return f"{algorithm}_tree.csv"
