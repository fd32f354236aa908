"""Node types and traversal helpers shared by all tree builders."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional, Union


class TreeAlgorithm(str, Enum):
    """Closed set of tree builders understood by :func:`generate_tree_data`."""

    BST = "bst"
    AVL = "avl"
    B_TREE = "b-tree"
    FIB_TREE = "fib-tree"

    @classmethod
    def parse(cls, name: Union[str, "TreeAlgorithm"]) -> Optional["TreeAlgorithm"]:
        """Return the matching member, or None for an unknown name."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            return None


def _set_child(children: list, index: int, child) -> None:
    """
    Store ``child`` at ``index``, padding the list with absent children.

    Binary nodes keep the right child at index 1 even when there is no left
    child, so the list may read ``[None, right]``.
    """
    while len(children) <= index:
        children.append(None)
    children[index] = child


def _get_child(children: list, index: int):
    return children[index] if index < len(children) else None


class BinaryNode:
    """
    A node of a binary tree (BST or Fibonacci tree).

    ``children[0]`` is the left child and ``children[1]`` the right child.
    """
    __slots__ = ("value", "children")

    def __init__(self, value: int, children: Optional[list] = None):
        self.value = value
        self.children: list = children if children is not None else []

    @property
    def left(self) -> Optional[BinaryNode]:
        return _get_child(self.children, 0)

    @left.setter
    def left(self, node: Optional[BinaryNode]) -> None:
        _set_child(self.children, 0, node)

    @property
    def right(self) -> Optional[BinaryNode]:
        return _get_child(self.children, 1)

    @right.setter
    def right(self, node: Optional[BinaryNode]) -> None:
        _set_child(self.children, 1, node)

    def label(self) -> str:
        return str(self.value)

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "children": [c.to_dict() if c is not None else None for c in self.children],
        }

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        return f"{cls}(value={self.value!r})"


class AVLNode(BinaryNode):
    """Binary node that also tracks the height of its subtree."""
    __slots__ = ("height",)

    def __init__(self, value: int, height: int = 1, children: Optional[list] = None):
        super().__init__(value, children)
        self.height = height

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "height": self.height,
            "children": [c.to_dict() if c is not None else None for c in self.children],
        }

    def __repr__(self) -> str:
        return f"AVLNode(value={self.value!r}, height={self.height})"


class BTreeNode:
    """A B-Tree node holding a sorted list of values and 0..k children."""
    __slots__ = ("values", "children")

    def __init__(self, values: Optional[List[int]] = None, children: Optional[list] = None):
        self.values: List[int] = values if values is not None else []
        self.children: list = children if children is not None else []

    def is_leaf(self) -> bool:
        return not self.children

    def label(self) -> str:
        return ", ".join(str(v) for v in self.values)

    def to_dict(self) -> dict:
        return {
            "values": list(self.values),
            "children": [c.to_dict() if c is not None else None for c in self.children],
        }

    def __repr__(self) -> str:
        return f"BTreeNode(values={self.values!r})"


TreeNode = Union[BinaryNode, AVLNode, BTreeNode]


def iter_children(node: TreeNode) -> Iterator[TreeNode]:
    """Yield the present children of ``node``, skipping absent slots."""
    for child in node.children:
        if child is not None:
            yield child


def iter_preorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Iterate nodes in pre-order (node, then children left to right)."""
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(list(iter_children(node))))


def _inorder_sequence(node: TreeNode) -> list:
    """
    A node's children and values in symmetric order, each wrapped as
    ``(is_value, item)``.
    """
    if isinstance(node, BTreeNode):
        seq = []
        for i, v in enumerate(node.values):
            seq.append((False, _get_child(node.children, i)))
            seq.append((True, v))
        seq.extend((False, c) for c in node.children[len(node.values):])
        return seq
    return [(False, node.left), (True, node.value), (False, node.right)]


def inorder_values(root: Optional[TreeNode]) -> List[int]:
    """
    Values in symmetric order.

    For binary nodes: left subtree, node, right subtree. For B-Tree nodes the
    values are interleaved with the children they separate.
    """
    out: List[int] = []
    stack = [(False, root)]
    while stack:
        is_value, item = stack.pop()
        if is_value:
            out.append(item)
        elif item is not None:
            stack.extend(reversed(_inorder_sequence(item)))
    return out


def tree_height(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path (0 for an empty tree)."""
    height = 0
    level = [root] if root is not None else []
    while level:
        height += 1
        level = [c for node in level for c in iter_children(node)]
    return height


def node_count(root: Optional[TreeNode]) -> int:
    return sum(1 for _ in iter_preorder(root))
