from __future__ import annotations

from typing import Generic, Optional

from .types import C, T


# -----------------------------
# Node Base Class
# -----------------------------
class NodeBase(Generic[T]):
    """Base class for all linked nodes."""

    __slots__ = ("value",)

    def __init__(self, value: T):
        self.value: T = value


# -----------------------------
# Doubly Linked List Node
# -----------------------------
class DLLNode(NodeBase[T]):
    """Doubly-linked list node."""

    __slots__ = ("prev", "next")

    def __init__(
        self,
        value: T,
        prev: Optional[DLLNode[T]] = None,
        next: Optional[DLLNode[T]] = None,
    ):
        super().__init__(value)
        self.prev: Optional[DLLNode[T]] = prev
        self.next: Optional[DLLNode[T]] = next

    def __repr__(self) -> str:
        return (
            f"DLLNode(value={self.value!r}, "
            f"prev={getattr(self.prev, 'value', None)!r}, "
            f"next={getattr(self.next, 'value', None)!r})"
        )


# -----------------------------
# Binary Tree Node
# -----------------------------
class BinaryTreeNode(NodeBase[C]):
    """A node in a binary tree. Each child link owns its whole subtree."""

    __slots__ = ("left", "right")

    def __init__(
        self,
        value: C,
        left: Optional[BinaryTreeNode[C]] = None,
        right: Optional[BinaryTreeNode[C]] = None,
    ) -> None:
        super().__init__(value)
        self.left = left
        self.right = right

    @property
    def child_count(self) -> int:
        return (self.left is not None) + (self.right is not None)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"BinaryTreeNode({self.value!r})"
