"""
Binary search tree over naturally ordered values.

Duplicates are ignored, so every value is stored at most once.
Every walk, pretty_print() included, uses an explicit stack or queue,
so degenerate (chain-shaped) trees of any depth stay clear of the
recursion limit.

Time Complexity:
Search/Insert: O(logn) avg., O(n) worst for an unbalanced tree
Traversals/height/predicates: O(n)
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Dict, Generic, Iterable, Iterator, List, Optional, Union

from .nodes import BinaryTreeNode
from .types import C, TraversalOrder

logger = logging.getLogger(__name__)


class BinarySearchTree(Generic[C]):
    """Binary search tree with a cached element count."""

    __slots__ = ("_root", "_size")

    def __init__(self, values: Optional[Iterable[C]] = None) -> None:
        self._root: Optional[BinaryTreeNode[C]] = None
        self._size: int = 0
        if values is not None:
            self.insert_many(values)

    @property
    def root(self) -> Optional[BinaryTreeNode[C]]:
        return self._root

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: C) -> bool:
        return self.search(value)

    def __iter__(self) -> Iterator[C]:
        return self._iter_inorder()

    def is_empty(self) -> bool:
        return self._root is None

    # -------------------------------
    # Insert
    # -------------------------------
    def insert(self, value: C) -> None:
        """Insert a value unless an equal value is already stored."""
        if self._root is None:
            self._root = BinaryTreeNode(value)
            self._size = 1
            logger.debug(f"Inserted root {value!r}")
            return

        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = BinaryTreeNode(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = BinaryTreeNode(value)
                    break
                node = node.right
            else:
                logger.debug(f"Skipped duplicate {value!r}")
                return

        self._size += 1
        logger.debug(f"Inserted {value!r} under {node.value!r}, size={self._size}")

    def insert_many(self, values: Iterable[C]) -> None:
        for value in values:
            self.insert(value)

    # -------------------------------
    # Search
    # -------------------------------
    def _find_node(self, value: C) -> Optional[BinaryTreeNode[C]]:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def search(self, value: C) -> bool:
        """
        Returns True if the value is stored in the tree.
        Time Complexity: O(depth), descending one level per comparison
        """
        return self._find_node(value) is not None

    def minimum(self) -> Optional[C]:
        """
        Finds the minimum value in the binary search tree
        Time Complexity: Avg. O(logn) following the leftmost chain,
                         O(n) worst case for an unbalanced BST
        Space Complexity: O(1)
        """
        node = self._root
        if node is None:
            return None
        while node.left:
            node = node.left
        return node.value

    def maximum(self) -> Optional[C]:
        """
        Finds the maximum value in the binary search tree
        Time Complexity: Avg. O(logn) following the rightmost chain,
                         O(n) worst case for an unbalanced BST
        Space Complexity: O(1)
        """
        node = self._root
        if node is None:
            return None
        while node.right:
            node = node.right
        return node.value

    # -------------------------------
    # Traversals
    # -------------------------------
    def _iter_level_order(self) -> Iterator[C]:
        if self._root is None:
            return
        queue: deque[BinaryTreeNode[C]] = deque([self._root])
        while queue:
            node = queue.popleft()
            yield node.value
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def _iter_preorder_nodes(
        self, start: Optional[BinaryTreeNode[C]]
    ) -> Iterator[BinaryTreeNode[C]]:
        stack = [start] if start is not None else []
        while stack:
            node = stack.pop()
            yield node
            # Right is pushed first so the left subtree is visited first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _iter_preorder(self) -> Iterator[C]:
        for node in self._iter_preorder_nodes(self._root):
            yield node.value

    def _iter_inorder(self) -> Iterator[C]:
        stack: List[BinaryTreeNode[C]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def _iter_postorder(self) -> Iterator[C]:
        if self._root is None:
            return
        # Reversed (node, right, left) pre-order is (left, right, node)
        stack = [self._root]
        output: List[C] = []
        while stack:
            node = stack.pop()
            output.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(output)

    def traverse(self, order: Union[TraversalOrder, str]) -> List[C]:
        """
        Returns the stored values in the requested order.

        Args:
            order: "level", "pre", "in" or "post" (or a TraversalOrder)

        Raises:
            ValueError: if the order is not recognised
        """
        walkers: dict[TraversalOrder, Callable[[], Iterator[C]]] = {
            TraversalOrder.LEVEL: self._iter_level_order,
            TraversalOrder.PRE: self._iter_preorder,
            TraversalOrder.IN: self._iter_inorder,
            TraversalOrder.POST: self._iter_postorder,
        }
        return list(walkers[TraversalOrder(order)]())

    def level_order(self) -> List[C]:
        return self.traverse(TraversalOrder.LEVEL)

    def preorder(self) -> List[C]:
        return self.traverse(TraversalOrder.PRE)

    def inorder(self) -> List[C]:
        return self.traverse(TraversalOrder.IN)

    def postorder(self) -> List[C]:
        return self.traverse(TraversalOrder.POST)

    # -------------------------------
    # Shape
    # -------------------------------
    def height(self) -> int:
        """
        Returns the number of edges on the longest root-to-leaf path.
        An empty tree has height -1 and a single node has height 0.
        Time Complexity: O(n) since every level is visited once
        Space Complexity: O(w) for the widest level
        """
        height = -1
        level = [self._root] if self._root is not None else []
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def clear(self) -> None:
        self._root = None
        self._size = 0
        logger.debug("Cleared tree")

    # -------------------------------
    # Relationships
    # -------------------------------
    def ancestors(self, value: C) -> List[C]:
        """
        Returns the values on the path from the root down to `value`,
        excluding `value` itself.

        NOTE: the result is empty both when `value` is the root and
        when it is not stored at all.
        """
        path: List[C] = []
        node = self._root
        while node is not None:
            if value < node.value:
                path.append(node.value)
                node = node.left
            elif value > node.value:
                path.append(node.value)
                node = node.right
            else:
                return path
        return []

    def descendants(self, value: C) -> List[C]:
        """Returns the subtree of `value` in pre-order, without `value` itself."""
        node = self._find_node(value)
        if node is None:
            return []
        walk = self._iter_preorder_nodes(node)
        next(walk)  # the node itself
        return [descendant.value for descendant in walk]

    def level(self, value: C) -> int:
        """Returns the depth of `value` (root is 0), or -1 if not stored."""
        depth = 0
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return depth
            depth += 1
        return -1

    # -------------------------------
    # Predicates
    # -------------------------------
    def is_strict_binary(self) -> bool:
        """True if no node has exactly one child. Vacuously True when empty."""
        return all(
            node.child_count != 1 for node in self._iter_preorder_nodes(self._root)
        )

    def is_full(self) -> bool:
        """True if the count fills every level up to the current height."""
        return self._size == 2 ** (self.height() + 1) - 1

    # -------------------------------
    # Utility
    # -------------------------------
    def to_list(self) -> List[C]:
        """Return all values of the tree in inorder as a list."""
        return self.inorder()

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.to_list()})"

    def pretty_print(self) -> str:
        """
        Returns a multi-line box layout of the tree. Each node sits on the
        row of its depth, centred between its left and right subtrees.
        Time/Space Complexity: linear in the size of the output
        """
        if not self._root:
            return "<empty>"

        labels: Dict[BinaryTreeNode[C], str] = {}
        widths: Dict[Optional[BinaryTreeNode[C]], int] = {None: 0}

        # Reversed pre-order visits children before their parent
        for node in reversed(list(self._iter_preorder_nodes(self._root))):
            labels[node] = f"┌{node.value}┐"
            widths[node] = widths[node.left] + len(labels[node]) + widths[node.right]

        # Pre-order keeps the labels of each row in left-to-right order
        rows: List[List[tuple[int, str]]] = [[] for _ in range(self.height() + 1)]
        stack = [(self._root, 0, 0)]
        while stack:
            node, start, depth = stack.pop()
            column = start + widths[node.left]
            rows[depth].append((column, labels[node]))
            if node.right is not None:
                stack.append((node.right, column + len(labels[node]), depth + 1))
            if node.left is not None:
                stack.append((node.left, start, depth + 1))

        total_width = widths[self._root]
        lines = []
        for row in rows:
            parts = []
            position = 0
            for column, label in row:
                parts.append(" " * (column - position) + label)
                position = column + len(label)
            parts.append(" " * (total_width - position))
            lines.append("".join(parts))
        return "\n".join(lines)
