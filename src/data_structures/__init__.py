"""Data structures - binary search tree, doubly linked list and deque."""

from .bst import BinarySearchTree
from .config import DisplayConfig
from .deque import Deque
from .errors import DataStructureError, InvalidPositionError
from .linkedlist import DoublyLinkedList
from .nodes import BinaryTreeNode, DLLNode, NodeBase
from .types import Comparable, TraversalOrder

__all__ = [
    "BinarySearchTree",
    "DisplayConfig",
    "Deque",
    "DataStructureError",
    "InvalidPositionError",
    "DoublyLinkedList",
    "BinaryTreeNode",
    "DLLNode",
    "NodeBase",
    "Comparable",
    "TraversalOrder",
]
