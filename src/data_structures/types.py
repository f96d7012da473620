"""Common type definitions for the data structures.

Defines the element protocols and the traversal orders shared by the
tree, list and deque implementations.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


# A protocol expressing that a type supports ordering comparisons
class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...
    def __gt__(self, other: Any) -> bool: ...
    def __eq__(self, other: Any) -> bool: ...


C = TypeVar("C", bound=Comparable)


class TraversalOrder(str, Enum):
    """Orders accepted by BinarySearchTree.traverse()."""

    LEVEL = "level"
    PRE = "pre"
    IN = "in"
    POST = "post"
