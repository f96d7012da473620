"""
A doubly linked list with head and tail references.

Time Complexity:
Push/Pop at either end: O(1)
Positional insert/remove/lookup: O(n), walking from the nearer end
Search: O(n)
"""

from __future__ import annotations  # allows forward-referencing without quotes

import logging
from typing import Generic, Iterable, Iterator, List, Optional

from .errors import InvalidPositionError
from .nodes import DLLNode
from .types import T

logger = logging.getLogger(__name__)


class DoublyLinkedList(Generic[T]):
    """
    DoublyLinkedList implements the doubly linked list data structure,
    using the DLLNode container with data type, T.

    Invariants:
        - head is None iff tail is None iff the list is empty
        - head.prev and tail.next are always None
        - a failed positional operation leaves head, tail and size untouched
    """

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[DLLNode[T]] = None
        self._tail: Optional[DLLNode[T]] = None
        self._size: int = 0
        if values is not None:
            for value in values:
                self.append(value)

    @property
    def head(self) -> Optional[DLLNode[T]]:
        return self._head

    @property
    def tail(self) -> Optional[DLLNode[T]]:
        return self._tail

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        current = self._head
        while current:
            yield current.value
            current = current.next

    def __reversed__(self) -> Iterator[T]:
        current = self._tail
        while current:
            yield current.value
            current = current.prev

    def __repr__(self) -> str:
        if self.is_empty():
            return "DoublyLinkedList([])"
        values = " ⇄ ".join(repr(v) for v in self)
        return f"HEAD ⇄ {values} ⇄ TAIL"

    def is_empty(self) -> bool:
        return self._size == 0

    # -------------------------------
    # Position helpers
    # -------------------------------
    def _check_position(self, position: int, upper: int) -> None:
        if position < 0 or position > upper:
            logger.warning(
                f"Rejected position {position} for list of size {self._size}"
            )
            raise InvalidPositionError(position, 0, upper)

    def _node_at(self, position: int) -> DLLNode[T]:
        """
        Returns the node at a position already known to be valid.
        Walks from whichever end is nearer.
        """
        if position < self._size // 2:
            current = self._head
            for _ in range(position):
                current = current.next
        else:
            current = self._tail
            for _ in range(self._size - 1 - position):
                current = current.prev
        assert current is not None
        return current

    # -------------------------------
    # Insert
    # -------------------------------
    def prepend(self, value: T) -> None:
        """Inserts a new element at the head. O(1)."""
        new_node = DLLNode(value, next=self._head)
        if self._head:
            self._head.prev = new_node
        else:
            self._tail = new_node
        self._head = new_node
        self._size += 1

    def append(self, value: T) -> None:
        """Inserts a new element at the tail. O(1)."""
        new_node = DLLNode(value, prev=self._tail)
        if not self._head:
            self._head = new_node
        else:
            assert self._tail is not None
            self._tail.next = new_node
        self._tail = new_node
        self._size += 1

    def insert_at(self, position: int, value: T) -> None:
        """
        Inserts an element so that it ends up at `position`.
        Valid positions are 0 through len(self), inclusive.

        Raises:
            InvalidPositionError: if the position is out of range
        """
        self._check_position(position, self._size)

        if position == 0:
            self.prepend(value)
        elif position == self._size:
            self.append(value)
        else:
            successor = self._node_at(position)
            predecessor = successor.prev
            assert predecessor is not None
            new_node = DLLNode(value, prev=predecessor, next=successor)
            predecessor.next = new_node
            successor.prev = new_node
            self._size += 1

        logger.debug(f"Inserted {value!r} at position {position}, size={self._size}")

    # -------------------------------
    # Remove
    # -------------------------------
    def pop_left(self) -> Optional[T]:
        """Removes and returns the head value, or None if the list is empty."""
        if not self._head:
            return None
        value = self._head.value
        self._head = self._head.next
        if self._head:
            self._head.prev = None
        else:
            self._tail = None
        self._size -= 1
        return value

    def pop(self) -> Optional[T]:
        """Removes and returns the tail value, or None if the list is empty."""
        if not self._tail:
            return None
        value = self._tail.value
        self._tail = self._tail.prev
        if self._tail:
            self._tail.next = None
        else:
            self._head = None
        self._size -= 1
        return value

    def _unlink(self, node: DLLNode[T]) -> None:
        if node.prev:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.prev = node.next = None
        self._size -= 1

    def remove_at(self, position: int) -> T:
        """
        Removes and returns the element at `position`.
        Valid positions are 0 through len(self) - 1.

        Raises:
            InvalidPositionError: if the position is out of range
        """
        self._check_position(position, self._size - 1)
        node = self._node_at(position)
        self._unlink(node)
        logger.debug(f"Removed {node.value!r} at position {position}, size={self._size}")
        return node.value

    def remove(self, value: T) -> bool:
        """
        Removes the first node holding `value`.
        Returns False if no node matches.
        """
        current = self._head
        while current:
            if current.value == value:
                self._unlink(current)
                return True
            current = current.next
        return False

    def clear(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0
        logger.debug("Cleared list")

    # -------------------------------
    # Lookup
    # -------------------------------
    def index_of(self, value: T) -> int:
        """
        Returns the position of the first node holding `value`, or -1.
        O(n), since in the worst case the entire list is scanned.
        """
        for position, current in enumerate(self):
            if current == value:
                return position
        return -1

    def get(self, position: int) -> Optional[T]:
        """
        Returns the value at `position`.
        Returns None instead of raising when the position is out of range.
        """
        if position < 0 or position >= self._size:
            return None
        return self._node_at(position).value

    # -------------------------------
    # Traversals
    # -------------------------------
    def forward(self) -> List[T]:
        """Values from head to tail."""
        return list(self)

    def backward(self) -> List[T]:
        """Values from tail to head."""
        return list(reversed(self))

    def to_list(self) -> List[T]:
        return self.forward()
