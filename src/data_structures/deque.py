"""
A double-ended queue backed by collections.deque.

Pushes and pops at either end are O(1); popping or peeking an empty
deque returns None rather than raising.
"""

from __future__ import annotations

import collections
from typing import Generic, Iterable, Iterator, List, Optional

from .types import T


class Deque(Generic[T]):
    """Double-ended queue."""

    __slots__ = ("_items",)

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._items: collections.deque[T] = collections.deque(values or ())

    @property
    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Deque({list(self._items)!r})"

    def is_empty(self) -> bool:
        return not self._items

    def push_front(self, value: T) -> None:
        self._items.appendleft(value)

    def push_back(self, value: T) -> None:
        self._items.append(value)

    def pop_front(self) -> Optional[T]:
        if not self._items:
            return None
        return self._items.popleft()

    def pop_back(self) -> Optional[T]:
        if not self._items:
            return None
        return self._items.pop()

    def peek_front(self) -> Optional[T]:
        return self._items[0] if self._items else None

    def peek_back(self) -> Optional[T]:
        return self._items[-1] if self._items else None

    def clear(self) -> None:
        self._items.clear()

    def to_list(self) -> List[T]:
        """Returns a copy of the values, front to back."""
        return list(self._items)
