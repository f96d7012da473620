"""Exception hierarchy for the data structures.

Lookups that miss are never errors: they return False, None, -1 or an
empty list. Only positional misuse of the linked list raises.
"""

from __future__ import annotations


class DataStructureError(Exception):
    """Base exception for all data structure errors."""
    pass


class InvalidPositionError(DataStructureError, IndexError):
    """Raised when a linked list position is outside the valid range.

    Attributes:
        position: The rejected position
        lower: Smallest valid position
        upper: Largest valid position (inclusive)
    """

    def __init__(self, position: int, lower: int, upper: int) -> None:
        self.position = position
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"Invalid position {position}: must be between {lower} and {upper}"
        )
