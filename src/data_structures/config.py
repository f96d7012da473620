"""Configuration for the printing helpers.

Defines the text used when structures are rendered to a console sink.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DisplayConfig:
    """Rendering parameters for trees, lists and deques.

    Attributes:
        tree_header: First line printed above a non-empty tree
        empty_tree: Line printed for an empty tree
        branch: Connector for a child that has a sibling after it
        last_branch: Connector for the last child of a node
        vertical: Indent continuing an open branch
        blank: Indent below a closed branch
        list_label: Prefix for linked list output
        list_separator: Separator between linked list values
        empty_list: Line printed for an empty linked list
        deque_label: Prefix for deque output
        deque_separator: Separator between deque values
        empty_deque: Line printed for an empty deque
    """

    tree_header: str = "Tree structure:"
    empty_tree: str = "Empty tree"
    branch: str = "├── "
    last_branch: str = "└── "
    vertical: str = "│   "
    blank: str = "    "
    list_label: str = "List:"
    list_separator: str = " <-> "
    empty_list: str = "Empty list"
    deque_label: str = "Deque:"
    deque_separator: str = ", "
    empty_deque: str = "Empty deque"
