"""Console rendering for trees, lists and deques.

Formatting is kept separate from output: the format_* functions build
strings, and the print_* functions hand them line by line to a sink
(``print`` by default).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, List, Optional

from .config import DisplayConfig

if TYPE_CHECKING:
    from .bst import BinarySearchTree
    from .deque import Deque
    from .linkedlist import DoublyLinkedList

Sink = Callable[[str], Any]


def format_tree(
    tree: BinarySearchTree, config: Optional[DisplayConfig] = None
) -> List[str]:
    """
    Returns the tree as connector-style lines, right child listed above
    the left one:

        Tree structure:
        └── 50
            ├── 70
            └── 30
    """
    cfg = config or DisplayConfig()
    if tree.root is None:
        return [cfg.empty_tree]

    lines = [cfg.tree_header]
    # (node, prefix, is_last) triples; explicit stack instead of recursion
    stack = [(tree.root, "", True)]
    while stack:
        node, prefix, is_last = stack.pop()
        lines.append(prefix + (cfg.last_branch if is_last else cfg.branch) + str(node.value))
        child_prefix = prefix + (cfg.blank if is_last else cfg.vertical)
        # Left is pushed first so that right is printed first
        if node.left is not None:
            stack.append((node.left, child_prefix, True))
        if node.right is not None:
            stack.append((node.right, child_prefix, node.left is None))
    return lines


def print_tree(
    tree: BinarySearchTree,
    sink: Sink = print,
    config: Optional[DisplayConfig] = None,
) -> None:
    for line in format_tree(tree, config):
        sink(line)


def format_list(
    linked_list: DoublyLinkedList, config: Optional[DisplayConfig] = None
) -> str:
    cfg = config or DisplayConfig()
    if linked_list.is_empty():
        return cfg.empty_list
    return f"{cfg.list_label} " + cfg.list_separator.join(str(v) for v in linked_list)


def print_list(
    linked_list: DoublyLinkedList,
    sink: Sink = print,
    config: Optional[DisplayConfig] = None,
) -> None:
    sink(format_list(linked_list, config))


def format_deque(dq: Deque, config: Optional[DisplayConfig] = None) -> str:
    cfg = config or DisplayConfig()
    if dq.is_empty():
        return cfg.empty_deque
    return f"{cfg.deque_label} [" + cfg.deque_separator.join(str(v) for v in dq) + "]"


def print_deque(
    dq: Deque, sink: Sink = print, config: Optional[DisplayConfig] = None
) -> None:
    sink(format_deque(dq, config))
