#!/usr/bin/env python3
"""Data structures demo driver

Runs a scripted walkthrough of one structure and prints every step.

Usage:
    ds-demo bst --values 50 30 70 20 40 60 80 --plot /tmp/bst.png
    ds-demo list
    ds-demo deque --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .bst import BinarySearchTree
from .deque import Deque
from .display import print_deque, print_list, print_tree
from .errors import InvalidPositionError
from .linkedlist import DoublyLinkedList
from .types import TraversalOrder

logger = logging.getLogger(__name__)

DEFAULT_TREE_VALUES = [50, 30, 70, 20, 40, 60, 80, 10, 25, 35, 45]
DEFAULT_LIST_VALUES = [10, 20]


def run_bst_demo(args: argparse.Namespace) -> None:
    """Walk through the binary search tree operations."""
    tree: BinarySearchTree[int] = BinarySearchTree()

    print("=== Binary search tree ===\n")

    print("1. Inserting values:")
    for value in args.values:
        tree.insert(value)
        print(f"Inserted: {value}")
    print(f"\nSize: {tree.size}")
    print(f"Height: {tree.height()}\n")
    print_tree(tree)
    print()

    print("2. Searching:")
    for probe in (args.values[0], args.values[-1], max(args.values) + 1):
        print(f"search({probe}) = {tree.search(probe)}")
    print()

    print("3. Traversals:")
    for order in TraversalOrder:
        print(f"{order.value:>5}: {tree.traverse(order)}")
    print()

    print("4. Extremes:")
    print(f"minimum = {tree.minimum()}")
    print(f"maximum = {tree.maximum()}\n")

    print("5. Relationships:")
    for value in tree.inorder():
        print(
            f"{value}: level={tree.level(value)} "
            f"ancestors={tree.ancestors(value)} "
            f"descendants={tree.descendants(value)}"
        )
    print()

    print("6. Shape:")
    print(f"strict binary = {tree.is_strict_binary()}")
    print(f"full = {tree.is_full()}\n")

    print("7. Strings:")
    words: BinarySearchTree[str] = BinarySearchTree(["casa", "arvore", "zebra", "banana"])
    print(f"inorder = {words.inorder()}")
    print(f"search('banana') = {words.search('banana')}\n")

    if args.plot:
        # matplotlib is only needed for --plot
        from .visualize import plot_tree

        plot_tree(tree, args.plot)
        print(f"Plot written to {args.plot}\n")

    tree.clear()
    print(f"8. After clear: empty={tree.is_empty()} size={tree.size} height={tree.height()}")


def run_list_demo(args: argparse.Namespace) -> None:
    """Walk through the doubly linked list operations."""
    linked: DoublyLinkedList[int] = DoublyLinkedList()

    print("=== Doubly linked list ===\n")

    print("1. Inserting values:")
    for value in args.values:
        linked.append(value)
    linked.prepend(5)
    linked.insert_at(len(linked) // 2 + 1, 15)
    print_list(linked)
    print(f"Size: {len(linked)}\n")

    print(f"2. Forward: {linked.forward()}")
    print(f"3. Backward: {linked.backward()}\n")

    print("4. Removing values:")
    print(f"pop_left = {linked.pop_left()}")
    print(f"pop = {linked.pop()}")
    if linked:
        print(f"remove_at(0) = {linked.remove_at(0)}")
    print_list(linked)
    print(f"Size: {len(linked)}\n")

    print(f"5. index_of(15) = {linked.index_of(15)}")
    print(f"6. index_of(100) = {linked.index_of(100)}\n")

    print("7. Invalid position:")
    try:
        linked.insert_at(len(linked) + 1, 99)
    except InvalidPositionError as e:
        print(f"Rejected: {e}")
    print()

    linked.clear()
    print(f"8. After clear: empty={linked.is_empty()} size={len(linked)}")


def run_deque_demo(args: argparse.Namespace) -> None:
    """Walk through the deque operations."""
    dq: Deque[int] = Deque()

    print("=== Deque ===\n")

    print("1. Pushing values:")
    dq.push_back(10)
    dq.push_back(20)
    dq.push_front(5)
    dq.push_front(1)
    print_deque(dq)
    print(f"Size: {len(dq)}\n")

    print(f"2. peek_front = {dq.peek_front()}, peek_back = {dq.peek_back()}\n")

    print("3. Popping values:")
    print(f"pop_front = {dq.pop_front()}")
    print(f"pop_back = {dq.pop_back()}")
    print_deque(dq)
    print()

    dq.clear()
    print(f"4. After clear: empty={dq.is_empty()} pop_front={dq.pop_front()}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Data structures demo driver")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    sub = p.add_subparsers(dest="structure", required=True)

    bst = sub.add_parser("bst", help="Binary search tree walkthrough")
    bst.add_argument(
        "--values", type=int, nargs="+", default=DEFAULT_TREE_VALUES, help="Values to insert"
    )
    bst.add_argument("--plot", default=None, help="Save a matplotlib plot to this path")
    bst.set_defaults(run=run_bst_demo)

    lst = sub.add_parser("list", help="Doubly linked list walkthrough")
    lst.add_argument(
        "--values", type=int, nargs="+", default=DEFAULT_LIST_VALUES, help="Values to append"
    )
    lst.set_defaults(run=run_list_demo)

    dq = sub.add_parser("deque", help="Deque walkthrough")
    dq.set_defaults(run=run_deque_demo)

    return p


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Parse arguments and run the selected demo."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Running {args.structure} demo")
    args.run(args)


if __name__ == "__main__":
    main()
