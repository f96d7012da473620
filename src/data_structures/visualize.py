"""Tree plotting with matplotlib.

Nodes are laid out with their in-order rank on the x axis and their
depth (downwards) on the y axis, so the ordering invariant reads left
to right across the figure.

Usage:
    from data_structures import BinarySearchTree
    from data_structures.visualize import plot_tree

    plot_tree(BinarySearchTree([50, 30, 70]), "/tmp/bst.png")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Optional, Tuple, Union

import matplotlib.pyplot as plt

if TYPE_CHECKING:
    from matplotlib.figure import Figure

    from .bst import BinarySearchTree
    from .nodes import BinaryTreeNode

logger = logging.getLogger(__name__)


def layout_tree(tree: BinarySearchTree) -> Dict[BinaryTreeNode, Tuple[int, int]]:
    """Return (x, y) positions for every node: x = in-order rank, y = -depth."""
    positions: Dict[BinaryTreeNode, Tuple[int, int]] = {}
    stack: list[tuple[BinaryTreeNode, int]] = []
    node, depth, rank = tree.root, 0, 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node, depth = node.left, depth + 1
        node, depth = stack.pop()
        positions[node] = (rank, -depth)
        rank += 1
        node, depth = node.right, depth + 1
    return positions


def plot_tree(
    tree: BinarySearchTree,
    output_path: Optional[Union[str, Path]] = None,
    title: str = "Binary search tree",
) -> Figure:
    """
    Draws the tree and either saves it to `output_path` or shows it.
    A saved figure is closed before it is returned.
    Returns the matplotlib Figure.
    """
    positions = layout_tree(tree)
    width = max(len(positions), 1)
    height = tree.height() + 2

    fig, ax = plt.subplots(figsize=(max(4, width * 0.8), max(3, height * 1.0)))
    ax.set_title(title)
    ax.axis("off")

    if not positions:
        ax.text(0.5, 0.5, "<empty>", ha="center", va="center", transform=ax.transAxes)

    for node, (x, y) in positions.items():
        for child in (node.left, node.right):
            if child is not None:
                cx, cy = positions[child]
                ax.plot([x, cx], [y, cy], color="gray", linewidth=1, zorder=1)

    for node, (x, y) in positions.items():
        ax.scatter([x], [y], s=600, color="tab:blue", zorder=2)
        ax.text(x, y, str(node.value), ha="center", va="center", color="white", zorder=3)

    if positions:
        ax.set_xlim(-1, width)
        ax.set_ylim(-height, 1)

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, dpi=150)
        plt.close(fig)
        logger.info(f"Saved tree plot to {output_path}")
    else:
        plt.show()
    return fig
