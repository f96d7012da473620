"""Unit tests for tree plotting."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from data_structures import BinarySearchTree
from data_structures.visualize import layout_tree, plot_tree


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_layout_uses_inorder_rank_and_depth():
    tree = BinarySearchTree([50, 30, 70, 20])
    positions = {node.value: xy for node, xy in layout_tree(tree).items()}

    assert positions == {
        20: (0, -2),
        30: (1, -1),
        50: (2, 0),
        70: (3, -1),
    }


def test_layout_empty():
    assert layout_tree(BinarySearchTree()) == {}


def test_plot_tree_writes_file(tmp_path):
    out = tmp_path / "tree.png"
    fig = plot_tree(BinarySearchTree([50, 30, 70, 20, 40]), out)

    assert out.exists()
    assert out.stat().st_size > 0
    assert fig.axes[0].get_title() == "Binary search tree"


def test_plot_empty_tree(tmp_path):
    out = tmp_path / "empty.png"
    plot_tree(BinarySearchTree(), out, title="nothing")
    assert out.exists()


def test_saved_figures_are_closed(tmp_path):
    for i in range(3):
        fig = plot_tree(BinarySearchTree([i, i + 1]), tmp_path / f"tree{i}.png")
        assert fig.number not in plt.get_fignums()
    assert plt.get_fignums() == []
