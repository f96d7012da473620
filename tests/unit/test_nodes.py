from data_structures import BinaryTreeNode, DLLNode, InvalidPositionError, DataStructureError


def test_binary_tree_node_children():
    leaf = BinaryTreeNode(1)
    assert leaf.is_leaf()
    assert leaf.child_count == 0

    parent = BinaryTreeNode(2, left=leaf)
    assert not parent.is_leaf()
    assert parent.child_count == 1

    parent.right = BinaryTreeNode(3)
    assert parent.child_count == 2
    assert repr(parent) == "BinaryTreeNode(2)"


def test_dll_node_repr():
    a = DLLNode("a")
    b = DLLNode("b", prev=a)
    a.next = b
    assert repr(a) == "DLLNode(value='a', prev=None, next='b')"
    assert repr(b) == "DLLNode(value='b', prev='a', next=None)"


def test_invalid_position_error_hierarchy():
    err = InvalidPositionError(7, 0, 3)
    assert isinstance(err, DataStructureError)
    assert isinstance(err, IndexError)
    assert str(err) == "Invalid position 7: must be between 0 and 3"
    assert (err.position, err.lower, err.upper) == (7, 0, 3)
