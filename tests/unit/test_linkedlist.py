import pytest

from data_structures import DoublyLinkedList, InvalidPositionError


class Item:
    def __init__(self, value: str):
        self.value = value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value

    def __eq__(self, other) -> bool:
        return isinstance(other, Item) and self.value == other.value


@pytest.fixture
def ll():
    """List holding 5 <-> 10 <-> 15 <-> 20."""
    return DoublyLinkedList([5, 10, 15, 20])


def assert_linked(lst):
    """Check head/tail/size bookkeeping against both walk directions."""
    assert lst.forward() == lst.backward()[::-1]
    assert len(lst.forward()) == len(lst)
    if lst.is_empty():
        assert lst.head is None and lst.tail is None
    else:
        assert lst.head.prev is None
        assert lst.tail.next is None


def test_prepend_and_append():
    lst = DoublyLinkedList[Item]()
    assert len(lst) == 0

    lst.append(Item("B"))
    lst.prepend(Item("A"))
    lst.append(Item("C"))

    assert len(lst) == 3
    assert repr(lst) == "HEAD ⇄ A ⇄ B ⇄ C ⇄ TAIL"
    assert_linked(lst)


def test_empty_list():
    lst = DoublyLinkedList()
    assert lst.is_empty()
    assert lst.size == 0
    assert lst.forward() == []
    assert lst.backward() == []
    assert repr(lst) == "DoublyLinkedList([])"
    assert_linked(lst)


def test_insert_in_middle():
    lst = DoublyLinkedList([10, 20])
    lst.prepend(5)
    lst.insert_at(2, 15)

    assert lst.forward() == [5, 10, 15, 20]
    assert lst.backward() == [20, 15, 10, 5]
    assert_linked(lst)


@pytest.mark.parametrize(
    "position, expected",
    [
        (0, [99, 5, 10, 15, 20]),
        (1, [5, 99, 10, 15, 20]),
        (3, [5, 10, 15, 99, 20]),
        (4, [5, 10, 15, 20, 99]),
    ],
)
def test_insert_at(ll, position, expected):
    ll.insert_at(position, 99)
    assert ll.forward() == expected
    assert ll.get(position) == 99
    assert_linked(ll)


def test_insert_at_into_empty():
    lst = DoublyLinkedList()
    lst.insert_at(0, 1)
    assert lst.forward() == [1]
    assert lst.head is lst.tail
    assert_linked(lst)


@pytest.mark.parametrize("position", [-1, 5, 100])
def test_insert_at_invalid(ll, position):
    with pytest.raises(InvalidPositionError) as excinfo:
        ll.insert_at(position, 99)

    assert excinfo.value.position == position
    assert excinfo.value.upper == 4
    assert "between 0 and 4" in str(excinfo.value)
    # State is untouched by the rejected call
    assert ll.forward() == [5, 10, 15, 20]
    assert_linked(ll)


def test_invalid_position_is_an_index_error(ll):
    with pytest.raises(IndexError):
        ll.remove_at(4)


@pytest.mark.parametrize(
    "position, removed, expected",
    [
        (0, 5, [10, 15, 20]),
        (1, 10, [5, 15, 20]),
        (2, 15, [5, 10, 20]),
        (3, 20, [5, 10, 15]),
    ],
)
def test_remove_at(ll, position, removed, expected):
    assert ll.remove_at(position) == removed
    assert ll.forward() == expected
    assert len(ll) == 3
    assert_linked(ll)


@pytest.mark.parametrize("position", [-1, 4])
def test_remove_at_invalid(ll, position):
    with pytest.raises(InvalidPositionError):
        ll.remove_at(position)
    assert ll.forward() == [5, 10, 15, 20]


def test_remove_at_empty():
    with pytest.raises(InvalidPositionError) as excinfo:
        DoublyLinkedList().remove_at(0)
    assert excinfo.value.upper == -1


def test_remove_last_element():
    lst = DoublyLinkedList([1])
    assert lst.remove_at(0) == 1
    assert lst.is_empty()
    assert_linked(lst)


def test_pop_left_and_pop(ll):
    assert ll.pop_left() == 5
    assert ll.pop() == 20
    assert ll.forward() == [10, 15]
    assert_linked(ll)

    assert ll.pop() == 15
    assert ll.pop() == 10
    assert ll.is_empty()
    assert_linked(ll)


def test_pop_empty_returns_none():
    lst = DoublyLinkedList()
    assert lst.pop_left() is None
    assert lst.pop() is None
    assert lst.size == 0


def test_remove_by_value():
    lst = DoublyLinkedList([Item("A"), Item("B"), Item("C")])

    assert lst.remove(Item("B"))
    assert repr(lst) == "HEAD ⇄ A ⇄ C ⇄ TAIL"

    # removing non-existent
    assert not lst.remove(Item("Z"))

    assert lst.remove(Item("A"))
    assert lst.remove(Item("C"))
    assert lst.is_empty()
    assert_linked(lst)


def test_index_of(ll):
    assert ll.index_of(5) == 0
    assert ll.index_of(15) == 2
    assert ll.index_of(100) == -1
    assert DoublyLinkedList().index_of(1) == -1


def test_index_of_first_match():
    lst = DoublyLinkedList([1, 2, 1])
    assert lst.index_of(1) == 0


@pytest.mark.parametrize(
    "position, expected",
    [(0, 5), (1, 10), (2, 15), (3, 20), (-1, None), (4, None)],
)
def test_get(ll, position, expected):
    assert ll.get(position) == expected


def test_clear(ll):
    ll.clear()
    assert ll.is_empty()
    assert len(ll) == 0
    assert ll.forward() == []
    assert_linked(ll)


def test_iteration(ll):
    assert list(ll) == [5, 10, 15, 20]
    assert list(reversed(ll)) == [20, 15, 10, 5]


def test_insert_remove_round_trip(ll):
    original = ll.forward()

    ll.insert_at(2, 99)
    ll.insert_at(0, 98)
    ll.insert_at(len(ll), 97)
    assert ll.remove_at(len(ll) - 1) == 97
    assert ll.remove_at(0) == 98
    assert ll.remove_at(2) == 99

    assert ll.forward() == original
    assert_linked(ll)


def test_invalid_position_is_logged(ll, caplog):
    with caplog.at_level("WARNING", logger="data_structures.linkedlist"):
        with pytest.raises(InvalidPositionError):
            ll.insert_at(10, 1)
    assert "Rejected position 10" in caplog.text
