import pytest
from hypothesis import given, strategies as st

from pushswap.libft.lists import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_init_from_items_keeps_order():
    lst = LinkedList(["Hello", "World", "!"])
    assert list(lst) == ["Hello", "World", "!"]
    assert len(lst) == 3


def test_push_back_appends():
    lst = LinkedList()
    lst.push_back("Hello")
    lst.push_back("World")
    lst.push_back("!")
    assert list(lst) == ["Hello", "World", "!"]


def test_push_front_prepends():
    lst = LinkedList()
    lst.push_front("!")
    lst.push_front("World")
    lst.push_front("Hello")
    assert list(lst) == ["Hello", "World", "!"]
    assert len(lst) == 3


def test_push_returns_node_with_content():
    lst = LinkedList()
    node = lst.push_back(5)
    assert isinstance(node, Node)
    assert node.content == 5
    assert node.next is None


def test_last_node():
    lst = LinkedList()
    lst.push_front("!")
    lst.push_front("World")
    lst.push_front("Hello")
    assert lst.last().content == "!"
    assert lst.last().next is None


def test_last_after_push_front_on_empty():
    lst = LinkedList()
    lst.push_front("only")
    assert lst.last().content == "only"


def test_remove_first_returns_and_deletes():
    deleted = []
    lst = LinkedList([1, 2, 3])
    assert lst.remove_first(deleted.append) == 1
    assert deleted == [1]
    assert list(lst) == [2, 3]
    assert len(lst) == 2


def test_remove_first_until_empty_resets_last():
    lst = LinkedList(["a"])
    assert lst.remove_first() == "a"
    assert lst.last() is None
    lst.push_back("b")
    assert list(lst) == ["b"]
    assert lst.last().content == "b"


def test_remove_first_on_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().remove_first()


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList(["x", "y", "z"])
    lst.clear(deleted.append)
    assert deleted == ["x", "y", "z"]
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_for_each_visits_all():
    seen = []
    LinkedList([3, 1, 2]).for_each(seen.append)
    assert seen == [3, 1, 2]


def test_map_builds_new_list_and_leaves_original():
    original = LinkedList(["a", "b"])
    mapped = original.map(str.upper)
    assert list(mapped) == ["A", "B"]
    assert list(original) == ["a", "b"]
    assert mapped is not original


def test_map_failure_deletes_partial_results():
    deleted = []

    def f(value):
        if value == 3:
            raise RuntimeError("boom")
        return value * 10

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == [10, 20]


@given(st.lists(st.integers()))
def test_round_trip(items):
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)
    if items:
        assert lst.last().content == items[-1]


@given(st.lists(st.integers()))
def test_push_front_reverses(items):
    lst = LinkedList()
    for item in items:
        lst.push_front(item)
    assert list(lst) == items[::-1]


@given(st.lists(st.integers()))
def test_map_identity_preserves(items):
    assert list(LinkedList(items).map(lambda x: x)) == items