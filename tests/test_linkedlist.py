import pytest

from ftkit.linkedlist import LinkedList, Node


def test_build_from_items_keeps_order():
    items = [1, "two", 3.0]
    ll = LinkedList(items)
    assert list(ll) == items
    assert len(ll) == len(items)


def test_empty_list():
    ll = LinkedList()
    assert len(ll) == 0
    assert list(ll) == []
    assert ll.last() is None
    assert ll.head is None


def test_push_front_prepends():
    ll = LinkedList(["b", "c"])
    node = ll.push_front("a")
    assert isinstance(node, Node) and ll.head is node
    assert list(ll) == ["a", "b", "c"]


def test_push_back_appends_and_updates_last():
    ll = LinkedList()
    ll.push_back("x")
    node = ll.push_back("y")
    assert ll.last() is node
    assert ll.last().content == "y"
    assert list(ll) == ["x", "y"]


def test_push_front_on_empty_list_sets_last():
    ll = LinkedList()
    node = ll.push_front("only")
    assert ll.last() is node
    assert node.next is None


def test_len_tracks_pushes():
    ll = LinkedList()
    for i in range(5):
        ll.push_back(i)
        ll.push_front(-i)
    assert len(ll) == 10


def test_clear_calls_delete_in_order_and_empties():
    items = ["a", "b", "c"]
    ll = LinkedList(items)
    deleted = []
    ll.clear(deleted.append)
    assert deleted == items
    assert len(ll) == 0
    assert ll.head is None


def test_clear_without_delete_empties():
    ll = LinkedList([1, 2])
    ll.clear()
    assert list(ll) == []


def test_iterate_visits_each_content():
    items = [3, 1, 4, 1, 5]
    seen = []
    LinkedList(items).iterate(seen.append)
    assert seen == items


def test_map_builds_new_list_and_keeps_original():
    items = ["ab", "cde", ""]
    ll = LinkedList(items)
    mapped = ll.map(len, lambda _: None)
    assert list(mapped) == [len(s) for s in items]
    assert list(ll) == items
    assert mapped is not ll


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str)) == 0


def test_map_failure_deletes_partial_results():
    def f(x):
        if x == 3:
            raise RuntimeError("boom")
        return x * 10

    deleted = []
    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == [f(1), f(2)]