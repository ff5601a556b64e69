import pytest

from fdfkit.linked import LinkedList, Node


def test_new_node_has_no_successor():
    node = Node("content")
    assert node.content == "content"
    assert node.next is None


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.head is None
    assert lst.last() is None


def test_init_keeps_order():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = LinkedList(["b", "c"])
    node = lst.push_front("a")
    assert lst.head is node
    assert list(lst) == ["a", "b", "c"]


def test_push_back_on_empty_sets_head():
    lst = LinkedList()
    node = lst.push_back("x")
    assert lst.head is node
    assert lst.last() is node


def test_push_back_appends():
    lst = LinkedList([1])
    node = lst.push_back(2)
    assert list(lst) == [1, 2]
    assert lst.last() is node
    assert lst.head.next is node


def test_last_returns_final_node():
    lst = LinkedList(["a", "b", "c"])
    tail = lst.last()
    assert tail.content == "c"
    assert tail.next is None


def test_len_matches_pushes():
    lst = LinkedList()
    for i in range(5):
        lst.push_front(i)
    assert len(lst) == 5
    assert list(lst) == [4, 3, 2, 1, 0]


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert lst.head is None
    assert len(lst) == 0


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_clear_empty_list_calls_nothing():
    deleted = []
    LinkedList().clear(deleted.append)
    assert deleted == []


def test_for_each_visits_every_content():
    seen = []
    LinkedList([3, 1, 2]).for_each(seen.append)
    assert seen == [3, 1, 2]


def test_map_builds_new_list():
    lst = LinkedList(["a", "b"])
    mapped = lst.map(str.upper)
    assert list(mapped) == ["A", "B"]
    assert list(lst) == ["a", "b"]
    assert mapped.head is not lst.head


def test_map_of_empty_list_is_empty():
    assert list(LinkedList().map(str.upper)) == []


def test_map_failure_deletes_produced_contents():
    deleted = []

    def f(x):
        if x == "c":
            raise RuntimeError("boom")
        return x * 2

    lst = LinkedList(["a", "b", "c", "d"])
    with pytest.raises(RuntimeError):
        lst.map(f, deleted.append)
    assert deleted == ["aa", "bb"]
    assert list(lst) == ["a", "b", "c", "d"]


def test_map_then_len_invariant():
    lst = LinkedList(range(10))
    assert len(lst.map(lambda x: x)) == len(lst)
    assert list(lst.map(lambda x: x)) == list(lst)