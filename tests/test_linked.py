import pytest

from corekit.linked import LinkedList, Node


def _build(*contents):
    lst = LinkedList()
    for content in contents:
        lst.push_back(Node(content))
    return lst


def test_push_back_to_empty_list():
    lst = LinkedList()
    node = Node(10)
    lst.push_back(node)
    assert lst.head is node
    assert node.next is None


def test_push_back_to_existing_list():
    node_b = Node(20)
    node_a = Node(10, node_b)
    lst = LinkedList(node_a)
    new = Node(20)
    lst.push_back(new)
    assert node_b.next is new
    assert new.next is None
    assert len(lst) == 3


def test_push_back_to_single_node_list():
    node_a = Node(10)
    lst = LinkedList(node_a)
    new = Node(20)
    lst.push_back(new)
    assert node_a.next is new
    assert new.next is None


def test_push_back_none_is_ignored():
    lst = _build("a")
    lst.push_back(None)
    assert list(lst) == ["a"]


def test_push_front_existing_list():
    old_head = Node(20)
    lst = LinkedList(old_head)
    new = Node(10)
    lst.push_front(new)
    assert lst.head is new
    assert new.next is old_head


def test_push_front_empty_list():
    lst = LinkedList()
    new = Node(10)
    lst.push_front(new)
    assert lst.head is new
    assert new.next is None


@pytest.mark.parametrize("count", [0, 1, 5, 10])
def test_clear_deletes_every_content(count):
    lst = LinkedList()
    for i in range(count):
        lst.push_front(Node(f"Data{i}"))
    deleted = []
    lst.clear(deleted.append)
    assert lst.head is None
    assert len(deleted) == count
    assert deleted == [f"Data{i}" for i in reversed(range(count))]


def test_clear_without_delete_keeps_list():
    lst = _build("a", "b")
    lst.clear(None)
    assert list(lst) == ["a", "b"]


@pytest.mark.parametrize("text", ["String to be deleted", "A", ""])
def test_release_calls_delete(text):
    deleted = []
    node = Node(text, Node("next"))
    node.release(deleted.append)
    assert deleted == [text]
    assert node.next is None


def test_for_each_mutates_contents():
    lst = _build(bytearray(b"one"), bytearray(b"two"), bytearray(b"three"))

    def to_upper(buf):
        buf[:] = buf.upper()

    lst.for_each(to_upper)
    assert [bytes(b) for b in lst] == [b"ONE", b"TWO", b"THREE"]


def test_for_each_on_empty_list():
    calls = []
    LinkedList().for_each(calls.append)
    assert calls == []


def test_last_empty():
    assert LinkedList().last() is None


def test_last_single():
    node = Node("Single")
    assert LinkedList(node).last() is node


def test_last_three_nodes():
    node_c = Node("C")
    head = Node("A", Node("B", node_c))
    assert LinkedList(head).last() is node_c


def test_last_long_list():
    tail = Node("Tail")
    head = Node("Head", Node("Mid1", Node("Mid2", tail)))
    assert LinkedList(head).last() is tail


def test_map_builds_independent_list():
    original = _build("one", "two", "three")
    mapped = original.map(str.upper, lambda content: None)
    assert list(mapped) == ["ONE", "TWO", "THREE"]
    assert list(original) == ["one", "two", "three"]
    assert mapped.head is not original.head


def test_map_empty_list():
    mapped = LinkedList().map(str.upper, lambda content: None)
    assert len(mapped) == 0
    assert mapped.head is None


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(content):
        if content == "bad":
            raise ValueError("cannot map")
        return content.upper()

    with pytest.raises(ValueError):
        _build("a", "b", "bad").map(func, deleted.append)
    assert deleted == ["A", "B"]


@pytest.mark.parametrize("content", [42, "Hello World", None])
def test_new_node(content):
    node = Node(content)
    assert node.content == content
    assert node.next is None


def test_size_empty():
    assert len(LinkedList()) == 0


def test_size_single():
    assert len(LinkedList(Node("A"))) == 1


def test_size_three():
    assert len(LinkedList(Node("A", Node("B", Node("C"))))) == 3


def test_size_five():
    assert len(_build("E", "D", "C", "B", "A")) == 5