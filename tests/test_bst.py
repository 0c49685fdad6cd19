import pytest

from rasterlab.bst import Node, add, contains


def create_large_tree():
    root = add(None, 5)
    for value in (2, 4, 8, 6):
        add(root, value)
    return root


def test_add_to_empty_creates_node():
    root = add(None, -1)
    assert root.data == -1
    assert root.left is None and root.right is None


def test_add_left_simple():
    b1 = add(None, 5)
    add(b1, 4)
    assert b1.left.data == 4


def test_add_returns_same_root():
    b1 = add(None, 5)
    assert add(b1, 7) is b1


def test_add_already_in_tree():
    b1 = add(None, 5)
    add(b1, 5)
    assert b1.data == 5
    assert b1.right is None
    assert b1.left is None


def test_add_left_large_tree():
    b1 = create_large_tree()
    add(b1, 1)
    assert b1.left.left.data == 1


def test_add_right_large_tree():
    b1 = create_large_tree()
    add(b1, 9)
    assert b1.right.right.data == 9


def test_add_large_tree():
    b1 = create_large_tree()
    add(b1, 3)
    assert b1.left.right.left.data == 3


def test_large_tree_shape():
    b1 = create_large_tree()
    assert b1 == Node(5, Node(2, None, Node(4)), Node(8, Node(6)))


def test_contains_simple():
    b1 = add(None, 5)
    assert contains(b1, 5) is True


def test_contains_simple_fail():
    b1 = add(None, 5)
    assert contains(b1, 4) is False


@pytest.mark.parametrize(
    "value,expected",
    [(5, True), (2, True), (4, True), (6, True), (8, True),
     (10, False), (0, False), (3, False)],
)
def test_contains_large_tree(value, expected):
    b1 = create_large_tree()
    assert contains(b1, value) is expected


def test_contains_empty_tree():
    assert contains(None, 5) is False


def test_add_then_contains_many():
    values = [50, 20, 70, 10, 30, 60, 80, 25, 65]
    root = None
    for v in values:
        root = add(root, v)
    assert all(contains(root, v) for v in values)
    assert not contains(root, 55)