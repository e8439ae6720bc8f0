import random

import pytest

from dsbasics.rbtree import Color, RedBlackTree


class Keyed:
    def __init__(self, key, label):
        self.key = key
        self.label = label

    def __lt__(self, other):
        return self.key < other.key

    def __eq__(self, other):
        return self.key == other.key

    def __str__(self):
        return str(self.key)


def _check(node, parent):
    """Verify red-black and ordering properties; return the black height."""
    if node is None:
        return 1
    assert node.parent is parent
    if node.color is Color.RED:
        for child in (node.left, node.right):
            assert child is None or child.color is Color.BLACK
    if node.left is not None:
        assert node.left.value < node.value
    if node.right is not None:
        assert node.value < node.right.value
    left = _check(node.left, node)
    right = _check(node.right, node)
    assert left == right
    return left + (1 if node.color is Color.BLACK else 0)


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.value] + _inorder(node.right)


def _assert_valid(tree):
    if tree._root is not None:
        assert tree._root.color is Color.BLACK
    _check(tree._root, None)


def test_empty_tree():
    tree = RedBlackTree()
    assert tree.is_empty()
    assert tree.is_leaf()
    assert tree.render() == "Comment :=>> -->BUIT\n"
    assert tree.search(3) is None


def test_first_insert_is_black_root():
    tree = RedBlackTree()
    tree.insert(7)
    assert not tree.is_empty()
    assert tree.is_leaf()
    assert str(tree) == "Comment :=>> |-->BLACK,7\n"


def test_three_ascending_inserts_rebalance():
    tree = RedBlackTree()
    for value in (1, 2, 3):
        tree.insert(value)
    assert not tree.is_leaf()
    assert tree.render() == (
        "Comment :=>> |-->BLACK,2\n"
        "Comment :=>> |--|-->RED,1\n"
        "Comment :=>> |--|-->RED,3\n"
    )


def test_missing_child_rendered_as_empty():
    tree = RedBlackTree()
    tree.insert(5)
    tree.insert(8)
    lines = tree.render().splitlines()
    assert lines[0] == "Comment :=>> |-->BLACK,5"
    assert lines[1] == "Comment :=>> |--|-->BUIT"
    assert lines[2] == "Comment :=>> |--|-->RED,8"


@pytest.mark.parametrize("order", ["ascending", "descending", "shuffled"])
def test_invariants_hold_after_many_inserts(order):
    values = list(range(200))
    if order == "descending":
        values.reverse()
    elif order == "shuffled":
        random.Random(42).shuffle(values)
    tree = RedBlackTree()
    for value in values:
        tree.insert(value)
        _assert_valid(tree)
    assert _inorder(tree._root) == sorted(values)


def test_duplicates_are_ignored():
    tree = RedBlackTree()
    first = Keyed(1, "first")
    tree.insert(first)
    tree.insert(Keyed(1, "second"))
    assert tree.search(Keyed(1, "probe")) is first
    assert len(_inorder(tree._root)) == 1


def test_search_returns_stored_or_none():
    tree = RedBlackTree()
    for value in (10, 4, 15, 2):
        tree.insert(value)
    assert tree.search(15) == 15
    assert tree.search(2) == 2
    assert tree.search(99) is None


def test_copy_is_equal_and_independent():
    tree = RedBlackTree()
    for value in (5, 3, 9, 1):
        tree.insert(value)
    duplicate = tree.copy()
    assert duplicate.render() == tree.render()
    _assert_valid(duplicate)
    before = tree.render()
    duplicate.insert(100)
    assert tree.render() == before
    assert duplicate.search(100) == 100
    assert tree.search(100) is None


def test_load_from_file(tmp_path):
    path = tmp_path / "tree.txt"
    path.write_text("1 1 5 1 3 0\n")
    tree = RedBlackTree.load(path, int)
    assert tree.render() == (
        "Comment :=>> |-->RED,5\n"
        "Comment :=>> |--|-->RED,3\n"
        "Comment :=>> |--|-->BUIT\n"
    )
    assert tree.search(3) == 3


def test_load_empty_flag(tmp_path):
    path = tmp_path / "tree.txt"
    path.write_text("2 0\n")
    assert RedBlackTree.load(path, int).is_empty()


def test_load_empty_file(tmp_path):
    path = tmp_path / "tree.txt"
    path.write_text("")
    assert RedBlackTree.load(path, int).is_empty()


def test_load_truncated_file(tmp_path):
    path = tmp_path / "tree.txt"
    path.write_text("1 1 5 1")
    with pytest.raises(ValueError):
        RedBlackTree.load(path, int)