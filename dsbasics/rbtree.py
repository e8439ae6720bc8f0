"""A red-black binary search tree with a text rendering of its shape."""

import copy as _copy
from enum import Enum
from pathlib import Path

_PREFIX = "Comment :=>> "
_INDENT = "|--"


class Color(Enum):
    """Colour of a red-black tree node."""

    RED = 0
    BLACK = 1


class _Node:
    __slots__ = ("value", "color", "left", "right", "parent")

    def __init__(self, value, color=Color.RED, parent=None):
        self.value = value
        self.color = color
        self.left = None
        self.right = None
        self.parent = parent


class RedBlackTree:
    """Red-black tree ordered by ``<``; values equal by ``==`` are stored once."""

    def __init__(self):
        self._root = None

    @classmethod
    def load(cls, path, parse):
        """Build a tree from a whitespace-separated preorder description.

        The file holds the height, then a 0/1 flag for the root; every
        present node is a token converted with ``parse``, followed (while
        the remaining height is above zero) by flags for its left and right
        subtrees. Loaded nodes keep the default red colour.
        """
        tokens = iter(Path(path).read_text().split())
        tree = cls()
        height = next(tokens, None)
        if height is None:
            return tree
        state = next(tokens, None)
        if state is not None and int(state) == 1:
            tree._root = cls._read_node(tokens, int(height), None, parse)
        return tree

    @classmethod
    def _read_node(cls, tokens, height, parent, parse):
        token = next(tokens, None)
        if token is None:
            raise ValueError("tree description ends before a node's value")
        node = _Node(parse(token), parent=parent)
        if height > 0:
            state = next(tokens, None)
            if state is not None and int(state) == 1:
                node.left = cls._read_node(tokens, height - 1, node, parse)
            state = next(tokens, None)
            if state is not None and int(state) == 1:
                node.right = cls._read_node(tokens, height - 1, node, parse)
        return node

    def is_empty(self):
        """True when the tree holds no value."""
        return self._root is None

    def is_leaf(self):
        """True when the root has no children."""
        return self._root is None or (self._root.left is None and self._root.right is None)

    def _descend(self, value):
        """Return the node holding ``value`` and True, or the last node visited and False."""
        node = self._root
        while node is not None:
            if value == node.value:
                return node, True
            child = node.left if value < node.value else node.right
            if child is None:
                return node, False
            node = child
        return None, False

    def search(self, value):
        """Return the stored value equal to ``value``, or None when absent."""
        node, found = self._descend(value)
        return node.value if found else None

    def insert(self, value):
        """Insert ``value`` unless an equal value is already stored."""
        if self._root is None:
            self._root = _Node(value, Color.BLACK)
            return
        parent, found = self._descend(value)
        if found:
            return
        node = _Node(value, Color.RED, parent)
        if value < parent.value:
            parent.left = node
        else:
            parent.right = node
        self._fix_red_red(node)

    def _fix_red_red(self, node):
        while True:
            parent = node.parent
            if parent is None:
                node.color = Color.BLACK
                return
            if parent.color is Color.BLACK:
                return
            grand = parent.parent
            uncle = grand.right if parent is grand.left else grand.left
            if uncle is not None and uncle.color is Color.RED:
                parent.color = Color.BLACK
                uncle.color = Color.BLACK
                grand.color = Color.RED
                node = grand
                continue
            self._restructure(node, parent, grand)
            return

    def _restructure(self, node, parent, grand):
        if parent is grand.left:
            if node is parent.left:
                parent.color, grand.color = grand.color, parent.color
            else:
                node.color, grand.color = grand.color, node.color
                self._rotate_left(parent)
            self._rotate_right(grand)
        else:
            if node is parent.left:
                node.color, grand.color = grand.color, node.color
                self._rotate_right(parent)
            else:
                parent.color, grand.color = grand.color, parent.color
            self._rotate_left(grand)

    def _replace_child(self, old, new):
        parent = old.parent
        new.parent = parent
        if parent is None:
            self._root = new
        elif old is parent.left:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, node):
        pivot = node.right
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        self._replace_child(node, pivot)
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node):
        pivot = node.left
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        self._replace_child(node, pivot)
        pivot.right = node
        node.parent = pivot

    def copy(self):
        """Return an independent tree with copies of the stored values."""
        duplicate = type(self)()
        duplicate._root = self._copy_node(self._root, None)
        return duplicate

    @classmethod
    def _copy_node(cls, node, parent):
        if node is None:
            return None
        clone = _Node(_copy.copy(node.value), node.color, parent)
        clone.left = cls._copy_node(node.left, clone)
        clone.right = cls._copy_node(node.right, clone)
        return clone

    def render(self):
        """Draw the tree in preorder, one node per line, left subtree first."""
        if self._root is None:
            return f"{_PREFIX}-->BUIT\n"
        lines = []
        self._render_node(self._root, 0, lines)
        return "".join(lines)

    def _render_node(self, node, depth, lines):
        lines.append(f"{_PREFIX}{_INDENT * depth}|-->{node.color.name},{node.value}\n")
        if node.left is None and node.right is None:
            return
        for child in (node.left, node.right):
            if child is None:
                lines.append(f"{_PREFIX}{_INDENT * (depth + 1)}|-->BUIT\n")
            else:
                self._render_node(child, depth + 1, lines)

    def __str__(self):
        return self.render()