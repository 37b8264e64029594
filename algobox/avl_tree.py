"""A self-balancing AVL binary search tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

_INDENT = 5


@dataclass(eq=False, slots=True)
class _Node:
    value: int
    left: Optional[_Node] = None
    right: Optional[_Node] = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _balance_factor(node: _Node | None) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _update_height(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


def _rebalance(node: _Node) -> _Node:
    _update_height(node)
    balance = _balance_factor(node)
    if balance > 1:
        if _balance_factor(node.left) < 0:
            assert node.left is not None
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance_factor(node.right) > 0:
            assert node.right is not None
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: _Node | None, value: int) -> tuple[_Node, bool]:
    if node is None:
        return _Node(value), True
    if value < node.value:
        node.left, added = _insert(node.left, value)
    elif value > node.value:
        node.right, added = _insert(node.right, value)
    else:
        return node, False
    return _rebalance(node), added


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: _Node | None, value: int) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if value < node.value:
        node.left, removed = _delete(node.left, value)
    elif value > node.value:
        node.right, removed = _delete(node.right, value)
    else:
        if node.left is None or node.right is None:
            child = node.left if node.left is not None else node.right
            return child, True
        successor = _min_node(node.right)
        node.value = successor.value
        node.right, _ = _delete(node.right, successor.value)
        removed = True
    return _rebalance(node), removed


def _inorder(node: _Node | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: _Node | None) -> Iterator[int]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: _Node | None) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def _display_lines(node: _Node | None, depth: int) -> Iterator[str]:
    if node is None:
        return
    yield from _display_lines(node.right, depth + 1)
    yield f"\n{' ' * (depth * _INDENT)}{node.value}({node.height})\n"
    yield from _display_lines(node.left, depth + 1)


class AVLTree:
    """A set of distinct values kept in a height-balanced binary search tree."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, value: int) -> None:
        """Add ``value``; a value already present is left alone."""
        self._root, added = _insert(self._root, value)
        if added:
            self._size += 1

    def remove(self, value: int) -> None:
        """Remove ``value`` if it is present."""
        self._root, removed = _delete(self._root, value)
        if removed:
            self._size -= 1

    def search(self, value: int) -> bool:
        """Whether ``value`` is in the tree."""
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def inorder(self) -> list[int]:
        """Values in ascending order."""
        return list(_inorder(self._root))

    def preorder(self) -> list[int]:
        """Values root first, then left subtree, then right subtree."""
        return list(_preorder(self._root))

    def postorder(self) -> list[int]:
        """Values left subtree first, then right subtree, then root."""
        return list(_postorder(self._root))

    def level_order(self) -> list[list[int]]:
        """Values grouped by depth, left to right within each level."""
        if self._root is None:
            return []
        levels: list[list[int]] = []
        queue = deque([self._root])
        while queue:
            level = []
            for _ in range(len(queue)):
                node = queue.popleft()
                level.append(node.value)
                if node.left is not None:
                    queue.append(node.left)
                if node.right is not None:
                    queue.append(node.right)
            levels.append(level)
        return levels

    def display(self) -> str:
        """The tree turned on its side, right subtree on top, each node as value(height)."""
        return "".join(_display_lines(self._root, 0))

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return _height(self._root)

    def is_empty(self) -> bool:
        """Whether the tree holds no values."""
        return self._root is None

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value)

    def __iter__(self) -> Iterator[int]:
        return _inorder(self._root)