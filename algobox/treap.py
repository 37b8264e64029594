"""An implicit treap: a sequence with fast range add, assign, reverse and sum."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False, slots=True)
class _Node:
    value: int
    priority: float
    total: int = field(init=False)
    size: int = 1
    left: Optional[_Node] = None
    right: Optional[_Node] = None
    reversed: bool = False
    assigned: Optional[int] = None
    added: int = 0

    def __post_init__(self) -> None:
        self.total = self.value


def _size(node: _Node | None) -> int:
    return node.size if node is not None else 0


def _total(node: _Node | None) -> int:
    return node.total if node is not None else 0


def _apply_assign(node: _Node | None, value: int) -> None:
    if node is None:
        return
    node.assigned = value
    node.added = 0
    node.value = value
    node.total = node.size * value


def _apply_add(node: _Node | None, delta: int) -> None:
    if node is None:
        return
    if node.assigned is not None:
        node.assigned += delta
    else:
        node.added += delta
    node.value += delta
    node.total += node.size * delta


def _apply_reverse(node: _Node | None) -> None:
    if node is None:
        return
    node.reversed = not node.reversed
    node.left, node.right = node.right, node.left


def _push(node: _Node) -> None:
    if node.assigned is not None:
        _apply_assign(node.left, node.assigned)
        _apply_assign(node.right, node.assigned)
        node.assigned = None
    if node.added:
        _apply_add(node.left, node.added)
        _apply_add(node.right, node.added)
        node.added = 0
    if node.reversed:
        _apply_reverse(node.left)
        _apply_reverse(node.right)
        node.reversed = False


def _pull(node: _Node) -> None:
    node.size = 1 + _size(node.left) + _size(node.right)
    node.total = node.value + _total(node.left) + _total(node.right)


def _split(node: _Node | None, k: int) -> tuple[_Node | None, _Node | None]:
    """Split into the first ``k`` elements and the rest."""
    if node is None:
        return None, None
    _push(node)
    if _size(node.left) >= k:
        left, node.left = _split(node.left, k)
        _pull(node)
        return left, node
    node.right, right = _split(node.right, k - _size(node.left) - 1)
    _pull(node)
    return node, right


def _merge(first: _Node | None, second: _Node | None) -> _Node | None:
    if first is None:
        return second
    if second is None:
        return first
    if first.priority > second.priority:
        _push(first)
        first.right = _merge(first.right, second)
        _pull(first)
        return first
    _push(second)
    second.left = _merge(first, second.left)
    _pull(second)
    return second


def _build(values: Iterable[int], rng: random.Random) -> _Node | None:
    """Build a treap over ``values`` in linear expected time."""
    stack: list[_Node] = []
    for value in values:
        node = _Node(value, rng.random())
        last: _Node | None = None
        while stack and stack[-1].priority < node.priority:
            last = stack.pop()
            _pull(last)
        node.left = last
        if stack:
            stack[-1].right = node
        stack.append(node)
    if not stack:
        return None
    while len(stack) > 1:
        _pull(stack.pop())
    _pull(stack[0])
    return stack[0]


class ImplicitTreap:
    """A sequence of integers addressed by position, with lazy range updates."""

    def __init__(self, values: Iterable[int] = (), *, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._root = _build(values, self._rng)

    def _check_range(self, start: int, stop: int) -> None:
        if not 0 <= start <= stop <= len(self):
            raise IndexError(f"range [{start}, {stop}) is outside [0, {len(self)}]")

    def _cut(self, start: int, stop: int) -> tuple[_Node | None, _Node | None, _Node | None]:
        self._check_range(start, stop)
        head, rest = _split(self._root, start)
        middle, tail = _split(rest, stop - start)
        return head, middle, tail

    def _join(self, head: _Node | None, middle: _Node | None, tail: _Node | None) -> None:
        self._root = _merge(_merge(head, middle), tail)

    def insert(self, pos: int, values: Iterable[int]) -> None:
        """Insert ``values`` before position ``pos``."""
        if not 0 <= pos <= len(self):
            raise IndexError(f"position {pos} is outside [0, {len(self)}]")
        head, tail = _split(self._root, pos)
        self._join(head, _build(values, self._rng), tail)

    def erase(self, start: int, stop: int) -> None:
        """Remove the elements in ``[start, stop)``."""
        head, _, tail = self._cut(start, stop)
        self._root = _merge(head, tail)

    def add(self, start: int, stop: int, value: int) -> None:
        """Add ``value`` to every element in ``[start, stop)``."""
        head, middle, tail = self._cut(start, stop)
        _apply_add(middle, value)
        self._join(head, middle, tail)

    def assign(self, start: int, stop: int, value: int) -> None:
        """Set every element in ``[start, stop)`` to ``value``."""
        head, middle, tail = self._cut(start, stop)
        _apply_assign(middle, value)
        self._join(head, middle, tail)

    def reverse(self, start: int, stop: int) -> None:
        """Reverse the order of the elements in ``[start, stop)``."""
        head, middle, tail = self._cut(start, stop)
        _apply_reverse(middle)
        self._join(head, middle, tail)

    def range_sum(self, start: int, stop: int) -> int:
        """Sum of the elements in ``[start, stop)``."""
        head, middle, tail = self._cut(start, stop)
        result = _total(middle)
        self._join(head, middle, tail)
        return result

    def to_list(self) -> list[int]:
        """The elements in order."""
        return list(self)

    def __iter__(self) -> Iterator[int]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                _push(node)
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __getitem__(self, index: int) -> int:
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("treap index out of range")
        node = self._root
        while node is not None:
            _push(node)
            left_size = _size(node.left)
            if index < left_size:
                node = node.left
            elif index == left_size:
                return node.value
            else:
                index -= left_size + 1
                node = node.right
        raise IndexError("treap index out of range")

    def __len__(self) -> int:
        return _size(self._root)

    def __repr__(self) -> str:
        return f"ImplicitTreap({self.to_list()!r})"