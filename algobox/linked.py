"""Linked lists, stacks and merging of sorted singly linked lists."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Optional, TextIO


class StackError(Exception):
    """Raised on pushing onto a full stack or taking from an empty one."""


@dataclass(eq=False, slots=True)
class _SinglyNode:
    value: int
    next: Optional[_SinglyNode] = None


@dataclass(eq=False, slots=True)
class _DoublyNode:
    value: int
    next: Optional[_DoublyNode] = None
    prev: Optional[_DoublyNode] = None


class CircularLinkedList:
    """A singly linked list whose last node points back to the first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._tail: _SinglyNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        """Add ``value`` at the end."""
        node = _SinglyNode(value)
        if self._tail is None:
            node.next = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove(self, value: int) -> None:
        """Remove the first node holding ``value``; ValueError if there is none."""
        if self._tail is None:
            raise ValueError(f"{value} not found: the list is empty")
        prev = self._tail
        for _ in range(self._size):
            current = prev.next
            assert current is not None
            if current.value == value:
                if current is prev:
                    self._tail = None
                else:
                    prev.next = current.next
                    if current is self._tail:
                        self._tail = prev
                self._size -= 1
                return
            prev = current
        raise ValueError(f"{value} not found")

    def __iter__(self) -> Iterator[int]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            assert node is not None
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"


class DoublyLinkedList:
    """A list of nodes linked in both directions."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _DoublyNode | None = None
        self._tail: _DoublyNode | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: int) -> None:
        """Insert ``value`` at the beginning."""
        node = _DoublyNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: int) -> None:
        """Insert ``value`` at the end."""
        node = _DoublyNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"


class LinkedStack:
    """An unbounded stack on a singly linked list; iteration runs top to bottom."""

    def __init__(self) -> None:
        self._top: _SinglyNode | None = None
        self._size = 0

    def push(self, value: int) -> None:
        """Put ``value`` on top."""
        self._top = _SinglyNode(value, self._top)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value."""
        if self._top is None:
            raise StackError("Stack Underflow! Cannot pop.")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def peek(self) -> int:
        """The top value, left in place."""
        if self._top is None:
            raise StackError("Stack is empty.")
        return self._top.value

    def __iter__(self) -> Iterator[int]:
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size


class BoundedStack:
    """A stack holding at most ``capacity`` values; iteration runs top to bottom."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("stack capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Put ``value`` on top; StackError when full."""
        if len(self._items) >= self.capacity:
            raise StackError(f"Stack Overflow! Cannot push {value}")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value; StackError when empty."""
        if not self._items:
            raise StackError("Stack Underflow! Nothing to pop.")
        return self._items.pop()

    def peek(self) -> int:
        """The top value, left in place; StackError when empty."""
        if not self._items:
            raise StackError("Stack is empty.")
        return self._items[-1]

    def __iter__(self) -> Iterator[int]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; iterating yields the values from here on."""

    val: int
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def merge_two_lists(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Splice two ascending lists into one; on equal values the node of ``second`` goes first."""
    dummy = ListNode(0)
    tail = dummy
    while first is not None and second is not None:
        if first.val < second.val:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def merge_k_lists(lists: Sequence[ListNode | None]) -> ListNode | None:
    """Merge any number of ascending lists by pairwise divide and conquer."""
    if not lists:
        return None
    if len(lists) == 1:
        return lists[0]
    mid = (len(lists) - 1) // 2 + 1
    return merge_two_lists(merge_k_lists(lists[:mid]), merge_k_lists(lists[mid:]))


_MENU = "\n--- Stack Menu ---\n1. Push\n2. Pop\n3. Peek\n4. Display\n5. Exit\n"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _show(stack: BoundedStack) -> None:
    if not len(stack):
        print("Stack is empty.")
    else:
        print("Stack elements (top to bottom): " + "".join(f"{v} " for v in stack))


def main(argv: Sequence[str] | None = None) -> int:
    """Run an interactive menu over a bounded stack read from standard input."""
    parser = argparse.ArgumentParser(
        prog="algobox-stack",
        description="Interactive fixed-size stack driven by menu choices on standard input.",
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    _prompt("Enter stack size: ")
    try:
        stack = BoundedStack(int(next(tokens)))
    except (StopIteration, ValueError):
        print("\nerror: expected a non-negative stack size", file=sys.stderr)
        return 1

    while True:
        print(_MENU, end="")
        _prompt("Enter your choice: ")
        token = next(tokens, None)
        if token is None:
            print()
            return 0
        choice = int(token) if token.lstrip("-").isdigit() else 0

        if choice == 1:
            _prompt("Enter value to push: ")
            raw = next(tokens, None)
            if raw is None:
                print()
                return 0
            try:
                value = int(raw)
            except ValueError:
                print("Invalid value! Try again.")
                continue
            try:
                stack.push(value)
            except StackError as error:
                print(error)
            else:
                print(f"{value} pushed into stack.")
        elif choice == 2:
            try:
                print(f"{stack.pop()} popped from stack.")
            except StackError as error:
                print(error)
        elif choice == 3:
            try:
                print(f"Top element: {stack.peek()}")
            except StackError as error:
                print(error)
        elif choice == 4:
            _show(stack)
        elif choice == 5:
            print("Exiting program...")
            return 0
        else:
            print("Invalid choice! Try again.")


if __name__ == "__main__":
    raise SystemExit(main())