import io

import pytest

from algobox.linked import (
    BoundedStack,
    CircularLinkedList,
    DoublyLinkedList,
    LinkedStack,
    ListNode,
    StackError,
    main,
    merge_k_lists,
    merge_two_lists,
)


def chain(values):
    head = None
    for value in reversed(values):
        head = ListNode(value, head)
    return head


def values_of(head):
    return [] if head is None else list(head)


def test_circular_demo():
    lst = CircularLinkedList()
    for value in (10, 20, 30):
        lst.append(value)
    assert list(lst) == [10, 20, 30]
    lst.remove(20)
    assert list(lst) == [10, 30]
    assert len(lst) == 2


def test_circular_remove_head_and_tail():
    lst = CircularLinkedList([1, 2, 3, 4])
    lst.remove(1)
    assert list(lst) == [2, 3, 4]
    lst.remove(4)
    lst.append(5)
    assert list(lst) == [2, 3, 5]


def test_circular_remove_only_element():
    lst = CircularLinkedList([7])
    lst.remove(7)
    assert list(lst) == []
    lst.append(8)
    assert list(lst) == [8]


def test_circular_remove_missing_raises():
    lst = CircularLinkedList([1, 2])
    with pytest.raises(ValueError):
        lst.remove(3)
    with pytest.raises(ValueError):
        CircularLinkedList().remove(1)
    assert list(lst) == [1, 2]


def test_doubly_push_front_and_back():
    lst = DoublyLinkedList()
    lst.push_back(2)
    lst.push_front(1)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]
    assert list(reversed(lst)) == [3, 2, 1]
    assert len(lst) == 3


def test_doubly_from_values_round_trip():
    values = [5, 9, 1, 4]
    lst = DoublyLinkedList(values)
    assert list(lst) == values
    assert list(reversed(lst)) == values[::-1]


def test_linked_stack_lifo():
    stack = LinkedStack()
    for value in (10, 20, 30):
        stack.push(value)
    assert list(stack) == [30, 20, 10]
    assert stack.peek() == 30
    assert stack.pop() == 30
    assert list(stack) == [20, 10]
    assert len(stack) == 2


def test_linked_stack_empty_errors():
    stack = LinkedStack()
    with pytest.raises(StackError):
        stack.pop()
    with pytest.raises(StackError):
        stack.peek()


def test_bounded_stack_overflow():
    stack = BoundedStack(2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackError):
        stack.push(3)
    assert list(stack) == [2, 1]


def test_bounded_stack_underflow():
    stack = BoundedStack(1)
    with pytest.raises(StackError):
        stack.pop()
    with pytest.raises(StackError):
        stack.peek()
    stack.push(4)
    assert stack.pop() == 4
    assert len(stack) == 0


def test_bounded_stack_negative_capacity():
    with pytest.raises(ValueError):
        BoundedStack(-1)


def test_merge_two_lists():
    merged = merge_two_lists(chain([1, 3, 5]), chain([2, 4, 6]))
    assert values_of(merged) == [1, 2, 3, 4, 5, 6]


def test_merge_two_lists_with_empty():
    assert values_of(merge_two_lists(None, chain([1, 2]))) == [1, 2]
    assert merge_two_lists(None, None) is None


def test_merge_ties_take_second_first():
    a = ListNode(1)
    b = ListNode(1)
    assert merge_two_lists(a, b) is b


def test_merge_k_lists():
    inputs = [[1, 4, 5], [1, 3, 4], [2, 6]]
    merged = merge_k_lists([chain(v) for v in inputs])
    assert values_of(merged) == sorted(sum(inputs, []))


def test_merge_k_lists_empty():
    assert merge_k_lists([]) is None
    assert merge_k_lists([None, None]) is None


def test_main_menu(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 7\n1 8\n4\n2\n3\n5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "7 pushed into stack." in out
    assert "Stack elements (top to bottom): 8 7" in out
    assert "8 popped from stack." in out
    assert "Top element: 7" in out
    assert "Exiting program..." in out


def test_main_overflow_and_underflow(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n2\n1 5\n1 6\n9\n5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Stack Underflow! Nothing to pop." in out
    assert "Stack Overflow! Cannot push 6" in out
    assert "Invalid choice! Try again." in out


def test_main_bad_size(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 1