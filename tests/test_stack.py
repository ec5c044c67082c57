import pytest

from aockit.stack import Stack


def test_push_pop_lifo_order():
    stack = Stack()
    for item in (1, 2, 3):
        stack.push(item)
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]


def test_pop_empty_raises():
    stack = Stack()
    with pytest.raises(IndexError):
        stack.pop()


def test_len_and_bool():
    stack = Stack()
    assert len(stack) == 0
    assert not stack
    stack.push("a")
    stack.push("b")
    assert len(stack) == 2
    assert stack
    stack.pop()
    assert len(stack) == 1


def test_clear_empties_stack():
    stack = Stack()
    for item in range(5):
        stack.push(item)
    stack.clear()
    assert len(stack) == 0
    with pytest.raises(IndexError):
        stack.pop()


def test_pop_after_empty_then_push():
    stack = Stack()
    stack.push((1, 2))
    assert stack.pop() == (1, 2)
    with pytest.raises(IndexError):
        stack.pop()
    stack.push((3, 4))
    assert stack.pop() == (3, 4)