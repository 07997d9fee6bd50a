import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.stack import Stack


@given(st.lists(st.integers(), max_size=250))
def test_pop_order_is_lifo(values):
    stack = Stack()
    for value in values:
        stack.push(value)
    assert len(stack) == len(values)
    popped = [stack.pop() for _ in values]
    assert popped == values[::-1]
    assert stack.empty()


def test_top_is_last_pushed():
    stack = Stack()
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.top() == 3
    stack.pop()
    assert stack.top() == 2


def test_top_on_empty_raises():
    with pytest.raises(IndexError, match="Stack is empty"):
        Stack().top()


def test_pop_on_empty_is_ignored():
    stack = Stack()
    assert stack.pop() is None
    assert len(stack) == 0


def test_iteration_top_to_bottom():
    assert list(Stack([1, 2, 3])) == [3, 2, 1]


def test_clear():
    stack = Stack([1, 2, 3])
    stack.clear()
    assert stack.empty() is True
    with pytest.raises(IndexError):
        stack.top()


def test_copy_is_independent():
    original = Stack([1, 2, 3])
    duplicate = original.copy()
    duplicate.pop()
    duplicate.push(9)
    assert original.top() == 3
    assert list(original) == [3, 2, 1]
    assert list(duplicate) == [9, 2, 1]


def test_grows_past_initial_capacity():
    stack = Stack()
    for value in range(250):
        stack.push(value)
    assert len(stack) == 250
    assert stack.top() == 249


def test_empty_reflects_contents():
    stack = Stack()
    assert stack.empty() is True
    stack.push(0)
    assert stack.empty() is False