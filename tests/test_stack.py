'''
Stack tests
'''

from shunt.stack import Stack
from shunt.util import EmptyStackError

from pytest import raises


def test_lifo():
    stack = Stack()
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.size() == 3
    assert stack.peek() == 3
    assert stack.top() == 3
    assert [stack.pop() for _ in range(3)] == [3, 2, 1]
    assert stack.isempty()


def test_peek_leaves_value():
    stack = Stack(['a'])
    assert stack.peek() == 'a'
    assert stack.size() == 1


def test_empty_pop_and_peek():
    stack = Stack()
    with raises(EmptyStackError):
        stack.pop()
    with raises(EmptyStackError):
        stack.peek()


def test_empty_stack_error_is_index_error():
    with raises(IndexError):
        Stack().pop()


def test_truthiness():
    stack = Stack()
    assert not stack
    stack.push(0)
    assert stack
    assert len(stack) == 1
