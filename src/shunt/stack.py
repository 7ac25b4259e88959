from collections import deque

from .util import EmptyStackError


class Stack:
    '''
    LIFO container. Top of the stack is the right end of a deque.
    '''

    def __init__(self, items=()):
        self._items = deque(items)

    def push(self, value):
        self._items.append(value)

    def pop(self):
        '''
        Remove and return the most recently pushed value.
        '''
        if not self._items:
            raise EmptyStackError('Empty stack')
        return self._items.pop()

    def peek(self):
        '''
        Return the most recently pushed value, leaving it in place.
        '''
        if not self._items:
            raise EmptyStackError('Empty stack')
        return self._items[-1]

    top = peek

    def size(self):
        return len(self._items)

    def isempty(self):
        return not self._items

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return bool(self._items)

    def __iter__(self):
        # Bottom first, like the deque.
        return iter(self._items)

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, list(self._items))
