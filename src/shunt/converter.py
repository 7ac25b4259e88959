'''
Infix to postfix conversion (shunting-yard).
'''

import logging

from .lexer import Lexer
from .stack import Stack


logger = logging.getLogger(__name__)


# Higher binds tighter. Functions never take part in the operator comparison;
# their rank only documents that they bind tightest.
PRECEDENCE = {
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
    '^': 3,
    'sin': 4,
    'cos': 4,
}


def precedence(token):
    '''
    Rank of token. Anything that isn't an operator or function, ``(``
    included, ranks 0.
    '''
    return PRECEDENCE.get(token, 0)


def to_postfix(tokens, lexer=None):
    '''
    Convert validated infix tokens to postfix order.

    Behaviour on tokens that didn't pass ``validate`` is unspecified.

    Equal ranks pop before pushing, so every operator, ``^`` included, is
    left-associative: ``2 ^ 3 ^ 2`` is ``2 3 ^ 2 ^``.
    '''
    lexer = lexer or Lexer()
    output = []
    stack = Stack()
    for token in tokens:
        if lexer.isnumber(token):
            output.append(token)
        elif lexer.isfunction(token):
            stack.push(token)
        elif token == '(':
            stack.push(token)
        elif token == ')':
            while stack and stack.peek() != '(':
                output.append(stack.pop())
            # Discard the '('.
            stack.pop()
            # Bind a function to its just closed argument.
            if stack and lexer.isfunction(stack.peek()):
                output.append(stack.pop())
        elif lexer.isoperator(token):
            while (stack and lexer.isoperator(stack.peek()) and
                   precedence(stack.peek()) >= precedence(token)):
                output.append(stack.pop())
            stack.push(token)
    while stack:
        output.append(stack.pop())
    logger.debug('Postfix: %s', output)
    return output
