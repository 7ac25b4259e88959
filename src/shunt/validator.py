'''
Structural checks on infix tokens, run before any conversion.

Only token adjacency and the final parenthesis balance are checked. Arity
problems, such as ``( + )``, are left to the machine, where they surface as
missing operands.
'''

import logging

from .lexer import Lexer
from .util import (UnknownTokenError, OperatorPositionError,
                   OperatorFollowError, FunctionSyntaxError,
                   UnbalancedParenthesesError)


logger = logging.getLogger(__name__)


def validate(tokens, lexer=None):
    '''
    Raise the StructuralError for the first violation found, scanning left to
    right. Return None for a well-formed sequence.

    The balance counter is only checked once the scan is over, so ``) (``
    passes here.
    '''
    lexer = lexer or Lexer()
    balance = 0
    last = len(tokens) - 1
    for i, token in enumerate(tokens):
        if not lexer.isknown(token):
            raise UnknownTokenError("Unknown token '{}'".format(token), token)

        if token == '(':
            balance += 1
        elif token == ')':
            balance -= 1

        if lexer.isoperator(token):
            if i == 0 or i == last:
                raise OperatorPositionError(
                    "Operator '{}' in invalid position".format(token), token)
            following = tokens[i + 1]
            if lexer.isoperator(following) or following == ')':
                raise OperatorFollowError(
                    "Operator '{}' followed by invalid token '{}'"
                    .format(token, following), token)

        if lexer.isfunction(token):
            if i == last or tokens[i + 1] != '(':
                raise FunctionSyntaxError(
                    "Function '{}' must be followed by '('".format(token),
                    token)

    if balance != 0:
        raise UnbalancedParenthesesError('Unbalanced parentheses')
    logger.debug('Validated %d tokens', len(tokens))
