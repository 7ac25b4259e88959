'''
Validator tests
'''

import regex

from shunt.validator import validate
from shunt.util import (StructuralError, UnknownTokenError,
                        OperatorPositionError, OperatorFollowError,
                        FunctionSyntaxError, UnbalancedParenthesesError)

from pytest import mark, raises


@mark.parametrize('line', [
    '3 + 4 * 2',
    '( 1 + 2 ) * 3',
    'sin ( 0 )',
    'cos ( sin ( 1 ) ^ 2 )',
    '42',
    '( )',
    '1 2',
])
def test_valid(lexer, line):
    assert validate(lexer.lex(line)) is None


def test_unknown_token(lexer):
    with raises(UnknownTokenError, match=regex.escape("Unknown token 'x'")):
        validate(lexer.lex('1 + x'))


def test_unknown_token_carries_token(lexer):
    with raises(UnknownTokenError) as excinfo:
        validate(lexer.lex('2+3'))
    assert excinfo.value.token == '2+3'


@mark.parametrize('line', ['+ 1', '1 -', '*'])
def test_operator_position(lexer, line):
    with raises(OperatorPositionError):
        validate(lexer.lex(line))


@mark.parametrize('line', ['1 + + 2', '( 1 * ) 2', '1 ^ - 2'])
def test_operator_follow(lexer, line):
    with raises(OperatorFollowError):
        validate(lexer.lex(line))


def test_operator_follow_message(lexer):
    with raises(OperatorFollowError,
                match=regex.escape("Operator '+' followed by invalid token "
                                   "')'")):
        validate(lexer.lex('( 1 + ) 2'))


@mark.parametrize('line', ['sin 0', '1 + sin', 'cos ) 1 ('])
def test_function_syntax(lexer, line):
    with raises(FunctionSyntaxError):
        validate(lexer.lex(line))


@mark.parametrize('line', ['( 1 + 2', '1 + 2 )', '( ( 1 )'])
def test_unbalanced(lexer, line):
    with raises(UnbalancedParenthesesError):
        validate(lexer.lex(line))


def test_first_violation_wins(lexer):
    # Both an operator follow error and unbalanced parentheses.
    with raises(OperatorFollowError):
        validate(lexer.lex('( 1 + + 2'))
    # Unknown token comes before the operator checks on the same token scan.
    with raises(UnknownTokenError):
        validate(lexer.lex('y + + 2'))


def test_only_final_balance_is_checked(lexer):
    assert validate(lexer.lex(') (')) is None
    assert validate(lexer.lex('1 ) + ( 2')) is None


def test_all_structural(lexer):
    for line in ('x', '+', 'sin', '('):
        with raises(StructuralError):
            validate(lexer.lex(line))


def test_does_not_mutate(lexer):
    tokens = lexer.lex('( 1 + 2 ) * 3')
    copy = list(tokens)
    validate(tokens)
    assert tokens == copy
