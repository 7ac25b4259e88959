'''
Error helper tests
'''

from shunt.util import (wrap_user_errors, ShuntError, NumberParseError,
                        DivisionByZeroError)

from pytest import raises


@wrap_user_errors(NumberParseError, 'Bad {0}')
def _fails(value):
    raise ValueError(value)


@wrap_user_errors(NumberParseError, 'Bad {0}')
def _passes_through(value):
    raise DivisionByZeroError('Division by zero', '/')


def test_converts_library_errors():
    with raises(NumberParseError, match='Bad 3') as excinfo:
        _fails(3)
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_passes_through_own_errors():
    with raises(DivisionByZeroError):
        _passes_through(3)


def test_message_and_token():
    e = ShuntError('Unknown token', 'x')
    assert e.message == 'Unknown token'
    assert e.token == 'x'
    assert str(e) == 'Unknown token'
