from inspect import signature as getsignature, Parameter
import logging
import math

from .lexer import Lexer
from .stack import Stack
from .util import (InsufficientOperandsError, DivisionByZeroError,
                   MalformedExpressionError, NumberParseError,
                   wrap_user_errors)


logger = logging.getLogger(__name__)


def _add(left, right):
    return left + right


def _subtract(left, right):
    return left - right


def _multiply(left, right):
    return left * right


def _divide(left, right):
    # Exact comparison, no epsilon.
    if right == 0:
        raise DivisionByZeroError('Division by zero', '/')
    return left / right


def _isodd(n):
    return n.is_integer() and n % 2 == 1


def _power(left, right):
    '''
    Real power, nan or inf where math.pow would raise, as C pow does.
    '''
    try:
        return math.pow(left, right)
    except ValueError:
        # Zero to a negative power, or a negative base to a fractional one.
        if left == 0:
            return math.copysign(math.inf, left) if _isodd(right) else math.inf
        return math.nan
    except OverflowError:
        return -math.inf if left < 0 and _isodd(right) else math.inf


def _sin(angle):
    if math.isinf(angle):
        return math.nan
    return math.sin(angle)


def _cos(angle):
    if math.isinf(angle):
        return math.nan
    return math.cos(angle)


class Machine:
    '''
    Arithmetic stack machine.

    Reduces a postfix token sequence to a single float. Holds no state
    between evaluations: every call gets a fresh stack.
    '''

    # Binary operators, left operand first.
    OPERATORS = {
        '+': _add,
        '-': _subtract,
        '*': _multiply,
        '/': _divide,
        '^': _power,
    }

    # Unary functions, in radians.
    FUNCTIONS = {
        'sin': _sin,
        'cos': _cos,
    }

    DEFAULT_PRECISION = None

    assert set(OPERATORS) == set(Lexer.OPERATORS)
    assert set(FUNCTIONS) == set(Lexer.FUNCTIONS)

    def __init__(self, precision=DEFAULT_PRECISION, lexer=None):
        '''
        Create a stack machine.

        :param precision: Decimal places results are rounded to on output.
                          None to not round.
        '''
        self.precision = precision
        self.lexer = lexer or Lexer()

    def evaluate(self, postfix):
        '''
        Run postfix tokens and return the one value left on the stack.
        '''
        stack = Stack()
        for token in postfix:
            if self.lexer.isnumber(token):
                stack.push(self._iconvert(token))
            elif token in type(self).OPERATORS:
                self._apply(stack, token, type(self).OPERATORS[token],
                            'operator')
            elif token in type(self).FUNCTIONS:
                self._apply(stack, token, type(self).FUNCTIONS[token],
                            'function')
            else:
                raise MalformedExpressionError(
                    "Unexpected token '{}'".format(token), token)
            logger.debug('%s -> %r', token, stack)
        if stack.size() != 1:
            raise MalformedExpressionError('Malformed expression')
        return stack.pop()

    def _arity(self, f):
        '''
        Return number of non-default positional arguments.
        '''
        parameters = getsignature(f).parameters.values()
        positionals = [parameter
                       for parameter
                       in parameters
                       if parameter.kind == Parameter.POSITIONAL_OR_KEYWORD and
                          parameter.default == Parameter.empty]
        return len(positionals)

    def _apply(self, stack, token, f, what):
        '''
        Pop as many operands as f takes, run it, and push the result.
        '''
        arity = self._arity(f)
        if stack.size() < arity:
            raise InsufficientOperandsError(
                "Not enough operands for {} '{}'".format(what, token), token)
        # Popped right operand first; reverse so 2 3 ^ is 2 ** 3.
        args = reversed([stack.pop() for _ in range(arity)])
        stack.push(f(*args))

    @wrap_user_errors(NumberParseError, "Cannot convert '{1}'")
    def _iconvert(self, number):
        '''
        Convert a number token to its internal representation.
        '''
        return float(number)

    def _round(self, n):
        '''
        Round number to precision (on output) if machine set to round.
        '''
        if self.precision is None:
            return n
        else:
            return round(n, self.precision)

    def format(self, result):
        '''
        Render a result for display.
        '''
        return str(self._round(result))
