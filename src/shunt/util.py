from functools import wraps


class ShuntError(Exception):
    '''
    Base of every error reported for a single line of input.

    :param token: Offending token, if any.
    '''
    def __init__(self, message, token=None):
        super().__init__(message)
        self.token = token

    @property
    def message(self):
        return self.args[0]


class EmptyStackError(ShuntError, IndexError):
    pass


# Raised before conversion.
class StructuralError(ShuntError):
    pass


class UnknownTokenError(StructuralError):
    pass


class OperatorPositionError(StructuralError):
    pass


class OperatorFollowError(StructuralError):
    pass


class FunctionSyntaxError(StructuralError):
    pass


class UnbalancedParenthesesError(StructuralError):
    pass


# Raised while running the postfix form.
class EvaluationError(ShuntError):
    pass


class InsufficientOperandsError(EvaluationError):
    pass


class DivisionByZeroError(EvaluationError):
    pass


class MalformedExpressionError(EvaluationError):
    pass


class NumberParseError(EvaluationError):
    pass


def wrap_user_errors(error, fmt):
    '''
    Decorator that converts library exceptions into ``error``.

    Passes through ShuntErrors. ``fmt`` is formatted with the call arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except ShuntError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
