from collections import namedtuple
import logging

from .lexer import Lexer
from .validator import validate
from .converter import to_postfix
from .machine import Machine


logger = logging.getLogger(__name__)


Outcome = namedtuple('Outcome', 'postfix result')


class Calculator:
    '''
    The whole pipeline for one line: lex, validate, convert, evaluate.

    Doesn't print anything; errors are raised as ShuntErrors for the caller
    to report.
    '''

    def __init__(self, precision=Machine.DEFAULT_PRECISION):
        self.lexer = Lexer()
        self.machine = Machine(precision=precision, lexer=self.lexer)

    def process(self, line):
        '''
        Return the Outcome of a line, or None if it holds no tokens.

        Raises the first error found, by any stage.
        '''
        tokens = self.lexer.lex(line)
        if not tokens:
            return None
        logger.debug('Tokens: %s', tokens)
        validate(tokens, lexer=self.lexer)
        postfix = to_postfix(tokens, lexer=self.lexer)
        result = self.machine.evaluate(postfix)
        logger.debug('Result: %r', result)
        return Outcome(postfix, result)

    def render(self, outcome):
        '''
        Return the display lines of a successful Outcome.
        '''
        return ['Postfix: ' + ' '.join(outcome.postfix),
                'Result: ' + self.machine.format(outcome.result)]
