'''
Infix calculator.

Reads whitespace separated arithmetic expressions, one per line: integers,
``+ - * / ^``, ``sin`` and ``cos``, and parentheses. Prints the postfix
(reverse Polish) form and the result.

The pipeline for a line is lex, validate, convert (shunting-yard), and run on
a stack machine. Each stage either hands a well-formed sequence to the next
or raises the first error it finds.

Quirks kept on purpose:

- ``^`` is left-associative, like every other operator: ``2 ^ 3 ^ 2`` is 64.
- Parenthesis balance is only checked at the end of a line, so ``) (`` gets
  past validation and fails during conversion instead.
'''

from .cli import CLI
from .lexer import Lexer
from .machine import Machine
from .calculator import Calculator, Outcome
from .util import ShuntError


__all__ = 'Calculator', 'Outcome', 'Machine', 'Lexer', 'CLI', 'ShuntError'
