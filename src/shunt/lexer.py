from functools import reduce
import operator

import regex


# Token kinds, named after the lexeme groups of Lexer.LEXEME.
NUMBER = 'number'
OPERATOR = 'operator'
FUNCTION = 'function'
LPAREN = 'lparen'
RPAREN = 'rparen'


class Lexer:
    '''
    Lexer for the infix token alphabet.

    Tokens must be separated by whitespace; ``2+3`` is a single, unknown,
    token. Classification is done on demand by the predicates, never by
    ``lex`` itself.

    For consistency with the rest of the pipeline, needs to be instantiated,
    despite holding no internal state.
    '''
    OPERATORS = ('+', '-', '*', '/', '^')
    FUNCTIONS = ('sin', 'cos')

    # Non-negative integer. ASCII digits only: no sign, no decimal point, no
    # exponent, no Unicode digits.
    INTEGER = r'[0-9]+'
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, OPERATORS)) + r')'
    FUNCTION = r'(?:' + r'|'.join(map(regex.escape, FUNCTIONS)) + r')'
    # A token is any run of non-space characters.
    WORD = r'\S+'

    # All legal tokens.
    LEXEME = r'(?<number>' + INTEGER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<function>' + FUNCTION + r')|' \
             r'(?<lparen>\()|' \
             r'(?<rparen>\))'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Split a line into whitespace-delimited tokens, in order.

        An empty or all-whitespace line gives no tokens.
        '''
        return regex.findall(type(self).WORD, line, flags=type(self).FLAGS)

    def kind(self, token):
        '''
        Return the kind of token (NUMBER, OPERATOR, ...), or None if it is not
        part of the alphabet.
        '''
        match = regex.fullmatch(type(self).LEXEME, token,
                                flags=type(self).FLAGS)
        if match is None:
            return None
        return match.lastgroup

    def isnumber(self, token):
        return regex.fullmatch(type(self).INTEGER, token,
                               flags=type(self).FLAGS) is not None

    def isoperator(self, token):
        return token in type(self).OPERATORS

    def isfunction(self, token):
        return token in type(self).FUNCTIONS

    def isparen(self, token):
        return token in ('(', ')')

    def isknown(self, token):
        return self.kind(token) is not None
