from os import isatty, path
import sys
from sys import stdin, stdout, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import traceback

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .util import ShuntError
from .lexer import Lexer
from .converter import precedence
from .calculator import Calculator


class InteractiveInput:
    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def __iter__(self):
        history = None
        if self.history:
            history = FileHistory(path.expanduser(self.history))
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    history=history,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the infix calculator.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.shunt_history'
    EXIT = 'exit'
    BANNER = ("Enter expressions to evaluate ('exit' to quit).",
              'Allowed symbols: + - * / ^ sin cos ( ) and digits 0-9',
              'Separate every symbol with a space.')

    def dumper(self):
        '''
        Dump every token, its kind and precedence.
        '''
        lexer = Lexer()
        print('<kind>\t<repr(token)>\t<precedence>')
        for line in self._lines():
            for token in lexer.lex(line):
                print(lexer.kind(token),
                      repr(token),
                      precedence(token),
                      sep='\t')

    def executor(self):
        '''
        Evaluate each line, printing its postfix form and result.
        '''
        calculator = Calculator(precision=self.args.precision)
        if self._interactive():
            print(*self.BANNER, sep='\n', end='\n\n')
        for line in self._lines():
            try:
                outcome = calculator.process(line)
            # Abort entire rest of line, nothing partial is shown
            except ShuntError as e:
                print('Error:', e.message, file=sys.stderr)
                if self.args.verbose:
                    traceback.print_exc(file=sys.stderr)
                continue
            if outcome is not None:
                print(*calculator.render(outcome), sep='\n')

    def raw_grammar(self):
        '''
        Print current internally defined token alphabet.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _lines(self):
        '''
        Yield input lines without their terminators, up to the exit command.
        '''
        for line in self.args.expressions:
            line = line.rstrip('\r\n')
            if line == self.EXIT:
                return
            yield line

    def _expression_lines(self, words):
        '''
        Return the lines given with -e.

        Unquoted, as in ``-e 3 + 4``, every word is a single token and they
        are joined into one line. Otherwise each argument is a line.
        '''
        lexer = Lexer()
        if words and all(lexer.lex(word) == [word] for word in words):
            return [' '.join(words)]
        return words

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=self.args.history)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Infix calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          help='Round results to this many '
                                               'decimal places')
        self.argument_parser.add_argument('--history',
                                          default=self.HISTORY_FILE,
                                          help='Interactive history file')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions',
                                       help='Lines to evaluate, one per '
                                            'argument. Single-token words, as '
                                            'in -e 3 + 4, make up one line')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            format='%(levelname)s:%(name)s:%(message)s')
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        else:
            self.args.expressions = self._expression_lines(
                self.args.expressions)
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)


def main():
    CLI().run()
