from .util import DivisionByZero, ParseError
from .machine import Machine
from .lexer import Lexer


class Session:
    '''
    One calculator session: a machine, fed a line at a time.

    Reports errors and renders the stack onto out; defaults to whatever
    sys.stdout is at the time of printing.
    '''

    # What the user sees for a line that couldn't be lexed
    ERROR = 'error'

    def __init__(self, machine=None, lexer=None, out=None):
        self.machine = Machine() if machine is None else machine
        self.lexer = Lexer() if lexer is None else lexer
        self.out = out

    @property
    def running(self):
        return self.machine.running

    def process(self, line):
        '''
        Run every token of line on the machine, leftmost first.

        Returns False if the line couldn't be lexed. The rest of the line is
        abandoned; whatever ran before the bad token stays run. Division by
        zero is reported, and the next token runs anyway.
        '''
        try:
            for command in self.lexer.lex(line):
                try:
                    self.machine.feed(command)
                except DivisionByZero as e:
                    self.print(e.args[0])
                if not self.running:
                    break
        # Abort entire rest of line
        except ParseError:
            self.print(type(self).ERROR)
            return False
        return True

    def render(self):
        '''
        Print all elements on the stack, one per line, bottom first.
        '''
        for value in self.machine.render():
            self.print(value)

    def print(self, *args, **kwargs):
        return print(*args, file=self.out, **kwargs)
