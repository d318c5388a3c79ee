from collections import namedtuple
from enum import Enum
import operator

from .util import DivisionByZero, StackUnderflow, wrap_user_errors


class Operator(Enum):
    '''
    Binary arithmetic operators, by symbol.
    '''
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'


class Control(Enum):
    '''
    Stack and session commands, by the word that invokes them.
    '''
    DROP = 'drop'
    CLEAR = 'clear'
    QUIT = 'quit'


# Push value onto the stack.
Number = namedtuple('Number', 'value')
# Apply operator repeat times; 0 means until one element is left.
Operation = namedtuple('Operation', 'operator repeat')


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Takes commands from the lexer and runs them. The stack holds floats,
    bottom first.
    '''

    # Arithmetic operators on the items of a machine, called as
    # f(second from top, top).
    BUILTINS = {
        Operator.ADD: operator.__add__,
        Operator.SUB: operator.__sub__,
        Operator.MUL: operator.__mul__,
        Operator.DIV: operator.__truediv__,
    }

    # Digits after the decimal point on output
    PRECISION = 6

    def __init__(self):
        '''
        Create empty, running stack machine.
        '''
        self.stack = []
        self.running = True

    def feed(self, command):
        '''
        Run a single command on the machine.

        :param command: Number, Operation or Control, as made by the lexer.
        '''
        if isinstance(command, Number):
            self.push(command.value)
        elif isinstance(command, Operation):
            self.apply(command.operator, command.repeat)
        elif command is Control.DROP:
            self.pop()
        elif command is Control.CLEAR:
            self.clear()
        elif command is Control.QUIT:
            self.running = False
        else:
            raise TypeError('Not a command: {!r}'.format(command))

    def push(self, value):
        self._pshstack(value)

    def pop(self):
        '''
        Pop and return the element on top of the stack.

        None if the stack is empty; popping nothing is not an error.
        '''
        try:
            return self._popstack()[0]
        except StackUnderflow:
            return None

    def clear(self):
        '''
        Clear everything from the stack.
        '''
        self.stack.clear()

    def apply(self, op, repeat=1):
        '''
        Apply binary operator to the top of the stack, repeat times.

        A repeat of 0 means as many times as it takes to leave one element,
        counted once, up front. Stops early, without complaint, as soon as
        fewer than two elements are left.

        Raises DivisionByZero when dividing by zero. Both operands are gone
        by then, and the remaining repetitions are abandoned.
        '''
        if repeat == 0:
            repeat = max(len(self.stack) - 1, 0)
        for _ in range(repeat):
            try:
                right, left = self._popstack(n=2)
            except StackUnderflow:
                break
            self._pshstack(self._compute(op, left, right))

    @wrap_user_errors('error - division by zero',
                      DivisionByZero, ZeroDivisionError)
    def _compute(self, op, left, right):
        '''
        Compute left OP right, left having been pushed first.
        '''
        return type(self).BUILTINS[op](left, right)

    def render(self):
        '''
        Return all elements on the stack, formatted, bottom of the stack first.
        '''
        return ['{:.{}f}'.format(value, type(self).PRECISION)
                for value
                in self.stack]

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1):
        '''
        Pop specified number of args from stack, topmost first.

        Leaves the stack untouched if there are not enough.
        '''
        if len(self.stack) < n:
            raise StackUnderflow('Less than {} element(s) on stack'.format(n))
        return [self.stack.pop() for _ in range(n)]
