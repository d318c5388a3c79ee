'''
RPN calculator.

Plain old four-function arithmetic on a stack of floats, with repeated
operators (3+ adds three times, 0+ sums the whole stack) and a few stack
commands (drop, clear, quit). Not intended to be Turing-complete!

Tokens are whitespace-delimited, so 1 2 + works and 1 2+ doesn't: 2+ is a
repeat count and an operator.

Interactive by default; -b reads all of stdin and prints the stack once, at
the end.
'''

from .cli import CLI
from .lexer import Lexer
from .machine import Machine
from .session import Session


__all__ = 'Machine', 'Lexer', 'Session', 'CLI'
