from functools import reduce
from types import MappingProxyType
import operator
import sys

import regex

from .util import ParseError, wrap_user_errors
from .machine import Control, Number, Operation, Operator


class Lexer:
    '''
    Lexer for the RPN *regular* grammar.

    Splits lines into whitespace-delimited tokens, and classifies each token
    as a number, an operator (possibly repeated), or a control command.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Words that are commands, checked before anything else
    VOCABULARY = MappingProxyType({control.value: control
                                   for control
                                   in Control})

    # Unsigned number, no exponent. Not to be confused with \d, which is
    # happy with any Unicode digit.
    DECIMAL = r'''
               (?:
                   # 1, 12, 12. (notice trailing dot), 1.3
                   [0-9]+
                   (?:
                       \.
                       [0-9]*
                   )?
               )|(?:
                   # .2
                   \.
                   [0-9]+
               )
               '''
    # Operator, applied to the stack repeat times, e.g., 3+
    REPEATED = r'''
                (?<repeat>
                    [0-9]+
                )
                (?<operator>
                    [-+*/]
                )
                '''
    # Operators that might also be the sign of a number
    SIGNS = '+-'
    # Operators that might only be operators
    NONSIGNS = '*/'
    SPACE = r'\s+'

    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and yield the command for each token.

        Lazy: stops on, and raises ParseError at, the first bad token, after
        having yielded the commands of the tokens before it.
        '''
        for token in self.split(line):
            yield self.classify(token)

    def split(self, line):
        '''
        Yield whitespace-delimited tokens of line. Nothing for a blank line.
        '''
        for token in regex.split(type(self).SPACE, line.strip()):
            if token:
                yield token

    def classify(self, token):
        '''
        Return the command for a single token, or raise ParseError.

        Order matters: commands first, then anything starting with an
        operator symbol, then numbers and repeated operators.
        '''
        if not token:
            raise ParseError("Couldn't lex empty token")

        control = type(self).VOCABULARY.get(token)
        if control is not None:
            return control

        head, tail = token[0], token[1:]
        if head in type(self).SIGNS:
            if not tail:
                return Operation(Operator(head), 1)
            # -3, +.5, but not -x or --3
            elif self._match(type(self).DECIMAL, tail):
                return Number(self._number(token))
        elif head in type(self).NONSIGNS:
            # No *3 or /3
            if not tail:
                return Operation(Operator(head), 1)
        elif self._match(type(self).DECIMAL, token):
            return Number(self._number(token))
        else:
            match = self._match(type(self).REPEATED, token)
            if match is not None:
                return Operation(Operator(match['operator']),
                                 self._repeat(match['repeat']))

        raise ParseError("Couldn't lex {0}".format(token))

    def _repeat(self, digits):
        '''
        Convert repeat count, saturating at sys.maxsize.

        No stack is ever that deep, so nothing is lost, and int() refuses
        strings of more than a few thousand digits anyway.
        '''
        digits = digits.lstrip('0') or '0'
        if len(digits) > len(str(sys.maxsize)):
            return sys.maxsize
        return min(int(digits), sys.maxsize)

    def _match(self, pattern, token):
        return regex.fullmatch(pattern, token, flags=type(self).FLAGS)

    @wrap_user_errors("Couldn't lex {1}", ParseError, ValueError)
    def _number(self, token):
        '''
        Convert already validated numeral to float.
        '''
        return float(token)
