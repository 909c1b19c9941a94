"""
ECMA-BASIC - expressions.py
Expression parser and evaluator

(c) 2013--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import numpy

from .base import error
from .base import tokens as tk
from .values import numbers
from .userfunctions import UserFunctionManager


class ExpressionParser(object):
    """Recursive-descent evaluator of numeric and string expressions."""

    def __init__(self, state):
        """Initialise expression parser."""
        self._state = state
        # name and value of the parameter of the user function being evaluated
        self.binding = None
        self.user_functions = UserFunctionManager(state, self)
        # built-in functions of one argument
        self._functions = {
            tk.ABS: numpy.abs,
            tk.ATN: numpy.arctan,
            tk.COS: numpy.cos,
            tk.EXP: numpy.exp,
            tk.INT: numpy.floor,
            tk.LOG: numpy.log,
            tk.SGN: numpy.sign,
            tk.SIN: numpy.sin,
            tk.SQR: numpy.sqrt,
            tk.TAN: numpy.tan,
        }

    def parse_numeric(self, ins):
        """Parse and evaluate a numeric expression."""
        with numbers.quiet():
            return self._parse_sum(ins)

    def parse_string(self, ins):
        """Parse and evaluate a string expression: a quoted string or string variable."""
        token = ins.read()
        if token.kind == tk.QUOTED:
            return token.str_value
        elif token.kind == tk.STRING_VAR:
            return self._state.scalars.get(token.str_value)
        raise error.UnexpectedTokenError(token, u'string expression')

    def parse_printable(self, ins):
        """Parse an expression of either type and format it for PRINT."""
        if ins.peek().kind in (tk.QUOTED, tk.STRING_VAR):
            return self.parse_string(ins)
        return numbers.format_number(self.parse_numeric(ins))

    def parse_subscript(self, ins):
        """Parse the rest of an array subscript after the opening bracket."""
        value = self.parse_numeric(ins)
        ins.expect(tk.RPAREN)
        return numbers.to_int(value)

    def _parse_sum(self, ins):
        """numeric-expr := [ '+' | '-' ] term { ('+' | '-') term }

        A leading sign applies to the whole sum: -A+3 is -(A+3).
        """
        negate = ins.skip(tk.O_MINUS) is not None
        if not negate:
            ins.skip(tk.O_PLUS)
        value = self._parse_term(ins)
        while True:
            token = ins.peek()
            if token.kind in (tk.O_PLUS, tk.O_MINUS):
                ins.read()
                operand = self._parse_term(ins)
                sign = token.kind
            elif token.kind == tk.NUMBER and token.str_value[:1] in (tk.O_PLUS, tk.O_MINUS):
                # the tokeniser folded the operator into the literal
                ins.read()
                operand = self._parse_term(ins, abs(token.num_value))
                sign = token.str_value[0]
            else:
                return -value if negate else value
            if sign == tk.O_PLUS:
                value = value + operand
            else:
                value = value - operand

    def _parse_term(self, ins, first=None):
        """term := factor { ('*' | '/') factor }"""
        value = self._parse_factor(ins, first)
        while True:
            if ins.skip(tk.O_TIMES):
                value = value * self._parse_factor(ins)
            elif ins.skip(tk.O_DIV):
                value = value / self._parse_factor(ins)
            else:
                return value

    def _parse_factor(self, ins, first=None):
        """factor := primary { '^' primary }"""
        value = self._parse_primary(ins) if first is None else first
        while ins.skip(tk.O_CARET):
            value = numpy.power(value, self._parse_primary(ins))
        return value

    def _parse_primary(self, ins):
        """Parse a number, variable, array element, bracketed expression or function call."""
        token = ins.read()
        if token.kind == tk.NUMBER:
            return token.num_value
        elif token.kind == tk.SIMPLE_VAR:
            name = token.str_value
            if ins.skip(tk.LPAREN):
                return self._state.arrays.get(name, self.parse_subscript(ins))
            if self.binding and self.binding[0] == name:
                return self.binding[1]
            return self._state.scalars.get(name)
        elif token.kind == tk.INDEXED_VAR:
            return self._state.scalars.get(token.str_value)
        elif token.kind == tk.LPAREN:
            value = self._parse_sum(ins)
            ins.expect(tk.RPAREN)
            return value
        elif token.kind == tk.FUNCTION:
            return self._parse_function(token.str_value, ins)
        elif token.kind == tk.USER_FUNCTION:
            return self.user_functions.call(token, ins)
        raise error.UnexpectedTokenError(token, u'numeric expression')

    def _parse_function(self, name, ins):
        """Evaluate a built-in function."""
        if name == tk.RND:
            if ins.peek().kind == tk.LPAREN:
                raise error.UnexpectedTokenError(ins.peek(), u'no argument to RND')
            return self._state.randomiser.rnd_()
        ins.expect(tk.LPAREN)
        argument = self._parse_sum(ins)
        ins.expect(tk.RPAREN)
        return numbers.Single(self._functions[name](argument))
