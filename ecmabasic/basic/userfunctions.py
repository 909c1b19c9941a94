"""
ECMA-BASIC - userfunctions.py
User-defined functions.

(c) 2013--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from collections import namedtuple

from .base import error
from .base import tokens as tk


# maximum nesting depth of user function calls
MAX_DEPTH = 32


# the line and cursor of a DEF line and the parameter binding before a call
_SavedContext = namedtuple('_SavedContext', ['line', 'position', 'binding'])


class UserFunctionManager(object):
    """User-defined function handler."""

    def __init__(self, state, expression_parser):
        """Initialise functions."""
        self._state = state
        self._expression_parser = expression_parser
        self._stack = []

    def define(self, ins, label):
        """Register a DEF statement; the body is parsed when the function is called."""
        name = ins.expect(tk.USER_FUNCTION).str_value
        self._parse_parameter(ins)
        ins.expect(tk.O_EQ)
        self._state.define_function(name, label)
        return name

    def call(self, token, ins):
        """Evaluate a user function call; the cursor is just after the function name."""
        argument = None
        if ins.skip(tk.LPAREN):
            # argument is evaluated in the caller's binding
            argument = self._expression_parser.parse_numeric(ins)
            ins.expect(tk.RPAREN)
        name = token.str_value
        line = self._state.get_line(self._state.get_function(name))
        if line is None:
            raise error.UndefinedFunctionError(name)
        if len(self._stack) >= MAX_DEPTH:
            raise error.StackOverflow(u'user functions nested too deeply')
        self._stack.append(_SavedContext(line, line.position, self._expression_parser.binding))
        try:
            line.rewind()
            line.expect(tk.DEF)
            if line.expect(tk.USER_FUNCTION).str_value != name:
                raise error.UndefinedFunctionError(name)
            parameter = self._parse_parameter(line)
            line.expect(tk.O_EQ)
            if (parameter is None) != (argument is None):
                raise error.UnexpectedTokenError(
                    token, u'%s with %d argument' % (name, 0 if parameter is None else 1)
                )
            if parameter is None:
                self._expression_parser.binding = None
            else:
                self._expression_parser.binding = (parameter, argument)
            value = self._expression_parser.parse_numeric(line)
            line.require_end()
            return value
        finally:
            saved = self._stack.pop()
            saved.line.position = saved.position
            self._expression_parser.binding = saved.binding

    def _parse_parameter(self, ins):
        """Parse the optional bracketed parameter of a DEF; return its name or None."""
        if not ins.skip(tk.LPAREN):
            return None
        parameter = ins.expect(tk.SIMPLE_VAR).str_value
        ins.expect(tk.RPAREN)
        return parameter
