"""
ECMA-BASIC - interpreter.py
BASIC interpreter

(c) 2013--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import logging

from .base import error
from .base import flow
from .expressions import ExpressionParser
from .statements import StatementParser


class Interpreter(object):
    """BASIC interpreter."""

    def __init__(self, state, output, input_stream):
        """Initialise interpreter."""
        self._state = state
        self.expression_parser = ExpressionParser(state)
        self.parser = StatementParser(
            self, state, self.expression_parser, output, input_stream
        )
        # line being executed
        self.current_line = None

    def run(self):
        """Run the stored program from the lowest label."""
        self._state.clear_runtime()
        logging.debug('Running program of %d lines', len(self._state.program))
        line = self._state.first_line()
        while line is not None:
            line = self.execute(line)
        if not self._state.was_end:
            raise error.UnexpectedEndOfProgramError()
        logging.debug('Program ended')

    def execute(self, line):
        """Execute the statement on a line; return the next line to execute or None."""
        self.current_line = line
        line.rewind()
        try:
            resume = self.parser.parse_statement(line)
            return self._resolve(line, resume)
        except error.BASICError as e:
            if e.label is None and not line.is_direct:
                e.label = line.label
            raise

    def _resolve(self, line, resume):
        """Find the line to continue at."""
        if resume is flow.HALT:
            return None
        elif resume is flow.NEXT:
            if line.is_direct:
                return None
            return self._state.next_line(line.label + 1)
        elif isinstance(resume, flow.Resume):
            return self._state.next_line(resume.label + 1)
        return self.jump(resume.label)

    def jump(self, label):
        """Get the line for a GOTO, GOSUB, IF or ON jump."""
        line = self._state.get_line(label)
        if line is None:
            raise error.UndefinedLabelError(label)
        return line
