"""
ECMA-BASIC - api.py
Session API

(c) 2013--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import logging

from .base import error
from .base import tokens as tk
from .program import ProgramLine
from .state import ProgramState
from .scanner import Scanner
from .tokeniser import Tokeniser
from .interpreter import Interpreter
from . import iostreams


# prompt for interactive mode
PROMPT = u'> '


class Session(object):
    """Public API to BASIC session."""

    def __init__(self, output_stream=None, input_stream=None, max_label=tk.MAX_LABEL):
        """Set up session object; streams default to standard output and input."""
        self._tokeniser = Tokeniser()
        self._state = ProgramState(max_label)
        self._output = iostreams.OutputStream(output_stream)
        self._input = iostreams.InputStream(input_stream, self._output, self._tokeniser)
        self._scanner = Scanner(self._state, self._tokeniser)
        self._interpreter = Interpreter(self._state, self._output, self._input)

    def __enter__(self):
        """Context guard."""
        return self

    def __exit__(self, ex_type, ex_val, tb):
        """Context guard."""
        self.close()

    def close(self):
        """Flush output."""
        self._output.flush()

    @property
    def quit_requested(self):
        """BY or QUIT has been executed."""
        return self._state.quit_requested

    def interpret(self, source):
        """Clear the session, then scan and run a whole program."""
        self.reset()
        self._scanner.scan(source)
        self._interpreter.run()

    def interpret_line(self, text):
        """Store, delete or execute a line of interactive input; return True if quit was requested."""
        if self._state.quit_requested:
            return True
        if not text.strip():
            return False
        line = self._scanner.scan_interactive_line(text)
        if line is not None and line.is_direct:
            self._interpreter.execute(line)
        return self._state.quit_requested

    def execute(self, commands):
        """Interpret one or more lines of interactive input."""
        for text in commands.splitlines():
            if self.interpret_line(text):
                break

    def evaluate(self, expression):
        """Evaluate a numeric or string expression."""
        line = ProgramLine(tk.DIRECT_LABEL, self._tokeniser.tokenise(expression), expression)
        parser = self._interpreter.expression_parser
        if line.peek().kind in (tk.QUOTED, tk.STRING_VAR):
            value = parser.parse_string(line)
        else:
            value = parser.parse_numeric(line)
        line.require_end()
        return value

    def get_variable(self, name, index=None):
        """Get the value of a variable or, with an index, of an array element."""
        name = name.upper()
        if index is None:
            return self._state.scalars.get(name)
        return self._state.arrays.get(name, index)

    def list_lines(self):
        """Source text of the stored program lines, in label order."""
        return self._state.list_lines()

    def add_line(self, text):
        """Store a labelled line, replacing any line with the same label."""
        line = self._scanner.scan_interactive_line(text)
        if line is not None and line.is_direct:
            raise error.ScanError(u'missing line number')
        return line

    def remove_line(self, label):
        """Remove the line with the given label; return whether it existed."""
        return self._state.delete_line(label)

    def remove_all_lines(self):
        """Remove all program lines and their DATA."""
        self._state.program.erase()
        self._state.data.clear()

    def reset(self):
        """Clear program, variables and all other state."""
        self._state.clear()

    def interact(self):
        """Interactive read-eval-print loop, until end of input or BY or QUIT."""
        while not self._state.quit_requested:
            text = self._input.read_line(PROMPT)
            if text is None:
                break
            try:
                self.interpret_line(text)
            except error.BASICError as e:
                logging.debug('Error in interactive mode: %r', e)
                self._output.write_line(str(e))
        self.close()
