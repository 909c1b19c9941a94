"""
ECMA-BASIC - state.py
Program state: lines, variables, stacks and DATA

(c) 2013--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from .base import error
from .base import tokens as tk
from .program import Program
from .memory import Scalars, Arrays, make_cells
from .values import Randomiser


# maximum depth of GOSUB nesting
RETURN_STACK_SIZE = 32


class DataQueue(object):
    """DATA literals in scan order, with a read cursor."""

    def __init__(self):
        """Initialise empty queue."""
        self.clear()

    def __len__(self):
        return len(self._literals)

    def clear(self):
        """Remove all literals."""
        self._literals = []
        self.cursor = 0

    def append(self, token):
        """Queue a literal token."""
        self._literals.append(token)

    def read(self):
        """Get the literal at the cursor and advance."""
        if self.cursor >= len(self._literals):
            raise error.DataExhaustedError()
        token = self._literals[self.cursor]
        self.cursor += 1
        return token

    def restore(self):
        """Move the cursor back to the first literal."""
        self.cursor = 0


class ProgramState(object):
    """All mutable execution state of one interpreter."""

    def __init__(self, max_label=tk.MAX_LABEL):
        """Initialise empty state."""
        self.program = Program(max_label)
        self._cells = make_cells()
        self.scalars = Scalars(self._cells)
        self.arrays = Arrays(self._cells)
        self.data = DataQueue()
        self.randomiser = Randomiser()
        self.clear()

    @property
    def max_label(self):
        return self.program.max_label

    def clear(self):
        """Clear everything, including the program and the DATA queue."""
        self.program.erase()
        self.data.clear()
        self.clear_runtime()
        self.quit_requested = False

    def clear_runtime(self):
        """Clear variables, arrays, functions and stacks; rewind DATA."""
        self.scalars.clear()
        self.arrays.clear()
        self.user_functions = {}
        self.return_stack = []
        self.data.restore()
        self.randomiser.clear()
        self.was_end = False

    ###########################################################################
    # program lines

    def store_line(self, line):
        """Store a program line, replacing any line with the same label."""
        self.program.store_line(line)

    def delete_line(self, label):
        """Remove a program line; return whether it existed."""
        return self.program.delete(label)

    def get_line(self, label):
        """Line with the given label, or None."""
        return self.program.get_line(label)

    def next_line(self, from_label):
        """First line with label at or after from_label, or None."""
        return self.program.next_line(from_label)

    def first_line(self):
        """Line with the lowest label, or None."""
        return self.program.first_line()

    def list_lines(self):
        """Source text of all lines, in label order."""
        return [_line.text for _line in self.program]

    ###########################################################################
    # return stack

    def push_return(self, label):
        """Push a GOSUB origin."""
        if len(self.return_stack) >= RETURN_STACK_SIZE:
            raise error.StackOverflow(u'more than %d nested GOSUBs' % (RETURN_STACK_SIZE,))
        self.return_stack.append(label)

    def pop_return(self):
        """Pop the last GOSUB origin."""
        try:
            return self.return_stack.pop()
        except IndexError:
            raise error.StackUnderflow()

    ###########################################################################
    # user functions

    def define_function(self, name, label):
        """Register the DEF line of a user function."""
        if name in self.user_functions:
            raise error.DuplicateDefinitionError(name)
        self.user_functions[name] = label

    def get_function(self, name):
        """Label of the DEF line of a user function."""
        try:
            return self.user_functions[name]
        except KeyError:
            raise error.UndefinedFunctionError(name)
