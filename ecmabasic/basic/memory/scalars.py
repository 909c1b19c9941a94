"""
ECMA-BASIC - scalars.py
Scalar variable management

(c) 2013--2023 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from ..base import error
from ..values import numbers
from . import cells


class Scalars(object):
    """Scalar variables: plain (A), indexed (A0) and string (A$)."""

    def __init__(self, letter_cells):
        """Initialise scalars."""
        self._cells = letter_cells
        self.clear()

    def __repr__(self):
        """Debugging representation of variable dictionary."""
        return '\n'.join(
            '%s: %r' % (_name, self.get(_name))
            for _name in sorted(self)
        )

    def __iter__(self):
        """Return an iterable over all assigned scalar names."""
        for letter, cell in self._cells.items():
            if cell.kind == cells.SCALAR:
                yield letter
        for name in self._vars:
            yield name

    def clear(self):
        """Clear scalar variables."""
        for cell in self._cells.values():
            if cell.kind == cells.SCALAR:
                cell.clear()
        self._vars = {}

    def get(self, name):
        """Retrieve the value of a variable; numbers default to zero and strings to empty."""
        if len(name) == 1:
            return self._cells[name].get_scalar()
        if name.endswith(u'$'):
            return self._vars.get(name, u'')
        return self._vars.get(name, numbers.ZERO)

    def set(self, name, value):
        """Assign a value to a variable."""
        if len(name) == 1:
            self._cells[name].set_scalar(value)
        elif name.endswith(u'$'):
            if not isinstance(value, str):
                raise error.DataTypeMismatchError(u'%s needs a string' % (name,))
            self._vars[name] = value
        else:
            if isinstance(value, str):
                raise error.DataTypeMismatchError(u'%s needs a number' % (name,))
            self._vars[name] = numbers.to_single(value)
