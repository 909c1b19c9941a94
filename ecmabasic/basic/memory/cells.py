"""
ECMA-BASIC - cells.py
Numeric storage per letter, shared by plain scalars and arrays

(c) 2013--2023 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from ..base import error
from ..base import tokens as tk
from ..values import numbers


# cell kinds
UNBOUND = u'unbound'
SCALAR = u'scalar'
ARRAY = u'array'


class Cell(object):
    """A letter names either a plain numeric variable or an array, never both."""

    def __init__(self, letter):
        """Initialise an unbound cell."""
        self.letter = letter
        self.clear()

    def __repr__(self):
        return u'Cell(%s: %s %r)' % (self.letter, self.kind, self.value)

    def clear(self):
        """Unbind the cell."""
        self.kind = UNBOUND
        self.value = None

    def get_scalar(self):
        """Value of the plain variable; zero if never assigned."""
        if self.kind == ARRAY:
            raise error.NamespaceCollisionError(u'%s is an array' % (self.letter,))
        if self.kind == SCALAR:
            return self.value
        return numbers.ZERO

    def set_scalar(self, value):
        """Assign to the plain variable."""
        if self.kind == ARRAY:
            raise error.NamespaceCollisionError(u'%s is an array' % (self.letter,))
        self.kind = SCALAR
        self.value = numbers.to_single(value)

    def get_array(self):
        """The array held by this cell, or None if unbound."""
        if self.kind == SCALAR:
            raise error.NamespaceCollisionError(u'%s is not an array' % (self.letter,))
        if self.kind == ARRAY:
            return self.value
        return None

    def set_array(self, array):
        """Bind the cell to an array."""
        if self.kind == SCALAR:
            raise error.NamespaceCollisionError(u'%s is not an array' % (self.letter,))
        self.kind = ARRAY
        self.value = array


def make_cells():
    """Create one unbound cell for each letter."""
    return {_letter: Cell(_letter) for _letter in tk.UPPERCASE}
