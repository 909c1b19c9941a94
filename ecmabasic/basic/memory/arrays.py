"""
ECMA-BASIC - arrays.py
Array variable management

(c) 2013--2023 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from ..base import error
from ..values import numbers
from . import cells


# top bound of arrays used without DIM
DEFAULT_TOP = 10
# highest top bound accepted by DIM
MAX_TOP = 32767


class Array(object):
    """Single-dimension numeric array."""

    def __init__(self, base, top):
        """Allocate the array, filled with zeros."""
        self.base = base
        self.top = top
        self.values = [numbers.ZERO] * (top - base + 1)

    def __repr__(self):
        return u'Array(%d..%d)' % (self.base, self.top)

    def _offset(self, index):
        """Position in values of a subscript."""
        if index is None or not self.base <= index <= self.top:
            raise error.BoundsError(
                u'subscript %s not in %d..%d' % (index, self.base, self.top)
            )
        return index - self.base

    def get(self, index):
        """Retrieve an element."""
        return self.values[self._offset(index)]

    def set(self, index, value):
        """Assign an element."""
        self.values[self._offset(index)] = numbers.to_single(value)


class Arrays(object):
    """Arrays, one per letter, sharing a common base."""

    def __init__(self, letter_cells):
        """Initialise arrays."""
        self._cells = letter_cells
        self.clear()

    def __contains__(self, letter):
        """Check if an array has been defined."""
        return self._cells[letter].kind == cells.ARRAY

    def __iter__(self):
        """Return an iterable over all array names."""
        return (_letter for _letter, _cell in self._cells.items() if _cell.kind == cells.ARRAY)

    def __repr__(self):
        """Debugging representation of variable dictionary."""
        return '\n'.join('%s: %r' % (_letter, self._cells[_letter].value) for _letter in self)

    def clear(self):
        """Clear arrays and base."""
        for cell in self._cells.values():
            if cell.kind == cells.ARRAY:
                cell.clear()
        # None until set by OPTION BASE or by the first array
        self._base = None

    @property
    def base(self):
        """Subscript of first element; zero if not yet decided."""
        return self._base or 0

    @property
    def base_is_set(self):
        """Base has been fixed."""
        return self._base is not None

    def set_base(self, base):
        """Set the array base; once only, and only before any array exists."""
        error.range_check(0, 1, base)
        if self._base is not None:
            raise error.BoundsError(u'OPTION BASE already set')
        if any(True for _ in self):
            raise error.BoundsError(u'OPTION BASE after array definition')
        self._base = base

    def allocate(self, letter, top):
        """Allocate an array with the given top bound."""
        cell = self._cells[letter]
        if cell.get_array() is not None:
            raise error.DuplicateDefinitionError(u'array %s' % (letter,))
        if top is None or top < self.base:
            raise error.BoundsError(u'bound %s of %s below base %d' % (top, letter, self.base))
        if top > MAX_TOP:
            raise error.BoundsError(u'bound %s of %s above %d' % (top, letter, MAX_TOP))
        # first array fixes the base
        self._base = self.base
        array = Array(self._base, top)
        cell.set_array(array)
        return array

    def dimensions(self, letter):
        """Base and top bound of an array, or None if not defined."""
        array = self._cells[letter].get_array()
        if array is None:
            return None
        return array.base, array.top

    def _get_array(self, letter):
        """Get an array, allocating it with the default bound if it doesn't exist."""
        array = self._cells[letter].get_array()
        if array is None:
            array = self.allocate(letter, DEFAULT_TOP)
        return array

    def get(self, letter, index):
        """Retrieve an element."""
        return self._get_array(letter).get(index)

    def set(self, letter, index, value):
        """Assign an element."""
        self._get_array(letter).set(index, value)
