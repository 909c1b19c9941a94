"""
ECMA-BASIC test.state
unit tests for program state, variables and arrays

(c) 2020--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from ecmabasic.basic.base import error
from ecmabasic.basic.base import tokens as tk
from ecmabasic.basic.base.tokens import Token
from ecmabasic.basic.program import ProgramLine
from ecmabasic.basic.state import ProgramState, RETURN_STACK_SIZE
from tests.unit.utils import TestCase, run_tests


def _line(label, text=u'END'):
    """Make a stored line holding a single END statement."""
    return ProgramLine(label, [Token(tk.END), Token(tk.EOLN)], u'%d %s' % (label, text))


class ProgramStateTest(TestCase):
    """Unit tests for ProgramState."""

    tag = u'state'

    def setUp(self):
        """Create empty state."""
        TestCase.setUp(self)
        self._state = ProgramState()

    def test_next_line(self):
        """Next line is the first stored line at or after a label."""
        self._state.store_line(_line(10))
        self._state.store_line(_line(20))
        assert self._state.first_line().label == 10
        assert self._state.next_line(10).label == 10
        assert self._state.next_line(11).label == 20
        assert self._state.next_line(21) is None
        assert self._state.next_line(tk.DIRECT_LABEL) is None

    def test_replace_and_delete(self):
        """Storing a line with an existing label replaces it."""
        self._state.store_line(_line(10, u'END'))
        self._state.store_line(_line(10, u'STOP'))
        assert self._state.list_lines() == [u'10 STOP']
        assert self._state.delete_line(10)
        assert not self._state.delete_line(10)
        assert self._state.first_line() is None

    def test_small_line_table(self):
        """The highest label can be lowered."""
        state = ProgramState(max_label=99)
        state.store_line(_line(99))
        with self.assertRaises(error.BoundsError):
            state.store_line(_line(100))
        assert state.get_line(100) is None

    def test_return_stack(self):
        """GOSUB nesting is limited."""
        for label in range(RETURN_STACK_SIZE):
            self._state.push_return(label + 1)
        with self.assertRaises(error.StackOverflow):
            self._state.push_return(100)
        assert self._state.pop_return() == RETURN_STACK_SIZE

    def test_return_stack_underflow(self):
        """Popping an empty return stack is an error."""
        with self.assertRaises(error.StackUnderflow):
            self._state.pop_return()

    def test_data_queue(self):
        """DATA is read in order and can be restored."""
        self._state.data.append(Token(tk.NUMBER, 1, u'1'))
        self._state.data.append(Token(tk.QUOTED, str_value=u'A'))
        assert self._state.data.read().num_value == 1
        assert self._state.data.read().str_value == u'A'
        with self.assertRaises(error.DataExhaustedError):
            self._state.data.read()
        self._state.data.restore()
        assert self._state.data.read().num_value == 1

    def test_clear_runtime(self):
        """Clearing for a run keeps lines and DATA but rewinds it."""
        self._state.store_line(_line(10))
        self._state.data.append(Token(tk.NUMBER, 1, u'1'))
        self._state.data.read()
        self._state.scalars.set(u'A', 3)
        self._state.clear_runtime()
        assert self._state.list_lines() == [u'10 END']
        assert self._state.data.cursor == 0
        assert self._state.scalars.get(u'A') == 0

    def test_clear(self):
        """Clearing removes lines and DATA."""
        self._state.store_line(_line(10))
        self._state.data.append(Token(tk.NUMBER, 1, u'1'))
        self._state.clear()
        assert self._state.list_lines() == []
        assert len(self._state.data) == 0

    def test_user_functions(self):
        """Functions are defined once."""
        self._state.define_function(u'FNA', 10)
        assert self._state.get_function(u'FNA') == 10
        with self.assertRaises(error.DuplicateDefinitionError):
            self._state.define_function(u'FNA', 20)
        with self.assertRaises(error.UndefinedFunctionError):
            self._state.get_function(u'FNB')


class VariablesTest(TestCase):
    """Unit tests for scalars and arrays."""

    tag = u'variables'

    def setUp(self):
        """Create empty state."""
        TestCase.setUp(self)
        self._state = ProgramState()
        self._scalars = self._state.scalars
        self._arrays = self._state.arrays

    def test_defaults(self):
        """Unassigned variables are zero or empty."""
        assert self._scalars.get(u'A') == 0
        assert self._scalars.get(u'A1') == 0
        assert self._scalars.get(u'A$') == u''

    def test_separate_namespaces(self):
        """A, A0 and A$ are different variables."""
        self._scalars.set(u'A', 1)
        self._scalars.set(u'A0', 2)
        self._scalars.set(u'A$', u'three')
        assert self._scalars.get(u'A') == 1
        assert self._scalars.get(u'A0') == 2
        assert self._scalars.get(u'A$') == u'three'

    def test_type_check(self):
        """Strings and numbers do not mix."""
        with self.assertRaises(error.DataTypeMismatchError):
            self._scalars.set(u'A$', 1)
        with self.assertRaises(error.DataTypeMismatchError):
            self._scalars.set(u'A1', u'one')

    def test_scalar_then_array(self):
        """A letter assigned as scalar cannot be used as array."""
        self._scalars.set(u'A', 1)
        with self.assertRaises(error.NamespaceCollisionError):
            self._arrays.get(u'A', 1)
        with self.assertRaises(error.NamespaceCollisionError):
            self._arrays.allocate(u'A', 5)

    def test_array_then_scalar(self):
        """A letter used as array cannot be used as scalar."""
        self._arrays.allocate(u'B', 5)
        with self.assertRaises(error.NamespaceCollisionError):
            self._scalars.get(u'B')
        with self.assertRaises(error.NamespaceCollisionError):
            self._scalars.set(u'B', 1)

    def test_reading_does_not_bind(self):
        """Reading an unassigned scalar leaves the letter free for an array."""
        assert self._scalars.get(u'C') == 0
        self._arrays.set(u'C', 3, 7)
        assert self._arrays.get(u'C', 3) == 7

    def test_implicit_array(self):
        """Arrays used without DIM run up to 10."""
        assert self._arrays.get(u'D', 10) == 0
        assert self._arrays.dimensions(u'D') == (0, 10)
        with self.assertRaises(error.BoundsError):
            self._arrays.get(u'D', 11)
        with self.assertRaises(error.BoundsError):
            self._arrays.get(u'D', -1)

    def test_duplicate_dim(self):
        """Arrays are dimensioned once."""
        self._arrays.allocate(u'E', 3)
        with self.assertRaises(error.DuplicateDefinitionError):
            self._arrays.allocate(u'E', 3)
        self._arrays.get(u'F', 1)
        with self.assertRaises(error.DuplicateDefinitionError):
            self._arrays.allocate(u'F', 20)

    def test_base(self):
        """Base one moves the lower bound."""
        self._arrays.set_base(1)
        self._arrays.allocate(u'G', 2)
        self._arrays.set(u'G', 2, 5)
        assert self._arrays.dimensions(u'G') == (1, 2)
        with self.assertRaises(error.BoundsError):
            self._arrays.get(u'G', 0)

    def test_base_set_once(self):
        """Base is set at most once."""
        self._arrays.set_base(0)
        with self.assertRaises(error.BoundsError):
            self._arrays.set_base(1)

    def test_base_after_array(self):
        """Base cannot change once an array exists."""
        self._arrays.allocate(u'H', 3)
        assert self._arrays.base_is_set
        with self.assertRaises(error.BoundsError):
            self._arrays.set_base(1)

    def test_base_range(self):
        """Base is zero or one."""
        with self.assertRaises(error.BoundsError):
            self._arrays.set_base(2)

    def test_bound_below_base(self):
        """Top bound must not be below the base."""
        self._arrays.set_base(1)
        with self.assertRaises(error.BoundsError):
            self._arrays.allocate(u'J', 0)

    def test_clear_unbinds(self):
        """Clearing frees letters and base."""
        self._scalars.set(u'K', 1)
        self._arrays.allocate(u'L', 3)
        self._state.clear_runtime()
        assert not self._arrays.base_is_set
        self._arrays.allocate(u'K', 3)
        self._scalars.set(u'L', 1)


if __name__ == '__main__':
    run_tests()
