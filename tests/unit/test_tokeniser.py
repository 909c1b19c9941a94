"""
ECMA-BASIC test.tokeniser
unit tests for the tokeniser

(c) 2020--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from ecmabasic.basic.base import error
from ecmabasic.basic.base import tokens as tk
from ecmabasic.basic.tokeniser import Tokeniser
from ecmabasic.basic.values import numbers
from tests.unit.utils import TestCase, run_tests


class TokeniserTest(TestCase):
    """Unit tests for Tokeniser."""

    tag = u'tokeniser'

    def setUp(self):
        """Create tokeniser."""
        TestCase.setUp(self)
        self._tokeniser = Tokeniser()

    def _kinds(self, source, allow_unquoted=False):
        """Kinds of all tokens in source."""
        return [_t.kind for _t in self._tokeniser.tokenise(source, allow_unquoted)]

    def test_statement(self):
        """Tokenise a LET statement."""
        tokens = self._tokeniser.tokenise(u'LET A0 = B*(C$) ^ 2\n')
        assert [_t.kind for _t in tokens] == [
            tk.LET, tk.INDEXED_VAR, tk.O_EQ, tk.SIMPLE_VAR, tk.O_TIMES, tk.LPAREN,
            tk.STRING_VAR, tk.RPAREN, tk.O_CARET, tk.NUMBER, tk.EOLN, tk.EOF
        ]
        assert tokens[1].str_value == u'A0'
        assert tokens[6].str_value == u'C$'

    def test_case_insensitive(self):
        """Names and keywords are upper-cased."""
        tokens = self._tokeniser.tokenise(u'print a; b$')
        assert tokens[0].kind == tk.PRINT
        assert tokens[1].str_value == u'A'
        assert tokens[3].str_value == u'B$'

    def test_relations(self):
        """Two-character relations."""
        assert self._kinds(u'<= <> >= < > =') == [
            tk.O_LE, tk.O_NE, tk.O_GE, tk.O_LT, tk.O_GT, tk.O_EQ, tk.EOF
        ]

    def test_number_accumulation(self):
        """Numbers are accumulated digit by digit in single precision."""
        token, pos = self._tokeniser.next_token(u'12.5', 0)
        assert token.kind == tk.NUMBER
        assert token.num_value == numbers.Single(12.5)
        assert isinstance(token.num_value, numbers.Single)
        assert token.str_value == u'12.5'
        assert pos == 4

    def test_number_exponent(self):
        """Numbers with exponents."""
        token, _ = self._tokeniser.next_token(u'15E2', 0)
        assert token.num_value == 1500
        token, _ = self._tokeniser.next_token(u'25E-1', 0)
        assert token.num_value == numbers.Single(2.5)
        token, _ = self._tokeniser.next_token(u'.5E+1', 0)
        assert token.num_value == 5

    def test_exponent_without_digits(self):
        """An E not followed by digits is not part of the number."""
        token, pos = self._tokeniser.next_token(u'2E', 0)
        assert token.num_value == 2
        assert pos == 1

    def test_sign_folding(self):
        """A sign is part of a number only if followed by a digit or full stop."""
        assert self._kinds(u'-5') == [tk.NUMBER, tk.EOF]
        assert self._tokeniser.next_token(u'-5', 0)[0].num_value == -5
        assert self._tokeniser.next_token(u'+.5', 0)[0].num_value == numbers.Single(0.5)
        assert self._kinds(u'- 5') == [tk.O_MINUS, tk.NUMBER, tk.EOF]
        assert self._kinds(u'-A') == [tk.O_MINUS, tk.SIMPLE_VAR, tk.EOF]

    def test_quoted(self):
        """Quoted strings keep their case and spaces."""
        token, pos = self._tokeniser.next_token(u'"Hello, World" ', 0)
        assert token.kind == tk.QUOTED
        assert token.str_value == u'Hello, World'
        assert pos == 14

    def test_unterminated_quote(self):
        """Quoted string must end before the line ends."""
        with self.assertRaises(error.LexError):
            self._tokeniser.tokenise(u'PRINT "abc\n')

    def test_keyword_needs_blank(self):
        """Keywords must follow a blank or a delimiter."""
        with self.assertRaises(error.LexError):
            self._tokeniser.tokenise(u'IF A=5THEN 10')
        assert self._kinds(u'IF A=5 THEN 10')[-3:] == [tk.THEN, tk.NUMBER, tk.EOF]

    def test_unknown_word(self):
        """Runs of letters that are not keywords are rejected."""
        with self.assertRaises(error.LexError):
            self._tokeniser.tokenise(u'LET AB = 1')

    def test_functions(self):
        """Built-in and user functions."""
        tokens = self._tokeniser.tokenise(u'SIN(X)+FNQ(2)+RND')
        assert tokens[0].kind == tk.FUNCTION
        assert tokens[0].str_value == u'SIN'
        assert tokens[5].kind == tk.USER_FUNCTION
        assert tokens[5].str_value == u'FNQ'
        assert tokens[-2].kind == tk.FUNCTION
        assert tokens[-2].str_value == u'RND'

    def test_go_to(self):
        """GO TO is two keywords, GOTO is one."""
        assert self._kinds(u'GO TO 10') == [tk.GO, tk.TO, tk.NUMBER, tk.EOF]
        assert self._kinds(u'GOTO 10') == [tk.GOTO, tk.NUMBER, tk.EOF]

    def test_unquoted(self):
        """Unquoted strings in DATA and INPUT lists."""
        tokens = self._tokeniser.tokenise(u'hello world , 12, 1ABC, -3.5 ,.', allow_unquoted=True)
        assert [_t.kind for _t in tokens] == [
            tk.UNQUOTED, tk.COMMA, tk.NUMBER, tk.COMMA, tk.UNQUOTED, tk.COMMA,
            tk.NUMBER, tk.COMMA, tk.UNQUOTED, tk.EOF
        ]
        assert tokens[0].str_value == u'hello world'
        assert tokens[2].num_value == 12
        assert tokens[4].str_value == u'1ABC'
        assert tokens[6].num_value == numbers.Single(-3.5)
        assert tokens[8].str_value == u'.'

    def test_remark(self):
        """Remark text is read raw up to the line end."""
        token, pos = self._tokeniser.read_remark(u' it\'s "raw" text\n', 0)
        assert token.kind == tk.REMARK
        assert token.str_value == u'it\'s "raw" text'
        assert pos == 16

    def test_bad_character(self):
        """Characters outside the language are rejected."""
        with self.assertRaises(error.LexError):
            self._tokeniser.tokenise(u'PRINT 1 & 2')


if __name__ == '__main__':
    run_tests()
