"""
ECMA-BASIC - tokeniser.py
Convert a line of source text to tokens

(c) 2013--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from .base import error
from .base import tokens as tk
from .base.tokens import Token
from .values import numbers


class Tokeniser(object):
    """ECMA-55 lexer working on a cursor into one line of source text."""

    def next_token(self, source, pos, allow_unquoted=False):
        """Read the token starting at or after pos; return the token and the position after it."""
        pos = self._skip_blanks(source, pos)
        if pos >= len(source):
            return Token(tk.EOF), pos
        c = source[pos]
        if c == u'\n':
            return Token(tk.EOLN), pos + 1
        elif c == u'"':
            return self._read_quoted(source, pos)
        elif allow_unquoted and c in tk.UNQUOTED_CHARS:
            return self._read_unquoted(source, pos)
        elif c in tk.LETTERS:
            return self._read_word(source, pos)
        elif c in tk.DIGITS or c == u'.':
            return self._read_number(source, pos)
        elif c in (tk.O_PLUS, tk.O_MINUS):
            # sign is part of a number only if directly followed by one
            following = self._peek(source, pos + 1)
            if following and following in tk.DIGITS + u'.':
                return self._read_number(source, pos)
            return Token(c), pos + 1
        elif c == u'<':
            if self._peek(source, pos + 1) == u'=':
                return Token(tk.O_LE), pos + 2
            elif self._peek(source, pos + 1) == u'>':
                return Token(tk.O_NE), pos + 2
            return Token(tk.O_LT), pos + 1
        elif c == u'>':
            if self._peek(source, pos + 1) == u'=':
                return Token(tk.O_GE), pos + 2
            return Token(tk.O_GT), pos + 1
        elif c in (
                tk.O_TIMES, tk.O_DIV, tk.O_CARET, tk.O_EQ,
                tk.LPAREN, tk.RPAREN, tk.COMMA, tk.SEMICOLON
            ):
            return Token(c), pos + 1
        raise error.LexError(u'unexpected character %r' % (c,))

    def read_remark(self, source, pos):
        """Read the raw text of a REM statement up to the end of the line."""
        end = source.find(u'\n', pos)
        if end < 0:
            end = len(source)
        return Token(tk.REMARK, str_value=source[pos:end].strip()), end

    def tokenise(self, source, allow_unquoted=False):
        """Tokenise a whole string, up to and including the end-of-text token."""
        pos, result = 0, []
        while True:
            token, pos = self.next_token(source, pos, allow_unquoted)
            result.append(token)
            if token.kind == tk.EOF:
                return result

    def _peek(self, source, pos):
        """Character at pos, or empty at end of text."""
        return source[pos:pos+1]

    def _skip_blanks(self, source, pos):
        """Skip spaces and tabs."""
        while pos < len(source) and source[pos] in tk.BLANKS:
            pos += 1
        return pos

    def _read_quoted(self, source, pos):
        """Read a quoted string literal."""
        end = pos + 1
        while end < len(source) and source[end] not in u'"\n':
            end += 1
        if self._peek(source, end) != u'"':
            raise error.LexError(u'unterminated quoted string')
        return Token(tk.QUOTED, str_value=source[pos+1:end]), end + 1

    def _read_unquoted(self, source, pos):
        """Read an unquoted string literal, which may turn out to be a number."""
        end = pos
        while end < len(source) and source[end] in tk.UNQUOTED_CHARS:
            end += 1
        text = source[pos:end].rstrip()
        if text[0] in tk.DIGITS + u'+-.':
            try:
                token, token_end = self.next_token(text, 0)
            except error.LexError:
                # not a number after all, e.g. a lone full stop
                token, token_end = None, 0
            if token and token.kind == tk.NUMBER and token_end == len(text):
                return token, end
        return Token(tk.UNQUOTED, str_value=text), end

    def _read_word(self, source, pos):
        """Read a variable name, keyword or function name."""
        letter = source[pos].upper()
        following = self._peek(source, pos + 1)
        if following and following in tk.DIGITS:
            return Token(tk.INDEXED_VAR, str_value=letter + following), pos + 2
        elif following == u'$':
            return Token(tk.STRING_VAR, str_value=letter + u'$'), pos + 2
        elif not following or following not in tk.LETTERS:
            return Token(tk.SIMPLE_VAR, str_value=letter), pos + 1
        end = pos
        while end < len(source) and source[end] in tk.LETTERS:
            end += 1
        word = source[pos:end].upper()
        if word in tk.KEYWORDS:
            if pos > 0 and source[pos-1] not in tk.BLANKS + tk.KEYWORD_PRECEDERS:
                raise error.LexError(u'%s must be preceded by a blank' % (word,))
            return Token(word, str_value=word), end
        elif len(word) == 3 and word.startswith(tk.FN):
            return Token(tk.USER_FUNCTION, str_value=word), end
        elif word in tk.FUNCTIONS:
            return Token(tk.FUNCTION, str_value=word), end
        raise error.LexError(u'unknown word %s' % (word,))

    def _read_number(self, source, pos):
        """Read a numeric literal by direct accumulation in single precision."""
        start = pos
        negative = False
        if source[pos] in (tk.O_PLUS, tk.O_MINUS):
            negative = source[pos] == tk.O_MINUS
            pos += 1
        value = numbers.ZERO
        have_digits = False
        with numbers.quiet():
            while self._peek(source, pos) and source[pos] in tk.DIGITS:
                value = value * numbers.TEN + numbers.Single(int(source[pos]))
                have_digits = True
                pos += 1
            if self._peek(source, pos) == u'.':
                pos += 1
                scale = numbers.TENTH
                while self._peek(source, pos) and source[pos] in tk.DIGITS:
                    value += numbers.Single(int(source[pos])) * scale
                    scale *= numbers.TENTH
                    have_digits = True
                    pos += 1
            if not have_digits:
                raise error.LexError(u'malformed number %s' % (source[start:pos+1],))
            pos, exponent = self._read_exponent(source, pos)
            if exponent:
                value *= numbers.power_of_ten(exponent)
            if negative:
                value = -value
        return Token(tk.NUMBER, value, source[start:pos]), pos

    def _read_exponent(self, source, pos):
        """Read the exponent part of a number, if any."""
        if self._peek(source, pos) not in (u'E', u'e'):
            return pos, 0
        end = pos + 1
        sign = 1
        if self._peek(source, end) in (tk.O_PLUS, tk.O_MINUS):
            sign = -1 if source[end] == tk.O_MINUS else 1
            end += 1
        if not self._peek(source, end) or source[end] not in tk.DIGITS:
            # not an exponent; leave the E for the next token
            return pos, 0
        exponent = 0
        while self._peek(source, end) and source[end] in tk.DIGITS:
            exponent = exponent * 10 + int(source[end])
            end += 1
        return end, sign * exponent
