"""
ECMA-BASIC - scanner.py
Split source text into labelled, pre-tokenised program lines

(c) 2013--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import logging

from .base import error
from .base import tokens as tk
from .program import ProgramLine
from .tokeniser import Tokeniser
from .values import numbers


class Scanner(object):
    """Fill the line table from program text or interactive input."""

    def __init__(self, state, tokeniser=None):
        """Initialise scanner."""
        self._state = state
        self._tokeniser = tokeniser or Tokeniser()

    def scan(self, source):
        """Scan a whole program into the line table; duplicate labels are errors."""
        source = source.replace(u'\r\n', u'\n')
        lines = source.split(u'\n')
        # the last element is empty if the text ends in a line terminator
        *terminated, rest = lines
        for text in terminated:
            line, data = self._scan_line(text)
            if self._state.get_line(line.label) is not None:
                raise error.ScanError(u'duplicate line number', line.label)
            self._store(line, data)
        if rest:
            line, _ = self._scan_line(rest)
            raise error.ScanError(u'no line end', line.label)
        logging.debug('Scanned %d lines, %d DATA values', len(self._state.program), len(self._state.data))

    def scan_interactive_line(self, text):
        """Scan a line of interactive input.

        A labelled line is stored, replacing any line with the same label, and returned.
        A label on its own deletes that line; None is returned.
        An unlabelled line is returned unstored, to be executed once.
        """
        text = text.rstrip(u'\r\n')
        token, _ = self._tokeniser.next_token(text, 0)
        if token.kind != tk.NUMBER or token.str_value[:1] not in tk.DIGITS:
            return self._scan_direct_line(text)
        line, data = self._scan_line(text)
        if line.tokens[0].kind in tk.END_STATEMENT:
            self._state.delete_line(line.label)
            return None
        self._store(line, data)
        return line

    def _store(self, line, data):
        """Store a line and queue its DATA literals."""
        self._state.store_line(line)
        for token in data:
            self._state.data.append(token)

    def _scan_direct_line(self, text):
        """Tokenise an unlabelled line."""
        self._check_length(text, tk.DIRECT_LABEL)
        tokens, _ = self._scan_statement(text + u'\n', 0)
        return ProgramLine(tk.DIRECT_LABEL, tokens, text)

    def _scan_line(self, text):
        """Tokenise a labelled line; return the line and its DATA literals."""
        label, pos = self._scan_label(text)
        try:
            self._check_length(text, label)
            tokens, data = self._scan_statement(text + u'\n', pos)
        except error.BASICError as e:
            if e.label is None:
                e.label = label
            raise
        return ProgramLine(label, tokens, text), data

    def _scan_label(self, text):
        """Read the label at the start of a line."""
        token, pos = self._tokeniser.next_token(text, 0)
        if token.kind != tk.NUMBER or token.str_value[:1] not in tk.DIGITS:
            raise error.ScanError(u'missing line number')
        label = numbers.to_int(token.num_value)
        if label is None or label != token.num_value or not 1 <= label <= self._state.max_label:
            raise error.ScanError(u'line number %s out of range' % (token.str_value,))
        if pos < len(text) and text[pos] not in tk.BLANKS:
            raise error.ScanError(u'line number must be followed by a blank', label)
        return label, pos

    def _check_length(self, text, label):
        """Physical lines are limited in length."""
        if len(text) > tk.MAX_LINE_LENGTH:
            raise error.ScanError(
                u'line longer than %d characters' % (tk.MAX_LINE_LENGTH,), label
            )

    def _scan_statement(self, text, pos):
        """Tokenise the statement part of a line; return tokens and DATA literals."""
        tokens, data = [], []
        while True:
            token, pos = self._tokeniser.next_token(text, pos)
            tokens.append(token)
            if token.kind == tk.REM:
                remark, pos = self._tokeniser.read_remark(text, pos)
                tokens.append(remark)
            elif token.kind == tk.DATA and len(tokens) == 1:
                data, pos = self._scan_data(text, pos)
                tokens.extend(data)
            elif token.kind in tk.END_STATEMENT:
                return tokens, data

    def _scan_data(self, text, pos):
        """Tokenise a DATA list, which must alternate literal and comma."""
        data = []
        while True:
            token, pos = self._tokeniser.next_token(text, pos, allow_unquoted=True)
            if token.kind not in (tk.NUMBER,) + tk.STRING_LITERALS:
                raise error.ScanError(u'unexpected %s in DATA, expected a constant' % (token,))
            data.append(token)
            token, next_pos = self._tokeniser.next_token(text, pos)
            if token.kind in tk.END_STATEMENT:
                # leave the line end for the statement scanner
                return data, pos
            elif token.kind != tk.COMMA:
                raise error.ScanError(u'unexpected %s in DATA, expected `,`' % (token,))
            pos = next_pos
