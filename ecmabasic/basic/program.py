"""
ECMA-BASIC - program.py
Program lines and the line table

(c) 2013--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from .base import error
from .base import tokens as tk


class ProgramLine(object):
    """Pre-tokenised program line with a read cursor."""

    def __init__(self, label, tokens, text=u''):
        """Initialise the line; tokens must end in an end-of-line token."""
        self.label = label
        self.tokens = tuple(tokens)
        # source text, for LIST
        self.text = text
        self.position = 0

    def __repr__(self):
        return u'ProgramLine(%r, %r)' % (self.label, self.text)

    def __str__(self):
        return self.text

    @property
    def is_direct(self):
        """Line was typed in interactive mode and is not stored."""
        return self.label < 1

    def rewind(self):
        """Move the cursor to the first token."""
        self.position = 0

    def peek(self):
        """Get the token at the cursor without consuming it."""
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return self.tokens[-1]

    def read(self):
        """Consume and return the token at the cursor."""
        token = self.peek()
        if self.position < len(self.tokens):
            self.position += 1
        return token

    def skip(self, *kinds):
        """Consume the token at the cursor if it is of one of the given kinds; return it or None."""
        if self.peek().kind in kinds:
            return self.read()
        return None

    def expect(self, *kinds):
        """Consume the token at the cursor, which must be of one of the given kinds."""
        token = self.read()
        if token.kind not in kinds:
            raise error.UnexpectedTokenError(token, u' or '.join(kinds))
        return token

    def require_end(self):
        """The statement must end here."""
        self.expect(*tk.END_STATEMENT)


class Program(object):
    """Table of program lines indexed by label."""

    def __init__(self, max_label=tk.MAX_LABEL):
        """Initialise program."""
        self.max_label = max_label
        self.erase()

    def erase(self):
        """Erase the program."""
        self._lines = [None] * self.max_label

    def __len__(self):
        return sum(1 for _line in self._lines if _line is not None)

    def __iter__(self):
        """Iterate over stored lines in label order."""
        return (_line for _line in self._lines if _line is not None)

    def store_line(self, line):
        """Store a line, replacing any line with the same label."""
        error.range_check(1, self.max_label, line.label)
        self._lines[line.label - 1] = line

    def delete(self, label):
        """Remove the line with the given label, if any; return whether it existed."""
        if not 1 <= label <= self.max_label:
            return False
        existed = self._lines[label - 1] is not None
        self._lines[label - 1] = None
        return existed

    def get_line(self, label):
        """Get the line with the given label, or None."""
        if not 1 <= label <= self.max_label:
            return None
        return self._lines[label - 1]

    def next_line(self, from_label):
        """First stored line with label at or after from_label, or None."""
        if from_label < 0:
            return None
        for index in range(max(from_label - 1, 0), self.max_label):
            if self._lines[index] is not None:
                return self._lines[index]
        return None

    def first_line(self):
        """Line with the lowest label, or None."""
        return self.next_line(1)
