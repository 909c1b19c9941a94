"""
ECMA-BASIC - iostreams.py
Output and input streams for PRINT, LIST and INPUT

(c) 2014--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import sys

from .base import error
from .base import tokens as tk
from .tokeniser import Tokeniser


# prompt for INPUT
INPUT_PROMPT = u'? '
# form feed, written by CLS to stream outputs
FORM_FEED = u'\f'


class OutputStream(object):
    """Text sink for PRINT and LIST."""

    def __init__(self, stream=None):
        """Attach to a text stream; None means standard output."""
        # stdout is picked at write time as sys.stdout may be replaced
        self._stream = stream

    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text):
        """Write text."""
        self.stream.write(text)

    def write_line(self, text=u''):
        """Write text and a line break."""
        self.stream.write(text + u'\n')

    def clear(self):
        """Clear the screen."""
        self.stream.write(FORM_FEED)

    def flush(self):
        """Flush the underlying stream."""
        self.stream.flush()


class InputStream(object):
    """Line reader for INPUT and the interactive prompt."""

    def __init__(self, stream=None, output=None, tokeniser=None):
        """Attach to a text stream; None means standard input."""
        self._stream = stream
        self._output = output or OutputStream()
        self._tokeniser = tokeniser or Tokeniser()

    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stdin

    def read_line(self, prompt=u''):
        """Show a prompt and read a line; None at end of input."""
        if prompt:
            self._output.write(prompt)
            self._output.flush()
        line = self.stream.readline()
        if not line:
            return None
        return line.rstrip(u'\r\n')

    def read_values(self, names):
        """Read one line holding one value for each variable name.

        A malformed or mistyped reply is reported and the prompt repeated.
        End of input and a wrong number of values are errors.
        """
        while True:
            line = self.read_line(INPUT_PROMPT)
            if line is None:
                raise error.InputError(u'end of input')
            try:
                literals = self._split(line)
            except error.InputError as e:
                self._output.write_line(str(e))
                continue
            if len(literals) != len(names):
                raise error.InputError(
                    u'%d values given for %d variables' % (len(literals), len(names))
                )
            try:
                return [self._convert(_name, _token) for _name, _token in zip(names, literals)]
            except error.DataTypeMismatchError as e:
                self._output.write_line(str(e))

    def _split(self, line):
        """Tokenise a comma-separated list of constants."""
        try:
            tokens = self._tokeniser.tokenise(line, allow_unquoted=True)
        except error.LexError as e:
            raise error.InputError(e.detail)
        literals = []
        for index, token in enumerate(tokens):
            if token.kind == tk.EOF:
                break
            if index % 2 == 0 and token.kind not in (tk.NUMBER,) + tk.STRING_LITERALS:
                raise error.InputError(u'expected a constant, found %s' % (token,))
            if index % 2 == 1 and token.kind != tk.COMMA:
                raise error.InputError(u'expected `,`, found %s' % (token,))
            if index % 2 == 0:
                literals.append(token)
        if tokens[-2:-1] and tokens[-2].kind == tk.COMMA:
            raise error.InputError(u'missing value after `,`')
        return literals

    def _convert(self, name, token):
        """Convert a constant to the type of the variable."""
        if name.endswith(u'$'):
            return token.str_value
        if token.kind != tk.NUMBER:
            raise error.DataTypeMismatchError(u'%s needs a number' % (name,))
        return token.num_value
