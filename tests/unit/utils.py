"""
ECMA-BASIC tests.utils
Shared testing utilities

(c) 2020--2023 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import io
import os
import shutil
import textwrap
import unittest
from unittest import main as run_tests

from ecmabasic import Session


class TestCase(unittest.TestCase):
    """Base class for test cases."""

    tag = None

    def __init__(self, *args, **kwargs):
        """Define output dir name."""
        unittest.TestCase.__init__(self, *args, **kwargs)
        here = os.path.dirname(os.path.abspath(__file__))
        self._dir = os.path.join(here, u'output', self.tag or u'unknown')

    def setUp(self):
        """Ensure output directory exists and is empty."""
        try:
            shutil.rmtree(self._dir)
        except EnvironmentError:
            pass
        if not os.path.isdir(self._dir):
            os.makedirs(self._dir)

    def output_path(self, *names):
        """Output file name."""
        return os.path.join(self._dir, *names)

    def program(self, source):
        """Program text with the common indentation removed."""
        return textwrap.dedent(source).lstrip(u'\n')

    def session(self, input_text=u''):
        """Session writing to a string buffer and reading from a string."""
        output = io.StringIO()
        session = Session(output_stream=output, input_stream=io.StringIO(input_text))
        return session, output

    def run_program(self, source, input_text=u''):
        """Run a program and return what it printed."""
        session, output = self.session(input_text)
        with session:
            session.interpret(self.program(source))
        return output.getvalue()
