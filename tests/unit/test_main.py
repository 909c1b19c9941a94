"""
ECMA-BASIC test.main
unit tests for main script

(c) 2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import io
import sys
from contextlib import redirect_stdout, redirect_stderr

from ecmabasic import main
from ecmabasic import config
from tests.unit.utils import TestCase, run_tests


class MainTest(TestCase):
    """Unit tests for main script."""

    tag = u'main'

    def _write(self, name, text):
        """Write a file to the output directory; return its path."""
        path = self.output_path(name)
        with io.open(path, 'w', encoding='utf-8') as f:
            f.write(text)
        return path

    def _main(self, *args, **kwargs):
        """Call main with redirected standard streams; return stdout and stderr text."""
        stdin = io.StringIO(kwargs.get('input_text', u''))
        stdout, stderr = io.StringIO(), io.StringIO()
        save_stdin, sys.stdin = sys.stdin, stdin
        try:
            with redirect_stdout(stdout), redirect_stderr(stderr):
                main(*args)
        finally:
            sys.stdin = save_stdin
        return stdout.getvalue(), stderr.getvalue()

    def test_version(self):
        """Test version call."""
        output, _ = self._main('-v')
        assert output.startswith(u'ECMA-BASIC'), output

    def test_debug_version(self):
        """Test debug version call."""
        output, _ = self._main('-v', '--debug')
        assert output.startswith(u'ECMA-BASIC'), output
        assert u'Python' in output, output

    def test_help(self):
        """Test usage call."""
        output, _ = self._main('--help')
        assert output.startswith(u'Usage:'), output

    def test_run_program(self):
        """Run a program file."""
        path = self._write(u'hello.bas', u'10 PRINT "HELLO"\n20 END\n')
        output, _ = self._main(path)
        assert output == u'HELLO\n', repr(output)

    def test_program_error(self):
        """A failing program exits with status 1 and reports the error."""
        path = self._write(u'bad.bas', u'10 GOTO 50\n20 END\n')
        with self.assertRaises(SystemExit) as cm:
            self._main(path)
        assert cm.exception.code == 1

    def test_program_error_message(self):
        """The error message goes to standard error."""
        path = self._write(u'bad.bas', u'10 GOTO 50\n20 END\n')
        stderr = io.StringIO()
        with redirect_stdout(io.StringIO()), redirect_stderr(stderr):
            with self.assertRaises(SystemExit):
                main(path)
        assert u'Undefined line number: 50 in 10' in stderr.getvalue(), stderr.getvalue()

    def test_missing_program(self):
        """A missing program file exits with status 1."""
        with self.assertRaises(SystemExit) as cm:
            self._main(self.output_path(u'missing.bas'))
        assert cm.exception.code == 1

    def test_interact_after_program(self):
        """With -i, the session continues interactively after the program."""
        path = self._write(u'setup.bas', u'10 LET A = 3\n20 END\n')
        output, _ = self._main(path, '-i', input_text=u'PRINT A\n')
        assert output == u'>  3 \n> ', repr(output)

    def test_interact_without_program(self):
        """Without a program, the session is interactive."""
        output, _ = self._main('-d', input_text=u'10 PRINT 1\n20 END\nRUN\nBY\nPRINT 2\n')
        assert output == u'> > >  1 \n> ', repr(output)

    def test_config_file(self):
        """Options are read from a configuration file."""
        ini = self._write(u'test.ini', u'[ecmabasic]\nmax-label=99\n')
        path = self._write(u'long.bas', u'100 END\n')
        with self.assertRaises(SystemExit):
            self._main(path, '--config=%s' % (ini,))
        output, _ = self._main(path)
        assert output == u''


class SettingsTest(TestCase):
    """Unit tests for option parsing."""

    tag = u'settings'

    def test_defaults(self):
        """Default settings with a program."""
        settings = config.Settings(['prog.bas'])
        assert settings.program == u'prog.bas'
        assert not settings.interact
        assert not settings.debug
        assert settings.session_params == {'max_label': 9999}

    def test_short_options(self):
        """Short options may be combined."""
        settings = config.Settings(['prog.bas', '-di'])
        assert settings.debug
        assert settings.interact

    def test_max_label(self):
        """Highest label is checked."""
        settings = config.Settings(['--max-label=500'])
        assert settings.session_params == {'max_label': 500}
        assert settings.interact
        settings = config.Settings(['--max-label=50'])
        assert settings.session_params == {'max_label': 9999}
        settings = config.Settings(['--max-label=lots'])
        assert settings.session_params == {'max_label': 9999}

    def test_bool_values(self):
        """Boolean options accept yes and no."""
        assert config.Settings(['--debug=yes']).debug
        assert not config.Settings(['--debug=off']).debug


if __name__ == '__main__':
    run_tests()
