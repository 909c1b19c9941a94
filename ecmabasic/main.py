"""
ECMA-BASIC - ECMA-55 Minimal BASIC interpreter

(c) 2013--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import io
import sys
import logging
from contextlib import contextmanager

from . import config
from .basic import Session, BASICError
from .basic import NAME, VERSION, COPYRIGHT
from .data import read_usage


def main(*arguments):
    """Initialise, parse arguments and perform requested operations."""
    settings = config.Settings(arguments)
    if settings.version:
        # print version and exit
        _show_version(settings)
    elif settings.help:
        # print usage and exit
        _show_usage()
    else:
        # start an interpreter session with standard i/o
        _run_session(settings)


def _show_usage():
    """Show usage description."""
    sys.stdout.write(read_usage())

def _show_version(settings):
    """Show version with optional debugging details."""
    if settings.debug:
        sys.stdout.write(u'%s %s\n%s\nPython %s\n' % (NAME, VERSION, COPYRIGHT, sys.version))
    else:
        sys.stdout.write(u'%s %s\n%s\n' % (NAME, VERSION, COPYRIGHT))

def _run_session(settings):
    """Run a program and/or an interactive session; exit with status 1 on a program error."""
    with Session(**settings.session_params) as session:
        if settings.program:
            try:
                with io.open(settings.program, 'r', encoding='utf-8', errors='replace') as f:
                    source = f.read()
            except EnvironmentError as e:
                logging.error(u'Could not read program `%s`: %s', settings.program, e)
                sys.exit(1)
            try:
                session.interpret(source)
            except BASICError as e:
                logging.error(u'Program `%s` failed: %r', settings.program, e)
                session.close()
                sys.stderr.write(u'%s\n' % (e,))
                if not settings.get(u'interact'):
                    sys.exit(1)
        if settings.interact:
            session.interact()


@contextmanager
def script_entry_point_guard():
    """Wrapper for entry points, to deal with Ctrl-C and sigpipe."""
    try:
        yield
    except KeyboardInterrupt:
        pass
    except BrokenPipeError:
        # output was closed, e.g. piped into `head`
        sys.stderr.close()
