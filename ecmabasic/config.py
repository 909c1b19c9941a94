"""
ECMA-BASIC - config.py
Configuration file and command-line options parser

(c) 2013--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import io
import os
import sys
import logging
import configparser
from collections import deque

from .basic.base import tokens as tk


# default config file name, looked for in the current directory
CONFIG_NAME = u'ecmabasic.ini'
# section of the config file holding our options
CONFIG_SECTION = u'ecmabasic'

# format for log files
LOGGING_FORMAT = u'[%(asctime)s.%(msecs)04d] %(levelname)s: %(message)s'
LOGGING_FORMATTER = logging.Formatter(fmt=LOGGING_FORMAT, datefmt=u'%H:%M:%S')

# bool strings
TRUES = (u'YES', u'TRUE', u'ON', u'1')
FALSES = (u'NO', u'FALSE', u'OFF', u'0')

# lowest allowed value for the highest line label
MIN_MAX_LABEL = 99


SHORT_ARGS = {
    u'h': (u'help', u'True'),
    u'v': (u'version', u'True'),
    u'i': (u'interact', u'True'),
    u'd': (u'debug', u'True'),
}

# number of positional arguments
NUM_POSITIONAL = 1

ARGUMENTS = {
    u'help': {u'type': u'bool', u'default': False, },
    u'version': {u'type': u'bool', u'default': False, },
    u'interact': {u'type': u'bool', u'default': False, },
    u'debug': {u'type': u'bool', u'default': False, },
    u'logfile': {u'type': u'string', u'default': u'', },
    u'max-label': {
        u'type': u'int', u'default': tk.MAX_LABEL,
        u'check': lambda _v: MIN_MAX_LABEL <= _v <= tk.MAX_LABEL,
    },
    u'config': {u'type': u'string', u'default': u'', },
}


class Lumberjack(object):
    """Logging manager."""

    def __init__(self):
        """Set up the global logger temporarily until we know the log stream."""
        # include messages from warnings madule in the logs
        logging.captureWarnings(True)
        root_logger = self.reset()
        root_logger.setLevel(logging.WARNING)
        # send to a buffer until we know where to log to
        self._logstream = io.StringIO()
        handler = logging.StreamHandler(self._logstream)
        handler.setFormatter(LOGGING_FORMATTER)
        root_logger.addHandler(handler)

    def reset(self):
        """Reset root logger."""
        root_logger = logging.getLogger()
        # remove all old handlers: temporary ones we set as well as any default ones
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
        return root_logger

    def prepare(self, logfile, debug):
        """Set up the global logger."""
        loglevel = logging.DEBUG if debug else logging.WARNING
        root_logger = self.reset()
        root_logger.setLevel(loglevel)
        if logfile:
            logstream = io.open(logfile, 'w', encoding='utf_8', errors='replace')
        else:
            logstream = sys.stderr
        # write out cached logs
        logstream.write(self._logstream.getvalue())
        handler = logging.StreamHandler(logstream)
        handler.setFormatter(LOGGING_FORMATTER)
        root_logger.addHandler(handler)


class Settings(object):
    """Read and retrieve command-line settings and options."""

    def __init__(self, arguments=()):
        """Initialise settings."""
        if not arguments:
            self._uargv = sys.argv[1:]
        else:
            self._uargv = list(arguments)
        lumberjack = Lumberjack()
        self._options = ArgumentParser().retrieve_options(self._uargv)
        lumberjack.prepare(self.get(u'logfile'), self.get(u'debug'))

    def get(self, name, get_default=True):
        """Get value of option; choose whether to get default or None (unspecified)."""
        try:
            value = self._options[name]
            if get_default and (value is None or value == u''):
                raise KeyError
        except KeyError:
            if not get_default:
                return None
            try:
                value = ARGUMENTS[name][u'default']
            except KeyError:
                # positional argument
                return u''
        return value

    @property
    def help(self):
        """Show usage and exit."""
        return self.get(u'help')

    @property
    def version(self):
        """Show version and exit."""
        return self.get(u'version')

    @property
    def debug(self):
        """Debug logging."""
        return self.get(u'debug')

    @property
    def program(self):
        """Program file to run, if any."""
        return self.get(0)

    @property
    def interact(self):
        """Start interactive mode; always if no program is given."""
        return self.get(u'interact') or not self.program

    @property
    def session_params(self):
        """Return a dictionary of parameters for the Session object."""
        return {
            'max_label': self.get(u'max-label'),
        }


class ArgumentParser(object):
    """Parse config file and command-line arguments."""

    def retrieve_options(self, uargv):
        """Retrieve command line and option file options."""
        # convert command line arguments to string dictionary form
        remaining = self._get_arguments_dict(uargv)
        config_file = remaining.pop(u'config', u'')
        if not config_file and os.path.isfile(CONFIG_NAME):
            config_file = CONFIG_NAME
        args = {}
        if config_file:
            args = self._read_config_file(config_file)
            for key in [_k for _k in args if _k not in ARGUMENTS]:
                logging.warning(
                    'Ignored unrecognised option `%s=%s` in configuration file', key, args.pop(key)
                )
        # command-line options override config file settings
        args.update(self._parse_args(remaining))
        return {_k: self._parse_type(_k, _v) for _k, _v in args.items()}

    def _get_arguments_dict(self, argv):
        """Convert command-line arguments to dictionary."""
        args = {}
        arg_deque = deque(argv)
        # positional arguments
        pos = 0
        # use -- to end option parsing, everything is a positional argument afterwards
        options_ended = False
        while arg_deque:
            arg = arg_deque.popleft()
            if not arg.startswith(u'-') or options_ended:
                # not an option flag, interpret as positional
                args[pos] = arg
                pos += 1
            elif arg == u'--':
                options_ended = True
            else:
                key, _, value = arg.partition(u'=')
                if key.startswith(u'--'):
                    # long option
                    if key[2:]:
                        args[key[2:]] = value
                else:
                    # short options may be combined, e.g. -di
                    for char in key[1:]:
                        try:
                            long_key, long_value = SHORT_ARGS[char]
                        except KeyError:
                            logging.warning(u'Ignored unrecognised option `-%s`', char)
                        else:
                            args[long_key] = long_value
        return args

    def _read_config_file(self, config_file):
        """Read our section of the config file."""
        try:
            config = configparser.RawConfigParser(allow_no_value=True)
            # use utf_8_sig to ignore a BOM if it's at the start of the file
            with io.open(config_file, 'r', encoding='utf_8_sig', errors='replace') as f:
                config.read_file(f)
        except (configparser.Error, IOError):
            logging.warning(
                u'Error in configuration file `%s`. Configuration not loaded.', config_file
            )
            return {}
        if not config.has_section(CONFIG_SECTION):
            return {}
        return dict(config.items(CONFIG_SECTION))

    def _parse_args(self, remaining):
        """Process command line options."""
        known = list(ARGUMENTS.keys()) + list(range(NUM_POSITIONAL))
        args = {d: remaining[d] for d in remaining if d in known}
        for d in remaining:
            if d not in known:
                if isinstance(d, int):
                    logging.warning(
                        u'Ignored surplus positional command-line argument #%s: `%s`', d, remaining[d]
                    )
                else:
                    logging.warning(u'Ignored unrecognised command-line argument `%s`', d)
        return args

    def _parse_type(self, d, arg):
        """Convert argument to required type."""
        if d not in ARGUMENTS:
            return arg
        if ARGUMENTS[d][u'type'] == u'int':
            arg = self._to_int(d, arg)
        elif ARGUMENTS[d][u'type'] == u'bool':
            arg = self._to_bool(d, arg)
        if u'check' in ARGUMENTS[d]:
            if arg not in (None, u'') and not ARGUMENTS[d][u'check'](arg):
                logging.warning(u'Value `%s=%s` ignored; out of range', d, arg)
                arg = None
        return arg

    def _to_bool(self, d, s):
        """Parse bool option. Empty string (i.e. specified) means True."""
        if s is None or s == u'':
            return True
        if isinstance(s, bool):
            return s
        if s.upper() in TRUES:
            return True
        elif s.upper() in FALSES:
            return False
        logging.warning(u'Value `%s=%s` ignored; should be a boolean', d, s)
        return None

    def _to_int(self, d, s):
        """Parse int option."""
        try:
            return int(s)
        except (TypeError, ValueError):
            logging.warning(u'Value `%s=%s` ignored; should be an integer', d, s)
            return None
