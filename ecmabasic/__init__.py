"""
ECMA-BASIC - ECMA-55 Minimal BASIC interpreter

(c) 2013--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from .basic import __version__
from .basic import NAME, VERSION, AUTHOR, COPYRIGHT
from .basic import Session
from .main import main, script_entry_point_guard
