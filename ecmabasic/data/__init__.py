"""
ECMA-BASIC - data package
Usage text for the command-line interface

(c) 2013--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from importlib import resources


def read_usage():
    """Read the usage text."""
    return resources.files(__package__).joinpath('USAGE.txt').read_text(encoding='utf-8', errors='replace')
