"""
ECMA-BASIC - values package
Single-precision numbers and random numbers

(c) 2020--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from .numbers import Single, format_number, to_repr, to_single
from .randomiser import Randomiser
