"""
ECMA-BASIC - memory package
Variable and array storage

(c) 2020--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from .cells import Cell, make_cells
from .scalars import Scalars
from .arrays import Arrays
