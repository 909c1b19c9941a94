"""
ECMA-BASIC - flow.py
Resume points returned by statement handlers

(c) 2013--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from collections import namedtuple


class _Flow(object):
    """Resume point without a target."""

    def __init__(self, name):
        self._name = name

    def __repr__(self):
        return self._name


# continue at the line following the current one
NEXT = _Flow('NEXT')
# stop executing
HALT = _Flow('HALT')


class Jump(namedtuple('Jump', ['label'])):
    """Continue at the line with the given label, which must exist."""
    __slots__ = ()


class Resume(namedtuple('Resume', ['label'])):
    """Continue at the first line after the given label."""
    __slots__ = ()
