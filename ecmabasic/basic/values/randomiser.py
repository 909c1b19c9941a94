"""
ECMA-BASIC - randomiser.py
Random number generator

(c) 2013--2023 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import time
import logging

from . import numbers


class Randomiser(object):
    """Linear Congruential Generator """

    _period = 2**24
    _multiplier = 214013
    _increment = 2531011
    # seed at start of run
    _initial_seed = 20170327

    def __init__(self):
        """Initialise the random number generator."""
        self.clear()

    def clear(self):
        """Reset the random number generator."""
        self._seed = self._initial_seed % self._period

    def reseed(self, val=None):
        """Reseed the random number generator, from the clock if no value given."""
        if val is None:
            val = time.time_ns()
        self._seed = int(val) % self._period
        logging.debug('RANDOMIZE: seed %d', self._seed)
        self._cycle()

    def rnd_(self):
        """Get the next value from the random number generator, in [0, 1)."""
        self._cycle()
        return numbers.Single(self._seed / self._period)

    def _cycle(self):
        """Move the random number generator to the next state."""
        self._seed = (self._seed*self._multiplier + self._increment) % self._period
