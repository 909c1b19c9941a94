"""
ECMA-BASIC - numbers.py
Single-precision floating point values

(c) 2013--2022 Rob Hagemans
This file is released under the GNU GPL version 3.
"""

import numpy


# all numbers are IEEE single precision
Single = numpy.float32

ZERO = Single(0)
ONE = Single(1)
TEN = Single(10)
TENTH = Single(0.1)

# render positionally within this range of magnitudes, scientifically outside it
_POSITIONAL_MIN = 1e-4
_POSITIONAL_MAX = 1e16


def quiet():
    """Context in which division by zero and domain errors yield inf or nan silently."""
    return numpy.errstate(divide='ignore', invalid='ignore', over='ignore', under='ignore')

def to_single(value):
    """Convert to single precision."""
    with quiet():
        return Single(value)

def power_of_ten(exponent):
    """Single-precision power of ten, computed in double precision."""
    with quiet():
        return Single(numpy.power(numpy.float64(10), exponent))

def to_int(value):
    """Truncate towards zero, for subscripts and labels."""
    if not numpy.isfinite(value):
        return None
    return int(value)


##############################################################################
# representation

def to_repr(value):
    """Shortest round-trip decimal representation of a single."""
    value = Single(value)
    if numpy.isnan(value):
        return u'NaN'
    if numpy.isinf(value):
        return u'-Infinity' if value < 0 else u'Infinity'
    if value == 0:
        return u'0'
    magnitude = abs(float(value))
    if _POSITIONAL_MIN <= magnitude < _POSITIONAL_MAX:
        return numpy.format_float_positional(value, unique=True, trim='-')
    mantissa, exponent = numpy.format_float_scientific(
        value, unique=True, trim='-', exp_digits=2
    ).split('e')
    return u'%sE%s' % (mantissa, exponent)

def format_number(value):
    """Format a number for PRINT: leading space for the sign if nonnegative, one trailing space."""
    text = to_repr(value)
    if text.startswith(u'-'):
        return u'%s ' % (text,)
    return u' %s ' % (text,)
