"""
ECMA-BASIC - error.py
Error constants and exceptions

(c) 2013--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""


class Interrupt(Exception):
    """Base type for exceptions."""

    message = u''

    def __repr__(self):
        """String representation of exception."""
        return u'%s(%r)' % (type(self).__name__, self.get_message())

    def get_message(self, label=None):
        """Error message."""
        return self.message


class BASICError(Interrupt):
    """Runtime error, fatal to the current run."""

    message = u'Error'

    def __init__(self, detail=None, label=None):
        """Initialise error with optional detail and line label."""
        Interrupt.__init__(self)
        self.detail = detail
        # label of the stored line where the error occurred, if any
        self.label = label

    def __str__(self):
        """Error message, with line label where known."""
        return self.get_message(self.label)

    def get_message(self, label=None):
        """Error message, with ` in N` appended for stored lines."""
        if self.detail:
            message = u'%s: %s' % (self.message, self.detail)
        else:
            message = self.message
        if label is not None and label >= 1:
            return u'%s in %i' % (message, label)
        return message


##############################################################################
# lexical and scanning errors

class LexError(BASICError):
    """Malformed literal or keyword."""
    message = u'Syntax error'


class ScanError(BASICError):
    """Malformed program line."""
    message = u'Bad program line'


##############################################################################
# parse errors

class UnexpectedTokenError(BASICError):
    """Token not allowed at this point."""

    message = u'Syntax error'

    def __init__(self, token, expected=None, label=None):
        """Initialise with the offending token."""
        if expected:
            detail = u'unexpected %s, expected %s' % (token, expected)
        else:
            detail = u'unexpected %s' % (token,)
        BASICError.__init__(self, detail, label)
        self.token = token
        self.expected = expected


##############################################################################
# runtime errors

class NamespaceCollisionError(BASICError):
    """Scalar used where array expected, or vice versa."""
    message = u'Array and variable share a name'


class BoundsError(BASICError):
    """Subscript or base out of range."""
    message = u'Subscript out of range'


class DuplicateDefinitionError(BASICError):
    """Array or function defined twice."""
    message = u'Duplicate definition'


class UndefinedLabelError(BASICError):
    """Jump target not in program."""
    message = u'Undefined line number'


class UndefinedFunctionError(BASICError):
    """Function called before its DEF was executed."""
    message = u'Undefined user function'


class StackOverflow(BASICError):
    """Too many nested GOSUBs or function calls."""
    message = u'Stack overflow'


class StackUnderflow(BASICError):
    """RETURN without GOSUB."""
    message = u'RETURN without GOSUB'


class DataExhaustedError(BASICError):
    """READ past the last DATA literal."""
    message = u'Out of DATA'


class DataTypeMismatchError(BASICError):
    """DATA literal does not fit the variable."""
    message = u'Type mismatch'


class InputError(BASICError):
    """INPUT did not get one value per variable."""
    message = u'Bad input'


class UnsupportedInInteractiveModeError(BASICError):
    """Statement requires a stored program line."""
    message = u'Illegal direct'


class DirectStatementInFileError(BASICError):
    """Interactive command used on a stored program line."""
    message = u'Direct statement in file'


class MisplacedEndError(BASICError):
    """END is not on the last line of the program."""
    message = u'END is not the last statement'


class UnexpectedEndOfProgramError(BASICError):
    """Execution ran off the last line without END or STOP."""
    message = u'Program ended without END'


##############################################################################
# checks

def range_check(lower, upper, *allvars):
    """Check if all variables in list are within the given inclusive range."""
    for v in allvars:
        if v is not None and not (lower <= v <= upper):
            raise BoundsError(u'%s not in %s..%s' % (v, lower, upper))

def throw_if(condition, err=BoundsError, detail=None):
    """Raise the given error if condition is met."""
    if condition:
        raise err(detail)
