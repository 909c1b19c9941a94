"""
ECMA-BASIC - tokens.py
BASIC token kinds and keywords

(c) 2014--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

from collections import namedtuple


# ascii constants
DIGITS = u'0123456789'
UPPERCASE = u'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
LOWERCASE = UPPERCASE.lower()
LETTERS = UPPERCASE + LOWERCASE
ALPHANUMERIC = LETTERS + DIGITS
# whitespace between tokens
BLANKS = u' \t'
# characters allowed in unquoted strings
UNQUOTED_CHARS = ALPHANUMERIC + u'+-. '

# highest line label and line length allowed by ECMA-55
MAX_LABEL = 9999
MAX_LINE_LENGTH = 72
# label of a line typed in interactive mode
DIRECT_LABEL = -1

# literal and identifier kinds
NUMBER = u'number'
QUOTED = u'quoted string'
UNQUOTED = u'unquoted string'
SIMPLE_VAR = u'variable'
INDEXED_VAR = u'indexed variable'
STRING_VAR = u'string variable'
FUNCTION = u'function'
USER_FUNCTION = u'user function'
REMARK = u'remark'
EOLN = u'end of line'
EOF = u'end of text'

# operators and delimiters
O_PLUS = u'+'
O_MINUS = u'-'
O_TIMES = u'*'
O_DIV = u'/'
O_CARET = u'^'
O_EQ = u'='
O_NE = u'<>'
O_LT = u'<'
O_LE = u'<='
O_GT = u'>'
O_GE = u'>='
LPAREN = u'('
RPAREN = u')'
COMMA = u','
SEMICOLON = u';'

# statement keywords
BASE = u'BASE'
DATA = u'DATA'
DEF = u'DEF'
DIM = u'DIM'
END = u'END'
GO = u'GO'
GOSUB = u'GOSUB'
GOTO = u'GOTO'
IF = u'IF'
INPUT = u'INPUT'
LET = u'LET'
ON = u'ON'
OPTION = u'OPTION'
PRINT = u'PRINT'
RANDOMIZE = u'RANDOMIZE'
READ = u'READ'
REM = u'REM'
RESTORE = u'RESTORE'
RETURN = u'RETURN'
STOP = u'STOP'
SUB = u'SUB'
THEN = u'THEN'
TO = u'TO'
# interactive commands
BY = u'BY'
CLS = u'CLS'
LIST = u'LIST'
NEW = u'NEW'
QUIT = u'QUIT'
RUN = u'RUN'

KEYWORDS = frozenset((
    BASE, DATA, DEF, DIM, END, GO, GOSUB, GOTO, IF, INPUT, LET, ON, OPTION, PRINT,
    RANDOMIZE, READ, REM, RESTORE, RETURN, STOP, SUB, THEN, TO,
    BY, CLS, LIST, NEW, QUIT, RUN,
))

# built-in functions
ABS = u'ABS'
ATN = u'ATN'
COS = u'COS'
EXP = u'EXP'
INT = u'INT'
LOG = u'LOG'
RND = u'RND'
SGN = u'SGN'
SIN = u'SIN'
SQR = u'SQR'
TAN = u'TAN'

FUNCTIONS = frozenset((ABS, ATN, COS, EXP, INT, LOG, RND, SGN, SIN, SQR, TAN))

# prefix of user function names
FN = u'FN'

# characters that may precede a keyword, besides whitespace
KEYWORD_PRECEDERS = u'(;,'

# token groups
END_STATEMENT = (EOLN, EOF)
RELATIONS = (O_EQ, O_NE, O_LT, O_LE, O_GT, O_GE)
STRING_RELATIONS = (O_EQ, O_NE)
SEPARATORS = (COMMA, SEMICOLON)
STRING_LITERALS = (QUOTED, UNQUOTED)
INTERACTIVE_COMMANDS = (BY, CLS, LIST, NEW, QUIT, RUN)


class Token(namedtuple('Token', ['kind', 'num_value', 'str_value'])):
    """Lexical token: a kind with optional numeric and string payloads."""

    __slots__ = ()

    def __new__(cls, kind, num_value=None, str_value=None):
        """Create the token."""
        return super(Token, cls).__new__(cls, kind, num_value, str_value)

    def __str__(self):
        """Token as it appears in error messages."""
        if self.kind == QUOTED:
            return u'"%s"' % (self.str_value,)
        if self.kind in (EOLN, EOF):
            return self.kind
        if self.str_value is not None:
            return u'`%s`' % (self.str_value,)
        return u'`%s`' % (self.kind,)
