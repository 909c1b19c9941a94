"""
ECMA-BASIC - statements.py
Statement parser

(c) 2013--2022 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import operator

from .base import error
from .base import flow
from .base import tokens as tk
from .values import numbers


# relational operators
_RELATIONS = {
    tk.O_EQ: operator.eq,
    tk.O_NE: operator.ne,
    tk.O_LT: operator.lt,
    tk.O_LE: operator.le,
    tk.O_GT: operator.gt,
    tk.O_GE: operator.ge,
}

# tokens that can begin a PRINT item
_EXPRESSION_START = (
    tk.NUMBER, tk.QUOTED, tk.SIMPLE_VAR, tk.INDEXED_VAR, tk.STRING_VAR,
    tk.FUNCTION, tk.USER_FUNCTION, tk.LPAREN, tk.O_PLUS, tk.O_MINUS,
)

# statements that need a stored program line
PROGRAM_ONLY = (
    tk.DATA, tk.DEF, tk.DIM, tk.END, tk.GO, tk.GOSUB, tk.GOTO, tk.IF,
    tk.ON, tk.READ, tk.RESTORE, tk.RETURN, tk.STOP,
)


class StatementParser(object):
    """BASIC statement parser and executor."""

    def __init__(self, interpreter, state, expression_parser, output, input_stream):
        """Initialise statement context."""
        self._interpreter = interpreter
        self._state = state
        self.expression_parser = expression_parser
        self.user_functions = expression_parser.user_functions
        self._output = output
        self._input = input_stream
        self._init_syntax()

    def _init_syntax(self):
        """Initialise syntax parsers."""
        self._simple = {
            tk.DATA: self._parse_nothing,
            tk.DEF: self._parse_def,
            tk.DIM: self._parse_dim,
            tk.END: self._parse_end,
            tk.GO: self._parse_go,
            tk.GOSUB: self._parse_gosub,
            tk.GOTO: self._parse_goto,
            tk.IF: self._parse_if,
            tk.INPUT: self._parse_input,
            tk.LET: self._parse_let,
            tk.ON: self._parse_on,
            tk.OPTION: self._parse_option,
            tk.PRINT: self._parse_print,
            tk.RANDOMIZE: self._parse_randomize,
            tk.READ: self._parse_read,
            tk.REM: self._parse_nothing,
            tk.RESTORE: self._parse_restore,
            tk.RETURN: self._parse_return,
            tk.STOP: self._parse_stop,
            # interactive commands
            tk.BY: self._parse_quit,
            tk.CLS: self._parse_cls,
            tk.LIST: self._parse_list,
            tk.NEW: self._parse_new,
            tk.QUIT: self._parse_quit,
            tk.RUN: self._parse_run,
        }

    def parse_statement(self, ins):
        """Parse and execute the statement on a line; return the resume point."""
        token = ins.read()
        try:
            parse = self._simple[token.kind]
        except KeyError:
            raise error.UnexpectedTokenError(token, u'statement')
        if ins.is_direct and token.kind in PROGRAM_ONLY:
            raise error.UnsupportedInInteractiveModeError(token.kind)
        if not ins.is_direct and token.kind in tk.INTERACTIVE_COMMANDS:
            raise error.DirectStatementInFileError(token.kind)
        return parse(ins)

    def parse_label(self, ins):
        """Parse a line number used as a jump target."""
        token = ins.expect(tk.NUMBER)
        label = numbers.to_int(token.num_value)
        if (
                token.str_value[:1] not in tk.DIGITS or label is None
                or label != token.num_value or not 1 <= label <= self._state.max_label
            ):
            raise error.UndefinedLabelError(token.str_value)
        return label

    def _parse_variable(self, ins):
        """Parse an assignment target; return the name and subscript, None for scalars."""
        token = ins.expect(tk.SIMPLE_VAR, tk.INDEXED_VAR, tk.STRING_VAR)
        if token.kind == tk.SIMPLE_VAR and ins.skip(tk.LPAREN):
            return token.str_value, self.expression_parser.parse_subscript(ins)
        return token.str_value, None

    def _parse_variable_list(self, ins):
        """Parse comma-separated assignment targets."""
        targets = [self._parse_variable(ins)]
        while ins.skip(tk.COMMA):
            targets.append(self._parse_variable(ins))
        ins.require_end()
        return targets

    def _assign(self, name, index, value):
        """Assign to a scalar or array element."""
        if index is None:
            self._state.scalars.set(name, value)
        else:
            self._state.arrays.set(name, index, value)

    ###########################################################################
    # no-ops

    def _parse_nothing(self, ins):
        """DATA, REM: nothing to do at run time."""
        return flow.NEXT

    ###########################################################################
    # assignment

    def _parse_let(self, ins):
        """LET: assign a value to a variable or array element."""
        name, index = self._parse_variable(ins)
        ins.expect(tk.O_EQ)
        if name.endswith(u'$'):
            value = self.expression_parser.parse_string(ins)
        else:
            value = self.expression_parser.parse_numeric(ins)
        ins.require_end()
        self._assign(name, index, value)
        return flow.NEXT

    def _parse_dim(self, ins):
        """DIM: declare arrays."""
        while True:
            letter = ins.expect(tk.SIMPLE_VAR).str_value
            ins.expect(tk.LPAREN)
            top = numbers.to_int(ins.expect(tk.NUMBER).num_value)
            ins.expect(tk.RPAREN)
            self._state.arrays.allocate(letter, top)
            if not ins.skip(tk.COMMA):
                break
        ins.require_end()
        return flow.NEXT

    def _parse_option(self, ins):
        """OPTION BASE: set the array base."""
        ins.expect(tk.BASE)
        token = ins.expect(tk.NUMBER)
        ins.require_end()
        if token.num_value not in (0, 1):
            raise error.BoundsError(u'OPTION BASE %s' % (token.str_value,))
        self._state.arrays.set_base(int(token.num_value))
        return flow.NEXT

    def _parse_def(self, ins):
        """DEF: define a user function."""
        self.user_functions.define(ins, ins.label)
        return flow.NEXT

    ###########################################################################
    # data and input

    def _parse_read(self, ins):
        """READ: assign DATA literals to variables."""
        for name, index in self._parse_variable_list(ins):
            token = self._state.data.read()
            if name.endswith(u'$'):
                if token.kind not in tk.STRING_LITERALS:
                    raise error.DataTypeMismatchError(u'%s needs a string' % (name,))
                value = token.str_value
            else:
                if token.kind != tk.NUMBER:
                    raise error.DataTypeMismatchError(u'%s needs a number' % (name,))
                value = token.num_value
            self._assign(name, index, value)
        return flow.NEXT

    def _parse_restore(self, ins):
        """RESTORE: reread DATA from the start."""
        ins.require_end()
        self._state.data.restore()
        return flow.NEXT

    def _parse_input(self, ins):
        """INPUT: read values for variables from the input stream."""
        targets = self._parse_variable_list(ins)
        values = self._input.read_values([_name for _name, _ in targets])
        for (name, index), value in zip(targets, values):
            self._assign(name, index, value)
        return flow.NEXT

    def _parse_randomize(self, ins):
        """RANDOMIZE: reseed the random number generator from the clock."""
        ins.require_end()
        self._state.randomiser.reseed()
        return flow.NEXT

    ###########################################################################
    # output

    def _parse_print(self, ins):
        """PRINT: write values; separators are optional and add nothing to the output."""
        output = []
        after_separator = True
        while ins.peek().kind not in tk.END_STATEMENT:
            if ins.skip(*tk.SEPARATORS):
                after_separator = True
                continue
            if not after_separator and ins.peek().kind not in _EXPRESSION_START:
                raise error.UnexpectedTokenError(ins.peek(), u'list separator')
            output.append(self.expression_parser.parse_printable(ins))
            after_separator = False
        ins.require_end()
        self._output.write_line(u''.join(output))
        return flow.NEXT

    ###########################################################################
    # flow control

    def _parse_go(self, ins):
        """GO TO, GO SUB."""
        token = ins.expect(tk.TO, tk.SUB)
        if token.kind == tk.TO:
            return self._parse_goto(ins)
        return self._parse_gosub(ins)

    def _parse_goto(self, ins):
        """GOTO: jump to a line."""
        label = self.parse_label(ins)
        ins.require_end()
        return flow.Jump(label)

    def _parse_gosub(self, ins):
        """GOSUB: jump to a subroutine."""
        label = self.parse_label(ins)
        ins.require_end()
        self._state.push_return(ins.label)
        return flow.Jump(label)

    def _parse_return(self, ins):
        """RETURN: continue after the last GOSUB."""
        ins.require_end()
        return flow.Resume(self._state.pop_return())

    def _parse_on(self, ins):
        """ON: computed jump."""
        value = self.expression_parser.parse_numeric(ins)
        if ins.skip(tk.GO):
            ins.expect(tk.TO)
        else:
            ins.expect(tk.GOTO)
        labels = [self.parse_label(ins)]
        while ins.skip(tk.COMMA):
            labels.append(self.parse_label(ins))
        ins.require_end()
        index = numbers.to_int(value)
        if index is None or not 1 <= index <= len(labels):
            raise error.BoundsError(u'ON index %s not in 1..%d' % (numbers.to_repr(value), len(labels)))
        return flow.Jump(labels[index - 1])

    def _parse_if(self, ins):
        """IF: conditional jump."""
        if ins.peek().kind in (tk.QUOTED, tk.STRING_VAR):
            left = self.expression_parser.parse_string(ins)
            relation = ins.expect(*tk.STRING_RELATIONS).kind
            right = self.expression_parser.parse_string(ins)
        else:
            left = self.expression_parser.parse_numeric(ins)
            relation = ins.expect(*tk.RELATIONS).kind
            right = self.expression_parser.parse_numeric(ins)
        ins.expect(tk.THEN)
        label = self.parse_label(ins)
        ins.require_end()
        if _RELATIONS[relation](left, right):
            return flow.Jump(label)
        return flow.NEXT

    def _parse_end(self, ins):
        """END: last line of the program."""
        ins.require_end()
        if self._state.next_line(ins.label + 1) is not None:
            raise error.MisplacedEndError()
        self._state.was_end = True
        return flow.HALT

    def _parse_stop(self, ins):
        """STOP: halt the program."""
        ins.require_end()
        self._state.was_end = True
        return flow.HALT

    ###########################################################################
    # interactive commands

    def _parse_run(self, ins):
        """RUN: run the stored program."""
        ins.require_end()
        self._interpreter.run()
        return flow.HALT

    def _parse_list(self, ins):
        """LIST: write out the stored program."""
        ins.require_end()
        for text in self._state.list_lines():
            self._output.write_line(text)
        return flow.HALT

    def _parse_new(self, ins):
        """NEW: clear program and variables."""
        ins.require_end()
        self._state.clear()
        return flow.HALT

    def _parse_cls(self, ins):
        """CLS: clear the screen."""
        ins.require_end()
        self._output.clear()
        return flow.HALT

    def _parse_quit(self, ins):
        """BY, QUIT: leave the interactive session."""
        ins.require_end()
        self._state.quit_requested = True
        return flow.HALT
