"""Statement parsing utilities for Nonde.

These functions operate on a `nondelang.parser.parser.Parser` instance and
handle each command form, plus label declarations. Every command routine
consumes its keyword, exactly the operands the command takes, and the closing
``;``.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from nondelang.commands import BINARY_COMMANDS, BinaryCommand, Goto, If, Print, Set
from nondelang.lexer import is_var_name
from nondelang.operations import Op

if TYPE_CHECKING:
    from nondelang.parser import Parser


def parse_label(parser: 'Parser') -> None:
    """
    Parse a label declaration and register it at the current command count.

    Syntax:
        <identifier>:
    """
    tok = parser.advance()
    name = tok.value[:-1]
    if not is_var_name(name):
        raise parser.error(tok)
    parser.program.labels.add(name, len(parser.program.commands), tok.line)


def parse_print(parser: 'Parser') -> Print:
    """
    Parse a 'print' command.

    Syntax:
        print <value> ;
    """
    tok = parser.eat('WORD')
    arg = parser.expect_operand()
    parser.end()
    return Print(arg, tok.line)


def parse_set(parser: 'Parser') -> Set:
    """
    Parse a 'set' command.

    Syntax:
        set <identifier> <value> ;
    """
    tok = parser.eat('WORD')
    dest = parser.expect_variable()
    arg = parser.expect_operand()
    parser.end()
    return Set(dest, arg, tok.line)


def parse_binary(parser: 'Parser', op: Op) -> BinaryCommand:
    """
    Parse an arithmetic or comparison command.

    Syntax:
        <op> <identifier> <value> <value> ;

    Args:
        parser: The parser instance.
        op: Which of add, sub, mult, div, mod, eq or less this is.
    """
    tok = parser.eat('WORD')
    dest = parser.expect_variable()
    lhs = parser.expect_operand()
    rhs = parser.expect_operand()
    parser.end()
    return BINARY_COMMANDS[op](dest, lhs, rhs, tok.line)


def parse_goto(parser: 'Parser') -> Goto:
    """
    Parse a 'goto' command.

    Syntax:
        goto <label> ;
    """
    tok = parser.eat('WORD')
    label = parser.expect_label()
    parser.end()
    return Goto(label, tok.line)


def parse_if(parser: 'Parser') -> If:
    """
    Parse an 'if' command.

    Syntax:
        if <value> <label> ;
    """
    tok = parser.eat('WORD')
    cond = parser.expect_operand()
    label = parser.expect_label()
    parser.end()
    return If(cond, label, tok.line)
