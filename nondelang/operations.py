"""Shared definitions for command keywords.

This module centralizes the keyword strings used by the parser, the
interpreter and the language server. Keeping them in one place prevents the
components from drifting apart when a command is added or renamed.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of command keywords.
    """

    # Output
    PRINT = "print"

    # Assignment
    SET = "set"

    # Arithmetic
    ADD = "add"
    SUB = "sub"
    MULT = "mult"
    DIV = "div"
    MOD = "mod"

    # Comparison
    EQ = "eq"
    LESS = "less"

    # Control flow
    GOTO = "goto"
    IF = "if"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


ARITHMETIC = frozenset({Op.ADD, Op.SUB, Op.MULT, Op.DIV, Op.MOD})
COMPARISON = frozenset({Op.EQ, Op.LESS})

# One-line synopsis of each command, shown by the language server.
SYNOPSIS = {
    Op.PRINT: "print <value>; write value with no trailing newline",
    Op.SET: "set <var> <value>; store value in var",
    Op.ADD: "add <var> <a> <b>; var = a + b",
    Op.SUB: "sub <var> <a> <b>; var = a - b",
    Op.MULT: "mult <var> <a> <b>; var = a * b",
    Op.DIV: "div <var> <a> <b>; var = a / b, truncated toward zero",
    Op.MOD: "mod <var> <a> <b>; var = remainder of a / b",
    Op.EQ: "eq <var> <a> <b>; var = 1 if a == b, else blank",
    Op.LESS: "less <var> <a> <b>; var = 1 if a < b, else blank",
    Op.GOTO: "goto <label>; jump to label",
    Op.IF: "if <cond> <label>; jump to label when cond is nonzero",
}


__all__ = ["Op", "ARITHMETIC", "COMPARISON", "SYNOPSIS"]
