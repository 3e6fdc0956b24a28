"""Interpreter.

This is the execution engine for programs produced by the parser. A program is
a flat list of commands plus a label table, and the interpreter walks it with a
program counter.

1. Execution Model
`run()` starts the program counter at 0 and repeatedly hands the command at
that index to `execute_command()`, which carries it out and returns the index
of the next command. Most commands return ``pc + 1``; `goto` and a taken `if`
return the index their label points at. The run ends when the counter reaches
or passes the end of the command list.

2. Variable Store
Variables live in a :class:`VariableStore` owned by the interpreter. Every
value is a string; commands that do arithmetic read their operands as integers
and write the result back as decimal text. Reading a variable that was never
set is an error.

3. Operands
An operand is either a literal, used as-is, or a variable name, looked up in
the store. The parser decides which when the program is loaded.

4. Error Handling
Undefined variables, non-numeric arithmetic operands, results too long to
write back, division by zero and jumps to undeclared labels are raised as typed exceptions carrying the
command's line number. Nothing is caught here.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re

from nondelang.commands import (
    Add, Command, Div, Eq, Goto, If, Less, Mod, Mult, Operand, Print, Program, Set, Sub,
)
from nondelang.exceptions import (
    DivideByZeroError,
    InvalidNumberError,
    StepLimitExceeded,
    UndefinedVariableError,
    UnknownLabelError,
)
from nondelang.labels import LabelTable

INTEGER_RE = re.compile(r'\s*([+-]?[0-9]+)')

# Most decimal digits an integer value may have, on read or on write.
MAX_DIGITS = 4300
NUMBER_LIMIT = 10 ** MAX_DIGITS

TRUE = "1"
FALSE = ""


class VariableStore:
    """String-valued variables for one run of a program."""

    def __init__(self):
        self.vars: dict[str, str] = {}

    def get(self, name: str, line: int | None = None) -> str:
        """
        Return the value of ``name``.

        Raises:
            UndefinedVariableError: If ``name`` has never been set.
        """
        if name not in self.vars:
            raise UndefinedVariableError(name, line)
        return self.vars[name]

    def set(self, name: str, value: str) -> None:
        self.vars[name] = value

    def __contains__(self, name) -> bool:
        return name in self.vars


def to_int(value: str, line: int | None = None) -> int:
    """
    Read a value as an integer.

    Leading whitespace and a sign are allowed and anything after the digits is
    ignored. A blank value reads as 0, which is how the "false" left behind by
    `eq` and `less` works as an `if` condition.

    Raises:
        InvalidNumberError: If the value doesn't start with an integer, or
            the integer has more than `MAX_DIGITS` digits.
    """
    if value.strip() == "":
        return 0
    digits = INTEGER_RE.match(value)
    if digits is None or len(digits.group(1).lstrip("+-")) > MAX_DIGITS:
        raise InvalidNumberError(value, line)
    return int(digits.group(1))


def to_text(term: int, line: int | None = None) -> str:
    """
    Write an arithmetic result back as decimal text.

    Raises:
        InvalidNumberError: If the result has more than `MAX_DIGITS` digits.
    """
    if abs(term) >= NUMBER_LIMIT:
        raise InvalidNumberError(term, line)
    return str(term)


def truncating_div(lhs: int, rhs: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


def truncating_mod(lhs: int, rhs: int) -> int:
    """Remainder matching `truncating_div`, with the sign of ``lhs``."""
    return lhs - rhs * truncating_div(lhs, rhs)


class Interpreter:
    """Program-counter interpreter for Nonde."""

    def __init__(self, file: str = "<string>"):
        """Initialize the interpreter."""
        self.file = file
        self.store = VariableStore()
        self.steps = 0

    # ------------------------------------------------------------------
    # Operand helpers
    # ------------------------------------------------------------------

    def resolve(self, operand: Operand, line: int) -> str:
        """
        Return the string value of an operand.

        Raises:
            UndefinedVariableError: For a variable that has never been set.
        """
        if operand.literal:
            return operand.text
        return self.store.get(operand.text, line)

    def resolve_int(self, operand: Operand, line: int) -> int:
        """
        Return the integer value of an operand.
        """
        return to_int(self.resolve(operand, line), line)

    def jump(self, labels: LabelTable, name: str, line: int) -> int:
        """
        Return the command index of label ``name``.

        Raises:
            UnknownLabelError: If the label was never declared.
        """
        target = labels.find(name)
        if target is None:
            raise UnknownLabelError(name, line)
        return target

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def execute_command(self, cmd: Command, labels: LabelTable, pc: int) -> int:
        """
        Execute one command and return the next program counter.

        Parameters:
            cmd (Command): The command to run.
            labels (LabelTable): Jump targets for `goto` and `if`.
            pc (int): Index of ``cmd`` in the program.

        Returns:
            int: Index of the next command to run.
        """
        line = cmd.line

        match cmd:
            case Print(arg=arg):
                print(self.resolve(arg, line), end="")

            case Set(dest=dest, arg=arg):
                self.store.set(dest, self.resolve(arg, line))

            case Add() | Sub() | Mult() | Div() | Mod():
                lhs = self.resolve_int(cmd.lhs, line)
                rhs = self.resolve_int(cmd.rhs, line)
                match cmd:
                    case Add():
                        term = lhs + rhs
                    case Sub():
                        term = lhs - rhs
                    case Mult():
                        term = lhs * rhs
                    case Div():
                        if rhs == 0:
                            raise DivideByZeroError(line)
                        term = truncating_div(lhs, rhs)
                    case Mod():
                        if rhs == 0:
                            raise DivideByZeroError(line)
                        term = truncating_mod(lhs, rhs)
                self.store.set(cmd.dest, to_text(term, line))

            case Eq() | Less():
                lhs = self.resolve_int(cmd.lhs, line)
                rhs = self.resolve_int(cmd.rhs, line)
                holds = lhs == rhs if isinstance(cmd, Eq) else lhs < rhs
                self.store.set(cmd.dest, TRUE if holds else FALSE)

            case Goto(label=label):
                return self.jump(labels, label, line)

            case If(cond=cond, label=label):
                if self.resolve_int(cond, line) != 0:
                    return self.jump(labels, label, line)

            case _:
                raise TypeError(
                    f"Unknown command type: {type(cmd).__name__} "
                    f"on line {line} in {self.file}"
                )

        return pc + 1

    def run(self, program: Program, max_steps: int | None = None) -> None:
        """
        Run ``program`` from its first command until the program counter
        falls off the end.

        Parameters:
            program (Program): The loaded program.
            max_steps (int | None): Stop with `StepLimitExceeded` after this
                many commands. None (the default) runs without a bound.
        """
        commands = program.commands
        self.steps = 0
        pc = 0
        while pc < len(commands):
            if max_steps is not None and self.steps >= max_steps:
                raise StepLimitExceeded(max_steps, commands[pc].line)
            self.steps += 1
            pc = self.execute_command(commands[pc], program.labels, pc)
