"""Errors.

Every failure the interpreter can report is a subclass of :class:`NondeError`.
Each error builds its one-line diagnostic in ``__init__`` so the CLI only has
to print ``str(error)`` and exit.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


def _on_line(message, line):
    if line is not None:
        message += f" (line {line})"
    return message


class NondeError(Exception):
    """
    Base class for all interpreter errors.
    """
    def __init__(self, message, line=None):
        self.line = line
        super().__init__(_on_line(message, line))


class UsageError(NondeError):
    """
    Error for a bad command line.
    """
    def __init__(self, prog="nonde"):
        super().__init__(f"usage: {prog} <script>")


class FileOpenError(NondeError):
    """
    Error for a script file that can't be read.
    """
    def __init__(self, path):
        self.path = path
        super().__init__(f"Can't open file: {path}")


class ScriptSyntaxError(NondeError):
    """
    Error for malformed tokens or commands.
    """
    def __init__(self, line=None):
        super().__init__("Syntax error", line)


class DuplicateLabelError(NondeError):
    """
    Error for a label declared twice.
    """
    def __init__(self, name, line=None):
        self.name = name
        super().__init__(f"Duplicate label: {name}", line)


class UndefinedVariableError(NondeError):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, line=None):
        self.varname = varname
        super().__init__(f"Undefined variable: {varname}", line)


class InvalidNumberError(NondeError):
    """
    Error for an operand that doesn't parse as an integer.
    """
    def __init__(self, value, line=None):
        self.value = value
        super().__init__("Invalid number", line)


class DivideByZeroError(NondeError):
    """
    Error for div or mod by zero.
    """
    def __init__(self, line=None):
        super().__init__("Divide by zero", line)


class UnknownLabelError(NondeError):
    """
    Error for a jump to a label that was never declared.
    """
    def __init__(self, name, line=None):
        self.name = name
        super().__init__(f"Unknown label: {name}", line)


class StepLimitExceeded(NondeError):
    """
    Raised when a run is given a step budget and uses it up.
    """
    def __init__(self, steps, line=None):
        self.steps = steps
        super().__init__(f"Step limit of {steps} exceeded", line)
