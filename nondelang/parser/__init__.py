"""Parser package for Nonde.

This package splits the parser functionality into multiple modules to
keep the code organized. The :class:`Parser` class is exposed at the
package level for convenience, along with :func:`load_program` which runs
the tokenizer and parser over a whole source string.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from nondelang.commands import Program
from nondelang.lexer import tokenize

from .parser import Parser


def load_program(code: str, file: str = "<string>") -> Program:
    """
    Tokenize and parse ``code`` into a program ready to run.
    """
    return Parser(tokenize(code), file).parse()


__all__ = ["Parser", "load_program"]
