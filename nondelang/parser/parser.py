"""
Main parser entry point for Nonde.

This module defines the `Parser` class, which drives the single load pass over
the token stream. Labels are registered in the program's label table as they
are met; every other bare word starts a command, which is handed to the
matching routine in `nondelang.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Iterable

from nondelang.commands import Command, Operand, Program
from nondelang.exceptions import ScriptSyntaxError
from nondelang.lexer import Token, is_var_name
from nondelang.operations import ARITHMETIC, COMPARISON, Op

from . import statements as _stmt


class Parser:
    """Nonde parser."""

    def __init__(self, tokens: Iterable[Token], file: str):
        """
        Initialize the parser with a stream of tokens.

        Parameters:
            tokens (Iterable[Token]): Tokens ending with an EOF token. A lazy
                iterator from `tokenize` is consumed one token at a time.
            file (str): The name of the script.
        """
        self.tokens = iter(tokens)
        self.curr_token = next(self.tokens)
        self.source_file = file
        self.program = Program()

    def advance(self) -> Token:
        """
        Consume and return the current token.
        """
        tok = self.curr_token
        if tok.type != 'EOF':
            self.curr_token = next(self.tokens)
        return tok

    def error(self, tok: Token | None = None) -> ScriptSyntaxError:
        """
        Build a syntax error for ``tok`` (default: the current token).
        """
        tok = tok if tok is not None else self.curr_token
        return ScriptSyntaxError(tok.line)

    def eat(self, token_type: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Raises:
            ScriptSyntaxError: If the token does not match the expected type.
        """
        if self.curr_token.type != token_type:
            raise self.error()
        return self.advance()

    # Operand helpers
    def expect_operand(self) -> Operand:
        """
        Consume any word or string and return it as an operand.
        """
        tok = self.curr_token
        if tok.type == 'STRING':
            self.advance()
            return Operand(tok.value, literal=True)
        if tok.type == 'WORD':
            self.advance()
            return Operand(tok.value, literal=not is_var_name(tok.value))
        raise self.error()

    def expect_variable(self) -> str:
        """
        Consume a word that must be a legal variable name.
        """
        tok = self.curr_token
        if tok.type != 'WORD' or not is_var_name(tok.value):
            raise self.error()
        self.advance()
        return tok.value

    def expect_label(self) -> str:
        """
        Consume a bare word naming a jump target. Whether the label exists is
        only checked when the jump runs.
        """
        return self.eat('WORD').value

    def end(self) -> None:
        """
        Consume the mandatory ``;`` that closes every command.
        """
        self.eat('END')

    # Statement wrappers
    def label(self) -> None:
        """
        Register the label declared by the current token.
        """
        _stmt.parse_label(self)

    def command(self) -> Command:
        """
        Parse a single command starting at the current keyword.
        """
        tok = self.curr_token
        if tok.type != 'WORD':
            raise self.error()
        try:
            op = Op(tok.value)
        except ValueError as exc:
            raise self.error() from exc

        if op == Op.PRINT:
            return _stmt.parse_print(self)
        if op == Op.SET:
            return _stmt.parse_set(self)
        if op in ARITHMETIC or op in COMPARISON:
            return _stmt.parse_binary(self, op)
        if op == Op.GOTO:
            return _stmt.parse_goto(self)
        return _stmt.parse_if(self)

    def parse(self) -> Program:
        """
        Parse the full input into a program.
        """
        self.program = Program()
        while self.curr_token.type != 'EOF':
            tok = self.curr_token
            if tok.type == 'WORD' and tok.value.endswith(':'):
                self.label()
            else:
                self.program.commands.append(self.command())
        return self.program
