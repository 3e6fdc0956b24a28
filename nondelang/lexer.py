"""Lexer for Nonde.

The lexer performs a single lazy pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its type, value and source line number.

There are only three kinds of real token: bare words (keywords, variable
names, labels and unquoted literals), double-quoted string literals, and the
``;`` command terminator. Comment text beginning with ``#`` runs to the end of
the line and is skipped, as is whitespace. Tokens are produced on demand so a
lexical error is only reported once the parser reaches it.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from typing import Iterator

from nondelang.exceptions import ScriptSyntaxError


# Maximum length of a token in the source file.
MAX_TOKEN = 1023

# Maximum length of a variable name or a label.
MAX_VARNAME = 20

VARNAME_RE = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')

ESCAPES = {
    'n': '\n',
    't': '\t',
    '"': '"',
    '\\': '\\',
}


class Token:
    """
    Represents a lexical token with a type and value.
    """
    def __init__(self, type_, value, line):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type, one of WORD, STRING, END or EOF.
            value (str | None): The token text. Quoted strings hold their
                unescaped content without the surrounding quotes.
            line (int): The source line the token starts on.
        """
        self.type = type_
        self.value = value
        self.line = line

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, line={self.line})"


def is_var_name(text: str) -> bool:
    """
    Return True if ``text`` is a legal variable (or label) name.
    """
    return len(text) <= MAX_VARNAME and VARNAME_RE.fullmatch(text) is not None


def _unescape(body: str, line: int) -> str:
    """
    Interpret the escape sequences inside a quoted string.

    Raises:
        ScriptSyntaxError: On an escape other than \\n, \\t, \\" or \\\\.
    """
    out = []
    chars = iter(body)
    for ch in chars:
        if ch == '\\':
            escaped = next(chars)
            if escaped not in ESCAPES:
                raise ScriptSyntaxError(line)
            ch = ESCAPES[escaped]
        out.append(ch)
    return ''.join(out)


token_specification = [
    # Comments
    ('COMMENT',   r'\#[^\n]*'),

    # Whitespace
    ('NEWLINE',   r'\n'),
    ('SKIP',      r'[^\S\n]+'),

    # Literals
    ('STRING',    r'"(?:[^"\\\n]|\\[^\n])*"'),
    ('OPENQUOTE', r'"'),

    # Terminator
    ('END',       r';'),

    # Keywords, identifiers, labels and bare literals
    ('WORD',      r'[^\s#";]+'),
]

tok_regex = re.compile('|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification))


def tokenize(code: str) -> Iterator[Token]:
    """
    Lazily convert a string of source code into tokens.

    Parameters:
        code (str): The source code to tokenize.

    Yields:
        Token: WORD, STRING and END tokens, followed by a single EOF token.

    Raises:
        ScriptSyntaxError: On an unterminated or badly escaped string, or a
            token longer than MAX_TOKEN.
    """
    line_num = 1

    for match_obj in tok_regex.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()

        if kind == 'NEWLINE':
            line_num += 1
            continue
        if kind in ('SKIP', 'COMMENT'):
            continue
        if kind == 'OPENQUOTE':
            # A quote with no closing quote before the end of the line.
            raise ScriptSyntaxError(line_num)

        if kind == 'STRING':
            text = _unescape(value[1:-1], line_num)
            # Room is needed for the content plus both quotes.
            if len(text) + 2 > MAX_TOKEN:
                raise ScriptSyntaxError(line_num)
            yield Token('STRING', text, line_num)
        elif kind == 'WORD':
            if len(value) > MAX_TOKEN:
                raise ScriptSyntaxError(line_num)
            yield Token('WORD', value, line_num)
        else:
            yield Token(kind, value, line_num)

    yield Token('EOF', None, line_num)
