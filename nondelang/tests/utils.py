"""
Utility functions shared across Nonde Language tests.
"""
from pathlib import Path
import sys

from nondelang.commands import Program
from nondelang.interpreter import Interpreter
from nondelang.lexer import tokenize
from nondelang.parser import Parser

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def token_pairs(source: str) -> list[tuple]:
    """
    Tokenize source and return (type, value) pairs, without the EOF token.
    """
    return [(tok.type, tok.value) for tok in tokenize(source) if tok.type != 'EOF']


def parse_source(source: str) -> Program:
    """
    Parse source code and return the program.
    """
    return Parser(tokenize(source), "<test>").parse()


def run_source(source: str, max_steps: int | None = None) -> Interpreter:
    """
    Parse and run source code, returning the interpreter after execution.
    """
    program = parse_source(source)
    interpreter = Interpreter("<test>")
    interpreter.run(program, max_steps=max_steps)
    return interpreter


def run_file(path: Path) -> Interpreter:
    """
    Run a file and return the interpreter instance after execution.
    """
    code = path.read_text(encoding="utf-8")
    program = Parser(tokenize(code), str(path)).parse()
    interpreter = Interpreter(str(path))
    interpreter.run(program)
    return interpreter
