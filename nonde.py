"""
Nonde Language Interpreter

This is the main entry point for the Nonde language interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into words, strings and terminators.
3. The Parser turns the tokens into a program: a list of commands and a table
   of where each label points.
4. The Interpreter runs the commands with a program counter until it falls
   off the end of the program.

Any error stops the run with a one-line message on stderr and exit status 1.
Set NONDEDEBUG in the environment to dump the tokens and the loaded program
to stderr before it runs.
"""
import os
import sys

from nondelang.exceptions import (
    FileOpenError, NondeError, ScriptSyntaxError, UsageError,
)
from nondelang.interpreter import Interpreter
from nondelang.lexer import tokenize
from nondelang.parser import Parser


def print_usage():
    """
    Print usage.
    """
    print()
    print("Nonde Language Interpreter")
    print()
    print("Usage:")
    print("    nonde <script>")
    print()
    print("Arguments:")
    print("    <script>")
    print("        Path to a Nonde source file to execute.")
    print()
    print("Example:")
    print("    nonde hello.nonde")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def debug_print_program(code, program):
    """
    Print tokenized source and the loaded program to stderr.
    """
    print("\nTokens:\n", file=sys.stderr)
    for tok in tokenize(code):
        print(tok, file=sys.stderr)
    print("\nProgram:\n", file=sys.stderr)
    print(program.listing(), file=sys.stderr)
    print(" ", file=sys.stderr)


def read_script(script_name: str) -> str:
    """
    Read a script file.

    Raises:
        FileOpenError: If the file can't be opened.
        ScriptSyntaxError: If the file isn't valid UTF-8, tagged with the
            line of the first bad byte.
    """
    try:
        with open(script_name, "rb") as f:
            data = f.read()
    except OSError as e:
        raise FileOpenError(script_name) from e
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ScriptSyntaxError(data.count(b"\n", 0, e.start) + 1) from e


def run_script(script_name: str):
    """
    Load and run a Nonde script.
    """
    code = read_script(script_name)
    program = Parser(tokenize(code), script_name).parse()

    if os.environ.get('NONDEDEBUG'):
        debug_print_program(code, program)

    interpreter = Interpreter(script_name)
    interpreter.run(program)


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print a usage line to stderr and return 1.
    """
    args = argv[1:]
    try:
        if len(args) != 1:
            raise UsageError()
        if args[0] in ('-h', '--help'):
            print_usage()
            return 0
        run_script(args[0])
    except NondeError as e:
        sys.stdout.flush()
        print(e, file=sys.stderr)
        return 1
    return 0


def cli():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
