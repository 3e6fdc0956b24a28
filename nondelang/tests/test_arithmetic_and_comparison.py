"""
Tests for arithmetic and comparison commands in Nonde.
"""
import pytest

from nondelang.exceptions import DivideByZeroError, InvalidNumberError
from nondelang.interpreter import (
    MAX_DIGITS, to_int, to_text, truncating_div, truncating_mod,
)

from nondelang.tests.utils import run_source


def test_add_variable_and_literal(capsys):
    """set x "5"; add y x "3"; print y; outputs 8."""
    run_source('set x "5"; add y x "3"; print y;')
    assert capsys.readouterr().out == "8"


@pytest.mark.parametrize("op, a, b, expected", [
    ("add", "2", "3", "5"),
    ("add", "-2", "3", "1"),
    ("sub", "2", "3", "-1"),
    ("mult", "-4", "6", "-24"),
    ("div", "7", "2", "3"),
    ("div", "-7", "2", "-3"),
    ("div", "7", "-2", "-3"),
    ("mod", "7", "3", "1"),
    ("mod", "-7", "3", "-1"),
    ("mod", "7", "-3", "1"),
    ("div", "0", "5", "0"),
    ("mod", "0", "5", "0"),
])
def test_arithmetic_results(op, a, b, expected):
    """Results are stored as decimal text; div and mod truncate toward zero."""
    interpreter = run_source(f'{op} r "{a}" "{b}";')
    assert interpreter.store.get("r") == expected


def test_large_values_do_not_overflow():
    """Integers are not limited to a machine word."""
    interpreter = run_source('mult r "9223372036854775807" "10";')
    assert interpreter.store.get("r") == "92233720368547758070"


def test_result_can_overwrite_operand(capsys):
    """The destination may also be an operand."""
    run_source('set n "10"; sub n n "1"; mult n n n; print n;')
    assert capsys.readouterr().out == "81"


@pytest.mark.parametrize("source, expected", [
    ('eq r "4" "4"; print r;', "1"),
    ('eq r "4" "5"; print r;', ""),
    ('less r "4" "5"; print r;', "1"),
    ('less r "5" "4"; print r;', ""),
    ('less r "4" "4"; print r;', ""),
    ('eq r "007" "7"; print r;', "1"),
])
def test_comparisons(capsys, source, expected):
    """Comparisons store 1 when true and a blank value when false."""
    run_source(source)
    assert capsys.readouterr().out == expected


@pytest.mark.parametrize("op", ["div", "mod"])
def test_divide_by_zero_stops_before_next_command(capsys, op):
    """Dividing by zero raises with the line and nothing after it runs."""
    with pytest.raises(DivideByZeroError) as exc:
        run_source(f'print "a";\n{op} z "10" "0";\nprint "b";')
    assert exc.value.line == 2
    assert str(exc.value) == "Divide by zero (line 2)"
    assert capsys.readouterr().out == "a"


def test_zero_dividend_is_allowed():
    """Only a zero divisor is an error."""
    interpreter = run_source('div q "0" "3";')
    assert interpreter.store.get("q") == "0"


@pytest.mark.parametrize("source", [
    'add r "abc" "1";',
    'sub r "1" "x1";',
    'set s "hello"; mult r s "2";',
    'less r "-" "2";',
    'eq r "+" "2";',
])
def test_invalid_numbers(source):
    """Operands that don't start with an integer are rejected."""
    with pytest.raises(InvalidNumberError) as exc:
        run_source(source)
    assert str(exc.value) == f"Invalid number (line {exc.value.line})"


@pytest.mark.parametrize("value, expected", [
    ("42", 42),
    ("  -17", -17),
    ("+8", 8),
    ("12abc", 12),
    ("3 apples", 3),
    ("", 0),
    ("   ", 0),
])
def test_to_int(value, expected):
    """Integers are read from the start of the value; blank reads as zero."""
    assert to_int(value) == expected


def test_to_int_reports_line():
    """A bad value carries the line of the command that read it."""
    with pytest.raises(InvalidNumberError) as exc:
        to_int("x", 12)
    assert exc.value.line == 12
    assert exc.value.value == "x"


def test_truncating_helpers_agree():
    """The remainder always satisfies a == b * q + r."""
    for a in range(-9, 10):
        for b in (-4, -3, -1, 1, 3, 4):
            q = truncating_div(a, b)
            assert a == b * q + truncating_mod(a, b)
            assert abs(truncating_mod(a, b)) < abs(b)


def test_runaway_result_is_invalid_number():
    """Squaring a value in a loop stops with a line-tagged error, not a crash."""
    source = 'set x "9999999999";\ntop: mult x x x;\ngoto top;'
    with pytest.raises(InvalidNumberError) as exc:
        run_source(source, max_steps=100)
    assert exc.value.line == 2


def test_to_text_digit_limit():
    """Results up to MAX_DIGITS digits are written back; longer ones are not."""
    largest = 10 ** MAX_DIGITS - 1
    assert to_text(-largest) == "-" + "9" * MAX_DIGITS
    with pytest.raises(InvalidNumberError) as exc:
        to_text(largest + 1, 7)
    assert exc.value.line == 7


def test_to_int_digit_limit():
    """Values with more than MAX_DIGITS digits don't read as integers."""
    assert to_int("-" + "9" * MAX_DIGITS) == -(10 ** MAX_DIGITS - 1)
    with pytest.raises(InvalidNumberError) as exc:
        to_int("1" * (MAX_DIGITS + 1), 3)
    assert exc.value.line == 3
