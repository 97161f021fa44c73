"""Reports that exercise the Fraction class, and a command that prints them."""

from __future__ import annotations

import argparse
import operator
import sys
from collections.abc import Callable, Iterable
from itertools import pairwise

from csexercises.fraction import Fraction, read_fractions

_INTRO = """\
Project#2: Fraction class (ADT) client program to test CLASS INVARIANT
There are two data members used to represent the denominator and numerator
for each instance of a Fraction class object class.
The client code provides an interface to test correct operations on fraction  
objects that are negative, improper (larger numerator than denominator), 
or whole numbers (denominator of 1).
Here is a list test type and order in which the tests will be conducted

1. BasicTest
2. RelationTest
3. BinaryMathTest
4. MathAssignTest

"""

_OUTRO = """
Project#2 -Fraction class (ADT) testing now concluded.
Check output for correct results from the Fraction class (ADT) implementation.
"""

_BASIC_BANNER = """\
***********************************************************************
* Basic Test: Testing member constructor, simplify() and nonmember    *
* friend ostream << operator for basic Fraction object creation &     *
* printing(Fractions should be in reduced form, and as mixed numbers.)*
***********************************************************************
"""

_FILE_BANNER = """
***********************************************************************
* Basic Test: Testing simplify() and nonmember friend istream >> and  *
* ostream << operators for reading and display of Fraction objects    *
* from data file                                                      *
***********************************************************************
"""

_RELATION_BANNER = """
***********************************************************************
* RelationTest: Testing nonmember friend binary Boolean <, <=, >, >=, *
*  ==, != relational operators between Fractions                      *
***********************************************************************
"""

_RELATION_INT_BANNER = """
***********************************************************************
* RelationTest: Testing nonmember friend binary Boolean <, <=, >, >=, *
* ==, != relations between Fractions and integers                     *
***********************************************************************
"""

_MATH_BANNER = """
***********************************************************************
* BinaryMathTest: Testing nonmember friend binary arithmetic +, -, *, *
* / operators between Fractions                                       *
***********************************************************************
"""

_MATH_INT_BANNER = """
***********************************************************************
* BinaryMathTest: Testing nonmember friend binary arithmetic +, -, *, *
* / operators between Fractions and integers                          *
***********************************************************************
"""

_ASSIGN_BANNER = """
***********************************************************************
* MathAssignTest: Testing member shorthand arithmetic assignment +=,  *
* -=, *=, /= operators on Fractions                                   *
***********************************************************************
"""

_ASSIGN_INT_BANNER = """
***********************************************************************
* MathAssignTest: Testing member shorthand arithmetic assignment +=,  *
* -=, *=, /= operators using integers                                 *
***********************************************************************
"""

_INCREMENT_BANNER = """
***********************************************************************
* MathAssignTest: Testing member increment/decrement prefix and       *
* postfix operators                                                   *
***********************************************************************
"""

_PROMPT = "Enter file name with fraction data to read: "

_Number = Fraction | int
_OPERATIONS: tuple[tuple[str, Callable[[_Number, _Number], Fraction]], ...] = (
    ("+", operator.add),
    ("-", operator.sub),
    ("*", operator.mul),
    ("/", operator.truediv),
)


def _bool(value: bool) -> str:
    return "true" if value else "false"


def _lines(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def _constructed_section() -> str:
    fractions = (
        Fraction(4, 8), Fraction(-15, 21), Fraction(10), Fraction(12, -3),
        Fraction(), Fraction(28, 6), Fraction(0, 12),
    )
    return _BASIC_BANNER + _lines(
        f"Fraction [{i}] = {f}" for i, f in enumerate(fractions)
    )


def _read_section(lines: Iterable[str]) -> str:
    return _lines(f"Read Fraction = {f}" for f in read_fractions(lines))


def basic_report(lines: Iterable[str]) -> str:
    """Return the construction report followed by the fractions read from ``lines``."""
    return _constructed_section() + _FILE_BANNER + _read_section(lines)


def _relations(left: _Number, right: _Number) -> list[str]:
    return [
        f"Comparing {left} to {right}",
        f"\tIs left < right? {_bool(left < right)}",
        f"\tIs left <= right? {_bool(left <= right)}",
        f"\tIs left > right? {_bool(left > right)}",
        f"\tIs left >= right? {_bool(left >= right)}",
        f"\tDoes left == right? {_bool(left == right)}",
        f"\tDoes left != right ? {_bool(left != right)}",
    ]


def relation_report() -> str:
    """Return the report of relational operators on fractions and integers."""
    fractions = (
        Fraction(3, 6), Fraction(-15, 30), Fraction(1, 2),
        Fraction(1, 10), Fraction(0, 1), Fraction(0, 2),
    )
    lines = [line for a, b in pairwise(fractions) for line in _relations(a, b)]
    mixed = _relations(Fraction(-3, 6), 2) + _relations(-3, Fraction(1, 4))
    return _RELATION_BANNER + _lines(lines) + _RELATION_INT_BANNER + _lines(mixed)


def _arithmetic(left: _Number, right: _Number) -> list[str]:
    return [f"{left} {symbol} {right} = {op(left, right)}" for symbol, op in _OPERATIONS]


def binary_math_report() -> str:
    """Return the report of binary arithmetic on fractions and integers."""
    fractions = (
        Fraction(1, 6), Fraction(1, 3), Fraction(-2, 3), Fraction(5), Fraction(-4, 3),
    )
    lines = [line for a, b in pairwise(fractions) for line in _arithmetic(a, b)]
    mixed = _arithmetic(Fraction(-1, 2), 4) + _arithmetic(3, Fraction(-1, 2))
    return _MATH_BANNER + _lines(lines) + _MATH_INT_BANNER + _lines(mixed)


def _assignments(value: Fraction, right: _Number) -> list[str]:
    lines = []
    for symbol, op in _OPERATIONS:
        updated = op(value, right)
        lines.append(f"{value} {symbol}= {right} = {updated}")
        value = updated
    return lines


def _increments(g: Fraction) -> list[str]:
    lines = [f"Now g = {g}"]
    old, g = g, g + 1
    lines += [f"g++ = {old}", f"Now g = {g}"]
    g = g + 1
    lines += [f"++g = {g}", f"Now g = {g}"]
    old, g = g, g - 1
    lines += [f"g-- = {old}", f"Now g = {g}"]
    g = g - 1
    lines += [f"--g = {g}", f"Now g = {g}"]
    return lines


def math_assign_report() -> str:
    """Return the report of compound assignment, increment and decrement."""
    fractions = (Fraction(1, 6), Fraction(4), Fraction(-1, 2), Fraction(5))
    lines = [line for a, b in pairwise(fractions) for line in _assignments(a, b)]
    return (
        _ASSIGN_BANNER
        + _lines(lines)
        + _ASSIGN_INT_BANNER
        + _lines(_assignments(Fraction(-1, 3), 3))
        + _INCREMENT_BANNER
        + _lines(_increments(Fraction(-1, 3)))
    )


def _open_data(name: str | None) -> list[str]:
    while True:
        if name is None:
            name = input(_PROMPT).strip()
        try:
            with open(name, encoding="utf-8") as handle:
                return handle.readlines()
        except OSError:
            print(f"{name} not found!")
            print("Make sure the fraction data file to read is in the project folder.")
            name = None


def main(argv: list[str] | None = None) -> int:
    """Print every Fraction report, reading fraction data from a file."""
    parser = argparse.ArgumentParser(description="Exercise the Fraction class.")
    parser.add_argument("data_file", nargs="?", help="file of fractions to read")
    args = parser.parse_args(argv)

    print(_INTRO, end="")
    print(_constructed_section(), end="")
    print(_FILE_BANNER, end="")
    try:
        lines = _open_data(args.data_file)
    except EOFError:
        print()
        return 1
    try:
        print(_read_section(lines), end="")
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(relation_report(), end="")
    print(binary_math_report(), end="")
    print(math_assign_report(), end="")
    print(_OUTRO, end="")
    return 0