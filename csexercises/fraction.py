"""Exact fractions kept in lowest terms, with mixed-number text form."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Iterator

_INT = r"[+-]?\d+"
_FRACTION = re.compile(
    rf"\s*(?P<neg>-)?\s*(?P<first>{_INT})"
    rf"(?:\+\s*(?P<num>{_INT})\s*[^\s\d]\s*(?P<den>{_INT})"
    rf"|/\s*(?P<over>{_INT})"
    rf"|(?![+/]))"
)
_SPACE = re.compile(r"\s*")
_COMMENT_STARTS = "/*"


class Fraction:
    """A fraction whose denominator is positive and coprime to its numerator.

    The sign of the value is negative whenever either the numerator or the
    denominator given to the constructor is negative.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        if denominator == 0:
            raise ZeroDivisionError("denominator must not be zero")
        if denominator == 1:
            self._numerator = numerator
            self._denominator = 1
            return
        negative = numerator < 0 or denominator < 0
        num, den = abs(numerator), abs(denominator)
        common = math.gcd(num, den)
        num //= common
        self._numerator = -num if negative else num
        self._denominator = den // common

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def __repr__(self) -> str:
        return f"Fraction({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        num, den = self._numerator, self._denominator
        if den == 1:
            return str(num)
        if abs(num) < den:
            return f"{num}/{den}"
        whole, rest = divmod(abs(num), den)
        sign = "-" if num < 0 else ""
        return f"{sign}{whole}+{rest}/{den}"

    @staticmethod
    def _coerce(value: object) -> Fraction | None:
        if isinstance(value, Fraction):
            return value
        if isinstance(value, int):
            return Fraction(value)
        return None

    def __add__(self, other: object) -> Fraction:
        right = self._coerce(other)
        if right is None:
            return NotImplemented
        return Fraction(
            self._numerator * right._denominator + right._numerator * self._denominator,
            self._denominator * right._denominator,
        )

    def __radd__(self, other: object) -> Fraction:
        left = self._coerce(other)
        if left is None:
            return NotImplemented
        return left + self

    def __sub__(self, other: object) -> Fraction:
        right = self._coerce(other)
        if right is None:
            return NotImplemented
        return Fraction(
            self._numerator * right._denominator - right._numerator * self._denominator,
            self._denominator * right._denominator,
        )

    def __rsub__(self, other: object) -> Fraction:
        left = self._coerce(other)
        if left is None:
            return NotImplemented
        return left - self

    def __mul__(self, other: object) -> Fraction:
        right = self._coerce(other)
        if right is None:
            return NotImplemented
        return Fraction(
            self._numerator * right._numerator,
            self._denominator * right._denominator,
        )

    def __rmul__(self, other: object) -> Fraction:
        left = self._coerce(other)
        if left is None:
            return NotImplemented
        return left * self

    def __truediv__(self, other: object) -> Fraction:
        right = self._coerce(other)
        if right is None:
            return NotImplemented
        return Fraction(
            self._numerator * right._denominator,
            self._denominator * right._numerator,
        )

    def __rtruediv__(self, other: object) -> Fraction:
        left = self._coerce(other)
        if left is None:
            return NotImplemented
        return left / self

    def _cross(self, other: object) -> tuple[int, int] | None:
        right = self._coerce(other)
        if right is None:
            return None
        return (
            self._numerator * right._denominator,
            right._numerator * self._denominator,
        )

    def __eq__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] == pair[1]

    def __lt__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] < pair[1]

    def __le__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] <= pair[1]

    def __gt__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] > pair[1]

    def __ge__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] >= pair[1]

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))


def _scan(text: str, pos: int) -> tuple[Fraction, int]:
    """Read one fraction starting at ``pos``; return it and the end position."""
    match = _FRACTION.match(text, pos)
    if match is None:
        raise ValueError(f"malformed fraction at position {pos}: {text[pos:pos + 20]!r}")
    first = int(match["first"])
    if match["num"] is not None:
        den = int(match["den"])
        num = first * den + int(match["num"])
    elif match["over"] is not None:
        den = int(match["over"])
        num = first
    else:
        den = 1
        num = first
    if match["neg"]:
        num = -num
    return Fraction(num, den), match.end()


def parse_fraction(text: str) -> Fraction:
    """Parse ``n``, ``n/d`` or the mixed form ``w+n/d``, each with an optional ``-``."""
    fraction, end = _scan(text, 0)
    if text[end:].strip():
        raise ValueError(f"unexpected text after fraction: {text[end:]!r}")
    return fraction


def read_fractions(lines: Iterable[str]) -> Iterator[Fraction]:
    """Yield every fraction in ``lines``.

    A line whose next non-blank character is ``/``, ``*`` or a letter is a
    comment and is skipped from there to its end.
    """
    text = "".join(lines)
    pos = 0
    while True:
        pos = _SPACE.match(text, pos).end()
        if pos >= len(text):
            return
        char = text[pos]
        if char in _COMMENT_STARTS or (char.isascii() and char.isalpha()):
            newline = text.find("\n", pos)
            pos = len(text) if newline < 0 else newline + 1
            continue
        fraction, pos = _scan(text, pos)
        yield fraction