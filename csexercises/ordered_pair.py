"""Pairs whose two members may not be equal unless both hold the default value."""

from __future__ import annotations

import argparse
import random
import string
from typing import Any, Generic, TypeVar

_T = TypeVar("_T")
_COUNT = 10


class DuplicateMemberError(ValueError):
    """Raised when both members of an OrderedPair would hold the same value."""


class OrderedPair(Generic[_T]):
    """Two distinct values; equality is allowed only for the default value.

    When ``default`` is not given it is the empty value of the members' type,
    or 0 when no member is given.
    """

    __slots__ = ("_first", "_second", "default")

    def __init__(
        self, first: Any = None, second: Any = None, default: Any = None
    ) -> None:
        if default is None:
            sample = first if first is not None else second
            default = type(sample)() if sample is not None else 0
        self.default = default
        self._first = default
        self._second = default
        self.first = default if first is None else first
        self.second = default if second is None else second

    @property
    def first(self) -> _T:
        return self._first

    @first.setter
    def first(self, value: _T) -> None:
        if value == self._second and value != self.default:
            raise DuplicateMemberError(f"both members would be {value!r}")
        self._first = value

    @property
    def second(self) -> _T:
        return self._second

    @second.setter
    def second(self, value: _T) -> None:
        if value == self._first and value != self.default:
            raise DuplicateMemberError(f"both members would be {value!r}")
        self._second = value

    def __add__(self, other: object) -> OrderedPair[_T]:
        if not isinstance(other, OrderedPair):
            return NotImplemented
        return OrderedPair(
            self._first + other._first, self._second + other._second, self.default
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OrderedPair):
            return NotImplemented
        return self._first + self._second < other._first + other._second

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedPair):
            return NotImplemented
        return (self._first, self._second) == (other._first, other._second)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"OrderedPair({self._first!r}, {self._second!r})"

    def __str__(self) -> str:
        return f"({self._first}, {self._second})"


def _read_tokens(prompt: str, count: int) -> list[str]:
    tokens = input(prompt).split()
    while len(tokens) < count:
        tokens += input().split()
    return tokens[:count]


def _show_list(pairs: list[OrderedPair[Any]]) -> None:
    pairs[2] = pairs[0] + pairs[1]
    if pairs[0] < pairs[1]:
        print(f"{pairs[0]} is less than {pairs[1]}")
    for pair in pairs:
        print(pair)


def _fill(pair: OrderedPair[Any], first: Any, second: Any, noun: str) -> None:
    try:
        pair.first = first
        pair.second = second
    except DuplicateMemberError:
        print(
            "Error, you attempted to set both members of the OrderedPair "
            f"to the same {noun}."
        )
        pair.first = pair.default
        pair.second = pair.default
    print(f"The resulting OrderedPair: {pair}")


def main(argv: list[str] | None = None) -> int:
    """Show random ordered pairs of numbers and letters, then build one of each."""
    parser = argparse.ArgumentParser(description="Demonstrate ordered pairs.")
    parser.add_argument("--seed", type=int, help="seed for the random pairs")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    try:
        print(f"default value: {OrderedPair(default=0)}")
        numbers = [
            OrderedPair(rng.randrange(50), rng.randrange(50, 100)) for _ in range(_COUNT)
        ]
        _show_list(numbers)
        tokens = _read_tokens(
            "Enter two numbers to use in an OrderedPair.  "
            "Make sure they are different numbers: ",
            2,
        )
        try:
            num1, num2 = (int(token) for token in tokens)
        except ValueError:
            print("error: two whole numbers are required")
            return 1
        _fill(OrderedPair(default=0), num1, num2, "number")

        print(f"default value: {OrderedPair(default='')}")
        letters = [
            OrderedPair(
                rng.choice(string.ascii_lowercase), rng.choice(string.ascii_uppercase)
            )
            for _ in range(_COUNT)
        ]
        _show_list(letters)
        str1, str2 = _read_tokens(
            "Enter two strings to use in an OrderedPair.  "
            "Make sure they are different strings: ",
            2,
        )
        _fill(OrderedPair(default=""), str1, str2, "string")
    except EOFError:
        print()
        return 1
    return 0