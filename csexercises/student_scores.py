"""Student test scores, averages and the course grade report."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TypeVar

NUM_TESTS = 4
MIN_SCORE = 0
MAX_SCORE = 100

_RULE = "==========================="
_DIGITS = frozenset("0123456789")
_T = TypeVar("_T")


def letter_grade(average: float) -> str:
    """Return the letter grade for an average score."""
    if average >= 91:
        return "A"
    if average >= 81:
        return "B"
    if average >= 71:
        return "C"
    if average >= 61:
        return "D"
    return "F"


def parse_id(text: str) -> str:
    """Return ``text`` if it consists only of digits."""
    if not all(char in _DIGITS for char in text):
        raise ValueError("Invalid ID Number. Must only contain digits.")
    return text


def parse_score(text: str) -> int:
    """Return the test score in ``text``; it must be an integer from 0 to 100."""
    try:
        score = int(text.strip())
    except ValueError:
        raise ValueError("Invalid test score.") from None
    if not MIN_SCORE <= score <= MAX_SCORE:
        raise ValueError("Invalid test score.")
    return score


@dataclass(frozen=True)
class Student:
    """A student with an identifier and four test scores."""

    name: str
    id_number: str
    scores: tuple[int, ...]

    def __post_init__(self) -> None:
        scores = tuple(self.scores)
        object.__setattr__(self, "scores", scores)
        if len(scores) != NUM_TESTS:
            raise ValueError(f"expected {NUM_TESTS} scores, got {len(scores)}")
        parse_id(self.id_number)
        for score in scores:
            if not MIN_SCORE <= score <= MAX_SCORE:
                raise ValueError("Invalid test score.")

    @property
    def average(self) -> float:
        return sum(self.scores) / NUM_TESTS

    @property
    def grade(self) -> str:
        return letter_grade(self.average)


def format_report(students: Iterable[Student]) -> str:
    """Return the course grade report for ``students``."""
    lines = ["", _RULE, "Course Grade Report", _RULE]
    for student in students:
        lines += [
            f"Student name: {student.name}",
            f"ID number: {student.id_number}",
            f"Average test score: {student.average:.1f}",
            f"Grade: {student.grade}",
            "",
        ]
    return "\n".join(lines) + "\n"


def _parse_count(text: str) -> int:
    message = "Invalid number of students. Enter a positive integer number of students."
    try:
        count = int(text.strip())
    except ValueError:
        raise ValueError(message) from None
    if count < 0:
        raise ValueError(message)
    return count


def _ask(prompt: str, parse: Callable[[str], _T]) -> _T:
    while True:
        try:
            return parse(input(prompt))
        except ValueError as error:
            print(error)


def _read_student() -> Student:
    name = input("Student name: ")
    id_number = _ask("ID Number: ", parse_id)
    scores = tuple(
        _ask(f"        Test # {number}: ", parse_score)
        for number in range(1, NUM_TESTS + 1)
    )
    return Student(name, id_number, scores)


def main(argv: list[str] | None = None) -> int:
    """Ask for the students' data and print the grade report."""
    argparse.ArgumentParser(
        description="Enter student test scores and print a course grade report."
    ).parse_args(argv)
    try:
        count = _ask("How many students? ", _parse_count)
        students = [_read_student() for _ in range(count)]
    except EOFError:
        print()
        return 1
    print(format_report(students), end="")
    return 0