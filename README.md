# csexercises

A collection of small, self-contained programs and data types of the kind
met in a first course on programming: exact fractions, a student grade
report, a calendar printer, ordered pairs, the eight queens puzzle and a
creature battle arena.

Everything is plain Python with no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

### Fractions

`csexercises.fraction.Fraction` keeps its value in lowest terms with a
positive denominator, and prints improper values as mixed numbers.
Fractions mix freely with integers in arithmetic and comparisons.

```python
from csexercises.fraction import Fraction, parse_fraction

half = Fraction(4, 8)
print(half)                    # 1/2
print(Fraction(28, 6))         # 4+2/3
print(Fraction(1, 6) + Fraction(1, 3))
print(half < 2, 3 - half)
print(parse_fraction("-1+1/2"))  # -1+1/2
```

A zero denominator raises `ZeroDivisionError`. `parse_fraction(text)`
accepts `n`, `n/d` or `w+n/d`, each with an optional leading `-`, and raises
`ValueError` on anything else. `read_fractions(lines)` yields every fraction
in lines of text, skipping lines that start with `/`, `*` or a letter.

`csexercises.fraction_client` builds text reports that exercise the class:
`basic_report(lines)`, `relation_report()`, `binary_math_report()` and
`math_assign_report()`.

### Grade reports

`csexercises.student_scores.Student` holds a name, a digits-only ID number
and four scores from 0 to 100, and gives its `average` and letter `grade`.
`letter_grade(average)`, `parse_id(text)`, `parse_score(text)` and
`format_report(students)` are available on their own.

### Calendars

`csexercises.calendar_gen` provides `is_leap_year`, `days_in_month`,
`month_header`, `format_month` and `format_calendar(year, start_day)`,
where `start_day` is 0 for Sunday through 6 for Saturday.

### Ordered pairs

`csexercises.ordered_pair.OrderedPair` holds two members, `first` and
`second`, that may not be equal unless both hold the pair's `default`;
otherwise `DuplicateMemberError` (a `ValueError`) is raised. Pairs add
member-wise and compare with `<` by the sum of their members.

```python
from csexercises.ordered_pair import OrderedPair

pair = OrderedPair(3, 7)
print(pair + OrderedPair(1, 2))   # (4, 9)
```

### Eight queens

```python
from csexercises.queens import Board

board = Board(8)
if board.solve():
    print(board.render())
```

`Board.rows` gives the row of the queen in each column.

### Creatures

`csexercises.creatures_b` defines `Human`, `Elf`, `Demon`, `Cyberdemon` and
`Balrog`, each with a `species` name and its own `damage()` rule, printing a
line for each attack. Pass a `random.Random` as `rng` for repeatable results
and a text stream as `out` to capture the messages. `battle_arena(first,
second)` fights until one or both fall, `do_battle(champion, contender)`
returns the winner (or `None` on a tie) with its hitpoints restored, and
`run_tournament(creatures, out)` returns the last champion.

## Commands

| Command          | What it does                                              |
|------------------|-----------------------------------------------------------|
| `csex-grades`    | Reads student scores and prints a grade report            |
| `csex-fractions` | Runs the fraction reports; takes an optional data file    |
| `csex-calendar`  | Prints a calendar; takes an optional year and start day   |
| `csex-pairs`     | Demonstrates ordered pairs; `--seed` for repeatable runs  |
| `csex-queens`    | Solves and prints the queens puzzle; `--size` sets N      |
| `csex-arena`     | Runs a battle arena tournament; `--seed` for repeatable runs |

Commands prompt on the terminal for anything not given on the command line,
for example:

```
csex-calendar 2024 1
csex-queens --size 6
csex-arena --seed 42
```

## What is not included

The package has no mutable string type, no monthly budget tracker and no
command that prints sample damage rolls for each creature kind; the
creature classes here are only those of the battle arena.