"""Classic programming exercises: fractions, grade reports, calendars, ordered pairs, queens and a battle arena."""

__version__ = "1.0.0"