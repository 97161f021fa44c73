import io
from datetime import date

import pytest

from csexercises.calendar_gen import (
    days_in_month,
    format_calendar,
    format_month,
    is_leap_year,
    main,
    month_header,
)


@pytest.mark.parametrize(
    "year, expected",
    [(2000, True), (1900, False), (2024, True), (2023, False), (2100, False)],
)
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


def test_days_in_month_totals():
    assert sum(days_in_month(m, False) for m in range(1, 13)) == 365
    assert sum(days_in_month(m, True) for m in range(1, 13)) == 366
    assert days_in_month(2, True) == 29
    assert days_in_month(2, False) == 28


@pytest.mark.parametrize("month", [0, 13, -1])
def test_days_in_month_rejects_bad_month(month):
    with pytest.raises(ValueError):
        days_in_month(month, False)


def test_month_header_layout():
    lines = month_header(9).split("\n")
    assert lines[0] == "September".rjust(13)
    assert lines[1] == ""
    assert lines[2] == "  S  M  T  W  T  F  S"
    assert lines[3] == "---------------------"


def test_month_header_rejects_bad_month():
    with pytest.raises(ValueError):
        month_header(13)


def _dates(text):
    body = text.split("---------------------\n", 1)[1]
    return [int(token) for token in body.split()]


@pytest.mark.parametrize("year, month, start", [(2023, 1, 0), (2024, 2, 4), (2023, 4, 6)])
def test_format_month_lists_every_date(year, month, start):
    text, _ = format_month(year, month, start)
    assert _dates(text) == list(range(1, days_in_month(month, is_leap_year(year)) + 1))


@pytest.mark.parametrize("start", range(7))
def test_format_month_next_start_and_padding(start):
    text, next_day = format_month(2023, 1, start)
    assert next_day == (start + 31) % 7
    first_row = text.split("\n")[4]
    assert first_row.startswith(" " * (3 * start) + "  1")
    rows = text.split("---------------------\n", 1)[1].rstrip("\n").split("\n")
    assert all(len(row) == 21 for row in rows[:-1])
    assert len(rows[-1]) <= 21


def test_format_month_ending_on_saturday_has_no_extra_newline():
    text, next_day = format_month(2023, 2, 0)
    assert next_day == 0
    assert text.endswith(" 28\n\n")
    assert not text.endswith("\n\n\n")


@pytest.mark.parametrize("start", [-1, 7])
def test_format_month_rejects_bad_start(start):
    with pytest.raises(ValueError):
        format_month(2023, 1, start)


def test_months_start_on_real_weekdays():
    weekday = date(2023, 1, 1).isoweekday() % 7
    for month in range(1, 13):
        assert weekday == date(2023, month, 1).isoweekday() % 7
        _, weekday = format_month(2023, month, weekday)


def test_format_calendar_is_header_plus_months():
    calendar_text = format_calendar(2024, 1)
    assert calendar_text.startswith("2024".rjust(11) + "\n\n")
    for name in ("January", "June", "December"):
        assert name.rjust(13) + "\n" in calendar_text
    december, _ = format_month(2024, 12, date(2024, 12, 1).isoweekday() % 7)
    assert calendar_text.endswith(december)


def test_main_with_arguments(capsys):
    assert main(["2023", "0"]) == 0
    assert capsys.readouterr().out == format_calendar(2023, 0)


def test_main_prompts(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2024\n1\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("What year do you want a calendar for? ")
    assert "(Enter 0 for Sunday, 1 for Monday, 6 for Saturday, etc.): " in out
    assert out.endswith(format_calendar(2024, 1))


def test_main_rejects_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err


def test_main_rejects_bad_start_day(capsys):
    assert main(["2023", "9"]) == 1
    assert "day of week" in capsys.readouterr().err