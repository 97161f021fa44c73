import operator

import pytest

from csexercises.fraction import Fraction, parse_fraction
from csexercises.fraction_client import (
    basic_report,
    binary_math_report,
    main,
    math_assign_report,
    relation_report,
)

_OPS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def _blocks(report):
    blocks = {}
    current = None
    for line in report.splitlines():
        if line.startswith("Comparing "):
            current = line[len("Comparing "):]
            blocks[current] = {}
        elif current is not None and line.startswith("\t"):
            question, _, answer = line.strip().rpartition(" ")
            blocks[current][question] = answer
    return blocks


def test_basic_report_constructed_fractions():
    report = basic_report([])
    assert "Fraction [3] = -4" in report
    assert "Fraction [5] = 4+2/3" in report
    assert f"Fraction [1] = {Fraction(-15, 21)}" in report
    assert "Read Fraction" not in report


def test_basic_report_reads_and_skips_comments():
    lines = ["// header\n", "1/2\n", "-3+1/4\n", "Text line\n", "* note\n", "7\n"]
    report = basic_report(lines)
    read = [line for line in report.splitlines() if line.startswith("Read Fraction")]
    assert read == [
        "Read Fraction = 1/2",
        "Read Fraction = -3+1/4",
        "Read Fraction = 7",
    ]
    assert "header" not in report


def test_relation_report_is_consistent():
    blocks = _blocks(relation_report())
    assert blocks
    for answers in blocks.values():
        lt = answers["Is left < right?"] == "true"
        le = answers["Is left <= right?"] == "true"
        gt = answers["Is left > right?"] == "true"
        ge = answers["Is left >= right?"] == "true"
        eq = answers["Does left == right?"] == "true"
        ne = answers["Does left != right ?"] == "true"
        assert lt != ge
        assert gt != le
        assert eq != ne
        assert le == (lt or eq)


def test_relation_report_pairs():
    blocks = _blocks(relation_report())
    zero_pair = f"{Fraction(0, 1)} to {Fraction(0, 2)}"
    assert blocks[zero_pair]["Does left == right?"] == "true"
    int_pair = f"-3 to {Fraction(1, 4)}"
    assert blocks[int_pair]["Is left < right?"] == "true"
    half_pair = f"{Fraction(-3, 6)} to 2"
    assert blocks[half_pair]["Is left > right?"] == "false"


def test_binary_math_report_matches_arithmetic():
    seen = set()
    for line in binary_math_report().splitlines():
        if " = " not in line:
            continue
        expression, result = line.split(" = ")
        for symbol, op in _OPS.items():
            parts = expression.split(f" {symbol} ")
            if len(parts) == 2:
                left, right = (parse_fraction(p) for p in parts)
                assert parse_fraction(result) == op(left, right)
                seen.add(symbol)
                break
    assert seen == set(_OPS)


def test_math_assign_report_increments_return_to_start():
    lines = math_assign_report().splitlines()
    now = [line.split(" = ")[1] for line in lines if line.startswith("Now g = ")]
    assert now[0] == str(Fraction(-1, 3))
    assert now[-1] == now[0]
    postfix = next(line for line in lines if line.startswith("g++ = "))
    assert postfix.split(" = ")[1] == now[0]


def test_main_with_file(tmp_path, capsys):
    data = tmp_path / "frac_data.txt"
    data.write_text("// fractions\n1/2\n2+3/4\n", encoding="utf-8")
    assert main([str(data)]) == 0
    out = capsys.readouterr().out
    assert "Read Fraction = 1/2" in out
    assert "Read Fraction = 2+3/4" in out
    assert "Project#2 -Fraction class (ADT) testing now concluded." in out


def test_main_reprompts_for_missing_file(tmp_path, capsys, monkeypatch):
    data = tmp_path / "frac_data.txt"
    data.write_text("5\n", encoding="utf-8")
    missing = tmp_path / "missing.txt"
    monkeypatch.setattr("builtins.input", lambda prompt="": str(data))
    assert main([str(missing)]) == 0
    out = capsys.readouterr().out
    assert f"{missing} not found!" in out
    assert "Read Fraction = 5" in out


def test_main_malformed_data(tmp_path):
    data = tmp_path / "bad.txt"
    data.write_text("1/x\n", encoding="utf-8")
    assert main([str(data)]) == 1


def test_main_end_of_input(monkeypatch):
    def _eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    assert main([]) == 1


@pytest.mark.parametrize("report", [relation_report, binary_math_report, math_assign_report])
def test_reports_end_with_newline(report):
    text = report()
    assert text.endswith("\n")
    assert text.startswith("\n*")