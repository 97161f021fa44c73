from itertools import combinations

import pytest

from csexercises.queens import Board, main


def _no_attacks(rows):
    return all(
        r1 != r2 and abs(c1 - c2) != abs(r1 - r2)
        for (c1, r1), (c2, r2) in combinations(enumerate(rows), 2)
    )


def test_eight_queens_first_solution():
    board = Board()
    assert board.solve() is True
    assert board.rows == (0, 4, 7, 5, 2, 6, 1, 3)


@pytest.mark.parametrize("size", [1, 4, 5, 6, 7, 8])
def test_solutions_are_valid(size):
    board = Board(size)
    assert board.solve() is True
    assert len(board.rows) == size
    assert sorted(board.rows) == list(range(size))
    assert _no_attacks(board.rows)


@pytest.mark.parametrize("size", [0, 2, 3])
def test_unsolvable_sizes(size):
    board = Board(size)
    assert board.solve() is False
    assert board.rows == ()


def test_render_marks_queens():
    board = Board()
    board.solve()
    lines = board.render().splitlines()
    assert len(lines) == 8
    for col, row in enumerate(board.rows):
        cells = lines[row].split()
        assert cells[col] == "X"
    assert sum(line.count("X") for line in lines) == 8
    assert all(line.endswith(" ") for line in lines)


def test_render_empty_board_before_solving():
    board = Board(3)
    assert board.render() == "_ _ _ \n" * 3


def test_solve_twice_gives_same_result():
    board = Board(6)
    board.solve()
    first = board.rows
    board.solve()
    assert board.rows == first


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Board(-1)


def test_main_prints_board(capsys):
    assert main([]) == 0
    board = Board()
    board.solve()
    assert capsys.readouterr().out == board.render()


def test_main_reports_no_solution(capsys):
    assert main(["--size", "3"]) == 0
    assert capsys.readouterr().out == "No solution found.\n"