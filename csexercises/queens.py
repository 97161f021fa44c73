"""The N-queens puzzle solved by backtracking column by column."""

from __future__ import annotations

import argparse

BOARD_SIZE = 8


class Board:
    """A square board on which queens are placed one per column."""

    def __init__(self, size: int = BOARD_SIZE) -> None:
        if size < 0:
            raise ValueError(f"board size must not be negative, got {size}")
        self.size = size
        self._rows: list[int] = []

    @property
    def rows(self) -> tuple[int, ...]:
        """The row of the queen in each column that holds one, left to right."""
        return tuple(self._rows)

    def _is_safe(self, row: int, col: int) -> bool:
        return all(
            placed != row and abs(c - col) != abs(placed - row)
            for c, placed in enumerate(self._rows)
        )

    def _place(self, col: int) -> bool:
        for row in range(self.size):
            if not self._is_safe(row, col):
                continue
            self._rows.append(row)
            if len(self._rows) == self.size or self._place(col + 1):
                return True
            self._rows.pop()
        return False

    def solve(self) -> bool:
        """Place a queen in every column so that none attacks another.

        Rows are tried from the top, so the first solution in that order is
        found. Returns False, leaving the board empty, if there is none.
        """
        self._rows = []
        return self._place(0)

    def render(self) -> str:
        """Return the board with ``X`` for each queen and ``_`` for empty squares."""
        placed = dict(enumerate(self._rows))
        return "".join(
            "".join("X " if placed.get(col) == row else "_ " for col in range(self.size))
            + "\n"
            for row in range(self.size)
        )


def main(argv: list[str] | None = None) -> int:
    """Solve the queens puzzle and print the board."""
    parser = argparse.ArgumentParser(description="Solve the N-queens puzzle.")
    parser.add_argument(
        "--size", type=int, default=BOARD_SIZE, help="board size (default 8)"
    )
    args = parser.parse_args(argv)
    try:
        board = Board(args.size)
    except ValueError as error:
        parser.error(str(error))
    if board.solve():
        print(board.render(), end="")
    else:
        print("No solution found.")
    return 0