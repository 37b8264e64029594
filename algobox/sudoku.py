"""Backtracking Sudoku solver with plain-text input and output."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

SIZE = 9
BOX = 3

Grid = list[list[int]]


def is_safe(grid: Sequence[Sequence[int]], row: int, col: int, num: int) -> bool:
    """Whether ``num`` is absent from the row, column and 3x3 box of ``(row, col)``."""
    if any(grid[row][x] == num for x in range(SIZE)):
        return False
    if any(grid[x][col] == num for x in range(SIZE)):
        return False
    start_row, start_col = row - row % BOX, col - col % BOX
    return not any(
        grid[r][c] == num
        for r in range(start_row, start_row + BOX)
        for c in range(start_col, start_col + BOX)
    )


def _validated_copy(grid: Sequence[Sequence[int]]) -> Grid:
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError("a sudoku grid must be 9 by 9")
    board = [list(row) for row in grid]
    if any(not 0 <= value <= SIZE for row in board for value in row):
        raise ValueError("sudoku cells must hold 0 to 9")
    return board


def solve_sudoku(grid: Sequence[Sequence[int]]) -> Grid | None:
    """Fill the zero cells of ``grid`` and return the solved copy, or None if impossible."""
    board = _validated_copy(grid)
    empties = [(r, c) for r in range(SIZE) for c in range(SIZE) if board[r][c] == 0]

    def fill(k: int) -> bool:
        if k == len(empties):
            return True
        row, col = empties[k]
        for num in range(1, SIZE + 1):
            if is_safe(board, row, col, num):
                board[row][col] = num
                if fill(k + 1):
                    return True
        board[row][col] = 0
        return False

    return board if fill(0) else None


def parse_grid(text: str) -> Grid:
    """Read 81 whitespace-separated integers, 0 for an empty cell."""
    tokens = text.split()
    if len(tokens) < SIZE * SIZE:
        raise ValueError("a sudoku grid needs 81 numbers")
    try:
        values = [int(token) for token in tokens[: SIZE * SIZE]]
    except ValueError:
        raise ValueError("sudoku cells must be integers") from None
    grid = [values[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]
    return _validated_copy(grid)


def format_board(grid: Sequence[Sequence[int]]) -> str:
    """One line per row, each cell followed by a space."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in grid)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the grid read from standard input and print it."""
    parser = argparse.ArgumentParser(
        prog="algobox-sudoku",
        description="Solve a Sudoku read from standard input as 81 numbers, 0 for empty.",
    )
    parser.parse_args(argv)
    try:
        grid = parse_grid(sys.stdin.read())
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    solved = solve_sudoku(grid)
    if solved is None:
        print("No solution exists")
    else:
        sys.stdout.write(format_board(solved))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())