"""A small match-three puzzle: swap cells to line up three of a colour."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Iterator, Sequence
from itertools import groupby

COLOURS = ("R", "G", "B")
EMPTY = " "

Position = tuple[int, int]


class Match3Board:
    """A grid of coloured cells; horizontal runs of three or more are cleared."""

    def __init__(
        self,
        grid: Sequence[Sequence[str]] | None = None,
        *,
        rows: int = 5,
        cols: int = 5,
        colours: Sequence[str] = COLOURS,
        rng: random.Random | None = None,
    ) -> None:
        self.colours = tuple(colours)
        self._rng = rng if rng is not None else random.Random()
        if grid is None:
            self.grid = [[self._random_colour() for _ in range(cols)] for _ in range(rows)]
        else:
            self.grid = [list(row) for row in grid]
            if not self.grid or any(len(row) != len(self.grid[0]) for row in self.grid):
                raise ValueError("the grid must be a non-empty rectangle")
        self.rows = len(self.grid)
        self.cols = len(self.grid[0])

    def _random_colour(self) -> str:
        return self._rng.choice(self.colours)

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError("Invalid positions! Try again.")

    def swap(self, r1: int, c1: int, r2: int, c2: int) -> None:
        """Exchange the contents of two cells."""
        self._check(r1, c1)
        self._check(r2, c2)
        grid = self.grid
        grid[r1][c1], grid[r2][c2] = grid[r2][c2], grid[r1][c1]

    def find_matches(self) -> list[Position]:
        """Cells in horizontal runs of three or more of one colour, row by row."""
        matched: list[Position] = []
        for r, row in enumerate(self.grid):
            for colour, group in groupby(enumerate(row), key=lambda pair: pair[1]):
                run = [c for c, _ in group]
                if colour != EMPTY and len(run) >= 3:
                    matched.extend((r, c) for c in run)
        return matched

    def remove_matches(self, matched: Iterable[Position]) -> None:
        """Clear ``matched`` cells, let the rest fall and fill the top with new colours."""
        for r, c in matched:
            self.grid[r][c] = EMPTY
        for c in range(self.cols):
            survivors = iter(
                [self.grid[r][c] for r in reversed(range(self.rows)) if self.grid[r][c] != EMPTY]
            )
            for r in reversed(range(self.rows)):
                cell = next(survivors, None)
                self.grid[r][c] = cell if cell is not None else self._random_colour()

    def try_swap(self, r1: int, c1: int, r2: int, c2: int) -> list[Position]:
        """Swap two cells; clear the matches this makes, or undo the swap if there are none.

        Returns the cleared positions, empty when the swap was undone.
        """
        self.swap(r1, c1, r2, c2)
        matched = self.find_matches()
        if matched:
            self.remove_matches(matched)
        else:
            self.swap(r1, c1, r2, c2)
        return matched

    def render(self) -> str:
        """One line per row, each cell followed by a space."""
        return "".join("".join(f"{cell} " for cell in row) + "\n" for row in self.grid)


def _tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def _read_pair(tokens: Iterator[str]) -> tuple[int, int] | None:
    first, second = next(tokens, None), next(tokens, None)
    if first is None or second is None:
        return None
    try:
        return int(first), int(second)
    except ValueError:
        return -1, -1


def main(argv: Sequence[str] | None = None) -> int:
    """Play on a random board, reading pairs of cells to swap from standard input."""
    parser = argparse.ArgumentParser(
        prog="algobox-match3",
        description="Match-three puzzle: enter two cells (row col) to swap.",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the colours")
    args = parser.parse_args(argv)

    board = Match3Board(rng=random.Random(args.seed))
    tokens = _tokens()
    print("Initial Board:")
    sys.stdout.write(board.render())

    while True:
        print("Enter first cell (row col): ", end="", flush=True)
        first = _read_pair(tokens)
        if first is None:
            print()
            return 0
        print("Enter second cell (row col): ", end="", flush=True)
        second = _read_pair(tokens)
        if second is None:
            print()
            return 0
        try:
            matched = board.try_swap(*first, *second)
        except IndexError as error:
            print(error)
            continue
        if matched:
            print("\nMatch found! Blocks removed.\n")
        else:
            print("\nNo match! 🎭 Basket effect appears!\n")
        sys.stdout.write(board.render())


if __name__ == "__main__":
    raise SystemExit(main())