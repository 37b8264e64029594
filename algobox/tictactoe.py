"""Ultimate tic-tac-toe: nine small boards arranged on one big board."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

PLAYER_X = "X"
PLAYER_O = "O"
EMPTY = " "
DRAW = "D"

_HEADER = "    0   1   2       0   1   2       0   1   2"
_RULE = "  +---+---+---+   +---+---+---+   +---+---+---+"


def check_win(board: Sequence[Sequence[str]], player: str) -> bool:
    """Whether ``player`` holds a full row, column or diagonal of a 3x3 board."""
    lines = [list(row) for row in board]
    lines.extend([board[r][c] for r in range(3)] for c in range(3))
    lines.append([board[i][i] for i in range(3)])
    lines.append([board[i][2 - i] for i in range(3)])
    return any(all(cell == player for cell in line) for line in lines)


def is_board_full(board: Sequence[Sequence[str]]) -> bool:
    """Whether no cell of a 3x3 board is empty."""
    return all(cell != EMPTY for row in board for cell in row)


class IllegalMove(ValueError):
    """Raised when a move breaks the rules; the game state is left unchanged."""


class UltimateTicTacToe:
    """Game state; each move decides which small board the opponent must play on."""

    def __init__(self) -> None:
        self.boards = [
            [[[EMPTY] * 3 for _ in range(3)] for _ in range(3)] for _ in range(3)
        ]
        self.board_winners = [[EMPTY] * 3 for _ in range(3)]
        self.current_player = PLAYER_X
        self.winner: str | None = None
        self.is_over = False
        self._target: tuple[int, int] | None = None

    @property
    def required_board(self) -> tuple[int, int] | None:
        """The small board the current player must use, or None for a free choice."""
        if self._target is None:
            return None
        big_row, big_col = self._target
        if self.board_winners[big_row][big_col] != EMPTY:
            return None
        return self._target

    def play(self, big_row: int, big_col: int, row: int, col: int) -> None:
        """Place the current player's mark and pass the turn."""
        if self.is_over:
            raise IllegalMove("The game is over.")
        if any(not 0 <= v <= 2 for v in (big_row, big_col, row, col)):
            raise IllegalMove("Invalid coordinates. Please try again.")
        required = self.required_board
        if required is not None and (big_row, big_col) != required:
            raise IllegalMove("Invalid move. You must play on the designated board.")
        if self.board_winners[big_row][big_col] != EMPTY:
            raise IllegalMove("This board is already won. Please choose a different one.")
        small = self.boards[big_row][big_col]
        if small[row][col] != EMPTY:
            raise IllegalMove("This spot is already taken. Please try again.")

        player = self.current_player
        small[row][col] = player
        self._target = (row, col)

        if check_win(small, player):
            self.board_winners[big_row][big_col] = player
        elif is_board_full(small):
            self.board_winners[big_row][big_col] = DRAW

        if check_win(self.board_winners, player):
            self.winner = player
            self.is_over = True
        elif is_board_full(self.board_winners):
            self.is_over = True

        if not self.is_over:
            self.current_player = PLAYER_O if player == PLAYER_X else PLAYER_X

    def render(self) -> str:
        """All nine boards drawn as one grid with row and column numbers."""
        lines = [_HEADER, _RULE]
        for big_row in range(3):
            for small_row in range(3):
                cells = "".join(
                    "".join(
                        f" {self.boards[big_row][big_col][small_row][small_col]} |"
                        for small_col in range(3)
                    )
                    + "   |"
                    for big_col in range(3)
                )
                lines.append(f"{big_row * 3 + small_row} |{cells}")
                lines.append(_RULE)
        return "\n".join(lines) + "\n"


def _tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Play a two-player game on the terminal, moves read from standard input."""
    parser = argparse.ArgumentParser(
        prog="algobox-tictactoe",
        description="Ultimate tic-tac-toe for two players. Each move is four numbers: "
        "big board row, big board column, small board row, small board column.",
    )
    parser.parse_args(argv)

    game = UltimateTicTacToe()
    tokens = _tokens()
    print("Welcome to Ultimate Tic-Tac-Toe!")
    print("Player X goes first.")

    while not game.is_over:
        sys.stdout.write(game.render())
        print(f"Player {game.current_player}'s turn.")
        required = game.required_board
        if required is not None:
            print(f"You must play on the board at ({required[0]}, {required[1]}).")
        else:
            print("You can play on any available board.")
        while True:
            print(
                "Enter your move (big_board_row big_board_col small_board_row small_board_col): ",
                end="",
                flush=True,
            )
            raw = [next(tokens, None) for _ in range(4)]
            if None in raw:
                print()
                return 1
            try:
                move = [int(token) for token in raw if token is not None]
                game.play(*move)
            except ValueError as error:
                message = str(error) if isinstance(error, IllegalMove) else (
                    "Invalid coordinates. Please try again."
                )
                print(message)
                continue
            break

    sys.stdout.write(game.render())
    if game.winner is not None:
        print(f"Congratulations, Player {game.winner} wins the game!")
    else:
        print("The game is a draw!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())