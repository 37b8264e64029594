"""A terminal Wordle with hard mode, a coloured keyboard and saved statistics."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, fields
from enum import Enum
from os import PathLike
from pathlib import Path

WORD_LEN = 5
MAX_ATTEMPTS = 6

WORD_LIST = (
    "apple", "river", "storm", "plane", "bring",
    "table", "crane", "peace", "light", "sound",
    "brave", "flame", "sword", "track", "sharp",
)

GREEN = "\033[1;32m"
YELLOW = "\033[1;33m"
GREY = "\033[1;90m"
RESET = "\033[0m"

_KEYBOARD_ROWS = ("QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM")
_EMPTY_ROW = "[_] [_] [_] [_] [_]\n"
_REVEAL_DELAY = 0.15
DEFAULT_STATS_PATH = "stats.txt"


class LetterState(Enum):
    """What is known about a letter."""

    UNKNOWN = 0
    GREYED = 1
    YELLOWED = 2
    GREENED = 3


_COLOURS = {
    LetterState.GREENED: GREEN,
    LetterState.YELLOWED: YELLOW,
    LetterState.GREYED: GREY,
}

Feedback = tuple[LetterState, ...]


@dataclass
class Stats:
    """Games played and won, the current winning streak and the best one."""

    played: int = 0
    won: int = 0
    streak: int = 0
    best: int = 0

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Stats:
        """Read stats saved by :meth:`save`; missing or unreadable values stay zero."""
        stats = cls()
        try:
            tokens = Path(path).read_text().split()
        except FileNotFoundError:
            return stats
        for field_, token in zip(fields(cls), tokens):
            try:
                setattr(stats, field_.name, int(token))
            except ValueError:
                break
        return stats

    def save(self, path: str | PathLike[str]) -> None:
        """Write the four counters separated by spaces."""
        Path(path).write_text(f"{self.played} {self.won} {self.streak} {self.best}")

    def record(self, won: bool) -> None:
        """Count one finished game."""
        self.played += 1
        if won:
            self.won += 1
            self.streak += 1
            self.best = max(self.best, self.streak)
        else:
            self.streak = 0

    def win_rate(self) -> float:
        """Percentage of games won; 0 when none were played."""
        return 100.0 * self.won / self.played if self.played else 0.0


def evaluate_guess(guess: str, target: str) -> Feedback:
    """Mark each letter green (right place), yellow (elsewhere) or grey (absent).

    A target letter is used up by at most one mark, greens first.
    """
    if len(guess) != len(target):
        raise ValueError("guess and target must have the same length")
    feedback = [LetterState.GREYED] * len(guess)
    used = [False] * len(target)
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            feedback[i] = LetterState.GREENED
            used[i] = True
    for i, g in enumerate(guess):
        if feedback[i] is LetterState.GREENED:
            continue
        for j, t in enumerate(target):
            if not used[j] and g == t:
                feedback[i] = LetterState.YELLOWED
                used[j] = True
                break
    return tuple(feedback)


class WordleGame:
    """One round: up to six guesses at a hidden five-letter word."""

    def __init__(
        self,
        words: Sequence[str] = WORD_LIST,
        *,
        target: str | None = None,
        hard_mode: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        self.words = tuple(word.lower() for word in words)
        if not self.words:
            raise ValueError("the word list is empty")
        if target is None:
            target = (rng if rng is not None else random.Random()).choice(self.words)
        self.target = target.lower()
        self.hard_mode = hard_mode
        self.board: list[tuple[str, Feedback]] = []
        self.keyboard = {ch: LetterState.UNKNOWN for row in _KEYBOARD_ROWS for ch in row}
        self.won = False

    @property
    def attempts(self) -> int:
        """Number of accepted guesses."""
        return len(self.board)

    @property
    def is_over(self) -> bool:
        """Whether the word was found or no attempts are left."""
        return self.won or self.attempts >= MAX_ATTEMPTS

    def hard_mode_violation(self, guess: str) -> str | None:
        """Why ``guess`` ignores hints revealed so far, or None if it is allowed."""
        if not self.hard_mode or not self.board:
            return None
        required_pos: list[str | None] = [None] * WORD_LEN
        required_counts: Counter[str] = Counter()
        for word, feedback in self.board:
            for i, (ch, state) in enumerate(zip(word.upper(), feedback)):
                if state is LetterState.GREENED:
                    required_pos[i] = ch
                    required_counts[ch] += 1
                elif state is LetterState.YELLOWED:
                    required_counts[ch] += 1

        upper = guess.upper()
        for i, ch in enumerate(required_pos):
            if ch is not None and upper[i] != ch:
                return f"Hard mode: must keep green letter {ch} at position {i + 1}"

        have = Counter(upper)
        for ch, needed in required_counts.items():
            if have[ch] < needed:
                return (
                    f"Hard mode: guess must include at least {needed} "
                    f"instance(s) of '{ch}' (revealed earlier)"
                )
        return None

    def _update_keyboard(self, guess: str, feedback: Feedback) -> None:
        for ch, state in zip(guess.upper(), feedback):
            current = self.keyboard.get(ch, LetterState.UNKNOWN)
            if state is LetterState.GREENED:
                self.keyboard[ch] = LetterState.GREENED
            elif state is LetterState.YELLOWED:
                if current is not LetterState.GREENED:
                    self.keyboard[ch] = LetterState.YELLOWED
            elif current not in (LetterState.GREENED, LetterState.YELLOWED):
                self.keyboard[ch] = LetterState.GREYED

    def submit(self, guess: str) -> Feedback:
        """Score a guess and record it; ValueError if it is not an acceptable guess."""
        if self.is_over:
            raise ValueError("The game is over.")
        guess = guess.lower()
        if len(guess) != WORD_LEN:
            raise ValueError(f"Word must be {WORD_LEN} letters.")
        if guess not in self.words:
            raise ValueError("Invalid word. Try again.")
        violation = self.hard_mode_violation(guess)
        if violation is not None:
            raise ValueError(violation)
        feedback = evaluate_guess(guess, self.target)
        self._update_keyboard(guess, feedback)
        self.board.append((guess, feedback))
        if guess == self.target:
            self.won = True
        return feedback

    def render_board(self) -> str:
        """Guesses so far as coloured tiles, then a blank row per remaining attempt."""
        lines = [
            "".join(
                f"{_COLOURS[state]}[{ch}]{RESET}" for ch, state in zip(word.upper(), feedback)
            )
            + "\n"
            for word, feedback in self.board
        ]
        lines.extend(_EMPTY_ROW for _ in range(self.attempts, MAX_ATTEMPTS))
        return "".join(lines)

    def render_keyboard(self) -> str:
        """The keyboard with each known letter coloured by what is known about it."""
        out = []
        for row in _KEYBOARD_ROWS:
            for ch in row:
                state = self.keyboard.get(ch, LetterState.UNKNOWN)
                colour = _COLOURS.get(state)
                out.append(f"{colour}{ch} {RESET}" if colour else f"{ch} ")
            out.append("\n")
        return "".join(out)


def _play_round(game: WordleGame, stats: Stats, stats_path: Path) -> bool:
    """Run one game on the terminal; False if input ran out before it ended."""
    print("\n===== WORDLE ENHANCED =====")
    print(f"Guess the {WORD_LEN}-letter word in {MAX_ATTEMPTS} attempts!")
    print((f"{GREY}(Hard Mode ON)\n{RESET}" if game.hard_mode else ""))

    start = time.monotonic()
    while not game.is_over:
        print()
        sys.stdout.write(game.render_board())
        print()
        sys.stdout.write(game.render_keyboard())
        print(f"\nAttempt {game.attempts + 1}/{MAX_ATTEMPTS}: ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            print()
            return False
        guess = line.rstrip("\r\n")
        try:
            feedback = game.submit(guess)
        except ValueError as error:
            print(f"{GREY}{error}\n{RESET}", end="")
            continue
        print("Result: ", end="", flush=True)
        for ch, state in zip(guess.upper(), feedback):
            time.sleep(_REVEAL_DELAY)
            print(f"{_COLOURS[state]}{ch} {RESET}", end="", flush=True)
        print()

    elapsed = int(time.monotonic() - start)
    stats.record(game.won)
    if game.won:
        print(f"{GREEN}\n🎉 You guessed it in {game.attempts} attempts!\n{RESET}", end="")
    else:
        print(f"\nThe correct word was: {YELLOW}{game.target}{RESET}")
        print(f"{GREY}❌ Better luck next time!\n{RESET}", end="")
    print(f"{GREY}Time taken: {elapsed}s\n{RESET}", end="")

    stats.save(stats_path)
    print(
        f"\n📊 Stats: Played {stats.played} | Won {stats.won} | "
        f"Win% {stats.win_rate():.1f}% | Streak {stats.streak} | Best {stats.best}"
    )
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Play rounds of Wordle on the terminal until the player stops."""
    parser = argparse.ArgumentParser(
        prog="algobox-wordle",
        description="Guess the five-letter word in six attempts (hard mode).",
    )
    parser.add_argument("--stats", default=DEFAULT_STATS_PATH, help="file for saved statistics")
    parser.add_argument("--seed", type=int, default=None, help="seed for choosing words")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    stats_path = Path(args.stats)
    while True:
        stats = Stats.load(stats_path)
        if not _play_round(WordleGame(rng=rng), stats, stats_path):
            return 0
        print("\nPlay again? (Y/N): ", end="", flush=True)
        answer = ""
        while not answer:
            line = sys.stdin.readline()
            if not line:
                break
            answer = line.strip()
        if answer[:1].lower() != "y":
            break

    print("\nThanks for playing Wordle!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())