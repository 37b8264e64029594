"""Guess a secret number between 1 and 100."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from enum import Enum

LOWEST = 1
HIGHEST = 100


class Verdict(Enum):
    """How a guess compares with the secret."""

    INVALID = "invalid"
    TOO_LOW = "too low"
    TOO_HIGH = "too high"
    CORRECT = "correct"


def judge_guess(secret: int, guess: int) -> Verdict:
    """Compare ``guess`` with ``secret``; guesses outside 1..100 are invalid."""
    if not LOWEST <= guess <= HIGHEST:
        return Verdict.INVALID
    if guess == secret:
        return Verdict.CORRECT
    return Verdict.TOO_LOW if guess < secret else Verdict.TOO_HIGH


_MESSAGES = {
    Verdict.INVALID: "❌ Invalid input. Please enter a number between 1 and 100.",
    Verdict.TOO_LOW: "🔼 Too low. Try again.",
    Verdict.TOO_HIGH: "🔽 Too high. Try again.",
}


def main(argv: Sequence[str] | None = None) -> int:
    """Play one game, reading guesses from standard input one per line."""
    parser = argparse.ArgumentParser(
        prog="algobox-guess",
        description="Guess a secret number between 1 and 100.",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the secret")
    args = parser.parse_args(argv)

    secret = random.Random(args.seed).randint(LOWEST, HIGHEST)
    attempts = 0
    print("🎯 Welcome to the Number Guessing Game!")
    print("Guess a number between 1 and 100.")

    while True:
        print("Enter your guess: ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            print()
            return 1
        attempts += 1
        try:
            guess = int(line.strip())
        except ValueError:
            verdict = Verdict.INVALID
        else:
            verdict = judge_guess(secret, guess)
        if verdict is Verdict.CORRECT:
            print(f"✅ Correct! You guessed the number in {attempts} attempts.")
            break
        print(_MESSAGES[verdict])

    print("Thanks for playing!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())