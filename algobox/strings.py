"""Anagram checks and reversal of words and characters."""

from __future__ import annotations

from collections.abc import Iterable


def are_anagrams(first: str, second: str) -> bool:
    """Whether the two strings hold the same characters the same number of times."""
    if len(first) != len(second):
        return False
    return sorted(first) == sorted(second)


def reverse_words(text: str) -> str:
    """The whitespace-separated words of ``text`` in reverse order, joined by single spaces."""
    return " ".join(reversed(text.split()))


def reverse_chars(chars: Iterable[str]) -> list[str]:
    """A new list holding ``chars`` in reverse order."""
    return list(chars)[::-1]