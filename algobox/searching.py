"""Searching in sorted sequences, integer square roots and h-index lookup."""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def binary_search(items: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in ascending ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def binary_search_recursive(
    items: Sequence[int],
    target: int,
    low: int = 0,
    high: int | None = None,
) -> int | None:
    """Recursive binary search over ``items[low:high + 1]``."""
    if high is None:
        high = len(items) - 1
    if low > high:
        return None
    mid = low + (high - low) // 2
    value = items[mid]
    if value == target:
        return mid
    if value < target:
        return binary_search_recursive(items, target, mid + 1, high)
    return binary_search_recursive(items, target, low, mid - 1)


def first_last_occurrence(items: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the first and last index of ``target`` in sorted ``items``, or None."""
    first = bisect_left(items, target)
    if first == len(items) or items[first] != target:
        return None
    last = bisect_right(items, target)
    return first, last - 1


def floor_index(items: Sequence[int], target: int) -> int | None:
    """Return the index of the last element not greater than ``target``, or None."""
    low, high = 0, len(items) - 1
    answer = None
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] <= target:
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer


def h_index_brute(citations: Sequence[int]) -> int | None:
    """Linear scan for the citation count equal to the number of papers from it on."""
    n = len(citations)
    return next(
        (count for i, count in enumerate(citations) if count == n - i),
        None,
    )


def h_index(citations: Sequence[int]) -> int:
    """h-index of ascending ``citations`` by binary search."""
    n = len(citations)
    low, high = 0, n - 1
    while low <= high:
        mid = low + (high - low) // 2
        remaining = n - mid
        if citations[mid] == remaining:
            return citations[mid]
        if citations[mid] > remaining:
            high = mid - 1
        else:
            low = mid + 1
    return n - low


def integer_sqrt(x: int) -> int:
    """Floor of the square root of a non-negative integer."""
    if x < 0:
        raise ValueError("square root of a negative number")
    if x < 2:
        return x
    left, right, answer = 1, x, 0
    while left <= right:
        mid = left + (right - left) // 2
        if mid <= x // mid:
            answer = mid
            left = mid + 1
        else:
            right = mid - 1
    return answer


def _read_input(text: str) -> tuple[list[int], int]:
    tokens = iter(text.split())
    count = int(next(tokens))
    if count < 0:
        raise ValueError("number of elements must not be negative")
    items = [int(next(tokens)) for _ in range(count)]
    target = int(next(tokens))
    return items, target


def main(argv: Sequence[str] | None = None) -> int:
    """Read a count, sorted numbers and a target from stdin and search for it."""
    parser = argparse.ArgumentParser(
        prog="algobox-search",
        description="Binary search a sorted list read from standard input: "
        "the element count, the elements, then the target.",
    )
    parser.parse_args(argv)

    print("NOTE: Please enter a sorted array in ascending order.\n")
    try:
        items, target = _read_input(sys.stdin.read())
    except (StopIteration, ValueError):
        print("error: expected a count, that many integers and a target", file=sys.stderr)
        return 1

    print("--- Binary Search Results ---")
    for label, found in (
        ("Iterative", binary_search(items, target)),
        ("Recursive", binary_search_recursive(items, target)),
    ):
        if found is None:
            print(f"{label} Binary Search: Element not found")
        else:
            print(f"{label} Binary Search: Element found at index {found}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())