"""Merge sort and quick sort over integer lists."""

from __future__ import annotations

import argparse
import sys
from collections.abc import MutableSequence, Sequence


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Sequence[int]) -> list[int]:
    """Return a new list with ``items`` sorted by a stable merge sort."""
    if len(items) <= 1:
        return list(items)
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def partition(items: MutableSequence[int], low: int, high: int) -> int:
    """Lomuto partition of ``items[low:high + 1]`` around its last element.

    Returns the pivot's final index; elements not greater than the pivot end up
    to its left, larger ones to its right.
    """
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def quick_sort(items: Sequence[int]) -> list[int]:
    """Return a new list with ``items`` sorted by quick sort."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = partition(result, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return result


_ALGORITHMS = {"merge": merge_sort, "quick": quick_sort}


def main(argv: Sequence[str] | None = None) -> int:
    """Read a count and that many integers from stdin, print them before and after sorting."""
    parser = argparse.ArgumentParser(
        prog="algobox-sort",
        description="Sort integers read from standard input: the count, then the elements.",
    )
    parser.add_argument("--algorithm", choices=sorted(_ALGORITHMS), default="merge")
    args = parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    try:
        count = int(next(tokens))
        if count < 0:
            raise ValueError("negative count")
        items = [int(next(tokens)) for _ in range(count)]
    except (StopIteration, ValueError):
        print("error: expected a count followed by that many integers", file=sys.stderr)
        return 1

    print("Original array:", " ".join(map(str, items)))
    print("Sorted array:", " ".join(map(str, _ALGORITHMS[args.algorithm](items))))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())