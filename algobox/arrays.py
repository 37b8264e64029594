"""Array problems: best single stock trade and the median of two sorted lists."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import islice


def max_profit(prices: Iterable[int]) -> int:
    """Best gain from buying once and selling later; 0 if no gain is possible."""
    best = 0
    lowest: int | None = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        best = max(best, price - lowest)
    return best


def median_sorted_arrays(first: Sequence[int], second: Sequence[int]) -> float:
    """Median of the union of two ascending sequences."""
    total = len(first) + len(second)
    if total == 0:
        raise ValueError("median of two empty sequences")
    merged = heapq.merge(first, second)
    if total % 2:
        return float(next(islice(merged, total // 2, None)))
    low, high = islice(merged, total // 2 - 1, total // 2 + 1)
    return (low + high) / 2