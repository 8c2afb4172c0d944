"""Counting problems on sequences and permutations."""

from __future__ import annotations

from collections.abc import Sequence
from math import factorial


def _sort_and_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    mid = len(items) // 2
    left, left_count = _sort_and_count(items[:mid])
    right, right_count = _sort_and_count(items[mid:])
    merged: list[int] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            count += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def inversion_count(arr: Sequence[int]) -> int:
    """Number of pairs ``i < j`` with ``arr[i] > arr[j]``."""
    _, count = _sort_and_count(list(arr))
    return count


def kth_permutation(n: int, k: int) -> str:
    """The ``k``-th (1-based) lexicographic permutation of 1..n, as concatenated digits.

    Raises ValueError if ``n`` is below 1 or ``k`` is outside 1..n!.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    if not 1 <= k <= factorial(n):
        raise ValueError("k must lie between 1 and n!")
    remaining = list(range(1, n + 1))
    rank = k - 1
    parts: list[str] = []
    while remaining:
        index, rank = divmod(rank, factorial(len(remaining) - 1))
        parts.append(str(remaining.pop(index)))
    return "".join(parts)