"""Greedy algorithms over intervals and time ranges."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def insert_interval(
    intervals: Sequence[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Insert ``new_interval`` into sorted, disjoint ``intervals``, merging overlaps."""
    start, end = new_interval[0], new_interval[1]
    before: list[list[int]] = []
    after: list[list[int]] = []
    for lo, hi, *_ in intervals:
        if after or lo > end:
            after.append([lo, hi])
        elif hi < start:
            before.append([lo, hi])
        else:
            start = min(start, lo)
            end = max(end, hi)
    return [*before, [start, end], *after]


def erase_overlap_intervals(intervals: Sequence[Sequence[int]]) -> int:
    """Fewest intervals to remove so that the rest do not overlap."""
    ordered = sorted(intervals, key=lambda iv: iv[1])
    if not ordered:
        return 0
    removed = 0
    prev_end = ordered[0][1]
    for start, end, *_ in ordered[1:]:
        if prev_end > start:
            removed += 1
        else:
            prev_end = end
    return removed


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching intervals into a sorted disjoint list."""
    merged: list[list[int]] = []
    for start, end, *_ in sorted((list(iv) for iv in intervals)):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def min_platforms(arrivals: Sequence[int], departures: Sequence[int]) -> int:
    """Platforms needed so that no train waits; a train leaving at t blocks one arriving at t."""
    trains = sorted(zip(arrivals, departures), key=lambda train: train[0])
    busy: list[int] = []
    for arrival, departure in trains:
        if busy and arrival > busy[0]:
            heapq.heapreplace(busy, departure)
        else:
            heapq.heappush(busy, departure)
    return len(busy)


def max_meetings(starts: Sequence[int], ends: Sequence[int]) -> int:
    """Most meetings one room can hold; a meeting must start after the previous ends."""
    meetings = sorted(zip(starts, ends), key=lambda meeting: meeting[1])
    if not meetings:
        return 0
    count = 1
    last_end = meetings[0][1]
    for start, end in meetings[1:]:
        if start > last_end:
            count += 1
            last_end = end
    return count