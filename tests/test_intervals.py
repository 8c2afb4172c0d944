import pytest

from dsakit.intervals import (
    erase_overlap_intervals,
    insert_interval,
    max_meetings,
    merge_intervals,
    min_platforms,
)


def _is_sorted_disjoint(intervals):
    return all(a[1] < b[0] for a, b in zip(intervals, intervals[1:]))


def test_insert_into_empty():
    assert insert_interval([], [4, 8]) == [[4, 8]]


def test_insert_disjoint_keeps_all_in_order():
    intervals = [[1, 2], [6, 7], [10, 12]]
    new = [4, 5]
    assert insert_interval(intervals, new) == sorted(intervals + [new])


def test_insert_merges_overlapping():
    assert insert_interval([[1, 3], [6, 9]], [2, 7]) == [[1, 9]]


def test_insert_merges_middle_only():
    result = insert_interval([[1, 2], [3, 5], [6, 7], [8, 10], [12, 16]], [4, 8])
    assert result == [[1, 2], [3, 10], [12, 16]]


def test_insert_does_not_mutate_arguments():
    intervals = [[1, 3], [6, 9]]
    new = [2, 7]
    insert_interval(intervals, new)
    assert intervals == [[1, 3], [6, 9]]
    assert new == [2, 7]


def test_merge_example():
    assert merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]]) == [[1, 6], [8, 10], [15, 18]]


def test_merge_touching_intervals():
    assert merge_intervals([[4, 5], [1, 4]]) == [[1, 5]]


def test_merge_empty():
    assert merge_intervals([]) == []


@pytest.mark.parametrize(
    "intervals",
    [
        [[5, 9], [1, 2], [3, 4]],
        [[1, 10], [2, 3], [4, 5]],
        [[7, 8], [1, 3], [2, 4], [9, 12], [11, 11]],
    ],
)
def test_merge_result_is_sorted_disjoint_and_covers_inputs(intervals):
    merged = merge_intervals(intervals)
    assert _is_sorted_disjoint(merged)
    for lo, hi in intervals:
        assert any(m[0] <= lo and hi <= m[1] for m in merged)


def test_erase_overlap_disjoint_needs_nothing():
    assert erase_overlap_intervals([[1, 2], [2, 3], [3, 4]]) == 0


def test_erase_overlap_identical_copies():
    intervals = [[1, 2]] * 4
    assert erase_overlap_intervals(intervals) == len(intervals) - 1


def test_erase_overlap_example():
    assert erase_overlap_intervals([[1, 2], [2, 3], [3, 4], [1, 3]]) == 1


def test_erase_overlap_empty():
    assert erase_overlap_intervals([]) == 0


def test_platforms_all_simultaneous():
    arrivals = [900, 900, 900]
    departures = [1000, 1000, 1000]
    assert min_platforms(arrivals, departures) == len(arrivals)


def test_platforms_equal_arrival_and_departure_needs_two():
    arrivals = [100, 200]
    departures = [200, 300]
    assert min_platforms(arrivals, departures) == len(arrivals)


def test_platforms_sequential_trains_share_one():
    arrivals = [300, 100, 500]
    departures = [400, 200, 600]
    assert min_platforms(arrivals, departures) == 1


def test_platforms_order_independent():
    arrivals = [900, 940, 950, 1100, 1500, 1800]
    departures = [910, 1200, 1120, 1130, 1900, 2000]
    forward = min_platforms(arrivals, departures)
    backward = min_platforms(arrivals[::-1], departures[::-1])
    assert forward == backward
    assert 1 <= forward <= len(arrivals)


def test_meetings_all_disjoint():
    starts = [1, 3, 5, 7]
    ends = [2, 4, 6, 8]
    assert max_meetings(starts, ends) == len(starts)


def test_meetings_touching_end_is_not_allowed():
    starts = [1, 2]
    ends = [2, 3]
    assert max_meetings(starts, ends) == 1


def test_meetings_empty():
    assert max_meetings([], []) == 0


def test_meetings_bounded_by_count():
    starts = [1, 3, 0, 5, 8, 5]
    ends = [2, 4, 6, 7, 9, 9]
    result = max_meetings(starts, ends)
    assert 1 <= result <= len(starts)
    assert result == max_meetings(starts[::-1], ends[::-1])