"""Assorted greedy algorithms."""

from __future__ import annotations

from collections.abc import Sequence

DENOMINATIONS = (1, 2, 5, 10, 20, 50, 100, 200, 500, 1000)


def assign_cookies(greed: Sequence[int], sizes: Sequence[int]) -> int:
    """Most children content when each gets one cookie at least as big as their greed."""
    children = sorted(greed)
    content = 0
    for size in sorted(sizes):
        if content == len(children):
            break
        if children[content] <= size:
            content += 1
    return content


def fractional_knapsack(values: Sequence[int], weights: Sequence[int], capacity: int) -> float:
    """Greatest value fitting in ``capacity`` when items may be taken in part."""
    items = sorted(
        ((value / weight, value, weight) for value, weight in zip(values, weights)),
        key=lambda item: item[0],
        reverse=True,
    )
    total = 0.0
    for ratio, value, weight in items:
        if capacity <= 0:
            break
        if weight < capacity:
            total += value
            capacity -= weight
        else:
            total += ratio * capacity
            capacity = 0
    return total


def job_sequencing(deadlines: Sequence[int], profits: Sequence[int]) -> tuple[int, int]:
    """Schedule jobs into latest free unit slots, in ascending order of profit.

    Returns the number of jobs scheduled and their total profit.
    """
    if not deadlines:
        return 0, 0
    max_deadline = max(deadlines)
    taken = [False] * max_deadline
    count = total = 0
    blocked = None
    for profit, deadline in sorted(zip(profits, deadlines)):
        if blocked is not None and deadline <= blocked:
            continue
        slot = next(
            (t for t in range(min(deadline, max_deadline) - 1, -1, -1) if not taken[t]),
            None,
        )
        if slot is None:
            blocked = deadline if blocked is None else max(blocked, deadline)
        else:
            taken[slot] = True
            count += 1
            total += profit
    return count, total


def can_jump(nums: Sequence[int]) -> bool:
    """Whether the last index is reachable when ``nums[i]`` is the longest jump from ``i``."""
    reach = 0
    for i, step in enumerate(nums):
        if i > reach:
            return False
        reach = max(reach, i + step)
    return True


def min_jumps(nums: Sequence[int]) -> int:
    """Fewest jumps to reach the last index.

    Raises ValueError if the last index cannot be reached.
    """
    jumps = 0
    left = right = 0
    last = len(nums) - 1
    while right < last:
        farthest = max(i + nums[i] for i in range(left, right + 1))
        if farthest <= right:
            raise ValueError("the last index cannot be reached")
        left, right = right + 1, farthest
        jumps += 1
    return jumps


def lemonade_change(bills: Sequence[int]) -> bool:
    """Whether every customer paying 5, 10 or 20 for a 5 lemonade gets correct change."""
    fives = tens = 0
    for bill in bills:
        if bill == 5:
            fives += 1
        elif bill == 10:
            if not fives:
                return False
            fives -= 1
            tens += 1
        elif fives and tens:
            fives -= 1
            tens -= 1
        elif fives >= 3:
            fives -= 3
        else:
            return False
    return True


def min_coin_change(amount: int) -> list[int]:
    """Coins making up ``amount``, largest first, taken greedily from DENOMINATIONS."""
    coins: list[int] = []
    for coin in reversed(DENOMINATIONS):
        count, amount = divmod(amount, coin) if amount >= coin else (0, amount)
        coins.extend([coin] * count)
    return coins


def average_waiting_time(burst_times: Sequence[int]) -> int:
    """Average waiting time, truncated, under shortest-job-first scheduling."""
    if not burst_times:
        raise ValueError("no processes to schedule")
    waited = elapsed = 0
    for burst in sorted(burst_times):
        waited += elapsed
        elapsed += burst
    return waited // len(burst_times)


def check_valid_string(s: str) -> bool:
    """Whether ``s`` of '(', ')' and '*' can be balanced, '*' standing for '(', ')' or nothing."""
    low = high = 0
    for ch in s:
        if ch == "(":
            low += 1
            high += 1
        elif ch == ")":
            low -= 1
            high -= 1
        else:
            low -= 1
            high += 1
        low = max(low, 0)
        if high < 0:
            return False
    return low == 0


def distribute_candy(ratings: Sequence[int]) -> int:
    """Fewest candies so each child gets one and outranks lower-rated neighbours."""
    if not ratings:
        return 0
    candies = [1] * len(ratings)
    for i in range(1, len(ratings)):
        if ratings[i] > ratings[i - 1]:
            candies[i] = candies[i - 1] + 1
    for i in range(len(ratings) - 2, -1, -1):
        if ratings[i] > ratings[i + 1]:
            candies[i] = max(candies[i], candies[i + 1] + 1)
    return sum(candies)