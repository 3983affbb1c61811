"""Puzzles over lists of numbers and digit strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def cancelled_trains(bottom: Iterable[int], left: Iterable[int]) -> int:
    """Number of trains from ``left`` that share a number with a train in ``bottom``."""
    starts = set(bottom)
    return sum(1 for x in left if x in starts)


def gift_givers(receivers: list[int]) -> list[int]:
    """For each friend ``1..n``, the friend who gave them a gift."""
    n = len(receivers)
    if sorted(receivers) != list(range(1, n + 1)):
        raise ValueError("receivers must be a permutation of 1..n")
    givers = [0] * n
    for giver, receiver in enumerate(receivers, start=1):
        givers[receiver - 1] = giver
    return givers


def tower_stats(heights: Iterable[int]) -> tuple[int, int]:
    """Height of the tallest tower and number of towers built from equal bars."""
    counts = Counter(heights)
    return max(counts.values(), default=0), len(counts)


def tram_capacity(stops: Iterable[tuple[int, int]]) -> int:
    """Smallest capacity that holds every passenger over ``(exit, enter)`` stops."""
    current = 0
    best = 0
    for leaving, entering in stops:
        current += entering - leaving
        best = max(best, current)
    return best


def twins_min_coins(coins: Iterable[int]) -> int:
    """Fewest coins whose sum is strictly more than half of the total (floored)."""
    ordered = sorted(coins, reverse=True)
    half = sum(ordered) // 2
    taken = 0
    count = 0
    for coin in ordered:
        if taken > half:
            break
        taken += coin
        count += 1
    return count


def remainder_operations(digits: str, y: int, x: int) -> int:
    """Digit flips needed so that the number mod ``10**y`` equals ``10**x``."""
    if not 0 <= x < y < len(digits):
        raise ValueError("need 0 <= x < y < len(digits)")
    target = "0" * (y - x - 1) + "1" + "0" * x
    return sum(a != b for a, b in zip(digits[-y:], target))