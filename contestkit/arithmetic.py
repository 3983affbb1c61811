"""Small closed-form arithmetic puzzles."""

from __future__ import annotations


def remaining_oranges(total: int, ali: int, ahmed: int) -> int:
    """Oranges left after Ali and Ahmed take their share."""
    return total - (ali + ahmed)


def alloy_kind(a: int, b: int) -> str:
    """Classify a mix of ``a`` grams of gold and ``b`` grams of silver."""
    if b == 0:
        return "Gold"
    if a == 0:
        return "Silver"
    return "Alloy"


def cabbage_cost(n: int, a: int, x: int, y: int) -> int:
    """Cost of ``n`` cabbages: the first ``a`` cost ``x`` each, the rest ``y``."""
    if n <= a:
        return n * x
    return a * x + (n - a) * y


def count_between(a: int, b: int) -> int:
    """Number of integers in the closed range ``[a, b]``."""
    if a > b:
        return 0
    return b - a + 1


def div_count(n: int) -> int:
    """Answer to the DIV puzzle for ``n``: always ``n - 1``."""
    return n - 1


def difference_max(a: int, b: int, c: int, d: int) -> int:
    """Largest ``p - q`` with ``p`` in ``{a, b}`` and ``q`` in ``{c, d}``."""
    return max(a, b) - min(c, d)


def k_city_blocks(n: int, m: int) -> int:
    """Blocks enclosed by ``n`` east-west and ``m`` north-south streets."""
    return (n - 1) * (m - 1)


def binary_to_decimal(digits: str) -> int:
    """Value of a binary digit string; any character other than ``1`` counts as zero."""
    value = 0
    for ch in digits:
        value = value * 2 + (ch == "1")
    return value


_POWERS_OF_TWO = tuple(1 << i for i in range(32))


def tricky_sum(n: int) -> int:
    """Sum of ``1..n`` where every power of two is taken with a minus sign."""
    total = n * (n + 1) // 2
    powers = sum(p for p in _POWERS_OF_TWO if p <= n)
    return total - 2 * powers