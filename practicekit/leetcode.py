"""Small array exercises: stock profit and sorted de-duplication."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby, pairwise


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from unlimited buy/sell transactions over ``prices``."""
    total = 0
    for previous, current in pairwise(prices):
        total += max(current - previous, 0)
    return total


def max_profit_windows(prices: Sequence[int]) -> int:
    """Same as :func:`max_profit`, written as a single sum over windows."""
    return sum(max(b - a, 0) for a, b in pairwise(prices))


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list in place; return the count of distinct values.

    The first returned-count items hold the distinct values in order; the
    rest of the list is left as it was.
    """
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)