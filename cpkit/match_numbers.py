"""Largest number that can be laid out with a limited supply of matches."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cache


def _rank(number: str) -> tuple[int, str]:
    return len(number), number


def max_number(matches: Sequence[int], n: int) -> str:
    """Return the largest number whose digits cost at most ``n`` matches.

    Digit ``i`` costs ``matches[i]``. A number made only of zeros is "0";
    an empty string means no digit is affordable.
    """
    costs = tuple(matches)
    if any(cost <= 0 for cost in costs):
        raise ValueError("every digit must cost at least one match")

    @cache
    def best(index: int, remaining: int) -> str:
        if index == len(costs) or remaining <= 0:
            return ""
        skip = best(index + 1, remaining)
        take = ""
        if costs[index] <= remaining:
            digits = str(index) + best(index, remaining - costs[index])
            take = "".join(sorted(digits, reverse=True))
            if take.startswith("0"):
                take = "0"
        return max(skip, take, key=_rank)

    return best(0, n)