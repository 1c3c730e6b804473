"""Counting distinct outcomes of rolling a set of dice."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate


def count_formations(sides: Iterable[int]) -> int:
    """Return how many distinct multisets of values the dice can show.

    A die with ``s`` sides shows a value from 1 to ``s``; dice are
    indistinguishable once rolled, so only the sorted values matter.
    """
    ways = [1]
    for side in sorted(sides):
        if not ways:
            return 0
        prefix = list(accumulate(ways))
        length = max(side, 0)
        prefix.extend([prefix[-1]] * max(0, length - len(prefix)))
        ways = prefix[:length]
    return sum(ways)