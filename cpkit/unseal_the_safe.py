"""Counting passwords typed by moving between adjacent keys of a keypad."""

from __future__ import annotations

_KEYPAD = ("123", "456", "789", "0")


def _adjacency() -> dict[str, list[str]]:
    positions = {
        (row, column): key
        for row, keys in enumerate(_KEYPAD)
        for column, key in enumerate(keys)
    }
    return {
        key: [
            positions[(row + dr, column + dc)]
            for dr, dc in ((-1, 0), (0, -1), (1, 0), (0, 1))
            if (row + dr, column + dc) in positions
        ]
        for (row, column), key in positions.items()
    }


_ADJACENT = _adjacency()


def count_passwords(n: int) -> int:
    """Return how many ``n``-key passwords step only between adjacent keys."""
    if n < 1:
        raise ValueError("a password has at least one key")
    counts = dict.fromkeys(_ADJACENT, 1)
    for _ in range(n - 1):
        counts = {
            key: sum(counts[neighbour] for neighbour in neighbours)
            for key, neighbours in _ADJACENT.items()
        }
    return sum(counts.values())