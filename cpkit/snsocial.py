"""Days until the largest value spreads over a grid through 8-neighbour steps."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

_NEIGHBOURS = (
    (0, 1),
    (0, -1),
    (1, 0),
    (-1, 0),
    (-1, 1),
    (-1, -1),
    (1, -1),
    (1, 1),
)


def spread_days(grid: Sequence[Sequence[int]]) -> int:
    """Return how many days the grid's maximum needs to reach every cell.

    Each day every cell holding the maximum passes it to its eight
    neighbours. An empty grid gives -1.
    """
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        return -1
    height, width = len(rows), len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")

    peak = max(max(row) for row in rows)
    frontier = [
        (i, j) for i, row in enumerate(rows) for j, value in enumerate(row) if value == peak
    ]
    seen = set(frontier)
    days = -1
    while frontier:
        days += 1
        following = []
        for i, j in frontier:
            for di, dj in _NEIGHBOURS:
                cell = (i + di, j + dj)
                if 0 <= cell[0] < height and 0 <= cell[1] < width and cell not in seen:
                    seen.add(cell)
                    following.append(cell)
        frontier = following
    return days


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases of ``n m`` and an n-by-m grid; print each answer."""
    parser = argparse.ArgumentParser(
        description="Days for the largest value to spread over each grid."
    )
    parser.add_argument("input", nargs="?", help="input file (default: stdin)")
    args = parser.parse_args(argv)

    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()

    tokens = iter(int(token) for token in text.split())
    grids = []
    try:
        cases = next(tokens)
        for _ in range(cases):
            n, m = next(tokens), next(tokens)
            grids.append([[next(tokens) for _ in range(m)] for _ in range(n)])
    except StopIteration:
        parser.error("input ended before all test cases were read")

    for grid in grids:
        print(spread_days(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())