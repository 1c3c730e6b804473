"""Fewest movement directions to forbid so a monster cannot leave a labyrinth."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations

_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _escapes(
    grid: Sequence[str], start: tuple[int, int], moves: Sequence[tuple[int, int]]
) -> bool:
    height, width = len(grid), len(grid[0])
    stack = [start]
    seen = {start}
    while stack:
        i, j = stack.pop()
        for di, dj in moves:
            x, y = i + di, j + dj
            if not (0 <= x < height and 0 <= y < width):
                continue
            if grid[x][y] == "#" or (x, y) in seen:
                continue
            if x in (0, height - 1) or y in (0, width - 1):
                return True
            seen.add((x, y))
            stack.append((x, y))
    return False


def _blocks_needed(grid: Sequence[str], start: tuple[int, int]) -> int:
    for count in range(len(_DIRECTIONS) + 1):
        for blocked in combinations(range(len(_DIRECTIONS)), count):
            moves = [d for k, d in enumerate(_DIRECTIONS) if k not in blocked]
            if not _escapes(grid, start, moves):
                return count
    return len(_DIRECTIONS)


def capture(labyrinth: Sequence[str]) -> int:
    """Return the fewest directions to forbid so some inner '^' cell is trapped.

    Walls are '#'. A monster escapes by reaching a non-wall border cell using
    only allowed directions. Returns -1 when no '^' lies off the border.
    """
    grid = list(labyrinth)
    if not grid or not grid[0]:
        return -1
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("labyrinth rows must all have the same length")
    height = len(grid)

    best = None
    for i in range(1, height - 1):
        for j in range(1, width - 1):
            if grid[i][j] == "^":
                needed = _blocks_needed(grid, (i, j))
                best = needed if best is None else min(best, needed)
    return -1 if best is None else best