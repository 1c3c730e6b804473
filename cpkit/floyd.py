"""All-pairs path computations on adjacency matrices."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from itertools import chain

INF = 10**9
"""Marks a missing edge; larger than any real path length."""

Matrix = list[list[int]]


def _copy(matrix: Sequence[Sequence[int]]) -> Matrix:
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("adjacency matrix must be square")
    return rows


def _relax(matrix: Sequence[Sequence[int]], step: Callable[[int, int, int], int]) -> Matrix:
    result = _copy(matrix)
    for k, krow in enumerate(result):
        for row in result:
            for j, kj in enumerate(krow):
                row[j] = step(row[j], row[k], kj)
    return result


def floyd_warshall(matrix: Sequence[Sequence[int]]) -> tuple[Matrix, Matrix]:
    """Return (distances, via) for a matrix using ``INF`` for missing edges.

    The diagonal should be zero. ``via[i][j]`` is the intermediate vertex of
    the best i-j path, or -1 when the direct edge is best.
    """
    dist = _copy(matrix)
    size = len(dist)
    via = [[-1] * size for _ in range(size)]
    for k, krow in enumerate(dist):
        for row, via_row in zip(dist, via):
            for j, kj in enumerate(krow):
                ik = row[k]
                if ik < INF and kj < INF and ik + kj < row[j]:
                    row[j] = ik + kj
                    via_row[j] = k
    return dist, via


def build_path(path: Sequence[Sequence[int]], src: int, dest: int) -> list[int]:
    """Return the vertices from ``src`` to ``dest`` using a ``via`` matrix."""
    if src == dest:
        return [src]
    middle = path[src][dest]
    if middle == -1:
        return [src, dest]
    return build_path(path, src, middle)[:-1] + build_path(path, middle, dest)


def transitive_closure(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return the reachability matrix of a 0/1 adjacency matrix."""
    return _relax(matrix, lambda cur, ik, kj: cur | (ik & kj))


def minimax(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return, per pair, the smallest possible largest edge along a path."""
    return _relax(matrix, lambda cur, ik, kj: min(cur, max(ik, kj)))


def maximin(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return, per pair, the largest possible smallest edge along a path."""
    return _relax(matrix, lambda cur, ik, kj: max(cur, min(ik, kj)))


def longest_path_dag(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Relax a DAG's matrix with the max-of-min rule used by ``maximin``."""
    return _relax(matrix, lambda cur, ik, kj: max(cur, min(ik, kj)))


def count_paths(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return path counts for a 0/1 adjacency matrix of a DAG."""
    return _relax(matrix, lambda cur, ik, kj: cur + ik * kj)


def has_negative_cycle(matrix: Sequence[Sequence[int]]) -> bool:
    """Tell whether a distance matrix has a negative diagonal entry."""
    return any(row[i] < 0 for i, row in enumerate(matrix))


def is_affected_by_negative_cycle(
    matrix: Sequence[Sequence[int]], src: int, dest: int
) -> bool:
    """Tell whether a negative cycle lies on some path from src to dest."""
    return any(
        row[k] < 0 and matrix[src][k] < INF and row[dest] < INF
        for k, row in enumerate(matrix)
    )


def graph_diameter(matrix: Sequence[Sequence[int]]) -> int:
    """Return the longest of all finite shortest-path lengths (at least 0)."""
    dist, _ = floyd_warshall(matrix)
    return max(chain([0], (d for row in dist for d in row if d < INF)))


def condensation(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return the component graph of a closed (all-pairs) reachability matrix.

    Vertices i and j share a component when each reaches the other.
    """
    rows = _copy(matrix)
    component = [-1] * len(rows)
    count = 0
    for i, row in enumerate(rows):
        if component[i] != -1:
            continue
        component[i] = count
        count += 1
        for j, value in enumerate(row):
            if value < INF and rows[j][i] < INF:
                component[j] = component[i]
    graph = [[0] * count for _ in range(count)]
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            if value < INF:
                graph[component[i]][component[j]] = 1
    return graph