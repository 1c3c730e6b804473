"""Single-source shortest paths on an undirected weighted graph."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections.abc import Iterable, Sequence

INF = 2_000_000_000
"""Distance reported for vertices that cannot be reached."""

_NO_PARENT = -1


def _check_vertex(vertex: int, n: int) -> None:
    if not 0 <= vertex < n:
        raise ValueError(f"vertex {vertex} is out of range for {n} vertices")


def dijkstra(
    n: int, edges: Iterable[tuple[int, int, int]], source: int
) -> tuple[list[int], list[int | None]]:
    """Return (distances, parents) from ``source`` over undirected ``edges``.

    Each edge is ``(u, v, w)`` and may be walked both ways. Unreachable
    vertices keep the distance ``INF``; the source and unreachable vertices
    have the parent ``None``.
    """
    _check_vertex(source, n)
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, w in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        adjacency[u].append((v, w))
        adjacency[v].append((u, w))

    dist = [INF] * n
    parents: list[int | None] = [None] * n
    dist[source] = 0
    heap = [(0, source, _NO_PARENT)]
    while heap:
        d, node, via = heapq.heappop(heap)
        if d > dist[node]:
            continue
        parents[node] = None if via == _NO_PARENT else via
        for neighbour, weight in adjacency[node]:
            candidate = dist[node] + weight
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour, node))
    return dist, parents


def path_to(parents: Sequence[int | None], target: int) -> list[int]:
    """Return the vertices from the tree root down to ``target``."""
    path = []
    node: int | None = target
    while node is not None:
        path.append(node)
        node = parents[node]
    path.reverse()
    return path


def _read_ints(stream) -> list[int]:
    return [int(token) for token in stream.read().split()]


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n m`` and ``m`` edges, print distances from 0 and a path back."""
    parser = argparse.ArgumentParser(
        description="Shortest distances from vertex 0 of an undirected graph."
    )
    parser.add_argument("input", nargs="?", help="input file (default: stdin)")
    parser.add_argument(
        "--target", type=int, default=4, help="vertex whose path is printed"
    )
    args = parser.parse_args(argv)

    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            numbers = _read_ints(handle)
    else:
        numbers = _read_ints(sys.stdin)

    if len(numbers) < 2:
        parser.error("expected the vertex and edge counts")
    n, m = numbers[0], numbers[1]
    body = numbers[2:]
    if len(body) < 3 * m:
        parser.error(f"expected {m} edges")
    edges = [tuple(body[i : i + 3]) for i in range(0, 3 * m, 3)]
    if not 0 <= args.target < n:
        parser.error(f"target {args.target} is out of range for {n} vertices")

    try:
        dist, parents = dijkstra(n, edges, 0)
    except ValueError as exc:
        parser.error(str(exc))

    for vertex, distance in enumerate(dist):
        print(f"{vertex} , {distance}")
    sys.stdout.write("".join(f"{v} " for v in reversed(path_to(parents, args.target))))
    return 0


if __name__ == "__main__":
    sys.exit(main())