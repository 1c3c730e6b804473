"""Minimum spanning trees with Kruskal's algorithm."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        self.parent = list(range(n))
        self.rank = [1] * n
        self.forests = n

    def find(self, u: int) -> int:
        """Return the representative of ``u``'s set."""
        root = u
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[u] != root:
            self.parent[u], u = root, self.parent[u]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already joined."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return False
        if self.rank[x] > self.rank[y]:
            x, y = y, x
        self.parent[x] = y
        if self.rank[x] == self.rank[y]:
            self.rank[y] += 1
        self.forests -= 1
        return True


def kruskal(
    n: int, edges: Iterable[tuple[int, int, int]]
) -> tuple[int, list[tuple[int, int, int]]]:
    """Return (total cost, chosen edges) of a minimum spanning forest.

    Edges are ``(u, v, cost)`` with vertices numbered from 0.
    """
    edge_list = list(edges)
    for u, v, _ in edge_list:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) is out of range for {n} vertices")
    components = DisjointSet(n)
    chosen = [edge for edge in sorted(edge_list, key=lambda e: e[2]) if components.union(edge[0], edge[1])]
    return sum(cost for _, _, cost in chosen), chosen


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n m`` and ``m`` 1-based edges and print the spanning tree cost."""
    parser = argparse.ArgumentParser(description="Minimum spanning tree cost.")
    parser.add_argument("input", nargs="?", help="input file (default: stdin)")
    args = parser.parse_args(argv)

    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    numbers = [int(token) for token in text.split()]
    if len(numbers) < 2:
        parser.error("expected the vertex and edge counts")
    n, m = numbers[0], numbers[1]
    body = numbers[2:]
    if len(body) < 3 * m:
        parser.error(f"expected {m} edges")
    edges = [(body[i] - 1, body[i + 1] - 1, body[i + 2]) for i in range(0, 3 * m, 3)]

    try:
        cost, _ = kruskal(n, edges)
    except ValueError as exc:
        parser.error(str(exc))
    print(cost)
    return 0


if __name__ == "__main__":
    sys.exit(main())