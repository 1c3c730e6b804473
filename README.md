# cpkit

Graph algorithms, angle helpers and solutions to a few well-known
programming-contest problems, written as plain Python functions. No
third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Graphs

### `cpkit.dijkstra`

- `dijkstra(n, edges, source)`: shortest paths from `source` over an
  undirected graph with vertices `0 .. n-1`. Each edge is `(u, v, w)`.
  Returns `(distances, parents)`; unreachable vertices have the distance
  `INF` (2 000 000 000), and the source and unreachable vertices have the
  parent `None`. A vertex out of range raises `ValueError`.
- `path_to(parents, target)`: the vertices from the root of the shortest-path
  tree down to `target`.

### `cpkit.floyd`

All functions take a square adjacency matrix (a list of lists) and return new
matrices; the input is left unchanged. A non-square matrix raises
`ValueError`. Missing edges are marked with `INF` (10**9).

- `floyd_warshall(matrix)`: returns `(distances, via)`, where `via[i][j]` is
  the intermediate vertex of the best path, or -1 when the direct edge is
  best. The diagonal should be zero.
- `build_path(via, src, dest)`: the list of vertices from `src` to `dest`
  rebuilt from a `via` matrix.
- `transitive_closure(matrix)`: reachability of a 0/1 matrix.
- `minimax(matrix)`: per pair, the smallest possible largest edge on a path.
- `maximin(matrix)`: per pair, the largest possible smallest edge on a path.
- `longest_path_dag(matrix)`: relaxes the matrix with the same max-of-min rule
  as `maximin`.
- `count_paths(matrix)`: number of paths between each pair in a 0/1 DAG
  matrix.
- `has_negative_cycle(dist)`: whether any diagonal entry is negative.
- `is_affected_by_negative_cycle(dist, src, dest)`: whether a vertex on a
  negative cycle is reachable from `src` and reaches `dest`.
- `graph_diameter(matrix)`: the largest finite shortest-path length (0 if
  there is none).
- `condensation(matrix)`: given an all-pairs (closed) reachability or
  distance matrix, the 0/1 adjacency matrix of its strongly connected
  components.

### `cpkit.mst`

- `DisjointSet(n)`: union-find with path compression and union by rank;
  `find(u)`, `union(x, y)` (returns `False` if already joined) and the
  `forests` count of remaining sets.
- `kruskal(n, edges)`: minimum spanning forest of `(u, v, cost)` edges with
  0-based vertices; returns `(total_cost, chosen_edges)`.

## Angles

`cpkit.angles` has `to_radians(degrees)`, `to_degrees(radians)` (a negative
angle is shifted up by a full turn first) and `minutes_to_degrees(minutes)`:

```python
from cpkit.angles import to_radians, to_degrees

to_radians(180)                # 3.141592653589793
to_degrees(3.141592653589793)  # 180.0
```

## Contest problems

| Module | Function | Problem |
| --- | --- | --- |
| `cpkit.snsocial` | `spread_days(grid)` | CodeChef SNSOCIAL |
| `cpkit.cage_the_monster` | `capture(labyrinth)` | TopCoder CageTheMonster |
| `cpkit.dice_games` | `count_formations(sides)` | TopCoder DiceGames |
| `cpkit.match_numbers` | `max_number(matches, n)` | TopCoder MatchNumbersEasy |
| `cpkit.unseal_the_safe` | `count_passwords(n)` | TopCoder UnsealTheSafe |

- `spread_days(grid)`: days for the grid's largest value to reach every cell
  when it spreads to all eight neighbours each day; -1 for an empty grid.
- `capture(labyrinth)`: fewest of the four movement directions to forbid so
  that some inner `'^'` cell cannot reach a non-wall border cell; walls are
  `'#'`; -1 when no `'^'` lies off the border.
- `count_formations(sides)`: number of distinct multisets of values a set of
  dice can show.
- `max_number(matches, n)`: the largest number whose digits cost at most `n`
  matches, digit `i` costing `matches[i]`; an all-zero number is `"0"`, and
  `""` means nothing is affordable.
- `count_passwords(n)`: number of `n`-key passwords on a phone keypad where
  each key is next to the previous one; `n` below 1 raises `ValueError`.

## Command-line tools

Each command reads from the file given as its argument, or from standard
input:

```
cpkit-dijkstra graph.txt
cpkit-dijkstra --target 3 < graph.txt
cpkit-mst < graph.txt
cpkit-snsocial < cases.txt
```

- `cpkit-dijkstra`: input `n m` then `m` triples `u v w` (0-based vertices).
  Prints `vertex , distance` for every vertex from vertex 0, then the path
  from `--target` (default 4) back to vertex 0.
- `cpkit-mst`: input `n m` then `m` triples `u v cost` (1-based vertices).
  Prints the total cost of a minimum spanning forest.
- `cpkit-snsocial`: input the number of test cases, then for each one `n m`
  and an `n` by `m` grid. Prints `spread_days` for each grid.