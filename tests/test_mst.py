import pytest

from cpkit.mst import DisjointSet, kruskal, main

EDGES = [(0, 1, 7), (0, 3, 5), (1, 2, 8), (1, 3, 9), (1, 4, 7), (2, 4, 5), (3, 4, 15)]


def test_union_joins_sets_once():
    sets = DisjointSet(4)
    assert sets.union(0, 1) is True
    assert sets.union(1, 0) is False
    assert sets.find(0) == sets.find(1)
    assert sets.find(2) != sets.find(0)
    assert sets.forests == 3


def test_union_chain_collapses_to_one_forest():
    sets = DisjointSet(5)
    for a, b in zip(range(4), range(1, 5)):
        assert sets.union(a, b)
    assert sets.forests == 1
    assert len({sets.find(v) for v in range(5)}) == 1


def test_kruskal_spans_connected_graph():
    cost, chosen = kruskal(5, EDGES)
    assert len(chosen) == 4
    assert cost == sum(c for _, _, c in chosen)
    check = DisjointSet(5)
    for u, v, _ in chosen:
        assert check.union(u, v)
    assert check.forests == 1


def test_kruskal_picks_cheapest_triangle_edges():
    cost, chosen = kruskal(3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)])
    assert cost == 3
    assert (0, 2, 3) not in chosen


def test_kruskal_on_disconnected_graph_builds_forest():
    cost, chosen = kruskal(4, [(0, 1, 2), (2, 3, 6)])
    assert len(chosen) == 2
    assert cost == 8


def test_kruskal_rejects_bad_vertex():
    with pytest.raises(ValueError):
        kruskal(2, [(0, 2, 1)])


def test_main_prints_cost(tmp_path, capsys):
    lines = [f"5 {len(EDGES)}"] + [f"{u + 1} {v + 1} {c}" for u, v, c in EDGES]
    source = tmp_path / "graph.txt"
    source.write_text("\n".join(lines) + "\n", encoding="utf-8")
    assert main([str(source)]) == 0
    expected, _ = kruskal(5, EDGES)
    assert capsys.readouterr().out.strip() == str(expected)