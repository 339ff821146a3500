import random

import pytest

from patternkit.articulation import find_articulation_points


def _components(n, edges, removed=None):
    adjacency = {v: set() for v in range(n) if v != removed}
    for u, v in edges:
        if removed in (u, v):
            continue
        adjacency[u].add(v)
        adjacency[v].add(u)
    seen = set()
    count = 0
    for start in adjacency:
        if start in seen:
            continue
        count += 1
        frontier = [start]
        seen.add(start)
        while frontier:
            current = frontier.pop()
            for nxt in adjacency[current]:
                if nxt not in seen:
                    seen.add(nxt)
                    frontier.append(nxt)
    return count


def _cut_vertices(n, edges):
    base = _components(n, edges)
    return {
        v
        for v in range(n)
        if _components(n, edges, removed=v) > base - (1 if _isolated(v, edges) else 0)
    }


def _isolated(v, edges):
    return all(v not in edge for edge in edges)


def test_worked_example():
    edges = [[0, 1], [1, 2], [2, 0], [1, 3], [3, 4]]
    assert find_articulation_points(5, edges) == [3, 1]


def test_cycle_has_no_cut_vertex():
    edges = [(i, (i + 1) % 6) for i in range(6)]
    assert find_articulation_points(6, edges) == []


def test_no_vertices():
    assert find_articulation_points(0, []) == []


def test_vertex_out_of_range():
    with pytest.raises(ValueError):
        find_articulation_points(3, [(0, 3)])


def test_negative_vertex_rejected():
    with pytest.raises(ValueError):
        find_articulation_points(3, [(-1, 0)])


def test_every_internal_path_vertex_is_cut():
    n = 7
    edges = [(i, i + 1) for i in range(n - 1)]
    assert set(find_articulation_points(n, edges)) == set(range(1, n - 1))


def test_random_graphs_match_brute_force():
    rng = random.Random(42)
    for _ in range(150):
        n = rng.randint(1, 9)
        pairs = [(u, v) for u in range(n) for v in range(u + 1, n)]
        edges = [p for p in pairs if rng.random() < 0.3]
        assert set(find_articulation_points(n, edges)) == _cut_vertices(n, edges)


def test_long_path_does_not_hit_recursion_limit():
    n = 5000
    edges = [(i, i + 1) for i in range(n - 1)]
    assert len(set(find_articulation_points(n, edges))) == n - 2