"""Articulation points of an undirected graph by depth-first search."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def find_articulation_points(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Return the articulation points of an undirected graph on vertices 0..n-1.

    Points are listed in the order the search discovers them. A non-root
    vertex is listed once for every child subtree it separates, so it may
    appear more than once; a root is listed at most once.
    """
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for edge in edges:
        u, v = edge[0], edge[1]
        for vertex in (u, v):
            if not 0 <= vertex < n:
                raise ValueError(f"vertex {vertex} is outside 0..{n - 1}")
        adjacency[u].append(v)
        adjacency[v].append(u)

    tin = [-1] * n
    low = [-1] * n
    points: list[int] = []
    timer = 0

    for root in range(n):
        if tin[root] != -1:
            continue
        tin[root] = low[root] = timer
        timer += 1
        root_children = 0
        stack = [(root, -1, iter(adjacency[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour == parent:
                    continue
                if tin[neighbour] == -1:
                    tin[neighbour] = low[neighbour] = timer
                    timer += 1
                    stack.append((neighbour, node, iter(adjacency[neighbour])))
                    break
                low[node] = min(low[node], tin[neighbour])
            else:
                stack.pop()
                if stack:
                    above, above_parent, _ = stack[-1]
                    low[above] = min(low[above], low[node])
                    if above_parent == -1:
                        root_children += 1
                    elif low[node] >= tin[above]:
                        points.append(above)
                elif root_children > 1:
                    points.append(root)
    return points