"""Height of a tree given as an undirected edge list, found by BFS."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Hashable, Iterable


def build_adjacency(
    edges: Iterable[tuple[Hashable, Hashable]],
) -> dict[Hashable, list[Hashable]]:
    """Build an undirected adjacency list in edge order."""
    adjacency: defaultdict[Hashable, list[Hashable]] = defaultdict(list)
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    return dict(adjacency)


def height(edges: Iterable[tuple[Hashable, Hashable]], source: Hashable) -> int:
    """Return the largest BFS level reached from ``source``."""
    adjacency = build_adjacency(edges)
    level = {source: 0}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in adjacency.get(u, ()):
            if v not in level:
                level[v] = level[u] + 1
                queue.append(v)
    return max(level.values())