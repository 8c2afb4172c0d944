"""Traversals and connectivity queries on undirected graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def _undirected_adjacency(v: int, edges: Sequence[Sequence[int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(v)]
    for a, b, *_ in edges:
        adj[a].append(b)
        adj[b].append(a)
    return adj


def bfs(adj: Sequence[Sequence[int]]) -> list[int]:
    """Breadth-first order of the vertices reachable from vertex 0."""
    if not adj:
        return []
    visited = [False] * len(adj)
    visited[0] = True
    queue = deque([0])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adj[node]:
            if not visited[nxt]:
                visited[nxt] = True
                queue.append(nxt)
    return order


def dfs(adj: Sequence[Sequence[int]]) -> list[int]:
    """Depth-first preorder of every vertex, starting new trees in index order."""
    visited = [False] * len(adj)
    order: list[int] = []
    for start in range(len(adj)):
        if visited[start]:
            continue
        visited[start] = True
        order.append(start)
        stack = [iter(adj[start])]
        while stack:
            for nxt in stack[-1]:
                if not visited[nxt]:
                    visited[nxt] = True
                    order.append(nxt)
                    stack.append(iter(adj[nxt]))
                    break
            else:
                stack.pop()
    return order


def connected_components(v: int, edges: Sequence[Sequence[int]]) -> list[list[int]]:
    """Components of an undirected graph, each in stack-based visiting order."""
    adj = _undirected_adjacency(v, edges)
    visited = [False] * v
    components: list[list[int]] = []
    for start in range(v):
        if visited[start]:
            continue
        visited[start] = True
        stack = [start]
        component: list[int] = []
        while stack:
            node = stack.pop()
            component.append(node)
            for nxt in adj[node]:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append(nxt)
        components.append(component)
    return components


def is_bipartite(adj: Sequence[Sequence[int]]) -> bool:
    """Whether the graph's vertices can be two-coloured with no edge inside a colour."""
    colour: list[int | None] = [None] * len(adj)
    for start in range(len(adj)):
        if colour[start] is not None:
            continue
        colour[start] = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for nxt in adj[node]:
                if colour[nxt] is None:
                    colour[nxt] = 1 - colour[node]
                    queue.append(nxt)
                elif colour[nxt] == colour[node]:
                    return False
    return True


def has_undirected_cycle(v: int, edges: Sequence[Sequence[int]]) -> bool:
    """Whether an undirected graph with ``v`` vertices contains a cycle."""
    adj = _undirected_adjacency(v, edges)
    visited = [False] * v
    for start in range(v):
        if visited[start]:
            continue
        visited[start] = True
        queue: deque[tuple[int, int]] = deque([(start, -1)])
        while queue:
            node, parent = queue.popleft()
            for nxt in adj[node]:
                if not visited[nxt]:
                    visited[nxt] = True
                    queue.append((nxt, node))
                elif nxt != parent:
                    return True
    return False


def count_provinces(is_connected: Sequence[Sequence[int]]) -> int:
    """Number of connected groups in an adjacency matrix."""
    size = len(is_connected)
    visited = [False] * size
    provinces = 0
    for start in range(size):
        if visited[start]:
            continue
        provinces += 1
        visited[start] = True
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for other, linked in enumerate(is_connected[node]):
                if other != node and linked and not visited[other]:
                    visited[other] = True
                    queue.append(other)
    return provinces