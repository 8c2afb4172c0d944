"""Topological orderings and cycle queries on directed graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _directed_adjacency(v: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(v)]
    for src, dst, *_ in edges:
        adj[src].append(dst)
    return adj


def _kahn(adj: Sequence[Sequence[int]]) -> list[int]:
    """Kahn's algorithm; the result is shorter than ``adj`` when there is a cycle."""
    indegree = [0] * len(adj)
    for targets in adj:
        for nxt in targets:
            indegree[nxt] += 1
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adj[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    return order


def alien_order(words: Sequence[str]) -> str:
    """Letter order implied by a sorted alien dictionary, or "" if none exists."""
    present = sorted({ch for word in words for ch in word})
    adj: dict[str, list[str]] = {ch: [] for ch in present}
    for first, second in zip(words, words[1:]):
        for a, b in zip(first, second):
            if a != b:
                adj[a].append(b)
                break
        else:
            if len(first) > len(second):
                return ""
    indegree = dict.fromkeys(present, 0)
    for targets in adj.values():
        for nxt in targets:
            indegree[nxt] += 1
    queue = deque(ch for ch in present if indegree[ch] == 0)
    order: list[str] = []
    while queue:
        ch = queue.popleft()
        order.append(ch)
        for nxt in adj[ch]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    return "".join(order) if len(order) == len(present) else ""


def course_order(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """An order in which to take every course, or [] if impossible.

    Each prerequisite ``[a, b]`` means course ``b`` must come before ``a``.
    """
    adj: list[list[int]] = [[] for _ in range(num_courses)]
    for course, required, *_ in prerequisites:
        adj[required].append(course)
    order = _kahn(adj)
    return order if len(order) == num_courses else []


def has_directed_cycle(v: int, edges: Sequence[Sequence[int]]) -> bool:
    """Whether a directed graph with ``v`` vertices contains a cycle."""
    if not edges:
        return False
    adj = _directed_adjacency(v, edges)
    visited = [False] * v
    on_path = [False] * v
    for start in range(v):
        if visited[start]:
            continue
        visited[start] = on_path[start] = True
        stack = [(start, iter(adj[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if on_path[nxt]:
                    return True
                if not visited[nxt]:
                    visited[nxt] = on_path[nxt] = True
                    stack.append((nxt, iter(adj[nxt])))
                    break
            else:
                on_path[node] = False
                stack.pop()
    return False


def eventual_safe_nodes(graph: Sequence[Sequence[int]]) -> list[int]:
    """Sorted vertices from which every path ends at a terminal vertex."""
    unvisited, safe_state, in_progress = 0, 1, 2
    state = [unvisited] * len(graph)
    safe: list[int] = []
    for start in range(len(graph)):
        if state[start] != unvisited:
            continue
        state[start] = in_progress
        stack = [(start, iter(graph[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if state[nxt] == in_progress:
                    # Everything on the current path leads into a cycle.
                    stack.clear()
                    break
                if state[nxt] == unvisited:
                    state[nxt] = in_progress
                    stack.append((nxt, iter(graph[nxt])))
                    break
            else:
                state[node] = safe_state
                safe.append(node)
                stack.pop()
    return sorted(safe)


def kahn_topo_sort(v: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Topological order by Kahn's algorithm; partial if the graph has a cycle."""
    if not v:
        return []
    return _kahn(_directed_adjacency(v, edges))


def dfs_topo_sort(v: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Topological order by reversed depth-first finishing times."""
    if not v:
        return []
    adj = _directed_adjacency(v, edges)
    visited = [False] * v
    finished: list[int] = []
    for start in range(v):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adj[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, iter(adj[nxt])))
                    break
            else:
                finished.append(node)
                stack.pop()
    finished.reverse()
    return finished


def can_finish_tasks(n: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Whether all ``n`` tasks can be ordered; each pair ``(u, v)`` puts u before v."""
    return len(_kahn(_directed_adjacency(n, prerequisites))) == n