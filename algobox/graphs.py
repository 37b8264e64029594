"""Graph routines: bridges, shortest paths, breadth-first order and reachability."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence
from itertools import combinations


class Graph:
    """An undirected graph over the vertices ``0 .. num_vertices - 1``."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.num_vertices = num_vertices
        self._adjacency: list[list[int]] = [[] for _ in range(num_vertices)]

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise ValueError(f"vertex {vertex} is outside 0..{self.num_vertices - 1}")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v``."""
        self._check_vertex(u)
        self._check_vertex(v)
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def bridges(self) -> list[tuple[int, int]]:
        """Edges whose removal disconnects the graph, in the order a DFS finds them.

        Each bridge is given as ``(parent, child)`` of the depth-first tree.
        """
        n = self.num_vertices
        visited = [False] * n
        disc = [0] * n
        low = [0] * n
        parent = [-1] * n
        found: list[tuple[int, int]] = []
        time = 0

        for root in range(n):
            if visited[root]:
                continue
            visited[root] = True
            disc[root] = low[root] = time
            time += 1
            stack = [(root, iter(self._adjacency[root]))]
            while stack:
                u, neighbours = stack[-1]
                for v in neighbours:
                    if not visited[v]:
                        parent[v] = u
                        visited[v] = True
                        disc[v] = low[v] = time
                        time += 1
                        stack.append((v, iter(self._adjacency[v])))
                        break
                    if v != parent[u]:
                        low[u] = min(low[u], disc[v])
                else:
                    stack.pop()
                    if stack:
                        p = stack[-1][0]
                        low[p] = min(low[p], low[u])
                        if low[u] > disc[p]:
                            found.append((p, u))
        return found


def dijkstra(
    num_vertices: int,
    edges: Iterable[tuple[int, int, int]],
    source: int,
) -> list[int | None]:
    """Shortest distances from ``source`` over undirected weighted ``edges``.

    Unreachable vertices get None. Weights must not be negative.
    """
    if not 0 <= source < num_vertices:
        raise ValueError(f"source {source} is outside 0..{num_vertices - 1}")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(num_vertices)]
    for u, v, weight in edges:
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))

    dist: list[int | None] = [None] * num_vertices
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d != dist[u]:
            continue
        for v, weight in adjacency[u]:
            candidate = d + weight
            current = dist[v]
            if current is None or candidate < current:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return dist


def format_distances(distances: Sequence[int | None], source: int) -> str:
    """A table of vertex distances, with INF for unreachable vertices."""
    lines = [
        f"Vertex\t Distance from Source {source}",
        "------\t ----------------------",
    ]
    lines.extend(
        f"{vertex}\t\t{'INF' if distance is None else distance}"
        for vertex, distance in enumerate(distances)
    )
    return "\n".join(lines)


def bfs_order(adjacency: Sequence[Iterable[int]], start: int) -> list[int]:
    """Vertices reachable from ``start`` in breadth-first order."""
    if not 0 <= start < len(adjacency):
        raise ValueError(f"start {start} is outside 0..{len(adjacency) - 1}")
    visited = {start}
    order: list[int] = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def maximal_network_rank(num_cities: int, roads: Iterable[Sequence[int]]) -> int:
    """Largest combined road count of two cities, a shared road counted once."""
    degree = [0] * num_cities
    connected: set[frozenset[int]] = set()
    for a, b in roads:
        degree[a] += 1
        degree[b] += 1
        connected.add(frozenset((a, b)))
    return max(
        (
            degree[a] + degree[b] - (frozenset((a, b)) in connected)
            for a, b in combinations(range(num_cities), 2)
        ),
        default=0,
    )


def can_reach(nums: Sequence[int], start: int) -> bool:
    """Whether jumping ``nums[i]`` left or right from ``start`` can land on a zero."""
    visited: set[int] = set()
    stack = [start]
    while stack:
        index = stack.pop()
        if not 0 <= index < len(nums) or index in visited:
            continue
        if nums[index] == 0:
            return True
        visited.add(index)
        stack.append(index - nums[index])
        stack.append(index + nums[index])
    return False