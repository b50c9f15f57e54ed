"""Graph traversal, shortest paths, ordering and tree measurements.

Nodes of numbered graphs are the integers ``1..n``. Weighted edges are
``(u, v, w)`` triples and unweighted edges are ``(u, v)`` pairs.
"""

from __future__ import annotations

import heapq
import math
from collections import defaultdict, deque
from collections.abc import Iterable, Iterator, Mapping, Sequence

__all__ = [
    "NegativeCycleError",
    "CycleError",
    "bfs",
    "dfs",
    "dijkstra",
    "shortest_path",
    "bellman_ford",
    "find_negative_cycle",
    "floyd_warshall",
    "floyd_path",
    "topological_sort",
    "has_cycle",
    "node_depths",
    "tree_diameter",
]

WeightedEdge = tuple[int, int, float]
Edge = tuple[int, int]


class NegativeCycleError(ValueError):
    """A negative-weight cycle is reachable from the source."""


class CycleError(ValueError):
    """The directed graph contains a cycle."""


def _check_node(node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _weighted_edges(n: int, edges: Iterable[Sequence[float]]) -> list[WeightedEdge]:
    result = []
    for u, v, w in edges:
        _check_node(u, n)
        _check_node(v, n)
        result.append((u, v, w))
    return result


def _plain_edges(n: int, edges: Iterable[Sequence[int]]) -> list[Edge]:
    result = []
    for u, v in edges:
        _check_node(u, n)
        _check_node(v, n)
        result.append((u, v))
    return result


def bfs(adjacency: Mapping[int, Iterable[int]], start: int) -> list[int]:
    """Return the nodes reachable from ``start`` in breadth-first order."""
    visited = {start}
    order = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency.get(node, ()):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(adjacency: Mapping[int, Iterable[int]], start: int) -> list[int]:
    """Return the nodes reachable from ``start`` in depth-first preorder."""
    visited = {start}
    order = [start]
    stack: list[Iterator[int]] = [iter(adjacency.get(start, ()))]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(adjacency.get(neighbour, ())))
                break
        else:
            stack.pop()
    return order


def dijkstra(
    n: int, edges: Iterable[Sequence[float]], source: int
) -> tuple[dict[int, float], dict[int, int]]:
    """Shortest distances from ``source`` over undirected non-negative edges.

    Returns ``(distances, parents)``; unreachable nodes have distance ``inf``
    and ``parents`` maps each reached node to its predecessor on a shortest path.
    """
    _check_node(source, n)
    adjacency: dict[int, list[tuple[float, int]]] = defaultdict(list)
    for u, v, w in _weighted_edges(n, edges):
        adjacency[u].append((w, v))
        adjacency[v].append((w, u))

    distances = dict.fromkeys(range(1, n + 1), math.inf)
    distances[source] = 0
    parents: dict[int, int] = {}
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        dist, node = heapq.heappop(heap)
        if dist != distances[node]:
            continue
        for weight, neighbour in adjacency[node]:
            candidate = dist + weight
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                parents[neighbour] = node
                heapq.heappush(heap, (candidate, neighbour))
    return distances, parents


def shortest_path(parents: Mapping[int, int], source: int, target: int) -> list[int]:
    """Rebuild the path from ``source`` to ``target`` out of a parent map."""
    path = [target]
    while path[-1] != source:
        previous = parents.get(path[-1])
        if previous is None or len(path) > len(parents):
            raise ValueError(f"no path from {source} to {target}")
        path.append(previous)
    path.reverse()
    return path


def _relax_rounds(
    n: int, edges: list[WeightedEdge], source: int
) -> tuple[dict[int, float], dict[int, int]]:
    distances = dict.fromkeys(range(1, n + 1), math.inf)
    distances[source] = 0
    parents: dict[int, int] = {}
    for _ in range(n - 1):
        changed = False
        for u, v, w in edges:
            if distances[u] != math.inf and distances[u] + w < distances[v]:
                distances[v] = distances[u] + w
                parents[v] = u
                changed = True
        if not changed:
            break
    return distances, parents


def bellman_ford(
    n: int, edges: Iterable[Sequence[float]], source: int
) -> dict[int, float]:
    """Shortest distances from ``source`` over directed edges that may be negative.

    Raises NegativeCycleError when a negative cycle is reachable from ``source``.
    """
    _check_node(source, n)
    edge_list = _weighted_edges(n, edges)
    distances, _ = _relax_rounds(n, edge_list, source)
    for u, v, w in edge_list:
        if distances[u] != math.inf and distances[u] + w < distances[v]:
            raise NegativeCycleError(f"negative cycle reachable from {source}")
    return distances


def find_negative_cycle(
    n: int, edges: Iterable[Sequence[float]], source: int
) -> list[int] | None:
    """Return a negative cycle reachable from ``source``, or None.

    The cycle is listed in edge order and starts and ends on the same node.
    """
    _check_node(source, n)
    edge_list = _weighted_edges(n, edges)
    distances, parents = _relax_rounds(n, edge_list, source)
    for u, v, w in edge_list:
        if distances[u] != math.inf and distances[u] + w < distances[v]:
            parents[v] = u
            node = u
            break
    else:
        return None

    for _ in range(n):
        node = parents[node]
    cycle = [node]
    current = parents[node]
    while current != node:
        cycle.append(current)
        current = parents[current]
    cycle.append(node)
    cycle.reverse()
    return cycle


def floyd_warshall(
    n: int, edges: Iterable[Sequence[float]]
) -> tuple[dict[int, dict[int, float]], dict[int, dict[int, int]]]:
    """All-pairs shortest distances over directed edges.

    Returns ``(distances, next_hop)`` where ``next_hop[u][v]`` is the node to
    move to from ``u`` on the way to ``v``.
    """
    nodes = range(1, n + 1)
    distances = {u: {v: (0 if u == v else math.inf) for v in nodes} for u in nodes}
    next_hop: dict[int, dict[int, int]] = {u: {} for u in nodes}
    for u, v, w in _weighted_edges(n, edges):
        distances[u][v] = min(w, distances[u][v])
        next_hop[u][v] = v

    for k in nodes:
        row_k = distances[k]
        for i in nodes:
            row_i = distances[i]
            via = row_i[k]
            if via == math.inf:
                continue
            for j in nodes:
                candidate = via + row_k[j]
                if row_i[j] > candidate:
                    row_i[j] = candidate
                    next_hop[i][j] = next_hop[i][k]
    return distances, next_hop


def floyd_path(
    next_hop: Mapping[int, Mapping[int, int]], source: int, target: int
) -> list[int]:
    """Rebuild the path from ``source`` to ``target`` out of a next-hop table."""
    path = [source]
    node = source
    while node != target:
        following = next_hop.get(node, {}).get(target)
        if following is None or len(path) > len(next_hop):
            raise ValueError(f"no path from {source} to {target}")
        node = following
        path.append(node)
    return path


def topological_sort(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Order nodes so every edge points forward; raise CycleError otherwise."""
    adjacency: dict[int, list[int]] = defaultdict(list)
    in_degree = dict.fromkeys(range(1, n + 1), 0)
    for u, v in _plain_edges(n, edges):
        adjacency[u].append(v)
        in_degree[v] += 1

    queue = deque(node for node, degree in in_degree.items() if degree == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            in_degree[neighbour] -= 1
            if in_degree[neighbour] == 0:
                queue.append(neighbour)

    if len(order) != n:
        raise CycleError("graph contains a cycle")
    return order


def has_cycle(n: int, edges: Iterable[Sequence[int]]) -> bool:
    """Tell whether the directed graph contains a cycle."""
    adjacency: dict[int, list[int]] = defaultdict(list)
    for u, v in _plain_edges(n, edges):
        adjacency[u].append(v)

    unseen, active, done = 0, 1, 2
    colour = dict.fromkeys(range(1, n + 1), unseen)
    for start in range(1, n + 1):
        if colour[start] != unseen:
            continue
        colour[start] = active
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if colour[neighbour] == unseen:
                    colour[neighbour] = active
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
                if colour[neighbour] == active:
                    return True
            else:
                colour[node] = done
                stack.pop()
    return False


def _tree_adjacency(n: int, edges: Iterable[Sequence[int]]) -> dict[int, list[int]]:
    adjacency: dict[int, list[int]] = defaultdict(list)
    for u, v in _plain_edges(n, edges):
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _depths_from(adjacency: Mapping[int, list[int]], root: int) -> dict[int, int]:
    """Depths in visiting order, the root having depth 1."""
    depths = {root: 1}
    stack = [(root, 0)]
    while stack:
        node, parent = stack.pop()
        for neighbour in reversed(adjacency.get(node, [])):
            if neighbour != parent and neighbour not in depths:
                depths[neighbour] = depths[node] + 1
                stack.append((neighbour, node))
    return depths


def node_depths(n: int, edges: Iterable[Sequence[int]], root: int) -> dict[int, int]:
    """Depth of every node of a tree rooted at ``root`` (the root has depth 1).

    Nodes not connected to ``root`` have depth 0.
    """
    _check_node(root, n)
    depths = dict.fromkeys(range(1, n + 1), 0)
    depths.update(_depths_from(_tree_adjacency(n, edges), root))
    return depths


def tree_diameter(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Number of edges on the longest path of the tree containing node 1."""
    if n == 0:
        return 0
    adjacency = _tree_adjacency(n, edges)
    first = _depths_from(adjacency, 1)
    farthest = max(first, key=first.__getitem__)
    second = _depths_from(adjacency, farthest)
    return max(second.values()) - 1