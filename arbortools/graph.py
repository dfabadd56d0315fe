"""Weighted directed graph with single-source shortest paths."""

from __future__ import annotations

import heapq
import math


class Graph:
    """A directed graph on nodes ``0 .. nodes - 1`` with non-negative edge weights."""

    def __init__(self, nodes: int) -> None:
        if nodes < 0:
            raise ValueError("number of nodes must be non-negative")
        self._adjacency: list[list[tuple[int, float]]] = [[] for _ in range(nodes)]

    @property
    def nodes(self) -> int:
        """Number of nodes in the graph."""
        return len(self._adjacency)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._adjacency):
            raise IndexError(f"node {node!r} is not in the graph")

    def add_edge(self, u: int, v: int, weight: float) -> None:
        """Add a directed edge from ``u`` to ``v``."""
        self._check(u)
        self._check(v)
        if weight < 0:
            raise ValueError("edge weights must be non-negative")
        self._adjacency[u].append((v, weight))

    def shortest_paths(self, source: int) -> list[float]:
        """Distances from ``source`` using a binary heap; ``math.inf`` if unreachable."""
        self._check(source)
        dist = [math.inf] * len(self._adjacency)
        dist[source] = 0
        heap: list[tuple[float, int]] = [(0, source)]
        while heap:
            distance, node = heapq.heappop(heap)
            if distance > dist[node]:
                continue
            for neighbour, weight in self._adjacency[node]:
                candidate = distance + weight
                if candidate < dist[neighbour]:
                    dist[neighbour] = candidate
                    heapq.heappush(heap, (candidate, neighbour))
        return dist

    def shortest_paths_ordered(self, source: int) -> list[float]:
        """Distances from ``source`` using an ordered frontier with entry removal."""
        self._check(source)
        dist = [math.inf] * len(self._adjacency)
        dist[source] = 0
        frontier: set[tuple[float, int]] = {(0, source)}
        while frontier:
            entry = min(frontier)
            frontier.remove(entry)
            distance, node = entry
            for neighbour, weight in self._adjacency[node]:
                candidate = distance + weight
                if candidate < dist[neighbour]:
                    frontier.discard((dist[neighbour], neighbour))
                    dist[neighbour] = candidate
                    frontier.add((candidate, neighbour))
        return dist