"""
Shortest paths on top of the Fibonacci heap.

Dijkstra's algorithm over an undirected edge list. The heap has no
decrease-key, so relaxed nodes are pushed again and stale entries are skipped
when popped.
"""

from __future__ import annotations

from typing import Callable, TypeVar

import numpy as np

from .heap import FibonacciHeap

T = TypeVar("T")


class Calculator:
    """
    Calculator for all-pairs shortest paths or shortest paths from a single node.
    """

    def __init__(
        self,
        n: int,
        edges: list[T],
        get_source_index: Callable[[T], int],
        get_target_index: Callable[[T], int],
        get_length: Callable[[T], float],
    ):
        """
        Initialize shortest path calculator.

        Args:
            n: Number of nodes
            edges: List of edges
            get_source_index: Function to get source node index from edge
            get_target_index: Function to get target node index from edge
            get_length: Function to get edge length
        """
        self.n = n
        self.neighbours: list[list[tuple[int, float]]] = [[] for _ in range(n)]
        for edge in edges:
            u = get_source_index(edge)
            v = get_target_index(edge)
            d = get_length(edge)
            self._check_index(u, "edge endpoint")
            self._check_index(v, "edge endpoint")
            if d < 0:
                raise ValueError(f"negative edge length {d} between {u} and {v}")
            self.neighbours[u].append((v, d))
            self.neighbours[v].append((u, d))

    def distance_matrix(self) -> list[list[float]]:
        """
        Compute all-pairs shortest paths.

        Returns:
            Matrix of shortest distances between all pairs of nodes
        """
        return [self.distances_from_node(i) for i in range(self.n)]

    def distances_from_node(self, start: int) -> list[float]:
        """
        Get shortest paths from a specified start node.

        Args:
            start: Starting node index

        Returns:
            Distance from start to every node, ``inf`` where unreachable
        """
        d, _ = self._dijkstra(start)
        return d.tolist()

    def path_from_node_to_node(self, start: int, end: int) -> list[int]:
        """
        Find shortest path from start to end node.

        Args:
            start: Start node index
            end: End node index

        Returns:
            Node indices along the path, excluding start and including end;
            empty if end is unreachable or equal to start
        """
        self._check_index(end, "end node")
        d, prev = self._dijkstra(start)
        if end == start or np.isinf(d[end]):
            return []
        path = []
        u = end
        while u != start:
            path.append(u)
            u = int(prev[u])
        path.reverse()
        return path

    def _dijkstra(self, start: int) -> tuple[np.ndarray, np.ndarray]:
        self._check_index(start, "start node")

        d = np.full(self.n, np.inf)
        prev = np.full(self.n, -1, dtype=np.int64)
        settled = np.zeros(self.n, dtype=bool)

        d[start] = 0.0
        q: FibonacciHeap[tuple[float, int]] = FibonacciHeap()
        q.push((0.0, start))

        while not q.is_empty():
            du, u = q.pop()
            if settled[u]:
                continue
            settled[u] = True
            for v, length in self.neighbours[u]:
                t = du + length
                if t < d[v]:
                    d[v] = t
                    prev[v] = u
                    q.push((t, v))
        return d, prev

    def _check_index(self, i: int, what: str) -> None:
        if not 0 <= i < self.n:
            raise IndexError(f"{what} {i} out of range for {self.n} nodes")
