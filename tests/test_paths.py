"""Tests for shortest paths calculator."""

import math

import numpy as np
import pytest
from fibheap.paths import Calculator


class Edge:
    """Simple edge class for testing."""

    def __init__(self, source: int, target: int, length: float = 1.0):
        self.source = source
        self.target = target
        self.length = length


def make_calculator(n, edges):
    return Calculator(
        n, edges,
        lambda e: e.source,
        lambda e: e.target,
        lambda e: e.length
    )


class TestCalculator:
    """Test shortest paths calculator."""

    def test_simple_path(self):
        """Test finding distances in a simple chain."""
        #  0 -- 1 -- 2
        calc = make_calculator(3, [Edge(0, 1), Edge(1, 2)])

        assert calc.distances_from_node(0) == [0.0, 1.0, 2.0]

    def test_weighted_graph(self):
        """Test with weighted edges."""
        #  0 --(5)-- 1
        #  |         |
        # (1)       (1)
        #  |         |
        #  2 --(1)-- 3
        edges = [
            Edge(0, 1, 5.0),
            Edge(0, 2, 1.0),
            Edge(1, 3, 1.0),
            Edge(2, 3, 1.0),
        ]
        calc = make_calculator(4, edges)

        assert calc.distances_from_node(0) == [0.0, 3.0, 1.0, 2.0]
        assert calc.path_from_node_to_node(0, 1) == [2, 3, 1]

    def test_undirected(self):
        """Test edges are traversable both ways."""
        calc = make_calculator(2, [Edge(0, 1, 4.0)])
        assert calc.distances_from_node(1) == [4.0, 0.0]

    def test_disconnected(self):
        """Test unreachable nodes report infinity and no path."""
        calc = make_calculator(3, [Edge(0, 1)])

        distances = calc.distances_from_node(0)
        assert math.isinf(distances[2])
        assert calc.path_from_node_to_node(0, 2) == []

    def test_path_to_self(self):
        """Test the path from a node to itself is empty."""
        calc = make_calculator(2, [Edge(0, 1)])
        assert calc.path_from_node_to_node(0, 0) == []

    def test_distance_matrix(self):
        """Test all-pairs distances are symmetric."""
        calc = make_calculator(4, [Edge(0, 1), Edge(1, 2), Edge(2, 3), Edge(0, 3, 10.0)])

        matrix = np.array(calc.distance_matrix())
        assert matrix.shape == (4, 4)
        assert np.allclose(matrix, matrix.T)
        assert matrix[0, 3] == 3.0

    def test_random_graph_against_floyd_warshall(self):
        """Test distances on a random graph against Floyd-Warshall."""
        rng = np.random.default_rng(1)
        n = 30
        edges = []
        for _ in range(90):
            u, v = rng.integers(0, n, size=2).tolist()
            edges.append(Edge(u, v, float(rng.integers(1, 20))))

        expected = np.full((n, n), np.inf)
        np.fill_diagonal(expected, 0.0)
        for e in edges:
            if e.length < expected[e.source, e.target]:
                expected[e.source, e.target] = e.length
                expected[e.target, e.source] = e.length
        for k in range(n):
            expected = np.minimum(expected, expected[:, [k]] + expected[[k], :])

        calc = make_calculator(n, edges)
        assert np.array_equal(np.array(calc.distance_matrix()), expected)

    def test_negative_length(self):
        """Test negative edge lengths are rejected."""
        with pytest.raises(ValueError):
            make_calculator(2, [Edge(0, 1, -1.0)])

    def test_start_out_of_range(self):
        """Test an invalid start node is rejected."""
        calc = make_calculator(2, [Edge(0, 1)])
        with pytest.raises(IndexError):
            calc.distances_from_node(5)

    def test_end_negative(self):
        """Test a negative end node is rejected rather than wrapped."""
        calc = make_calculator(3, [Edge(0, 1), Edge(1, 2)])
        with pytest.raises(IndexError):
            calc.path_from_node_to_node(2, -1)

    def test_end_out_of_range(self):
        """Test an end node past the last index is rejected."""
        calc = make_calculator(3, [Edge(0, 1), Edge(1, 2)])
        with pytest.raises(IndexError):
            calc.path_from_node_to_node(0, 3)

    @pytest.mark.parametrize("source,target", [(-1, 0), (0, 3)])
    def test_edge_endpoint_out_of_range(self, source, target):
        """Test edges must connect nodes inside the graph."""
        with pytest.raises(IndexError):
            make_calculator(3, [Edge(source, target)])
