"""
Profiling script for fibheap performance analysis.

This script profiles push/pop/merge workloads to identify bottlenecks.
"""

import cProfile
import pstats
import io
from pstats import SortKey
import time
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
from fibheap import FibonacciHeap, Calculator


def random_values(n):
    """Create n random integer keys."""
    rng = np.random.default_rng(42)
    return rng.integers(0, 10 * n, size=n).tolist()


def profile_heapsort(n=100_000):
    """Push n random values, then drain the heap."""
    heap = FibonacciHeap()
    heap.push(*random_values(n))
    while not heap.is_empty():
        heap.pop()


def profile_interleaved(n=100_000):
    """Alternate bursts of pushes with single pops."""
    heap = FibonacciHeap()
    values = random_values(n)
    for i in range(0, n, 10):
        heap.push(*values[i:i + 10])
        heap.pop()


def profile_merge(n=1_000, k=100):
    """Merge n heaps of k elements, then pop half."""
    values = random_values(n * k)
    heap = FibonacciHeap()
    for i in range(n):
        part = FibonacciHeap()
        part.push(*values[i * k:(i + 1) * k])
        part.pop()
        heap = heap.merge(part)
    for _ in range(heap.size // 2):
        heap.pop()


def profile_dijkstra(n_nodes=2_000, n_edges=10_000):
    """Single-source shortest paths on a random graph."""
    rng = np.random.default_rng(42)
    edges = [
        (int(u), int(v), float(w))
        for u, v, w in zip(
            rng.integers(0, n_nodes, size=n_edges),
            rng.integers(0, n_nodes, size=n_edges),
            rng.uniform(1, 100, size=n_edges),
        )
    ]
    calc = Calculator(n_nodes, edges, lambda e: e[0], lambda e: e[1], lambda e: e[2])
    for start in range(10):
        calc.distances_from_node(start)


SCENARIOS = [
    profile_heapsort,
    profile_interleaved,
    profile_merge,
    profile_dijkstra,
]


def run(func, top=15):
    """Profile one scenario, print its hottest calls and dump a .prof file."""
    profiler = cProfile.Profile()
    start_time = time.perf_counter()
    profiler.runcall(func)
    elapsed = time.perf_counter() - start_time

    s = io.StringIO()
    pstats.Stats(profiler, stream=s).sort_stats(SortKey.TIME).print_stats(top)
    print(f"--- {func.__name__}: {elapsed:.3f}s ({func.__doc__.strip()})")
    print(s.getvalue())

    filename = f"{func.__name__}.prof"
    profiler.dump_stats(filename)
    print(f"Saved: {filename}")


def main():
    """Profile the scenarios named on the command line, or all of them."""
    wanted = set(sys.argv[1:])
    for func in SCENARIOS:
        if not wanted or func.__name__ in wanted:
            run(func)


if __name__ == "__main__":
    main()
