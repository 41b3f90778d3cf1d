"""
fibheap: Fibonacci heap priority queue

A mergeable min-priority queue with O(1) amortized insert and union and
O(log n) amortized extract-min.
"""

__version__ = "0.1.0"

from .node import Node, EmptiedNodeError
from .heap import FibonacciHeap, PHI
from .paths import Calculator

__all__ = [
    "Node",
    "EmptiedNodeError",
    "FibonacciHeap",
    "PHI",
    "Calculator",
]
