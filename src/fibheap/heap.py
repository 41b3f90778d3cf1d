"""
Fibonacci heap: a mergeable minimum-priority queue.

Insertion and union are O(1) amortized, extraction of the minimum is
O(log n) amortized. The heap keeps a root list of heap-ordered trees plus a
separate ``min`` tree whose root holds the smallest payload. Trees of equal
degree are only linked during ``consolidate``, which runs after every
extraction.
"""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterator, Optional, TypeVar
import logging
import math

from .node import Node

T = TypeVar("T")

log = logging.getLogger(__name__)

# Golden ratio; bounds root degree to log_PHI(n) for n elements.
PHI = 1.61803


class FibonacciHeap(Generic[T]):
    """
    Min priority queue backed by a Fibonacci heap.

    Payloads must be totally ordered with ``<=``. Equal payloads keep the
    earlier tree as parent, so tree shapes are deterministic for a given
    sequence of operations.
    """

    def __init__(self):
        self._roots: deque[Node[T]] = deque()
        self._size = 0
        self._min: Optional[Node[T]] = None

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        """String representation for debugging."""
        return self.preorder()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size}, roots={len(self._roots)})"

    @property
    def size(self) -> int:
        """Number of elements in the heap."""
        return self._size

    def is_empty(self) -> bool:
        """Check if the heap is empty."""
        return self._size == 0

    def top(self) -> Optional[T]:
        """
        Get the minimum element without removing it.

        Returns:
            Minimum element, or None if the heap is empty
        """
        if self._min is None:
            return None
        return self._min.payload

    def trees(self) -> Iterator[Node[T]]:
        """Iterate the min tree, then each root in list order."""
        if self._min is not None:
            yield self._min
        yield from self._roots

    def push(self, *values: T) -> None:
        """
        Push one or more elements onto the heap.

        Each element becomes a singleton tree. No consolidation happens here.

        Args:
            *values: Elements to push, in order
        """
        for value in values:
            node = Node(value)
            if self._min is None:
                self._min = node
            elif Node.is_smaller_or_equal(node, self._min):
                self._roots.append(self._min)
                self._min = node
            else:
                self._roots.append(node)
            self._size += 1

    def merge(self, other: FibonacciHeap[T]) -> FibonacciHeap[T]:
        """
        Union two heaps.

        Both heaps are consumed. The returned heap holds every element; the
        other operand is left empty and should not be used again.

        Args:
            other: Heap to merge with

        Returns:
            Merged heap
        """
        if other is self:
            raise ValueError("cannot merge a heap with itself")
        if other.is_empty():
            return self
        if self.is_empty():
            return other

        other_min = other._min
        other_size = other._size
        self._roots.extend(other._roots)
        other._clear()

        if Node.is_smaller_or_equal(other_min, self._min):
            log.debug("merge: incoming min %r replaces %r", other_min, self._min)
            self._roots.append(self._min)
            self._min = other_min
            self._size += other_size
        else:
            # Re-insert the incoming min; its subtrees join the root list.
            payload, children = other_min.extract()
            self._roots.extend(children)
            self.push(payload)
            self._size += other_size - 1
        return self

    @staticmethod
    def union(a: FibonacciHeap[T], b: FibonacciHeap[T]) -> FibonacciHeap[T]:
        """Merge ``a`` and ``b``; see :meth:`merge`."""
        return a.merge(b)

    def pop(self) -> Optional[T]:
        """
        Remove and return the minimum element.

        Returns:
            Minimum element, or None if the heap is empty
        """
        if self._min is None:
            return None

        min_node, self._min = self._min, None
        self._size -= 1
        payload, children = min_node.extract()
        self._roots.extend(children)

        if self._size > 0:
            # Any root will do as a seed; consolidate finds the real minimum.
            self._min = self._roots.popleft()
            self.consolidate()
        return payload

    def consolidate(self) -> None:
        """
        Link roots of equal degree until every root degree is distinct,
        then rebuild the root list and recompute the minimum.
        """
        if self._min is None:
            return

        buckets: list[Optional[Node[T]]] = [None] * (math.ceil(math.log(self._size, PHI)) + 1)
        drained = len(self._roots) + 1

        self._roots.appendleft(self._min)
        self._min = None

        while self._roots:
            x = self._roots.popleft()
            d = x.degree
            while buckets[d] is not None:
                y = buckets[d]
                buckets[d] = None
                x = Node.merge(x, y)
                d += 1
            buckets[d] = x

        for tree in buckets:
            if tree is None:
                continue
            if self._min is None:
                self._min = tree
            elif Node.is_smaller_or_equal(tree, self._min):
                self._roots.append(self._min)
                self._min = tree
            else:
                self._roots.append(tree)

        log.debug(
            "consolidate: %d roots -> %d trees (%d buckets, size %d)",
            drained, len(self._roots) + 1, len(buckets), self._size,
        )

    def preorder(self) -> str:
        """
        Dump the heap's tree shapes.

        Returns:
            One line per tree: ``Min:`` for the min tree, then ``Tree k:``
            for each root, payloads listed in pre-order. Empty string for an
            empty heap.
        """
        lines = []
        if self._min is not None:
            lines.append(f"Min: {_join(self._min)}\n")
        for index, tree in enumerate(self._roots, 1):
            lines.append(f"Tree {index}: {_join(tree)}\n")
        return "".join(lines)

    def _clear(self) -> None:
        self._roots = deque()
        self._size = 0
        self._min = None


def _join(tree: Node) -> str:
    return " ".join(str(payload) for payload in tree.preorder())
