"""
Tree nodes for the Fibonacci heap.

A node owns one payload and an ordered list of child nodes. Nodes are only
ever linked by ``merge``, which keeps the heap-order property: every child's
payload is greater than or equal to its parent's.
"""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")

_TAKEN: Any = object()


class EmptiedNodeError(AssertionError):
    """A node was used after its payload had been taken."""
    pass


class Node(Generic[T]):
    """
    Multi-way tree element.

    A node is intact until its payload is taken; after that it must not be
    compared, merged or traversed again.
    """

    __slots__ = ("degree", "children", "_payload")

    def __init__(self, payload: T):
        self.degree = 0
        self.children: list[Node[T]] = []
        self._payload = payload

    def __repr__(self) -> str:
        if self._payload is _TAKEN:
            return f"{self.__class__.__name__}(<taken>, degree={self.degree})"
        return f"{self.__class__.__name__}({self._payload!r}, degree={self.degree})"

    @property
    def payload(self) -> T:
        """The node's payload. Raises EmptiedNodeError once taken."""
        if self._payload is _TAKEN:
            raise EmptiedNodeError("payload has already been taken")
        return self._payload

    def is_intact(self) -> bool:
        """Check whether the payload is still present."""
        return self._payload is not _TAKEN

    @staticmethod
    def is_smaller_or_equal(a: Node[T], b: Node[T]) -> bool:
        """
        Compare the payloads of two intact nodes.

        Returns:
            True if ``a.payload <= b.payload``
        """
        return a.payload <= b.payload

    @staticmethod
    def merge(a: Node[T], b: Node[T]) -> Node[T]:
        """
        Link two trees, making the smaller root the parent.

        Ties keep ``a`` as the parent. Both arguments are consumed: the loser
        becomes the last child of the returned winner.

        Args:
            a: First tree root
            b: Second tree root

        Returns:
            The surviving root
        """
        if Node.is_smaller_or_equal(a, b):
            a.add_child(b)
            return a
        b.add_child(a)
        return b

    def add_child(self, node: Node[T]) -> None:
        """Append a child and bump the degree."""
        self.children.append(node)
        self.degree += 1

    def take_payload(self) -> T:
        """Remove and return the payload. Allowed exactly once."""
        payload = self.payload
        self._payload = _TAKEN
        return payload

    def extract(self) -> tuple[T, list[Node[T]]]:
        """
        Retire this node.

        Returns:
            The payload and the now-orphaned children, in order
        """
        payload = self.take_payload()
        children, self.children = self.children, []
        return payload, children

    def preorder(self) -> Iterator[T]:
        """
        Iterate payloads depth-first, node before children.

        Uses an explicit stack, so deep trees do not hit the recursion limit.
        """
        if self._payload is _TAKEN:
            raise EmptiedNodeError("cannot traverse an emptied node")
        return self._walk()

    def _walk(self) -> Iterator[T]:
        stack: list[Node[T]] = [self]
        while stack:
            node = stack.pop()
            yield node.payload
            stack.extend(reversed(node.children))
