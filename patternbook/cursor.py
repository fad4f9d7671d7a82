"""Cursors that walk singly linked chains of nodes, forwards and (slowly) backwards."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class Node:
    """One link in a singly linked chain."""

    __slots__ = ("data", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def _chain(start: Node | None) -> Iterator[Node]:
    """Yield nodes from ``start`` until the chain ends or comes back round to ``start``."""
    node = start
    while node is not None:
        yield node
        node = node.next
        if node is start:
            return


class NodeCursor:
    """A position in a chain of nodes.

    ``begin`` is the first node of the container the cursor belongs to; without it
    the cursor cannot step back, measure distances or compare order.
    """

    __slots__ = ("_node", "_begin")

    def __init__(self, node: Node | None = None, begin: Node | None = None) -> None:
        self._node = node
        self._begin = begin

    @property
    def node(self) -> Node | None:
        """The node the cursor points at, or None past the end."""
        return self._node

    @property
    def begin(self) -> Node | None:
        """The first node of the container, if known."""
        return self._begin

    def value(self) -> Any:
        """The data at the current position."""
        if self._node is None:
            raise IndexError("cursor does not point at a node")
        return self._node.data

    def is_valid(self) -> bool:
        """Whether the cursor points at a node."""
        return self._node is not None

    def copy(self) -> NodeCursor:
        """An independent cursor at the same position."""
        return NodeCursor(self._node, self._begin)

    def step(self) -> NodeCursor:
        """Move one node forward; stays put once past the end."""
        if self._node is not None:
            self._node = self._node.next
        return self

    def step_back(self) -> NodeCursor:
        """Move one node back by searching from the beginning."""
        if self._node is None or self._begin is None or self._node is self._begin:
            return self
        previous: Node | None = None
        for node in _chain(self._begin):
            if node is self._node:
                break
            previous = node
        self._node = previous
        return self

    def advance(self, n: int) -> NodeCursor:
        """Move ``n`` nodes forward, or back when ``n`` is negative."""
        if n > 0:
            for _ in range(n):
                if self._node is None:
                    break
                self._node = self._node.next
        elif n < 0:
            for _ in range(-n):
                if self._node is None:
                    break
                self.step_back()
        return self

    def distance(self, other: NodeCursor) -> int:
        """Number of steps from this cursor to ``other``; -1 without a known beginning."""
        if self._begin is None:
            return -1
        steps = 0
        for steps, node in enumerate(_chain(self._node)):
            if node is other._node:
                return steps
        else:
            steps = steps + 1 if self._node is not None else 0
        if other._node is None:
            return steps
        return self._position(other._node) - self._position(self._node)

    def _position(self, target: Node | None) -> int:
        count = 0
        for node in _chain(self._begin):
            if node is target:
                return count
            count += 1
        return count

    def reset_to_begin(self) -> None:
        """Move back to the container's first node."""
        self._node = self._begin

    def before(self, other: NodeCursor) -> bool:
        """Whether ``other`` can be reached by stepping forward from here."""
        if self._begin is None:
            return False
        return any(node is other._node for node in _chain(self._node))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeCursor):
            return NotImplemented
        return self._node is other._node

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"NodeCursor({self._node!r})"