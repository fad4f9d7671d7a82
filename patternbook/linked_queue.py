"""A first-in, first-out queue built on a singly linked chain."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from patternbook.cursor import Node, NodeCursor


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""


class Queue:
    """A linked FIFO queue."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._front: Node | None = None
        self._rear: Node | None = None
        self._size = 0
        for item in items or ():
            self.enqueue(item)

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the back."""
        node = Node(item)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        if self._front is None:
            raise QueueEmptyError("Queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def front(self) -> Any:
        """The item at the front, left in place."""
        if self._front is None:
            raise QueueEmptyError("Queue is empty")
        return self._front.data

    def is_empty(self) -> bool:
        """Whether the queue holds nothing."""
        return self._front is None

    def begin(self) -> NodeCursor:
        """A cursor at the front; it carries no container beginning."""
        return NodeCursor(self._front)

    def end(self) -> NodeCursor:
        """A cursor one past the back."""
        return NodeCursor(None)

    def copy(self) -> Queue:
        """An independent queue with the same items."""
        return Queue(self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"Queue({list(self)!r})"