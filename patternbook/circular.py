"""A singly linked list whose last node points back to the first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from patternbook.cursor import Node, NodeCursor
from patternbook.pizza_decorator import format_number


class EmptyListError(IndexError):
    """Raised when reading an element of an empty circular list."""


def _render(value: Any) -> str:
    if isinstance(value, float):
        return format_number(value)
    return str(value)


class CircularList:
    """A circular singly linked list."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: Node | None = None
        self._size = 0
        for item in items or ():
            self.insert_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        for _ in range(self._size):
            yield node
            node = node.next

    def _node_at(self, index: int) -> Node | None:
        if index < 0 or index >= self._size:
            return None
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        return None

    def _tail(self) -> Node | None:
        return self._node_at(self._size - 1)

    def insert_front(self, item: Any) -> None:
        """Insert ``item`` before the first element."""
        node = Node(item)
        if self._head is None:
            node.next = node
        else:
            tail = self._tail()
            node.next = self._head
            tail.next = node
        self._head = node
        self._size += 1

    def insert_back(self, item: Any) -> None:
        """Insert ``item`` after the last element."""
        if self._head is None:
            self.insert_front(item)
            return
        node = Node(item)
        tail = self._tail()
        node.next = self._head
        tail.next = node
        self._size += 1

    def insert_at(self, index: int, item: Any) -> None:
        """Insert ``item`` so that it ends up at ``index``."""
        if index < 0 or index > self._size:
            raise IndexError("Index out of range")
        if index == 0:
            self.insert_front(item)
            return
        if index == self._size:
            self.insert_back(item)
            return
        node = Node(item)
        previous = self._node_at(index - 1)
        node.next = previous.next
        previous.next = node
        self._size += 1

    def remove_front(self) -> bool:
        """Remove the first element; False if the list is empty."""
        if self._head is None:
            return False
        if self._size == 1:
            self._head = None
        else:
            tail = self._tail()
            self._head = self._head.next
            tail.next = self._head
        self._size -= 1
        return True

    def remove_back(self) -> bool:
        """Remove the last element; False if the list is empty."""
        if self._head is None:
            return False
        if self._size == 1:
            return self.remove_front()
        previous = self._node_at(self._size - 2)
        previous.next = self._head
        self._size -= 1
        return True

    def remove_at(self, index: int) -> bool:
        """Remove the element at ``index``; False if the index is out of range."""
        if index < 0 or index >= self._size:
            return False
        if index == 0:
            return self.remove_front()
        previous = self._node_at(index - 1)
        previous.next = previous.next.next
        self._size -= 1
        return True

    def remove_value(self, value: Any) -> bool:
        """Remove the first element equal to ``value``; False if there is none."""
        index = self.find_index(value)
        return self.remove_at(index) if index >= 0 else False

    def front(self) -> Any:
        """The first element."""
        if self._head is None:
            raise EmptyListError("List is empty")
        return self._head.data

    def back(self) -> Any:
        """The last element."""
        if self._head is None:
            raise EmptyListError("List is empty")
        return self._tail().data

    def at(self, index: int) -> Any:
        """The element at ``index``."""
        if index < 0 or index >= self._size:
            raise IndexError("Index out of range")
        return self._node_at(index).data

    def is_empty(self) -> bool:
        """Whether the list holds nothing."""
        return self._head is None

    def find_index(self, value: Any) -> int:
        """Index of the first element equal to ``value``, or -1."""
        for index, node in enumerate(self._nodes()):
            if node.data == value:
                return index
        return -1

    def begin(self) -> NodeCursor:
        """A cursor at the first element."""
        return NodeCursor(self._head, self._head)

    def end(self) -> NodeCursor:
        """The end cursor: the first element again, having gone once round."""
        if self._head is None:
            return NodeCursor(None, None)
        return NodeCursor(self._tail().next, self._head)

    def circular_begin(self) -> NodeCursor:
        """A cursor at the first element, meant for looping round repeatedly."""
        return NodeCursor(self._head, self._head)

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        if self._size <= 1:
            return
        current = self._head
        previous = self._tail()
        for _ in range(self._size):
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def rotate_left(self, positions: int = 1) -> None:
        """Move the start of the list ``positions`` elements forward."""
        if self._head is None or positions <= 0:
            return
        for _ in range(positions % self._size):
            self._head = self._head.next

    def rotate_right(self, positions: int = 1) -> None:
        """Move the start of the list ``positions`` elements back."""
        if self._head is None or positions <= 0:
            return
        self.rotate_left(self._size - positions % self._size)

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._size = 0

    def copy(self) -> CircularList:
        """An independent list with the same elements."""
        return CircularList(self)

    def __str__(self) -> str:
        if self._head is None:
            return "Empty circular list"
        body = " -> ".join(_render(item) for item in self)
        return f"{body} -> (back to {_render(self._head.data)})"

    def display(self) -> str:
        """Print the elements once round, without a newline; returns the text."""
        text = str(self)
        print(text, end="")
        return text

    def display_circular(self, rotations: int = 2) -> str:
        """Print the elements ``rotations`` times round, without a newline; returns the text."""
        if self._head is None:
            text = "Empty circular list"
        else:
            values: list[str] = []
            node = self._head
            for _ in range(self._size * rotations):
                values.append(_render(node.data))
                node = node.next
            text = " -> ".join(values)
        print(text, end="")
        return text

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.data

    def __contains__(self, value: object) -> bool:
        return self.find_index(value) >= 0

    def __repr__(self) -> str:
        return f"CircularList({list(self)!r})"


class CircularIterator:
    """Walks round a circular chain a limited number of times."""

    def __init__(self, node: Node | None, max_loops: int = 1) -> None:
        self._current = node
        self._start = node
        self._loop_count = 0
        self._max_loops = max_loops

    def value(self) -> Any:
        """The data at the current position."""
        if self._current is None:
            raise IndexError("iterator does not point at a node")
        return self._current.data

    def step(self) -> CircularIterator:
        """Move one node forward, counting a loop on returning to the start."""
        if self._current is not None:
            self._current = self._current.next
            if self._current is self._start:
                self._loop_count += 1
        return self

    def has_more_loops(self) -> bool:
        """Whether fewer than the allowed number of loops have been completed."""
        return self._loop_count < self._max_loops

    def current_loop(self) -> int:
        """Number of complete loops made so far."""
        return self._loop_count

    def __iter__(self) -> Iterator[Any]:
        while self._current is not None and self.has_more_loops():
            yield self.value()
            self.step()