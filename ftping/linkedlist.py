"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One cell of the list."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list that appends at either end."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items or ():
            self.add_back(item)

    def add_front(self, content: Any) -> Node:
        """Insert content before the first element and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def add_back(self, content: Any) -> Node:
        """Append content after the last element and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        return self._tail

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Empty the list, handing each content to delete first if given."""
        if delete is not None:
            for content in list(self):
                delete(content)
        self.head = None
        self._tail = None
        self._size = 0

    def iterate(self, f: Callable[[Any], None]) -> None:
        """Call f on every content in order."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> LinkedList:
        """Return a new list of f applied to each content.

        If f raises, the contents produced so far are handed to delete and
        the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(f(content))
        except Exception:
            result.clear(delete)
            raise
        return result