"""A singly linked list of nodes that carry arbitrary content."""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One list cell: its content and the node that follows it."""

    content: Any = None
    next: Optional["Node"] = None

    def release(self, delete: Callable[[Any], None] | None) -> None:
        """Pass the content to ``delete`` and detach this node.

        The following node is left untouched. Nothing happens if ``delete`` is None.
        """
        if delete is None:
            return
        delete(self.content)
        self.content = None
        self.next = None


class LinkedList:
    """A chain of Node objects reached from ``head``."""

    def __init__(self, head: Node | None = None) -> None:
        self.head = head

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, node: Node) -> None:
        """Make ``node`` the new head, linked to the old head."""
        node.next = self.head
        self.head = node

    def push_back(self, node: Node | None) -> None:
        """Link ``node`` after the current last node, or make it the head."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Node | None:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        """Yield the content of each node in order."""
        for node in self._nodes():
            yield node.content

    def clear(self, delete: Callable[[Any], None] | None) -> None:
        """Pass every content to ``delete`` and empty the list.

        Nothing happens if ``delete`` is None.
        """
        if delete is None:
            return
        node = self.head
        while node is not None:
            following = node.next
            node.release(delete)
            node = following
        self.head = None

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on the content of every node."""
        for content in self:
            func(content)

    def map(
        self, func: Callable[[Any], Any], delete: Callable[[Any], None] | None
    ) -> "LinkedList":
        """Return a new list holding ``func(content)`` for every node.

        If ``func`` raises, the contents built so far are passed to ``delete``
        before the error propagates.
        """
        result = LinkedList()
        tail: Node | None = None
        try:
            for content in self:
                node = Node(func(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except Exception:
            result.clear(delete)
            raise
        return result