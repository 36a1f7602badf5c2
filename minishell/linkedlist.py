"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class ListNode:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["ListNode"] = None


class LinkedList:
    """A singly linked list that keeps a reference to its first node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[ListNode] = None
        for item in items:
            self.add_back(item)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, content: Any) -> ListNode:
        """Insert ``content`` before the first node and return the new node."""
        node = ListNode(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> ListNode:
        """Append ``content`` after the last node and return the new node."""
        node = ListNode(content)
        if self.head is None:
            self.head = node
        else:
            self._last_node().next = node
        return node

    def _last_node(self) -> ListNode:
        if self.head is None:
            raise IndexError("last() on an empty list")
        node = self.head
        while node.next is not None:
            node = node.next
        return node

    def last(self) -> Any:
        """Return the content of the last node; raise IndexError if empty."""
        return self._last_node().content

    def remove_first(self, delete: Optional[Callable[[Any], None]] = None) -> Any:
        """Unlink the first node, pass its content to ``delete`` and return it."""
        if self.head is None:
            raise IndexError("remove_first() on an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every node in order, passing each content to ``delete``."""
        while self.head is not None:
            self.remove_first(delete)

    def iterate(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on the content of every node, first to last."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> "LinkedList":
        """Return a new list of ``func(content)`` for each node.

        If ``func`` raises, the contents already produced are passed to
        ``delete`` and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result