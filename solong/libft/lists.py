"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a list, holding its content and the next link."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list addressed through its first node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, node: Node | None) -> None:
        """Make ``node`` the new first node; ``None`` is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def push_back(self, node: Node | None) -> None:
        """Attach ``node``, and whatever follows it, after the last node."""
        if node is None:
            return
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node

    def last(self) -> Node | None:
        """The last node, or ``None`` for an empty list."""
        last = None
        for last in self._nodes():
            pass
        return last

    def clear(self, deleter: Callable[[Any], object] | None = None) -> None:
        """Remove every node, passing each content to ``deleter`` first."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if deleter is not None:
                deleter(node.content)
            node.next = None
            node = following

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call ``func`` on every content in order."""
        for node in self._nodes():
            func(node.content)

    def map(
        self,
        func: Callable[[Any], Any],
        deleter: Callable[[Any], object] | None = None,
    ) -> LinkedList:
        """A new list of ``func`` applied to each content.

        If ``func`` fails part way, the contents made so far are passed to
        ``deleter`` and the error is raised again.
        """
        made: list[Any] = []
        try:
            for node in self._nodes():
                made.append(func(node.content))
        except BaseException:
            if deleter is not None:
                for item in made:
                    deleter(item)
            raise
        return LinkedList(made)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"