"""A singly linked list of integer nodes that each carry a rank index."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[int], object]]


@dataclass(eq=False)
class Node:
    """One list cell: a value, its rank (``-1`` until assigned) and a link."""

    content: int
    index: int = -1
    next: Optional["Node"] = field(default=None, repr=False)


class LinkedList:
    """A chain of :class:`Node` objects reached from ``head``."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def __iter__(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def push_front(self, node: Node) -> None:
        """Make ``node`` the new head, linking it to the old one."""
        if self.head is not None:
            node.next = self.head
        self.head = node

    def push_back(self, node: Node) -> None:
        """Attach ``node`` after the current last node."""
        end = self.last()
        if end is None:
            self.head = node
        else:
            end.next = node

    def last(self) -> Optional[Node]:
        """Return the final node, or ``None`` for an empty list."""
        end = None
        for end in self:
            pass
        return end

    def clear(self, delete: Deleter = None) -> None:
        """Pass every value to ``delete`` (if given) and empty the list."""
        for node in self:
            if delete is not None:
                delete(node.content)
            node.next = None
        self.head = None

    def iterate(self, func: Callable[[int], object]) -> None:
        """Call ``func`` on each value in order."""
        for node in self:
            func(node.content)

    def map(self, func: Callable[[int], int], delete: Deleter = None) -> "LinkedList":
        """Return a new list of ``func(value)`` for each value.

        If ``func`` raises, the values mapped so far are handed to ``delete``
        and the error propagates.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for node in self:
                fresh = Node(func(node.content))
                if tail is None:
                    result.head = fresh
                else:
                    tail.next = fresh
                tail = fresh
        except Exception:
            result.clear(delete)
            raise
        return result


def delete_one(node: Optional[Node], delete: Deleter) -> None:
    """Hand the value of a single node to ``delete`` and detach the node."""
    if node is None or delete is None:
        return
    delete(node.content)
    node.next = None