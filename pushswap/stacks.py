"""The two stacks of the puzzle and the moves that rearrange them.

Every move writes its name and a newline to the output stream, even when it
leaves the stacks unchanged.
"""

from __future__ import annotations

import sys
from collections import deque
from typing import Deque, Iterable, Optional, TextIO, Union

from pushswap.linked import Node


class Stacks:
    """Stack ``a`` holding the values and an initially empty stack ``b``.

    The top of each stack is index 0.
    """

    def __init__(
        self, values: Iterable[Union[int, Node]] = (), out: Optional[TextIO] = None
    ) -> None:
        self.a: Deque[Node] = deque(
            value if isinstance(value, Node) else Node(value) for value in values
        )
        self.b: Deque[Node] = deque()
        self.out = out

    def _emit(self, name: str) -> None:
        (sys.stdout if self.out is None else self.out).write(name + "\n")

    @staticmethod
    def _swap(stack: Deque[Node]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _push(source: Deque[Node], target: Deque[Node]) -> None:
        if source:
            target.appendleft(source.popleft())

    @staticmethod
    def _rotate(stack: Deque[Node]) -> None:
        if len(stack) >= 2:
            stack.rotate(-1)

    @staticmethod
    def _reverse_rotate(stack: Deque[Node]) -> None:
        if len(stack) >= 2:
            stack.rotate(1)

    def sa(self) -> None:
        """Swap the top two of ``a``."""
        self._swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the top two of ``b``."""
        self._swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        """Swap the top two of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._push(self.b, self.a)
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._push(self.a, self.b)
        self._emit("pb")

    def ra(self) -> None:
        """Send the top of ``a`` to its bottom."""
        self._rotate(self.a)
        self._emit("ra")

    def rb(self) -> None:
        """Send the top of ``b`` to its bottom."""
        self._rotate(self.b)
        self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self._rotate(self.a)
        self._rotate(self.b)
        self._emit("rr")

    def rra(self) -> None:
        """Bring the bottom of ``a`` to its top."""
        self._reverse_rotate(self.a)
        self._emit("rra")

    def rrb(self) -> None:
        """Bring the bottom of ``b`` to its top."""
        self._reverse_rotate(self.b)
        self._emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks; the move is reported as ``rra``."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self._emit("rra")