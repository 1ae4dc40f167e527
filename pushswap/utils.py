"""Queries over a sequence of stack nodes, and rank assignment."""

from __future__ import annotations

from typing import Iterable

from pushswap.linked import Node


def is_sorted(nodes: Iterable[Node]) -> bool:
    """Whether the values never decrease from top to bottom.

    An empty or single-node sequence counts as sorted.
    """
    previous = None
    for node in nodes:
        if previous is not None and previous > node.content:
            return False
        previous = node.content
    return True


def find_min(nodes: Iterable[Node]) -> int:
    """Return the smallest value; raise ``ValueError`` when there are none."""
    values = [node.content for node in nodes]
    if not values:
        raise ValueError("cannot take the minimum of an empty stack")
    return min(values)


def find_max(nodes: Iterable[Node]) -> int:
    """Return the largest value; raise ``ValueError`` when there are none."""
    values = [node.content for node in nodes]
    if not values:
        raise ValueError("cannot take the maximum of an empty stack")
    return max(values)


def get_distance(nodes: Iterable[Node], number: int) -> int:
    """Return how many nodes sit above the first one holding ``number``.

    When ``number`` is absent the result is the number of nodes.
    """
    distance = 0
    for node in nodes:
        if node.content == number:
            break
        distance += 1
    return distance


def index_init(nodes: Iterable[Node]) -> None:
    """Give every node without a rank (index ``-1``) its rank by value.

    Ranks start at 0 for the smallest value; equal values are ranked in the
    order they appear. Nodes that already have a rank are left alone.
    """
    pending = [node for node in nodes if node.index == -1]
    for rank, node in enumerate(sorted(pending, key=lambda item: item.content)):
        node.index = rank