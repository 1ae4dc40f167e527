"""Reading the stack values from command-line arguments."""

from __future__ import annotations

from typing import Iterable, List

from pushswap.chars import is_digit
from pushswap.convert import atoi, split
from pushswap.linked import Node
from pushswap.utils import index_init


class ParseError(ValueError):
    """An argument word is not a number or repeats an earlier value.

    Its message is always ``Error``; the offending word is kept in ``word``.
    """

    def __init__(self, word: str) -> None:
        super().__init__("Error")
        self.word = word


def is_number(text: str) -> bool:
    """Whether ``text`` is an optional sign followed only by decimal digits.

    A lone sign, and the empty string, are accepted.
    """
    body = text[1:] if text[:1] in ("-", "+") else text
    return all(is_digit(ch) for ch in body)


def parse_arguments(args: Iterable[str]) -> List[Node]:
    """Turn the arguments into ranked nodes, top of the stack first.

    Each argument may hold several space-separated numbers. A word that is
    not a number, or whose value was already seen, raises :class:`ParseError`.
    """
    nodes: List[Node] = []
    seen = set()
    for arg in args:
        for word in split(arg, " ") or []:
            if not is_number(word):
                raise ParseError(word)
            value = atoi(word)
            if value in seen:
                raise ParseError(word)
            seen.add(value)
            nodes.append(Node(value))
    index_init(nodes)
    return nodes