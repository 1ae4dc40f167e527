"""Command entry point: read numbers, sort small inputs, print the stack."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.mini_sort import simple_sort
from pushswap.parsing import ParseError, parse_arguments
from pushswap.printf import printf
from pushswap.stacks import Stacks
from pushswap.utils import is_sorted

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# Inputs given in at most this many arguments are sorted with the short sequences.
_SIMPLE_SORT_ARGS = 5


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program on ``argv`` (the arguments after the program name)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return EXIT_SUCCESS
    try:
        nodes = parse_arguments(args)
    except ParseError as error:
        printf("%s\n", str(error))
        return EXIT_FAILURE
    if is_sorted(nodes):
        return EXIT_SUCCESS
    stacks = Stacks(nodes)
    if len(args) <= _SIMPLE_SORT_ARGS:
        simple_sort(stacks)
    for node in stacks.a:
        printf("%d     %d\n", node.content, node.index)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())