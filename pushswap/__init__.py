"""Sort small lists of integers on two stacks with push, swap and rotate instructions."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "cli",
    "convert",
    "linked",
    "memory",
    "mini_sort",
    "output",
    "parsing",
    "printf",
    "stacks",
    "strings",
    "utils",
]