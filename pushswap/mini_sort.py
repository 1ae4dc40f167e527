"""Short fixed move sequences that sort two to five values."""

from __future__ import annotations

from pushswap.stacks import Stacks
from pushswap.utils import find_max, find_min, get_distance, is_sorted


def _sort_2(stacks: Stacks) -> None:
    if stacks.a[0].content > stacks.a[1].content:
        stacks.sa()


def _sort_3(stacks: Stacks) -> None:
    a = stacks.a
    smallest = find_min(a)
    if a[0].content == smallest:
        stacks.rra()
        stacks.sa()
    elif a[0].content == find_max(a):
        stacks.ra()
        if not is_sorted(stacks.a):
            stacks.sa()
    elif a[-1].content == smallest:
        stacks.rra()
    else:
        stacks.sa()


def _sort_4(stacks: Stacks) -> None:
    distance = get_distance(stacks.a, find_min(stacks.a))
    if distance == 1:
        stacks.sa()
    elif distance == 2:
        stacks.ra()
        stacks.ra()
    elif distance == 3:
        stacks.rra()
    stacks.pb()
    if not is_sorted(stacks.a):
        _sort_3(stacks)
    stacks.pa()


def _sort_5(stacks: Stacks) -> None:
    distance = get_distance(stacks.a, find_min(stacks.a))
    if distance == 1:
        stacks.sa()
    elif distance == 2:
        stacks.ra()
        stacks.sa()
    elif distance == 3:
        stacks.rra()
        stacks.rra()
    elif distance == 4:
        stacks.rra()
    stacks.pb()
    _sort_4(stacks)
    stacks.pa()


_SORTERS = {2: _sort_2, 3: _sort_3, 4: _sort_4, 5: _sort_5}


def simple_sort(stacks: Stacks) -> None:
    """Sort stack ``a`` when it holds two to five values; otherwise do nothing.

    The three-value sequence expects its input to be unsorted.
    """
    sorter = _SORTERS.get(len(stacks.a))
    if sorter is not None:
        sorter(stacks)