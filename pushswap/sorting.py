"""Move sequences that sort stack ``a``: small-case sorts and binary radix sort."""

from __future__ import annotations

from typing import Iterable, List

from .operations import PushSwap


def sort_three(state: PushSwap) -> None:
    """Sort ``a`` when it holds at most three elements."""
    ranks = state.a.indexes()
    if len(ranks) < 2:
        return
    if len(ranks) == 2:
        if ranks[0] > ranks[1]:
            state.sa()
        return
    first, second, last = ranks[0], ranks[1], ranks[-1]
    if first > second and second < last and first < last:
        state.sa()
    elif first < second and second > last and first < last:
        state.rra()
        state.sa()
    elif first < second and second > last and first > last:
        state.rra()
    elif first > second and second < last and first > last:
        state.ra()
    elif first > second and second > last and first > last:
        state.sa()
        state.rra()


def sort_five(state: PushSwap) -> None:
    """Sort ``a`` of four or five elements by parking the smallest ones on ``b``."""
    while len(state.a) > 3:
        min_pos = state.a.min_position()
        if min_pos == 0:
            state.pb()
        elif min_pos <= len(state.a) // 2:
            state.ra()
        else:
            state.rra()
    sort_three(state)
    top, bottom = state.b.head, state.b.tail
    if len(state.b) > 1 and top is not None and bottom is not None and top.index < bottom.index:
        state.sb()
    state.pa()
    state.pa()


def radix_sort(state: PushSwap) -> None:
    """Sort ``a``, using the small-case sorts for up to five elements."""
    size = len(state.a)
    if size <= 3:
        sort_three(state)
        return
    if size <= 5:
        sort_five(state)
        return
    max_bits = (size - 1).bit_length()
    for bit in range(max_bits):
        for _ in range(size):
            head = state.a.head
            if head is not None and (head.index >> bit) & 1 == 0:
                state.pb()
            else:
                state.ra()
        while len(state.b):
            state.pa()


def solve(values: Iterable[int]) -> List[str]:
    """Moves that sort ``values``; empty when they are already in order."""
    state = PushSwap(values)
    if not state.a.is_sorted():
        radix_sort(state)
    return list(state.operations)