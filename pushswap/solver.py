"""Sorting stack ``a`` with the puzzle's moves.

Values are first replaced by their rank, so the stacks hold positions
0 to n-1 and a sorted stack reads 0, 1, 2, ... from the top.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import chain

from pushswap.indexing import (
    get_bit,
    has_ended,
    in_order,
    in_reverse_order,
    rank,
)
from pushswap.stacks import Operation, Stacks

INSERTION_LIMIT = 50


def find_pos(stack: Iterable[int], pos: int) -> int:
    """Return the depth of ``pos`` in ``stack``, or the stack's size if absent."""
    depth = 0
    for depth, value in enumerate(stack):
        if value == pos:
            return depth
    else:
        return depth + 1 if stack else 0


def _solve_three(stacks: Stacks) -> None:
    a = stacks.a
    top, second = a[0], a[1]
    if top == 0:
        while not has_ended(a):
            stacks.sa()
            stacks.ra()
    elif top == 1 and second == 2:
        stacks.rra()
    elif top == 1 and second == 0:
        stacks.sa()
    elif top == 2 and second == 0:
        stacks.ra()
    elif top == 2 and second == 1:
        stacks.ra()
        stacks.sa()


def solve_small(stacks: Stacks) -> None:
    """Sort a stack ``a`` of two or three positions; other sizes are left alone."""
    size = len(stacks.a)
    if size == 2:
        while not has_ended(stacks.a):
            stacks.ra()
    elif size == 3:
        _solve_three(stacks)


def solve_insert(stacks: Stacks) -> None:
    """Sort by bringing each smallest position to the top and pushing it to ``b``."""
    total = len(stacks.a)
    remaining = total
    while not has_ended(stacks.a) or stacks.b:
        target = total - remaining
        while (depth := find_pos(stacks.a, target)) != 0:
            if depth > remaining // 2:
                stacks.rra()
            else:
                stacks.ra()
            if has_ended(stacks.a) and not stacks.b:
                return
        if in_reverse_order(stacks.b) and in_order(stacks.a):
            while stacks.b:
                stacks.pa()
        else:
            stacks.pb()
        remaining -= 1


def radix_resolve(stacks: Stacks) -> None:
    """Sort by binary digits of the positions, lowest digit first.

    Raises RuntimeError if the digits are exhausted without the stack
    being sorted, since no further pass could change its order.
    """
    limit = max(chain(stacks.a, stacks.b), default=0).bit_length()
    bit = 1
    while not has_ended(stacks.a) or stacks.b:
        if bit > limit and not stacks.b:
            raise RuntimeError("radix passes cannot sort this stack")
        for _ in range(len(stacks.a)):
            if in_order(stacks.a):
                break
            if get_bit(stacks.a[0], bit) == 0:
                stacks.pb()
            else:
                stacks.ra()
        bit += 1
        while stacks.b:
            stacks.pa()


def solve(values: Sequence[int]) -> list[Operation]:
    """Return the moves that sort ``values``, first value on top of ``a``."""
    stacks = Stacks.from_values(rank(values))
    solve_small(stacks)
    if len(stacks.a) < INSERTION_LIMIT:
        solve_insert(stacks)
    radix_resolve(stacks)
    return stacks.ops