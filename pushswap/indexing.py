"""Ranking values and the predicates the sorting loop relies on."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise


def rank(values: Sequence[int]) -> list[int]:
    """Return each value's position in ascending order, counted from 0.

    Among equal values the later one gets the lower position.
    """
    order = sorted(range(len(values)), key=lambda i: (values[i], -i))
    positions = [0] * len(values)
    for position, index in enumerate(order):
        positions[index] = position
    return positions


def get_bit(number: int, i: int) -> int:
    """Return the ``i``-th lowest binary digit of ``number``, counted from 1.

    Digits are taken with truncating division, so a negative number gives
    0 or -1. An ``i`` of 0 or less gives 0.
    """
    remainder = 0
    for _ in range(i):
        quotient = abs(number) // 2
        if number < 0:
            quotient = -quotient
        remainder = number - 2 * quotient
        number = quotient
    return remainder


def all_bit_set(positions: Iterable[int], i: int) -> bool:
    """Return True if bit ``i`` is 1 in every position."""
    return all(get_bit(position, i) == 1 for position in positions)


def has_ended(positions: Iterable[int]) -> bool:
    """Return True if the positions run 0, 1, 2, ... from the top."""
    return all(position == i for i, position in enumerate(positions))


def in_order(positions: Iterable[int]) -> bool:
    """Return True if no position is greater than the one below it."""
    return all(upper <= lower for upper, lower in pairwise(positions))


def in_reverse_order(positions: Iterable[int]) -> bool:
    """Return True if no position is smaller than the one below it."""
    return all(upper >= lower for upper, lower in pairwise(positions))