import random
from itertools import permutations

import pytest

from pushswap.solver import (
    find_pos,
    radix_resolve,
    solve,
    solve_insert,
    solve_small,
)
from pushswap.stacks import Operation, Stacks


def _replay(values, ops):
    stacks = Stacks.from_values(values)
    for op in ops:
        stacks.apply(op)
    return stacks


def test_find_pos_present():
    assert find_pos([3, 1, 2], 1) == 1
    assert find_pos([3, 1, 2], 3) == 0


def test_find_pos_absent_gives_size():
    assert find_pos([3, 1, 2], 9) == 3
    assert find_pos([], 0) == 0


@pytest.mark.parametrize("perm", list(permutations(range(3))))
def test_solve_small_three(perm):
    stacks = Stacks.from_values(perm)
    solve_small(stacks)
    assert list(stacks.a) == [0, 1, 2]
    assert not stacks.b
    assert len(stacks.ops) <= 2


def test_solve_small_reverse_three_moves():
    stacks = Stacks.from_values([2, 1, 0])
    solve_small(stacks)
    assert stacks.ops == [Operation.RA, Operation.SA]


def test_solve_small_two():
    stacks = Stacks.from_values([1, 0])
    solve_small(stacks)
    assert list(stacks.a) == [0, 1]
    assert stacks.ops == [Operation.RA]


def test_solve_small_leaves_larger_stacks():
    stacks = Stacks.from_values([3, 2, 1, 0])
    solve_small(stacks)
    assert list(stacks.a) == [3, 2, 1, 0]
    assert stacks.ops == []


@pytest.mark.parametrize("seed", range(5))
def test_solve_insert_sorts(seed):
    perm = list(range(12))
    random.Random(seed).shuffle(perm)
    stacks = Stacks.from_values(perm)
    solve_insert(stacks)
    assert list(stacks.a) == list(range(12))
    assert not stacks.b


def test_solve_insert_sorted_makes_no_moves():
    stacks = Stacks.from_values(range(6))
    solve_insert(stacks)
    assert stacks.ops == []


@pytest.mark.parametrize("seed", range(3))
def test_radix_resolve_sorts(seed):
    perm = list(range(60))
    random.Random(seed).shuffle(perm)
    stacks = Stacks.from_values(perm)
    radix_resolve(stacks)
    assert list(stacks.a) == list(range(60))
    assert not stacks.b


def test_radix_resolve_reversed():
    stacks = Stacks.from_values(range(59, -1, -1))
    radix_resolve(stacks)
    assert list(stacks.a) == list(range(60))


@pytest.mark.parametrize("size", [0, 1, 2, 3, 5, 20, 49, 50, 80])
def test_solve_sorts_values(size):
    values = random.Random(size).sample(range(-1000, 1000), size)
    ops = solve(values)
    stacks = _replay(values, ops)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


def test_solve_sorted_input_needs_no_moves():
    assert solve(list(range(60))) == []
    assert solve([-5, 0, 7]) == []


def test_solve_returns_operations():
    ops = solve([3, -1])
    assert all(isinstance(op, Operation) for op in ops)
    assert list(_replay([3, -1], ops).a) == [-1, 3]