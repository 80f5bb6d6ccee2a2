import io

import pytest

from pushswap.stacks import Operation, Stacks


@pytest.mark.parametrize(
    "name", ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"]
)
def test_operation_names_match_printed_moves(name):
    out = io.StringIO()
    stacks = Stacks([1, 2], [3, 4], stream=out)
    stacks.apply(name)
    assert out.getvalue() == name + "\n"
    assert [str(op) for op in stacks.ops] == [name]


def test_from_values_puts_first_value_on_top():
    stacks = Stacks.from_values([4, 5, 6])
    assert list(stacks.a) == [4, 5, 6]
    assert list(stacks.b) == []


def test_sa_swaps_top_two():
    stacks = Stacks.from_values([1, 2, 3])
    stacks.sa()
    assert list(stacks.a) == [2, 1, 3]


def test_swap_twice_is_identity():
    stacks = Stacks.from_values([7, 8, 9], )
    stacks.sa()
    stacks.sa()
    assert list(stacks.a) == [7, 8, 9]


def test_swap_single_element_does_nothing():
    stacks = Stacks.from_values([1])
    stacks.sa()
    assert list(stacks.a) == [1]
    assert stacks.ops == [Operation.SA]


def test_pb_then_pa_restores():
    stacks = Stacks.from_values([1, 2, 3])
    stacks.pb()
    assert list(stacks.a) == [2, 3]
    assert list(stacks.b) == [1]
    stacks.pa()
    assert list(stacks.a) == [1, 2, 3]
    assert list(stacks.b) == []


def test_push_from_empty_raises_and_records_nothing():
    stacks = Stacks.from_values([1, 2])
    with pytest.raises(IndexError):
        stacks.pa()
    assert stacks.ops == []
    assert list(stacks.a) == [1, 2]


def test_ra_moves_top_to_bottom():
    stacks = Stacks.from_values([1, 2, 3])
    stacks.ra()
    assert list(stacks.a) == [2, 3, 1]


def test_rra_moves_bottom_to_top():
    stacks = Stacks.from_values([1, 2, 3])
    stacks.rra()
    assert list(stacks.a) == [3, 1, 2]


def test_rotate_then_reverse_rotate_is_identity():
    values = [5, 3, 9, 1]
    stacks = Stacks(values, [8, 6])
    stacks.rr()
    stacks.rrr()
    assert list(stacks.a) == values
    assert list(stacks.b) == [8, 6]


def test_rotate_empty_stack_is_harmless():
    stacks = Stacks()
    stacks.ra()
    stacks.rrb()
    assert list(stacks.a) == [] and list(stacks.b) == []


def test_b_moves_act_only_on_b():
    stacks = Stacks([1, 2], [3, 4])
    stacks.sb()
    assert list(stacks.b) == [4, 3]
    stacks.rb()
    assert list(stacks.b) == [3, 4]
    assert list(stacks.a) == [1, 2]


def test_ss_swaps_both():
    stacks = Stacks([1, 2], [3, 4])
    stacks.ss()
    assert list(stacks.a) == [2, 1]
    assert list(stacks.b) == [4, 3]


def test_moves_are_written_and_recorded():
    out = io.StringIO()
    stacks = Stacks.from_values([1, 2, 3], stream=out)
    stacks.sa()
    stacks.pb()
    stacks.rra()
    assert out.getvalue() == "sa\npb\nrra\n"
    assert stacks.ops == [Operation.SA, Operation.PB, Operation.RRA]


def test_apply_accepts_names():
    stacks = Stacks.from_values([1, 2, 3])
    stacks.apply("ra")
    assert stacks.ops == [Operation.RA]
    with pytest.raises(ValueError):
        stacks.apply("xx")


def test_moves_preserve_elements():
    stacks = Stacks.from_values([4, 0, 3, 1, 2])
    for op in ["pb", "pb", "ss", "rr", "rrr", "ra", "pa", "rrb", "pa", "sa"]:
        stacks.apply(op)
    assert sorted(list(stacks.a) + list(stacks.b)) == [0, 1, 2, 3, 4]