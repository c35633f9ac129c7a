import random

import pytest

from pushswap.stack import Element, Operation, Stacks


def make(values, record=True):
    return Stacks(values, record=record)


def test_operation_from_name():
    assert Operation("rra") is Operation.RRA
    assert str(Operation.PB) == "pb"


def test_unknown_operation_raises():
    with pytest.raises(ValueError):
        make([1, 2]).apply("xx")


def test_elements_and_ints_accepted():
    stacks = Stacks([Element(5, rank=0), 3])
    assert stacks.values_a() == [5, 3]
    assert stacks.a[0].rank == 0
    assert stacks.a[1].rank == -1


def test_swap_a():
    stacks = make([1, 2, 3])
    assert stacks.apply(Operation.SA) is True
    assert stacks.values_a() == [2, 1, 3]
    assert stacks.operations == [Operation.SA]


def test_swap_a_too_small_not_emitted():
    stacks = make([1])
    assert stacks.apply("sa") is False
    assert stacks.values_a() == [1]
    assert stacks.operations == []


def test_rotate_and_reverse_rotate():
    stacks = make([1, 2, 3])
    stacks.apply("ra")
    assert stacks.values_a() == [2, 3, 1]
    stacks.apply("rra")
    stacks.apply("rra")
    assert stacks.values_a() == [3, 1, 2]


def test_push_moves_top():
    stacks = make([1, 2, 3])
    stacks.apply("pb")
    stacks.apply("pb")
    assert stacks.values_a() == [3]
    assert stacks.values_b() == [2, 1]
    stacks.apply("pa")
    assert stacks.values_a() == [2, 3]
    assert stacks.values_b() == [1]


def test_push_from_empty_not_emitted():
    stacks = make([1, 2])
    assert stacks.apply("pa") is False
    assert stacks.values_a() == [1, 2]
    assert stacks.operations == []


def test_double_operations_always_emitted():
    stacks = make([1])
    for name in ("ss", "rr", "rrr"):
        assert stacks.apply(name) is True
    assert stacks.values_a() == [1]
    assert stacks.operations == [Operation.SS, Operation.RR, Operation.RRR]


def test_double_operations_act_on_both():
    stacks = make([1, 2, 3, 4])
    stacks.apply("pb")
    stacks.apply("pb")
    stacks.apply("ss")
    assert stacks.values_a() == [4, 3]
    assert stacks.values_b() == [1, 2]
    stacks.apply("rr")
    assert stacks.values_a() == [3, 4]
    assert stacks.values_b() == [2, 1]


def test_single_b_operations_leave_a_alone():
    stacks = make([1, 2, 3])
    stacks.apply("sb")
    stacks.apply("rb")
    stacks.apply("rrb")
    assert stacks.values_a() == [1, 2, 3]
    assert stacks.operations == []


def test_not_recording_keeps_operations_empty():
    stacks = make([2, 1], record=False)
    assert stacks.apply("sa") is True
    assert stacks.values_a() == [1, 2]
    assert stacks.operations == []


def test_rotate_then_reverse_is_identity():
    values = [5, 9, -2, 0, 7]
    stacks = make(values)
    stacks.apply("ra")
    stacks.apply("rra")
    assert stacks.values_a() == values


def test_random_operations_preserve_contents():
    rng = random.Random(1234)
    values = list(range(-10, 10))
    stacks = make(values)
    for _ in range(500):
        stacks.apply(rng.choice(list(Operation)))
    assert sorted(stacks.values_a() + stacks.values_b()) == values


def test_is_sorted():
    assert make([1, 2, 3]).is_sorted() is True
    assert make([2, 1, 3]).is_sorted() is False
    assert make([]).is_sorted() is True


def test_is_sorted_ignores_b():
    stacks = make([3, 1, 2])
    stacks.apply("pb")
    assert stacks.values_b() == [3]
    assert stacks.is_sorted() is True