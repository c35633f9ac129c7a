"""Sorting stack ``a`` with the stack instructions.

Up to five elements are handled by fixed patterns. Larger inputs are
pushed to ``b`` except five, which are sorted in place; each element of
``b`` is then inserted back into ``a`` choosing at every step the one
that costs the fewest rotations.
"""

from __future__ import annotations

from typing import Deque, Dict, List

from .stack import Element, Operation, Stacks

_FOUR_MOVES: Dict[int, List[Operation]] = {
    1: [Operation.RA],
    2: [Operation.RA, Operation.RA],
    3: [Operation.RRA],
}

_FIVE_MOVES: Dict[int, List[Operation]] = {
    1: [Operation.RA],
    2: [Operation.RA, Operation.RA],
    3: [Operation.RRA, Operation.RRA],
    4: [Operation.RRA],
}


def _apply_all(stacks: Stacks, operations: List[Operation]) -> None:
    for operation in operations:
        stacks.apply(operation)


def _rotate(stacks: Stacks, cost: int, forward: Operation, backward: Operation) -> None:
    operation = forward if cost > 0 else backward
    for _ in range(abs(cost)):
        stacks.apply(operation)


def sort(stacks: Stacks) -> None:
    """Sort stack ``a``; expects it unsorted and ``b`` empty."""
    if len(stacks.a) <= 5:
        simple_sort(stacks)
    else:
        big_sort(stacks)


def simple_sort(stacks: Stacks) -> None:
    """Sort a stack ``a`` of at most five elements.

    Two elements are always swapped.
    """
    size = len(stacks.a)
    if size < 2:
        return
    if size == 2:
        stacks.apply(Operation.SA)
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)


def sort_three(stacks: Stacks) -> None:
    """Sort three elements of ``a`` in at most two instructions."""
    if stacks.is_sorted():
        return
    first, second, third = stacks.values_a()[:3]
    if first < second and first < third:
        _apply_all(stacks, [Operation.RRA, Operation.SA])
    elif first < second and first > third:
        stacks.apply(Operation.RRA)
    elif first > second and first < third:
        stacks.apply(Operation.SA)
    elif first > second and second > third:
        _apply_all(stacks, [Operation.RA, Operation.SA])
    elif first > second and second < third:
        stacks.apply(Operation.RA)


def _bring_min_to_top(stacks: Stacks, moves: Dict[int, List[Operation]]) -> None:
    values = stacks.values_a()
    distance = values.index(min(values))
    _apply_all(stacks, moves.get(distance, []))


def sort_four(stacks: Stacks) -> None:
    """Sort four elements: park the smallest in ``b``, sort three, return it."""
    _bring_min_to_top(stacks, _FOUR_MOVES)
    if stacks.is_sorted():
        return
    stacks.apply(Operation.PB)
    sort_three(stacks)
    stacks.apply(Operation.PA)


def sort_five(stacks: Stacks) -> None:
    """Sort five elements: park the smallest in ``b``, sort four, return it."""
    _bring_min_to_top(stacks, _FIVE_MOVES)
    if stacks.is_sorted():
        return
    stacks.apply(Operation.PB)
    sort_four(stacks)
    stacks.apply(Operation.PA)


def big_sort(stacks: Stacks) -> None:
    """Sort more than five elements by cheapest insertion."""
    first_push(stacks)
    simple_sort(stacks)
    while stacks.b:
        get_position(stacks)
        get_cost(stacks)
        less_moves(stacks)
    if not stacks.is_sorted():
        final_sort(stacks)


def first_push(stacks: Stacks) -> None:
    """Move all but five elements of ``a`` to ``b``.

    With more than ten elements, the lower half by rank goes first,
    rotating ``a`` past the others.
    """
    size = len(stacks.a)
    half = size // 2
    pushed = 0
    if size > 10:
        for _ in range(size):
            if pushed >= half:
                break
            if stacks.a[0].rank <= half:
                stacks.apply(Operation.PB)
                pushed += 1
            else:
                stacks.apply(Operation.RA)
    while size - pushed > 5:
        stacks.apply(Operation.PB)
        pushed += 1


def get_position(stacks: Stacks) -> None:
    """Store each element's index, and for ``b`` its insertion index in ``a``."""
    for stack in (stacks.a, stacks.b):
        for index, element in enumerate(stack):
            element.pos = index
    for element in stacks.b:
        element.target = get_target(stacks.a, element.rank)


def get_target(stack_a: Deque[Element], rank: int) -> int:
    """Index in ``stack_a`` of the element an element of ``rank`` goes above.

    That is the element with the smallest rank above ``rank``, or the
    smallest rank overall when none is above.
    """
    if not stack_a:
        raise ValueError("stack a is empty")
    indexed = [(element.rank, index) for index, element in enumerate(stack_a)]
    above = [item for item in indexed if item[0] > rank]
    return min(above or indexed)[1]


def get_cost(stacks: Stacks) -> None:
    """Store the rotations each element of ``b`` needs on both stacks.

    Positive costs rotate, negative costs reverse-rotate.
    """
    size_a = len(stacks.a)
    size_b = len(stacks.b)
    for element in stacks.b:
        element.cost_b = element.pos
        if element.pos > size_b // 2:
            element.cost_b = -(size_b - element.pos)
        element.cost_a = element.target
        if element.target > size_a // 2:
            element.cost_a = -(size_a - element.target)


def less_moves(stacks: Stacks) -> None:
    """Insert the element of ``b`` with the lowest total cost into ``a``."""
    if not stacks.b:
        raise ValueError("stack b is empty")
    best = min(stacks.b, key=lambda element: abs(element.cost_a) + abs(element.cost_b))
    execution(stacks, best.cost_a, best.cost_b)


def execution(stacks: Stacks, cost_a: int, cost_b: int) -> None:
    """Rotate both stacks by their costs, sharing moves, then push to ``a``."""
    if cost_a < 0 and cost_b < 0:
        while cost_a < 0 and cost_b < 0:
            cost_a += 1
            cost_b += 1
            stacks.apply(Operation.RRR)
    elif cost_a > 0 and cost_b > 0:
        while cost_a > 0 and cost_b > 0:
            cost_a -= 1
            cost_b -= 1
            stacks.apply(Operation.RR)
    _rotate(stacks, cost_a, Operation.RA, Operation.RRA)
    _rotate(stacks, cost_b, Operation.RB, Operation.RRB)
    stacks.apply(Operation.PA)


def lowest_position(stack_a: Deque[Element]) -> int:
    """Index of the element of rank 0."""
    for index, element in enumerate(stack_a):
        if element.rank == 0:
            return index
    raise ValueError("no element of rank 0")


def final_sort(stacks: Stacks) -> None:
    """Rotate ``a`` the shorter way until the element of rank 0 is on top."""
    size = len(stacks.a)
    lowest = lowest_position(stacks.a)
    if lowest > size // 2:
        _rotate(stacks, -(size - lowest), Operation.RA, Operation.RRA)
    else:
        _rotate(stacks, lowest, Operation.RA, Operation.RRA)