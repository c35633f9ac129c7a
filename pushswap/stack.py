"""The two stacks and the eleven instructions that act on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Iterable, List, Union


@dataclass
class Element:
    """A value in a stack together with the bookkeeping the sorter needs."""

    value: int
    rank: int = -1
    pos: int = -1
    target: int = -1
    cost_a: int = -1
    cost_b: int = -1


class Operation(Enum):
    """An instruction; its value is the text that names it."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap(stack: Deque[Element]) -> None:
    stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: Deque[Element]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: Deque[Element]) -> None:
    stack.rotate(1)


_ACTIONS = {
    Operation.SA: (_swap, "a"),
    Operation.SB: (_swap, "b"),
    Operation.SS: (_swap, "ab"),
    Operation.RA: (_rotate, "a"),
    Operation.RB: (_rotate, "b"),
    Operation.RR: (_rotate, "ab"),
    Operation.RRA: (_reverse_rotate, "a"),
    Operation.RRB: (_reverse_rotate, "b"),
    Operation.RRR: (_reverse_rotate, "ab"),
}


class Stacks:
    """Stacks ``a`` and ``b``; index 0 is the top of each.

    When ``record`` is true, every instruction that is emitted is appended
    to ``operations``.
    """

    def __init__(
        self, elements: Iterable[Union[Element, int]] = (), record: bool = False
    ) -> None:
        self.a: Deque[Element] = deque(
            item if isinstance(item, Element) else Element(item) for item in elements
        )
        self.b: Deque[Element] = deque()
        self.record = record
        self.operations: List[Operation] = []

    def _stack(self, name: str) -> Deque[Element]:
        return self.a if name == "a" else self.b

    def apply(self, operation: Union[Operation, str]) -> bool:
        """Carry out an instruction given as an Operation or its name.

        Returns whether the instruction was emitted. Single-stack
        instructions on a stack too small for them do nothing and are not
        emitted; ``ss``, ``rr`` and ``rrr`` are always emitted. Raises
        ValueError for an unknown name.
        """
        op = Operation(operation)
        if op is Operation.PA:
            emitted = self._push(self.b, self.a)
        elif op is Operation.PB:
            emitted = self._push(self.a, self.b)
        else:
            action, names = _ACTIONS[op]
            if len(names) == 1:
                stack = self._stack(names)
                emitted = len(stack) >= 2
                if emitted:
                    action(stack)
            else:
                for name in names:
                    stack = self._stack(name)
                    if len(stack) > 1:
                        action(stack)
                emitted = True
        if emitted and self.record:
            self.operations.append(op)
        return emitted

    @staticmethod
    def _push(source: Deque[Element], dest: Deque[Element]) -> bool:
        if not source:
            return False
        dest.appendleft(source.popleft())
        return True

    def values_a(self) -> List[int]:
        """Values of stack ``a`` from top to bottom."""
        return [element.value for element in self.a]

    def values_b(self) -> List[int]:
        """Values of stack ``b`` from top to bottom."""
        return [element.value for element in self.b]

    def is_sorted(self) -> bool:
        """True when stack ``a`` is in ascending order from the top."""
        values = self.values_a()
        return all(first <= second for first, second in zip(values, values[1:]))