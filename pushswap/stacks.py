"""The two stacks of the puzzle and the eleven moves defined on them.

The top of a stack is the left end of its deque. Every move performed is
appended to ``ops`` and, when a stream is given, written to it on a line
of its own.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO


class Operation(str, Enum):
    """A move, valued by the name it is printed as."""

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


def _swap(stack: deque[int]) -> None:
    """Exchange the two top elements; fewer than two is left alone."""
    if len(stack) >= 2:
        first = stack.popleft()
        second = stack.popleft()
        stack.appendleft(first)
        stack.appendleft(second)


def _push(dest: deque[int], src: deque[int]) -> None:
    """Move the top of ``src`` onto ``dest``."""
    if not src:
        raise IndexError("cannot push from an empty stack")
    dest.appendleft(src.popleft())


def _rotate(stack: deque[int]) -> None:
    """Send the top element to the bottom."""
    stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    """Bring the bottom element to the top."""
    stack.rotate(1)


@dataclass
class Stacks:
    """Stacks ``a`` and ``b`` with a record of the moves made on them."""

    a: deque[int] = field(default_factory=deque)
    b: deque[int] = field(default_factory=deque)
    stream: TextIO | None = None
    ops: list[Operation] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.a = deque(self.a)
        self.b = deque(self.b)

    @classmethod
    def from_values(
        cls, values: Iterable[int], stream: TextIO | None = None
    ) -> Stacks:
        """Return stacks with ``values`` in ``a``, first value on top."""
        return cls(deque(values), deque(), stream)

    def apply(self, op: Operation | str) -> None:
        """Perform ``op``, record it and write its name to the stream."""
        op = Operation(op)
        match op:
            case Operation.SA:
                _swap(self.a)
            case Operation.SB:
                _swap(self.b)
            case Operation.SS:
                _swap(self.a)
                _swap(self.b)
            case Operation.PA:
                _push(self.a, self.b)
            case Operation.PB:
                _push(self.b, self.a)
            case Operation.RA:
                _rotate(self.a)
            case Operation.RB:
                _rotate(self.b)
            case Operation.RR:
                _rotate(self.a)
                _rotate(self.b)
            case Operation.RRA:
                _reverse_rotate(self.a)
            case Operation.RRB:
                _reverse_rotate(self.b)
            case Operation.RRR:
                _reverse_rotate(self.a)
                _reverse_rotate(self.b)
        self.ops.append(op)
        if self.stream is not None:
            self.stream.write(f"{op.value}\n")

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        self.apply(Operation.SA)

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        self.apply(Operation.SB)

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        self.apply(Operation.SS)

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self.apply(Operation.PA)

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self.apply(Operation.PB)

    def ra(self) -> None:
        """Rotate ``a`` upwards: its top goes to the bottom."""
        self.apply(Operation.RA)

    def rb(self) -> None:
        """Rotate ``b`` upwards: its top goes to the bottom."""
        self.apply(Operation.RB)

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        self.apply(Operation.RR)

    def rra(self) -> None:
        """Rotate ``a`` downwards: its bottom comes to the top."""
        self.apply(Operation.RRA)

    def rrb(self) -> None:
        """Rotate ``b`` downwards: its bottom comes to the top."""
        self.apply(Operation.RRB)

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        self.apply(Operation.RRR)