"""The push_swap instruction set acting on two stacks."""

from __future__ import annotations

import sys
from enum import Enum
from typing import IO, Optional, Union

from pushswap.printf import cprint
from pushswap.stack import Stack


class Operation(str, Enum):
    """The eleven push_swap instructions."""

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


def _swap(stack: Stack) -> None:
    if len(stack) < 2:
        return
    first = stack.pop()
    second = stack.pop()
    stack.push(first)
    stack.push(second)


def _push(target: Stack, source: Stack) -> None:
    if len(source) == 0:
        return
    target.push(source.pop())


def _rotate(stack: Stack) -> None:
    """Move the top element to the bottom."""
    if len(stack) <= 1:
        return
    first = stack.pop()
    rest = [stack.pop() for _ in range(len(stack))]
    stack.push(first)
    for num in reversed(rest):
        stack.push(num)


def _reverse_rotate(stack: Stack) -> None:
    """Move the bottom element to the top."""
    if len(stack) <= 1:
        return
    above = [stack.pop() for _ in range(len(stack) - 1)]
    last = stack.pop()
    for num in reversed(above):
        stack.push(num)
    stack.push(last)


class PushSwap:
    """Two stacks ``a`` and ``b`` and the instructions that rearrange them.

    Every instruction writes its name and a newline to ``out`` (stdout by
    default) before taking effect. Instructions that cannot act, such as
    swapping a stack of one, are still written out and leave the stacks as
    they are.
    """

    def __init__(
        self,
        a: Optional[Stack] = None,
        b: Optional[Stack] = None,
        out: Optional[IO[str]] = None,
    ) -> None:
        self.a = Stack() if a is None else a
        self.b = Stack() if b is None else b
        self.out = out

    def _emit(self, op: Operation) -> None:
        cprint("%s\n", op.value, stream=self.out if self.out is not None else sys.stdout)

    def apply(self, op: Union[Operation, str]) -> None:
        """Run the instruction ``op``, given as an Operation or its name."""
        operation = Operation(op)
        getattr(self, operation.value)()

    def sa(self) -> None:
        """Swap the top two elements of a."""
        self._emit(Operation.SA)
        _swap(self.a)

    def sb(self) -> None:
        """Swap the top two elements of b."""
        self._emit(Operation.SB)
        _swap(self.b)

    def ss(self) -> None:
        """Swap the top two elements of both stacks."""
        self._emit(Operation.SS)
        _swap(self.a)
        _swap(self.b)

    def pa(self) -> None:
        """Move the top of b onto a."""
        self._emit(Operation.PA)
        _push(self.a, self.b)

    def pb(self) -> None:
        """Move the top of a onto b."""
        self._emit(Operation.PB)
        _push(self.b, self.a)

    def ra(self) -> None:
        """Rotate a: its top element becomes the bottom one."""
        self._emit(Operation.RA)
        _rotate(self.a)

    def rb(self) -> None:
        """Rotate b: its top element becomes the bottom one."""
        self._emit(Operation.RB)
        _rotate(self.b)

    def rr(self) -> None:
        """Rotate both stacks."""
        self._emit(Operation.RR)
        _rotate(self.a)
        _rotate(self.b)

    def rra(self) -> None:
        """Reverse-rotate a: its bottom element becomes the top one."""
        self._emit(Operation.RRA)
        _reverse_rotate(self.a)

    def rrb(self) -> None:
        """Reverse-rotate b: its bottom element becomes the top one."""
        self._emit(Operation.RRB)
        _reverse_rotate(self.b)

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self._emit(Operation.RRR)
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)