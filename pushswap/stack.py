"""An integer stack whose top is its first element."""

from __future__ import annotations

from typing import Iterable, Iterator

from pushswap.printf import cformat


class StackError(Exception):
    """Raised when an operation is impossible on the stack's current contents."""


class Stack:
    """A last-in, first-out stack of integers.

    ``items`` are given top first. Iteration also runs from the top down.
    """

    def __init__(self, items: Iterable[int] = ()) -> None:
        # The end of the list is the top of the stack.
        self._items: list[int] = list(items)[::-1]

    def push(self, num: int) -> int:
        """Put ``num`` on top of the stack and return it."""
        self._items.append(num)
        return num

    def pop(self) -> int:
        """Remove and return the topmost element."""
        if not self._items:
            raise StackError("can't pop empty stack")
        return self._items.pop()

    def peek(self) -> int:
        """Return the topmost element without removing it."""
        if not self._items:
            raise StackError("stack empty, can't peek")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"

    def render(self) -> str:
        """Return the elements on one line, top first, aligned for their sign."""
        cells = ((" " if num >= 0 else "") + cformat("%i ", num) for num in self)
        return "".join(cells) + "\n"