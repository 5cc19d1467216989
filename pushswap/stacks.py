"""The two stacks of the puzzle and the eleven moves that act on them."""

from __future__ import annotations

from collections import deque
from itertools import pairwise
from typing import Deque, Iterable, List, Optional, TextIO


def is_sorted(values: Iterable[int]) -> bool:
    """True when *values* never decrease from first to last; empty counts as sorted."""
    return all(first <= second for first, second in pairwise(values))


class Stacks:
    """Stacks ``a`` and ``b``, with the top of each at index 0.

    Every move is appended to ``moves`` and, when an output stream is
    given, written to it on its own line. A move that has nothing to act
    on leaves the stacks unchanged but is still recorded.
    """

    def __init__(
        self, values: Iterable[int] = (), output: Optional[TextIO] = None
    ) -> None:
        self.a: Deque[int] = deque(values)
        self.b: Deque[int] = deque()
        self.output = output
        self.moves: List[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _record(self, name: str) -> None:
        self.moves.append(name)
        if self.output is not None:
            self.output.write(f"{name}\n")

    @staticmethod
    def _swap(stack: Deque[int]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _push(dst: Deque[int], src: Deque[int]) -> None:
        if src:
            dst.appendleft(src.popleft())

    @staticmethod
    def _rotate(stack: Deque[int]) -> None:
        stack.rotate(-1)

    @staticmethod
    def _reverse_rotate(stack: Deque[int]) -> None:
        stack.rotate(1)

    def sa(self) -> None:
        """Swap the top two elements of ``a``."""
        self._swap(self.a)
        self._record("sa")

    def sb(self) -> None:
        """Swap the top two elements of ``b``."""
        self._swap(self.b)
        self._record("sb")

    def ss(self) -> None:
        """Swap the top two elements of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self._record("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._push(self.a, self.b)
        self._record("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._push(self.b, self.a)
        self._record("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self._rotate(self.a)
        self._record("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self._rotate(self.b)
        self._record("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self._rotate(self.a)
        self._rotate(self.b)
        self._record("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self._reverse_rotate(self.a)
        self._record("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self._reverse_rotate(self.b)
        self._record("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self._record("rrr")