"""Sorting stack ``a`` with the fewest moves the cost-based strategy finds.

For more than three numbers, numbers are pushed onto ``b`` one at a
time, always choosing the one that needs the fewest rotations to land
just above the next smaller number in ``b``. The last three in ``a``
are sorted directly, then every number in ``b`` goes back to sit above
the next larger number in ``a``, and ``a`` is rotated until its
smallest number is on top.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Callable, Deque, Iterable, List

from pushswap.stacks import Stacks, is_sorted


def _above_median(stack: Deque[int], value: int) -> bool:
    return stack.index(value) <= len(stack) // 2


def _distance(index: int, length: int) -> int:
    """Rotations needed to bring position *index* to the top, either way round."""
    return index if index <= length // 2 else length - index


def _bring_to_top(
    stack: Deque[int],
    value: int,
    rotate: Callable[[], None],
    reverse_rotate: Callable[[], None],
) -> None:
    move = rotate if _above_median(stack, value) else reverse_rotate
    while stack[0] != value:
        move()


def _move_a_to_b(stacks: Stacks) -> None:
    a, b = stacks.a, stacks.b
    b_sorted = sorted(b)
    b_positions = {value: index for index, value in enumerate(b)}
    len_a, len_b = len(a), len(b)

    best_cost = None
    cheapest = target = 0
    for index, value in enumerate(a):
        smaller = bisect_left(b_sorted, value)
        candidate = b_sorted[smaller - 1] if smaller else b_sorted[-1]
        cost = _distance(index, len_a) + _distance(b_positions[candidate], len_b)
        if best_cost is None or cost < best_cost:
            best_cost, cheapest, target = cost, value, candidate

    cheapest_up = _above_median(a, cheapest)
    target_up = _above_median(b, target)
    if cheapest_up and target_up:
        while b[0] != target and a[0] != cheapest:
            stacks.rr()
    elif not cheapest_up and not target_up:
        while b[0] != target and a[0] != cheapest:
            stacks.rrr()
    _bring_to_top(a, cheapest, stacks.ra, stacks.rra)
    _bring_to_top(b, target, stacks.rb, stacks.rrb)
    stacks.pb()


def _move_b_to_a(stacks: Stacks) -> None:
    a = stacks.a
    top = stacks.b[0]
    larger = [value for value in a if value > top]
    target = min(larger) if larger else min(a)
    _bring_to_top(a, target, stacks.ra, stacks.rra)
    stacks.pa()


def sort_three(stacks: Stacks) -> None:
    """Sort ``a`` when it holds three numbers (two also work).

    Raises ``ValueError`` when ``a`` holds fewer than two numbers.
    """
    a = stacks.a
    if len(a) < 2:
        raise ValueError("sort_three needs at least two numbers on stack a")
    biggest = max(a)
    if a[0] == biggest:
        stacks.ra()
    elif a[1] == biggest:
        stacks.rra()
    if a[0] > a[1]:
        stacks.sa()


def sort_stacks(stacks: Stacks) -> None:
    """Sort ``a`` using ``b`` as scratch space.

    Raises ``ValueError`` when ``a`` holds fewer than two numbers or a
    number twice.
    """
    a = stacks.a
    if len(set(a)) != len(a):
        raise ValueError("stack a holds duplicate numbers")
    if len(a) < 2:
        raise ValueError("sort_stacks needs at least two numbers on stack a")

    length = len(a)
    for _ in range(2):
        if length > 3 and not is_sorted(a):
            stacks.pb()
            length -= 1
    while length > 3 and not is_sorted(a):
        length -= 1
        _move_a_to_b(stacks)
    sort_three(stacks)
    while stacks.b:
        _move_b_to_a(stacks)
    _bring_to_top(a, min(a), stacks.ra, stacks.rra)


def sort(stacks: Stacks) -> None:
    """Sort ``a`` with the strategy suited to its size; do nothing if already sorted."""
    a = stacks.a
    if is_sorted(a):
        return
    if len(a) == 2:
        stacks.sa()
    elif len(a) == 3:
        sort_three(stacks)
    else:
        sort_stacks(stacks)


def solve(values: Iterable[int]) -> List[str]:
    """Return the moves that sort *values* held on stack ``a``."""
    stacks = Stacks(values)
    sort(stacks)
    return list(stacks.moves)