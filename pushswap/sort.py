"""Sorting stack ``a`` by inserting the cheapest element of ``b`` each step."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .cost import assign_costs, position_of, position_of_target, put_top_a, put_top_b
from .median import assign_targets, push_around_median, push_small
from .stacks import Node, PushSwap

SMALL_LIMIT = 10


def is_in_order(stack: Sequence[Node]) -> bool:
    """Tell whether the targets run 1, 2, 3... from the top down."""
    return all(upper.target + 1 == lower.target for upper, lower in zip(stack, stack[1:]))


def sort_three(machine: PushSwap) -> None:
    """Sort the three elements at the top of ``a`` in at most two moves."""
    a, b, c = (node.content for node in machine.a[:3])
    if a < b < c:
        return
    if b < c < a:
        machine.rotate("a")
    elif c < a < b:
        machine.reverse_rotate("a")
    elif b < a < c:
        machine.swap("a")
    elif c < b < a:
        machine.swap("a")
        machine.reverse_rotate("a")
    elif a < c < b:
        machine.reverse_rotate("a")
        machine.swap("a")


def cheapest(machine: PushSwap) -> int:
    """Return the value in ``b`` that costs least to insert into ``a``."""
    assign_costs(machine)
    return min(machine.b, key=lambda node: node.cost).content


def insertion_step(machine: PushSwap) -> bool:
    """Insert one element of ``b`` into ``a``; return True once ``b`` is empty."""
    if not machine.b:
        return True
    assign_costs(machine)
    value = cheapest(machine)
    put_top_b(machine, value, position_of(machine.b, value))
    goal = machine.b[0].goal
    put_top_a(machine, goal, position_of(machine.a, goal))
    machine.push("a")
    return False


def finish(machine: PushSwap) -> None:
    """Empty ``b`` into ``a`` and rotate the smallest element to the top."""
    while not insertion_step(machine):
        pass
    if not machine.a:
        return
    position = position_of_target(machine.a, 1)
    if position == 0:
        raise ValueError("no element of stack a has target 1")
    half = len(machine.a) // 2
    while machine.a[0].target != 1:
        if position <= half:
            machine.rotate("a")
        else:
            machine.reverse_rotate("a")


def solve(numbers: Iterable[int]) -> list[str]:
    """Return the instructions that sort ``numbers`` onto stack ``a``."""
    machine = PushSwap(numbers)
    if not machine.a:
        return []
    median = assign_targets(machine)
    if is_in_order(machine.a):
        return list(machine.moves)
    size = len(machine.a)
    if size <= 3:
        if size == 2:
            machine.rotate("a")
        else:
            sort_three(machine)
        return list(machine.moves)
    if size <= SMALL_LIMIT:
        push_small(machine)
    else:
        push_around_median(machine, median)
    sort_three(machine)
    finish(machine)
    return list(machine.moves)