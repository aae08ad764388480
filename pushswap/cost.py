"""Goals, move costs and bringing chosen values to the top of a stack."""

from __future__ import annotations

from collections.abc import Sequence

from .stacks import Node, PushSwap


def position_of(stack: Sequence[Node], value: int) -> int:
    """Return the 1-based position of ``value`` in ``stack``, or 0 if absent."""
    return next(
        (index for index, node in enumerate(stack, start=1) if node.content == value),
        0,
    )


def position_of_target(stack: Sequence[Node], target: int) -> int:
    """Return the 1-based position of the node with ``target``, or 0 if absent."""
    return next(
        (index for index, node in enumerate(stack, start=1) if node.target == target),
        0,
    )


def upper_goal(stack_a: Sequence[Node], target: int) -> int:
    """Return the value in ``a`` ranked just above ``target``, or 0 if none is."""
    above = [node for node in stack_a if node.target > target]
    closest = min(above, key=lambda node: node.target - target, default=None)
    return closest.content if closest is not None else 0


def lower_goal(stack_a: Sequence[Node], target: int) -> int:
    """Return the negated value in ``a`` ranked just below ``target``, or 0."""
    below = [node for node in stack_a if node.target < target]
    closest = min(below, key=lambda node: target - node.target, default=None)
    return -closest.content if closest is not None else 0


def assign_goals(machine: PushSwap) -> None:
    """Record for every node of ``b`` where it should land in ``a``.

    A positive goal names the value it must sit on top of; a negative goal
    names, negated, the value that must be at the bottom of ``a``.
    """
    for node in machine.b:
        goal = upper_goal(machine.a, node.target)
        if goal == 0:
            goal = lower_goal(machine.a, node.target)
        node.goal = goal


def _distance_in_a(stack_a: Sequence[Node], goal: int) -> int:
    index = next(
        (index for index, node in enumerate(stack_a) if node.content == goal),
        len(stack_a),
    )
    if index >= len(stack_a) // 2:
        index = len(stack_a) - index
    return index


def move_cost(machine: PushSwap, goal: int, value: int) -> int:
    """Estimate the rotations needed to insert ``value`` from ``b`` at ``goal``."""
    size = len(machine.b)
    count = position_of(machine.b, value)
    if count >= size // 2:
        count = size - count
    if goal < 0:
        goal = -goal
        count += 1
    return count + _distance_in_a(machine.a, goal)


def assign_costs(machine: PushSwap) -> None:
    """Compute the goal and the cost of every node of ``b``."""
    assign_goals(machine)
    for node in machine.b:
        node.cost = move_cost(machine, node.goal, node.content)


def _put_bottom_a(machine: PushSwap, value: int, position: int) -> None:
    if not machine.a:
        return
    if all(node.content != value for node in machine.a):
        raise ValueError(f"{value} is not in stack a")
    half = (len(machine.a) + 1) // 2
    while machine.a[-1].content != value:
        if position <= half:
            machine.rotate("a")
        else:
            machine.reverse_rotate("a")


def put_top_a(machine: PushSwap, value: int, position: int) -> None:
    """Rotate ``a`` until ``value`` is on top, or for a negative value, at the bottom.

    ``position`` decides the direction of rotation.
    """
    if value < 0:
        _put_bottom_a(machine, -value, position)
        return
    if not machine.a:
        return
    if all(node.content != value for node in machine.a):
        raise ValueError(f"{value} is not in stack a")
    half = (len(machine.a) + 1) // 2
    while machine.a[0].content != value:
        if position <= half:
            machine.rotate("a")
        else:
            machine.reverse_rotate("a")


def put_top_b(machine: PushSwap, value: int, position: int) -> None:
    """Rotate ``b`` until ``value`` is on top; ``position`` picks the direction."""
    if all(node.content != value for node in machine.b):
        raise ValueError(f"{value} is not in stack b")
    half = len(machine.b) // 2
    while machine.b[0].content != value:
        if position <= half:
            machine.rotate("b")
        else:
            machine.reverse_rotate("b")