"""Ranking the numbers and sharing them out between the two stacks."""

from __future__ import annotations

from collections.abc import Callable

from .stacks import PushSwap


def assign_targets(machine: PushSwap) -> int:
    """Give every node of ``a`` its 1-based rank as target and return the median."""
    ordered = sorted(node.content for node in machine.a)
    if not ordered:
        raise ValueError("cannot rank an empty stack")
    ranks = {value: rank for rank, value in enumerate(ordered, start=1)}
    for node in machine.a:
        node.target = ranks[node.content]
    return ordered[len(ordered) // 2]


def push_small(machine: PushSwap) -> None:
    """Push the top of ``a`` onto ``b`` until three elements are left."""
    for _ in range(len(machine.a) - 3):
        machine.push("b")


def _sweep(machine: PushSwap, wanted: Callable[[int], bool]) -> None:
    """Pass once over ``a``, sending wanted values to the bottom of ``b``."""
    for _ in range(len(machine.a)):
        if wanted(machine.a[0].content):
            machine.push("b")
            machine.rotate("b")
        else:
            machine.rotate("a")


def push_around_median(machine: PushSwap, median: int) -> None:
    """Move everything but three elements of ``a`` to ``b``, banded by the median.

    Values well above the median go on top of ``b``, values a little above it
    and then the median itself go to its bottom, followed by the values a
    little below it; the rest is pushed in order until three remain.
    """
    upper = median * 1.25
    for _ in range(len(machine.a)):
        top = machine.a[0].content
        if top > upper:
            machine.push("b")
        elif median < top < upper:
            machine.push("b")
            machine.rotate("b")
        elif top <= median:
            machine.rotate("a")

    _sweep(machine, lambda value: value == median)

    lower = median * 0.75
    _sweep(machine, lambda value: lower < value < median)

    if len(machine.a) < 3:
        raise RuntimeError("stack a holds fewer than three elements")
    while len(machine.a) > 3:
        machine.push("b")
        machine.rotate("b")