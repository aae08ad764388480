"""The two stacks and the instructions that act on them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_RULE = "=" * 34


@dataclass
class Node:
    """One element of a stack, with the bookkeeping the sorter attaches to it."""

    content: int
    target: int = 0
    cost: int = 0
    goal: int = 0


class PushSwap:
    """Stacks ``a`` and ``b`` plus the instructions applied to them so far.

    Index 0 of each list is the top of the stack. Every instruction that
    changes something is appended to ``moves`` under its usual name.
    """

    def __init__(self, numbers: Iterable[int]) -> None:
        self.a: list[Node] = [Node(number) for number in numbers]
        self.b: list[Node] = []
        self.moves: list[str] = []

    def _stack(self, name: str) -> list[Node]:
        if name == "a":
            return self.a
        if name == "b":
            return self.b
        raise ValueError(f"unknown stack {name!r}")

    @staticmethod
    def _swap(stack: list[Node]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: list[Node]) -> bool:
        if len(stack) < 2:
            return False
        stack.append(stack.pop(0))
        return True

    @staticmethod
    def _reverse_rotate(stack: list[Node]) -> bool:
        if len(stack) < 2:
            return False
        stack.insert(0, stack.pop())
        return True

    def swap(self, name: str) -> None:
        """Exchange the two top elements of the named stack."""
        if self._swap(self._stack(name)):
            self.moves.append(f"s{name}")

    def rotate(self, name: str) -> None:
        """Move the top element of the named stack to its bottom."""
        if self._rotate(self._stack(name)):
            self.moves.append(f"r{name}")

    def reverse_rotate(self, name: str) -> None:
        """Move the bottom element of the named stack to its top."""
        if self._reverse_rotate(self._stack(name)):
            self.moves.append(f"rr{name}")

    def push(self, name: str) -> None:
        """Take the top of the other stack and put it on top of the named one."""
        dest = self._stack(name)
        source = self.b if dest is self.a else self.a
        if not source:
            return
        dest.insert(0, source.pop(0))
        self.moves.append(f"p{name}")

    def ss(self) -> None:
        """Swap both stacks as one instruction."""
        self._swap(self.a)
        self._swap(self.b)
        self.moves.append("ss")

    def rr(self) -> None:
        """Rotate both stacks as one instruction."""
        self._rotate(self.a)
        self._rotate(self.b)
        self.moves.append("rr")

    def rrr(self) -> None:
        """Reverse-rotate both stacks as one instruction."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self.moves.append("rrr")

    def describe(self, name: str) -> str:
        """Return a readable dump of every node in the named stack."""
        blocks = []
        for index, node in enumerate(self._stack(name), start=1):
            blocks.append(
                f"{_RULE}\n"
                f"stack {name}{index} \n"
                f"content  ; {node.content} \n"
                f"target  ; {node.target} \n"
                f"cost  ; {node.cost} \n"
                f"goal  ; {node.goal} \n"
                f"{_RULE}\n"
            )
        return "".join(blocks)