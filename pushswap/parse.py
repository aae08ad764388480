"""Reading and validating the numbers given on the command line."""

from __future__ import annotations

import re
from collections.abc import Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
MAX_TOKEN_LENGTH = 12

_LEADING_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_INTEGER = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """The arguments are not a list of distinct integers."""


def atoi(text: str) -> int:
    """Read the leading integer of ``text``, returning 0 if there is none."""
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def is_blank(text: str) -> bool:
    """Tell whether ``text`` holds nothing but spaces."""
    return all(char == " " for char in text)


def has_duplicates(tokens: Sequence[str]) -> bool:
    """Tell whether two tokens read as the same integer."""
    values = [atoi(token) for token in tokens]
    return len(set(values)) != len(values)


def is_valid(tokens: Sequence[str]) -> bool:
    """Tell whether the tokens are distinct, well formed 32-bit integers."""
    if has_duplicates(tokens):
        return False
    for token in tokens:
        if not _INTEGER.fullmatch(token):
            return False
        if not INT_MIN <= atoi(token) <= INT_MAX:
            return False
        if len(token) > MAX_TOKEN_LENGTH:
            return False
    return True


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn command-line arguments into the numbers to sort.

    A single argument is split on spaces. No arguments, or a single one that
    is empty or only spaces, gives an empty list. Anything invalid raises
    :class:`InputError`.
    """
    if not args:
        return []
    if len(args) == 1:
        text = args[0]
        if is_blank(text):
            return []
        tokens = [token for token in text.split(" ") if token]
    else:
        tokens = list(args)
    if not is_valid(tokens):
        raise InputError("Error")
    return [atoi(token) for token in tokens]