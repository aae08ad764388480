"""Command line: print the instructions that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parse import InputError, parse_arguments
from .sort import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Read numbers from ``argv`` and print one instruction per line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        numbers = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    if not numbers:
        return 0
    try:
        moves = solve(numbers)
    except RuntimeError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{move}\n" for move in moves))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())