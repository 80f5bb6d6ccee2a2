"""Command that prints the moves sorting the integers it is given."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, ensure_unique, load_numbers
from pushswap.solver import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one move per line for the numbers in ``argv``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        values = load_numbers(args)
    except InputError:
        # Malformed input is reported but does not change the exit status.
        sys.stderr.write("Error\n")
        return 0
    try:
        values = ensure_unique(values)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for op in solve(values):
        sys.stdout.write(f"{op.value}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())