"""Reading and checking the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.libft.strtools import split

INT_MIN = -2147483648
INT_MAX = 2147483647


class InputError(ValueError):
    """The input is not a list of distinct 32-bit integers."""


def parse_int(text: str) -> int:
    """Parse an optionally signed run of decimal digits filling ``text``.

    Raises InputError for anything else, and for values outside the
    signed 32-bit range.
    """
    body = text[1:] if text[:1] in ("-", "+") else text
    if not body or not all("0" <= ch <= "9" for ch in body):
        raise InputError(f"not an integer: {text!r}")
    value = int(body)
    if text.startswith("-"):
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"out of range: {text!r}")
    return value


def load_numbers(args: Iterable[str]) -> list[int]:
    """Parse every space-separated word of every argument, in order."""
    return [parse_int(word) for arg in args for word in split(arg, " ")]


def ensure_unique(values: Iterable[int]) -> list[int]:
    """Return ``values`` as a list, raising InputError on any repeat."""
    numbers = list(values)
    seen: set[int] = set()
    for number in numbers:
        if number in seen:
            raise InputError(f"duplicate value: {number}")
        seen.add(number)
    return numbers