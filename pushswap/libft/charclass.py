"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import overload


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def isalpha(c: int | str) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: int | str) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """Return True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


@overload
def toupper(c: int) -> int: ...
@overload
def toupper(c: str) -> str: ...


def toupper(c):
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


@overload
def tolower(c: int) -> int: ...
@overload
def tolower(c: str) -> str: ...


def tolower(c):
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code