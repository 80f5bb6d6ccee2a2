"""Building new strings from existing ones."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return f"{s1}{s2}"


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a string from ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str], f: Callable[[int, MutableSequence[str]], None]
) -> None:
    """Call ``f(index, chars)`` for each character up to the first NUL.

    ``f`` may change ``chars[index]`` in place.
    """
    index = 0
    while index < len(chars) and chars[index] != "\0":
        f(index, chars)
        index += 1