"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

from typing import TextIO

from pushswap.libft.strings import itoa


def putchar_fd(c: str, stream: TextIO | None) -> None:
    """Write the single character ``c`` to ``stream``.

    A missing stream is ignored.
    """
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if stream is not None:
        stream.write(c)


def putstr_fd(s: str | None, stream: TextIO | None) -> None:
    """Write ``s`` to ``stream``; a missing string writes nothing."""
    if s is None or stream is None:
        return
    stream.write(s)


def putendl_fd(s: str | None, stream: TextIO | None) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    putstr_fd(s, stream)
    putchar_fd("\n", stream)


def putnbr_fd(n: int, stream: TextIO | None) -> None:
    """Write the decimal text of the signed 32-bit integer ``n``."""
    putstr_fd(itoa(n), stream)