"""C-style string queries and conversions on Python strings.

A string ends at its first NUL character, as a C string would.
"""

from __future__ import annotations

_SPACES = " \t\n\v\r\f"
_INT_BITS = 32


def _terminated(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    span = 1 << _INT_BITS
    value %= span
    return value - span if value >= span // 2 else value


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, count: int) -> int:
    """Compare at most ``count`` characters of two strings.

    Returns the difference of the first differing character codes, or 0.
    """
    a, b = _terminated(s1), _terminated(s2)
    for i in range(max(count, 0)):
        ca = ord(a[i]) if i < len(a) else 0
        cb = ord(b[i]) if i < len(b) else 0
        if ca == 0 and cb == 0:
            break
        if ca != cb:
            return ca - cb
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Find ``little`` lying wholly within the first ``length`` characters of ``big``.

    Returns the start index of the match, 0 for an empty ``little``, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    haystack, needle = _terminated(big), _terminated(little)
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strlcpy(dest: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, NUL included.

    Returns the new buffer contents and the length of ``src``. With a size
    of zero the buffer is left as it was.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    source = _terminated(src)
    if size == 0:
        return dest, len(source)
    return source[: size - 1], len(source)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the new buffer contents and the length the full result would
    have had. When the buffer is no longer than ``dest``, nothing is
    appended and ``size + strlen(src)`` is reported.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    head, tail = _terminated(dest), _terminated(src)
    if size <= len(head):
        return head, size + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its first NUL."""
    return _terminated(s)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading white space and one sign are accepted; parsing stops at the
    first non-digit. Text without digits gives 0. The result wraps to a
    signed 32-bit value.
    """
    body = _terminated(text).lstrip(_SPACES)
    negative = False
    if body[:1] in ("-", "+"):
        negative = body[0] == "-"
        body = body[1:]
    digits = []
    for ch in body:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap_int(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal text of a signed 32-bit integer."""
    if _wrap_int(n) != n:
        raise OverflowError(f"{n} does not fit in a 32-bit integer")
    return str(n)