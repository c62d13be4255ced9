"""Searching, comparing and copying NUL-terminated text."""

from __future__ import annotations

import operator

NUL = "\0"


def _cstr(s: str) -> str:
    """The text of ``s`` up to, not including, its first NUL."""
    return s.partition(NUL)[0]


def _char(c: str | int) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    return chr(operator.index(c) & 0xFF)


def _code_at(s: str, index: int) -> int:
    return ord(s[index]) if index < len(s) else 0


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_cstr(s))


def strchr(s: str, c: str | int) -> int | None:
    """Index of the first ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _cstr(s)
    target = _char(c)
    if target == NUL:
        return len(text)
    index = text.find(target)
    return index if index >= 0 else None


def strrchr(s: str, c: str | int) -> int | None:
    """Index of the last ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _cstr(s)
    target = _char(c)
    if target == NUL:
        return len(text)
    index = text.rfind(target)
    return index if index >= 0 else None


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Index of the first ``needle`` lying wholly within the first ``n`` characters.

    An empty needle is found at index zero.
    """
    if n < 0:
        raise ValueError("length must not be negative")
    pattern = _cstr(needle)
    if not pattern:
        return 0
    index = _cstr(haystack)[:n].find(pattern)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells which text sorts first."""
    if n < 0:
        raise ValueError("length must not be negative")
    a, b = _cstr(s1), _cstr(s2)
    for index in range(n):
        x, y = _code_at(a, index), _code_at(b, index)
        if x != y:
            return x - y
        if x == 0:
            break
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, NUL included.

    Returns the text that fits and the full length of ``src``, so a
    truncated copy shows as a length of at least ``size``. With ``size``
    zero nothing is written and the text is empty.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    text = _cstr(src)
    if size == 0:
        return "", len(text)
    return text[: size - 1], len(text)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to make. When
    ``dest`` already fills the buffer it is returned unchanged and the
    length is ``size`` plus the length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    head, tail = _cstr(dest), _cstr(src)
    if size <= len(head):
        return head, size + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def strdup(s: str) -> str:
    """A copy of the text of ``s`` up to its first NUL."""
    return _cstr(s)