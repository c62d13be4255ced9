"""Building new text from old: splitting, slicing, joining, trimming, mapping."""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence


def _separator(sep: str) -> str:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError("separator must be a single character")
    return sep


def split(s: str, sep: str) -> list[str]:
    """Words of ``s`` between runs of ``sep``; empty words are dropped."""
    return [word for word in s.split(_separator(sep)) if word]


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end, or a length of zero, gives empty text.
    """
    start = operator.index(start)
    length = operator.index(length)
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s) or length == 0:
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """``s`` without the characters of ``charset`` at either end.

    When the last character to keep is the first character of ``s``, the
    result is empty, as it is when every character lies in ``charset``.
    """
    kept = [index for index, char in enumerate(s) if char not in charset]
    if not kept or kept[-1] == 0:
        return ""
    return s[kept[0] : kept[-1] + 1]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """New text made of ``func(index, char)`` for each character of ``s``."""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Replace each character in place with ``func(index, char)``.

    Where ``func`` returns ``None`` the character is left as it was.
    """
    for index, char in enumerate(chars):
        result = func(index, char)
        if result is not None:
            chars[index] = result