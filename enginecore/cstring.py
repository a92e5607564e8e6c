"""C-style string comparison helpers on Python strings.

Every string is read as if it ended in a NUL character, and reading stops at
the first NUL, as the C functions do. Case folding only touches ASCII letters.
"""

from __future__ import annotations

import itertools
from typing import Iterator

_NUL = "\0"


def _chars(text: str) -> Iterator[str]:
    """Yield the characters up to the first NUL, then NUL forever."""
    yield from text.split(_NUL, 1)[0]
    yield from itertools.repeat(_NUL)


def _fold(char: str) -> int:
    """Code point of ``char`` with ASCII upper case letters lowered."""
    if "A" <= char <= "Z":
        return ord(char) + 32
    return ord(char)


def strcmp(a: str, b: str) -> int:
    """Compare two strings; negative, zero or positive as ``a`` sorts before, with or after ``b``."""
    for ca, cb in zip(_chars(a), _chars(b)):
        if ca != cb:
            return ord(ca) - ord(cb)
        if ca == _NUL:
            return 0
    return 0  # unreachable: both generators end in endless NULs


def strncmp(a: str, b: str, count: int) -> int:
    """Compare at most ``count`` characters of two strings."""
    for ca, cb in itertools.islice(zip(_chars(a), _chars(b)), max(count, 0)):
        if ca != cb:
            return ord(ca) - ord(cb)
        if ca == _NUL:
            break
    return 0


def stricmp(a: str, b: str) -> int:
    """Compare two strings ignoring ASCII case."""
    for ca, cb in zip(_chars(a), _chars(b)):
        if ca == _NUL or _fold(ca) != _fold(cb):
            return _fold(ca) - _fold(cb)
    return 0  # unreachable


def strnicmp(a: str, b: str, count: int) -> int:
    """Compare at most ``count`` characters ignoring ASCII case.

    Comparison stops without a difference as soon as ``a`` runs out, so a
    prefix of ``b`` compares equal to it.
    """
    for ca, cb in itertools.islice(zip(_chars(a), _chars(b)), max(count, 0)):
        if ca == _NUL:
            break
        if _fold(ca) != _fold(cb):
            return _fold(ca) - _fold(cb)
    return 0


def strupr(text: str) -> str:
    """Return ``text`` with ASCII letters before the first NUL made upper case."""
    head, sep, tail = text.partition(_NUL)
    upper = "".join(chr(ord(c) - 32) if "a" <= c <= "z" else c for c in head)
    return upper + sep + tail