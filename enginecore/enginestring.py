"""A mutable string with engine-style searching, comparing and trimming."""

from __future__ import annotations

import enum
import struct
from typing import Optional, Union

from .array import INDEX_NONE
from .cstring import strcmp, stricmp, strnicmp, strupr

_WHITESPACE = " \t\n\v\f\r"
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

TextLike = Union["EngineString", str, bytes]


class SearchCase(enum.IntEnum):
    """Whether comparisons respect letter case."""

    CASE_SENSITIVE = 0
    IGNORE_CASE = 1


class SearchDir(enum.IntEnum):
    """Which end of the string a search starts from."""

    FROM_START = 0
    FROM_END = 1


def _text_of(value: TextLike) -> str:
    if isinstance(value, EngineString):
        return value._text
    if isinstance(value, bytes):
        return value.decode("utf-8")
    if isinstance(value, str):
        return value
    raise TypeError(f"expected a string, got {type(value).__name__}")


class EngineString:
    """A mutable text value.

    Comparing two engine strings with ``==`` ignores ASCII case; comparing
    with a plain ``str`` respects it.
    """

    __slots__ = ("_text",)

    def __init__(self, text: TextLike = "") -> None:
        self._text = _text_of(text)

    @classmethod
    def from_int(cls, num: int) -> "EngineString":
        return cls(str(int(num)))

    @classmethod
    def sanitize_float(cls, value: float) -> "EngineString":
        """Format a single-precision value with six decimals."""
        single = struct.unpack("f", struct.pack("f", value))[0]
        return cls(f"{single:f}")

    # size ------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._text)

    def is_empty(self) -> bool:
        return not self._text

    def empty(self) -> None:
        """Remove every character."""
        self._text = ""

    # comparing -------------------------------------------------------

    def equals(
        self, other: TextLike, search_case: SearchCase = SearchCase.CASE_SENSITIVE
    ) -> bool:
        """Compare with ``other``.

        Strings of different length are equal only when one is empty and the
        other has one character; strings of length 0 or 1 and the same length
        are always equal.
        """
        other_text = _text_of(other)
        n, m = len(self._text), len(other_text)
        if n != m:
            return n + m == 1
        if n > 1:
            compare = strcmp if search_case == SearchCase.CASE_SENSITIVE else stricmp
            return compare(self._text, other_text) == 0
        return True

    def strnicmp(self, other: TextLike, count: int) -> int:
        """Compare at most ``count`` characters ignoring ASCII case."""
        return strnicmp(self._text, _text_of(other), count)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EngineString):
            return self.equals(other, SearchCase.IGNORE_CASE)
        if isinstance(other, str):
            return self.equals(other)
        return NotImplemented

    def __hash__(self) -> int:
        # Consistent with the case-insensitive equality, under which all
        # strings shorter than two characters can compare equal.
        if len(self._text) <= 1:
            return hash(())
        return hash(self._text.translate(_ASCII_LOWER))

    def __lt__(self, other: TextLike) -> bool:
        if not isinstance(other, (EngineString, str)):
            return NotImplemented
        return self._text < _text_of(other)

    def __gt__(self, other: TextLike) -> bool:
        if not isinstance(other, (EngineString, str)):
            return NotImplemented
        return self._text > _text_of(other)

    # searching -------------------------------------------------------

    def contains(
        self,
        sub: TextLike,
        search_case: SearchCase = SearchCase.IGNORE_CASE,
        search_dir: SearchDir = SearchDir.FROM_START,
    ) -> bool:
        return self.find(sub, search_case, search_dir, 0) != INDEX_NONE

    def find(
        self,
        sub: TextLike,
        search_case: SearchCase = SearchCase.IGNORE_CASE,
        search_dir: SearchDir = SearchDir.FROM_START,
        start_position: int = INDEX_NONE,
    ) -> int:
        """Return the index of ``sub``, or ``INDEX_NONE`` if it does not occur.

        Searching from the end starts at ``start_position`` and moves towards
        the front; ``INDEX_NONE`` there means the last possible position.
        """
        needle = _text_of(sub)
        hay = self._text
        if not needle or not hay:
            return INDEX_NONE
        if search_case == SearchCase.IGNORE_CASE:
            needle = needle.translate(_ASCII_LOWER)
            hay = hay.translate(_ASCII_LOWER)

        last = len(hay) - len(needle)
        if last < 0:
            return INDEX_NONE

        if search_dir == SearchDir.FROM_START:
            start = max(min(start_position, last), 0)
            return hay.find(needle, start)

        start = last if start_position == INDEX_NONE else min(start_position, last)
        if start < 0:
            return INDEX_NONE
        return hay.rfind(needle, 0, start + len(needle))

    def find_last_of(self, chars: TextLike) -> int:
        """Index of the last character that is one of ``chars``, or ``INDEX_NONE``."""
        wanted = set(_text_of(chars))
        return next(
            (i for i in reversed(range(len(self._text))) if self._text[i] in wanted),
            INDEX_NONE,
        )

    # slicing and editing ---------------------------------------------

    def substr(self, pos: int, count: Optional[int] = None) -> "EngineString":
        """Up to ``count`` characters from ``pos``; empty if ``pos`` is past the end."""
        if pos < 0:
            raise IndexError(f"position must not be negative, got {pos}")
        if pos > len(self._text):
            return EngineString()
        end = None if count is None else pos + count
        return EngineString(self._text[pos:end])

    def remove_at(self, pos: int, count: Optional[int] = None) -> None:
        """Remove up to ``count`` characters from ``pos`` (all of them by default)."""
        if not 0 <= pos <= len(self._text):
            raise IndexError(f"position {pos} is out of range for length {len(self._text)}")
        end = len(self._text) if count is None else pos + count
        self._text = self._text[:pos] + self._text[end:]

    def front(self) -> str:
        if not self._text:
            raise IndexError("front of an empty string")
        return self._text[0]

    def back(self) -> str:
        if not self._text:
            raise IndexError("back of an empty string")
        return self._text[-1]

    def pop_back(self) -> None:
        if not self._text:
            raise IndexError("pop_back on an empty string")
        self._text = self._text[:-1]

    def to_upper(self) -> "EngineString":
        """Return a copy with ASCII letters made upper case."""
        return EngineString(strupr(self._text))

    # trimming --------------------------------------------------------

    def trim_start_and_end_inline(self) -> None:
        self.trim_end_inline()
        self.trim_start_inline()

    def trim_start_and_end(self) -> "EngineString":
        result = EngineString(self)
        result.trim_start_and_end_inline()
        return result

    def trim_start_inline(self) -> None:
        self._text = self._text.lstrip(_WHITESPACE)

    def trim_start(self) -> "EngineString":
        result = EngineString(self)
        result.trim_start_inline()
        return result

    def trim_end_inline(self) -> None:
        self._text = self._text.rstrip(_WHITESPACE)

    def trim_end(self) -> "EngineString":
        result = EngineString(self)
        result.trim_end_inline()
        return result

    # operators -------------------------------------------------------

    def __add__(self, other: TextLike) -> "EngineString":
        if not isinstance(other, (EngineString, str)):
            return NotImplemented
        return EngineString(self._text + _text_of(other))

    def __radd__(self, other: str) -> "EngineString":
        if not isinstance(other, str):
            return NotImplemented
        return EngineString(other + self._text)

    def __iadd__(self, other: TextLike) -> "EngineString":
        if not isinstance(other, (EngineString, str)):
            return NotImplemented
        self._text += _text_of(other)
        return self

    def __getitem__(self, index: int) -> str:
        return self._text[index]

    def __setitem__(self, index: int, value: str) -> None:
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError("a single character is required")
        size = len(self._text)
        if not -size <= index < size:
            raise IndexError(f"index {index} is out of range for length {size}")
        index %= size
        self._text = self._text[:index] + value + self._text[index + 1:]

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"EngineString({self._text!r})"