"""Small string and number helpers used by the island map parser."""

from __future__ import annotations

import math
import re
import string
from itertools import takewhile
from typing import MutableSequence, Sequence

_SPACE_CHARS = "\t\n\v\f\r "
_SPACES = frozenset(_SPACE_CHARS)
_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_HEX_DIGITS = frozenset(string.hexdigits)
_SPACE_RUN = re.compile(r"[\t\n\v\f\r ]+")


def is_space(ch: str) -> bool:
    """Return True for ASCII whitespace: tab, newline, vertical tab, form feed, CR, space."""
    return ch in _SPACES


def is_alpha(ch: str) -> bool:
    """Return True for an ASCII letter."""
    return ch in _LETTERS


def is_digit(ch: str) -> bool:
    """Return True for an ASCII decimal digit."""
    return ch in _DIGITS


def atoi(text: str | None) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Text without digits yields 0.
    """
    if not text:
        return 0
    rest = text.lstrip(_SPACE_CHARS)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = "".join(takewhile(is_digit, rest))
    return sign * int(digits) if digits else 0


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def count_words(text: str, sep: str) -> int:
    """Count the non-empty pieces of ``text`` separated by ``sep``."""
    return len(split_words(text, sep))


def count_substr(text: str, sub: str) -> int:
    """Count non-overlapping occurrences of ``sub``; an empty ``sub`` counts 0."""
    if not sub or len(sub) > len(text):
        return 0
    return text.count(sub)


def get_substr_index(text: str, sub: str) -> int:
    """Return the index of the first ``sub`` in ``text``, or -1.

    Either string being empty also gives -1.
    """
    if not text or not sub:
        return -1
    return text.find(sub)


def replace_substr(text: str, sub: str, replace: str) -> str:
    """Replace every non-overlapping ``sub`` with ``replace``."""
    if not sub:
        return text
    return text.replace(sub, replace)


def strtrim(text: str) -> str:
    """Strip leading and trailing ASCII whitespace."""
    return text.strip(_SPACE_CHARS)


def del_extra_spaces(text: str) -> str:
    """Trim ``text`` and collapse each inner whitespace run to one space."""
    return _SPACE_RUN.sub(" ", strtrim(text))


def hex_to_nbr(hex_text: str | None) -> int:
    """Convert hexadecimal digits to a number; any other character gives 0."""
    if not hex_text or not all(ch in _HEX_DIGITS for ch in hex_text):
        return 0
    return int(hex_text, 16)


def nbr_to_hex(number: int) -> str:
    """Render a non-negative number as lower-case hexadecimal."""
    if number < 0:
        raise ValueError("number must not be negative")
    return format(number, "x")


def binary_search(items: Sequence[str], target: str) -> tuple[int, int]:
    """Search sorted ``items`` for ``target``.

    Returns ``(index, steps)``; when the target is absent both are ``(-1, 0)``.
    """
    left, right = 0, len(items) - 1
    steps = 0
    while left <= right:
        steps += 1
        mid = (left + right) // 2
        probe = items[mid]
        if probe == target:
            return mid, steps
        if probe < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1, 0


def bubble_sort(items: MutableSequence[str]) -> int:
    """Sort ``items`` in place and return the number of swaps made."""
    swaps = 0
    size = len(items)
    for done in range(size - 1):
        swapped = False
        for j in range(size - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swaps += 1
                swapped = True
        if not swapped:
            break
    return swaps


def quicksort(items: MutableSequence[str], left: int, right: int) -> int:
    """Sort ``items[left:right + 1]`` in place by length; return the swap count.

    Items of equal length are never exchanged.
    """
    if left >= right:
        return 0
    if left < 0 or right >= len(items):
        raise IndexError("sort bounds out of range")

    swaps = 0
    lo, hi = left, right
    pivot_len = len(items[(lo + hi) // 2])
    while lo <= hi:
        while len(items[lo]) < pivot_len:
            lo += 1
        while len(items[hi]) > pivot_len:
            hi -= 1
        if lo <= hi:
            if lo != hi and len(items[lo]) != len(items[hi]):
                items[lo], items[hi] = items[hi], items[lo]
                swaps += 1
            lo += 1
            hi -= 1

    if left < hi:
        swaps += quicksort(items, left, hi)
    if lo < right:
        swaps += quicksort(items, lo, right)
    return swaps


def int_sqrt(x: int) -> int:
    """Return the integer square root of a perfect square, otherwise 0."""
    if x < 0:
        return 0
    root = math.isqrt(x)
    return root if root * root == x else 0


def power(base: float, exponent: int) -> float:
    """Raise ``base`` to a non-negative integer ``exponent`` by repeated multiplication."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1.0
    for _ in range(exponent):
        result *= base
    return result