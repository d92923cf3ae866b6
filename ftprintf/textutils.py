"""String and number helpers used by the formatter."""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import Callable, Optional

_INT32_MASK = 0xFFFFFFFF
_SIZE_MASK = 0xFFFFFFFFFFFFFFFF
_LONG_MAX = 2**63 - 1
_LEADING_SKIP = "\t\n\v\f\r 0"
_DIGITS_RE = re.compile(r"[0-9]*")


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - (1 << 32) if value >= (1 << 31) else value


def _check_base(base: int) -> None:
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")


def _digit_count(value: int, base: int) -> int:
    count = 1
    while value >= base:
        value //= base
        count += 1
    return count


def atoi(text: Optional[str]) -> int:
    """Parse a leading decimal integer, with the library's lenient rules.

    Leading whitespace and zeros are skipped, a first ``-`` makes the result
    negative and any run of ``+``/``-`` signs is then ignored.  A value too
    large for a 64-bit long yields ``-1`` (or ``0`` when negative); the result
    is reduced to a 32-bit signed integer.
    """
    if text is None:
        return 0
    rest = text.lstrip(_LEADING_SKIP)
    negative = rest.startswith("-")
    rest = rest.lstrip("+-")
    digits = _DIGITS_RE.match(rest).group()
    value = 0
    for digit in digits:
        value = value * 10 + ord(digit) - ord("0")
        if value > _LONG_MAX:
            return 0 if negative else -1
    return _to_int32(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def number_length(n: int, base: int) -> int:
    """Count the characters ``n`` takes in ``base``, a minus sign included."""
    _check_base(base)
    sign = 1 if n < 0 else 0
    return sign + _digit_count(abs(n), base)


def unsigned_length(n: int, base: int) -> int:
    """Count the digits of ``n`` read as a 32-bit unsigned integer."""
    _check_base(base)
    return _digit_count(n & _INT32_MASK, base)


def _validate_digits(digits: str) -> None:
    if len(digits) < 2:
        raise ValueError("a base needs at least two digits")
    if "+" in digits or "-" in digits:
        raise ValueError("a base may not contain '+' or '-'")
    if len(set(digits)) != len(digits):
        raise ValueError("a base may not repeat a digit")


def to_base(n: int, digits: str) -> str:
    """Write ``n``, taken as a 64-bit unsigned value, with the given digits."""
    _validate_digits(digits)
    base = len(digits)
    value = n & _SIZE_MASK
    out = []
    while True:
        value, rem = divmod(value, base)
        out.append(digits[rem])
        if value == 0:
            break
    return "".join(reversed(out))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start`` on."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly within the first ``length`` characters.

    Returns the index of the first match, or ``None``.  An empty needle
    matches at index 0.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    found = haystack[:length].find(needle)
    return None if found < 0 else found


def strncmp(s1: Optional[str], s2: Optional[str], n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    if (s1 is None and s2 is None) or n <= 0:
        return 0
    if s1 is None:
        return -ord(s2[0]) if s2 else 0
    if s2 is None:
        return ord(s1[0]) if s1 else 0
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))