"""Walks a format string and renders each conversion."""

from __future__ import annotations

import sys
from typing import Callable, Iterable

from .conversions import (
    Output,
    Spec,
    format_char,
    format_decimal,
    format_hex_lower,
    format_hex_upper,
    format_octal,
    format_pointer,
    format_string,
    format_unsigned,
)
from .textutils import atoi

_CONVERSIONS = "cspdiuxXo"
_FLAG_CHARS = "-.+ *"
_END = "\0"

_HANDLERS: tuple[Callable[[Spec, Output, object], None], ...] = (
    format_char,
    format_string,
    format_pointer,
    format_decimal,
    format_decimal,
    format_unsigned,
    format_hex_lower,
    format_hex_upper,
    format_octal,
)


class FormatArgumentError(TypeError):
    """Raised when the arguments do not fit what the format asks for."""


class _Arguments:
    def __init__(self, values: Iterable[object]) -> None:
        self._values = iter(values)
        self._taken = 0

    def next(self) -> object:
        try:
            value = next(self._values)
        except StopIteration:
            raise FormatArgumentError(
                f"format needs more than {self._taken} argument(s)"
            ) from None
        self._taken += 1
        return value

    def next_int(self) -> int:
        value = self.next()
        if not isinstance(value, int):
            raise FormatArgumentError(
                f"argument {self._taken} must be an integer for '*'"
            )
        value &= 0xFFFFFFFF
        return value - (1 << 32) if value >= (1 << 31) else value


def _at(fmt: str, index: int) -> str:
    return fmt[index] if 0 <= index < len(fmt) else _END


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def conversion_index(char: str) -> int:
    """Position of ``char`` among the supported conversions, or -1."""
    if len(char) != 1:
        return -1
    return _CONVERSIONS.find(char)


def skip_flags(fmt: str, index: int, begin: bool) -> int:
    """Return the index past the flag, width and precision characters."""
    if begin:
        while True:
            char = _at(fmt, index)
            if not (_is_digit(char) or (char != _END and char in _FLAG_CHARS)):
                break
            index += 1
    return index


def _print_percent(fmt: str, i: int, args: _Arguments, out: Output) -> None:
    spaces = 0
    if _at(fmt, i) == "*" and _at(fmt, i - 1) == ".":
        args.next_int()
    while _is_digit(_at(fmt, i)) or _at(fmt, i) in "*.":
        i -= 1
    sign = -1 if _at(fmt, i) == "-" else 1
    if _at(fmt, i + 1) == "*" or (_at(fmt, i + 1) == "0" and _at(fmt, i + 2) == "*"):
        spaces = _int32(args.next_int() * sign)
    elif _is_digit(_at(fmt, i + 1)):
        spaces = _int32(atoi(fmt[i + 1:]) * sign)
    if spaces < 0:
        out.write("%")
    fill = "0" if (_at(fmt, i + 1) == "0" and spaces > 0 and _at(fmt, i) != "-") else " "
    magnitude = _int32(abs(spaces))
    if magnitude > 1:
        out.write(fill * (magnitude - 1))
    if magnitude == spaces:
        out.write("%")


def _read_width_precision(fmt: str, i: int, args: _Arguments, spec: Spec) -> None:
    while _is_digit(_at(fmt, i)) or _at(fmt, i) in "-+":
        i -= 1
    if _at(fmt, i) == ".":
        spec.precision = atoi(fmt[i + 1:])
    if _at(fmt, i) != "." or _is_digit(_at(fmt, i - 1)):
        if _at(fmt, i) == ".":
            i -= 1
        while _is_digit(_at(fmt, i)) or _at(fmt, i) in "-+":
            i -= 1
        i += 1
        spec.width_text = fmt[i:]
        spec.width = atoi(fmt[i:])
    if _at(fmt, i) == "." and _at(fmt, i - 1) == "*":
        width = args.next_int()
        spec.width = -width if (_at(fmt, i - 2) == "-" and width > 0) else width
        if _at(fmt, i - 2) == " ":
            spec.space = True


def _read_digit_width(fmt: str, i: int, spec: Spec) -> None:
    while _is_digit(_at(fmt, i)) or _at(fmt, i) in "-+":
        i -= 1
    spec.width = atoi(fmt[i + 1:])
    spec.width_text = fmt[i + 1:]


def _read_stars(fmt: str, i: int, args: _Arguments, spec: Spec) -> None:
    from_star = True
    while _at(fmt, i) in "*.":
        i -= 1
    i += 1
    if _at(fmt, i) == "*" and _at(fmt, i - 1) != ".":
        spec.width = args.next_int()
    if _at(fmt, i - 1) == "-" and spec.width > 0:
        spec.width = -spec.width
    if _at(fmt, i + 1) == "." or _at(fmt, i) == ".":
        spec.precision = args.next_int()
    if _at(fmt, i) == "." and _is_digit(_at(fmt, i - 1)):
        _read_digit_width(fmt, i - 1, spec)
        from_star = False
    if from_star:
        spec.width_text = "00" if (spec.width != 0 and _at(fmt, i - 1) == "0") else None


def sprintf(fmt: str, *args: object) -> str:
    """Render ``fmt`` with ``args`` and return the text."""
    arguments = _Arguments(args)
    out = Output()
    i = 0
    while i < len(fmt):
        spec = Spec()
        begin = fmt[i] == "%"
        if begin and len(fmt) > 1:
            i += 1
        i = skip_flags(fmt, i, begin)
        current = _at(fmt, i)
        previous = _at(fmt, i - 1)
        if (
            i != 0
            and (_is_digit(previous) or previous in "*.")
            and begin
            and current == "%"
        ):
            _print_percent(fmt, i - 1, arguments, out)
        conversion = conversion_index(current)
        if conversion != -1 and begin:
            if previous == "*":
                _read_stars(fmt, i - 1, arguments, spec)
            if _is_digit(previous) or previous == ".":
                _read_width_precision(fmt, i - 1, arguments, spec)
            _HANDLERS[conversion](spec, out, arguments.next())
        elif current != "%" or previous == "%":
            out.write(current)
        i += 1
    return out.text


def printf(fmt: str, *args: object) -> int:
    """Render ``fmt`` to standard output and return the number of characters written."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)