"""Rendering of single conversions (``%c %s %p %d %i %u %x %X %o``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .textutils import number_length, to_base, unsigned_length

_INT32_MASK = 0xFFFFFFFF
_SIZE_MASK = 0xFFFFFFFFFFFFFFFF
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_OCTAL = "01234567"
_NULL_STRING = "(null)"


def _int32(value: int) -> int:
    value &= _INT32_MASK
    return value - (1 << 32) if value >= (1 << 31) else value


def _require_int(value: object) -> int:
    if not isinstance(value, int):
        raise TypeError(f"an integer is required, got {type(value).__name__}")
    return value


@dataclass
class Spec:
    """State of one conversion: width, precision and the flags that matter."""

    width: int = 0
    width_text: Optional[str] = None
    precision: int = -1
    length: int = 0
    space: bool = False

    @property
    def zero_padded(self) -> bool:
        """True when the width was written with a leading ``0``."""
        return self.width_text is not None and self.width_text.startswith("0")


class Output:
    """Collects the produced text and knows how many characters it holds."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, text: str) -> None:
        """Append ``text`` to the output."""
        self._parts.append(text)

    def pad(self, spec: Spec, count: int, zero: bool, negative: bool) -> None:
        """Write ``count`` padding characters, placing the sign when zero-padding."""
        fill = "0" if zero else " "
        if negative and zero:
            self.write("-")
        if not zero and negative and spec.precision >= spec.length and spec.length != 0:
            count -= 1
        if count > 0:
            self.write(fill * count)

    @property
    def text(self) -> str:
        """Everything written so far."""
        return "".join(self._parts)

    def __len__(self) -> int:
        return sum(len(part) for part in self._parts)


def crop(out: Output, text: str, end: int) -> None:
    """Write ``text`` cut to ``end`` characters; ``end`` of zero or less writes it whole."""
    if end <= 0 or end >= len(text):
        out.write(text)
    else:
        out.write(text[:end])


def format_char(spec: Spec, out: Output, value: object) -> None:
    """Render ``%c`` from a one-character string or a character code."""
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        char = value
    else:
        char = chr(_require_int(value) & 0xFF)
    if spec.width > 0:
        out.pad(spec, spec.width - 1, False, False)
    out.write(char)
    if spec.width < 0:
        out.pad(spec, abs(spec.width) - 1, False, False)


def format_string(spec: Spec, out: Output, value: object) -> None:
    """Render ``%s``; ``None`` prints as ``(null)``."""
    if value is None:
        text = _NULL_STRING
    elif isinstance(value, str):
        text = value
    else:
        raise TypeError(f"%s requires a string, got {type(value).__name__}")
    zero = spec.zero_padded
    if spec.precision == 0 or 0 < spec.precision < len(text):
        shown = spec.precision
    else:
        shown = len(text)
    spaces = max(abs(spec.width) - shown, 0) if spec.width else 0
    if spaces > 0 and spec.width >= 0:
        out.pad(spec, spaces, zero, False)
    if spec.precision != 0:
        crop(out, text, spec.precision)
    if spaces > 0 and spec.width < 0:
        out.pad(spec, spaces, zero, False)


def format_pointer(spec: Spec, out: Output, value: object) -> None:
    """Render ``%p`` as ``0x`` followed by lower-case hexadecimal digits."""
    address = 0 if value is None else _require_int(value) & _SIZE_MASK
    digits = len(to_base(address, _HEX_LOWER))
    spec.length = digits
    if spec.width > 0:
        if spec.precision == 0 or spec.precision > spec.length:
            spec.length = spec.precision
        if spec.width > spec.length + 2:
            out.pad(spec, spec.width - spec.length - 2, False, False)
    out.write("0x")
    if spec.precision > 0 and spec.precision > digits:
        out.pad(spec, spec.precision - digits, True, False)
    if spec.precision != 0 or address != 0:
        out.write(to_base(address, _HEX_LOWER))
    if spec.width < 0 and abs(spec.width) > spec.length + 2:
        if (spec.precision == 0 and address == 0) or spec.precision > spec.length:
            spec.length = spec.precision
        out.pad(spec, abs(spec.width) - spec.length - 2, False, False)


def _emit_number(
    spec: Spec,
    out: Output,
    number: int,
    negative: bool,
    measure: Callable[[int], int],
    render: Callable[[int], str],
) -> None:
    if spec.space:
        out.write(" ")
    zero = spec.zero_padded and spec.precision < 0 and spec.width != 0
    if spec.precision > spec.length or (spec.precision == 0 and number == 0):
        spec.length = spec.precision
    if spec.width > spec.length:
        out.pad(spec, spec.width - spec.length, zero, negative)
    digits = measure(number)
    if spec.precision > 0 and spec.precision > digits:
        out.pad(spec, spec.precision - digits, True, negative)
    if spec.precision != 0 or number != 0:
        out.write(render(number))
    if spec.width < 0 and abs(spec.width) > spec.length:
        if (spec.precision == 0 and number == 0) or spec.precision > spec.length:
            spec.length = spec.precision
        out.pad(spec, abs(spec.width) - spec.length, False, negative)


def format_decimal(spec: Spec, out: Output, value: object) -> None:
    """Render ``%d`` and ``%i`` for a 32-bit signed value."""
    number = _int32(_require_int(value))
    spec.length = number_length(number, 10)
    negative = number < 0 and (spec.precision > spec.length - 1 or spec.zero_padded)
    if negative and (
        (spec.precision > 0 and spec.precision > spec.length - 1)
        or (spec.zero_padded and spec.width > spec.length and spec.precision < 0)
    ):
        number = _int32(abs(number))
    _emit_number(spec, out, number, negative, lambda n: number_length(n, 10), str)


def _format_unsigned_in(spec: Spec, out: Output, value: object, base: int,
                        render: Callable[[int], str]) -> None:
    number = _require_int(value) & _INT32_MASK
    spec.length = unsigned_length(number, base)
    _emit_number(spec, out, number, False, lambda n: unsigned_length(n, base), render)


def format_unsigned(spec: Spec, out: Output, value: object) -> None:
    """Render ``%u`` for a 32-bit unsigned value."""
    _format_unsigned_in(spec, out, value, 10, str)


def format_hex_lower(spec: Spec, out: Output, value: object) -> None:
    """Render ``%x`` for a 32-bit unsigned value."""
    _format_unsigned_in(spec, out, value, 16, lambda n: to_base(n, _HEX_LOWER))


def format_hex_upper(spec: Spec, out: Output, value: object) -> None:
    """Render ``%X`` for a 32-bit unsigned value."""
    _format_unsigned_in(spec, out, value, 16, lambda n: to_base(n, _HEX_UPPER))


def format_octal(spec: Spec, out: Output, value: object) -> None:
    """Render ``%o``; a precision of zero prints no digits at all."""
    number = _require_int(value) & _INT32_MASK
    digits = number_length(_int32(number), 8)
    spec.length = digits
    if spec.width > 0:
        zero = spec.zero_padded and spec.precision < 0
        if spec.precision == 0 or spec.precision > spec.length:
            spec.length = spec.precision
        if spec.width > spec.length:
            out.pad(spec, spec.width - spec.length, zero, False)
    if spec.precision > 0 and spec.precision > digits:
        out.pad(spec, spec.precision - digits, True, False)
    if spec.precision != 0:
        out.write(to_base(number, _OCTAL))
    if spec.width < 0 and abs(spec.width) > spec.length:
        if spec.precision == 0 or spec.precision > spec.length:
            spec.length = spec.precision
        out.pad(spec, abs(spec.width) - spec.length, False, False)