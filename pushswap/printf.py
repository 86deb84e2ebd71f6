"""A small printf with the conversions ``c s p d i u x X %``."""

from __future__ import annotations

import re
import sys
from typing import IO, Any, Callable, Iterator, Optional

CONVERSION_SET = "cspdiuxX%"
HEX_BASE_LOWER_CASE = "0123456789abcdef"
HEX_BASE_UPPER_CASE = "0123456789ABCDEF"

_UINT_MASK = (1 << 32) - 1
_PTR_MASK = (1 << 64) - 1
_DIRECTIVE = re.compile("%([" + re.escape(CONVERSION_SET) + "]?)")


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {type(value).__name__}")
    return value


def _to_int32(value: Any) -> int:
    number = _as_int(value) & _UINT_MASK
    return number - (1 << 32) if number >= 1 << 31 else number


def _to_uint32(value: Any) -> int:
    return _as_int(value) & _UINT_MASK


def _to_hex(number: int, digits: str) -> str:
    if number == 0:
        return digits[0]
    out = []
    while number:
        number, mod = divmod(number, 16)
        out.append(digits[mod])
    return "".join(reversed(out))


def _conv_c(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(_as_int(value) & 0xFF)


def _conv_s(value: Any) -> str:
    if value is None:
        return "(null)"
    return str(value)


def _conv_p(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    address &= _PTR_MASK
    if address == 0:
        return "(nil)"
    return "0x" + _to_hex(address, HEX_BASE_LOWER_CASE)


def _conv_d(value: Any) -> str:
    return str(_to_int32(value))


def _conv_u(value: Any) -> str:
    return str(_to_uint32(value))


def _conv_x(value: Any) -> str:
    return _to_hex(_to_uint32(value), HEX_BASE_LOWER_CASE)


def _conv_upper_x(value: Any) -> str:
    return _to_hex(_to_uint32(value), HEX_BASE_UPPER_CASE)


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _conv_c,
    "s": _conv_s,
    "p": _conv_p,
    "d": _conv_d,
    "i": _conv_d,
    "u": _conv_u,
    "x": _conv_x,
    "X": _conv_upper_x,
}


def cformat(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the resulting text.

    An unknown conversion, or a lone ``%`` at the end, is written out as a
    literal ``%`` and the text after it is kept as is. Extra arguments are
    ignored; too few raise TypeError.
    """
    if fmt is None:
        raise TypeError("format string must not be None")
    remaining: Iterator[Any] = iter(args)

    def replace(match: re.Match) -> str:
        kind = match.group(1)
        if kind == "" or kind == "%":
            return "%"
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{kind}") from None
        return _CONVERTERS[kind](value)

    return _DIRECTIVE.sub(replace, fmt)


def cprint(fmt: str, *args: Any, stream: Optional[IO[str]] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = cformat(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)