"""Numeric string helpers with C-style parsing semantics."""

from __future__ import annotations

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def _scan(text: str) -> tuple[int, int]:
    """Parse leading whitespace, an optional sign and digits.

    Returns ``(sign, magnitude)`` where the magnitude accumulates with 64-bit
    signed wrap-around; a negative magnitude signals overflow.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    num = 0
    while pos < length and is_digit(text[pos]):
        num = _wrap(num * 10 + ord(text[pos]) - ord("0"), 64)
        pos += 1
        if num < 0:
            break
    return sign, num


def atol(text: str) -> int:
    """Parse the leading integer of ``text`` as a 64-bit signed value.

    Overflow saturates at ``LONG_MAX`` or ``LONG_MIN`` depending on the sign.
    Text without a leading number yields 0.
    """
    sign, num = _scan(text)
    if num < 0:
        return LONG_MAX if sign > 0 else LONG_MIN
    return sign * num


def atoi(text: str) -> int:
    """Parse the leading integer of ``text`` as a 32-bit signed value.

    Values are truncated to 32 bits the way a C ``int`` cast does; a 64-bit
    overflow yields the truncated ``LONG_MAX`` or ``LONG_MIN``.
    """
    sign, num = _scan(text)
    if num < 0:
        return _wrap(LONG_MAX if sign > 0 else LONG_MIN, 32)
    return _wrap(sign * _wrap(num, 32), 32)


def is_digit(char: str) -> bool:
    """Return True if ``char`` is a single ASCII decimal digit."""
    return len(char) == 1 and "0" <= char <= "9"


def is_num_str(text: str) -> bool:
    """Return True if ``text`` is an optional sign followed by one or more digits."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return bool(body) and all(is_digit(char) for char in body)