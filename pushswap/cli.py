"""Command-line entry point: validates the numbers given as arguments."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from pushswap.numbers import INT_MAX, INT_MIN, atol, is_digit, is_num_str


def _write_error(message: str) -> None:
    sys.stderr.write(message)
    sys.stderr.flush()
    sys.stdout.write("\n")
    sys.stdout.flush()


def valid_multinumber_string(text: str) -> bool:
    """Check a space-separated list of integers held in a single argument."""
    if not text:
        return False
    pos = 0
    length = len(text)
    while pos < length:
        sign = 1
        if text[pos] == " ":
            pos += 1
            continue
        if text[pos] in "+-" and pos + 1 < length:
            if text[pos] == "-":
                sign = -1
            pos += 1
        if not is_digit(text[pos]):
            return False
        value = atol(text[pos:])
        if (sign > 0 and value > INT_MAX) or (sign < 0 and value > -INT_MIN):
            return False
        pos += 1
    return True


def validate_input(args: Iterable[str]) -> bool:
    """Return True if every argument holds only integers that fit in 32 bits."""
    for arg in args:
        if " " in arg:
            if not valid_multinumber_string(arg):
                return False
        elif not is_num_str(arg) or not INT_MIN <= atol(arg) <= INT_MAX:
            return False
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the command-line numbers, reporting ``Error`` when they are bad."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or not validate_input(args):
        _write_error("Error")
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())