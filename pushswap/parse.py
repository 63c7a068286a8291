"""Reading the puzzle's integers from command-line arguments."""

from __future__ import annotations

from typing import Iterable, List

from pushswap.charclass import is_digit
from pushswap.stack import INT_MAX
from pushswap.strutil import split


class InputError(ValueError):
    """Raised when the arguments do not describe a valid set of integers."""


def is_digit_str(word: str) -> bool:
    """True when ``word`` is an optional sign followed only by digits.

    A bare sign, or nothing at all, counts as a number.
    """
    if word[:1] in ("-", "+"):
        word = word[1:]
    return all(is_digit(ch) for ch in word)


def parse_number(word: str) -> int:
    """Convert ``word`` to an int that fits in 32 bits.

    A bare sign reads as 0. Anything that is not a signed run of digits,
    or that lies outside the 32-bit range, raises InputError.
    """
    if not is_digit_str(word):
        raise InputError(f"not an integer: {word!r}")
    sign = -1 if word[:1] == "-" else 1
    digits = word[1:] if word[:1] in ("-", "+") else word
    value = int(digits) if digits else 0
    if (sign == 1 and value > INT_MAX) or (sign == -1 and value - 1 > INT_MAX):
        raise InputError(f"out of range: {word!r}")
    return value * sign


def parse_args(args: Iterable[str]) -> List[int]:
    """Collect the integers from ``args``, each of which may hold several
    space-separated numbers. Duplicates raise InputError."""
    values: List[int] = []
    seen = set()
    for arg in args:
        for word in split(arg, " "):
            number = parse_number(word)
            if number in seen:
                raise InputError(f"duplicate value: {number}")
            seen.add(number)
            values.append(number)
    return values