"""String helpers: number conversion, splitting, searching, slicing and mapping.

Searching functions return indices instead of pointers, with ``None``
where nothing is found. Length-limited copies return the resulting
string together with the length they tried to create.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, Union

from pushswap.charclass import is_digit

LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)

_WHITESPACE = "\t\n\v\f\r "

Char = Union[str, int]


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement integer of ``bits`` bits."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _char(c: Char) -> str:
    if isinstance(c, int):
        return chr(c & 0xFF)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace is skipped and one optional sign is accepted. A
    magnitude that does not fit in a 64-bit long is clamped, and the
    result is then truncated to a 32-bit int.
    """
    text = s.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] == "-":
        sign = -1
    if text[:1] in ("-", "+"):
        text = text[1:]

    value = 0
    for ch in text:
        if not is_digit(ch):
            break
        value = value * 10 + int(ch)
        if value > LONG_MAX:
            value = LONG_MAX if sign == 1 else LONG_MIN
            break
    return _wrap(_wrap(value * sign, 64), 32)


def itoa(n: int) -> str:
    """Decimal representation of ``n``."""
    return str(int(n))


def split(s: str, sep: Char) -> List[str]:
    """Split ``s`` on ``sep``, dropping the empty words between separators."""
    sep = _char(sep)
    if sep == "\0":
        return [s] if s else []
    return [word for word in s.split(sep) if word]


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``; NUL finds the terminator at ``len(s)``."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    if n < 0:
        raise ValueError("n must not be negative")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a == 0 and b == 0:
            break
        if a != b:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying entirely within the first ``length`` characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, dstsize: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` characters including the terminator.

    Returns the copied text and the length of ``src``.
    """
    if dstsize < 0:
        raise ValueError("dstsize must not be negative")
    if dstsize == 0:
        return "", len(src)
    return src[:dstsize - 1], len(src)


def strlcat(dst: str, src: str, dstsize: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``dstsize`` characters.

    Returns the resulting text and the length the full result would have had.
    """
    if dstsize < 0:
        raise ValueError("dstsize must not be negative")
    if dstsize == 0:
        return dst, len(src)
    if dstsize <= len(dst):
        return dst, len(src) + dstsize
    room = dstsize - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s) or length == 0:
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of ``s1`` and ``s2``."""
    if s1 is None or s2 is None:
        raise TypeError("both strings are required")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """``s`` without leading and trailing characters that appear in ``charset``."""
    if s is None or charset is None:
        raise TypeError("both the string and the set are required")
    if not charset:
        return s
    return s.strip(charset)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of ``f(index, char)`` for every character of ``s``."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(s: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Apply ``f(index, char)`` to each item of ``s`` in place.

    A returned value replaces the item; ``None`` leaves it unchanged.
    """
    for i, ch in enumerate(list(s)):
        replacement = f(i, ch)
        if replacement is not None:
            s[i] = replacement