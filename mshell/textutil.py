"""Small string and character helpers used throughout the shell."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Union

CharLike = Union[str, int]

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_WHITESPACE = " \t\n\v\f\r"


def _code(c: CharLike) -> int:
    """Return the numeric code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _to_c_int(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit.  Values beyond the range of a 64-bit long are clamped
    to it, and the result is then narrowed to a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = sign * int("".join(digits)) if digits else 0
    value = max(_LONG_MIN, min(_LONG_MAX, value))
    return _to_c_int(value)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: Optional[str]) -> str:
    """Remove every character of ``charset`` from both ends of ``text``."""
    return text.strip(charset or "")


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the first match, or ``None`` if there is none.  An
    empty needle always matches at index 0.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign of the result orders them.

    A NUL character ends a string, as does its real end.
    """
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return (ord(a) & 0xFF if ord(a) < 256 else ord(a)) - (
                ord(b) & 0xFF if ord(b) < 256 else ord(b)
            )
        if a == "\0":
            return 0
    return 0


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; anything else comes back unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; anything else comes back unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code