"""String conversions: integer parsing and formatting, splitting, trimming,
slicing, joining and per-character mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional

_SPACES = " \n\t\v\f\r"
_INT_BITS = 32


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def _require_count(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _wrap_int(value: int) -> int:
    """Reduce an integer to the range of a 32-bit signed int."""
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus // 2 else value


def atoi(s: str) -> int:
    """Parse a leading decimal integer from ``s``.

    Leading whitespace is skipped and one sign is accepted; a ``"+"``
    directly followed by ``"-"`` is not a sign. Parsing stops at the first
    non-digit, and a string with no digits gives 0. The result wraps to the
    range of a 32-bit signed integer.
    """
    text = _require_str(s, "s")
    pos = 0
    while pos < len(text) and text[pos] in _SPACES:
        pos += 1
    sign = 1
    if text[pos:pos + 1] == "+" and text[pos + 1:pos + 2] != "-":
        pos += 1
    elif text[pos:pos + 1] == "-":
        sign = -1
        pos += 1
    value = 0
    for ch in text[pos:]:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap_int(value * sign)


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading minus sign when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, got {type(n).__name__}")
    return str(n)


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the single character ``sep``, dropping empty words."""
    text = _require_str(s, "s")
    delimiter = _require_str(sep, "sep")
    if len(delimiter) != 1:
        raise ValueError(f"sep must be a single character, got {delimiter!r}")
    return [word for word in text.split(delimiter) if word]


def trim(s: str, charset: str) -> str:
    """Remove every leading and trailing character of ``s`` found in ``charset``."""
    text = _require_str(s, "s")
    chars = _require_str(charset, "charset")
    if not chars:
        return text
    return text.strip(chars)


def substring(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    text = _require_str(s, "s")
    begin = _require_count(start, "start")
    count = _require_count(length, "length")
    if begin >= len(text):
        return ""
    return text[begin:begin + count]


def join(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def _check_char(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a character, got {type(value).__name__}")
    if len(value) != 1:
        raise ValueError(f"expected a single character, got {value!r}")
    return value


def map_indexed(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    text = _require_str(s, "s")
    return "".join(_check_char(f(index, ch)) for index, ch in enumerate(text))


def iter_indexed(
    chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``f(index, char)`` for each character of ``chars`` in order.

    When ``f`` returns a character, it replaces the one at that index, so the
    sequence is updated in place. Returning ``None`` leaves it unchanged.
    """
    for index, ch in enumerate(chars):
        result = f(index, ch)
        if result is not None:
            chars[index] = _check_char(result)