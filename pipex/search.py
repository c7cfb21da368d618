"""String length, searching, comparison and bounded copying.

Strings are treated the way a NUL-terminated string is: anything from the
first ``"\\0"`` onwards is not part of the string. Searching for ``"\\0"``
finds the terminator, which sits at index ``c_length(s)``.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

CharLike = Union[int, str]


def _text(s: str, name: str = "s") -> str:
    if not isinstance(s, str):
        raise TypeError(f"{name} must be a str, got {type(s).__name__}")
    return s.partition("\0")[0]


def _char(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected an int code or a one-character string")
    if isinstance(c, int):
        if c < 0:
            raise ValueError(f"character code must not be negative, got {c}")
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError("expected an int code or a one-character string")


def _size(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def c_length(s: str) -> int:
    """Number of characters before the first NUL (or the whole length)."""
    return len(_text(s))


def find_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or ``None``.

    Searching for NUL returns the index of the terminator.
    """
    text = _text(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def rfind_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or ``None``.

    Searching for NUL returns the index of the terminator.
    """
    text = _text(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns zero when they match, otherwise the difference of the codes of
    the first pair that differs; the end of a string counts as code 0.
    """
    a = _text(s1, "s1")
    b = _text(s2, "s2")
    limit = _size(n, "n")
    for x, y in zip(a[:limit].ljust(limit, "\0"), b[:limit].ljust(limit, "\0")):
        if x != y:
            return ord(x) - ord(y)
        if x == "\0":
            break
    return 0


def find_within(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first occurrence of ``needle`` lying wholly within the
    first ``length`` characters of ``haystack``, or ``None``.

    An empty needle is found at index 0.
    """
    hay = _text(haystack, "haystack")
    pattern = _text(needle, "needle")
    limit = _size(length, "length")
    if not pattern:
        return 0
    index = hay[:limit].find(pattern)
    return None if index < 0 else index


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` as it would fit in a buffer of ``size`` slots.

    One slot is kept for the terminator, so at most ``size - 1`` characters
    are kept; a size of 0 keeps nothing. Returns the copied text and the
    full length of ``src``, which tells the caller whether it was truncated.
    """
    text = _text(src, "src")
    limit = _size(size, "size")
    if limit == 0:
        return "", len(text)
    return text[: limit - 1], len(text)


def bounded_concat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` as it would fit in a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    need: ``len(dst) + len(src)`` when ``dst`` is shorter than ``size``,
    otherwise ``size + len(src)``. Nothing is appended unless ``dst`` leaves
    at least one free slot besides the terminator.
    """
    head = _text(dst, "dst")
    tail = _text(src, "src")
    limit = _size(size, "size")
    needed = len(head) + len(tail) if len(head) < limit else limit + len(tail)
    if limit > 0 and len(head) < limit - 1:
        head += tail[: limit - 1 - len(head)]
    return head, needed


def duplicate(s: str) -> str:
    """Return a copy of the string, up to its first NUL."""
    return _text(s)