"""ASCII character classification and case conversion.

Every function accepts either an integer code or a one-character string.
Classification returns a bool. Conversion returns a value of the same kind
it was given.
"""

from __future__ import annotations

from typing import Union, overload

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, bool):
        raise TypeError("expected an int code or a one-character string")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError("expected an int code or a one-character string")


def is_alpha(c: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for the printable ASCII range, space to tilde."""
    return 32 <= _code(c) <= 126


@overload
def to_upper(c: int) -> int: ...
@overload
def to_upper(c: str) -> str: ...


def to_upper(c: CharLike) -> CharLike:
    """Map a-z to A-Z; leave everything else unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


@overload
def to_lower(c: int) -> int: ...
@overload
def to_lower(c: str) -> str: ...


def to_lower(c: CharLike) -> CharLike:
    """Map A-Z to a-z; leave everything else unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code