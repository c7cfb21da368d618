"""Writing characters, strings, lines and integers to a text stream."""

from __future__ import annotations

from typing import TextIO


def put_char(c: str, stream: TextIO) -> None:
    """Write a single character to the stream."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str(s: str, stream: TextIO) -> None:
    """Write a string to the stream as it is."""
    stream.write(s)


def put_endl(s: str, stream: TextIO) -> None:
    """Write a string followed by a newline."""
    stream.write(s)
    stream.write("\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write an integer in decimal, with a leading minus sign when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    stream.write(str(n))