"""Run two commands joined by a pipe between an input file and an output file,
with small string, memory, character and linked-list helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "cli", "command", "linked", "memory", "output", "search", "transform"]