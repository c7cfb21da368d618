"""Turning a command line into an executable path and an argument list."""

from __future__ import annotations

import errno
import os
from collections.abc import Iterable, Mapping
from typing import List, Optional, Tuple, Union

from pipex.transform import split

Environment = Union[Mapping[str, str], Iterable[str], None]


class PipexError(Exception):
    """A pipeline stage could not be prepared."""


class CommandNotFoundError(PipexError):
    """No directory on the search path holds the named command."""

    def __init__(self, name: str) -> None:
        super().__init__(os.strerror(errno.ENOENT))
        self.name = name


def _entries(env: Environment) -> List[str]:
    if env is None:
        env = os.environ
    if isinstance(env, Mapping):
        return [f"{key}={value}" for key, value in env.items()]
    if isinstance(env, str):
        raise TypeError("env must be a mapping or an iterable of NAME=value strings")
    return list(env)


def parse_command(text: str) -> List[str]:
    """Split a command line on spaces into its words, dropping empty ones."""
    words = split(text, " ")
    if not words:
        raise PipexError("empty command")
    return words


def search_path(env: Environment = None) -> List[str]:
    """Return the directories listed in the first ``PATH`` entry of ``env``.

    ``env`` is a mapping or a sequence of ``NAME=value`` strings; ``None``
    stands for the current process environment.
    """
    for entry in _entries(env):
        if entry.startswith("PATH"):
            return split(entry[5:], ":")
    raise PipexError("no PATH in the environment")


def find_path(name: str, env: Environment = None) -> Optional[str]:
    """Return ``dir/name`` for the first search directory where it exists,
    or ``None`` when no directory holds it."""
    for directory in search_path(env):
        candidate = directory + "/" + name
        if os.path.exists(candidate):
            return candidate
    return None


def resolve_command(text: str, env: Environment = None) -> Tuple[str, List[str]]:
    """Parse a command line and locate its program.

    Returns the program's path and the argument list, whose first item is
    the command name as written.
    """
    args = parse_command(text)
    path = find_path(args[0], env)
    if path is None:
        raise CommandNotFoundError(args[0])
    return path, args