"""Run ``cmd1 < infile | cmd2 > outfile``."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping
from typing import Dict, List, Optional, Tuple

from pipex.command import Environment, PipexError, resolve_command

USAGE = "./pipex <file1> <cmd1> <cmd2> <file2>\n"
FAILURE = 1


def _subprocess_env(env: Environment) -> Optional[Dict[str, str]]:
    if env is None:
        return None
    if isinstance(env, Mapping):
        return dict(env)
    result: Dict[str, str] = {}
    for entry in env:
        name, _, value = entry.partition("=")
        result[name] = value
    return result


def _report(exc: Exception) -> None:
    if isinstance(exc, OSError) and exc.strerror:
        message = exc.strerror
    else:
        message = str(exc)
    print(f"Error: {message}", file=sys.stderr)


def _start_first(
    infile: str, cmd: str, env: Environment, environment: Optional[Dict[str, str]]
) -> Optional[subprocess.Popen]:
    try:
        with open(infile, "rb") as source:
            path, args = resolve_command(cmd, env)
            return subprocess.Popen(
                args,
                executable=path,
                stdin=source,
                stdout=subprocess.PIPE,
                env=environment,
            )
    except (OSError, PipexError) as exc:
        _report(exc)
        return None


def _start_second(
    upstream: Optional[subprocess.Popen],
    cmd: str,
    outfile: str,
    env: Environment,
    environment: Optional[Dict[str, str]],
) -> Optional[subprocess.Popen]:
    stdin = upstream.stdout if upstream is not None else subprocess.DEVNULL
    try:
        fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
        with os.fdopen(fd, "wb") as sink:
            path, args = resolve_command(cmd, env)
            return subprocess.Popen(
                args, executable=path, stdin=stdin, stdout=sink, env=environment
            )
    except (OSError, PipexError) as exc:
        _report(exc)
        return None


def run_pipeline(
    infile: str, cmd1: str, cmd2: str, outfile: str, env: Environment = None
) -> Tuple[int, int]:
    """Feed ``infile`` to ``cmd1``, pipe its output into ``cmd2`` and write
    the result to ``outfile``.

    A stage that cannot start reports ``Error: <reason>`` on standard error
    while the other stage still runs. Returns the exit status of each stage;
    a stage that could not start counts as status 1.
    """
    environment = _subprocess_env(env)
    first = _start_first(infile, cmd1, env, environment)
    try:
        second = _start_second(first, cmd2, outfile, env, environment)
    finally:
        if first is not None and first.stdout is not None:
            first.stdout.close()
    statuses: List[int] = [
        stage.wait() if stage is not None else FAILURE for stage in (first, second)
    ]
    return statuses[0], statuses[1]


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point: ``pipex file1 cmd1 cmd2 file2``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        sys.stdout.write(USAGE)
        return 1
    infile, cmd1, cmd2, outfile = args
    run_pipeline(infile, cmd1, cmd2, outfile, os.environ)
    return 0


if __name__ == "__main__":
    sys.exit(main())