# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file. The second command writes to an output file. It does the same
as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

To run the tests too:

```sh
pip install ".[test]"
pytest
```

## Command-line use

The command takes exactly four arguments:

```sh
pipex <file1> <cmd1> <cmd2> <file2>
```

For example:

```sh
pipex infile "grep a" "wc -l" outfile
```

This behaves like `< infile grep a | wc -l > outfile`. You can also run
`python -m pipex.cli` with the same arguments.

### How the arguments are handled

- **Splitting a command.** Each command is split on spaces. Empty words are dropped. There is no quoting, no escaping and no globbing.
- **Finding the program.** The program name is looked up in each directory of the search path, in order. The search path comes from the first environment entry that begins with `PATH`. A program is found when `dir/name` exists.
- **The output file.** It is created if it does not exist. If it exists, it is emptied first.

### Errors and exit status

- **Wrong number of arguments.** The usage line `./pipex <file1> <cmd1> <cmd2> <file2>` is printed to standard output, and the exit status is 1.
- **A stage that cannot start.** This happens when the input file cannot be opened, the output file cannot be opened, or a command cannot be found.
  - A message of the form `Error: <reason>` is printed to standard error.
  - The other stage still runs. If the first stage failed, the second stage reads empty input.
- **Otherwise** the exit status is 0. The exit statuses of the two commands are not passed on.

### Limits

- Exactly two commands are supported.
- There is no here-document mode and no append mode for the output file.

## Library use

```python
import os

from pipex.cli import run_pipeline
from pipex.command import find_path, parse_command, resolve_command, search_path

parse_command("ls  -l")               # ['ls', '-l']
search_path(dict(os.environ))         # directories from PATH
find_path("ls", dict(os.environ))     # e.g. '/bin/ls', or None
resolve_command("wc -l", dict(os.environ))  # (path, ['wc', '-l'])

first, second = run_pipeline("infile", "grep a", "wc -l", "outfile", dict(os.environ))
```

### The `env` argument

Wherever a function takes `env`, it may be:

- a mapping;
- an iterable of `NAME=value` strings;
- `None`, which means the current process environment.

### Return values and exceptions

- `run_pipeline` returns the exit status of each of the two stages. A stage that could not start counts as status 1.
- `run_pipeline` does not raise for a missing file or command. It reports the problem on standard error instead.
- The functions in `pipex.command` raise `PipexError`:
  - when a command line is empty;
  - when the environment has no `PATH` entry.
- `resolve_command` raises `CommandNotFoundError`, a subclass of `PipexError`, when the program is not on the search path.

### Helper modules

The package also has small helper modules:

- `pipex.transform`: `atoi`, `itoa`, `split`, `trim`, `substring`, `join`, `map_indexed` and `iter_indexed`.
- `pipex.search`: the NUL-terminated string helpers `c_length`, `find_char`, `rfind_char`, `compare_n`, `find_within`, `bounded_copy`, `bounded_concat` and `duplicate`.
- `pipex.memory`: byte-buffer helpers `fill`, `zero`, `copy`, `move`, `find_byte`, `compare` and `zeroed`.
- `pipex.chars`: ASCII tests `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print`, and the case mappings `to_upper` and `to_lower`.
- `pipex.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, which write to a text stream.
- `pipex.linked`: a singly linked `LinkedList` made of `Node` objects. It has the following:
  - `push_front`, `push_back` and `last`;
  - `len()` and iteration;
  - `clear`, `for_each` and `map`.