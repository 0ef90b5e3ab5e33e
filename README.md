# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file. The second command writes to an output file. It does the same
job as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Usage

```sh
pipex infile "grep error" "wc -l" outfile
```

The command takes exactly four arguments.

- Each command string is split on spaces, and empty words are dropped.
  Quotes, tabs and other shell syntax are not interpreted.
- The program name is looked up in each directory listed in `PATH`, in
  order. The first `dir/name` that is executable is used. The program name
  is always joined to a `PATH` directory, so a name that is already a path
  is not run as it stands.
- The output file is created with mode `0644`. If it already exists, it is
  truncated.
- Both commands run with the current environment.

### Exit status and errors

The exit status of `pipex` is the exit status of the second side of the
pipe. The two sides fail independently of each other, as two separate
processes would. If the first side cannot start, the second command still
runs, but its input is empty. Errors are written to standard error.

| Situation | Message | Status of that side |
|---|---|---|
| Wrong number of arguments | `Input format is: ./pipex <file1> <cmd1> <cmd2> <file2>` | 1 (the program stops) |
| Input file cannot be opened | `Open Failed: ...` | 4 |
| Output file cannot be created | `File Creation Failed: ...` | 1 |
| Command is blank or is not found in `PATH` | `command not found: name` | 127 |
| The environment has no `PATH` | `PATH variable not found in the environment.` | 9 |
| The program is found but cannot be started | `Execve Failed: ...` | 5 |

A command that is ended by a signal counts as status 0.

## Library use

```python
from pipex.pipeline import run_pipeline

status = run_pipeline("in.txt", "sort", "uniq -c", "out.txt", {"PATH": "/usr/bin:/bin"})
```

If `env` is left out, `run_pipeline` uses `os.environ`.

`pipex.pipeline.main(argv=None)` is the command-line entry point. It returns
the exit status instead of exiting.

`pipex.paths` has the functions that look up commands:

- `search_paths(env)` returns the directories listed in `PATH`. It raises
  `PathNotFoundError` if `PATH` is missing.
- `find_executable(env, name)` returns the path of the first executable
  match, or `None`.
- `resolve_command(command, env)` returns `(executable, args)`. It raises
  `CommandNotFoundError` if the command cannot be resolved.

Both exception classes have an `exit_status` attribute.

## Helper modules

- `pipex.strings`: word splitting, joining, prefix comparison, bounded copy
  and concatenation, character and substring search, trimming, substrings,
  and per-character mapping.
- `pipex.chars`: ASCII character classes and case conversion, plus
  `parse_int` and `parse_long`. These parse a leading decimal number and
  wrap it to 32 or 64 bits. `int_to_str` is also here.
- `pipex.memory`: search, compare, copy, move and fill operations on byte
  buffers. Each one checks the range it works on and raises `ValueError` if
  the range is out of bounds.
- `pipex.linkedlist`: `LinkedList` and `Node`, a singly linked list with
  `push_front`, `push_back`, `pop_front`, `clear`, `last`, `for_each` and
  `map`.
- `pipex.lines`: `LineReader` and `read_lines`. They read lines from a
  binary or text stream in chunks of a fixed size, one unit by default.
- `pipex.output`: `put_char`, `put_str`, `put_endl`, `put_number`,
  `put_hex`, `put_pointer` and `put_unsigned`, which write to a stream or to
  standard output. Also `format_string` and `printf`, which support
  `%d %i %s %c %x %X %p %u %%`. Any other specifier, or a missing argument,
  raises `FormatError`.

## What it does not do

`pipex` connects exactly two commands. It does not support:

- longer pipelines,
- here-documents,
- appending to the output file,
- shell quoting, variables or globbing inside the command strings.

## Tests

```sh
pip install -e ".[test]"
pytest
```