# pipex

`pipex` runs two commands joined by a pipe. The first command reads its input
from a file, and the second command writes its output to another file. It
does the same job as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Command line

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

- The command takes exactly four arguments. With any other number it writes
  `Error: Invalid number of arguments` to standard error and exits with
  status 1.
- Each command is split on spaces, and empty pieces are dropped. Quotes and
  other shell syntax are not interpreted.
- The command name is looked up in the directories listed in `PATH`. Lookup
  stops at the first directory that holds an entry of that name. If that entry
  is not readable and executable, the command counts as not found.
- The output file is created or truncated with mode `0644`. This happens
  before the second command is looked up.
- If one side of the pipeline cannot start, a message prefixed with `pipex::`
  goes to standard error and the other side still runs. Examples of such
  failures are a missing input file, an unknown command, or an empty command.
- Once both children have finished, `pipex` exits with status 0. The exit
  status of the commands is not passed on.

Example:

```sh
pipex input.txt "grep hello" "wc -l" count.txt
```

## Library use

The pipeline lives in `pipex.pipeline`:

```python
import os
from pipex.pipeline import run_pipeline, resolve_command, run_first, PipexError

print(resolve_command(os.environ, "ls"))   # e.g. /bin/ls, or None

# Failures are reported on stderr; the call returns 0 when both sides are done.
run_pipeline("input.txt", "grep hello", "wc -l", "count.txt", os.environ)

# The single-side helpers raise PipexError when the side cannot start.
try:
    child = run_first("missing.txt", "cat", os.environ, stdout=None)
except PipexError as exc:
    print("failed:", exc)
```

- `find_env_path(env)` returns the `PATH` value from a mapping, or `None` if
  it is not set.
- `resolve_command(env, name)` returns the full path of a command, or `None`.
- `run_first(infile, command, env, stdout)` starts a command that reads
  `infile`. `run_second(command, outfile, env, stdin)` starts a command that
  writes `outfile`. Both return a `subprocess.Popen`.
- `run_pipeline(infile, cmd1, cmd2, outfile, env=None)` uses `os.environ`
  when `env` is `None`.
- `main(argv=None)` is the command-line entry point. It returns the exit
  status.

## Helper modules

- `pipex.strops` provides string and byte helpers:
  - splitting and trimming: `split`, `trim`, `substr`, `join`, `length`
  - searching: `find_within`, `find_char`, `rfind_char`, `find_byte`
  - comparing: `compare_prefix`, `compare_bytes`
  - per-character mapping: `map_indexed`, `iter_indexed`
- `pipex.chars` provides `atoi`, `itoa`, ASCII classification (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`) and case mapping
  (`to_upper`, `to_lower`).
- `pipex.bounded` provides `bounded_copy` and `bounded_concat`. Each returns a
  `BoundedResult` holding `text`, `wanted` and `truncated`.
- `pipex.output` provides `put_char`, `put_str`, `put_endl` and `put_nbr`,
  which write to a text stream. The default stream is standard output.

## What it does not do

`pipex` connects exactly two commands. It does not handle:

- longer pipelines
- here-documents
- appending to the output file
- shell quoting or expansion

## Running the tests

```sh
pip install ".[test]"
pytest
```