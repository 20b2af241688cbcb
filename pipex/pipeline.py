"""Run ``< infile cmd1 | cmd2 > outfile`` as two connected child processes."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping
from typing import IO, Union

from pipex.strops import split

_Stream = Union[int, IO[bytes], IO[str]]

USAGE_ERROR = "Error: Invalid number of arguments\n"


class PipexError(Exception):
    """A command of the pipeline could not be set up or started."""


def find_env_path(env: Mapping[str, str]) -> str | None:
    """Return the value of ``PATH`` in ``env``, or None when it is not set."""
    return env.get("PATH")


def resolve_command(env: Mapping[str, str], name: str) -> str | None:
    """Find ``name`` in the directories of ``PATH``.

    The first directory holding an entry of that name decides: its path is
    returned when it is readable and executable, otherwise None.
    """
    search = find_env_path(env)
    if search is None:
        return None
    for directory in split(search, ":"):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.F_OK):
            if os.access(candidate, os.R_OK | os.X_OK):
                return candidate
            return None
    return None


def _parse(command: str, env: Mapping[str, str]) -> tuple[list[str], str]:
    words = split(command, " ")
    if not words:
        raise PipexError("empty command")
    path = resolve_command(env, words[0])
    if path is None:
        raise PipexError(f"{words[0]}: command not found")
    return words, path


def _spawn(
    words: list[str],
    path: str,
    env: Mapping[str, str],
    stdin: _Stream,
    stdout: _Stream,
) -> subprocess.Popen:
    try:
        return subprocess.Popen(
            words, executable=path, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as exc:
        raise PipexError(exc.strerror or str(exc)) from exc


def run_first(
    infile: str | os.PathLike,
    command: str,
    env: Mapping[str, str],
    stdout: _Stream,
) -> subprocess.Popen:
    """Start ``command`` reading from ``infile`` and writing to ``stdout``."""
    try:
        source = open(infile, "rb")
    except OSError as exc:
        raise PipexError(f"{os.fspath(infile)}: {exc.strerror}") from exc
    with source:
        words, path = _parse(command, env)
        return _spawn(words, path, env, source, stdout)


def run_second(
    command: str,
    outfile: str | os.PathLike,
    env: Mapping[str, str],
    stdin: _Stream,
) -> subprocess.Popen:
    """Start ``command`` reading from ``stdin`` and writing to ``outfile``.

    The output file is created or truncated before the command is looked up.
    """
    try:
        fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        raise PipexError(f"{os.fspath(outfile)}: {exc.strerror}") from exc
    try:
        words, path = _parse(command, env)
        return _spawn(words, path, env, stdin, fd)
    finally:
        os.close(fd)


def _report(error: PipexError) -> None:
    print(f"pipex:: {error}", file=sys.stderr)


def run_pipeline(
    infile: str | os.PathLike,
    cmd1: str,
    cmd2: str,
    outfile: str | os.PathLike,
    env: Mapping[str, str] | None = None,
) -> int:
    """Run ``cmd1`` on ``infile`` piped into ``cmd2`` writing ``outfile``.

    A side that fails to start is reported on standard error; the other side
    still runs. Returns 0 once both children have finished.
    """
    environment = os.environ if env is None else env
    read_end, write_end = os.pipe()
    children: list[subprocess.Popen] = []
    try:
        try:
            children.append(run_first(infile, cmd1, environment, write_end))
        except PipexError as error:
            _report(error)
        try:
            children.append(run_second(cmd2, outfile, environment, read_end))
        except PipexError as error:
            _report(error)
    finally:
        os.close(read_end)
        os.close(write_end)
    for child in children:
        child.wait()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Command-line entry: ``pipex infile cmd1 cmd2 outfile``."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 4:
        sys.stderr.write(USAGE_ERROR)
        return 1
    infile, cmd1, cmd2, outfile = args
    return run_pipeline(infile, cmd1, cmd2, outfile)


if __name__ == "__main__":
    sys.exit(main())