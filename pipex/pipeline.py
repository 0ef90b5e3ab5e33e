"""Run ``< infile cmd1 | cmd2 > outfile`` as two connected processes."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Mapping, Optional, Sequence, Union

from pipex.paths import CommandNotFoundError, PathNotFoundError, resolve_command

USAGE = "Input format is: ./pipex <file1> <cmd1> <cmd2> <file2>"
USAGE_STATUS = 1
OPEN_FAILED_STATUS = 4
CREATE_FAILED_STATUS = 1
EXECVE_FAILED_STATUS = 5

_OUTFILE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
_OUTFILE_MODE = 0o644

Stage = Union[subprocess.Popen, int]


class PipexError(Exception):
    """A failure that ends the program with *exit_status*."""

    def __init__(self, message: str, exit_status: int) -> None:
        super().__init__(message)
        self.exit_status = exit_status


def _report(message: str, error: Optional[BaseException] = None) -> None:
    if error is None:
        sys.stderr.write(f"{message}\n")
    else:
        detail = getattr(error, "strerror", None) or str(error)
        sys.stderr.write(f"{message}: {detail}\n")
    sys.stderr.flush()


def _spawn(command: str, env: Mapping[str, str], stdin, stdout) -> Stage:
    """Start *command*, or report why it could not start and return a status."""
    try:
        executable, args = resolve_command(command, env)
    except (CommandNotFoundError, PathNotFoundError) as exc:
        _report(str(exc))
        return exc.exit_status
    try:
        return subprocess.Popen(
            args, executable=executable, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as exc:
        _report("Execve Failed", exc)
        return EXECVE_FAILED_STATUS


def _first_stage(infile: str, command: str, env: Mapping[str, str]) -> Stage:
    try:
        fd = os.open(infile, os.O_RDONLY)
    except OSError as exc:
        _report("Open Failed", exc)
        return OPEN_FAILED_STATUS
    try:
        return _spawn(command, env, fd, subprocess.PIPE)
    finally:
        os.close(fd)


def _second_stage(outfile: str, command: str, env: Mapping[str, str], upstream) -> Stage:
    try:
        fd = os.open(outfile, _OUTFILE_FLAGS, _OUTFILE_MODE)
    except OSError as exc:
        _report("File Creation Failed", exc)
        return CREATE_FAILED_STATUS
    try:
        return _spawn(command, env, upstream, fd)
    finally:
        os.close(fd)


def _wait(stage: Stage) -> int:
    if isinstance(stage, int):
        return stage
    code = stage.wait()
    # A process ended by a signal has no exit status of its own.
    return code if code >= 0 else 0


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Feed *infile* through *cmd1* into *cmd2*, writing *outfile*.

    Each side fails on its own, as separate processes would: an unreadable
    input or a missing first command leaves the second command reading an
    empty stream. Returns the exit status of the second side.
    """
    environment = os.environ if env is None else env
    first = _first_stage(infile, cmd1, environment)
    pipe = first.stdout if isinstance(first, subprocess.Popen) else None
    upstream = pipe if pipe is not None else subprocess.DEVNULL
    try:
        second = _second_stage(outfile, cmd2, environment, upstream)
    finally:
        if pipe is not None:
            pipe.close()
    _wait(first)
    return _wait(second)


def _parse_args(args: Sequence[str]) -> tuple[str, str, str, str]:
    if len(args) != 4:
        raise PipexError(USAGE, USAGE_STATUS)
    infile, cmd1, cmd2, outfile = args
    return infile, cmd1, cmd2, outfile


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry: ``pipex file1 cmd1 cmd2 file2``."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        infile, cmd1, cmd2, outfile = _parse_args(args)
    except PipexError as exc:
        _report(str(exc))
        return exc.exit_status
    return run_pipeline(infile, cmd1, cmd2, outfile)