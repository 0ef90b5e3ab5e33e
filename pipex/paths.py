"""Locating commands through the PATH variable of an environment."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pipex.strings import join, split_words

PATH_NOT_FOUND_STATUS = 9
COMMAND_NOT_FOUND_STATUS = 127


class PathNotFoundError(LookupError):
    """The environment has no PATH variable."""

    exit_status = PATH_NOT_FOUND_STATUS

    def __init__(self) -> None:
        super().__init__("PATH variable not found in the environment.")


class CommandNotFoundError(LookupError):
    """A command is empty or is not an executable in any PATH directory."""

    exit_status = COMMAND_NOT_FOUND_STATUS

    def __init__(self, command: str) -> None:
        self.command = command
        message = "command not found"
        if command:
            message = f"{message}: {command}"
        super().__init__(message)


def search_paths(env: Mapping[str, str]) -> list[str]:
    """The directories named by PATH in *env*, empty entries dropped."""
    try:
        value = env["PATH"]
    except KeyError:
        raise PathNotFoundError() from None
    return split_words(value, ":")


def find_executable(env: Mapping[str, str], name: str) -> Optional[str]:
    """Full path of the first ``dir/name`` that is executable, or ``None``."""
    for directory in search_paths(env):
        candidate = join(join(directory, "/"), name)
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def resolve_command(command: str, env: Mapping[str, str]) -> tuple[str, list[str]]:
    """Split *command* on spaces and locate its program.

    Returns the executable's path and the argument list, whose first item
    is the command name as written. Raises CommandNotFoundError when the
    command is blank or cannot be found, and PathNotFoundError when *env*
    has no PATH.
    """
    args = split_words(command, " ")
    if not args:
        raise CommandNotFoundError(command.strip())
    executable = find_executable(env, args[0])
    if executable is None:
        raise CommandNotFoundError(args[0])
    return executable, args