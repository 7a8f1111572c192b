"""Environment checks and command lookup along the PATH variable."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pipex.strings import split

__all__ = [
    "PipexError",
    "check_environment",
    "find_path_entry",
    "find_command",
    "NO_PATH_MESSAGE",
]

NO_PATH_MESSAGE = "No path variable :/"


class PipexError(Exception):
    """A failure that ends the program with a message and an exit code."""

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


def check_environment(env: Mapping[str, str]) -> str:
    """Return the PATH value of ``env``, raising if it is missing or empty."""
    value = env.get("PATH")
    if not value:
        raise PipexError(NO_PATH_MESSAGE, 1)
    return value


def find_path_entry(env: Mapping[str, str]) -> str:
    """Return the PATH value of ``env``, which may be empty."""
    try:
        return env["PATH"]
    except KeyError:
        raise PipexError(NO_PATH_MESSAGE, 1) from None


def find_command(command: str | None, env: Mapping[str, str]) -> str | None:
    """Locate ``command``.

    A name that already exists as a path is returned unchanged; otherwise
    each non-empty PATH directory is tried in order. None when nothing
    is found.
    """
    if not command:
        return None
    if os.access(command, os.F_OK):
        return command
    for directory in split(find_path_entry(env), ":"):
        candidate = f"{directory}/{command}"
        if os.access(candidate, os.F_OK):
            return candidate
    return None