"""Run two commands joined by a pipe, between an input and an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import BinaryIO

from pipex.paths import PipexError, check_environment, find_command
from pipex.strings import split

__all__ = ["parse_command", "run_pipeline", "main"]

USAGE_MESSAGE = "Il faut 4 arguments !!!"
PIPE_MESSAGE = "Erreur de pipe :/"
NOT_FOUND_MESSAGE = "command not found"
EXEC_MESSAGE = "Erreur lors de l'exécution d'une commande :/"
OPEN_INPUT_MESSAGE = "Erreur d'ouverture ou fichier 1 inexistant :/"
OPEN_OUTPUT_MESSAGE = "Bad ouverture ou fichier 2 inexistant ou bad permissions"


def parse_command(command: str, env: Mapping[str, str]) -> tuple[str, list[str]]:
    """Split ``command`` on spaces and locate its program.

    Returns the program path and the argument list, whose first item is
    the name as written.
    """
    args = split(command, " ")
    path = find_command(args[0] if args else None, env)
    if path is None:
        raise PipexError(NOT_FOUND_MESSAGE, 127)
    return path, args


def _report(err: PipexError) -> None:
    sys.stderr.write(err.message + "\n")
    sys.stderr.flush()


def _spawn(
    command: str, env: Mapping[str, str], stdin: BinaryIO | int, stdout: int
) -> subprocess.Popen:
    path, args = parse_command(command, env)
    try:
        return subprocess.Popen(
            args,
            executable=os.path.abspath(path),
            stdin=stdin,
            stdout=stdout,
            env=dict(env),
        )
    except OSError as exc:
        raise PipexError(EXEC_MESSAGE, 1) from exc


def _start_first(
    infile: str, command: str, env: Mapping[str, str], stdout_fd: int
) -> subprocess.Popen | None:
    """Start the reading side; failures are reported, not raised."""
    try:
        source = open(infile, "rb")
    except OSError:
        _report(PipexError(OPEN_INPUT_MESSAGE, 1))
        return None
    with source:
        try:
            return _spawn(command, env, source, stdout_fd)
        except PipexError as err:
            _report(err)
            return None


def _start_second(
    outfile: str, command: str, env: Mapping[str, str], stdin_fd: int
) -> subprocess.Popen:
    try:
        out_fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
    except OSError as exc:
        raise PipexError(OPEN_OUTPUT_MESSAGE, 1) from exc
    try:
        return _spawn(command, env, stdin_fd, out_fd)
    finally:
        os.close(out_fd)


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> int:
    """Run ``first < infile | second > outfile`` and return the second's status.

    Problems on the first side are written to standard error and leave the
    second command with empty input; problems on the second side raise
    PipexError.
    """
    if env is None:
        env = os.environ
    try:
        read_fd, write_fd = os.pipe()
    except OSError as exc:
        raise PipexError(PIPE_MESSAGE, 1) from exc
    try:
        first_process = _start_first(infile, first, env, write_fd)
    finally:
        os.close(write_fd)
    try:
        try:
            second_process = _start_second(outfile, second, env, read_fd)
        finally:
            os.close(read_fd)
        return second_process.wait()
    finally:
        if first_process is not None:
            first_process.wait()


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``pipex infile cmd1 cmd2 outfile`` and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) != 4:
            raise PipexError(USAGE_MESSAGE, 1)
        env = dict(os.environ)
        check_environment(env)
        infile, first, second, outfile = args
        status = run_pipeline(infile, first, second, outfile, env)
    except PipexError as err:
        _report(err)
        return err.code
    return status if status >= 0 else 128 - status


if __name__ == "__main__":
    raise SystemExit(main())