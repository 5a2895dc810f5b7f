"""Run two shell-free commands connected by a pipe, like ``< in cmd1 | cmd2 > out``."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import Optional, Union

from ftkit.strings import split

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_NOT_FOUND = 127

_PATH_PREFIX = "PATH="


def include_quote(text: str) -> bool:
    """True when text holds a single or double quote."""
    return any(ch in "'\"" for ch in text)


def split_command(cmd: str) -> list[str]:
    """The words of cmd, separated by spaces."""
    return split(cmd, " ")


def search_paths(env: Optional[Mapping[str, str]] = None) -> Optional[list[str]]:
    """The directories named by PATH in env, or None when PATH is not set."""
    if env is None:
        env = os.environ
    path = env.get("PATH")
    if path is None:
        return None
    return split(path, ":")


def find_executable(name: str, env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Resolve a command name to a program path.

    A name that is executable as given is used as is. Otherwise each PATH
    directory is tried in order; if none holds it, the bare name is returned
    so that running it fails as "not found". Without PATH the result is None.
    """
    if os.access(name, os.X_OK):
        return name
    directories = search_paths(env)
    if directories is None:
        return None
    for directory in directories:
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return name


def exit_status(returncode: int) -> int:
    """Shell-style status: a negative return code (killed by a signal) becomes 128 + signal."""
    if returncode < 0:
        return 128 - returncode
    return returncode


def _report(name: str, message: str) -> None:
    print(f"{name}: {message}", file=sys.stderr)


def _not_found(name: str) -> int:
    _report(name, "command not found")
    return EXIT_NOT_FOUND


def _as_program(path: str) -> str:
    # A name without a directory part is looked up relative to the working
    # directory, never through PATH again.
    return path if os.sep in path else os.path.join(os.curdir, path)


def _start(
    cmd: str, stdin: int, stdout: int, env: Optional[Mapping[str, str]]
) -> Union[subprocess.Popen, int]:
    args = split_command(cmd)
    if not args:
        return _not_found("")
    program = find_executable(args[0], env)
    if program is None:
        _report(args[0], os.strerror(errno.ENOENT))
        return EXIT_FAILURE
    try:
        return subprocess.Popen(
            args,
            executable=_as_program(program),
            stdin=stdin,
            stdout=stdout,
            env=None if env is None else dict(env),
        )
    except FileNotFoundError:
        return _not_found(args[0])
    except OSError as exc:
        _report(args[0], exc.strerror or str(exc))
        return EXIT_FAILURE


def _first_child(infile, cmd, write_end, env):
    try:
        in_fd = os.open(infile, os.O_RDONLY)
    except OSError as exc:
        _report(infile, exc.strerror)
        return EXIT_FAILURE
    try:
        return _start(cmd, in_fd, write_end, env)
    finally:
        os.close(in_fd)


def _second_child(outfile, cmd, read_end, env):
    try:
        out_fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        _report(outfile, exc.strerror)
        return EXIT_FAILURE
    try:
        return _start(cmd, read_end, out_fd, env)
    finally:
        os.close(out_fd)


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Feed infile to cmd1, pipe its output to cmd2, write that to outfile.

    Both commands are started whatever happens to the other. The result is
    the exit status of the second command.
    """
    try:
        read_end, write_end = os.pipe()
    except OSError as exc:
        _report("pipe", exc.strerror)
        return EXIT_FAILURE
    try:
        first = _first_child(infile, cmd1, write_end, env)
        second = _second_child(outfile, cmd2, read_end, env)
    finally:
        os.close(read_end)
        os.close(write_end)
    if isinstance(first, subprocess.Popen):
        first.wait()
    if isinstance(second, subprocess.Popen):
        return exit_status(second.wait())
    return second


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        print("usage: pipex infile cmd1 cmd2 outfile", file=sys.stderr)
        return EXIT_FAILURE
    infile, cmd1, cmd2, outfile = args[:4]
    return run_pipeline(infile, cmd1, cmd2, outfile)


if __name__ == "__main__":
    sys.exit(main())