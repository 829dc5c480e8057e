"""Subprocess runner used for every git and gpg invocation."""

import shlex
import subprocess
from dataclasses import dataclass

import click

from ..errors import SubprocessError


@dataclass(frozen=True)
class CommandResult:
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self):
        return self.exit_code == 0


class CommandRunner:
    """
    Run external commands synchronously.

    Output is captured in full unless `capture=False`, in which case the child
    inherits the terminal (needed for commands that open an editor). No shell
    is involved, so arguments such as commit messages are passed verbatim.
    """

    def __init__(self, verbose=False):
        self.verbose = verbose

    def run(self, command, args=(), input=None, capture=True):
        argv = [command, *args]
        if self.verbose:
            click.secho(f"$ {shlex.join(argv)}", dim=True, err=True)
        try:
            completed = subprocess.run(
                argv,
                input=input,
                capture_output=capture,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise SubprocessError(f"Could not run '{command}': {exc}") from exc
        return CommandResult(
            exit_code=completed.returncode,
            stdout=(completed.stdout or "").strip() if capture else "",
            stderr=(completed.stderr or "").strip() if capture else "",
        )


def git(runner, *args, capture=True):
    return runner.run("git", args, capture=capture)


def check(result, failure):
    """Raise SubprocessError with `failure` when `result` did not succeed."""
    if not result.ok:
        raise SubprocessError(f"{failure} Exit code: {result.exit_code}", stderr=result.stderr)
    return result
