"""Run shell command lines and capture their output."""

from __future__ import annotations

import dataclasses
import subprocess
from pathlib import Path

DEFAULT_SHELL = "/bin/sh"


@dataclasses.dataclass(frozen=True)
class CommandResult:
    """Captured outcome of one shell command."""

    command: str
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def sh(
    command: str,
    *,
    shell: str = DEFAULT_SHELL,
    cwd: str | Path | None = None,
) -> CommandResult:
    """Run `command` with `shell -c` and wait for it to finish.

    Output is captured rather than inherited and stdin reads from /dev/null.
    A non-zero exit status is returned in the result, never raised; deciding
    what counts as failure is left to the caller.
    """
    proc = subprocess.run(
        [shell, "-c", command],
        cwd=cwd,
        stdin=subprocess.DEVNULL,
        capture_output=True,
        text=True,
        errors="replace",
        check=False,
    )
    return CommandResult(
        command=command,
        returncode=proc.returncode,
        stdout=proc.stdout,
        stderr=proc.stderr,
    )
