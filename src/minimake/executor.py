"""Recursive build executor."""

from __future__ import annotations

import enum
import functools
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TextIO

from .errors import (
    BuildError,
    CyclicDependencyError,
    DependencyDoesNotExistError,
    NoSuchTargetError,
)
from .makefile import Makefile, Target, TargetRef
from .sh import DEFAULT_SHELL, CommandResult, sh

Runner = Callable[[str], CommandResult]


class FailurePolicy(enum.Enum):
    """What makes a command count as failed."""

    STDERR = "stderr"
    EXIT_STATUS = "exit-status"
    BOTH = "both"

    def failed(self, result: CommandResult) -> bool:
        wrote_stderr = bool(result.stderr)
        if self is FailurePolicy.STDERR:
            return wrote_stderr
        if self is FailurePolicy.EXIT_STATUS:
            return not result.ok
        return wrote_stderr or not result.ok


def _path_exists(path: str) -> bool:
    return Path(path).exists()


class Executor:
    """Builds targets depth-first, dependencies left to right, then commands.

    Nothing is memoized: a target reached twice in one traversal runs its
    commands twice. Commands run one at a time and the first failure stops
    the whole build.
    """

    def __init__(
        self,
        makefile: Makefile,
        *,
        runner: Runner | None = None,
        exists: Callable[[str], bool] = _path_exists,
        policy: FailurePolicy = FailurePolicy.STDERR,
        shell: str = DEFAULT_SHELL,
        dry_run: bool = False,
        verbose: bool = True,
        output: TextIO | None = None,
        errors: TextIO | None = None,
    ) -> None:
        self.makefile = makefile
        self.runner = runner or functools.partial(sh, shell=shell)
        self.exists = exists
        self.policy = policy
        self.dry_run = dry_run
        self.verbose = verbose
        self.output = output or sys.stdout
        self.errors = errors or sys.stderr

    def run(self, targets: Sequence[str] = ()) -> None:
        """Build each requested target in order, or the first target if none."""
        names = list(targets) or [self.makefile.default_target().name]
        for name in names:
            self.build(name)

    def build(self, name: str) -> None:
        """Build `name` after building or checking all of its dependencies."""
        index = self.makefile.index_of(name)
        if index is None:
            raise NoSuchTargetError(name)
        self._build(index, [])

    def _build(self, index: int, building: list[int]) -> None:
        target = self.makefile.targets[index]

        if index in building:
            loop = building[building.index(index) :]
            names = [self.makefile.targets[i].name for i in loop]
            raise CyclicDependencyError([*names, target.name])

        building.append(index)
        for dep in self.makefile.dependencies(target):
            if isinstance(dep, TargetRef):
                self._build(dep.index, building)
            elif not self.exists(dep.path):
                raise DependencyDoesNotExistError(target.name, dep.path)
        building.pop()

        self._execute_target(target)

    def _execute_target(self, target: Target) -> None:
        """Run the target's own commands in order."""
        for command in target.commands:
            if self.verbose or self.dry_run:
                print(command, file=self.output, flush=True)
            if self.dry_run:
                continue

            result = self.runner(command)
            if result.stdout:
                self.output.write(result.stdout)
                self.output.flush()
            if result.stderr:
                self.errors.write(result.stderr)
                self.errors.flush()

            if self.policy.failed(result):
                raise BuildError(
                    target.name,
                    command,
                    stderr=result.stderr,
                    returncode=result.returncode,
                )
