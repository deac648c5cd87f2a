"""Errors raised while parsing or building a Makefile."""

from __future__ import annotations

from collections.abc import Sequence


class MakeError(Exception):
    """Base class for all minimake errors."""


class LineIsNotATargetError(MakeError):
    """A line expected to be a target header has no ':'."""

    def __init__(self, line: str, lineno: int) -> None:
        self.line = line
        self.lineno = lineno
        super().__init__(f"Line {lineno} is not a target: {line.strip()!r}")


class NoTargetsError(MakeError):
    """The default target was requested but the Makefile defines none."""

    def __init__(self) -> None:
        super().__init__("No targets defined")


class NoSuchTargetError(MakeError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No such target: {name!r}")


class DependencyDoesNotExistError(MakeError):
    """A dependency is neither a target nor an existing file."""

    def __init__(self, target: str, dependency: str) -> None:
        self.target = target
        self.dependency = dependency
        super().__init__(
            f"Dependency {dependency!r} of target {target!r} does not exist "
            "and no target builds it"
        )


class BuildError(MakeError):
    """A command failed while building a target."""

    def __init__(
        self, target: str, command: str, stderr: str = "", returncode: int = 0
    ) -> None:
        self.target = target
        self.command = command
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(f"Target {target!r} failed: {command}")


class CyclicDependencyError(MakeError):
    """Raised when a target (transitively) depends on itself."""

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = list(cycle)
        super().__init__(f"Cyclic dependency: {' -> '.join(self.cycle)}")
