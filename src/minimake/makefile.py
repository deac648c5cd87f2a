"""Target definitions and the Makefile model."""

from __future__ import annotations

import dataclasses
from collections import Counter
from collections.abc import Iterable, Iterator

from .errors import NoSuchTargetError, NoTargetsError


@dataclasses.dataclass(frozen=True)
class Target:
    """A named unit of build work with dependencies and commands."""

    name: str
    dependencies: tuple[str, ...] = ()
    commands: tuple[str, ...] = ()

    def header(self) -> str:
        """Render the `name: deps...` line for this target."""
        if not self.dependencies:
            return f"{self.name}:"
        return f"{self.name}: {' '.join(self.dependencies)}"


@dataclasses.dataclass(frozen=True)
class TargetRef:
    """A dependency that names another target."""

    index: int
    target: Target

    @property
    def name(self) -> str:
        return self.target.name


@dataclasses.dataclass(frozen=True)
class FileRef:
    """A dependency that names no target and must exist as a file."""

    path: str

    @property
    def name(self) -> str:
        return self.path


Dependency = TargetRef | FileRef


class Makefile:
    """An ordered, read-only collection of targets.

    Targets are stored in file order. Names are indexed once on construction;
    when a name is defined more than once the earliest definition wins and
    the later ones are never built.
    """

    def __init__(self, targets: Iterable[Target] = ()) -> None:
        self._targets: tuple[Target, ...] = tuple(targets)
        self._index: dict[str, int] = {}
        for i, target in enumerate(self._targets):
            self._index.setdefault(target.name, i)

    @property
    def targets(self) -> tuple[Target, ...]:
        return self._targets

    def __len__(self) -> int:
        return len(self._targets)

    def __iter__(self) -> Iterator[Target]:
        return iter(self._targets)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Makefile):
            return NotImplemented
        return self._targets == other._targets

    def __repr__(self) -> str:
        return f"Makefile({list(self._targets)!r})"

    def index_of(self, name: str) -> int | None:
        """Get the index of the first target called `name`."""
        return self._index.get(name)

    def find(self, name: str) -> Target | None:
        """Get the first target called `name`."""
        index = self._index.get(name)
        if index is None:
            return None
        return self._targets[index]

    def get_or_raise(self, name: str) -> Target:
        """Find a target by name, raising NoSuchTargetError if not found."""
        target = self.find(name)
        if target is None:
            raise NoSuchTargetError(name)
        return target

    def default_target(self) -> Target:
        """The target built when none is requested: the first one."""
        if not self._targets:
            raise NoTargetsError()
        return self._targets[0]

    def resolve(self, dependency: str) -> Dependency:
        """Classify a dependency name as a target or a required file."""
        index = self._index.get(dependency)
        if index is None:
            return FileRef(dependency)
        return TargetRef(index, self._targets[index])

    def dependencies(self, target: Target) -> list[Dependency]:
        """Resolve all dependencies of `target`, in declaration order."""
        return [self.resolve(dep) for dep in target.dependencies]

    def duplicates(self) -> list[str]:
        """Names defined by more than one target, in file order."""
        counts = Counter(t.name for t in self._targets)
        return [name for name in self._index if counts[name] > 1]

    def dumps(self) -> str:
        """Serialize back to the header + tab-indented command format."""
        lines: list[str] = []
        for target in self._targets:
            lines.append(target.header())
            lines.extend(f"\t{command}" for command in target.commands)
        return "".join(f"{line}\n" for line in lines)
