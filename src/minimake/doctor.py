"""Static analysis for Makefile dependency graphs."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .makefile import Makefile, Target
from .resolver import DependencyResolver


@dataclass
class Issue:
    """A problem found during static analysis."""

    severity: str  # "error" or "warning"
    target: str
    message: str

    def __str__(self) -> str:
        return f"[{self.severity}] {self.target}: {self.message}"


class Doctor:
    """Static analyzer for Makefile dependency graphs."""

    def __init__(
        self,
        makefile: Makefile,
        exists: Callable[[str], bool] = lambda p: Path(p).exists(),
    ) -> None:
        self.makefile = makefile
        self.resolver = DependencyResolver(makefile)
        self.exists = exists

    def check_all(self, target: Target | None = None) -> list[Issue]:
        """Run all checks and collect issues.

        If target is provided, only check targets reachable from it.
        Otherwise, check every target in the Makefile.
        """
        issues: list[Issue] = []

        if target:
            reachable = self.resolver.transitive_deps(target)
            targets = [t for t in self._built_targets() if t.name in reachable]
        else:
            targets = self._built_targets()
            issues.extend(self._check_duplicates())

        issues.extend(self._check_cycles(targets))
        issues.extend(self._check_missing_files(targets))
        issues.extend(self._check_empty(targets))

        return issues

    def _built_targets(self) -> list[Target]:
        """Targets in file order, minus shadowed duplicate definitions."""
        return [
            t
            for i, t in enumerate(self.makefile.targets)
            if self.makefile.index_of(t.name) == i
        ]

    def _check_duplicates(self) -> list[Issue]:
        return [
            Issue(
                "warning",
                name,
                "defined more than once; only the first definition is used",
            )
            for name in self.makefile.duplicates()
        ]

    def _check_cycles(self, targets: list[Target]) -> list[Issue]:
        """Report each distinct cycle once."""
        issues: list[Issue] = []
        reported: set[frozenset[str]] = set()

        for t in targets:
            cycle = self.resolver.find_cycle(t)
            if cycle is None:
                continue
            key = frozenset(cycle)
            if key in reported:
                continue
            reported.add(key)
            issues.append(
                Issue("error", cycle[0], f"cyclic dependency: {' -> '.join(cycle)}")
            )

        return issues

    def _check_missing_files(self, targets: list[Target]) -> list[Issue]:
        """Warn about absent files; an earlier dependency may still create them."""
        issues: list[Issue] = []
        for t in targets:
            for path in self.resolver.files(t):
                if not self.exists(path):
                    issues.append(
                        Issue(
                            "warning",
                            t.name,
                            f"file dependency '{path}' does not exist yet",
                        )
                    )
        return issues

    def _check_empty(self, targets: list[Target]) -> list[Issue]:
        return [
            Issue("warning", t.name, "has no dependencies and no commands")
            for t in targets
            if not t.dependencies and not t.commands
        ]
