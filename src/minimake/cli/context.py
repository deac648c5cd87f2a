"""Shared context for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..config import Settings
from ..executor import Executor
from ..makefile import Makefile, Target
from ..resolver import DependencyResolver

if TYPE_CHECKING:
    import argparse


class CommandContext:
    """Shared context for CLI commands.

    Provides access to common resources and utilities needed by commands.
    Commands receive this via composition rather than inheritance.
    """

    def __init__(
        self,
        makefile: Makefile,
        args: argparse.Namespace,
        settings: Settings | None = None,
    ) -> None:
        self.makefile = makefile
        self.args = args
        self.settings = settings or Settings()
        self.console = Console()
        self._resolver: DependencyResolver | None = None

    @property
    def resolver(self) -> DependencyResolver:
        """Lazily create and cache the dependency resolver."""
        if self._resolver is None:
            self._resolver = DependencyResolver(self.makefile)
        return self._resolver

    @property
    def verbose(self) -> bool:
        """Whether to echo commands as they run."""
        return self.settings.echo and not getattr(self.args, "quiet", False)

    @property
    def dry_run(self) -> bool:
        return getattr(self.args, "dry_run", False)

    def find_target(self, target: str) -> Target:
        """Find target by name, raising NoSuchTargetError if not found."""
        return self.makefile.get_or_raise(target)

    def executor(self) -> Executor:
        """Create an executor configured from settings and flags."""
        return Executor(
            self.makefile,
            policy=self.settings.failure_policy,
            shell=self.settings.shell,
            dry_run=self.dry_run,
            verbose=self.verbose,
        )
