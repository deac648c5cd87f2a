"""Run command for minimake CLI."""

from __future__ import annotations

import argparse

from .context import CommandContext


class RunCommand:
    """Build specified targets, or the first target when none are given."""

    def __init__(self, ctx: CommandContext) -> None:
        self.ctx = ctx

    @staticmethod
    def add_arguments(subparsers: argparse._SubParsersAction) -> None:
        """Add run command arguments."""
        parser = subparsers.add_parser("run", help="Build specified targets")
        parser.add_argument("targets", nargs="+", help="Targets to build")

    def execute(self) -> None:
        """Build targets in the order given, stopping at the first error."""
        targets = getattr(self.ctx.args, "targets", None) or []
        self.ctx.executor().run(targets)
