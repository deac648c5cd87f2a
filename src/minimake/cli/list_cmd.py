"""List command for minimake CLI."""

from __future__ import annotations

import argparse

from .context import CommandContext


class ListCommand:
    """List targets defined in the Makefile."""

    def __init__(self, ctx: CommandContext) -> None:
        self.ctx = ctx

    @staticmethod
    def add_arguments(subparsers: argparse._SubParsersAction) -> None:
        """Add list command arguments."""
        parser = subparsers.add_parser("list", help="List targets")
        parser.add_argument(
            "-c",
            "--commands",
            action="store_true",
            help="Also show each target's commands",
        )

    def execute(self) -> None:
        """List targets in file order, default target first."""
        targets = self.ctx.makefile.targets

        if not targets:
            print("No targets defined.")
            return

        default_name = targets[0].name
        shown: set[str] = set()

        print("Targets:")
        for t in targets:
            # Later duplicate definitions are never built
            if t.name in shown:
                continue
            shown.add(t.name)

            deps = f" <- {' '.join(t.dependencies)}" if t.dependencies else ""
            default_marker = " (default)" if t.name == default_name else ""
            print(f"  {t.name}{default_marker}{deps}")
            if getattr(self.ctx.args, "commands", False):
                for command in t.commands:
                    print(f"      $ {command}")
