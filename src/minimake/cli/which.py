"""Which command for minimake CLI."""

from __future__ import annotations

import argparse

from rich.tree import Tree

from ..makefile import Target
from .context import CommandContext


class WhichCommand:
    """Show dependency tree for a target."""

    def __init__(self, ctx: CommandContext) -> None:
        self.ctx = ctx

    @staticmethod
    def add_arguments(subparsers: argparse._SubParsersAction) -> None:
        """Add which command arguments."""
        parser = subparsers.add_parser("which", help="Show dependency tree for a target")
        parser.add_argument("target", help="Target to trace")
        parser.add_argument(
            "-d",
            "--dependents",
            action="store_true",
            help="Show targets that depend on this target instead of its dependencies",
        )

    def execute(self) -> None:
        """Print the dependency (or dependents) tree of a target."""
        found = self.ctx.find_target(self.ctx.args.target)
        show_dependents = self.ctx.args.dependents
        resolver = self.ctx.resolver
        printed: set[str] = set()

        def add_subtree(node: Tree, t: Target) -> None:
            printed.add(t.name)

            if show_dependents:
                children = resolver.dependents(t)
            else:
                for path in resolver.files(t):
                    node.add(f"[dim]← {path}[/dim]")
                children = resolver.dependencies(t)

            for child in children:
                if child.name in printed:
                    # Already expanded elsewhere (or a cycle)
                    node.add(f"{child.name} [dim](…)[/dim]")
                    continue
                add_subtree(node.add(child.name), child)

        tree = Tree(f"[bold]{found.name}[/bold]")
        add_subtree(tree, found)
        self.ctx.console.print(tree)
