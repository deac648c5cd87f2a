"""Command-line interface for minimake."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import NoReturn

from ..config import Settings, load_settings
from ..errors import MakeError
from ..executor import FailurePolicy
from ..makefile import Makefile
from ..parser import load
from .context import CommandContext
from .doctor import DoctorCommand
from .graph import GraphCommand
from .list_cmd import ListCommand
from .run import RunCommand
from .which import WhichCommand

# Map command names to their handler classes
COMMANDS = {
    "run": RunCommand,
    "list": ListCommand,
    "graph": GraphCommand,
    "which": WhichCommand,
    "doctor": DoctorCommand,
}

# Options whose value is a separate argv entry
VALUE_OPTIONS = {
    "-f",
    "--file",
    "-C",
    "--directory",
    "--config",
    "--shell",
    "--failure-policy",
}


class CLI:
    """Command-line interface handler for minimake."""

    SUBCOMMANDS = {*COMMANDS, "help"}

    def __init__(self, argv: list[str] | None = None) -> None:
        self.argv = argv if argv is not None else sys.argv[1:]
        self.parser: argparse.ArgumentParser | None = None
        self.args: argparse.Namespace | None = None
        self.settings = Settings()

    def run(self) -> NoReturn:
        """Main entry point - parse args and dispatch to appropriate command."""
        try:
            if self._is_target_mode():
                self._run_target_mode()
            else:
                self._run_subcommand_mode()
        except (MakeError, ValueError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    def _is_target_mode(self) -> bool:
        """Check if first positional arg is a target (not a subcommand)."""
        for i, arg in enumerate(self.argv):
            if not arg.startswith("-"):
                # Skip value for options that take arguments
                prev = self.argv[i - 1] if i > 0 else ""
                if prev in VALUE_OPTIONS:
                    continue
                return arg not in self.SUBCOMMANDS
        return False

    def _build_base_parser(self) -> argparse.ArgumentParser:
        """Build the base argument parser with common options."""
        parser = argparse.ArgumentParser(
            prog="minimake",
            description="A minimal make: build targets from a Makefile",
        )
        parser.add_argument(
            "-f",
            "--file",
            default=None,
            help="Path to the Makefile (default: Makefile)",
        )
        parser.add_argument(
            "-C",
            "--directory",
            default=None,
            help="Change to directory before doing anything",
        )
        parser.add_argument(
            "--config",
            default=None,
            help="Path to a TOML config file (default: minimake.toml if present)",
        )
        parser.add_argument(
            "--shell",
            default=None,
            help="Shell used to run commands (default: /bin/sh)",
        )
        parser.add_argument(
            "--failure-policy",
            choices=[p.value for p in FailurePolicy],
            default=None,
            help="What makes a command fail (default: stderr)",
        )
        parser.add_argument(
            "-n",
            "--dry-run",
            action="store_true",
            help="Print commands without running them",
        )
        parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Quiet mode (do not echo commands)",
        )
        return parser

    def _add_subparsers(self, parser: argparse.ArgumentParser) -> None:
        """Add subcommand parsers."""
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        for command_cls in COMMANDS.values():
            command_cls.add_arguments(subparsers)

        subparsers.add_parser("help", help="Show help")

    def _change_directory(self) -> None:
        """Change to the specified directory if -C was given."""
        assert self.args is not None
        if self.args.directory:
            try:
                os.chdir(self.args.directory)
            except OSError as e:
                msg = f"Error: Cannot change to directory '{self.args.directory}': {e}"
                print(msg, file=sys.stderr)
                sys.exit(1)

    def _load_settings(self) -> None:
        """Layer the config file and command-line flags over the defaults."""
        assert self.args is not None
        config = Path(self.args.config) if self.args.config else None
        self.settings = load_settings(config).merge(
            makefile=self.args.file,
            shell=self.args.shell,
            failure_policy=self.args.failure_policy,
        )

    def _load_makefile(self) -> Makefile:
        """Read and parse the Makefile."""
        path = Path(self.settings.makefile)

        if not path.exists():
            print(f"Error: {path} not found", file=sys.stderr)
            sys.exit(1)

        return load(path)

    def _prepare(self) -> CommandContext:
        self._change_directory()
        self._load_settings()
        makefile = self._load_makefile()
        assert self.args is not None
        return CommandContext(makefile, self.args, self.settings)

    def _run_target_mode(self) -> NoReturn:
        """Handle direct target execution (e.g., `minimake all`)."""
        self.parser = self._build_base_parser()
        self.parser.add_argument("targets", nargs="+", help="Targets to build")
        self.args = self.parser.parse_args(self.argv)

        RunCommand(self._prepare()).execute()
        sys.exit(0)

    def _run_subcommand_mode(self) -> NoReturn:
        """Handle subcommand execution (e.g., `minimake list`)."""
        self.parser = self._build_base_parser()
        self._add_subparsers(self.parser)
        self.args = self.parser.parse_args(self.argv)

        if self.args.command == "help":
            self.parser.print_help()
            sys.exit(0)

        self._dispatch_command(self._prepare())

    def _dispatch_command(self, ctx: CommandContext) -> NoReturn:
        """Dispatch to the appropriate command handler."""
        assert self.args is not None

        command_cls = COMMANDS.get(self.args.command)
        if command_cls:
            command_cls(ctx).execute()
        else:
            # No command: build the first target
            RunCommand(ctx).execute()

        sys.exit(0)


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point."""
    CLI(argv).run()


if __name__ == "__main__":
    main()
