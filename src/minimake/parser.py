"""Parser for the Makefile text format.

The format is a strict subset of make:

    # comment
    name: dep1 dep2   # inline comment
    <TAB>command one
    <TAB>command two

A header line introduces a target; every tab-indented line right after it
is one of its commands. Empty and comment lines are ignored anywhere.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from .errors import LineIsNotATargetError
from .makefile import Makefile, Target


def _significant_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (lineno, line) with empty lines, comments and inline comments removed."""
    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not line or stripped.startswith("#"):
            continue
        # Truncate before anything else looks at the line, including the tab check
        line, _, _ = line.partition("#")
        yield lineno, line


def _parse_header(line: str, lineno: int) -> tuple[str, tuple[str, ...]]:
    name, separator, deps = line.partition(":")
    name = name.strip()
    if not separator or not name:
        raise LineIsNotATargetError(line, lineno)
    return name, tuple(dep.strip() for dep in deps.split())


def parse(text: str) -> Makefile:
    """Parse Makefile text into a Makefile model."""
    lines = list(_significant_lines(text))
    targets: list[Target] = []
    pos = 0

    while pos < len(lines):
        lineno, line = lines[pos]
        name, dependencies = _parse_header(line, lineno)
        pos += 1

        commands: list[str] = []
        while pos < len(lines) and lines[pos][1].startswith("\t"):
            commands.append(lines[pos][1].strip())
            pos += 1

        targets.append(
            Target(name=name, dependencies=dependencies, commands=tuple(commands))
        )

    return Makefile(targets)


def load(path: str | Path) -> Makefile:
    """Read and parse a Makefile from disk."""
    return parse(Path(path).read_text(encoding="utf-8"))
