"""Dependency graph queries over a Makefile."""

from __future__ import annotations

from .errors import CyclicDependencyError
from .makefile import FileRef, Makefile, Target, TargetRef


class DependencyResolver:
    """Answers graph questions about a Makefile without running anything."""

    def __init__(self, makefile: Makefile) -> None:
        self.makefile = makefile

    def dependencies(self, target: Target) -> list[Target]:
        """Direct target dependencies, in declaration order."""
        return [
            dep.target
            for dep in self.makefile.dependencies(target)
            if isinstance(dep, TargetRef)
        ]

    def files(self, target: Target) -> list[str]:
        """Direct dependencies that name no target and so must be files."""
        return [
            dep.path
            for dep in self.makefile.dependencies(target)
            if isinstance(dep, FileRef)
        ]

    def dependents(self, target: Target) -> list[Target]:
        """Targets that list `target` as a direct dependency."""
        result: list[Target] = []
        for i, candidate in enumerate(self.makefile.targets):
            # Shadowed duplicate definitions are never built
            if self.makefile.index_of(candidate.name) != i:
                continue
            if target.name in candidate.dependencies:
                result.append(candidate)
        return result

    def transitive_deps(self, target: Target) -> set[str]:
        """Names of all targets reachable from `target`, itself included."""
        seen: set[str] = set()
        stack = [target]
        while stack:
            current = stack.pop()
            if current.name in seen:
                continue
            seen.add(current.name)
            stack.extend(self.dependencies(current))
        return seen

    def find_cycle(self, target: Target) -> list[str] | None:
        """Return one dependency cycle reachable from `target`, if any."""
        try:
            self._walk(target, [], set())
        except CyclicDependencyError as e:
            return e.cycle
        return None

    def _walk(self, target: Target, path: list[str], done: set[str]) -> None:
        if target.name in path:
            start = path.index(target.name)
            raise CyclicDependencyError([*path[start:], target.name])
        if target.name in done:
            return

        path.append(target.name)
        for dep in self.dependencies(target):
            self._walk(dep, path, done)
        path.pop()
        done.add(target.name)

    def to_dot(self, target: Target) -> str:
        """Render the graph reachable from `target` in Graphviz DOT format."""
        lines = ["digraph minimake {", "  rankdir=LR;"]
        visited: set[str] = set()
        files: set[str] = set()
        edges: set[tuple[str, str]] = set()
        stack = [target]

        while stack:
            current = stack.pop()
            if current.name in visited:
                continue
            visited.add(current.name)

            lines.append(f"  {_quote(current.name)} [shape=ellipse];")
            for dep in self.makefile.dependencies(current):
                if isinstance(dep, FileRef):
                    if dep.path not in files:
                        files.add(dep.path)
                        lines.append(f"  {_quote(dep.path)} [shape=box];")
                else:
                    stack.append(dep.target)

                edge = (current.name, dep.name)
                if edge not in edges:
                    edges.add(edge)
                    lines.append(f"  {_quote(edge[0])} -> {_quote(edge[1])};")

        lines.append("}")
        return "\n".join(lines)


def _quote(name: str) -> str:
    """Quote a name as a DOT identifier."""
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
