"""minimake - a minimal make: parse a Makefile and build its targets."""

from .config import Settings, load_settings
from .errors import (
    BuildError,
    CyclicDependencyError,
    DependencyDoesNotExistError,
    LineIsNotATargetError,
    MakeError,
    NoSuchTargetError,
    NoTargetsError,
)
from .executor import Executor, FailurePolicy
from .makefile import Dependency, FileRef, Makefile, Target, TargetRef
from .parser import load, parse
from .resolver import DependencyResolver
from .sh import CommandResult, sh

__all__ = [
    "parse",
    "load",
    "Makefile",
    "Target",
    "Dependency",
    "TargetRef",
    "FileRef",
    "Executor",
    "FailurePolicy",
    "DependencyResolver",
    "Settings",
    "load_settings",
    "CommandResult",
    "sh",
    "MakeError",
    "LineIsNotATargetError",
    "NoTargetsError",
    "NoSuchTargetError",
    "DependencyDoesNotExistError",
    "BuildError",
    "CyclicDependencyError",
]
