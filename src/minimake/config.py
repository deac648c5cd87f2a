"""Settings loaded from minimake.toml and overridden on the command line."""

from __future__ import annotations

import dataclasses
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .executor import FailurePolicy
from .sh import DEFAULT_SHELL

CONFIG_FILE_NAME = "minimake.toml"


@dataclasses.dataclass(frozen=True)
class Settings:
    """Effective settings: defaults < config file < command-line flags."""

    makefile: str = "Makefile"
    shell: str = DEFAULT_SHELL
    failure_policy: FailurePolicy = FailurePolicy.STDERR
    echo: bool = True

    def merge(self, **overrides: Any) -> Settings:
        """Return a copy with every non-None override applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        if isinstance(values.get("failure_policy"), str):
            values["failure_policy"] = parse_failure_policy(values["failure_policy"])
        return dataclasses.replace(self, **values)


def parse_failure_policy(value: str) -> FailurePolicy:
    try:
        return FailurePolicy(value)
    except ValueError as e:
        choices = ", ".join(p.value for p in FailurePolicy)
        raise ValueError(
            f"Invalid failure_policy {value!r} (expected one of: {choices})"
        ) from e


def _settings_from_mapping(data: Mapping[str, Any], source: Path) -> Settings:
    fields = {f.name: f for f in dataclasses.fields(Settings)}
    values: dict[str, Any] = {}

    for key, value in data.items():
        if key not in fields:
            raise ValueError(f"Invalid config {source}: unknown key '{key}'")
        expected = bool if key == "echo" else str
        if not isinstance(value, expected):
            raise ValueError(
                f"Invalid config {source}: '{key}' must be {expected.__name__}, "
                f"got {type(value).__name__}"
            )
        values[key] = value

    return Settings().merge(**values)


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    Without an explicit path, minimake.toml in the working directory is used
    when present; otherwise the defaults apply.
    """
    if path is None:
        candidate = Path(CONFIG_FILE_NAME)
        if not candidate.exists():
            return Settings()
        path = candidate
    elif not path.exists():
        raise ValueError(f"Config file not found: {path}")

    with path.open("rb") as f:
        data = tomllib.load(f)

    return _settings_from_mapping(data, path)
