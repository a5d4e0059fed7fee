"""Reporter configuration from ``[tool.teamcity-reporter]`` in pyproject.toml."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from teamcity_reporter.errors import ConfigError

TOOL_TABLE = "teamcity-reporter"


class ReporterConfig(BaseModel):
    """Settings shared by the CLI and embedding code."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    sink: str = "ConsoleSink"
    sink_options: dict[str, dict[str, Any]] = Field(default_factory=dict, alias="sink-options")
    summary: bool = True
    log_level: str = Field(default="WARNING", alias="log-level")


def find_project_root(start: Path | None = None) -> Path | None:
    """Closest directory at or above ``start`` that holds a pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        if (directory / "pyproject.toml").is_file():
            return directory
    return None


def load_config(path: Path | None = None) -> ReporterConfig:
    """Load config from ``path`` or the nearest pyproject.toml; defaults if none."""
    if path is None:
        root = find_project_root()
        if root is None:
            return ReporterConfig()
        path = root / "pyproject.toml"

    with path.open("rb") as fh:
        data = tomllib.load(fh)

    table = data.get("tool", {}).get(TOOL_TABLE, {})
    try:
        return ReporterConfig.model_validate(table)
    except ValidationError as exc:
        msg = f"Invalid [tool.{TOOL_TABLE}] in {path}:\n{exc}"
        raise ConfigError(msg) from exc
