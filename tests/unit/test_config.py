"""Tests for pyproject-based configuration."""

import pytest

from teamcity_reporter.config import ReporterConfig, find_project_root, load_config
from teamcity_reporter.errors import ConfigError


def _write(tmp_path, body: str):
    path = tmp_path / "pyproject.toml"
    path.write_text(body)
    return path


def test_defaults():
    config = ReporterConfig()
    assert config.sink == "ConsoleSink"
    assert config.summary is True
    assert config.log_level == "WARNING"


def test_loads_tool_table(tmp_path):
    path = _write(
        tmp_path,
        """
[tool.teamcity-reporter]
sink = "LoggingSink"
summary = false
log-level = "DEBUG"

[tool.teamcity-reporter.sink-options.LoggingSink]
logger_name = "ci"
""",
    )
    config = load_config(path)

    assert config.sink == "LoggingSink"
    assert config.summary is False
    assert config.log_level == "DEBUG"
    assert config.sink_options == {"LoggingSink": {"logger_name": "ci"}}


def test_missing_table_gives_defaults(tmp_path):
    path = _write(tmp_path, '[project]\nname = "x"\n')
    assert load_config(path) == ReporterConfig()


def test_unknown_key_raises(tmp_path):
    path = _write(tmp_path, '[tool.teamcity-reporter]\ncolour = "red"\n')
    with pytest.raises(ConfigError, match="Invalid"):
        load_config(path)


def test_find_project_root_walks_up(tmp_path):
    _write(tmp_path, "")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_project_root(nested) == tmp_path.resolve()


def test_no_project_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("teamcity_reporter.config.find_project_root", lambda start=None: None)
    assert load_config() == ReporterConfig()
