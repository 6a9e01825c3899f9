"""Tests for configuration loading and precedence."""

from __future__ import annotations

import pytest

from allways.config import (
    AllwaysConfig,
    LogStyle,
    load_config_file,
    load_pyproject_config,
    resolve_config,
)
from allways.errors import ConfigError


def test_defaults():
    config = AllwaysConfig()
    assert config.check is False
    assert config.encoding == "utf-8"
    assert config.log_level == "WARNING"
    assert config.log_style == LogStyle.CONCISE
    assert config.color is False


def test_log_level_is_normalized():
    assert AllwaysConfig(log_level=" debug ").log_level == "DEBUG"


def test_unknown_log_level_rejected():
    with pytest.raises(ValueError):
        AllwaysConfig(log_level="chatty")


def test_load_config_file(tmp_path):
    path = tmp_path / "allways.yaml"
    path.write_text("check: true\nlog_style: event\n", encoding="utf-8")

    config = load_config_file(path)

    assert config.check is True
    assert config.log_style == LogStyle.EVENT


@pytest.mark.parametrize(
    "content",
    [
        "- not\n- a mapping\n",
        "check: [unterminated\n",
        "unknown_key: 1\n",
    ],
)
def test_load_config_file_rejects_invalid(tmp_path, content):
    path = tmp_path / "allways.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config_file(path)


def test_load_config_file_missing(tmp_path):
    with pytest.raises(ConfigError):
        load_config_file(tmp_path / "absent.yaml")


def test_load_pyproject_config(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text('[tool.allways]\nencoding = "latin-1"\n', encoding="utf-8")
    assert load_pyproject_config(path).encoding == "latin-1"


def test_load_pyproject_without_section(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n', encoding="utf-8")
    assert load_pyproject_config(path) is None
    assert load_pyproject_config(tmp_path / "absent.toml") is None


def test_load_pyproject_rejects_bad_toml(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text("[tool.allways\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_pyproject_config(path)


def test_resolve_config_precedence(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        '[tool.allways]\ncheck = true\nlog_level = "INFO"\nencoding = "latin-1"\n',
        encoding="utf-8",
    )
    explicit = tmp_path / "allways.yaml"
    explicit.write_text("log_level: DEBUG\n", encoding="utf-8")

    config = resolve_config(
        config_path=explicit,
        cwd=tmp_path,
        overrides={"check": False, "encoding": None},
    )

    assert config.check is False
    assert config.log_level == "DEBUG"
    assert config.encoding == "latin-1"


def test_resolve_config_defaults_without_sources(tmp_path):
    assert resolve_config(cwd=tmp_path) == AllwaysConfig()
