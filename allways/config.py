"""Typed allways configuration loaded from pyproject, YAML, and CLI overrides."""

from __future__ import annotations

import logging
import tomllib
from enum import StrEnum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .constants import PYPROJECT_FILENAME, PYPROJECT_TOOL_KEY
from .errors import ConfigError

LOGGER = logging.getLogger(__name__)


class LogStyle(StrEnum):
    """Terminal log styles."""

    CONCISE = "concise"
    EVENT = "event"


class AllwaysConfig(BaseModel):
    """Settings shared by the CLI and the batch runner."""

    model_config = ConfigDict(extra="forbid")

    check: bool = False
    encoding: str = "utf-8"
    log_level: str = "WARNING"
    log_style: LogStyle = LogStyle.CONCISE
    color: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize and check the logging level name."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        """Reject blank encodings."""
        text = value.strip()
        if not text:
            raise ValueError("encoding must not be empty")
        return text


def _validate(payload: dict[str, Any], source: Path) -> AllwaysConfig:
    """Validate a raw settings mapping."""
    try:
        return AllwaysConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {source}: {exc}") from exc


def load_config_file(path: Path) -> AllwaysConfig:
    """Load settings from a YAML mapping."""
    if not path.is_file():
        raise ConfigError(f"Configuration file {path} does not exist")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML configuration {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration {path} must be a YAML mapping")
    return _validate(data, path)


def load_pyproject_config(path: Path) -> AllwaysConfig | None:
    """Load ``[tool.allways]`` from a pyproject file, or None when absent."""
    if not path.is_file():
        return None
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    section = data.get("tool", {}).get(PYPROJECT_TOOL_KEY)
    if section is None:
        return None
    if not isinstance(section, dict):
        raise ConfigError(f"[tool.{PYPROJECT_TOOL_KEY}] in {path} must be a table")
    return _validate(section, path)


def resolve_config(
    *,
    config_path: Path | None = None,
    cwd: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> AllwaysConfig:
    """Merge defaults, pyproject, an explicit YAML file, and CLI overrides."""
    merged: dict[str, Any] = {}
    base_dir = cwd or Path.cwd()

    pyproject = load_pyproject_config(base_dir / PYPROJECT_FILENAME)
    if pyproject is not None:
        merged.update(pyproject.model_dump(exclude_unset=True))

    if config_path is not None:
        explicit = load_config_file(config_path)
        merged.update(explicit.model_dump(exclude_unset=True))

    merged.update({key: value for key, value in (overrides or {}).items() if value is not None})
    return _validate(merged, config_path or base_dir)


__all__ = [
    "LogStyle",
    "AllwaysConfig",
    "load_config_file",
    "load_pyproject_config",
    "resolve_config",
]
