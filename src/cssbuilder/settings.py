from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

ENV_STRICT_COMBINATORS = "CSSBUILDER_STRICT_COMBINATORS"
ENV_LOG_LEVEL = "CSSBUILDER_LOG_LEVEL"

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class LoggingSettings(BaseModel):
    level: str = "INFO"
    jsonl: bool = False

    model_config = ConfigDict(extra="ignore")

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LEVELS:
            raise ValueError(f"logging.level must be one of {sorted(_LEVELS)}")
        return level


class BuilderSettings(BaseModel):
    strict_combinators: bool = False
    logging: LoggingSettings = LoggingSettings()

    model_config = ConfigDict(extra="ignore")


def _deep_update(target: Dict[str, Any], updates: Mapping[str, Any]) -> Dict[str, Any]:
    for key, value in updates.items():
        if isinstance(value, Mapping) and isinstance(target.get(key), dict):
            _deep_update(target[key], value)
        elif isinstance(value, Mapping):
            target[key] = _deep_update({}, value)
        else:
            target[key] = value
    return target


def _read_toml(path: Path) -> Dict[str, Any]:
    with path.open("rb") as fh:
        data = tomllib.load(fh)
    section = data.get("cssbuilder")
    if isinstance(section, dict):
        return section
    return data


def _apply_env(data: Dict[str, Any]) -> Dict[str, Any]:
    if "strict_combinators" not in data:
        env_strict = os.getenv(ENV_STRICT_COMBINATORS)
        if env_strict:
            data["strict_combinators"] = env_strict
    log_section = data.setdefault("logging", {})
    if isinstance(log_section, dict) and "level" not in log_section:
        env_level = os.getenv(ENV_LOG_LEVEL)
        if env_level:
            log_section["level"] = env_level
    return data


def load_settings(
    path: Path | None = None, overrides: Mapping[str, Any] | None = None
) -> BuilderSettings:
    """Load settings from an optional TOML file, explicit overrides and env.

    Values from the file and ``overrides`` win over environment variables.
    """

    data: Dict[str, Any] = {}
    if path is not None:
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        data = _read_toml(path)
    if overrides:
        _deep_update(data, overrides)
    return BuilderSettings.model_validate(_apply_env(data))


__all__ = [
    "BuilderSettings",
    "LoggingSettings",
    "load_settings",
    "ENV_STRICT_COMBINATORS",
    "ENV_LOG_LEVEL",
]
