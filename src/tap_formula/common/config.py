"""Renderer configuration: defaults, optional YAML file, then environment."""
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

LOGGER = logging.getLogger("tapformula.config")

DEFAULT_TEMPLATE_PATHS = ("tap-template", "./scripts/release/tap-template")

CONFIG_ENV = "TAP_FORMULA_CONFIG"
TEMPLATE_PATHS_ENV = "TAP_TEMPLATE_PATHS"
LOG_LEVEL_ENV = "TAP_FORMULA_LOG_LEVEL"


class ConfigError(ValueError):
    """Config file could not be read or did not validate."""


class RendererConfig(BaseModel):
    template_paths: list[str] = Field(default_factory=lambda: list(DEFAULT_TEMPLATE_PATHS))
    log_level: str = "WARNING"

    @field_validator("template_paths")
    @classmethod
    def _non_empty(cls, v: list[str]) -> list[str]:
        paths = [p for p in v if p]
        if not paths:
            raise ValueError("template_paths must name at least one file")
        return paths

    @field_validator("log_level")
    @classmethod
    def _upper(cls, v: str) -> str:
        return v.upper()


def load_cfg(path: str) -> dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        LOGGER.debug("Config %s unreadable: %s", path, e)
        raise ConfigError(f"cannot read config {path}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config {path} must be a mapping")
    return data


def load_config(path: str | None = None, environ: dict[str, str] | None = None) -> RendererConfig:
    """
    Build the renderer config.

    Args:
        path: Optional YAML file; falls back to $TAP_FORMULA_CONFIG.
        environ: Environment mapping, os.environ by default.
    """
    env = os.environ if environ is None else environ
    data: dict[str, Any] = {}

    path = path or env.get(CONFIG_ENV)
    if path:
        LOGGER.debug("Loading config from %s", Path(path))
        data.update(load_cfg(path))

    if env.get(TEMPLATE_PATHS_ENV):
        data["template_paths"] = env[TEMPLATE_PATHS_ENV].split(os.pathsep)
    if env.get(LOG_LEVEL_ENV):
        data["log_level"] = env[LOG_LEVEL_ENV]

    try:
        return RendererConfig(**data)
    except ValidationError as e:
        LOGGER.debug("Config rejected: %s", e)
        raise ConfigError("invalid config") from e
