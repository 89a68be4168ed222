"""Typed configuration schema and loader for the bioneer package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint

FIXATION_POINT_ENV = "BIONEER_FIXATION_POINT"
LOG_LEVEL_ENV = "BIONEER_LOG_LEVEL"

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class FixationSettings(BaseModel):
    """Which boundary profile drives the fixation length."""

    point: conint(ge=0) = 0

    model_config = ConfigDict(extra="forbid")


class CacheSettings(BaseModel):
    """Fixation cache behaviour."""

    lock_timeout: confloat(gt=0.0) = 1.0

    model_config = ConfigDict(extra="forbid")


class IOSettings(BaseModel):
    """Encodings used by the file readers and writers."""

    encoding_in: str = "utf-8-sig"
    encoding_out: str = "utf-8"

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Log level for the ``bioneer`` logger when run from the CLI."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    fixation: FixationSettings
    cache: CacheSettings
    io: IOSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if FIXATION_POINT_ENV in environ:
        overrides["fixation"] = {"point": environ[FIXATION_POINT_ENV]}
    if LOG_LEVEL_ENV in environ:
        overrides["logging"] = {"level": environ[LOG_LEVEL_ENV].upper()}
    return overrides


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    ``BIONEER_*`` environment variables.
    """

    with (
        importlib_resources.files("bioneer.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    merged = deep_merge_dicts(merged, _env_overrides(environ))

    return ConfigModel.model_validate(merged)


__all__ = [
    "ConfigModel",
    "FixationSettings",
    "CacheSettings",
    "IOSettings",
    "LoggingSettings",
    "FIXATION_POINT_ENV",
    "LOG_LEVEL_ENV",
    "deep_merge_dicts",
    "load_config",
]
