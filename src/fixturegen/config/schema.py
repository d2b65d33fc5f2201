"""Typed configuration schema and loader for the fixturegen package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, conint

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class SeedSettings(BaseModel):
    """Seed used for the pseudorandom value stream.

    ``value`` of ``None`` means a process-random seed is drawn, which makes the
    run non-reproducible.
    """

    env: str
    value: conint(ge=0) | None = None

    model_config = ConfigDict(extra="forbid")


class ArraySettings(BaseModel):
    """Collection sampling settings."""

    unique_retry_factor: conint(ge=1) = 5

    model_config = ConfigDict(extra="forbid")


class OutputSettings(BaseModel):
    """Rendering options for the command line output."""

    indent: conint(ge=0) = 2

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    seed: SeedSettings
    arrays: ArraySettings
    output: OutputSettings

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


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML < environment
    variable named by ``seed.env``.  A non-integer environment value is reported as a
    :class:`ValueError`.
    """

    with (
        importlib_resources.files("fixturegen.config")
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

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    seed_env = cfg.seed.env
    raw = environ.get(seed_env, "").strip()
    if raw:
        try:
            value = int(raw)
        except ValueError as exc:
            raise ValueError(f"{seed_env} must be an integer seed, got {raw!r}") from exc
        seed = SeedSettings.model_validate({"env": seed_env, "value": value})
        cfg = cfg.model_copy(update={"seed": seed})

    return cfg


__all__ = [
    "ConfigModel",
    "SeedSettings",
    "ArraySettings",
    "OutputSettings",
    "deep_merge_dicts",
    "load_config",
]
