from __future__ import annotations

"""Loads runner settings from a YAML file."""

import logging
import os
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from proptree.io.loaders.errors import ConfigError
from proptree.runner.models import RunnerConfig

logger = logging.getLogger(__name__)

SEED_ENV_VAR = "PROPTREE_SEED"


class RunnerConfigFileSpec(BaseModel):
    """Schema of a proptree YAML file."""

    model_config = ConfigDict(extra="forbid")

    runner: RunnerConfig = Field(default_factory=RunnerConfig)


def _read_yaml_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _seed_from_env(path: str) -> Optional[int]:
    raw = os.environ.get(SEED_ENV_VAR)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip(), 0)
    except ValueError as exc:
        raise ConfigError(path, f"Invalid {SEED_ENV_VAR} value {raw!r}", cause=exc) from exc


def load_runner_config(path: str) -> RunnerConfig:
    """Load runner settings.

    Expected format:
    runner:
      cases: 256
      max_shrink_iters: 4096
      seed: 1234

    A missing file yields the defaults. ``PROPTREE_SEED`` overrides the seed.
    """
    data: Dict[str, Any] = {}
    if os.path.exists(path):
        try:
            data = _read_yaml_file(path)
        except yaml.YAMLError as exc:
            raise ConfigError(path, "Malformed YAML", cause=exc) from exc
        if not isinstance(data, dict):
            raise ConfigError(path, f"Expected a mapping at top level, got {type(data).__name__}")
    else:
        logger.debug("No config at %s; using defaults", path)

    try:
        spec = RunnerConfigFileSpec.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(path, "Invalid runner configuration", cause=exc) from exc

    config = spec.runner
    seed = _seed_from_env(path)
    if seed is not None:
        logger.debug("Seed %d taken from %s", seed, SEED_ENV_VAR)
        config = config.model_copy(update={"seed": seed})
    return config
