"""YAML loader for the config subsystem."""
from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional

import yaml

from enumerant.core.errors import ConfigurationError

from .models import AppConfig


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        try:
            data = yaml.safe_load(fp) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Malformed YAML in {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"YAML root must be a mapping in {path}")
    return data


def load_app_config(path: Path | str | None = None) -> AppConfig:
    """Load ``telemetry`` and ``demo`` sections; ``None`` returns the defaults.

    Validation errors from pydantic propagate unchanged so the caller sees the
    offending field.
    """

    if path is None:
        return AppConfig()
    data = _read_yaml(Path(path))
    return AppConfig.model_validate(data)
