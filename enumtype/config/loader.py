"""YAML loader for the settings document.

The file is a mapping with a single ``logging`` section today; new sections
are added by extending :class:`EnumTypeConfig`, the loader stays the same.
"""
from __future__ import annotations

from pathlib import Path
from typing import Mapping

import yaml
from pydantic import ValidationError

from enumtype.core.errors import ConfigurationError

from .models import EnumTypeConfig

_DEFAULT_CONFIG_PATH = Path("config") / "enumtype.yml"


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"YAML root must be a mapping in {path}")
    return data


def load_config(path: Path | str = _DEFAULT_CONFIG_PATH) -> EnumTypeConfig:
    """Load and validate the settings file at ``path``."""

    data = _read_yaml(Path(path))
    try:
        return EnumTypeConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings in {path}: {exc}") from exc


__all__ = ["load_config"]
