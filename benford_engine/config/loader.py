"""Config file loading with CLI > file > defaults precedence."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from benford_engine.exceptions import ConfigValidationError
from benford_engine.utils.logging import get_logger

log = get_logger(__name__, component="config")


def _load_yaml(path: Path) -> Dict[str, Any]:
    content = yaml.safe_load(path.read_text()) or {}
    if not isinstance(content, dict):
        raise ConfigValidationError(f"Config file must contain a mapping: {path}")
    return content


def load_config_file(path: Path) -> Dict[str, Any]:
    """Read a YAML or JSON config file into a dict."""
    if not path.exists():
        raise ConfigValidationError(f"Config file not found: {path}")
    suffix = path.suffix.lower()
    if suffix in {".yml", ".yaml"}:
        try:
            return _load_yaml(path)
        except yaml.YAMLError as exc:
            raise ConfigValidationError(f"Invalid YAML in {path}: {exc}") from exc
    if suffix == ".json":
        try:
            content = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ConfigValidationError(f"Invalid JSON in {path}: {exc}") from exc
        if not isinstance(content, dict):
            raise ConfigValidationError(f"Config file must contain a mapping: {path}")
        return content
    raise ConfigValidationError("Config file must be JSON or YAML")


def load_config_with_precedence(
    config_path: Optional[Path],
    cli_values: Mapping[str, Any],
    defaults: Mapping[str, Any],
) -> Dict[str, Any]:
    """Merge defaults, then file values, then CLI values that were actually given.

    A CLI value of ``None`` means the option was not passed.
    """
    merged: Dict[str, Any] = dict(defaults)
    if config_path is not None:
        file_values = load_config_file(config_path)
        merged.update(file_values)
        log.debug("Loaded config file", extra={"path": str(config_path)})
    merged.update({k: v for k, v in cli_values.items() if v is not None})
    return merged


__all__ = ["load_config_file", "load_config_with_precedence"]
