# -*- coding: utf-8 -*-
"""Settings persistence and validation."""

from __future__ import annotations

import os
from copy import deepcopy
from pathlib import Path
from typing import Any

from pagesort.constants import DEFAULT_HOTKEYS, DEFAULT_ROW_HEIGHT, DEFAULT_SETTINGS_FILE, LOG_LEVELS
from pagesort.utils.file_utils import read_json_file, write_json_file


DEFAULT_CONFIG: dict[str, Any] = {
    "list": {"default_row_height": DEFAULT_ROW_HEIGHT, "strict_drag": False},
    "merge": {"ask_scope": True},
    "images": {"ask_scope": True},
    "hotkeys": deepcopy(DEFAULT_HOTKEYS),
    "logging": {"level": "INFO"},
}


class ConfigError(ValueError):
    """Raised when settings are invalid."""


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default config."""
    return deepcopy(DEFAULT_CONFIG)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_env_file(env_path: Path) -> dict[str, str]:
    """Load a simple .env file (KEY=VALUE)."""
    values: dict[str, str] = {}
    if not env_path.exists():
        return values

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if (value.startswith('"') and value.endswith('"')) or (
            value.startswith("'") and value.endswith("'")
        ):
            value = value[1:-1]
        values[key] = value
    return values


def _apply_env_overrides(config: dict[str, Any], env_values: dict[str, str]) -> dict[str, Any]:
    """Apply environment-based overrides to runtime config.

    The process environment wins over the .env file.
    """
    merged = deepcopy(config)
    level = os.environ.get("PAGESORT_LOG_LEVEL", env_values.get("PAGESORT_LOG_LEVEL", "")).strip()
    if level:
        merged.setdefault("logging", {})
        merged["logging"]["level"] = level.upper()
    return merged


def validate_config(config: dict[str, Any]) -> None:
    """Validate the config fields the list views and CLI rely on."""
    row_height = config.get("list", {}).get("default_row_height")
    if isinstance(row_height, bool) or not isinstance(row_height, (int, float)) or row_height <= 0:
        raise ConfigError("list.default_row_height must be a positive number")

    if not isinstance(config.get("list", {}).get("strict_drag"), bool):
        raise ConfigError("list.strict_drag must be true or false")

    for section in ("merge", "images"):
        if not isinstance(config.get(section, {}).get("ask_scope"), bool):
            raise ConfigError(f"{section}.ask_scope must be true or false")

    level = config.get("logging", {}).get("level")
    if level not in LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {', '.join(LOG_LEVELS)}")


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config from JSON and merge into defaults."""
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    env_values = _load_env_file(config_path.parent / ".env")
    if not config_path.exists():
        merged = _apply_env_overrides(get_default_config(), env_values)
    else:
        loaded = read_json_file(config_path)
        merged = _apply_env_overrides(_deep_merge(get_default_config(), loaded), env_values)
    validate_config(merged)
    return merged


def save_config(config: dict[str, Any], path: str | Path | None = None) -> Path:
    """Validate and save config as JSON."""
    validate_config(config)
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    return write_json_file(config_path, config)
