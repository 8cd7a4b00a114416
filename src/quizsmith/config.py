# src/quizsmith/config.py
"""Configuration loading utilities for Quizsmith.

This module is for application layers (the CLI, workers) that want
file- and env-based configuration. It handles:
- Finding and loading quizsmith.yaml config files
- Loading .env files for API keys
- Reading QUIZSMITH_* environment overrides
- Building Settings objects from all of the above
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from quizsmith.exceptions import ConfigError
from quizsmith.settings import Settings

CONFIG_FILES = ["quizsmith.yaml", "quizsmith.yml", ".quizsmithrc"]
ENV_FILE = ".env"
ENV_PREFIX = "QUIZSMITH_"

VALID_ROOT_KEYS = {"llm_model", "embedding_model", "settings"}

VALID_SETTINGS_KEYS = set(Settings.model_fields) - {"llm_model", "embedding_model"}


def load_env_file(env_path: str | Path = ENV_FILE) -> None:
    """Load environment variables from a .env file if it exists.

    Existing environment variables are never overridden.
    """
    path = Path(env_path)
    if not path.exists():
        return

    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip().strip("'\"")
                if key not in os.environ:
                    os.environ[key] = value


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find a config file in ``start_dir`` (default: cwd) or its parents."""
    current = start_dir or Path.cwd()
    for _ in range(10):  # Limit search depth
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found)
    """
    config_path = Path(config_path) if config_path is not None else find_config_file()
    if config_path is None:
        return {}

    with open(config_path, encoding="utf-8") as f:
        try:
            config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    return config


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Return warnings about unknown keys (empty if no issues)."""
    warnings = []

    unknown_root = set(config.keys()) - VALID_ROOT_KEYS
    if unknown_root:
        path_str = str(config_path) if config_path else "config"
        warnings.append(f"Unknown config keys in {path_str}: {', '.join(sorted(unknown_root))}")

    settings = config.get("settings", {})
    if isinstance(settings, dict):
        unknown_settings = set(settings.keys()) - VALID_SETTINGS_KEYS
        if unknown_settings:
            warnings.append(f"Unknown settings keys: {', '.join(sorted(unknown_settings))}")

    return warnings


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract settings values from a loaded YAML config.

    Model names may sit at the root level; behavioral settings live in the
    ``settings:`` section. Unknown keys are skipped (see validate_config).
    """
    result: dict[str, Any] = {}
    for key in ("llm_model", "embedding_model"):
        if key in config:
            result[key] = config[key]

    yaml_settings = config.get("settings", {}) or {}
    for key, value in yaml_settings.items():
        if key in VALID_SETTINGS_KEYS:
            result[key] = value
    return result


def get_settings_from_env(environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Read settings from QUIZSMITH_* environment variables.

    Only variables that are explicitly set are returned, so YAML values are
    kept unless overridden. Values stay strings; pydantic coerces them.
    ``QUIZSMITH_LLM_TIMEOUT=""`` disables the timeout.
    """
    environ = os.environ if environ is None else environ
    result: dict[str, Any] = {}
    for field in Settings.model_fields:
        if field == "category_temperatures":
            continue
        env_key = f"{ENV_PREFIX}{field.upper()}"
        if env_key in environ:
            value: Any = environ[env_key]
            if field == "llm_timeout" and value == "":
                value = None
            result[field] = value
    return result


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Build Settings from YAML config and env vars.

    Precedence (highest to lowest):
    1. Environment variables
    2. YAML config
    3. Settings class defaults

    Raises:
        ConfigError: If a value fails validation.
    """
    values = get_settings_from_yaml(config or {})
    values.update(env_settings if env_settings is not None else get_settings_from_env())
    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid settings: {e}",
            suggestion="Check the settings section of your quizsmith.yaml and QUIZSMITH_* vars",
        ) from e
