#!/usr/bin/env python3
"""Settings loader with environment-based overrides."""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from phrasebind.core.config_schema import Settings, validate_settings
from phrasebind.core.logging_utils import set_global_log_level, setup_logger

logger = setup_logger(__name__)

_settings: Settings | None = None


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from a YAML file with environment-based overrides.

    Loads the base file and merges the environment-specific file from
    ``envs/{PHRASEBIND_ENV}.yaml`` next to it when present.

    Args:
        config_path: Path to base settings file. None means built-in defaults;
            config/phrasebind.yaml in the repository is a sample to pass here,
            it is not read implicitly.

    Returns:
        Validated Settings

    Raises:
        FileNotFoundError: If an explicit settings file doesn't exist
        yaml.YAMLError: If the settings file is invalid YAML
        pydantic.ValidationError: If a value fails validation

    Environment Variables:
        PHRASEBIND_ENV: Environment name (default: dev)
        PHRASEBIND_LOG_LEVEL: Overrides log_level
    """
    settings: dict[str, Any] = {}

    if config_path is not None:
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Settings file not found: {config_path}")

        with open(config_file) as f:
            settings = yaml.safe_load(f) or {}

        env = os.getenv("PHRASEBIND_ENV", "dev")
        env_config_path = config_file.parent / "envs" / f"{env}.yaml"
        if env_config_path.exists():
            logger.debug(f"Loading {env} environment settings from {env_config_path}")
            with open(env_config_path) as f:
                env_settings = yaml.safe_load(f)
            if env_settings:
                _deep_merge(settings, env_settings)

    settings = _expand_env_vars(settings)

    level_override = os.getenv("PHRASEBIND_LOG_LEVEL")
    if level_override:
        settings["log_level"] = level_override

    return validate_settings(settings)


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand ${VAR} environment variables in settings.

    Args:
        obj: Settings object (dict, list, str, or other)

    Returns:
        Object with environment variables expanded
    """
    if isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):

        def replace_env(match):
            var_name = match.group(1) or match.group(2)
            return os.getenv(var_name, match.group(0))  # Keep original if not found

        return re.sub(r"\$\{([^}]+)\}|\$([A-Z_][A-Z0-9_]*)", replace_env, obj)
    else:
        return obj


def _deep_merge(base: dict, override: dict):
    """Deep merge override dict into base dict in-place.

    Args:
        base: Base settings dictionary (modified in-place)
        override: Override settings dictionary
    """
    for key, value in override.items():
        if isinstance(value, dict) and key in base and isinstance(base[key], dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def configure(settings: Settings | None = None) -> Settings:
    """Install process-wide settings and apply the log level.

    Args:
        settings: Settings to install (default: freshly loaded defaults)

    Returns:
        The installed Settings
    """
    global _settings
    _settings = settings if settings is not None else load_settings()
    set_global_log_level(_settings.log_level)
    return _settings


def get_settings() -> Settings:
    """Get process-wide settings, loading defaults on first use.

    Invalid environment overrides fall back to built-in defaults with a
    warning; only an explicit load_settings() call raises.

    Returns:
        Global Settings instance
    """
    if _settings is None:
        try:
            defaults = load_settings()
        except ValidationError as e:
            logger.warning(f"Invalid settings from environment, using defaults: {e}")
            defaults = Settings()
        return configure(defaults)
    return _settings


def reset_settings():
    """Forget installed settings (next get_settings() reloads defaults)."""
    global _settings
    _settings = None
