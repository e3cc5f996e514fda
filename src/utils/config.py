"""Configuration management module for loading and accessing YAML configuration files.

This module provides functions to load the alias-matching YAML configuration,
merge environment variable overrides, and validate that the sections the
pipeline needs are present.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)


# Global cache for configuration
_config_cache: Optional[Dict[str, Any]] = None


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load YAML configuration file and merge with environment variable overrides.

    Args:
        config_path: Path to YAML configuration file. If None, defaults to
            `config/config.yaml` relative to project root.

    Returns:
        Dictionary containing configuration values with environment variable
        overrides applied.

    Raises:
        FileNotFoundError: If the configuration file does not exist.
        yaml.YAMLError: If the YAML file is malformed.
        ValueError: If required configuration sections are missing.

    Example:
        >>> config = load_config("config/config.yaml")
        >>> cache_path = config["boundaries"]["cache_path"]
    """
    if config_path is None:
        project_root = Path(__file__).parent.parent.parent
        config_path = str(project_root / "config" / "config.yaml")

    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Failed to parse YAML configuration file: {e}") from e

    if config is None:
        config = {}

    config = _merge_env_overrides(config)

    _validate_config(config)

    return config


def get_config() -> Dict[str, Any]:
    """Get cached configuration or load default configuration.

    Returns:
        Dictionary containing configuration values.
    """
    global _config_cache

    if _config_cache is None:
        _config_cache = load_config()

    return _config_cache


def _merge_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """Merge environment variable overrides into configuration dictionary.

    Environment variables use double underscore (__) convention for nested keys.
    For example, `OUTPUT__PATH` maps to `config["output"]["path"]`.

    Args:
        config: Configuration dictionary to merge overrides into.

    Returns:
        New configuration dictionary with environment variable overrides applied.
    """
    merged = copy.deepcopy(config)

    for key, value in os.environ.items():
        if "__" in key:
            parts = key.split("__")
            # Skip names like __PYVENV_LAUNCHER__ that do not describe a path
            if not all(parts):
                continue
            _set_nested_value(merged, parts, value)

    return merged


def _set_nested_value(config: Dict[str, Any], path: List[str], value: Any) -> None:
    """Set a nested value in configuration dictionary.

    Args:
        config: Configuration dictionary to modify.
        path: List of keys representing the nested path (e.g., ["output", "path"]).
        value: Value to set at the nested path.
    """
    current = config

    for i, key in enumerate(path[:-1]):
        key_lower = key.lower()
        if key_lower not in current:
            current[key_lower] = {}
        elif not isinstance(current[key_lower], dict):
            conflict_path = ".".join(path[: i + 1])
            logger.warning(
                f"Cannot set environment variable override: '{'__'.join(path)}' "
                f"conflicts with existing non-dict value at path '{conflict_path}'"
            )
            return
        current = current[key_lower]

    final_key = path[-1].lower()
    current[final_key] = _convert_env_value(value)


def _convert_env_value(value: str) -> Any:
    """Convert environment variable string to bool, int, float, or str."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"

    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    return value


def _validate_config(config: Dict[str, Any]) -> None:
    """Validate that required configuration sections exist.

    Args:
        config: Configuration dictionary to validate.

    Raises:
        ValueError: If required sections are missing.
    """
    required_sections = ["boundaries", "sources", "output"]

    for section in required_sections:
        if section not in config:
            raise ValueError(
                f"Required configuration section '{section}' is missing. "
                f"Please check your configuration file."
            )

    if not isinstance(config["sources"], list):
        raise ValueError("Configuration section 'sources' must be a list of paths")
