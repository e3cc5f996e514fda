"""Utility modules: configuration, logging, helpers."""

from src.utils.config import get_config, load_config
from src.utils.logging import get_logger, setup_logging, setup_logging_from_config
from src.utils.helpers import (
    ensure_dir_exists,
    load_feature_collection,
    save_feature_collection,
    validate_columns,
)

__all__ = [
    # Config
    "get_config",
    "load_config",
    # Logging
    "setup_logging",
    "setup_logging_from_config",
    "get_logger",
    # Helpers - GeoJSON
    "load_feature_collection",
    "save_feature_collection",
    # Helpers - Tabular validation
    "validate_columns",
    # Helpers - File I/O
    "ensure_dir_exists",
]
