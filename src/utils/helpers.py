"""General utility functions for common operations.

This module provides reusable functions for GeoJSON file I/O, tabular column
validation, and directory management.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List


def ensure_dir_exists(dir_path: str) -> None:
    """Create directory if it does not exist.

    Creates the directory and all parent directories if they don't exist.

    Args:
        dir_path: Path to directory to create.
    """
    Path(dir_path).mkdir(parents=True, exist_ok=True)


def load_feature_collection(geojson_path: str) -> Dict[str, Any]:
    """Load a GeoJSON feature collection as plain JSON.

    Args:
        geojson_path: Path to GeoJSON file.

    Returns:
        Parsed feature collection dictionary.

    Raises:
        FileNotFoundError: If the GeoJSON file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the document has no `features` list.

    Example:
        >>> collection = load_feature_collection("neighborhoods/boundaries.geojson")
        >>> print(f"Loaded {len(collection['features'])} features")
    """
    geojson_file = Path(geojson_path)

    if not geojson_file.exists():
        raise FileNotFoundError(f"GeoJSON file not found: {geojson_path}")

    with open(geojson_file, "r", encoding="utf-8") as f:
        collection = json.load(f)

    if not isinstance(collection, dict) or not isinstance(
        collection.get("features"), list
    ):
        raise ValueError(f"GeoJSON file has no 'features' list: {geojson_path}")

    return collection


def save_feature_collection(collection: Any, path: str) -> None:
    """Write a feature collection as compact JSON.

    The data is written to a temporary sibling file first and moved into place
    once complete, so a failed write never leaves a truncated file at `path`.

    Args:
        collection: JSON-serializable feature collection.
        path: Destination file path.

    Raises:
        OSError: If the file cannot be written.
    """
    file_path = Path(path)
    ensure_dir_exists(str(file_path.parent))

    temp_file = file_path.with_name(file_path.name + ".tmp")
    try:
        with open(temp_file, "w", encoding="utf-8") as f:
            json.dump(collection, f, separators=(",", ":"), ensure_ascii=False)
        temp_file.replace(file_path)
    finally:
        temp_file.unlink(missing_ok=True)


def validate_columns(columns: Iterable[str], required_columns: List[str]) -> bool:
    """Validate that a tabular header contains required columns.

    Args:
        columns: Column names read from the file header.
        required_columns: List of column names that must be present.

    Returns:
        True if all required columns are present.

    Raises:
        ValueError: If any required columns are missing.

    Example:
        >>> validate_columns(["CASE", "NEIGHBORHOOD"], ["NEIGHBORHOOD"])
        True
    """
    present = set(columns)
    missing_columns = [col for col in required_columns if col not in present]

    if missing_columns:
        raise ValueError(f"Missing required columns: {missing_columns}")

    return True
