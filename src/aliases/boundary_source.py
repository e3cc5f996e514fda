"""Boundary retrieval module for the neighborhood feature collection.

Obtains the neighborhood boundaries either from a local cached GeoJSON file or,
when no usable cache exists, from the remote boundary endpoint. The endpoint
wraps the feature collection under a `data` key; only that payload is cached.
"""

import os
from pathlib import Path
from typing import Any, Dict

import requests

from src.aliases.models import PipelineContext
from src.utils.helpers import save_feature_collection
from src.utils.logging import get_logger

logger = get_logger(__name__)


class BoundarySource:
    """Fetch-or-load the boundary feature collection.

    Attributes:
        force_refresh: Fetch from the endpoint even when a cache file exists.

    Example:
        >>> source = BoundarySource()
        >>> context = source.obtain(url, "neighborhoods/boundaries.geojson")
        >>> print(context.local_path)
    """

    def __init__(self, force_refresh: bool = False) -> None:
        self.force_refresh = force_refresh

    def _check_cache(self, cache_path: str) -> bool:
        """Return True if the cache file exists and is readable and writable."""
        if self.force_refresh:
            return False

        return os.access(cache_path, os.R_OK | os.W_OK)

    def _fetch_feature_collection(self, url: str) -> Dict[str, Any]:
        """GET the endpoint and unwrap the collection from the `data` key.

        Raises:
            requests.RequestException: If the request fails or returns an
                error status.
            ValueError: If the body is not JSON or has no `data` key.
        """
        response = requests.get(url)
        response.raise_for_status()

        payload = response.json()

        if not isinstance(payload, dict) or "data" not in payload:
            raise ValueError(f"Boundary endpoint response has no 'data' key: {url}")

        return payload["data"]

    def obtain(self, url: str, cache_path: str) -> PipelineContext:
        """Return a context pointing at a local copy of the boundaries.

        Args:
            url: Boundary endpoint URL.
            cache_path: Local GeoJSON cache path, written if freshly fetched.

        Returns:
            PipelineContext with `local_path` set to `cache_path`.
        """
        if self._check_cache(cache_path):
            logger.info(f"Using cached GeoJSON at {cache_path}")
            return PipelineContext(local_path=cache_path)

        collection = self._fetch_feature_collection(url)
        save_feature_collection(collection, cache_path)

        logger.info(f"Copied GeoJSON from API at {url}")
        logger.debug(f"Cached boundaries at {Path(cache_path).resolve()}")

        return PipelineContext(local_path=cache_path)
