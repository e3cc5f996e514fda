"""Unit tests for boundary source module.

These tests are offline: requests.get is mocked.
"""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from src.aliases.boundary_source import BoundarySource

URL = "https://api.example.com/gis/houston/neighborhoods/?token=abc"


@pytest.fixture
def collection():
    return {
        "type": "FeatureCollection",
        "features": [
            {"type": "Feature", "properties": {"name": "Midtown"}, "geometry": None}
        ],
    }


def mock_response(payload):
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


class TestObtain:
    """Test fetch-or-load behavior."""

    def test_cache_present_skips_network(self, tmp_path, collection):
        cache = tmp_path / "boundaries.geojson"
        cache.write_text(json.dumps(collection), encoding="utf-8")

        with patch("src.aliases.boundary_source.requests.get") as mock_get:
            context = BoundarySource().obtain(URL, str(cache))

        mock_get.assert_not_called()
        assert context.local_path == str(cache)
        assert context.neighborhoods == []

    def test_cache_absent_fetches_once(self, tmp_path, collection):
        cache = tmp_path / "neighborhoods" / "boundaries.geojson"

        with patch("src.aliases.boundary_source.requests.get") as mock_get:
            mock_get.return_value = mock_response({"data": collection, "meta": {}})
            context = BoundarySource().obtain(URL, str(cache))

        mock_get.assert_called_once_with(URL)
        assert context.local_path == str(cache)
        assert json.loads(cache.read_text(encoding="utf-8")) == collection

    def test_cached_copy_is_compact(self, tmp_path, collection):
        cache = tmp_path / "boundaries.geojson"

        with patch("src.aliases.boundary_source.requests.get") as mock_get:
            mock_get.return_value = mock_response({"data": collection})
            BoundarySource().obtain(URL, str(cache))

        assert cache.read_text(encoding="utf-8") == json.dumps(
            collection, separators=(",", ":")
        )

    def test_force_refresh_fetches_despite_cache(self, tmp_path, collection):
        cache = tmp_path / "boundaries.geojson"
        cache.write_text('{"type": "FeatureCollection", "features": []}', encoding="utf-8")

        with patch("src.aliases.boundary_source.requests.get") as mock_get:
            mock_get.return_value = mock_response({"data": collection})
            BoundarySource(force_refresh=True).obtain(URL, str(cache))

        mock_get.assert_called_once()
        assert json.loads(cache.read_text(encoding="utf-8")) == collection

    def test_missing_data_key_raises(self, tmp_path, collection):
        cache = tmp_path / "boundaries.geojson"

        with patch("src.aliases.boundary_source.requests.get") as mock_get:
            mock_get.return_value = mock_response(collection)
            with pytest.raises(ValueError, match="no 'data' key"):
                BoundarySource().obtain(URL, str(cache))

        assert not cache.exists()

    def test_network_error_propagates(self, tmp_path):
        cache = tmp_path / "boundaries.geojson"

        with patch("src.aliases.boundary_source.requests.get") as mock_get:
            mock_get.side_effect = requests.ConnectionError("unreachable")
            with pytest.raises(requests.ConnectionError):
                BoundarySource().obtain(URL, str(cache))

        assert not cache.exists()

    def test_http_error_propagates(self, tmp_path):
        cache = tmp_path / "boundaries.geojson"
        response = MagicMock()
        response.raise_for_status.side_effect = requests.HTTPError("403 Forbidden")

        with patch("src.aliases.boundary_source.requests.get", return_value=response):
            with pytest.raises(requests.HTTPError):
                BoundarySource().obtain(URL, str(cache))

        assert not cache.exists()

    def test_logs_fetch(self, tmp_path, collection, caplog):
        cache = tmp_path / "boundaries.geojson"

        with patch("src.aliases.boundary_source.requests.get") as mock_get:
            mock_get.return_value = mock_response({"data": collection})
            with caplog.at_level("INFO"):
                BoundarySource().obtain(URL, str(cache))

        assert f"Copied GeoJSON from API at {URL}" in caplog.text
