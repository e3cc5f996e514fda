"""Unit tests for name extractor module."""

import json

import pytest

from src.aliases.models import PipelineContext
from src.aliases.name_extractor import NameExtractor


def write_collection(path, features):
    path.write_text(
        json.dumps({"type": "FeatureCollection", "features": features}), encoding="utf-8"
    )
    return str(path)


def feature(name=None, **properties):
    if name is not None:
        properties["name"] = name
    return {"type": "Feature", "properties": properties, "geometry": None}


def test_extracts_names_in_feature_order(tmp_path):
    path = write_collection(
        tmp_path / "boundaries.geojson",
        [feature("Midtown"), feature("East End"), feature("Acres Home")],
    )

    context = NameExtractor().extract(PipelineContext(local_path=path))

    assert [n.name for n in context.neighborhoods] == ["Midtown", "East End", "Acres Home"]
    assert all(n.alias is None for n in context.neighborhoods)


def test_ignores_other_properties(tmp_path):
    path = write_collection(
        tmp_path / "boundaries.geojson", [feature("Midtown", id=7, alias="stale")]
    )

    context = NameExtractor().extract(PipelineContext(local_path=path))

    assert context.neighborhoods[0].alias is None


def test_skips_features_without_name(tmp_path, caplog):
    path = write_collection(
        tmp_path / "boundaries.geojson",
        [feature("Midtown"), feature(id=2), {"type": "Feature", "properties": None}],
    )

    with caplog.at_level("WARNING"):
        context = NameExtractor().extract(PipelineContext(local_path=path))

    assert [n.name for n in context.neighborhoods] == ["Midtown"]
    assert "has no name" in caplog.text


def test_returns_same_context(tmp_path):
    path = write_collection(tmp_path / "boundaries.geojson", [feature("Midtown")])
    context = PipelineContext(local_path=path)

    assert NameExtractor().extract(context) is context


def test_malformed_collection_raises(tmp_path):
    path = tmp_path / "boundaries.geojson"
    path.write_text('{"type": "FeatureCollection"}', encoding="utf-8")

    with pytest.raises(ValueError):
        NameExtractor().extract(PipelineContext(local_path=str(path)))
