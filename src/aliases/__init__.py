"""Neighborhood alias matching: boundaries, name extraction, resolution, writing."""

from src.aliases.alias_resolver import AliasResolver, normalize_name
from src.aliases.alias_writer import AliasWriter
from src.aliases.boundary_source import BoundarySource
from src.aliases.models import Neighborhood, PipelineContext
from src.aliases.name_extractor import NameExtractor
from src.aliases.pipeline import run_pipeline, summarize_context

__all__ = [
    "AliasResolver",
    "AliasWriter",
    "BoundarySource",
    "NameExtractor",
    "Neighborhood",
    "PipelineContext",
    "normalize_name",
    "run_pipeline",
    "summarize_context",
]
