"""Sequential alias-matching pipeline.

Stages run strictly in order, each handing the shared context to the next:
obtain boundaries, extract canonical names, resolve aliases from each source
file in turn, then write the augmented boundaries.
"""

from typing import Any, Dict

from src.aliases.alias_resolver import AliasResolver
from src.aliases.alias_writer import AliasWriter
from src.aliases.boundary_source import BoundarySource
from src.aliases.models import PipelineContext
from src.aliases.name_extractor import NameExtractor
from src.utils.logging import get_logger

logger = get_logger(__name__)


def run_pipeline(config: Dict[str, Any], force_refresh: bool = False) -> PipelineContext:
    """Run the full alias-matching pipeline.

    Args:
        config: Configuration dictionary with `boundaries.url`,
            `boundaries.cache_path`, `sources` and `output.path`.
        force_refresh: Re-fetch the boundaries even if a cache file exists.

    Returns:
        Final context, with `final_path` set.

    Raises:
        KeyError: If a required configuration key is missing, or if the writer
            finds a feature with no matching neighborhood.
        requests.RequestException: If fetching the boundaries fails.
        ValueError: If the boundaries or a source file cannot be parsed.

    Example:
        >>> config = load_config()
        >>> context = run_pipeline(config)
        >>> print(context.final_path)
    """
    boundaries = config["boundaries"]

    source = BoundarySource(force_refresh=force_refresh)
    context = source.obtain(boundaries["url"], boundaries["cache_path"])

    context = NameExtractor().extract(context)

    resolver = AliasResolver(config)
    for source_path in config["sources"]:
        context = resolver.resolve(source_path, context)

    context = AliasWriter().write(config["output"]["path"], context)

    summary = summarize_context(context)
    logger.info(
        f"Aliased {summary['aliased_count']} of {summary['total_neighborhoods']} neighborhoods"
    )
    if summary["unaliased_names"]:
        logger.info(f"No alias found for: {', '.join(summary['unaliased_names'])}")

    return context


def summarize_context(context: PipelineContext) -> Dict[str, Any]:
    """Summarize the outcome of a pipeline run.

    Returns:
        Dictionary containing:
        - total_neighborhoods: Number of canonical neighborhoods
        - aliased_count: Number with an alias
        - unaliased_names: Canonical names left without an alias
        - unmatched_counts: Source path -> number of distinct unmatched values
        - final_path: Output path, or None if nothing was written
    """
    unaliased = [n.name for n in context.neighborhoods if not n.has_alias]

    return {
        "total_neighborhoods": len(context.neighborhoods),
        "aliased_count": len(context.neighborhoods) - len(unaliased),
        "unaliased_names": unaliased,
        "unmatched_counts": {
            path: len(values) for path, values in context.unmatched_values.items()
        },
        "final_path": context.final_path,
    }
