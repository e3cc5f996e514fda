"""Canonical neighborhood name extraction from the cached feature collection."""

from src.aliases.models import Neighborhood, PipelineContext
from src.utils.helpers import load_feature_collection
from src.utils.logging import get_logger

logger = get_logger(__name__)


class NameExtractor:
    """Build the ordered list of canonical neighborhoods from the boundaries."""

    def extract(self, context: PipelineContext) -> PipelineContext:
        """Read every feature's `properties.name` into `context.neighborhoods`.

        Feature order is preserved. Features without a name are skipped with a
        warning.

        Args:
            context: Context whose `local_path` points at the cached boundaries.

        Returns:
            The same context with `neighborhoods` populated (no aliases).
        """
        collection = load_feature_collection(context.local_path)

        neighborhoods = []
        for position, feature in enumerate(collection["features"]):
            properties = (feature or {}).get("properties") or {}
            name = properties.get("name")
            if name is None:
                logger.warning(f"Feature {position} in {context.local_path} has no name")
                continue
            neighborhoods.append(Neighborhood(name=name))

        context.neighborhoods = neighborhoods
        logger.info(f"Grabbed {len(neighborhoods)} neighborhood names.")
        return context
