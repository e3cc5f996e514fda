"""Writes the boundary feature collection augmented with resolved aliases."""

from typing import Dict

from src.aliases.models import Neighborhood, PipelineContext
from src.utils.helpers import load_feature_collection, save_feature_collection
from src.utils.logging import get_logger

logger = get_logger(__name__)


class AliasWriter:
    """Attach each neighborhood's alias to its feature and persist the result."""

    def write(self, final_path: str, context: PipelineContext) -> PipelineContext:
        """Re-read the cached boundaries and write them with `properties.alias`.

        Features whose neighborhood never matched are written without an
        `alias` key.

        Args:
            final_path: Destination path for the augmented collection.
            context: Context with `local_path` and resolved `neighborhoods`.

        Returns:
            The same context with `final_path` set.

        Raises:
            KeyError: If a feature's name has no neighborhood. Names come from
                the same file, so this means the cache changed underneath the
                run or a feature has no name.
        """
        by_name: Dict[str, Neighborhood] = {}
        for neighborhood in context.neighborhoods:
            by_name.setdefault(neighborhood.name, neighborhood)

        collection = load_feature_collection(context.local_path)

        for feature in collection["features"]:
            properties = feature.get("properties") or {}
            name = properties.get("name")
            if name not in by_name:
                raise KeyError(
                    f"No neighborhood named {name!r} for feature in {context.local_path}"
                )

            alias = by_name[name].alias
            if alias is None:
                properties.pop("alias", None)
            else:
                properties["alias"] = alias

        save_feature_collection(collection, final_path)

        context.final_path = final_path
        logger.info(f"Aliases written to {final_path}!")
        return context
