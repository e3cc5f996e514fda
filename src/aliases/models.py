"""Records threaded through the alias-matching pipeline."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class Neighborhood:
    """A canonical boundary name and the alias resolved for it, if any."""

    name: str
    alias: Optional[str] = None

    @property
    def has_alias(self) -> bool:
        return self.alias is not None


@dataclass
class PipelineContext:
    """Ephemeral state carried from one pipeline stage to the next.

    Attributes:
        local_path: Path of the cached boundary feature collection.
        neighborhoods: Canonical neighborhoods in feature order.
        final_path: Path of the augmented collection, set by the writer.
        unmatched_values: Distinct source values with no matching boundary,
            keyed by source file path.
    """

    local_path: str
    neighborhoods: List[Neighborhood] = field(default_factory=list)
    final_path: Optional[str] = None
    unmatched_values: Dict[str, List[str]] = field(default_factory=dict)

    def all_aliased(self) -> bool:
        return all(n.has_alias for n in self.neighborhoods)
