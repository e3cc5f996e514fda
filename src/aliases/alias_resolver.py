"""Alias resolution module for matching 311 neighborhood labels to boundaries.

Neighborhood labels in the service-request extracts are typed by hand and do not
agree with the boundary names on case, punctuation, or a couple of known
spellings. Both sides are passed through `normalize_name` and compared for exact
equality; the first source value that matches a boundary becomes its alias.
Resolution runs once per source file and only ever fills in neighborhoods that
are still missing an alias.
"""

import re
from contextlib import closing
from typing import Any, Dict, Iterator, List, Optional

import pandas as pd
from tqdm import tqdm

from src.aliases.models import Neighborhood, PipelineContext
from src.utils.config import get_config
from src.utils.helpers import validate_columns
from src.utils.logging import get_logger

logger = get_logger(__name__)

# Source values that mean "no neighborhood recorded"
EMPTY_VALUES = ("", "NA")

_TRAILING_MEMORIAL_PARK = re.compile(r"Memorial Park\Z")
_SEPARATORS = re.compile(r"[-/ ]")


def normalize_name(name: str) -> str:
    """Collapse a neighborhood name into its comparable form.

    Known mismatches between the boundary names and the 311 labels are
    rewritten first (a trailing "Memorial Park" becomes "Memorial P" and
    "BRAESWOOD PLACE" becomes "BRAESWOOD"), then the value is uppercased and
    all hyphens, slashes, and spaces are removed.

    Args:
        name: Canonical boundary name or raw source value.

    Returns:
        Normalized name.

    Example:
        >>> normalize_name("West U")
        'WESTU'
        >>> normalize_name("Tanglewood Memorial Park")
        'TANGLEWOODMEMORIALP'
    """
    cleaned = _TRAILING_MEMORIAL_PARK.sub("Memorial P", name)
    cleaned = cleaned.replace("BRAESWOOD PLACE", "BRAESWOOD")
    return _SEPARATORS.sub("", cleaned.upper())


class AliasResolver:
    """Assign aliases to neighborhoods from a tab-delimited source file.

    Attributes:
        config: Configuration dictionary.
        column: Name of the column holding neighborhood labels.
        delimiter: Field delimiter of the source files.
        quotechar: Enclosure character; doubled inside a field to escape it.
        chunksize: Number of rows parsed per chunk while streaming. Rows in the
            chunk that completes the last match are parsed even though they
            are never used, so values above 1 trade a strict stop for speed.
        show_progress: Whether to display a row progress bar.

    Example:
        >>> resolver = AliasResolver()
        >>> context = resolver.resolve("311-Public-Data-Extract-2015-tab.txt", context)
        >>> print(context.unmatched_values)
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        self.config = config if config is not None else get_config()
        resolver_config = self.config.get("resolver", {}) or {}

        self.column: str = resolver_config.get("column", "NEIGHBORHOOD")
        self.delimiter: str = resolver_config.get("delimiter", "\t")
        self.quotechar: str = resolver_config.get("quotechar", '"')
        self.chunksize: int = resolver_config.get("chunksize", 1)
        self.show_progress: bool = resolver_config.get("show_progress", False)

    def _build_lookup(self, neighborhoods: List[Neighborhood]) -> Dict[str, Neighborhood]:
        """Map each normalized canonical name to its neighborhood.

        When two names normalize to the same key the earlier one keeps it.
        """
        lookup: Dict[str, Neighborhood] = {}
        for neighborhood in neighborhoods:
            lookup.setdefault(normalize_name(neighborhood.name), neighborhood)
        return lookup

    def _iter_values(self, source_path: str) -> Iterator[str]:
        """Yield the raw label column of the source file row by row.

        Raises:
            ValueError: If the file cannot be parsed or has no label column.
        """
        read_options = dict(
            sep=self.delimiter,
            quotechar=self.quotechar,
            doublequote=True,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
        )

        header = pd.read_csv(source_path, nrows=0, **read_options)
        validate_columns(header.columns, [self.column])

        with pd.read_csv(
            source_path,
            usecols=[self.column],
            chunksize=self.chunksize,
            **read_options,
        ) as reader:
            for chunk in reader:
                yield from chunk[self.column]

    def resolve(self, source_path: str, context: PipelineContext) -> PipelineContext:
        """Fill in missing aliases from one source file.

        Reading stops as soon as every neighborhood has an alias. Values that
        match no boundary are logged once per distinct value and kept in
        `context.unmatched_values[source_path]`.

        Args:
            source_path: Path to a tab-delimited 311 extract.
            context: Context with `neighborhoods` populated.

        Returns:
            The same context, mutated in place.
        """
        neighborhoods = context.neighborhoods

        if context.all_aliased():
            logger.info(f"All neighborhoods already aliased, skipping {source_path}.")
            context.unmatched_values[source_path] = []
            return context

        lookup = self._build_lookup(neighborhoods)
        remaining = sum(1 for n in neighborhoods if not n.has_alias)
        missing: List[str] = []

        values = self._iter_values(source_path)
        with closing(values), tqdm(
            desc=f"Scanning {source_path}", unit=" rows", disable=not self.show_progress
        ) as progress:
            for value in values:
                progress.update(1)

                if value in EMPTY_VALUES:
                    continue

                neighborhood = lookup.get(normalize_name(value))
                if neighborhood is None:
                    missing.append(value)
                    continue

                if neighborhood.has_alias:
                    continue

                neighborhood.alias = value
                remaining -= 1
                logger.debug(f"Matched {neighborhood.name!r} to {value!r}")

                if remaining == 0:
                    logger.info(f"Every neighborhood aliased, stopped reading {source_path}.")
                    break

        unmatched = list(dict.fromkeys(missing))
        context.unmatched_values[source_path] = unmatched

        if unmatched:
            logger.info(f"Values of {', '.join(unmatched)} from {source_path} missing match.")

        logger.info(f"Set neighborhood aliases from {source_path}.")
        return context
