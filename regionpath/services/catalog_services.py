import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Sequence

from pydantic import ValidationError

from regionpath.core.config import settings
from regionpath.engine.adjacency import AdjacencyGraph, build_adjacency
from regionpath.engine.geometry import COORDINATE_PRECISION
from regionpath.schemas.region_schema import Region, RegionEntry
from regionpath.utils.text import normalize_for_search

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """The region data could not be turned into a catalog"""


class RegionCatalog:
    """
    Immutable set of regions plus the adjacency graph built from them.
    Region ids are positions in the source list.
    """

    def __init__(self, regions: Sequence[Region], precision: int = COORDINATE_PRECISION):
        if not regions:
            raise CatalogError("Region catalog is empty")
        self._regions = tuple(regions)
        self._by_id: Dict[int, Region] = {region.id: region for region in self._regions}
        if len(self._by_id) != len(self._regions):
            raise CatalogError("Region ids must be unique")

        # exact, case-insensitive aliases
        self._by_name: Dict[str, int] = {}
        for region in self._regions:
            for alias in self.aliases(region):
                self._by_name[alias.lower()] = region.id
        self._search_aliases = [
            (region.id, [normalize_for_search(alias) for alias in self.aliases(region)])
            for region in self._regions
        ]

        self.adjacency: AdjacencyGraph = build_adjacency(self._regions, precision)

    @classmethod
    def from_entries(cls, entries: Any, precision: int = COORDINATE_PRECISION) -> "RegionCatalog":
        """Build a catalog from the raw JSON list"""
        if not isinstance(entries, list):
            raise CatalogError(f"Region data must be a JSON list, got {type(entries).__name__}")

        regions = []
        for index, entry in enumerate(entries):
            try:
                parsed = RegionEntry.model_validate(entry)
            except ValidationError as e:
                raise CatalogError(f"Invalid region entry #{index}: {e}") from e
            regions.append(Region(id=index, **parsed.model_dump()))

        return cls(regions, precision)

    @classmethod
    def load(cls, path: Path, precision: int = COORDINATE_PRECISION) -> "RegionCatalog":
        """Read the regions JSON file"""
        path = Path(path)
        logger.info("Loading regions from %s", path)
        try:
            with path.open("r", encoding="utf-8") as fh:
                entries = json.load(fh)
        except FileNotFoundError as e:
            raise CatalogError(f"Region file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise CatalogError(f"Region file {path} is not valid JSON: {e}") from e

        catalog = cls.from_entries(entries, precision)
        logger.info("Loaded %d regions", len(catalog))
        return catalog

    # ------------------------------------------------------------------
    # lookups
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[Region]:
        return iter(self._regions)

    def __contains__(self, region_id: object) -> bool:
        return region_id in self._by_id

    @property
    def regions(self) -> tuple[Region, ...]:
        return self._regions

    def get(self, region_id: int) -> Optional[Region]:
        return self._by_id.get(region_id)

    def neighbours(self, region_id: int) -> List[Region]:
        return [self._by_id[n] for n in self.adjacency.get(region_id, ())]

    def sorted_by_name(self) -> List[Region]:
        return sorted(self._regions, key=lambda region: region.name)

    @staticmethod
    def aliases(region: Region) -> List[str]:
        aliases = [region.name, region.name_en, region.label]
        return [alias for alias in aliases if alias]

    # ------------------------------------------------------------------
    # name resolution
    # ------------------------------------------------------------------
    def find_matches(self, text: str, limit: int = 2) -> List[int]:
        """
        Region ids matching the typed text.

        An exact (case-insensitive) alias wins outright. Otherwise every
        region with an alias containing the normalised query matches; the
        search stops after `limit` hits.
        """
        text = text.strip()
        if not text:
            return []

        exact = self._by_name.get(text.lower())
        if exact is not None:
            return [exact]

        query = normalize_for_search(text)
        if not query:
            return []

        matches = []
        for region_id, aliases in self._search_aliases:
            if any(query in alias for alias in aliases):
                matches.append(region_id)
                if len(matches) >= limit:
                    break
        return matches

    def resolve(self, text: str) -> Optional[int]:
        """Region id for the typed text, None if unknown or ambiguous"""
        matches = self.find_matches(text)
        if len(matches) == 1:
            return matches[0]
        return None


@lru_cache(maxsize=1)
def get_catalog() -> RegionCatalog:
    """Return the application catalog (loaded once)"""
    return RegionCatalog.load(settings.REGIONS_PATH, settings.COORDINATE_PRECISION)
