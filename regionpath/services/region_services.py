from typing import List

from fastapi import HTTPException

from regionpath.engine import shortest_path
from regionpath.engine.pathfinder import path_steps
from regionpath.schemas import PathRead, RegionDetail, RegionRead
from regionpath.services.catalog_services import RegionCatalog


class RegionServices:
    """ Read-only region queries for the API"""

    def __init__(self, catalog: RegionCatalog):
        self.catalog = catalog

    def list_regions(self) -> List[RegionRead]:
        """All regions sorted by name"""
        return [RegionRead.from_region(region) for region in self.catalog.sorted_by_name()]

    def get_region(self, region_id: int) -> RegionDetail:
        region = self.catalog.get(region_id)
        if region is None:
            raise HTTPException(status_code=404, detail="Region not found")
        return RegionDetail(
            **RegionRead.from_region(region).model_dump(),
            neighbours=[RegionRead.from_region(n) for n in self.catalog.neighbours(region_id)],
        )

    def resolve_region(self, text: str) -> int:
        """Region id from a numeric id or a (partial) region name"""
        text = text.strip()
        if text.isdecimal() and int(text) in self.catalog:
            return int(text)

        matches = self.catalog.find_matches(text)
        if not matches:
            raise HTTPException(status_code=404, detail=f"Unknown region: {text}")
        if len(matches) > 1:
            raise HTTPException(status_code=409, detail=f"Ambiguous region name: {text}")
        return matches[0]

    def find_path(self, start: str, end: str) -> PathRead:
        """Shortest path between two regions given by id or name"""
        start_id = self.resolve_region(start)
        end_id = self.resolve_region(end)
        path = shortest_path(self.catalog.adjacency, start_id, end_id)
        regions = [RegionRead.from_region(self.catalog.get(region_id)) for region_id in path]
        if path:
            description = " → ".join(region.label for region in regions)
        else:
            description = "No path found between selected regions."
        return PathRead(regions=regions, steps=path_steps(path), description=description)
