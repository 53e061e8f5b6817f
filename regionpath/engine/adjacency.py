"""
regionpath.engine.adjacency
===========================
Derive region adjacency from polygon boundaries.

Two regions are neighbours when they share at least one boundary edge.
Shared edges are found by keying every edge on its quantised end points,
so two polygons describing the same border coincide even when their
coordinates were written down independently.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Set, Tuple

from regionpath.engine.geometry import COORDINATE_PRECISION, edge_key, iter_ring_edges, iter_rings
from regionpath.schemas.region_schema import Region

logger = logging.getLogger(__name__)

AdjacencyGraph = Mapping[int, Tuple[int, ...]]


def collect_edge_owners(regions: Iterable[Region], precision: int = COORDINATE_PRECISION) -> Dict[str, List[int]]:
    """Map every edge key to the ids of the regions whose rings contain it"""
    edge_owners: Dict[str, List[int]] = {}
    for region in regions:
        for ring in iter_rings(region.polygons):
            for a, b in iter_ring_edges(ring):
                key = edge_key(a, b, precision)
                if key is None:
                    continue
                owners = edge_owners.setdefault(key, [])
                if region.id not in owners:
                    owners.append(region.id)
    return edge_owners


def build_adjacency(regions: Iterable[Region], precision: int = COORDINATE_PRECISION) -> AdjacencyGraph:
    """
    Build the region adjacency graph.

    Returns a read-only mapping with an entry for every region. Neighbour
    tuples keep insertion order, which makes shortest path tie-breaking
    deterministic for a given catalog. Malformed points only drop the edges
    touching them; a region without valid edges ends up isolated.
    """
    regions = list(regions)

    # ordered "sets": list for order, set for membership
    neighbours: Dict[int, List[int]] = {region.id: [] for region in regions}
    seen: Dict[int, Set[int]] = {region.id: set() for region in regions}

    edge_owners = collect_edge_owners(regions, precision)

    shared_edges = 0
    for owners in edge_owners.values():
        if len(owners) < 2:
            continue
        shared_edges += 1
        for left in range(len(owners)):
            for right in range(left + 1, len(owners)):
                a, b = owners[left], owners[right]
                if b not in seen[a]:
                    seen[a].add(b)
                    neighbours[a].append(b)
                if a not in seen[b]:
                    seen[b].add(a)
                    neighbours[b].append(a)

    isolated = sum(1 for ids in neighbours.values() if not ids)
    logger.info(
        "Built adjacency for %d regions: %d edges, %d shared, %d isolated regions",
        len(regions), len(edge_owners), shared_edges, isolated,
    )

    return MappingProxyType({region_id: tuple(ids) for region_id, ids in neighbours.items()})


def is_adjacent(adjacency: AdjacencyGraph, a: int, b: int) -> bool:
    """Return True if regions *a* and *b* share a border edge"""
    return b in adjacency.get(a, ())
