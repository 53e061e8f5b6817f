import logging
import random
from typing import Optional, Sequence

from regionpath.engine.adjacency import AdjacencyGraph
from regionpath.engine.pathfinder import reachable_from, shortest_path
from regionpath.schemas.game_schema import Challenge
from regionpath.schemas.region_schema import Region

logger = logging.getLogger(__name__)

CHALLENGE_ATTEMPTS = 500
MIN_CHALLENGE_LENGTH = 4  # start, two intermediate regions, target
FALLBACK_CHALLENGE_LENGTH = 2  # any connected pair


def pick_challenge(
        regions: Sequence[Region],
        adjacency: AdjacencyGraph,
        rng: Optional[random.Random] = None,
        attempts: int = CHALLENGE_ATTEMPTS,
        min_length: int = MIN_CHALLENGE_LENGTH,
) -> Challenge:
    """
    Pick a start/target pair for a new game.

    Tries `attempts` random pairs whose shortest path has at least
    `min_length` regions. Falls back to the first connected pair in catalog
    order, then to (first, first). Only an empty catalog is an error.
    """
    ids = [region.id for region in regions]
    if not ids:
        # RegionCatalog refuses empty data with CatalogError, so only direct callers land here
        raise ValueError("Cannot pick a challenge from an empty region catalog")

    rng = rng or random.Random()

    for _ in range(attempts):
        start_id = rng.choice(ids)
        end_id = rng.choice(ids)
        if start_id == end_id:
            continue
        if len(shortest_path(adjacency, start_id, end_id)) >= min_length:
            return Challenge(start_id=start_id, end_id=end_id)

    logger.warning("No challenge with %d+ regions after %d attempts, relaxing", min_length, attempts)

    fallback = first_connected_pair(ids, adjacency)
    if fallback is not None:
        return fallback

    logger.warning("Region graph has no connected pair, using a zero-step challenge")
    return Challenge(start_id=ids[0], end_id=ids[0])


def first_connected_pair(ids: Sequence[int], adjacency: AdjacencyGraph) -> Optional[Challenge]:
    """First ordered pair of distinct ids (catalog order) joined by any path"""
    for start_id in ids:
        # one BFS per start instead of one per pair
        reachable = reachable_from(adjacency, start_id)
        if len(reachable) < FALLBACK_CHALLENGE_LENGTH:
            continue
        for end_id in ids:
            if end_id != start_id and end_id in reachable:
                return Challenge(start_id=start_id, end_id=end_id)
    return None
