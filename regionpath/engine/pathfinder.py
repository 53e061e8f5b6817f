from collections import deque
from typing import Collection, Dict, List, Optional, Set

from regionpath.engine.adjacency import AdjacencyGraph


def shortest_path(
        adjacency: AdjacencyGraph,
        source_id: int,
        destination_id: int,
        allowed_ids: Optional[Collection[int]] = None,
) -> List[int]:
    """
    Breadth first search from source to destination.

    With `allowed_ids` the search only walks through those regions, both
    endpoints included. Returns the list of region ids from source to
    destination, or [] when no connecting path exists.
    """
    if source_id == destination_id:
        return [source_id]

    if allowed_ids is not None:
        if not isinstance(allowed_ids, (set, frozenset)):
            allowed_ids = set(allowed_ids)
        if source_id not in allowed_ids or destination_id not in allowed_ids:
            return []

    queue = deque([source_id])
    previous: Dict[int, Optional[int]] = {source_id: None}

    while queue:
        current = queue.popleft()
        for neighbour in adjacency.get(current, ()):
            if allowed_ids is not None and neighbour not in allowed_ids:
                continue
            if neighbour in previous:
                continue

            previous[neighbour] = current
            if neighbour == destination_id:
                return _reconstruct_path(previous, destination_id)
            queue.append(neighbour)

    return []


def _reconstruct_path(previous: Dict[int, Optional[int]], destination_id: int) -> List[int]:
    path = []
    current: Optional[int] = destination_id
    while current is not None:
        path.append(current)
        current = previous[current]
    path.reverse()
    return path


def reachable_from(adjacency: AdjacencyGraph, source_id: int) -> Set[int]:
    """All region ids connected to source_id, source included"""
    reachable = {source_id}
    queue = deque([source_id])
    while queue:
        current = queue.popleft()
        for neighbour in adjacency.get(current, ()):
            if neighbour in reachable:
                continue
            reachable.add(neighbour)
            queue.append(neighbour)
    return reachable


def path_steps(path: List[int]) -> int:
    """Intermediate regions on a path (start and target excluded)"""
    return max(0, len(path) - 2)
