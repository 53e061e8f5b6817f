import math
from numbers import Real
from typing import Any, Iterator, Sequence

COORDINATE_PRECISION = 5


def is_valid_point(point: Any) -> bool:
    """True if point is a list/tuple holding at least two finite numbers"""
    if not isinstance(point, (list, tuple)) or len(point) < 2:
        return False
    lon, lat = point[0], point[1]
    for value in (lon, lat):
        # bool is a subclass of int
        if isinstance(value, bool) or not isinstance(value, Real):
            return False
        try:
            value = float(value)
        except OverflowError:
            # int literal beyond float range
            return False
        if not math.isfinite(value):
            return False
    return True


def point_key(point: Sequence[float], precision: int = COORDINATE_PRECISION) -> str:
    """Quantise a point to `precision` decimals and return "lon,lat" """
    # + 0.0 turns -0.0 into 0.0 so both spellings of zero share a key
    lon = float(point[0]) + 0.0
    lat = float(point[1]) + 0.0
    return f"{lon:.{precision}f},{lat:.{precision}f}"


def edge_key(a: Sequence[float], b: Sequence[float], precision: int = COORDINATE_PRECISION) -> str | None:
    """
    Direction independent key of the segment a-b.
    Returns None for a zero-length segment (both ends quantise to one vertex).
    """
    p1 = point_key(a, precision)
    p2 = point_key(b, precision)
    if p1 == p2:
        return None
    return f"{p1}|{p2}" if p1 < p2 else f"{p2}|{p1}"


def _is_ring(candidate: Sequence) -> bool:
    # a ring holds points, a polygon holds rings
    return any(is_valid_point(item) for item in candidate)


def iter_rings(polygons: Any) -> Iterator[Sequence]:
    """
    Yield every ring found in `polygons`.

    Accepts GeoJSON Polygon coordinates (list of rings) as well as
    MultiPolygon coordinates (list of polygons of rings). A ring is any
    sequence holding at least one valid point; anything else is searched
    for nested rings or skipped.
    """
    if not isinstance(polygons, (list, tuple)):
        return
    if _is_ring(polygons):
        yield polygons
        return
    for item in polygons:
        yield from iter_rings(item)


def iter_ring_edges(ring: Sequence) -> Iterator[tuple[Sequence, Sequence]]:
    """Yield consecutive point pairs of a closed ring, last point back to the first"""
    ring_length = len(ring)
    if ring_length < 2:
        return
    for index in range(ring_length):
        a = ring[index]
        b = ring[(index + 1) % ring_length]
        if not is_valid_point(a) or not is_valid_point(b):
            continue
        yield a, b
