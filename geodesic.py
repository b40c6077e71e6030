"""
geodesic.py — Real-world length of GeoJSON LineString segments.

Distances are in metres.  Each leg between two consecutive coordinates is
rounded to the nearest metre before being added to the segment total, so a
segment length is always an integer.
"""

import math

from config import EARTH_RADIUS_M, LINE_STRING


class InvalidGeometryError(ValueError):
    """Raised when a length is requested for a non-LineString feature."""


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return math.floor(value + 0.5)


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> int:
    """Return the great-circle distance in metres between two points."""
    lat1, lon1, lat2, lon2 = map(math.radians, (lat1, lon1, lat2, lon2))
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = (math.sin(dlat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2)
    c = 2 * math.asin(math.sqrt(a))
    return round_half_up(EARTH_RADIUS_M * c)


def get_line_string_distance(feature: dict) -> int:
    """
    Length of a LineString feature in metres.

    Coordinates are GeoJSON ``[lon, lat]`` pairs.  A segment with fewer than
    two points has length 0.
    """
    geometry = feature.get("geometry") or {}
    if geometry.get("type") != LINE_STRING:
        raise InvalidGeometryError(
            f"Feature must be a {LINE_STRING}, got {geometry.get('type')!r}"
        )

    coords = geometry.get("coordinates") or []
    distance = 0
    for (lon1, lat1, *_), (lon2, lat2, *_) in zip(coords, coords[1:]):
        distance += haversine(lat1, lon1, lat2, lon2)
    return distance


def get_distance(features: list) -> int:
    """Total length in metres of already filtered LineString features."""
    return sum(get_line_string_distance(f) for f in features)
