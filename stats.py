"""
stats.py — Progress statistics per construction status.

Every deduplicated segment falls in exactly one of four buckets:

    done       done
    wip        wip
    planned    planned, unknown, variant
    postponed  postponed, variant-postponed

get_stats() returns, for each bucket, its display label, its length in
metres, its share of the whole network (integer percent) and the CSS class
used by the presentation layer.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum

from collector import get_all_uniq_line_strings
from config import CATEGORY_CLASSES, CATEGORY_LABELS, KM_DECIMALS, STATUS_ALIASES
from geodesic import get_distance, round_half_up

logger = logging.getLogger(__name__)


class Status(Enum):
    DONE = "done"
    WIP = "wip"
    PLANNED = "planned"
    POSTPONED = "postponed"
    UNKNOWN = "unknown"
    VARIANT = "variant"
    VARIANT_POSTPONED = "variant-postponed"


BUCKETS = ("done", "wip", "planned", "postponed")

STATUS_BUCKETS = {
    Status.DONE: "done",
    Status.WIP: "wip",
    Status.PLANNED: "planned",
    Status.UNKNOWN: "planned",
    Status.VARIANT: "planned",
    Status.POSTPONED: "postponed",
    Status.VARIANT_POSTPONED: "postponed",
}


def parse_status(value) -> Status:
    """Map a raw ``status`` property to a Status, UNKNOWN when unrecognised."""
    if isinstance(value, str):
        value = STATUS_ALIASES.get(value, value)
    try:
        return Status(value)
    except ValueError:
        logger.warning(f"Unrecognised status {value!r}, counted as unknown")
        return Status.UNKNOWN


def get_bucket(feature: dict) -> str:
    properties = feature.get("properties") or {}
    return STATUS_BUCKETS[parse_status(properties.get("status"))]


def get_percent(distance: int, total_distance: int) -> int:
    """Share of *distance* in *total_distance*; 0 when the network is empty."""
    if total_distance == 0:
        return 0
    return round_half_up(distance / total_distance * 100)


def get_total_distance(collections: list) -> int:
    """Length in metres of the whole deduplicated network."""
    return get_distance(get_all_uniq_line_strings(collections))


def get_stats(collections: list) -> dict:
    """Return ``{bucket: {"name", "distance", "percent", "class"}}`` for every bucket."""
    features = get_all_uniq_line_strings(collections)

    features_by_bucket = {bucket: [] for bucket in BUCKETS}
    for feature in features:
        features_by_bucket[get_bucket(feature)].append(feature)

    total_distance = get_distance(features)
    if total_distance == 0:
        logger.info("No measurable segment, all percentages set to 0")

    stats = {}
    for bucket in BUCKETS:
        distance = get_distance(features_by_bucket[bucket])
        stats[bucket] = {
            "name": CATEGORY_LABELS[bucket],
            "distance": distance,
            "percent": get_percent(distance, total_distance),
            "class": CATEGORY_CLASSES[bucket],
        }
    return stats


def display_distance_in_km(distance) -> str:
    if distance == 0:
        return "0 km"
    quantum = Decimal(1).scaleb(-KM_DECIMALS)
    km = Decimal(distance / 1000).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{km} km"


def display_percent(percent) -> str:
    return f"{percent}%"
