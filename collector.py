"""
collector.py — Merge several GeoJSON voies datasets into one list of segments.

The same logical segment is often drawn in more than one dataset (a section
shared by two lines, or a variant re-using an existing alignment).  Segments
carrying an ``id`` are counted once: the first occurrence, in dataset order
then feature order, is kept.
"""

import logging

from config import EXCLUDED_IDS, LINE_STRING

logger = logging.getLogger(__name__)


def _iter_features(collections):
    for collection in collections:
        if not isinstance(collection, dict):
            continue
        features = collection.get("features")
        if not isinstance(features, list):
            continue
        for feature in features:
            if isinstance(feature, dict):
                yield feature


def is_line_string(feature: dict) -> bool:
    """Return True when the feature has a LineString geometry."""
    geometry = feature.get("geometry")
    return isinstance(geometry, dict) and geometry.get("type") == LINE_STRING


def get_feature_id(feature: dict):
    properties = feature.get("properties") or {}
    return properties.get("id")


def get_all_uniq_line_strings(collections: list) -> list:
    """
    Flatten *collections* and return the deduplicated LineString features.

    - features without an ``id`` are always kept;
    - features whose ``id`` is in EXCLUDED_IDS are always dropped;
    - for any other ``id`` only the first occurrence survives.

    Relative order of the kept features is preserved.  Non-LineString
    geometries and malformed entries are skipped without error.
    """
    seen_ids = set()
    segments = []
    skipped = duplicates = excluded = 0

    for feature in _iter_features(collections):
        if not is_line_string(feature):
            skipped += 1
            continue

        feature_id = get_feature_id(feature)
        if feature_id is None:
            segments.append(feature)
            continue
        if not isinstance(feature_id, (str, int, float)):
            skipped += 1
            continue
        if feature_id in EXCLUDED_IDS:
            excluded += 1
            continue
        if feature_id in seen_ids:
            duplicates += 1
            continue

        seen_ids.add(feature_id)
        segments.append(feature)

    logger.debug(
        f"Collected {len(segments)} segments "
        f"({duplicates} duplicates, {excluded} excluded, {skipped} non-LineString or malformed)"
    )
    return segments
