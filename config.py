# config.py — cycling network progress statistics configuration
# Edit this file to change the Earth model, excluded segments, display labels, etc.

# ── Geodesy ──────────────────────────────────────────────────────────
# Mean Earth radius (metres) used by the haversine formula.
EARTH_RADIUS_M = 6371000

# Only this GeoJSON geometry type is measured; everything else is skipped.
LINE_STRING = "LineString"

# ── Segment filtering ────────────────────────────────────────────────
# Segment ids that are never counted, whatever the dataset they appear in
# (alternative alignments drawn for information only).
EXCLUDED_IDS = {"variant2", "variante2"}

# Status spellings found in the source datasets, mapped to the canonical value.
STATUS_ALIASES = {
    "variante": "variant",
    "variante-postponed": "variant-postponed",
}

# ── Display ──────────────────────────────────────────────────────────
CATEGORY_LABELS = {
    "done": "Réalisés",
    "wip": "En travaux",
    "planned": "Prévus",
    "postponed": "Reportés",
}

# CSS classes handed to the presentation layer untouched.
CATEGORY_CLASSES = {
    "done": "text-lvv-blue-600 font-semibold",
    "wip": "text-lvv-blue-600 font-normal",
    "planned": "text-black font-semibold",
    "postponed": "text-lvv-pink font-semibold",
}

# Decimal places shown by display_distance_in_km.
KM_DECIMALS = 2

# ── Logging ──────────────────────────────────────────────────────────
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_FILE = "progress_report.log"
