#!/usr/bin/env python3
"""
progress_report.py — Print network progress statistics from voies GeoJSON files.

Usage:
    python3 progress_report.py voies-1.json voies-2.json       # text report
    python3 progress_report.py voies-*.json --json             # raw stats as JSON
    python3 progress_report.py voies-*.json --verbose --log    # DEBUG, also to a log file

Files are read in the order given; when the same segment id appears in more
than one file, the first file wins.
"""

import argparse
import json
import logging
import sys

from config import LOG_FILE, LOG_FORMAT
from stats import (
    BUCKETS,
    display_distance_in_km,
    display_percent,
    get_stats,
)

logger = logging.getLogger(__name__)


def setup_logging(verbose=False, log_file=None):
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers,
    )


def load_collections(paths):
    """Load each GeoJSON file; return None if any of them cannot be read."""
    collections = []
    for path in paths:
        try:
            with open(path, encoding="utf-8") as f:
                collections.append(json.load(f))
        except OSError as e:
            logger.error(f"Cannot read {path}: {e}")
            return None
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {path}: {e}")
            return None
        logger.debug(f"Loaded {path}")
    return collections


def format_report(stats: dict, total_distance: int) -> str:
    lines = [
        f"{stats[bucket]['name']}: "
        f"{display_distance_in_km(stats[bucket]['distance'])} "
        f"({display_percent(stats[bucket]['percent'])})"
        for bucket in BUCKETS
    ]
    lines.append(f"Total: {display_distance_in_km(total_distance)}")
    return "\n".join(lines)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compute progress statistics for a cycling network",
    )
    parser.add_argument("files", nargs="+", help="GeoJSON FeatureCollection files, in priority order")
    parser.add_argument("--json", action="store_true", help="Print the raw stats as JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging")
    parser.add_argument("--log", action="store_true", help=f"Also write the log to {LOG_FILE}")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose, LOG_FILE if args.log else None)

    collections = load_collections(args.files)
    if collections is None:
        return False

    stats = get_stats(collections)
    if args.json:
        print(json.dumps(stats, indent=2, ensure_ascii=False))
    else:
        print(format_report(stats, sum(stat["distance"] for stat in stats.values())))

    logger.info(f"Processed {len(collections)} file(s)")
    return True


def run():
    sys.exit(0 if main() else 1)


if __name__ == "__main__":
    run()
