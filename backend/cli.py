"""
Command Line Entry Point
========================

Extracts administrative boundary polygons from an OSM JSON dataset.

    boundary-rings --in-file berlin.json --out-file berlin.geojsonl
    boundary-rings --in-file berlin.json --query "^Berlin$"
    boundary-rings --in-file berlin.json stats --all
"""
from __future__ import annotations

import argparse
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator, List, Optional

from dotenv import load_dotenv

from pipelines.boundaries.errors import AreaFailure
from pipelines.boundaries.pipeline import BoundaryPipeline
from pipelines.boundaries.writer import write_geojson_lines
from pipelines.osm.filters import AreaFilter, all_of, area_predicate, by_query
from pipelines.osm.loader import DatasetFormatError, load_dataset, write_raw
from pipelines.osm.stats import boundary_type_counts, write_stats
from services.logging_service import init_logging, setup_console_logging

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("geojson", "raw")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boundary-rings",
        description="Extract administrative boundary polygons from an OSM JSON dataset.",
    )
    parser.add_argument("-i", "--in-file", type=Path, required=True, help="OSM JSON file to read.")
    parser.add_argument(
        "-o", "--out-file", type=Path,
        help="Path to output file. If unspecified output is written to stdout.",
    )
    parser.add_argument("-f", "--format", choices=OUTPUT_FORMATS, default="geojson", help="Output format.")
    parser.add_argument(
        "-q", "--query",
        help="Query for relations with matching name. (Sub)string or pattern allowed.",
    )
    parser.add_argument("--log-file", action="store_true", help="Also write rotating log files.")

    subcommands = parser.add_subparsers(dest="command")
    stats = subcommands.add_parser("stats", help="Output statistics about the dataset")
    stats.add_argument("-a", "--all", action="store_true", help="Show stats for all relations, using minimal filters.")
    return parser


@contextmanager
def open_output(path: Optional[Path]) -> Iterator[IO[str]]:
    if path is None:
        yield sys.stdout
        return
    with path.open("w", encoding="utf-8") as f:
        yield f


def run_stats(args: argparse.Namespace) -> None:
    logger.info("📊 Getting stats")
    predicate = area_predicate(AreaFilter.ALL if args.all else AreaFilter.ADMINISTRATIVE)
    dataset = load_dataset(args.in_file, predicate)
    with open_output(args.out_file) as out:
        write_stats(boundary_type_counts(dataset, predicate), out)


def run_extract(args: argparse.Namespace) -> List[AreaFailure]:
    logger.info("🗺️ Extracting localities")
    predicate = area_predicate(AreaFilter.ADMINISTRATIVE)
    if args.query:
        predicate = all_of(predicate, by_query(args.query))

    dataset = load_dataset(args.in_file, predicate)
    failures: List[AreaFailure] = []
    with open_output(args.out_file) as out:
        if args.format == "raw":
            written = write_raw(dataset.relations_sorted(predicate), out)
        else:
            pipeline = BoundaryPipeline(area_filter=predicate)
            written = write_geojson_lines(pipeline.iter_features(dataset, failures), out)

    logger.info(f"✅ Wrote {written} record(s), {len(failures)} area(s) skipped")
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "stats" and args.query:
        parser.error("Sorry, '--query' is not implemented for stats yet.")

    setup_console_logging()
    if args.log_file:
        init_logging()

    try:
        if args.command == "stats":
            run_stats(args)
        else:
            run_extract(args)
    except (OSError, DatasetFormatError) as e:
        logger.error(f"❌ {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
