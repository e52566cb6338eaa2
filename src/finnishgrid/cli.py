#!/usr/bin/env python3
"""Command-line access to the Fingrid open data API.

Examples:
    finnishgrid list
    finnishgrid fetch electricity_consumption_FI \\
        --start 2021-01-01T00:00:00+0200 --end 2021-01-03T00:00:00+0200 -o consumption.csv
"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional, TextIO
import requests
from finnishgrid.catalog import get_dataset, list_datasets
from finnishgrid.clients.fingrid import FingridClient, FingridError
from finnishgrid.utils.logging_config import configure_logging

LOGGER = logging.getLogger(__name__)


def _parse_dataset(value: str) -> int:
    """Resolve a dataset argument given as numeric id or catalog name."""
    if value.isdigit():
        return int(value)
    try:
        return get_dataset(value).dataset_id
    except KeyError as exc:
        raise argparse.ArgumentTypeError(
            f"Unknown dataset '{value}'. Run 'finnishgrid list' for available names."
        ) from exc


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser for the finnishgrid CLI."""
    parser = argparse.ArgumentParser(
        prog="finnishgrid",
        description="Fetch time series from the Fingrid open data API.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List the named datasets in the catalog")

    fetch = subparsers.add_parser("fetch", help="Fetch one dataset for a time window")
    fetch.add_argument(
        "dataset",
        type=_parse_dataset,
        help="Dataset name from 'finnishgrid list' or a numeric dataset id",
    )
    fetch.add_argument(
        "--start",
        required=True,
        help="Start time ISO 8601 with UTC offset, e.g. 2021-01-01T00:00:00+0200",
    )
    fetch.add_argument(
        "--end",
        required=True,
        help="End time ISO 8601 with UTC offset, e.g. 2021-01-03T00:00:00+0200",
    )
    fetch.add_argument(
        "--api-key",
        help="Override API key (default: FINGRID_OPENDATA_API_KEY)",
    )
    fetch.add_argument(
        "-o",
        "--output",
        help="Write CSV to this file instead of stdout",
    )
    return parser


def _list_datasets(out: TextIO) -> int:
    for entry in list_datasets():
        out.write(f"{entry.dataset_id:>5}  {entry.name:<60}  {entry.title}\n")
    return 0


def _fetch(args: argparse.Namespace, out: TextIO) -> int:
    client = FingridClient()
    try:
        dataframe = client.fetch(args.dataset, args.start, args.end, args.api_key)
    except FingridError as e:
        LOGGER.error("Fetching dataset %s failed: %s", args.dataset, e)
        raise
    except requests.RequestException as e:
        LOGGER.error("API connection failed for dataset %s: %s", args.dataset, e)
        raise

    if dataframe is None:
        return 0

    if args.output:
        dataframe.to_csv(args.output, index=False)
        LOGGER.info("Wrote %d rows for dataset %s to %s", len(dataframe), args.dataset, args.output)
    else:
        dataframe.to_csv(out, index=False)
    return 0


def run_cli(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    """Execute CLI with given arguments.

    Args:
        argv: Command-line arguments (uses sys.argv if None).
        out: Stream for command output (uses sys.stdout if None).

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    out = out or sys.stdout

    if args.command == "list":
        return _list_datasets(out)
    return _fetch(args, out)


def main() -> None:  # pragma: no cover - CLI entrypoint
    """CLI entry point."""
    sys.exit(run_cli())


if __name__ == "__main__":  # pragma: no cover - CLI execution path
    main()
