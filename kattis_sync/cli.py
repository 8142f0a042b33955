#!/usr/bin/env python3

import argparse
import logging
import os
import sys
from pathlib import Path

from . import cache
from .base import SyncError
from .catalog import build_from_cache, fetch_online_catalog
from .local import scan_local
from .models import ProblemRecord, SyncConfig
from .reconcile import classify, merge
from .report import build_report, render_table

logger = logging.getLogger(__name__)


def positive_float(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value!r}")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kattis-sync",
        description="Compare solved Kattis problems with a local problems directory.",
    )
    parser.add_argument("-c", "--cookie", required=True, help="EduSiteCookie value")
    parser.add_argument("-k", "--kattis-host", default="open")
    parser.add_argument("-p", "--problems-dir", type=Path, required=True)
    parser.add_argument(
        "-o", "--output-file", type=Path, help="write the online problems here"
    )
    parser.add_argument(
        "-i",
        "--input-file",
        type=Path,
        help="read online problems from this file instead of fetching",
    )
    parser.add_argument("--print-online", action="store_true")
    parser.add_argument(
        "--timeout", type=positive_float, default=None, metavar="SECONDS"
    )
    parser.add_argument(
        "--json", action="store_true", help="print the report as JSON"
    )
    return parser


def config_from_args(args: argparse.Namespace) -> SyncConfig:
    return SyncConfig(
        token=args.cookie,
        host=args.kattis_host,
        problems_dir=args.problems_dir,
        output_file=args.output_file,
        input_file=args.input_file,
        print_online=args.print_online,
        timeout_seconds=args.timeout,
    )


def sync(config: SyncConfig) -> dict[str, ProblemRecord]:
    if config.input_file is not None:
        problems = build_from_cache(config.input_file)
    else:
        problems = fetch_online_catalog(config)

    if config.output_file is not None:
        cache.dump(config.output_file, problems)

    return merge(problems, scan_local(config.problems_dir))


def configure_logging() -> None:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)

    try:
        merged = sync(config)
    except SyncError as e:
        logger.error("%s failed: %s", e.stage, e)
        return 1

    local_only, online_only = classify(merged)
    report = build_report(local_only, online_only, config.print_online)
    if args.json:
        print(report.model_dump_json())
    else:
        print(render_table(report))
    return 0


def main() -> None:
    configure_logging()
    sys.exit(run())


if __name__ == "__main__":
    main()
