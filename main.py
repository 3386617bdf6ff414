"""log-analyzer — per-type byte statistics for NDJSON log files."""

import logging
import os
import sys
from argparse import ArgumentParser

from rich.console import Console

from log_size_analyzer.config import LOG_LEVELS, OUTPUT_FORMATS, load_config
from log_size_analyzer.formatter import build_table, format_json
from log_size_analyzer.processor import process_lines
from log_size_analyzer.reader import read_lines

VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="log-analyzer",
        description=(
            "Analyse a log file where each line is a JSON object with a string "
            "grouping field, and report the accumulated byte size per group."
        ),
    )
    parser.add_argument(
        "file",
        help="Path to a log file to be analyzed",
    )
    parser.add_argument(
        "--group-key",
        help="JSON field used for grouping (default: type)",
    )
    parser.add_argument(
        "--output",
        choices=OUTPUT_FORMATS,
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Diagnostic log level (default: INFO)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}",
    )
    return parser


def resolve_path(raw: str) -> str:
    """Canonical absolute path of an existing file system entry.

    Raises FileNotFoundError if nothing exists at raw.
    """
    absolute = os.path.realpath(raw)
    if not os.path.exists(absolute):
        raise FileNotFoundError(f"FILE argument was not understood: {raw}. Does the file exist?")
    return absolute


def run(args) -> int:
    try:
        config = load_config(
            group_key=args.group_key,
            log_level=args.log_level,
            output=args.output,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s [log-analyzer] %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        path = resolve_path(args.file)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    logger.info("Using logfile %s", path)

    try:
        f = open(path, "rb")
    except OSError:
        print(f"Error: Could not open file: {path}", file=sys.stderr)
        return 1

    with f:
        result = process_lines(read_lines(f), group_key=config.group_key)

    logger.info(
        "Processed %d lines: %d records in %d groups, %d skipped",
        result.lines_read, result.records_parsed, len(result.groups), result.skipped,
    )
    if result.skipped:
        logger.warning("%d lines were skipped. Statistics might be unreliable.", result.skipped)

    if config.output == "json":
        print(format_json(result.groups, config.group_key))
    else:
        Console().print(build_table(result.groups, config.group_key, result.total_bytes))
    return 0


def main():
    parser = build_parser()
    args = parser.parse_args()
    try:
        code = run(args)
    except (KeyboardInterrupt, BrokenPipeError):
        code = 0
    sys.exit(code)


if __name__ == "__main__":
    main()
