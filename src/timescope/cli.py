"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime

from timescope import __version__
from timescope.analysis import analyze
from timescope.config import get_settings
from timescope.errors import TimescopeError
from timescope.factories import create_formatter_for_date_range
from timescope.matrix import select_pattern
from timescope.renderers.axis_labels import build_axis_labels_html
from timescope.time_utils import coerce_timestamp

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="timescope",
        description="Pick date formats that fit the granularity and scope of a date range",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )
    basis = parser.add_mutually_exclusive_group()
    basis.add_argument(
        "--local",
        dest="use_local_time",
        action="store_const",
        const=True,
        default=None,
        help="Analyze and format in local time",
    )
    basis.add_argument(
        "--utc",
        dest="use_local_time",
        action="store_const",
        const=False,
        help="Analyze and format in UTC",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    analyze_parser = subparsers.add_parser("analyze", help="Show granularity, scope and pattern")
    analyze_parser.add_argument("dates", nargs="*", help="ISO 8601 timestamps")

    format_parser = subparsers.add_parser("format", help="Format values for a date range")
    format_parser.add_argument(
        "--dates",
        nargs="*",
        default=[],
        help="ISO 8601 timestamps that define the range",
    )
    format_parser.add_argument("values", nargs="+", help="Timestamps to format")

    preview_parser = subparsers.add_parser("preview", help="Preview the formatter for a range")
    preview_parser.add_argument(
        "--dates",
        nargs="*",
        default=[],
        help="ISO 8601 timestamps that define the range",
    )

    labels_parser = subparsers.add_parser("labels", help="Label each date as an axis tick")
    labels_parser.add_argument("dates", nargs="+", help="ISO 8601 timestamps")
    labels_parser.add_argument(
        "--html",
        action="store_true",
        help="Print an HTML fragment instead of plain lines",
    )

    return parser


def _use_local_time(args: argparse.Namespace) -> bool:
    if args.use_local_time is None:
        return get_settings().use_local_time
    return bool(args.use_local_time)


def _parse_dates(raw: list[str]) -> list[datetime]:
    return [coerce_timestamp(value) for value in raw]


def cmd_info(args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Basis: {'local' if _use_local_time(args) else 'UTC'}")
    print(f"Week start: {settings.week_start}")
    return 0


def cmd_analyze(args: argparse.Namespace) -> int:
    """Handle the 'analyze' command."""
    pair = analyze(
        _parse_dates(args.dates),
        use_local_time=_use_local_time(args),
        week_start=get_settings().week_start,
    )
    print(f"Granularity: {pair.granularity.name.lower()}")
    print(f"Scope: {pair.scope.name.lower()}")
    print(f"Pattern: {select_pattern(pair)}")
    return 0


def cmd_format(args: argparse.Namespace) -> int:
    """Handle the 'format' command."""
    formatter = create_formatter_for_date_range(
        id="cli",
        dates=_parse_dates(args.dates),
        use_local_time=_use_local_time(args),
    )
    for value in args.values:
        print(formatter(value))
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    """Handle the 'preview' command."""
    formatter = create_formatter_for_date_range(
        id="cli",
        dates=_parse_dates(args.dates),
        use_local_time=_use_local_time(args),
    )
    print(formatter.preview())
    return 0


def cmd_labels(args: argparse.Namespace) -> int:
    """Handle the 'labels' command."""
    dates = _parse_dates(args.dates)
    use_local_time = _use_local_time(args)
    if args.html:
        print(build_axis_labels_html(dates, use_local_time=use_local_time))
        return 0

    formatter = create_formatter_for_date_range(
        id="cli",
        dates=dates,
        use_local_time=use_local_time,
    )
    for value in dates:
        print(f"{value.isoformat()}\t{formatter(value)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    level = logging.DEBUG if args.debug or settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "analyze": cmd_analyze,
        "format": cmd_format,
        "preview": cmd_preview,
        "labels": cmd_labels,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except TimescopeError as exc:
        logger.debug("Command %r failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
