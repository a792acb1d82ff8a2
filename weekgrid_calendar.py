#!/usr/bin/env python3
"""
Weekgrid - lay out a week of calendar events.

This is the command line entry point: it reads an events file (JSON or
iCalendar) and prints the week's layout as JSON.
"""

import sys
import json
import logging
import argparse
from datetime import date
from pathlib import Path

from weekgrid.config import Config
from weekgrid.event_loader import load_events
from weekgrid.logger_config import setup_logger
from weekgrid.timezone_utils import set_timezone, local_today, now_ms
from weekgrid.week import get_week_days
from weekgrid.week_layout import compute_week_layout


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Weekgrid - compute the week view layout of calendar events"
    )
    parser.add_argument(
        "events",
        type=Path,
        help="Events file (.json list or date-keyed mapping, or .ics)"
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Path to configuration file (default: auto-detect)"
    )
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        help="Any day of the week to lay out, YYYY-MM-DD (default: today)"
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output"
    )
    return parser.parse_args(argv)


def load_config(config_path):
    """Load the given config, or the default one if it exists, else defaults."""
    if config_path is not None:
        return Config.load(config_path)
    default_path = Config.get_default_config_path()
    if default_path.exists():
        return Config.load(default_path)
    return Config()


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    logger = setup_logger(logging.DEBUG if args.debug else logging.WARNING)

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    set_timezone(config.timezone)
    logger.debug("Configuration: %s (timezone %s)", config.source_path or "defaults", config.timezone)

    try:
        events = load_events(args.events)
    except (OSError, ValueError) as e:
        print(f"Error loading events: {e}", file=sys.stderr)
        return 1

    week_days = get_week_days(args.date or local_today(), config.week)
    layout = compute_week_layout(events, week_days, config, now_ms=now_ms())

    json.dump(layout.to_dict(), sys.stdout, indent=args.indent or None)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
