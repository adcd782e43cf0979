# cli.py
# Generates an isometric, voxel-style contribution scene SVG for a GitHub user.
# Usage: commitcraft <github-username> [--json calendar.json] [--seed N]

import argparse
import logging
import os

from .calendar import CalendarFetchError, fetch_calendar, load_calendar
from .log import setup_logging
from .render import export_svg, render_svg

log = logging.getLogger(__name__)


def build_parser():
    p = argparse.ArgumentParser(prog="commitcraft", description="Isometric voxel scene of a GitHub contribution calendar.")
    p.add_argument("username", help="GitHub user; also names the output file")
    p.add_argument("--json", dest="json_path", help="read the calendar from a JSON file instead of GitHub")
    p.add_argument("--token", help="GitHub token (default: $GITHUB_TOKEN); without one the profile page is scraped")
    p.add_argument("--from", dest="since", help="first day, YYYY-MM-DD")
    p.add_argument("--to", dest="until", help="last day, YYYY-MM-DD")
    p.add_argument("--seed", type=int, help="seed for the ore layers (default: a fresh scene every run)")
    p.add_argument("--detail", choices=("ore", "simple"), default="ore")
    p.add_argument("--out", default=".", help="output directory")
    p.add_argument("--log-level", default="INFO", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    p.add_argument("--log-file")
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)
    username = args.username.strip()

    try:
        if args.json_path:
            calendar = load_calendar(args.json_path)
        else:
            token = args.token or os.environ.get("GITHUB_TOKEN") or None
            calendar = fetch_calendar(username, token=token, since=args.since, until=args.until)
    except (CalendarFetchError, OSError, KeyError, ValueError) as e:
        log.error("Could not load calendar: %s", e)
        return 1

    svg = render_svg(calendar, username, seed=args.seed, detail=args.detail)
    if svg is None:
        log.warning("Calendar for %s has no days, nothing to draw", username)
        return 1

    path = export_svg(svg, username, args.out)
    log.info("Rendered %s (weeks=%d, total=%d)", path, len(calendar.weeks), calendar.total)
    return 0
