"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import functools
import http.server
import logging
import sys
from pathlib import Path

from harvest_planner import __version__
from harvest_planner.analysis import ScanStart
from harvest_planner.config import get_settings
from harvest_planner.flows.build import build_all
from harvest_planner.reference import CROP_PROFILES
from harvest_planner.schemas import SelectionMode


def configure_logging(debug: bool = False) -> None:
    """Configure stdlib logging from settings (DEBUG when ``debug``)."""
    settings = get_settings()
    level = logging.DEBUG if debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="harvest-planner",
        description="Harvest timing from weather forecasts and per-crop thresholds",
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

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")
    subparsers.add_parser("crops", help="List crops and their harvest thresholds")

    # 'assess' command - print status and next harvest day per crop
    assess_parser = subparsers.add_parser("assess", help="Assess crops for a location")
    assess_parser.add_argument(
        "--city",
        type=str,
        default=None,
        help="Location to assess (default: default_city from settings)",
    )
    assess_parser.add_argument(
        "--mode",
        type=SelectionMode,
        choices=list(SelectionMode),
        default=SelectionMode.ALL,
        help="Crop selection mode (default: all)",
    )
    assess_parser.add_argument(
        "--crop",
        action="append",
        default=[],
        dest="crops",
        metavar="NAME",
        help="Crop to assess; repeat for several (ignored with --mode all)",
    )
    assess_parser.add_argument(
        "--start",
        type=ScanStart,
        choices=list(ScanStart),
        default=ScanStart.TODAY,
        help="First day to consider for the next harvest day (default: today)",
    )

    # 'refresh' command - fetch forecast and build site
    refresh_parser = subparsers.add_parser("refresh", help="Fetch forecast and build site")
    refresh_parser.add_argument(
        "--city",
        type=str,
        default=None,
        help="Location to build the report for (default: default_city from settings)",
    )

    # 'serve' command - serve built site locally
    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Default location: {settings.default_city} ({settings.timezone})")
    return 0


def cmd_crops(_args: argparse.Namespace) -> int:
    """Handle the 'crops' command."""
    for name, profile in CROP_PROFILES.items():
        print(
            f"{name}: {profile.optimal_temp_min:g}-{profile.optimal_temp_max:g} °C, "
            f"humidity <= {profile.optimal_humidity_max:g} %"
        )
    return 0


def cmd_assess(args: argparse.Namespace) -> int:
    """Handle the 'assess' command."""
    result = build_all(
        city=args.city, mode=args.mode, crops=args.crops, start=args.start, write=False
    )
    if "error" in result:
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1

    print(f"Harvest outlook for {result['city']}:")
    for row in result["assessments"]:
        print(f"  {row['crop']}: {row['status']} - next harvest day: {row['next_optimal_date']}")
    return 0


def cmd_refresh(args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: fetch forecast then build site."""
    result = build_all(city=args.city)
    if "error" in result:
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1

    print("Done.")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = Path(settings.site_dir)

    if not site_dir.exists():
        print("No site directory found. Run 'harvest-planner refresh' first.", file=sys.stderr)
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug)

    commands = {
        "info": cmd_info,
        "crops": cmd_crops,
        "assess": cmd_assess,
        "refresh": cmd_refresh,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
