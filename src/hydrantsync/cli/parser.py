"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("hydrantsync")
    except PackageNotFoundError:
        return "0.0.0"


def _add_connection_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=None, help="Path to a hydrantsync JSON config file")
    parser.add_argument("--osm-user", default=None, help="OSM user name (default: $OSM_USER)")
    parser.add_argument("--osm-pass", default=None, help="OSM password (default: $OSM_PASSWORD)")
    parser.add_argument(
        "--osm-dev",
        action="store_true",
        help="Use the OSM development API instead of the live one",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hydrantsync")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    sync_parser = subparsers.add_parser("sync", help="Sync hydrant waypoints from a GPX file to OSM")
    sync_parser.add_argument("--gpx-file", default=None, help="GPX file with hydrant waypoints")
    mode = sync_parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--dry-run", action="store_true", help="Preview mode, nothing is written")
    mode.add_argument("--apply", action="store_true", help="Apply mode")
    sync_parser.add_argument("--comment", default=None, help="Changeset comment")
    sync_parser.add_argument(
        "--match-range",
        type=int,
        default=None,
        help="Distance in meters within which a mapped hydrant is considered the same",
    )
    sync_parser.add_argument(
        "--match-policy",
        choices=("last", "nearest"),
        default=None,
        help="Which mapped hydrant wins when several are in range (default: last)",
    )
    sync_parser.add_argument("--pressure", type=int, default=None, help="Pressure in bar for new hydrants")
    _add_connection_arguments(sync_parser)

    changesets_parser = subparsers.add_parser("changesets", help="List your OSM changesets")
    changesets_parser.add_argument(
        "--all",
        action="store_true",
        default=False,
        help="Include closed changesets, not only open ones",
    )
    _add_connection_arguments(changesets_parser)

    return parser


__all__ = ["build_parser"]
