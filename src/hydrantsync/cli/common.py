"""Shared CLI helpers."""

from __future__ import annotations

import argparse
from typing import Any

from hydrantsync.contracts.config import DEV_API_URL, SyncConfig


def config_from_args(args: argparse.Namespace) -> SyncConfig:
    """Load the config file (if any) and layer the given flags on top."""
    import hydrantsync.cli as cli

    overrides: dict[str, Any] = {
        "gpx_file": getattr(args, "gpx_file", None),
        "comment": getattr(args, "comment", None),
        "match_range": getattr(args, "match_range", None),
        "match_policy": getattr(args, "match_policy", None),
        "pressure": getattr(args, "pressure", None),
        "osm_user": args.osm_user,
        "osm_password": args.osm_pass,
    }
    if args.osm_user is not None or args.osm_pass is not None:
        overrides["auth"] = "static"
    if args.osm_dev:
        overrides["api_url"] = DEV_API_URL
    return cli.load_config(args.config, **overrides)


def plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count != 1 else ''}"
