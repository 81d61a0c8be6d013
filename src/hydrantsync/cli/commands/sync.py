"""Sync command and summary formatting."""

from __future__ import annotations

import argparse

from rich.console import Console

from hydrantsync import SyncAction, SyncConfig, SyncResult
from hydrantsync.cli.common import config_from_args, plural
from hydrantsync.cli.progress.rich import RichSyncProgress
from hydrantsync.providers import DryRunOperation


def format_sync_summary(
    result: SyncResult,
    config: SyncConfig,
    operations: tuple[DryRunOperation, ...] = (),
) -> str:
    mode = "dry-run" if result.dry_run else "apply"
    created = result.count(SyncAction.CREATE)
    updated = result.count(SyncAction.UPDATE)
    unchanged = result.count(SyncAction.NOOP)

    lines = [
        "",
        f"hydrantsync - sync complete ({mode})",
        "",
        f"  GPX file:  {config.gpx_file}",
        f"  API:       {config.api_url}",
        "",
        f"  Hydrants:  {len(result.entries)} recorded, {result.remote_hydrants} mapped nearby",
        f"  Skipped:   {plural(result.waypoints_skipped, 'waypoint')}",
    ]
    if created > 0:
        lines.append(f"  Created:   {plural(created, 'node')}")
    if updated > 0:
        lines.append(f"  Updated:   {plural(updated, 'node')}")
    if unchanged > 0:
        lines.append(f"  Unchanged: {plural(unchanged, 'node')}")
    if created == 0 and updated == 0:
        lines.append("  Status:    all hydrants up to date")

    if result.changeset_id is not None and not result.dry_run:
        lines.append("")
        lines.append(f"  Changeset: {result.changeset_id}")

    if result.dry_run:
        lines.append("")
        for operation in operations:
            lines.append(f"  [dry-run] {operation.describe()}")
        lines.append("  [dry-run] No changes were made")

    lines.append("")
    return "\n".join(lines)


def run_sync(args: argparse.Namespace, *, console: Console | None = None) -> SyncResult:
    import hydrantsync.cli as cli

    config = config_from_args(args)

    if not args.verbose:
        with RichSyncProgress(console) as progress:
            client = cli.HydrantSync.from_config(config, dry_run=args.dry_run, progress=progress)
            result = client.sync()
    else:
        client = cli.HydrantSync.from_config(config, dry_run=args.dry_run)
        result = client.sync()

    print(cli._format_summary(result, config, client.dry_run_operations))
    return result


__all__ = ["format_sync_summary", "run_sync"]
