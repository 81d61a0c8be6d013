"""Changesets command: list the user's changesets."""

from __future__ import annotations

import argparse

from hydrantsync import Changeset
from hydrantsync.cli.common import config_from_args


def format_changesets(changesets: list[Changeset], *, open_only: bool) -> str:
    scope = "open" if open_only else "all"
    lines = ["", f"hydrantsync - changesets ({scope})", ""]
    if not changesets:
        lines.append("  none")
    for changeset in changesets:
        state = "open" if changeset.open else "closed"
        created = changeset.created_at.strftime("%Y-%m-%d %H:%M") if changeset.created_at else "-"
        comment = changeset.tag_value("comment") or ""
        lines.append(f"  #{changeset.id:<10} {state:<6} {created:<16}  {comment}".rstrip())
    lines.append("")
    return "\n".join(lines)


def run_changesets(args: argparse.Namespace) -> list[Changeset]:
    import hydrantsync.cli as cli

    config = config_from_args(args)
    open_only = not args.all

    client = cli.HydrantSync.from_config(config)
    changesets = client.list_changesets(open_only=open_only)

    print(cli._format_changesets(changesets, open_only=open_only))
    return changesets


__all__ = ["format_changesets", "run_changesets"]
