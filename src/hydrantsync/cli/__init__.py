"""Command-line interface for hydrantsync."""

from __future__ import annotations

import logging as logging

from hydrantsync import HydrantSync as HydrantSync
from hydrantsync import load_config as load_config
from hydrantsync.cli.app import main as main
from hydrantsync.cli.commands import changesets as changesets_command
from hydrantsync.cli.commands import sync as sync_command
from hydrantsync.cli.parser import _package_version as _parser_package_version
from hydrantsync.cli.parser import build_parser as build_parser

_format_summary = sync_command.format_sync_summary
_format_changesets = changesets_command.format_changesets

_run_sync = sync_command.run_sync
_run_changesets = changesets_command.run_changesets

_package_version = _parser_package_version
