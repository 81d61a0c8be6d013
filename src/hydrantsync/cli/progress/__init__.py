"""CLI progress displays."""

from hydrantsync.cli.progress.rich import RichSyncProgress

__all__ = ["RichSyncProgress"]
