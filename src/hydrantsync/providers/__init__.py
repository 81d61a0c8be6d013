"""Provider implementations."""

from hydrantsync.providers.dry_run import DryRunOperation, DryRunProvider
from hydrantsync.providers.factory import create_provider

__all__ = ["DryRunOperation", "DryRunProvider", "create_provider"]
