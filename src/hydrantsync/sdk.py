"""SDK composition root for hydrantsync."""

from __future__ import annotations

from collections.abc import Iterable

import httpx

from hydrantsync.contracts.config import SyncConfig
from hydrantsync.contracts.exceptions import ConfigError
from hydrantsync.contracts.gpx import Waypoint
from hydrantsync.contracts.osm import Changeset
from hydrantsync.contracts.provider import Provider
from hydrantsync.contracts.sync import SyncResult
from hydrantsync.engine import SyncEngine
from hydrantsync.engine.progress import SyncProgress
from hydrantsync.gpx import load_waypoints
from hydrantsync.providers import DryRunOperation, DryRunProvider, create_provider

PROGRAM_NAME = "hydrantsync"


def software_identity() -> str:
    """Value of the ``created_by`` changeset tag and the HTTP user agent."""
    from hydrantsync import __version__

    return f"{PROGRAM_NAME} {__version__}"


class HydrantSync:
    """hydrantsync SDK public API."""

    def __init__(
        self,
        *,
        provider: Provider,
        config: SyncConfig,
        dry_run: bool = False,
        progress: SyncProgress | None = None,
    ) -> None:
        self._provider = provider
        self._config = config
        self._dry_run = dry_run
        self._progress = progress

    @classmethod
    def from_config(
        cls,
        config: SyncConfig,
        *,
        dry_run: bool = False,
        progress: SyncProgress | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> HydrantSync:
        provider = create_provider(config, user_agent=software_identity(), dry_run=dry_run, transport=transport)
        return cls(provider=provider, config=config, dry_run=dry_run, progress=progress)

    @property
    def dry_run_operations(self) -> tuple[DryRunOperation, ...]:
        if isinstance(self._provider, DryRunProvider):
            return self._provider.operations
        return ()

    def sync(self, waypoints: Iterable[Waypoint] | None = None) -> SyncResult:
        """Reconcile the waypoints (or the configured GPX file) with the map."""
        if waypoints is None:
            if self._config.gpx_file is None:
                raise ConfigError("gpx_file is required to sync")
            waypoints = load_waypoints(self._config.gpx_file)

        engine = SyncEngine(
            self._provider,
            self._config,
            created_by=software_identity(),
            dry_run=self._dry_run,
            progress=self._progress,
        )
        with self._provider:
            return engine.sync(waypoints)

    def list_changesets(self, *, open_only: bool = True) -> list[Changeset]:
        with self._provider:
            return self._provider.list_changesets(open_only=open_only)
