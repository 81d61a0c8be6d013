"""Sync pipeline engine."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from hydrantsync.contracts.config import SyncConfig
from hydrantsync.contracts.exceptions import NotAHydrantError
from hydrantsync.contracts.geo import BoundingBox
from hydrantsync.contracts.gpx import Waypoint
from hydrantsync.contracts.hydrant import Hydrant
from hydrantsync.contracts.provider import Provider
from hydrantsync.contracts.sync import (
    CreateDecision,
    Decision,
    NoOpDecision,
    SyncEntry,
    SyncResult,
    UpdateDecision,
)
from hydrantsync.engine.changeset import ChangesetCoordinator
from hydrantsync.engine.matcher import find_match
from hydrantsync.engine.progress import (
    PHASE_DECODE,
    PHASE_DISCOVER,
    PHASE_RECONCILE,
    NullSyncProgress,
    SyncProgress,
)
from hydrantsync.engine.reconcile import decide, describe_changes
from hydrantsync.hydrant.node import from_node, to_node
from hydrantsync.hydrant.waypoint import parse_waypoint

_LOG = logging.getLogger(__name__)


class SyncEngine:
    def __init__(
        self,
        provider: Provider,
        config: SyncConfig,
        *,
        created_by: str,
        dry_run: bool = False,
        progress: SyncProgress | None = None,
    ) -> None:
        self._provider = provider
        self._config = config
        self._dry_run = dry_run
        self._progress: SyncProgress = progress or NullSyncProgress()
        self._coordinator = ChangesetCoordinator(provider, comment=config.comment, created_by=created_by)

    @property
    def coordinator(self) -> ChangesetCoordinator:
        return self._coordinator

    def sync(self, waypoints: Iterable[Waypoint]) -> SyncResult:
        result = SyncResult(dry_run=self._dry_run)

        local, bbox = self._decode(waypoints, result)
        if not local:
            _LOG.info("No hydrants found in the waypoints, nothing to do")
            return result

        remote = self._discover(bbox)
        result.remote_hydrants = len(remote)

        self._reconcile(local, remote, result)

        changeset = self._coordinator.current
        result.changeset_id = changeset.id if changeset is not None else None
        return result

    def _decode(self, waypoints: Iterable[Waypoint], result: SyncResult) -> tuple[list[Hydrant], BoundingBox]:
        self._progress.phase_start(PHASE_DECODE)
        try:
            hydrants: list[Hydrant] = []
            bbox = BoundingBox()
            for waypoint in waypoints:
                try:
                    hydrant = parse_waypoint(waypoint, pressure=self._config.pressure)
                except NotAHydrantError as exc:
                    _LOG.debug("Skipping waypoint: %s", exc)
                    result.waypoints_skipped += 1
                    self._progress.item_done(PHASE_DECODE)
                    continue
                _LOG.debug("Found a hydrant from waypoint %s: %r", waypoint.name, hydrant)
                hydrants.append(hydrant)
                bbox.extend(hydrant.latitude, hydrant.longitude)
                self._progress.item_done(PHASE_DECODE)

            _LOG.info("Decoded %d hydrants, skipped %d waypoints", len(hydrants), result.waypoints_skipped)
            self._progress.phase_done(PHASE_DECODE)
            return hydrants, bbox
        except BaseException as exc:
            self._progress.phase_error(PHASE_DECODE, exc)
            raise

    def _discover(self, bbox: BoundingBox) -> list[Hydrant]:
        self._progress.phase_start(PHASE_DISCOVER)
        try:
            nodes = self._provider.retrieve_map(bbox.padded())
            _LOG.debug("Retrieved %d nodes from map", len(nodes))

            hydrants: list[Hydrant] = []
            for node in nodes:
                try:
                    hydrants.append(from_node(node))
                except NotAHydrantError as exc:
                    _LOG.debug("Skipping node: %s", exc)
                    continue

            _LOG.info("Found %d mapped hydrants in the area", len(hydrants))
            self._progress.phase_done(PHASE_DISCOVER)
            return hydrants
        except BaseException as exc:
            self._progress.phase_error(PHASE_DISCOVER, exc)
            raise

    def _reconcile(self, local: list[Hydrant], remote: list[Hydrant], result: SyncResult) -> None:
        self._progress.phase_start(PHASE_RECONCILE, total=len(local))
        try:
            for hydrant in local:
                match = find_match(
                    hydrant,
                    remote,
                    self._config.match_range,
                    policy=self._config.match_policy,
                )
                decision = decide(hydrant, match)
                result.entries.append(self._apply(decision))
                self._progress.item_done(PHASE_RECONCILE)
            self._progress.phase_done(PHASE_RECONCILE)
        except BaseException as exc:
            self._progress.phase_error(PHASE_RECONCILE, exc)
            raise

    def _apply(self, decision: Decision) -> SyncEntry:
        hydrant = decision.hydrant
        match decision:
            case NoOpDecision():
                _LOG.info("Hydrant %s (node %d) needs no update", hydrant.name, decision.remote.id)
                node_id = decision.remote.id
            case CreateDecision():
                changeset = self._coordinator.changeset()
                _LOG.info("Creating hydrant %s in changeset %d", hydrant.name, changeset.id)
                node_id = self._provider.create_node(to_node(hydrant, changeset.id), changeset)
            case UpdateDecision():
                changeset = self._coordinator.changeset()
                _LOG.info(
                    "Updating hydrant %s (node %d) in changeset %d: %s",
                    hydrant.name,
                    hydrant.id,
                    changeset.id,
                    describe_changes(decision),
                )
                self._provider.update_node(to_node(hydrant, changeset.id), changeset)
                node_id = hydrant.id

        return SyncEntry(
            action=decision.action,
            name=hydrant.name,
            node_id=node_id,
            latitude=hydrant.latitude,
            longitude=hydrant.longitude,
        )
