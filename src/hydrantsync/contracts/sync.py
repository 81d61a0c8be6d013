"""Sync decision and result contracts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, Field

from hydrantsync.contracts.hydrant import Hydrant


class SyncAction(StrEnum):
    CREATE = "create"
    UPDATE = "update"
    NOOP = "noop"


@dataclass(frozen=True)
class CreateDecision:
    """No map hydrant nearby: a new node is written."""

    hydrant: Hydrant

    action = SyncAction.CREATE


@dataclass(frozen=True)
class UpdateDecision:
    """Matched map hydrant differs: the node is replaced with ``hydrant``."""

    hydrant: Hydrant
    remote: Hydrant

    action = SyncAction.UPDATE


@dataclass(frozen=True)
class NoOpDecision:
    """Matched map hydrant already carries the recorded attributes."""

    hydrant: Hydrant
    remote: Hydrant

    action = SyncAction.NOOP


Decision = CreateDecision | UpdateDecision | NoOpDecision


class SyncEntry(BaseModel):
    action: SyncAction
    name: str
    node_id: int = 0
    latitude: float
    longitude: float


class SyncResult(BaseModel):
    """Value returned by :meth:`SyncEngine.sync`."""

    entries: list[SyncEntry] = Field(default_factory=list)
    waypoints_skipped: int = 0
    remote_hydrants: int = 0
    changeset_id: int | None = None
    dry_run: bool = False

    def count(self, action: SyncAction) -> int:
        return sum(1 for entry in self.entries if entry.action == action)
