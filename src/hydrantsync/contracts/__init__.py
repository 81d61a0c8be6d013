"""Public contracts for hydrantsync."""

from hydrantsync.contracts.config import DEV_API_URL, LIVE_API_URL, SyncConfig
from hydrantsync.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    HydrantSyncError,
    NotAHydrantError,
    ProviderError,
    SyncError,
    TagFormatError,
    WaypointLoadError,
)
from hydrantsync.contracts.geo import BoundingBox
from hydrantsync.contracts.gpx import Waypoint
from hydrantsync.contracts.hydrant import Hydrant, HydrantPosition, HydrantType, round_coordinate
from hydrantsync.contracts.osm import Changeset, Node, Tag, User
from hydrantsync.contracts.provider import Provider
from hydrantsync.contracts.sync import (
    CreateDecision,
    Decision,
    NoOpDecision,
    SyncAction,
    SyncEntry,
    SyncResult,
    UpdateDecision,
)

__all__ = [
    "DEV_API_URL",
    "LIVE_API_URL",
    "AuthenticationError",
    "BoundingBox",
    "Changeset",
    "ConfigError",
    "CreateDecision",
    "Decision",
    "Hydrant",
    "HydrantPosition",
    "HydrantSyncError",
    "HydrantType",
    "Node",
    "NoOpDecision",
    "NotAHydrantError",
    "Provider",
    "ProviderError",
    "SyncAction",
    "SyncConfig",
    "SyncEntry",
    "SyncError",
    "SyncResult",
    "Tag",
    "TagFormatError",
    "UpdateDecision",
    "User",
    "Waypoint",
    "WaypointLoadError",
    "round_coordinate",
]
