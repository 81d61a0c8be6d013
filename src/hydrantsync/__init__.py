"""Public API surface for hydrantsync."""

__version__ = "0.3.0"

from hydrantsync.config import load_config
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
from hydrantsync.contracts.hydrant import Hydrant, HydrantPosition, HydrantType
from hydrantsync.contracts.osm import Changeset
from hydrantsync.contracts.sync import SyncAction, SyncEntry, SyncResult
from hydrantsync.engine.progress import SyncProgress
from hydrantsync.gpx import load_waypoints
from hydrantsync.sdk import HydrantSync

__all__ = [
    "DEV_API_URL",
    "LIVE_API_URL",
    "AuthenticationError",
    "Changeset",
    "ConfigError",
    "Hydrant",
    "HydrantPosition",
    "HydrantSync",
    "HydrantSyncError",
    "HydrantType",
    "NotAHydrantError",
    "ProviderError",
    "SyncAction",
    "SyncConfig",
    "SyncEntry",
    "SyncError",
    "SyncProgress",
    "SyncResult",
    "TagFormatError",
    "WaypointLoadError",
    "__version__",
    "load_config",
    "load_waypoints",
]
