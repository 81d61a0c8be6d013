"""Exception hierarchy for hydrantsync."""

from __future__ import annotations


class HydrantSyncError(Exception):
    """Base exception for all hydrantsync errors."""


class NotAHydrantError(HydrantSyncError):
    """Input does not describe a fire hydrant.

    Raised for waypoints without a hydrant code and for nodes without
    ``emergency=fire_hydrant``. Callers filter these out and continue.
    """


class ConfigError(HydrantSyncError):
    """Configuration loading or validation failure."""


class WaypointLoadError(HydrantSyncError):
    """GPX file loading/parsing failure."""


class TagFormatError(HydrantSyncError):
    """A remote tag carries a value that cannot be parsed."""

    def __init__(self, message: str, *, key: str, value: str) -> None:
        super().__init__(message)
        self.key = key
        self.value = value


class ProviderError(HydrantSyncError):
    """Base provider operation failure."""

    def __init__(self, message: str, *, status_code: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class AuthenticationError(ProviderError):
    """Authentication/authorization failure."""


class SyncError(HydrantSyncError):
    """Engine-level synchronization failure."""
