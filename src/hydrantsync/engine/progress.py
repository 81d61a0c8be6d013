"""Progress reporting for a sync run.

The engine reports the Decode, Discover and Reconcile phases; the CLI renders
them as a progress bar.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

PHASE_DECODE = "Decode"
PHASE_DISCOVER = "Discover"
PHASE_RECONCILE = "Reconcile"


class SyncProgress(ABC):
    """Observer for sync phase lifecycle events."""

    @abstractmethod
    def phase_start(self, phase: str, total: int | None = None) -> None:
        """*total* is ``None`` when the number of items is not known up front."""
        ...  # pragma: no cover

    @abstractmethod
    def item_done(self, phase: str) -> None: ...  # pragma: no cover

    @abstractmethod
    def phase_done(self, phase: str) -> None: ...  # pragma: no cover

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None: ...  # pragma: no cover


class NullSyncProgress(SyncProgress):
    def phase_start(self, phase: str, total: int | None = None) -> None:
        pass

    def item_done(self, phase: str) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def phase_error(self, phase: str, error: BaseException) -> None:
        pass
