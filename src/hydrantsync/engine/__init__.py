"""Engine-domain exports."""

from .changeset import ChangesetCoordinator
from .engine import SyncEngine
from .matcher import find_match
from .progress import NullSyncProgress, SyncProgress
from .reconcile import decide

__all__ = ["ChangesetCoordinator", "NullSyncProgress", "SyncEngine", "SyncProgress", "decide", "find_match"]
