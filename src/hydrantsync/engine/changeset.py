"""Lazy changeset handling for one sync run."""

from __future__ import annotations

import logging

from hydrantsync.contracts.osm import Changeset, Tag
from hydrantsync.contracts.provider import Provider

_LOG = logging.getLogger(__name__)


class ChangesetCoordinator:
    """Hands out the run's changeset, opening it on first use.

    The changeset is never closed here; OSM closes idle changesets on its own.
    """

    def __init__(self, provider: Provider, *, comment: str, created_by: str) -> None:
        self._provider = provider
        self._tags = [
            Tag(key="comment", value=comment),
            Tag(key="created_by", value=created_by),
        ]
        self._changeset: Changeset | None = None

    @property
    def current(self) -> Changeset | None:
        return self._changeset

    @property
    def is_open(self) -> bool:
        return self._changeset is not None

    def changeset(self) -> Changeset:
        if self._changeset is not None:
            return self._changeset

        created = self._provider.create_changeset()
        annotated = created.model_copy(update={"tags": list(self._tags), "open": True})
        self._provider.update_changeset(annotated)
        _LOG.info("Opened changeset %d", annotated.id)
        self._changeset = annotated
        return annotated
