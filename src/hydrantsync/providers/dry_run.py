"""Dry-run provider that reads for real and never writes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import TracebackType

from hydrantsync.contracts.exceptions import SyncError
from hydrantsync.contracts.geo import BoundingBox
from hydrantsync.contracts.osm import Changeset, Node, User
from hydrantsync.contracts.provider import Provider

_LOG = logging.getLogger(__name__)

DRY_RUN_CHANGESET_ID = 0


@dataclass(frozen=True)
class DryRunOperation:
    """Deterministic dry-run operation log entry."""

    sequence: int
    name: str
    target_id: int
    payload: dict[str, str]

    def describe(self) -> str:
        details = ", ".join(f"{key}={value}" for key, value in self.payload.items())
        return f"{self.name} #{self.target_id}" + (f" ({details})" if details else "")


class DryRunProvider(Provider):
    """Wraps a provider: reads pass through, writes are logged and recorded.

    Created nodes get negative placeholder ids, the changeset gets id 0.
    """

    def __init__(self, inner: Provider) -> None:
        self._inner = inner
        self._node_counter = 0
        self._operations: list[DryRunOperation] = []

    @property
    def operations(self) -> tuple[DryRunOperation, ...]:
        return tuple(self._operations)

    def _record_operation(self, name: str, target_id: int, payload: dict[str, str] | None = None) -> None:
        operation = DryRunOperation(
            sequence=len(self._operations) + 1,
            name=name,
            target_id=target_id,
            payload=payload or {},
        )
        self._operations.append(operation)
        _LOG.info("[dry-run] Would %s", operation.describe())

    def __enter__(self) -> DryRunProvider:
        self._inner.__enter__()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._inner.__exit__(exc_type, exc_val, exc_tb)

    def current_user(self) -> User:
        return self._inner.current_user()

    def list_changesets(self, *, open_only: bool = True) -> list[Changeset]:
        return self._inner.list_changesets(open_only=open_only)

    def retrieve_map(self, bbox: BoundingBox) -> list[Node]:
        return self._inner.retrieve_map(bbox)

    def create_changeset(self) -> Changeset:
        self._record_operation("create_changeset", DRY_RUN_CHANGESET_ID)
        return Changeset(id=DRY_RUN_CHANGESET_ID, open=True)

    def update_changeset(self, changeset: Changeset) -> None:
        self._record_operation("update_changeset", changeset.id, {tag.key: tag.value for tag in changeset.tags})

    def create_node(self, node: Node, changeset: Changeset) -> int:
        self._node_counter += 1
        node_id = -self._node_counter
        self._record_operation("create_node", node_id, _node_payload(node, changeset))
        return node_id

    def update_node(self, node: Node, changeset: Changeset) -> int:
        if node.id <= 0 or node.version <= 0:
            raise SyncError(f"Node {node.id} needs an id and a version to be updated")
        self._record_operation("update_node", node.id, _node_payload(node, changeset))
        return node.version + 1


def _node_payload(node: Node, changeset: Changeset) -> dict[str, str]:
    payload = {
        "changeset": str(changeset.id),
        "lat": f"{node.latitude:.7f}",
        "lon": f"{node.longitude:.7f}",
    }
    if node.version:
        payload["version"] = str(node.version)
    payload.update({tag.key: tag.value for tag in node.tags})
    return payload
