"""Provider adapter contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from hydrantsync.contracts.geo import BoundingBox
from hydrantsync.contracts.osm import Changeset, Node, User


class Provider(ABC):
    @abstractmethod
    def __enter__(self) -> Provider: ...  # pragma: no cover

    @abstractmethod
    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...  # pragma: no cover

    @abstractmethod
    def current_user(self) -> User: ...  # pragma: no cover

    @abstractmethod
    def list_changesets(self, *, open_only: bool = True) -> list[Changeset]: ...  # pragma: no cover

    @abstractmethod
    def create_changeset(self) -> Changeset: ...  # pragma: no cover

    @abstractmethod
    def update_changeset(self, changeset: Changeset) -> None: ...  # pragma: no cover

    @abstractmethod
    def retrieve_map(self, bbox: BoundingBox) -> list[Node]: ...  # pragma: no cover

    @abstractmethod
    def create_node(self, node: Node, changeset: Changeset) -> int: ...  # pragma: no cover

    @abstractmethod
    def update_node(self, node: Node, changeset: Changeset) -> int: ...  # pragma: no cover
