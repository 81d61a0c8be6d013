"""OpenStreetMap provider adapter."""

from __future__ import annotations

import logging
from types import TracebackType

import httpx

from hydrantsync.auth.base import Credentials
from hydrantsync.contracts.exceptions import ProviderError, SyncError
from hydrantsync.contracts.geo import BoundingBox
from hydrantsync.contracts.osm import Changeset, Node, User
from hydrantsync.contracts.provider import Provider
from hydrantsync.providers.osm.client import OsmClient
from hydrantsync.providers.osm.mapper import (
    encode_changeset,
    encode_node,
    parse_changesets,
    parse_document,
    parse_int_response,
    parse_nodes,
    parse_user,
)

_LOG = logging.getLogger(__name__)


class OsmProvider(Provider):
    """Reads and writes nodes and changesets through the OSM API 0.6.

    Entering the context verifies the credentials by loading the user
    details, so a bad login fails before any other request.
    """

    def __init__(
        self,
        *,
        api_url: str,
        credentials: Credentials,
        user_agent: str,
        timeout: float = 30.0,
        max_retries: int = 3,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_url = api_url
        self._credentials = credentials
        self._user_agent = user_agent
        self._timeout = timeout
        self._max_retries = max_retries
        self._transport = transport

        self._client: OsmClient | None = None
        self._user: User | None = None

    def __enter__(self) -> OsmProvider:
        self._client = OsmClient(
            api_url=self._api_url,
            username=self._credentials.username,
            password=self._credentials.password,
            user_agent=self._user_agent,
            timeout=self._timeout,
            max_retries=self._max_retries,
            transport=self._transport,
        )
        try:
            user = self.current_user()
        except BaseException:
            self._close()
            raise
        _LOG.debug("Logged into %s as %s (%d)", self._api_url, user.display_name, user.id)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._close()

    def _close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    @property
    def client(self) -> OsmClient:
        if self._client is None:
            raise ProviderError("OSM provider is not open; use it as a context manager")
        return self._client

    def current_user(self) -> User:
        if self._user is None:
            self._user = parse_user(parse_document(self.client.get("/user/details")))
        return self._user

    def list_changesets(self, *, open_only: bool = True) -> list[Changeset]:
        params: dict[str, str | int] = {"user": self.current_user().id}
        if open_only:
            params["open"] = "true"
        return parse_changesets(parse_document(self.client.get("/changesets", params=params)))

    def create_changeset(self) -> Changeset:
        raw_id = self.client.put("/changeset/create", encode_changeset(Changeset()))
        changeset_id = parse_int_response(raw_id, what="changeset id")

        changesets = parse_changesets(parse_document(self.client.get(f"/changeset/{changeset_id}")))
        if len(changesets) != 1:
            raise ProviderError(f"Unable to retrieve new changeset #{changeset_id}")
        return changesets[0]

    def update_changeset(self, changeset: Changeset) -> None:
        if changeset.id <= 0:
            raise SyncError("Cannot update a changeset without an id")
        self.client.put(f"/changeset/{changeset.id}", encode_changeset(changeset))

    def retrieve_map(self, bbox: BoundingBox) -> list[Node]:
        text = self.client.get("/map", params={"bbox": bbox.as_bbox_param()})
        return parse_nodes(parse_document(text))

    def create_node(self, node: Node, changeset: Changeset) -> int:
        payload = node.model_copy(update={"changeset": changeset.id})
        raw_id = self.client.put("/node/create", encode_node(payload, include_identity=False))
        return parse_int_response(raw_id, what="node id")

    def update_node(self, node: Node, changeset: Changeset) -> int:
        if node.id <= 0:
            raise SyncError("Cannot update a node without an id")
        if node.version <= 0:
            raise SyncError(f"Node {node.id} has an id but no version; the OSM API requires one")
        payload = node.model_copy(update={"changeset": changeset.id})
        raw_version = self.client.put(f"/node/{node.id}", encode_node(payload, include_identity=True))
        return parse_int_response(raw_version, what="node version")
