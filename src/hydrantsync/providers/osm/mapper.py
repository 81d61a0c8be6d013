"""Mapping between OSM API XML documents and contracts."""

from __future__ import annotations

from typing import Any
from xml.parsers.expat import ExpatError

import xmltodict
from pydantic import ValidationError

from hydrantsync.contracts.exceptions import ProviderError
from hydrantsync.contracts.osm import Changeset, Node, Tag, User

# Elements that may occur once or many times inside <osm>.
_LIST_ELEMENTS = ("node", "way", "relation", "changeset", "user", "tag")


def parse_document(text: str) -> dict[str, Any]:
    """Parse an ``<osm>`` document and return the content of its root."""
    try:
        document = xmltodict.parse(text, force_list=_LIST_ELEMENTS)
    except ExpatError as exc:
        raise ProviderError(f"invalid XML from OSM API: {exc}") from exc
    if not isinstance(document, dict) or "osm" not in document:
        raise ProviderError("OSM API response has no <osm> root element")
    root = document["osm"]
    return root if isinstance(root, dict) else {}


def _parse_tags(element: dict[str, Any]) -> list[Tag]:
    return [Tag(key=tag["@k"], value=tag.get("@v") or "") for tag in element.get("tag") or []]


def parse_user(root: dict[str, Any]) -> User:
    users = root.get("user") or []
    if len(users) != 1:
        raise ProviderError(f"expected exactly one <user>, got {len(users)}")
    element = users[0]
    description = element.get("description")
    try:
        return User(
            id=int(element["@id"]),
            display_name=element.get("@display_name", ""),
            account_created=element.get("@account_created"),
            description=description if isinstance(description, str) else "",
        )
    except (KeyError, ValueError, ValidationError) as exc:
        raise ProviderError(f"malformed <user> element: {exc}") from exc


def parse_changesets(root: dict[str, Any]) -> list[Changeset]:
    changesets: list[Changeset] = []
    for element in root.get("changeset") or []:
        try:
            changesets.append(
                Changeset(
                    id=int(element["@id"]),
                    user=element.get("@user", ""),
                    uid=int(element.get("@uid", 0)),
                    created_at=element.get("@created_at"),
                    closed_at=element.get("@closed_at"),
                    open=element.get("@open") == "true",
                    comments_count=int(element.get("@comments_count", 0)),
                    tags=_parse_tags(element),
                )
            )
        except (KeyError, ValueError, ValidationError) as exc:
            raise ProviderError(f"malformed <changeset> element: {exc}") from exc
    return changesets


def parse_nodes(root: dict[str, Any]) -> list[Node]:
    nodes: list[Node] = []
    for element in root.get("node") or []:
        if "@lat" not in element or "@lon" not in element:
            continue
        try:
            nodes.append(
                Node(
                    id=int(element["@id"]),
                    version=int(element.get("@version", 0)),
                    changeset=int(element.get("@changeset", 0)),
                    user=element.get("@user", ""),
                    uid=int(element.get("@uid", 0)),
                    latitude=float(element["@lat"]),
                    longitude=float(element["@lon"]),
                    tags=_parse_tags(element),
                )
            )
        except (KeyError, ValueError, ValidationError) as exc:
            raise ProviderError(f"malformed <node> element: {exc}") from exc
    return nodes


def _encode_tags(tags: list[Tag]) -> list[dict[str, str]]:
    return [{"@k": tag.key, "@v": tag.value} for tag in tags]


def encode_changeset(changeset: Changeset) -> str:
    element: dict[str, Any] = {}
    if changeset.tags:
        element["tag"] = _encode_tags(changeset.tags)
    return xmltodict.unparse({"osm": {"changeset": element}}, pretty=True)


def encode_node(node: Node, *, include_identity: bool) -> str:
    element: dict[str, Any] = {}
    if include_identity:
        element["@id"] = str(node.id)
        element["@version"] = str(node.version)
    element["@changeset"] = str(node.changeset)
    element["@lat"] = f"{node.latitude:.7f}"
    element["@lon"] = f"{node.longitude:.7f}"
    if node.tags:
        element["tag"] = _encode_tags(node.tags)
    return xmltodict.unparse({"osm": {"node": element}}, pretty=True)


def parse_int_response(text: str, *, what: str) -> int:
    """Parse the plain-text id/version returned by create and update calls."""
    try:
        return int(text.strip())
    except ValueError:
        raise ProviderError(f"unexpected {what} response from OSM API: {text[:200]!r}") from None
