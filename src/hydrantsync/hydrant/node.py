"""Translate between hydrants and OSM nodes."""

from __future__ import annotations

import logging
from typing import TypeVar

from hydrantsync.contracts.exceptions import NotAHydrantError, TagFormatError
from hydrantsync.contracts.hydrant import Hydrant, HydrantPosition, HydrantType
from hydrantsync.contracts.osm import Node, Tag

_LOG = logging.getLogger(__name__)

E = TypeVar("E", HydrantPosition, HydrantType)

TAG_EMERGENCY = "emergency"
TAG_DIAMETER = "fire_hydrant:diameter"
TAG_POSITION = "fire_hydrant:position"
TAG_PRESSURE = "fire_hydrant:pressure"
TAG_TYPE = "fire_hydrant:type"
FIRE_HYDRANT = "fire_hydrant"


def _parse_int(tag: Tag) -> int:
    try:
        return int(tag.value)
    except ValueError:
        raise TagFormatError(
            f"tag {tag.key}={tag.value!r} is not an integer",
            key=tag.key,
            value=tag.value,
        ) from None


def from_node(node: Node) -> Hydrant:
    """Decode a map node into a hydrant.

    Raises:
        NotAHydrantError: The node is not tagged ``emergency=fire_hydrant``.
        TagFormatError: Diameter or pressure tag is not an integer.
    """
    is_hydrant = False
    diameter = 0
    pressure = 0
    raw_position: str | None = None
    raw_type: str | None = None

    for tag in node.tags:
        if tag.key == TAG_EMERGENCY:
            is_hydrant = tag.value == FIRE_HYDRANT
        elif tag.key == TAG_DIAMETER:
            diameter = _parse_int(tag)
        elif tag.key == TAG_POSITION:
            raw_position = tag.value
        elif tag.key == TAG_PRESSURE:
            pressure = _parse_int(tag)
        elif tag.key == TAG_TYPE:
            raw_type = tag.value

    if not is_hydrant:
        raise NotAHydrantError(f"node {node.id} is not tagged {TAG_EMERGENCY}={FIRE_HYDRANT}")

    return Hydrant(
        id=node.id,
        version=node.version,
        latitude=node.latitude,
        longitude=node.longitude,
        diameter=diameter,
        position=_enum_or_none(HydrantPosition, raw_position, node.id),
        pressure=pressure,
        type=_enum_or_none(HydrantType, raw_type, node.id),
    )


def _enum_or_none(enum: type[E], raw: str | None, node_id: int) -> E | None:
    if raw is None:
        return None
    try:
        return enum(raw)
    except ValueError:
        _LOG.debug("Node %d has unrecognised %s value %r", node_id, enum.__name__, raw)
        return None


def to_node(hydrant: Hydrant, changeset_id: int = 0) -> Node:
    """Encode the full hydrant tag set onto a node."""
    tags = [Tag(key=TAG_EMERGENCY, value=FIRE_HYDRANT)]
    if hydrant.diameter > 0:
        tags.append(Tag(key=TAG_DIAMETER, value=str(hydrant.diameter)))
    if hydrant.position is not None:
        tags.append(Tag(key=TAG_POSITION, value=hydrant.position.value))
    tags.append(Tag(key=TAG_PRESSURE, value=str(hydrant.pressure)))
    if hydrant.type is not None:
        tags.append(Tag(key=TAG_TYPE, value=hydrant.type.value))

    return Node(
        id=hydrant.id,
        version=hydrant.version,
        changeset=changeset_id,
        latitude=hydrant.latitude,
        longitude=hydrant.longitude,
        tags=tags,
    )
