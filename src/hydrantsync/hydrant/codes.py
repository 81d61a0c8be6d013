"""Single-letter hydrant codes used in waypoint comments."""

from __future__ import annotations

import re

from hydrantsync.contracts.hydrant import HydrantPosition, HydrantType

# Position letter, type letter, then "?" or a 2-3 digit diameter, e.g. "SU100".
HYDRANT_CODE_PATTERN = re.compile(r"([SPLG])([UOWP])(\?|[0-9]{2,3})")

POSITION_CODES: dict[str, HydrantPosition] = {
    "S": HydrantPosition.SIDEWALK,
    "P": HydrantPosition.PARKING_LOT,
    "L": HydrantPosition.LANE,
    "G": HydrantPosition.GREEN,
}

TYPE_CODES: dict[str, HydrantType] = {
    "U": HydrantType.UNDERGROUND,
    "O": HydrantType.PILLAR,
    "W": HydrantType.WALL,
    "P": HydrantType.POND,
}

UNKNOWN_DIAMETER = "?"


def position_from_code(code: str) -> HydrantPosition:
    try:
        return POSITION_CODES[code]
    except KeyError:
        raise ValueError(f"unknown hydrant position code: {code!r}") from None


def type_from_code(code: str) -> HydrantType:
    try:
        return TYPE_CODES[code]
    except KeyError:
        raise ValueError(f"unknown hydrant type code: {code!r}") from None
