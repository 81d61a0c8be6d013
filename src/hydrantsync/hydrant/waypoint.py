"""Decode hydrants from GPX waypoint comments."""

from __future__ import annotations

from hydrantsync.contracts.exceptions import NotAHydrantError
from hydrantsync.contracts.gpx import Waypoint
from hydrantsync.contracts.hydrant import Hydrant, round_coordinate
from hydrantsync.hydrant.codes import HYDRANT_CODE_PATTERN, UNKNOWN_DIAMETER, position_from_code, type_from_code


def parse_waypoint(waypoint: Waypoint, *, pressure: int) -> Hydrant:
    """Build a hydrant from the code found in the waypoint comment.

    The code may appear anywhere in the comment, for example
    ``"GO80 next to the bakery"``. Comments without a code raise
    :class:`NotAHydrantError`.
    """
    match = HYDRANT_CODE_PATTERN.search(waypoint.comment)
    if match is None:
        raise NotAHydrantError(f"waypoint {waypoint.name!r} has no hydrant code in its comment")

    position_code, type_code, diameter_code = match.groups()
    diameter = 0 if diameter_code == UNKNOWN_DIAMETER else int(diameter_code)

    return Hydrant(
        name=waypoint.name,
        latitude=round_coordinate(waypoint.latitude),
        longitude=round_coordinate(waypoint.longitude),
        diameter=diameter,
        position=position_from_code(position_code),
        pressure=pressure,
        type=type_from_code(type_code),
    )
