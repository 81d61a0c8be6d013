"""Hydrant decoding and encoding."""

from hydrantsync.hydrant.codes import HYDRANT_CODE_PATTERN, position_from_code, type_from_code
from hydrantsync.hydrant.node import from_node, to_node
from hydrantsync.hydrant.waypoint import parse_waypoint

__all__ = ["HYDRANT_CODE_PATTERN", "from_node", "parse_waypoint", "position_from_code", "to_node", "type_from_code"]
