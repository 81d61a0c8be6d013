"""GPX waypoint loading."""

from hydrantsync.gpx.loader import WaypointLoader, load_waypoints

__all__ = ["WaypointLoader", "load_waypoints"]
