"""Waypoint loading from GPX files."""

from __future__ import annotations

import logging
from pathlib import Path

import gpxpy
import gpxpy.gpx

from hydrantsync.contracts.exceptions import WaypointLoadError
from hydrantsync.contracts.gpx import Waypoint

_LOG = logging.getLogger(__name__)


class WaypointLoader:
    """Load GPX waypoints into Waypoint contracts."""

    def load(self, path: Path) -> list[Waypoint]:
        document = self._read_gpx(path)
        waypoints = [self._to_waypoint(point) for point in document.waypoints]
        _LOG.debug("Loaded %d waypoints from %s", len(waypoints), path)
        return waypoints

    def _read_gpx(self, path: Path) -> gpxpy.gpx.GPX:
        if not path.exists():
            raise WaypointLoadError(f"GPX file not found: {path}")
        if not path.is_file():
            raise WaypointLoadError(f"GPX path is not a file: {path}")
        try:
            with path.open(encoding="utf-8") as handle:
                return gpxpy.parse(handle)
        except UnicodeDecodeError as exc:
            raise WaypointLoadError(f"GPX file is not valid UTF-8: {path}") from exc
        except OSError as exc:
            raise WaypointLoadError(f"failed reading GPX file: {path}") from exc
        except gpxpy.gpx.GPXException as exc:
            raise WaypointLoadError(f"invalid GPX file: {path}: {exc}") from exc

    @staticmethod
    def _to_waypoint(point: gpxpy.gpx.GPXWaypoint) -> Waypoint:
        return Waypoint(
            latitude=point.latitude,
            longitude=point.longitude,
            name=point.name or "",
            comment=point.comment or "",
            description=point.description or "",
            symbol=point.symbol or "",
            type=point.type or "",
            elevation=point.elevation,
            time=point.time,
        )


def load_waypoints(path: str | Path) -> list[Waypoint]:
    """Load all waypoints of a GPX file."""
    return WaypointLoader().load(Path(path).expanduser())
