"""OpenStreetMap API provider."""

from hydrantsync.providers.osm.client import OsmClient
from hydrantsync.providers.osm.provider import OsmProvider

__all__ = ["OsmClient", "OsmProvider"]
