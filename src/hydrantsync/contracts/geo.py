"""Geographic helper contracts."""

from __future__ import annotations

from pydantic import BaseModel

# Roughly 100 m of latitude.
DEFAULT_BORDER_DEGREES = 0.0009


class BoundingBox(BaseModel):
    """Min/max extent of a set of points, grown one point at a time."""

    min_lat: float = 9999.0
    min_lon: float = 9999.0
    max_lat: float = -9999.0
    max_lon: float = -9999.0

    @property
    def is_empty(self) -> bool:
        return self.min_lat > self.max_lat or self.min_lon > self.max_lon

    def extend(self, latitude: float, longitude: float) -> None:
        self.min_lat = min(self.min_lat, latitude)
        self.max_lat = max(self.max_lat, latitude)
        self.min_lon = min(self.min_lon, longitude)
        self.max_lon = max(self.max_lon, longitude)

    def padded(self, border: float = DEFAULT_BORDER_DEGREES) -> BoundingBox:
        if self.is_empty:
            raise ValueError("cannot pad an empty bounding box")
        return BoundingBox(
            min_lat=self.min_lat - border,
            min_lon=self.min_lon - border,
            max_lat=self.max_lat + border,
            max_lon=self.max_lon + border,
        )

    def as_bbox_param(self) -> str:
        """Render as ``left,bottom,right,top`` for the ``/map`` endpoint."""
        return f"{self.min_lon:.7f},{self.min_lat:.7f},{self.max_lon:.7f},{self.max_lat:.7f}"
