"""GPX waypoint contracts."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class Waypoint(BaseModel):
    latitude: float
    longitude: float
    name: str = ""
    comment: str = ""
    description: str = ""
    symbol: str = ""
    type: str = ""
    elevation: float | None = None
    time: datetime | None = None
