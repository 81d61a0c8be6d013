"""Hydrant contracts."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum

from pydantic import BaseModel

COORDINATE_PRECISION = 7


class HydrantPosition(StrEnum):
    SIDEWALK = "sidewalk"
    PARKING_LOT = "parking_lot"
    LANE = "lane"
    GREEN = "green"


class HydrantType(StrEnum):
    UNDERGROUND = "underground"
    PILLAR = "pillar"
    WALL = "wall"
    POND = "pond"


class Hydrant(BaseModel):
    """A fire hydrant, either recorded locally or read from the map."""

    id: int = 0
    version: int = 0
    name: str = ""
    latitude: float
    longitude: float
    diameter: int = 0
    position: HydrantPosition | None = None
    pressure: int = 0
    type: HydrantType | None = None

    model_config = {"frozen": True}

    def same_attributes(self, other: Hydrant) -> bool:
        return (
            self.diameter == other.diameter
            and self.position == other.position
            and self.pressure == other.pressure
            and self.type == other.type
        )


def round_coordinate(value: float, digits: int = COORDINATE_PRECISION) -> float:
    """Round half-up on the shortest decimal form of *value*.

    ``round()`` works on the binary value and would turn 53.58963145 into
    53.5896314.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
