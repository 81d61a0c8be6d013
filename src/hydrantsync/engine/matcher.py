"""Proximity matching between recorded and mapped hydrants."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from haversine import Unit, haversine

from hydrantsync.contracts.hydrant import Hydrant

MatchPolicy = Literal["last", "nearest"]


def distance_meters(a: Hydrant, b: Hydrant) -> float:
    return haversine((a.latitude, a.longitude), (b.latitude, b.longitude), unit=Unit.METERS)


def find_match(
    local: Hydrant,
    remotes: Sequence[Hydrant],
    max_distance: float,
    *,
    policy: MatchPolicy = "last",
) -> Hydrant | None:
    """Return the mapped hydrant that *local* should be reconciled against.

    With ``policy="last"`` the last candidate within *max_distance* in the
    order of *remotes* wins, not the closest one. ``policy="nearest"`` picks
    the closest candidate instead, keeping the first on ties.
    """
    found: Hydrant | None = None
    found_distance = float("inf")
    for remote in remotes:
        distance = distance_meters(local, remote)
        if distance > max_distance:
            continue
        if policy == "nearest" and distance >= found_distance:
            continue
        found = remote
        found_distance = distance
    return found
