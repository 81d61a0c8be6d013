"""Shared test fixtures for hydrantsync tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from hydrantsync.contracts.config import SyncConfig
from hydrantsync.contracts.gpx import Waypoint
from hydrantsync.contracts.hydrant import Hydrant, HydrantPosition, HydrantType

SAMPLE_GPX = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <wpt lat="53.58963145" lon="9.9761932">
    <name>001</name>
    <cmt>SU100</cmt>
  </wpt>
  <wpt lat="53.5901" lon="9.9770">
    <name>002</name>
    <cmt>GO? next to the bakery</cmt>
  </wpt>
  <wpt lat="53.5905" lon="9.9775">
    <name>003</name>
    <cmt>Parked car</cmt>
  </wpt>
</gpx>
"""


@pytest.fixture
def sample_waypoint() -> Waypoint:
    """A waypoint carrying a sidewalk underground hydrant code."""
    return Waypoint(latitude=53.5896315, longitude=9.9761932, name="001", comment="SU100")


@pytest.fixture
def sample_hydrant() -> Hydrant:
    """A locally recorded hydrant."""
    return Hydrant(
        name="001",
        latitude=53.5896315,
        longitude=9.9761932,
        diameter=100,
        position=HydrantPosition.SIDEWALK,
        pressure=4,
        type=HydrantType.UNDERGROUND,
    )


@pytest.fixture
def gpx_file(tmp_path: Path) -> Path:
    path = tmp_path / "hydrants.gpx"
    path.write_text(SAMPLE_GPX, encoding="utf-8")
    return path


@pytest.fixture
def sample_config(gpx_file: Path) -> SyncConfig:
    """A minimal valid SyncConfig with static credentials."""
    return SyncConfig(
        gpx_file=gpx_file,
        auth="static",
        osm_user="mapper",
        osm_password="secret",
    )
