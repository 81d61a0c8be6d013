from __future__ import annotations

import pytest
from pydantic import ValidationError

from hydrantsync.contracts.hydrant import Hydrant, HydrantPosition, HydrantType, round_coordinate


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (53.58963145, 53.5896315),
        (9.97619324, 9.9761932),
        (-0.00000005, -0.0000001),
        (12.5, 12.5),
    ],
)
def test_round_coordinate_is_half_up_on_decimal_form(value: float, expected: float) -> None:
    assert round_coordinate(value) == expected


def test_round_coordinate_accepts_digits() -> None:
    assert round_coordinate(1.25, digits=1) == 1.3


def test_hydrant_is_frozen(sample_hydrant: Hydrant) -> None:
    with pytest.raises(ValidationError):
        sample_hydrant.diameter = 80  # type: ignore[misc]


def test_same_attributes_ignores_identity_name_and_location(sample_hydrant: Hydrant) -> None:
    other = sample_hydrant.model_copy(update={"id": 7, "version": 3, "name": "x", "latitude": 1.0, "longitude": 2.0})

    assert sample_hydrant.same_attributes(other)


@pytest.mark.parametrize(
    "update",
    [
        {"diameter": 80},
        {"position": HydrantPosition.LANE},
        {"pressure": 6},
        {"type": HydrantType.PILLAR},
        {"type": None},
    ],
)
def test_same_attributes_detects_differences(sample_hydrant: Hydrant, update: dict[str, object]) -> None:
    assert not sample_hydrant.same_attributes(sample_hydrant.model_copy(update=update))


def test_enum_values_are_osm_tag_values() -> None:
    assert [p.value for p in HydrantPosition] == ["sidewalk", "parking_lot", "lane", "green"]
    assert [t.value for t in HydrantType] == ["underground", "pillar", "wall", "pond"]
