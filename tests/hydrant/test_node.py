from __future__ import annotations

import pytest

from hydrantsync.contracts.exceptions import NotAHydrantError, TagFormatError
from hydrantsync.contracts.hydrant import Hydrant, HydrantPosition, HydrantType
from hydrantsync.contracts.osm import Node, Tag
from hydrantsync.hydrant.node import from_node, to_node


def _node(tags: dict[str, str] | list[tuple[str, str]], *, node_id: int = 11, version: int = 3) -> Node:
    pairs = tags.items() if isinstance(tags, dict) else tags
    return Node(
        id=node_id,
        version=version,
        latitude=53.5,
        longitude=9.9,
        tags=[Tag(key=key, value=value) for key, value in pairs],
    )


class TestFromNode:
    def test_decodes_full_tag_set(self) -> None:
        hydrant = from_node(
            _node(
                {
                    "emergency": "fire_hydrant",
                    "fire_hydrant:diameter": "100",
                    "fire_hydrant:position": "lane",
                    "fire_hydrant:pressure": "5",
                    "fire_hydrant:type": "wall",
                }
            )
        )

        assert hydrant == Hydrant(
            id=11,
            version=3,
            latitude=53.5,
            longitude=9.9,
            diameter=100,
            position=HydrantPosition.LANE,
            pressure=5,
            type=HydrantType.WALL,
        )

    def test_missing_attributes_default_to_zero_and_unset(self) -> None:
        hydrant = from_node(_node({"emergency": "fire_hydrant"}))

        assert hydrant.diameter == 0
        assert hydrant.pressure == 0
        assert hydrant.position is None
        assert hydrant.type is None

    def test_node_without_emergency_tag_is_not_a_hydrant(self) -> None:
        with pytest.raises(NotAHydrantError):
            from_node(_node({"amenity": "bench"}))

    def test_other_emergency_values_are_not_hydrants(self) -> None:
        with pytest.raises(NotAHydrantError):
            from_node(_node({"emergency": "defibrillator"}))

    def test_last_emergency_tag_wins(self) -> None:
        with pytest.raises(NotAHydrantError):
            from_node(_node([("emergency", "fire_hydrant"), ("emergency", "phone")]))

        assert from_node(_node([("emergency", "phone"), ("emergency", "fire_hydrant")])).id == 11

    @pytest.mark.parametrize("key", ["fire_hydrant:diameter", "fire_hydrant:pressure"])
    def test_malformed_numeric_tag_is_a_hard_error(self, key: str) -> None:
        with pytest.raises(TagFormatError) as exc_info:
            from_node(_node({"emergency": "fire_hydrant", key: "DN100"}))

        assert exc_info.value.key == key
        assert exc_info.value.value == "DN100"

    def test_numeric_tag_checked_before_classification(self) -> None:
        with pytest.raises(TagFormatError):
            from_node(_node({"fire_hydrant:diameter": "big"}))

    def test_unknown_enum_values_decode_to_unset(self) -> None:
        hydrant = from_node(
            _node(
                {
                    "emergency": "fire_hydrant",
                    "fire_hydrant:position": "street",
                    "fire_hydrant:type": "pipe",
                }
            )
        )

        assert hydrant.position is None
        assert hydrant.type is None


class TestToNode:
    def test_writes_full_tag_set(self, sample_hydrant: Hydrant) -> None:
        node = to_node(sample_hydrant, changeset_id=77)

        assert node.changeset == 77
        assert node.latitude == sample_hydrant.latitude
        assert node.longitude == sample_hydrant.longitude
        assert [(tag.key, tag.value) for tag in node.tags] == [
            ("emergency", "fire_hydrant"),
            ("fire_hydrant:diameter", "100"),
            ("fire_hydrant:position", "sidewalk"),
            ("fire_hydrant:pressure", "4"),
            ("fire_hydrant:type", "underground"),
        ]

    def test_unknown_diameter_is_not_written(self, sample_hydrant: Hydrant) -> None:
        node = to_node(sample_hydrant.model_copy(update={"diameter": 0}))

        assert "fire_hydrant:diameter" not in {tag.key for tag in node.tags}

    def test_carries_identity(self, sample_hydrant: Hydrant) -> None:
        node = to_node(sample_hydrant.model_copy(update={"id": 9, "version": 2}))

        assert (node.id, node.version) == (9, 2)

    def test_decodes_back_to_same_attributes(self, sample_hydrant: Hydrant) -> None:
        assert from_node(to_node(sample_hydrant)).same_attributes(sample_hydrant)
