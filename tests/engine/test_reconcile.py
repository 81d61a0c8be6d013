from __future__ import annotations

from hydrantsync.contracts.hydrant import Hydrant, HydrantPosition, HydrantType
from hydrantsync.contracts.sync import CreateDecision, NoOpDecision, SyncAction, UpdateDecision
from hydrantsync.engine.reconcile import decide, describe_changes


def _remote(**update: object) -> Hydrant:
    base = Hydrant(
        id=321,
        version=4,
        latitude=53.50001,
        longitude=10.0,
        diameter=100,
        position=HydrantPosition.SIDEWALK,
        pressure=4,
        type=HydrantType.UNDERGROUND,
    )
    return base.model_copy(update=update)


def test_no_match_creates_without_identity(sample_hydrant: Hydrant) -> None:
    decision = decide(sample_hydrant.model_copy(update={"id": 99, "version": 9}), None)

    assert isinstance(decision, CreateDecision)
    assert decision.action == SyncAction.CREATE
    assert decision.hydrant.id == 0
    assert decision.hydrant.version == 0


def test_equal_attributes_are_a_noop(sample_hydrant: Hydrant) -> None:
    decision = decide(sample_hydrant, _remote())

    assert isinstance(decision, NoOpDecision)
    assert decision.action == SyncAction.NOOP


def test_unknown_local_diameter_adopts_remote_and_noops(sample_hydrant: Hydrant) -> None:
    decision = decide(sample_hydrant.model_copy(update={"diameter": 0}), _remote())

    assert isinstance(decision, NoOpDecision)
    assert decision.hydrant.diameter == 100


def test_unknown_diameters_on_both_sides_stay_unknown(sample_hydrant: Hydrant) -> None:
    decision = decide(sample_hydrant.model_copy(update={"diameter": 0}), _remote(diameter=0))

    assert isinstance(decision, NoOpDecision)
    assert decision.hydrant.diameter == 0


def test_difference_updates_with_remote_identity(sample_hydrant: Hydrant) -> None:
    remote = _remote(type=HydrantType.PILLAR)

    decision = decide(sample_hydrant, remote)

    assert isinstance(decision, UpdateDecision)
    assert decision.action == SyncAction.UPDATE
    assert (decision.hydrant.id, decision.hydrant.version) == (321, 4)
    assert decision.hydrant.type == HydrantType.UNDERGROUND
    assert decision.hydrant.latitude == sample_hydrant.latitude
    assert decision.remote is remote


def test_update_keeps_adopted_diameter(sample_hydrant: Hydrant) -> None:
    decision = decide(sample_hydrant.model_copy(update={"diameter": 0}), _remote(pressure=2))

    assert isinstance(decision, UpdateDecision)
    assert decision.hydrant.diameter == 100
    assert decision.hydrant.pressure == 4


def test_remote_with_unset_position_is_updated(sample_hydrant: Hydrant) -> None:
    assert isinstance(decide(sample_hydrant, _remote(position=None)), UpdateDecision)


def test_decide_does_not_mutate_inputs(sample_hydrant: Hydrant) -> None:
    local = sample_hydrant.model_copy(update={"diameter": 0})
    remote = _remote(pressure=2)

    decide(local, remote)

    assert local.diameter == 0
    assert remote.pressure == 2


def test_describe_changes_lists_differing_fields(sample_hydrant: Hydrant) -> None:
    decision = decide(sample_hydrant, _remote(pressure=2, position=None))

    assert isinstance(decision, UpdateDecision)
    assert describe_changes(decision) == "position: unset -> sidewalk, pressure: 2 -> 4"
