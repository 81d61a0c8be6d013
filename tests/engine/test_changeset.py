from __future__ import annotations

import pytest

from hydrantsync.contracts.exceptions import ProviderError
from hydrantsync.engine.changeset import ChangesetCoordinator
from tests.fakes.provider import FakeProvider


def _coordinator(provider: FakeProvider) -> ChangesetCoordinator:
    return ChangesetCoordinator(provider, comment="Added hydrants", created_by="hydrantsync 1.0")


def test_nothing_is_opened_until_requested() -> None:
    provider = FakeProvider()
    coordinator = _coordinator(provider)

    assert coordinator.current is None
    assert not coordinator.is_open
    assert provider.created_changesets == []


def test_first_request_creates_and_tags_changeset() -> None:
    provider = FakeProvider()
    coordinator = _coordinator(provider)

    changeset = coordinator.changeset()

    assert coordinator.is_open
    assert coordinator.current == changeset
    assert len(provider.created_changesets) == 1
    assert provider.updated_changesets == [changeset]
    assert changeset.id == provider.created_changesets[0].id
    assert changeset.tag_value("comment") == "Added hydrants"
    assert changeset.tag_value("created_by") == "hydrantsync 1.0"


def test_later_requests_reuse_changeset() -> None:
    provider = FakeProvider()
    coordinator = _coordinator(provider)

    first = coordinator.changeset()
    second = coordinator.changeset()

    assert first is second
    assert len(provider.created_changesets) == 1
    assert len(provider.updated_changesets) == 1


def test_failed_create_leaves_coordinator_closed() -> None:
    provider = FakeProvider()
    provider.fail_on = "create_changeset"
    coordinator = _coordinator(provider)

    with pytest.raises(ProviderError):
        coordinator.changeset()

    assert coordinator.current is None
