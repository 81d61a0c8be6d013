from __future__ import annotations

import httpx
import pytest

from hydrantsync import ConfigError, HydrantSync, SyncAction, SyncConfig, __version__
from hydrantsync.contracts.exceptions import ProviderError
from hydrantsync.contracts.gpx import Waypoint
from hydrantsync.contracts.osm import Changeset
from hydrantsync.sdk import software_identity
from tests.fakes.provider import FakeProvider

MAP_XML = """<osm version="0.6">
  <node id="700" version="3" lat="53.5896400" lon="9.9761900">
    <tag k="emergency" v="fire_hydrant"/>
    <tag k="fire_hydrant:diameter" v="100"/>
    <tag k="fire_hydrant:position" v="sidewalk"/>
    <tag k="fire_hydrant:pressure" v="4"/>
    <tag k="fire_hydrant:type" v="underground"/>
  </node>
</osm>
"""


def test_software_identity_carries_version() -> None:
    assert software_identity() == f"hydrantsync {__version__}"


def test_sync_loads_configured_gpx_file(sample_config: SyncConfig) -> None:
    provider = FakeProvider()

    result = HydrantSync(provider=provider, config=sample_config).sync()

    assert [entry.name for entry in result.entries] == ["001", "002"]
    assert result.count(SyncAction.CREATE) == 2
    assert result.waypoints_skipped == 1
    assert provider.entered == 1
    assert provider.exited == 1
    assert provider.updated_changesets[0].tag_value("created_by") == software_identity()
    assert provider.updated_changesets[0].tag_value("comment") == sample_config.comment


def test_sync_accepts_explicit_waypoints() -> None:
    provider = FakeProvider()
    sdk = HydrantSync(provider=provider, config=SyncConfig())

    result = sdk.sync([Waypoint(latitude=53.5, longitude=10.0, name="x", comment="PW150")])

    assert [entry.action for entry in result.entries] == [SyncAction.CREATE]
    assert provider.created_nodes[0].latitude == 53.5


def test_sync_without_gpx_file_is_a_config_error() -> None:
    with pytest.raises(ConfigError, match="gpx_file"):
        HydrantSync(provider=FakeProvider(), config=SyncConfig()).sync()


def test_provider_is_closed_on_failure(sample_config: SyncConfig) -> None:
    provider = FakeProvider()
    provider.fail_on = "create_node"

    with pytest.raises(ProviderError):
        HydrantSync(provider=provider, config=sample_config).sync()

    assert provider.exited == 1


def test_list_changesets() -> None:
    provider = FakeProvider(changesets=[Changeset(id=1, open=True), Changeset(id=2, open=False)])
    sdk = HydrantSync(provider=provider, config=SyncConfig())

    assert [c.id for c in sdk.list_changesets()] == [1]
    assert [c.id for c in sdk.list_changesets(open_only=False)] == [1, 2]


def test_dry_run_operations_empty_for_real_provider() -> None:
    assert HydrantSync(provider=FakeProvider(), config=SyncConfig()).dry_run_operations == ()


def test_dry_run_end_to_end_never_writes(sample_config: SyncConfig) -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.path.endswith("/user/details"):
            return httpx.Response(200, text='<osm><user id="42" display_name="mapper"/></osm>')
        if request.url.path.endswith("/map"):
            return httpx.Response(200, text=MAP_XML)
        return httpx.Response(500, text="unexpected")

    sdk = HydrantSync.from_config(sample_config, dry_run=True, transport=httpx.MockTransport(handler))
    result = sdk.sync()

    assert {request.method for request in requests} == {"GET"}
    assert [entry.action for entry in result.entries] == [SyncAction.NOOP, SyncAction.CREATE]
    assert result.entries[0].node_id == 700
    assert result.entries[1].node_id == -1
    assert result.changeset_id == 0
    assert result.dry_run is True
    assert [op.name for op in sdk.dry_run_operations] == ["create_changeset", "update_changeset", "create_node"]

