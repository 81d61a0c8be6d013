"""Provider factory."""

from __future__ import annotations

import httpx

from hydrantsync.auth import create_credentials_resolver
from hydrantsync.contracts.config import SyncConfig
from hydrantsync.contracts.provider import Provider
from hydrantsync.providers.dry_run import DryRunProvider
from hydrantsync.providers.osm import OsmProvider


def create_provider(
    config: SyncConfig,
    *,
    user_agent: str,
    dry_run: bool = False,
    transport: httpx.BaseTransport | None = None,
) -> Provider:
    credentials = create_credentials_resolver(config).resolve()
    provider: Provider = OsmProvider(
        api_url=config.api_url,
        credentials=credentials,
        user_agent=user_agent,
        timeout=config.timeout,
        max_retries=config.max_retries,
        transport=transport,
    )
    if dry_run:
        return DryRunProvider(provider)
    return provider
