"""Credentials resolver factory."""

from __future__ import annotations

from hydrantsync.auth.base import CredentialsResolver
from hydrantsync.auth.resolvers import EnvCredentialsResolver, StaticCredentialsResolver
from hydrantsync.contracts.config import SyncConfig
from hydrantsync.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[CredentialsResolver]] = {
    "env": EnvCredentialsResolver,
    "static": StaticCredentialsResolver,
}


def create_credentials_resolver(config: SyncConfig) -> CredentialsResolver:
    if config.auth not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {config.auth}")
    if config.auth == "env":
        return EnvCredentialsResolver()
    return StaticCredentialsResolver(username=config.osm_user or "", password=config.osm_password or "")
