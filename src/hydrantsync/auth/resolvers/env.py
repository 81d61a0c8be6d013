"""Environment credentials resolver."""

from __future__ import annotations

import os

from hydrantsync.auth.base import Credentials, CredentialsResolver
from hydrantsync.contracts.exceptions import AuthenticationError

ENV_USER = "OSM_USER"
ENV_PASSWORD = "OSM_PASSWORD"


class EnvCredentialsResolver(CredentialsResolver):
    def resolve(self) -> Credentials:
        username = (os.getenv(ENV_USER) or "").strip()
        password = os.getenv(ENV_PASSWORD) or ""
        if not username or not password:
            raise AuthenticationError(f"{ENV_USER} and {ENV_PASSWORD} must be set and non-empty")
        return Credentials(username=username, password=password)
