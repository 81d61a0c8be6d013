"""Static credentials resolver."""

from __future__ import annotations

from hydrantsync.auth.base import Credentials, CredentialsResolver
from hydrantsync.contracts.exceptions import AuthenticationError


class StaticCredentialsResolver(CredentialsResolver):
    def __init__(self, *, username: str, password: str) -> None:
        self._username = username.strip()
        self._password = password

    def resolve(self) -> Credentials:
        if not self._username or not self._password:
            raise AuthenticationError("static credentials are empty")
        return Credentials(username=self._username, password=self._password)
