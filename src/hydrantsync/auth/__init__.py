"""Credential resolution for the OSM API."""

from hydrantsync.auth.base import Credentials, CredentialsResolver
from hydrantsync.auth.factory import create_credentials_resolver

__all__ = ["Credentials", "CredentialsResolver", "create_credentials_resolver"]
